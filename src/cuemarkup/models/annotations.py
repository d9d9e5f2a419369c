"""Positional style annotations over a run of cue text.

Each annotation kind is a small frozen dataclass carrying a literal
``type`` discriminator so that documents can be validated from JSON with
pydantic (see ``cuemarkup.loader``) without a parallel model hierarchy.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Literal, TypeVar

from pydantic import Field

K = TypeVar("K")


class FontStyle(Enum):
    """Typeface style of a ``Style`` annotation."""

    NORMAL = "normal"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold_italic"


class RubyPosition(Enum):
    """Where ruby text sits relative to its base text."""

    OVER = "over"
    UNDER = "under"
    UNKNOWN = "unknown"


class EmphasisMark(Enum):
    """Shape of a text-emphasis mark."""

    FILLED_CIRCLE = "filled_circle"
    FILLED_DOT = "filled_dot"
    FILLED_SESAME = "filled_sesame"
    OPEN_CIRCLE = "open_circle"
    OPEN_DOT = "open_dot"
    OPEN_SESAME = "open_sesame"
    AUTO = "auto"
    UNKNOWN = "unknown"


class EmphasisPosition(Enum):
    """Placement of text-emphasis marks."""

    BEFORE = "before"
    AFTER = "after"
    OUTSIDE = "outside"
    UNKNOWN = "unknown"


# ---------------------------------------------------------------------------
# Annotation kinds
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Strikethrough:
    type: Literal["strikethrough"] = "strikethrough"


@dataclass(frozen=True, slots=True)
class Underline:
    type: Literal["underline"] = "underline"


@dataclass(frozen=True, slots=True)
class HorizontalInVertical:
    """Horizontal text laid out inside a vertical line (tate-chu-yoko)."""

    type: Literal["horizontal_in_vertical"] = "horizontal_in_vertical"


@dataclass(frozen=True, slots=True)
class ForegroundColor:
    """Text colour.

    Attributes:
        color: Packed 32-bit ARGB value.
    """

    color: int
    type: Literal["foreground_color"] = "foreground_color"


@dataclass(frozen=True, slots=True)
class BackgroundColor:
    """Background colour behind the text.

    Attributes:
        color: Packed 32-bit ARGB value.
    """

    color: int
    type: Literal["background_color"] = "background_color"


@dataclass(frozen=True, slots=True)
class AbsoluteSize:
    """Font size in device pixels, or in density-independent pixels if ``dip``."""

    size: float
    dip: bool = False
    type: Literal["absolute_size"] = "absolute_size"


@dataclass(frozen=True, slots=True)
class RelativeSize:
    """Font size as a multiple of the surrounding size (1.0 = unchanged)."""

    size_change: float
    type: Literal["relative_size"] = "relative_size"


@dataclass(frozen=True, slots=True)
class Typeface:
    family: str | None = None
    type: Literal["typeface"] = "typeface"


@dataclass(frozen=True, slots=True)
class Style:
    style: FontStyle
    type: Literal["style"] = "style"


@dataclass(frozen=True, slots=True)
class Ruby:
    """Ruby (furigana) annotation rendered over or under its base text."""

    ruby_text: str
    position: RubyPosition = RubyPosition.UNKNOWN
    type: Literal["ruby"] = "ruby"


@dataclass(frozen=True, slots=True)
class TextEmphasis:
    mark: EmphasisMark = EmphasisMark.UNKNOWN
    position: EmphasisPosition = EmphasisPosition.UNKNOWN
    type: Literal["text_emphasis"] = "text_emphasis"


AnnotationKind = Annotated[
    Strikethrough
    | ForegroundColor
    | BackgroundColor
    | HorizontalInVertical
    | AbsoluteSize
    | RelativeSize
    | Typeface
    | Style
    | Ruby
    | Underline
    | TextEmphasis,
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Annotated text
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Annotation:
    """A style applied to the half-open character range ``[start, end)``.

    Attributes:
        kind: What the annotation does.
        start: First character index covered.
        end: Index one past the last character covered.
    """

    kind: AnnotationKind
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class AnnotatedText:
    """Cue text plus its (possibly overlapping) annotations."""

    text: str
    annotations: tuple[Annotation, ...] = ()

    def kinds_of(self, kind_type: type[K]) -> list[K]:
        """Return the kinds of every annotation that is a ``kind_type``."""
        return [a.kind for a in self.annotations if isinstance(a.kind, kind_type)]
