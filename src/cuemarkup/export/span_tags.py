"""Opening and closing markup for each annotation kind.

``opening_tag`` and ``closing_tag`` are always called as a pair.  Both
return ``None`` for kinds that produce no markup (a ``Typeface`` with no
family, ``FontStyle.NORMAL``, or any object that is not a known kind),
which drops the annotation and leaves its text unstyled.

Background colours are emitted as a ``bg_<colour>`` class rather than an
inline style; the matching rules come from ``cuemarkup.export.css`` so
that the colour reaches nested elements too.
"""

from __future__ import annotations

from cuemarkup.export.html_utils import (
    escape_html_text,
    format_two_decimals,
    normalize_color,
    to_css_rgba,
)
from cuemarkup.models import (
    AbsoluteSize,
    BackgroundColor,
    EmphasisMark,
    EmphasisPosition,
    FontStyle,
    ForegroundColor,
    HorizontalInVertical,
    RelativeSize,
    Ruby,
    RubyPosition,
    Strikethrough,
    Style,
    TextEmphasis,
    Typeface,
    Underline,
)

__all__ = ["background_class", "closing_tag", "opening_tag"]

_SPAN_CLOSE = "</span>"

_STYLE_OPENING: dict[FontStyle, str] = {
    FontStyle.BOLD: "<b>",
    FontStyle.ITALIC: "<i>",
    FontStyle.BOLD_ITALIC: "<b><i>",
}

# Bold is opened first, so it closes last.
_STYLE_CLOSING: dict[FontStyle, str] = {
    FontStyle.BOLD: "</b>",
    FontStyle.ITALIC: "</i>",
    FontStyle.BOLD_ITALIC: "</i></b>",
}

_RUBY_POSITION: dict[RubyPosition, str] = {
    RubyPosition.OVER: "over",
    RubyPosition.UNDER: "under",
    RubyPosition.UNKNOWN: "unset",
}

# AUTO should become "filled sesame" in vertical writing and "filled
# circle" otherwise, but the writing mode is not known at this level.
_EMPHASIS_STYLE: dict[EmphasisMark, str] = {
    EmphasisMark.FILLED_CIRCLE: "filled circle",
    EmphasisMark.FILLED_DOT: "filled dot",
    EmphasisMark.FILLED_SESAME: "filled sesame",
    EmphasisMark.OPEN_CIRCLE: "open circle",
    EmphasisMark.OPEN_DOT: "open dot",
    EmphasisMark.OPEN_SESAME: "open sesame",
}

# Unrecognised positions (including OUTSIDE, which browsers do not
# support) are treated as "before", as TTML2 requires.
_EMPHASIS_POSITION_AFTER = "under left"
_EMPHASIS_POSITION_BEFORE = "over right"


def background_class(color: int) -> str:
    """CSS class name carried by text with background *color*."""
    return f"bg_{normalize_color(color)}"


def _emphasis_style(mark: EmphasisMark) -> str:
    return _EMPHASIS_STYLE.get(mark, "unset")


def _emphasis_position(position: EmphasisPosition) -> str:
    if position is EmphasisPosition.AFTER:
        return _EMPHASIS_POSITION_AFTER
    return _EMPHASIS_POSITION_BEFORE


def opening_tag(kind: object, display_density: float) -> str | None:
    """Return the markup that opens *kind*, or ``None`` if it has none.

    Args:
        kind: An annotation kind from ``cuemarkup.models``.
        display_density: Device pixels per CSS pixel.  The web view treats
            one CSS px as one density-independent pixel, so non-``dip``
            absolute sizes are divided by this.
    """
    match kind:
        case Strikethrough():
            return "<span style='text-decoration:line-through;'>"
        case ForegroundColor(color=color):
            return f"<span style='color:{to_css_rgba(color)};'>"
        case BackgroundColor(color=color):
            return f"<span class='{background_class(color)}'>"
        case HorizontalInVertical():
            return "<span style='text-combine-upright:all;'>"
        case AbsoluteSize(size=size, dip=dip):
            size_css_px = size if dip else size / display_density
            return f"<span style='font-size:{format_two_decimals(size_css_px)}px;'>"
        case RelativeSize(size_change=size_change):
            percent = format_two_decimals(size_change * 100)
            return f"<span style='font-size:{percent}%;'>"
        case Typeface(family=family):
            if family is None:
                return None
            return f"<span style='font-family:\"{family}\";'>"
        case Style(style=style):
            return _STYLE_OPENING.get(style)
        case Ruby(position=position):
            ruby_position = _RUBY_POSITION.get(position)
            if ruby_position is None:
                return None
            return f"<ruby style='ruby-position:{ruby_position};'>"
        case Underline():
            return "<u>"
        case TextEmphasis(mark=mark, position=position):
            style = _emphasis_style(mark)
            pos = _emphasis_position(position)
            return (
                f"<span style='-webkit-text-emphasis-style: {style}; "
                f"text-emphasis-style: {style}; "
                f"-webkit-text-emphasis-position: {pos}; "
                f"text-emphasis-position: {pos};'>"
            )
        case _:
            return None


def closing_tag(kind: object) -> str | None:
    """Return the markup that closes *kind*, or ``None`` if it has none.

    For ``Ruby`` this is not a bare closer: the escaped ruby text is
    emitted in an ``<rt>`` element just before ``</ruby>``.
    """
    match kind:
        case (
            Strikethrough()
            | ForegroundColor()
            | BackgroundColor()
            | HorizontalInVertical()
            | AbsoluteSize()
            | RelativeSize()
            | TextEmphasis()
        ):
            return _SPAN_CLOSE
        case Typeface(family=family):
            return _SPAN_CLOSE if family is not None else None
        case Style(style=style):
            return _STYLE_CLOSING.get(style)
        case Ruby(ruby_text=ruby_text):
            return f"<rt>{escape_html_text(ruby_text)}</rt></ruby>"
        case Underline():
            return "</u>"
        case _:
            return None
