"""Span transitions: where styled spans open and close in the text.

Resolves every annotation to a ``SpanInfo`` (range plus opening/closing
markup) and groups them by the character offsets where they start and
end.  Each ``Transition`` holds its spans already sorted in emission
order, so the assembler only has to concatenate.

Tag order at a shared offset:

- Opening: end descending, so spans that close later open first and
  enclose shorter ones.  Ties break on opening tag, then closing tag,
  both ascending.
- Closing: start descending, the mirror of the opening order.  Ties
  break on opening tag, then closing tag, both descending.

The tie-breaks make the output byte-identical for equal input regardless
of annotation order.  Crossing ranges still produce crossing tags; the
target renderer tolerates them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cuemarkup.export.span_tags import closing_tag, opening_tag

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cuemarkup.models import Annotation

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SpanInfo:
    """One annotation resolved to markup.

    Attributes:
        start: Character index where the span opens.
        end: Character index where the span closes.
        opening_tag: Markup emitted at ``start``.
        closing_tag: Markup emitted at ``end``.
    """

    start: int
    end: int
    opening_tag: str
    closing_tag: str


def opening_order_key(span: SpanInfo) -> tuple[int, str, str]:
    """Sort key for spans opening at the same offset."""
    return (-span.end, span.opening_tag, span.closing_tag)


def closing_order_key(span: SpanInfo) -> tuple[int, str, str]:
    """Sort key for spans closing at the same offset.

    Use with ``reverse=True``: every component is descending.
    """
    return (span.start, span.opening_tag, span.closing_tag)


@dataclass(frozen=True, slots=True)
class Transition:
    """Spans that close and open at one character offset.

    Attributes:
        offset: Character index of the transition.
        added: Spans starting here, in opening order.
        removed: Spans ending here, in closing order.
    """

    offset: int
    added: tuple[SpanInfo, ...]
    removed: tuple[SpanInfo, ...]

    @property
    def closing_markup(self) -> str:
        return "".join(span.closing_tag for span in self.removed)

    @property
    def opening_markup(self) -> str:
        return "".join(span.opening_tag for span in self.added)


@dataclass(slots=True)
class _PendingTransition:
    added: list[SpanInfo] = field(default_factory=list)
    removed: list[SpanInfo] = field(default_factory=list)

    def freeze(self, offset: int) -> Transition:
        return Transition(
            offset=offset,
            added=tuple(sorted(self.added, key=opening_order_key)),
            removed=tuple(sorted(self.removed, key=closing_order_key, reverse=True)),
        )


def resolve_span(annotation: Annotation, display_density: float) -> SpanInfo | None:
    """Resolve *annotation* to a ``SpanInfo``, or ``None`` if it has no markup."""
    open_tag = opening_tag(annotation.kind, display_density)
    close_tag = closing_tag(annotation.kind)
    if open_tag is None:
        logger.debug("Annotation %r produces no markup; dropped", annotation.kind)
        return None
    assert close_tag is not None, (
        f"opening tag {open_tag!r} has no closing tag for {annotation.kind!r}"
    )
    return SpanInfo(
        start=annotation.start,
        end=annotation.end,
        opening_tag=open_tag,
        closing_tag=close_tag,
    )


def find_span_transitions(
    annotations: Iterable[Annotation],
    display_density: float,
) -> list[Transition]:
    """Group resolved spans by the offsets where they open and close.

    Returns transitions in strictly ascending offset order.  A span with
    ``start == end`` appears in both lists of the same transition.
    """
    pending: dict[int, _PendingTransition] = {}
    for annotation in annotations:
        span = resolve_span(annotation, display_density)
        if span is None:
            continue
        pending.setdefault(span.start, _PendingTransition()).added.append(span)
        pending.setdefault(span.end, _PendingTransition()).removed.append(span)

    transitions = [pending[offset].freeze(offset) for offset in sorted(pending)]
    logger.debug("Found %d span transitions", len(transitions))
    return transitions
