"""Convert annotated cue text into an HTML fragment plus CSS rule sets.

All text content is escaped.  Annotation ranges that cross each other
(neither contains the other) produce crossing tags such as
``<b>a<i>b</b>c</i>``; the embedded web view this output targets renders
those the same way a native text view renders the overlapping styles,
so they are not repaired.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from cuemarkup.export.css import background_color_rule_sets
from cuemarkup.export.html_utils import escape_html_text
from cuemarkup.export.span_transitions import find_span_transitions
from cuemarkup.models import AnnotatedText

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

__all__ = ["HtmlAndCss", "convert"]


@dataclass(frozen=True, slots=True)
class HtmlAndCss:
    """An HTML fragment and the CSS rule sets that style it.

    Attributes:
        html: Escaped text interleaved with markup.
        css_rule_sets: Selector to declarations, e.g.
            ``{".bg_1,.bg_1 *": "background-color:rgba(0,0,0,0.000);"}``.
            Each declaration string is ``prop:value;`` terminated.
    """

    html: str
    css_rule_sets: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )


def convert(
    text: str | AnnotatedText | None,
    display_density: float,
) -> HtmlAndCss:
    """Convert *text* into HTML, adding tags that reproduce its annotations.

    Args:
        text: Cue text.  ``None`` converts to an empty fragment and a plain
            ``str`` (no annotations) to its escaped form.
        display_density: Device pixels per CSS pixel; must be positive.

    Returns:
        The HTML fragment and its background-colour rule sets.
    """
    if text is None:
        return HtmlAndCss(html="")
    if not isinstance(text, AnnotatedText):
        return HtmlAndCss(html=escape_html_text(text))

    css_rule_sets = background_color_rule_sets(text)
    transitions = find_span_transitions(text.annotations, display_density)

    parts: list[str] = []
    previous = 0
    for transition in transitions:
        parts.append(escape_html_text(text.text[previous : transition.offset]))
        parts.append(transition.closing_markup)
        parts.append(transition.opening_markup)
        previous = transition.offset
    parts.append(escape_html_text(text.text[previous:]))

    logger.debug(
        "Converted %d chars with %d annotations into %d transitions",
        len(text.text),
        len(text.annotations),
        len(transitions),
    )
    return HtmlAndCss(
        html="".join(parts),
        css_rule_sets=MappingProxyType(css_rule_sets),
    )
