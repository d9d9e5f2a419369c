"""CSS rule sets accompanying converted cue HTML.

A background colour is attached to one wrapping ``<span class='bg_N'>``,
but nested elements (``<b>``, ``<ruby>``, ...) would otherwise paint
their own transparent background over it.  Selecting the class and all
its descendants makes every nested element inherit the colour.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cuemarkup.export.html_utils import (
    css_all_class_descendants_selector,
    normalize_color,
    to_css_rgba,
)
from cuemarkup.export.span_tags import background_class
from cuemarkup.models import BackgroundColor

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cuemarkup.models import AnnotatedText

__all__ = ["background_color_rule_sets", "render_style_block"]


def background_color_rule_sets(text: AnnotatedText) -> dict[str, str]:
    """Build one rule set per distinct background colour in *text*.

    Returns:
        Mapping of selector to ``background-color:rgba(...);`` declaration.
    """
    colors = {normalize_color(kind.color) for kind in text.kinds_of(BackgroundColor)}
    return {
        css_all_class_descendants_selector(background_class(color)): (
            f"background-color:{to_css_rgba(color)};"
        )
        for color in colors
    }


def render_style_block(css_rule_sets: Mapping[str, str]) -> str:
    """Render rule sets as a ``<style>`` element, one rule per line.

    Rules are sorted by selector so the block is stable across runs.
    Returns an empty string when there are no rules.
    """
    if not css_rule_sets:
        return ""
    rules = "\n".join(
        f"{selector}{{{declarations}}}"
        for selector, declarations in sorted(css_rule_sets.items())
    )
    return f"<style>\n{rules}\n</style>"
