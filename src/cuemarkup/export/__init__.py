"""HTML export for annotated cue text.

Converts positional style annotations into an HTML fragment and the CSS
rule sets it needs, for display in an embedded web view.
"""

from cuemarkup.export.css import background_color_rule_sets, render_style_block
from cuemarkup.export.html_utils import (
    css_all_class_descendants_selector,
    escape_html,
    to_css_rgba,
)
from cuemarkup.export.page import render_page
from cuemarkup.export.spanned_html import HtmlAndCss, convert

__all__ = [
    "HtmlAndCss",
    "background_color_rule_sets",
    "convert",
    "css_all_class_descendants_selector",
    "escape_html",
    "render_page",
    "render_style_block",
    "to_css_rgba",
]
