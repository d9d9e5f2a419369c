"""Standalone HTML page for previewing one converted cue."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cuemarkup.export.css import render_style_block
from cuemarkup.export.html_utils import escape_html

if TYPE_CHECKING:
    from cuemarkup.export.spanned_html import HtmlAndCss

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
{style}
</head>
<body>
<div class='cue'>{html}</div>
</body>
</html>
"""


def render_page(result: HtmlAndCss, title: str = "Subtitles") -> str:
    """Wrap a converted fragment and its rule sets in an HTML document."""
    return _PAGE_TEMPLATE.format(
        title=escape_html(title),
        style=render_style_block(result.css_rule_sets),
        html=result.html,
    )
