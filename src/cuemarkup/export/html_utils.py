"""HTML and CSS string helpers shared by the span converter.

``escape_html`` follows the escaping rules of the embedded web view's
host toolkit: only ``<``, ``>`` and ``&`` get named entities, every code
point outside printable ASCII becomes a numeric reference, and runs of
spaces keep their width via ``&nbsp;``.  Quotes are left alone, so the
output is safe for element content but not for attribute values.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal

__all__ = [
    "css_all_class_descendants_selector",
    "escape_html",
    "escape_html_text",
    "format_two_decimals",
    "normalize_color",
    "to_css_rgba",
]

# \n and \r\n after escape_html has turned them into numeric references.
_NEWLINE_PATTERN = re.compile(r"(&#13;)?&#10;")

_NAMED_ENTITIES: dict[str, str] = {
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
}

_CENTS = Decimal("0.01")
# Wide enough to quantize any finite double to two places.
_WIDE_CONTEXT = Context(prec=400)


def escape_html(text: str) -> str:
    """Escape *text* for inclusion as HTML element content.

    - ``<``, ``>``, ``&`` become named entities.
    - Code points below U+0020 or above U+007E become ``&#N;``.
    - Unpaired surrogates are dropped.
    - A run of *n* spaces becomes ``n - 1`` ``&nbsp;`` plus one space.
    """
    parts: list[str] = []
    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        code = ord(ch)
        if ch in _NAMED_ENTITIES:
            parts.append(_NAMED_ENTITIES[ch])
        elif 0xD800 <= code <= 0xDFFF:
            pass
        elif code > 0x7E or code < 0x20:
            parts.append(f"&#{code};")
        elif ch == " ":
            while i + 1 < length and text[i + 1] == " ":
                parts.append("&nbsp;")
                i += 1
            parts.append(" ")
        else:
            parts.append(ch)
        i += 1
    return "".join(parts)


def escape_html_text(text: str) -> str:
    """Escape a slice of cue text and turn its line breaks into ``<br>``."""
    return _NEWLINE_PATTERN.sub("<br>", escape_html(text))


def format_two_decimals(value: float) -> str:
    """Format *value* with two decimal places, rounding ties away from zero.

    Uses the exact binary value of the float, so ``3.125`` gives ``3.13``
    where ``f"{3.125:.2f}"`` gives ``3.12``.
    """
    if not math.isfinite(value):
        return f"{value:.2f}"
    exact = Decimal(value)
    return str(exact.quantize(_CENTS, rounding=ROUND_HALF_UP, context=_WIDE_CONTEXT))


def normalize_color(color: int) -> int:
    """Fold a packed ARGB value into the signed 32-bit range.

    ``0xFF000000`` and ``-16777216`` describe the same opaque black; both
    normalise to ``-16777216``.
    """
    color &= 0xFFFFFFFF
    return color - 0x1_0000_0000 if color & 0x8000_0000 else color


def to_css_rgba(color: int) -> str:
    """Format a packed ARGB value as a CSS ``rgba()`` function."""
    color &= 0xFFFFFFFF
    alpha = (color >> 24) & 0xFF
    red = (color >> 16) & 0xFF
    green = (color >> 8) & 0xFF
    blue = color & 0xFF
    return f"rgba({red},{green},{blue},{alpha / 255:.3f})"


def css_all_class_descendants_selector(class_name: str) -> str:
    """Selector matching elements with *class_name* and all their descendants."""
    return f".{class_name},.{class_name} *"
