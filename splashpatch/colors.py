"""
CSS color parsing and normalization to Android-friendly hex strings.

Parsing is delegated to pydantic's ``Color`` type: hex (``#RGB``, ``#RGBA``,
``#RRGGBB``, ``#RRGGBBAA``), ``rgb()``/``rgba()``, ``hsl()``/``hsla()`` and
the CSS named colors. ``transparent`` is accepted as well. Output is
uppercase ``#RRGGBB`` with an alpha byte appended only when the color is not
fully opaque.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from pydantic_extra_types.color import Color

RGBA = Tuple[int, int, int, float]

# Color() also takes hex digits without a leading '#'
BARE_HEX = re.compile(r"^\s*(?:0x)?[0-9a-f]+\s*$", re.I)


def parse_color(value: str) -> Optional[RGBA]:
    """Parse a CSS color string into ``(r, g, b, alpha)`` or ``None``."""
    if value.strip().lower() == "transparent":
        return 0, 0, 0, 0.0
    if BARE_HEX.match(value):
        return None
    try:
        color = Color(value)
    except ValueError:
        return None
    return color.as_rgb_tuple(alpha=True)


def to_hex(color: RGBA) -> str:
    r, g, b, alpha = color
    hex_color = f"#{r:02X}{g:02X}{b:02X}"
    if alpha < 1:
        hex_color += f"{round(alpha * 255):02X}"
    return hex_color


def normalize_color(value: str) -> Optional[str]:
    """Normalized hex string for ``value`` or ``None`` if it is not a color."""
    color = parse_color(value)
    if color is None:
        return None
    return to_hex(color)
