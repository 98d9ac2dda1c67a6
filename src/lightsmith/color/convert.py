"""Hex color parsing and backdrop shade bucketing."""

from __future__ import annotations

import re

from lightsmith.config import SHADE_BRIGHT_ABOVE, SHADE_MEDIUM_ABOVE
from lightsmith.core.types import RGB, Shade
from lightsmith.errors import InvalidColorFormat

_HEX_COLOR = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


def hex_to_rgb(hex_color: str) -> RGB:
    """Parse ``#rrggbb`` (leading ``#`` optional, any case) into an RGB triple.

    Raises:
        InvalidColorFormat: For anything other than exactly six hex digits,
            including the three-digit shorthand.
    """
    if not isinstance(hex_color, str):
        raise InvalidColorFormat(f"Color must be a string, got {type(hex_color).__name__}")
    match = _HEX_COLOR.fullmatch(hex_color)
    if match is None:
        raise InvalidColorFormat(f"Invalid hex color '{hex_color}': expected #rrggbb")
    r, g, b = (int(channel, 16) for channel in match.groups())
    return RGB(r, g, b)


def normalize_hex(hex_color: str) -> str:
    """Canonical lowercase ``#rrggbb`` form of a valid hex color."""
    r, g, b = hex_to_rgb(hex_color)
    return f"#{r:02x}{g:02x}{b:02x}"


def shade_of(g: int) -> Shade:
    """Bucket a green channel value into bright / medium / dark."""
    if g > SHADE_BRIGHT_ABOVE:
        return Shade.BRIGHT
    elif g > SHADE_MEDIUM_ABOVE:
        return Shade.MEDIUM
    else:
        return Shade.DARK
