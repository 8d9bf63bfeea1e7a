"""
Rendering utility functions.
"""

from typing import Tuple


def hex_to_rgba(color: str, alpha: float = 1.0) -> Tuple[float, float, float, float]:
    """Convert '#RRGGBB' (or '#RGB') to an RGBA tuple of floats in [0, 1]."""
    value = color.lstrip('#')
    if len(value) == 3:
        value = ''.join(c * 2 for c in value)
    if len(value) != 6:
        raise ValueError(f"Invalid color: {color!r}")

    r = int(value[0:2], 16) / 255
    g = int(value[2:4], 16) / 255
    b = int(value[4:6], 16) / 255
    return (r, g, b, alpha)


def rgba_to_hex(color: Tuple[float, float, float, float]) -> str:
    r, g, b = (int(round(c * 255)) for c in color[:3])
    return f'#{r:02x}{g:02x}{b:02x}'
