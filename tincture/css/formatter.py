# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
CSS string and hex formatting.

Values are printed as stored: no clamping and no extra rounding, so an
RGB channel pushed to 260 by lighten() prints as 260. Whole-number floats
print without a decimal part (alpha 1.0 -> "1").
"""

from __future__ import annotations

from tincture.schema.color import Color, ColorSpace, round_half_up


# Templates take the formatted channels followed by alpha
_TEMPLATES = {
    ColorSpace.RGB: "rgb({0}, {1}, {2})",
    ColorSpace.RGBA: "rgba({0}, {1}, {2}, {3})",
    ColorSpace.HSL: "hsl({0}, {1}%, {2}%)",
    ColorSpace.HSLA: "hsla({0}, {1}%, {2}%, {3})",
    ColorSpace.HSV: "hsv({0}, {1}%, {2}%)",
    ColorSpace.HSVA: "hsva({0}, {1}%, {2}%, {3})",
    ColorSpace.HWB: "hwb({0}, {1}%, {2}%)",
    ColorSpace.HWBA: "hwba({0}, {1}%, {2}%, {3})",
    ColorSpace.CMYK: "cmyk({0}%, {1}%, {2}%, {3}%)",
}


def format_number(value: float) -> str:
    """Shortest text for a number: 1.0 -> "1", 0.4 -> "0.4", 260 -> "260"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_color(color: Color) -> str:
    """
    Canonical CSS string for a color.

    Examples::

        rgb(35, 64, 115)
        hsla(100, 50%, 75%, 0.5)
        cmyk(70%, 44%, 0%, 55%)
    """
    parts = [format_number(c) for c in color.channels]
    if color.space.has_alpha:
        parts.append(format_number(color.alpha))
    return _TEMPLATES[color.space].format(*parts)


def _hex_pair(value: int) -> str:
    return f"{value:02x}"


def to_hex(color: Color) -> str:
    """
    Lowercase ``#rrggbb`` from the color's RGB channels.

    Out-of-range channels are not clamped (260 -> "104").
    """
    r, g, b = color.to_rgb().channels
    return f"#{_hex_pair(r)}{_hex_pair(g)}{_hex_pair(b)}"


def to_hex_alpha(color: Color) -> str:
    """``#rrggbbaa`` with alpha scaled to 0-255."""
    return f"{to_hex(color)}{_hex_pair(round_half_up(color.alpha * 255))}"
