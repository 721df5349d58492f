# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Color space conversions.

RGB is the hub: every conversion goes X → RGB → Y, except conversions
within one space family (HSL ↔ HSLA) which copy the channels.

Channel conventions for the scalar functions:
- RGB: 0-255
- Hue: degrees
- Saturation, lightness, value, whiteness, blackness, CMYK: percent (0-100)

Scalar functions return unrounded floats. Rounding happens once, in
Color.of, when the target color is built.
"""

from __future__ import annotations

import math
from typing import Callable, Optional

from tincture.schema.color import Color, ColorSpace, round_half_up

Channels = tuple[float, ...]


# =============================================================================
# HSL ↔ RGB
# =============================================================================


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees
        s: Saturation in percent
        l: Lightness in percent

    Returns:
        (r, g, b) in 0-255, unrounded
    """
    h = h / 360
    s = s / 100
    l = l / 100

    if s == 0:
        # achromatic
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)

    return r * 255, g * 255, b * 255


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL.

    Args:
        r, g, b: Channels in 0-255

    Returns:
        (hue in degrees, saturation %, lightness %), unrounded
    """
    r /= 255
    g /= 255
    b /= 255

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    l = (max_c + min_c) / 2

    if max_c == min_c:
        return 0.0, 0.0, l * 100

    d = max_c - min_c
    denominator = 2 - max_c - min_c if l > 0.5 else max_c + min_c
    # only reachable with out-of-range channels
    s = d / denominator if denominator else 0.0
    if max_c == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif max_c == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4

    return h * 60, s * 100, l * 100


# =============================================================================
# HSV ↔ RGB
# =============================================================================


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to RGB using the six-sector formula.

    Args:
        h: Hue in degrees
        s: Saturation in percent
        v: Value in percent

    Returns:
        (r, g, b) in 0-255, unrounded
    """
    h = h / 360
    s = s / 100
    v = v / 100

    i = math.floor(h * 6)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    sector = i % 6
    if sector == 0:
        r, g, b = v, t, p
    elif sector == 1:
        r, g, b = q, v, p
    elif sector == 2:
        r, g, b = p, v, t
    elif sector == 3:
        r, g, b = p, q, v
    elif sector == 4:
        r, g, b = t, p, v
    else:
        r, g, b = v, p, q

    return r * 255, g * 255, b * 255


def rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSV.

    Hue is computed on the raw 0-255 channels.

    Args:
        r, g, b: Channels in 0-255

    Returns:
        (hue in degrees, saturation %, value %), unrounded
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    d = max_c - min_c
    s = 0 if max_c == 0 else d / max_c
    v = max_c / 255

    if max_c == min_c:
        h = 0.0
    elif max_c == r:
        h = ((g - b) + d * (6 if g < b else 0)) / (6 * d)
    elif max_c == g:
        h = ((b - r) + d * 2) / (6 * d)
    else:
        h = ((r - g) + d * 4) / (6 * d)

    return h * 360, s * 100, v * 100


# =============================================================================
# HWB ↔ RGB
# =============================================================================


def hwb_to_rgb(h: float, w: float, b: float) -> tuple[float, float, float]:
    """
    Convert HWB to RGB.

    Whiteness and blackness are rescaled when their sum exceeds 100%.

    Args:
        h: Hue in degrees
        w: Whiteness in percent
        b: Blackness in percent

    Returns:
        (r, g, b) in 0-255, unrounded
    """
    h = h / 360
    wh = w / 100
    bl = b / 100
    ratio = wh + bl
    if ratio > 1:
        wh /= ratio
        bl /= ratio

    i = math.floor(6 * h)
    v = 1 - bl
    f = 6 * h - i
    if i & 1:
        f = 1 - f

    n = wh + f * (v - wh)

    # sector 6 (hue == 360) and anything out of range read as sector 0
    if i == 1:
        red, green, blue = n, v, wh
    elif i == 2:
        red, green, blue = wh, v, n
    elif i == 3:
        red, green, blue = wh, n, v
    elif i == 4:
        red, green, blue = n, wh, v
    elif i == 5:
        red, green, blue = v, wh, n
    else:
        red, green, blue = v, n, wh

    return red * 255, green * 255, blue * 255


def rgb_to_hwb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HWB through the rounded HSV color.

    Args:
        r, g, b: Channels in 0-255

    Returns:
        (hue in degrees, whiteness %, blackness %), unrounded
    """
    h, s, v = (round_half_up(c) for c in rgb_to_hsv(r, g, b))
    s /= 100
    v /= 100
    return h, ((1 - s) * v) * 100, (1 - v) * 100


# =============================================================================
# CMYK ↔ RGB
# =============================================================================


def cmyk_to_rgb(c: float, m: float, y: float, k: float) -> tuple[float, float, float]:
    """
    Convert CMYK to RGB.

    Black is read from the third (yellow) channel; the fourth channel does
    not take part. ``cmyk(0, 100, 100, 255)`` converts to ``rgb(0, 0, 0)``.

    Args:
        c, m, y, k: Channels in percent

    Returns:
        (r, g, b) in 0-255, unrounded
    """
    c = c / 100
    m = m / 100
    y = y / 100
    k = y

    r = 255 * (1 - c) * (1 - k)
    g = 255 * (1 - m) * (1 - k)
    b = 255 * (1 - y) * (1 - k)
    return r, g, b


def rgb_to_cmyk(r: float, g: float, b: float) -> tuple[float, float, float, float]:
    """
    Convert RGB to CMYK.

    Pure black (k == 100%) yields c = m = y = 0.

    Args:
        r, g, b: Channels in 0-255

    Returns:
        (c, m, y, k) in percent, unrounded
    """
    r /= 255
    g /= 255
    b /= 255

    k = min(1 - r, 1 - g, 1 - b)
    if k == 1:
        return 0.0, 0.0, 0.0, k * 100

    c = (1 - r - k) / (1 - k)
    m = (1 - g - k) / (1 - k)
    y = (1 - b - k) / (1 - k)
    return c * 100, m * 100, y * 100, k * 100


# =============================================================================
# Dispatch
# =============================================================================

_TO_RGB: dict[ColorSpace, Callable[..., tuple[float, float, float]]] = {
    ColorSpace.RGB: lambda r, g, b: (r, g, b),
    ColorSpace.HSL: hsl_to_rgb,
    ColorSpace.HSV: hsv_to_rgb,
    ColorSpace.HWB: hwb_to_rgb,
    ColorSpace.CMYK: cmyk_to_rgb,
}

_FROM_RGB: dict[ColorSpace, Callable[[float, float, float], Channels]] = {
    ColorSpace.RGB: lambda r, g, b: (r, g, b),
    ColorSpace.HSL: rgb_to_hsl,
    ColorSpace.HSV: rgb_to_hsv,
    ColorSpace.HWB: rgb_to_hwb,
    ColorSpace.CMYK: rgb_to_cmyk,
}


def to_rgb_channels(space: ColorSpace, channels: Channels) -> tuple[float, float, float]:
    """Convert raw channels of ``space`` to unrounded RGB (0-255)."""
    return _TO_RGB[space.base](*channels)


def from_rgb_channels(space: ColorSpace, rgb: Channels) -> Channels:
    """Convert RGB channels (0-255) to unrounded channels of ``space``."""
    return _FROM_RGB[space.base](*rgb)


def convert(color: Color, target: ColorSpace) -> Color:
    """
    Convert a color to another space.

    Alpha is forwarded when the target is an alpha-carrying space (CMYK
    counts as its own alpha sibling) or the color's own space. Conversions
    to other plain spaces produce alpha 1.

    Args:
        color: Source color
        target: Target color space

    Returns:
        New Color in ``target``
    """
    if target.base is color.space.base:
        channels = color.channels
    else:
        # hub conversion uses rounded RGB, as the rgb constructor would
        rgb = tuple(round_half_up(c) for c in to_rgb_channels(color.space, color.channels))
        channels = from_rgb_channels(target, rgb)

    alpha: Optional[float] = None
    if target is color.space or target.alpha_variant is target:
        alpha = color.alpha
    return Color.of(target, channels, alpha)


def to_alpha_variant(color: Color, space: ColorSpace) -> Color:
    """
    Convert to the alpha-carrying sibling of ``space``.

    RGB and RGBA map to RGBA, HSL and HSLA to HSLA, and so on. CMYK has no
    separate sibling and maps to CMYK.
    """
    return convert(color, space.alpha_variant)
