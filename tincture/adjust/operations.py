# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Color manipulation.

Each operation converts to the space where the change is natural, computes
there, and converts back to the input's space. Two exceptions:

- grayscale always returns plain RGB
- set_alpha, fade and opaquer return the alpha-carrying sibling of the
  input's space (HSL -> HSLA, RGB -> RGBA, CMYK stays CMYK)

Nothing is clamped: lighten(0.6) on a light gray can push RGB channels
past 255, and those values survive to the CSS string.
"""

from __future__ import annotations

from tincture.schema.color import Color, ColorSpace, round_half_up


def _replace_channel(color: Color, space: ColorSpace, index: int, value: float) -> Color:
    """Set one channel of ``color`` as seen in ``space``, keep color's space."""
    channels = list(color.to_space(space).channels)
    channels[index] = value
    return Color.of(space, channels, color.alpha).to_space(color.space)


def _with_alpha(color: Color, alpha: float) -> Color:
    """Replace alpha in RGBA and promote to the alpha sibling of color's space."""
    rgba = color.to_rgba()
    return Color.rgba(*rgba.channels, alpha).to_alpha_variant(color.space)


# =============================================================================
# Channel Setters
# =============================================================================


def set_red(color: Color, value: float) -> Color:
    return _replace_channel(color, ColorSpace.RGB, 0, value)


def set_green(color: Color, value: float) -> Color:
    return _replace_channel(color, ColorSpace.RGB, 1, value)


def set_blue(color: Color, value: float) -> Color:
    return _replace_channel(color, ColorSpace.RGB, 2, value)


def set_hue(color: Color, value: float) -> Color:
    return _replace_channel(color, ColorSpace.HSL, 0, value)


def set_saturation(color: Color, value: float) -> Color:
    return _replace_channel(color, ColorSpace.HSL, 1, value)


def set_lightness(color: Color, value: float) -> Color:
    return _replace_channel(color, ColorSpace.HSL, 2, value)


def set_value(color: Color, value: float) -> Color:
    return _replace_channel(color, ColorSpace.HSV, 2, value)


def set_whiteness(color: Color, value: float) -> Color:
    """Set HWB whiteness; blackness is rescaled if the sum exceeds 100."""
    return _replace_channel(color, ColorSpace.HWB, 1, value)


def set_blackness(color: Color, value: float) -> Color:
    """Set HWB blackness; whiteness is rescaled if the sum exceeds 100."""
    return _replace_channel(color, ColorSpace.HWB, 2, value)


def set_cyan(color: Color, value: float) -> Color:
    return _replace_channel(color, ColorSpace.CMYK, 0, value)


def set_magenta(color: Color, value: float) -> Color:
    return _replace_channel(color, ColorSpace.CMYK, 1, value)


def set_yellow(color: Color, value: float) -> Color:
    return _replace_channel(color, ColorSpace.CMYK, 2, value)


def set_black(color: Color, value: float) -> Color:
    return _replace_channel(color, ColorSpace.CMYK, 3, value)


# =============================================================================
# Alpha
# =============================================================================


def set_alpha(color: Color, value: float) -> Color:
    """Set alpha, promoting to the alpha-carrying sibling space."""
    return _with_alpha(color, value)


def fade(color: Color, factor: float) -> Color:
    """
    Make the color more transparent.

    Args:
        color: Input color
        factor: Fraction of the current alpha to remove (0.5 halves it)

    Returns:
        Color in the alpha-carrying sibling of color's space
    """
    return _with_alpha(color, color.alpha * (1 - factor))


def opaquer(color: Color, factor: float) -> Color:
    """
    Make the color more opaque. Alpha is capped at 1.

    Args:
        color: Input color
        factor: Fraction of the current alpha to add (0.5 -> x1.5)

    Returns:
        Color in the alpha-carrying sibling of color's space
    """
    return _with_alpha(color, min(color.alpha * (1 + factor), 1))


# =============================================================================
# Derived Operations
# =============================================================================


def negate(color: Color) -> Color:
    """Invert each RGB channel: (255, 5, 0) -> (0, 250, 255)."""
    r, g, b = color.to_rgb().channels
    negated = (255 - r, 255 - g, 255 - b)
    return Color.of(ColorSpace.RGB, negated, color.alpha).to_space(color.space)


def _scale_hsl(color: Color, index: int, factor: float) -> Color:
    channels = list(color.to_hsl().channels)
    channels[index] = channels[index] * factor
    return Color.of(ColorSpace.HSL, channels, color.alpha).to_space(color.space)


def lighten(color: Color, factor: float) -> Color:
    """Multiply HSL lightness by ``1 + factor``."""
    return _scale_hsl(color, 2, 1 + factor)


def darken(color: Color, factor: float) -> Color:
    """Multiply HSL lightness by ``1 - factor``."""
    return _scale_hsl(color, 2, 1 - factor)


def saturate(color: Color, factor: float) -> Color:
    """Multiply HSL saturation by ``1 + factor``."""
    return _scale_hsl(color, 1, 1 + factor)


def desaturate(color: Color, factor: float) -> Color:
    """Multiply HSL saturation by ``1 - factor``."""
    return _scale_hsl(color, 1, 1 - factor)


def rotate(color: Color, degrees: float) -> Color:
    """
    Rotate the hue around the color wheel.

    The resulting hue is wrapped into [0, 360).
    """
    h, s, l = color.to_hsl().channels
    # round before wrapping so 359.6 cannot round up to 360
    hue = round_half_up(h + degrees) % 360
    return Color.of(ColorSpace.HSL, (hue, s, l), color.alpha).to_space(color.space)


def grayscale(color: Color) -> Color:
    """Average of the RGB channels. Always returns plain RGB."""
    r, g, b = color.to_rgb().channels
    gray = (r + g + b) / 3
    return Color.rgb(gray, gray, gray)
