# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
WCAG relative luminance and contrast.

References:
- https://www.w3.org/TR/WCAG20/#relativeluminancedef
- https://www.w3.org/TR/WCAG20/#contrast-ratiodef

The scalar helpers work on Color values; relative_luminance also accepts
NumPy arrays of RGB triples for batch use.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from tincture.schema.color import Color


# WCAG 2.0 uses 0.03928 as the linear-segment threshold (not sRGB's 0.04045)
LINEAR_THRESHOLD = 0.03928

# Rec. 709 luma weights
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)

# Perceived brightness below this (0-255 scale) counts as dark
DARK_THRESHOLD = 128


# =============================================================================
# sRGB → Linear RGB
# =============================================================================


def srgb_to_linear(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    Piecewise gamma curve:
    - For values <= 0.03928: value/12.92
    - For values > 0.03928: ((value + 0.055) / 1.055) ^ 2.4

    Values outside [0,1] are not clipped.
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    # np.where evaluates both branches; the power of a negative base is discarded
    with np.errstate(invalid="ignore"):
        return np.where(
            srgb <= LINEAR_THRESHOLD,
            srgb / 12.92,
            np.power((srgb + 0.055) / 1.055, 2.4),
        )


# =============================================================================
# Luminance
# =============================================================================


def relative_luminance(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Vectorized WCAG relative luminance.

    Args:
        rgb: Array of shape (..., 3) with RGB values [0, 255]

    Returns:
        Array of shape (...) with luminance values (0.0 = black, 1.0 = white)
    """
    linear = srgb_to_linear(np.asarray(rgb, dtype=np.float64) / 255.0)
    wr, wg, wb = LUMINANCE_WEIGHTS
    return wr * linear[..., 0] + wg * linear[..., 1] + wb * linear[..., 2]


def luminosity(color: Color) -> float:
    """WCAG relative luminance of a single color."""
    return float(relative_luminance(color.to_rgb().channels))


def contrast_ratio(lum1: float, lum2: float) -> float:
    """
    WCAG contrast ratio between two luminances.

    Order does not matter; the result is always >= 1.
    """
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def contrast(color: Color, other: Color) -> float:
    """WCAG contrast ratio between two colors (1-21)."""
    return contrast_ratio(luminosity(color), luminosity(other))


def is_dark(color: Color) -> bool:
    """
    True if the color's perceived brightness is below the midpoint.

    Useful for picking white or black text on top of the color.
    """
    r, g, b = color.to_rgb().channels
    return (r * 2126 + g * 7152 + b * 722) / 10000 < DARK_THRESHOLD
