# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Alpha-aware color mixing.

Uses the weighting from Sass's ``mix()``: the difference in alpha between
the two colors shifts the effective weight toward the more opaque one.
"""

from __future__ import annotations

from tincture.schema.color import Color, ColorSpace


def mix_weights(weight: float, alpha_delta: float) -> tuple[float, float]:
    """
    Channel weights for mixing.

    Args:
        weight: Share of the second color (0.0-1.0)
        alpha_delta: alpha(second) - alpha(first)

    Returns:
        (w1, w2): weights for the second and first color, summing to 1
    """
    w = 2 * weight - 1
    a = alpha_delta
    # w * a == -1 would divide by zero
    w1 = ((w if w * a == -1 else (w + a) / (1 + w * a)) + 1) / 2
    return w1, 1 - w1


def mix(color: Color, other: Color, weight: float = 0.5) -> Color:
    """
    Mix two colors in RGB.

    Args:
        color: Base color; the result is in its space
        other: Color to mix in
        weight: Share of ``other`` (0.0 = color, 1.0 = other)

    Returns:
        Mixed color, converted to ``color.space``
    """
    rgb1 = other.to_rgba()
    rgb2 = color.to_rgba()

    w1, w2 = mix_weights(weight, rgb1.alpha - rgb2.alpha)
    channels = tuple(
        w1 * c1 + w2 * c2 for c1, c2 in zip(rgb1.channels, rgb2.channels)
    )
    alpha = rgb1.alpha * weight + rgb2.alpha * (1 - weight)

    return Color.of(ColorSpace.RGBA, channels, alpha).to_space(color.space)
