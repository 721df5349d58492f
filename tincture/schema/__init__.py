# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Schema definitions for color values.

Color is immutable (frozen dataclass). Conversions and manipulations
always produce a new Color.
"""

from tincture.schema.color import (
    Color,
    ColorSpace,
    round_half_up,
)

__all__ = [
    "Color",
    "ColorSpace",
    "round_half_up",
]
