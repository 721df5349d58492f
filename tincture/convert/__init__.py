# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Conversion core for Tincture.

Deterministic color space math and WCAG luminance. RGB is the hub
through which every cross-space conversion goes.
"""

from tincture.convert.colorspace import convert, to_alpha_variant
from tincture.convert.luminance import contrast, luminosity, relative_luminance

__all__ = [
    "convert",
    "to_alpha_variant",
    "luminosity",
    "contrast",
    "relative_luminance",
]
