# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Tincture -- Immutable color values with conversion and manipulation.

A Color lives in one of RGB, HSL, HSV, HWB or CMYK (the first four with
optional alpha). Every operation returns a new Color.

Quick start::

    from tincture import rgb, from_string

    c = rgb(35, 64, 115)
    c.to_cmyk().to_string()     # "cmyk(70%, 44%, 0%, 55%)"
    c.to_hex()                  # "#234073"
    c.lighten(0.2).rotate(180)  # chained, still RGB

    from_string("rgba(10, 10, 10, 0.8)").fade(0.5)  # rgba(10, 10, 10, 0.4)
"""

from __future__ import annotations

__version__ = "1.0.0"

from tincture.css.parser import InvalidColorString
from tincture.schema import Color, ColorSpace

# Constructors (module-level aliases of the Color classmethods)
rgb = Color.rgb
rgba = Color.rgba
hsl = Color.hsl
hsla = Color.hsla
hsv = Color.hsv
hsva = Color.hsva
hwb = Color.hwb
hwba = Color.hwba
cmyk = Color.cmyk
from_string = Color.from_string

__all__ = [
    # Core types
    "Color",
    "ColorSpace",
    "InvalidColorString",
    # Constructors
    "rgb",
    "rgba",
    "hsl",
    "hsla",
    "hsv",
    "hsva",
    "hwb",
    "hwba",
    "cmyk",
    "from_string",
    # Version
    "__version__",
]
