# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Color manipulation for Tincture.

All operations are pure: they take a Color and return a new Color.
The same operations are available as Color methods for chaining.
"""

from tincture.adjust.mix import mix
from tincture.adjust.operations import (
    darken,
    desaturate,
    fade,
    grayscale,
    lighten,
    negate,
    opaquer,
    rotate,
    saturate,
    set_alpha,
    set_black,
    set_blackness,
    set_blue,
    set_cyan,
    set_green,
    set_hue,
    set_lightness,
    set_magenta,
    set_red,
    set_saturation,
    set_value,
    set_whiteness,
    set_yellow,
)

__all__ = [
    # Channel setters
    "set_red",
    "set_green",
    "set_blue",
    "set_hue",
    "set_saturation",
    "set_lightness",
    "set_value",
    "set_whiteness",
    "set_blackness",
    "set_cyan",
    "set_magenta",
    "set_yellow",
    "set_black",
    # Alpha (promotes to the alpha-carrying space)
    "set_alpha",
    "fade",
    "opaquer",
    # Derived
    "negate",
    "lighten",
    "darken",
    "saturate",
    "desaturate",
    "rotate",
    "grayscale",
    "mix",
]
