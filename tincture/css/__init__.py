# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
CSS string codec.

parse_color turns hex and functional notation into a Color; format_color
and the hex helpers turn a Color back into text.
"""

from tincture.css.formatter import format_color, format_number, to_hex, to_hex_alpha
from tincture.css.parser import InvalidColorString, parse_color, parse_number

__all__ = [
    "InvalidColorString",
    "parse_color",
    "parse_number",
    "format_color",
    "format_number",
    "to_hex",
    "to_hex_alpha",
]
