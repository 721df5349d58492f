# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
CSS-style color string parser.

Accepted forms:
- ``#rgb`` and ``#rrggbb`` (case-insensitive)
- ``name(args)`` where name is one of rgb, rgba, hsl, hsla, hsv, hsva,
  hwb, hwba, cmyk (case-insensitive)

Arguments may be separated by commas, whitespace or both. A ``/`` before
alpha is treated as a separator. Hue arguments may carry a unit: ``deg``
(or none), ``rad`` or ``turn``. Any other suffix, ``%`` included, is ignored.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Optional

from tincture.schema.color import Color, ColorSpace

logger = logging.getLogger(__name__)


class InvalidColorString(ValueError):
    """Raised when a string is not a recognized color.

    Attributes:
        text: The rejected input
    """

    def __init__(self, text: str, reason: Optional[str] = None) -> None:
        self.text = text
        self.reason = reason
        message = f"Color {text!r} is not a valid color"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


# =============================================================================
# Patterns
# =============================================================================

_HEX3_RE = re.compile(r"#([0-9a-f]{3})", re.IGNORECASE)
_HEX6_RE = re.compile(r"#([0-9a-f]{6})", re.IGNORECASE)
_FUNCTION_RE = re.compile(
    r"(?P<name>rgba?|hsla?|hsva?|hwba?|cmyk)\((?P<args>.*)\)",
    re.IGNORECASE,
)
_SEPARATOR_RE = re.compile(r"[\s,]")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?", re.IGNORECASE)

# Unit suffix -> multiplier to degrees
UNIT_FACTORS = {
    "rad": 360 / (2 * math.pi),
    "turn": 360,
}


# =============================================================================
# Parsing
# =============================================================================


def parse_number(token: str) -> float:
    """
    Parse a numeric argument with an optional unit suffix.

    ``"90"``, ``"90deg"`` and ``"90%"`` -> 90.0; ``"0.5turn"`` -> 180.0;
    ``"3.14159rad"`` -> ~180.0.

    Raises:
        ValueError: If the token does not start with a number
    """
    m = _NUMBER_RE.match(token)
    if not m:
        raise ValueError(f"Not a number: {token!r}")
    unit = token[m.end():].lower()
    return float(m.group(0)) * UNIT_FACTORS.get(unit, 1)


def _split_args(args: str) -> list[str]:
    tokens = (t.strip() for t in _SEPARATOR_RE.split(args))
    return [t for t in tokens if t and "/" not in t]


def _parse_hex(text: str) -> Optional[Color]:
    m = _HEX3_RE.fullmatch(text)
    if m:
        digits = m.group(1)
        return Color.rgb(*(int(d, 16) * 0x11 for d in digits))

    m = _HEX6_RE.fullmatch(text)
    if m:
        digits = m.group(1)
        return Color.rgb(*(int(digits[i:i + 2], 16) for i in (0, 2, 4)))

    return None


def _parse_function(text: str) -> Color:
    m = _FUNCTION_RE.fullmatch(text)
    if not m:
        raise InvalidColorString(text)

    space = ColorSpace(m.group("name").lower())
    try:
        numbers = [parse_number(t) for t in _split_args(m.group("args"))]
    except ValueError as e:
        raise InvalidColorString(text, str(e)) from e

    if not all(math.isfinite(n) for n in numbers):
        raise InvalidColorString(text, "non-finite value")

    if len(numbers) not in (3, 4):
        raise InvalidColorString(text, f"expected 3 or 4 values, got {len(numbers)}")

    if space is ColorSpace.CMYK:
        if len(numbers) != 4:
            raise InvalidColorString(text, "cmyk needs 4 values")
        return Color.of(space, numbers)

    alpha = numbers[3] if space.has_alpha and len(numbers) == 4 else None
    return Color.of(space, numbers[:3], alpha)


def parse_color(text: str) -> Color:
    """
    Parse a CSS-style color string into a Color.

    Args:
        text: Color string like ``"#234073"`` or ``"hsl(218, 53%, 29%)"``

    Returns:
        Color in the space named by the string (hex gives RGB)

    Raises:
        InvalidColorString: If the text matches no supported form
    """
    stripped = text.strip()
    try:
        color = _parse_hex(stripped)
        if color is None:
            color = _parse_function(stripped)
    except InvalidColorString as e:
        logger.debug("Rejected color string %r (%s)", text, e.reason or "no match")
        raise InvalidColorString(text, e.reason) from None
    return color
