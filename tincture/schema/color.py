# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Color value — the single immutable type of Tincture.

Design principles:
- Immutable: Color is a frozen dataclass; every operation returns a new one
- Tagged: the ColorSpace enum says how to read the channels
- Permissive: channels are rounded but never clamped
- Serializable: to_dict/from_dict for JSON transport

Channel layout per space:
- RGB:  red, green, blue (0-255)
- HSL:  hue (degrees), saturation %, lightness %
- HSV:  hue (degrees), saturation %, value %
- HWB:  hue (degrees), whiteness %, blackness % (whiteness + blackness <= 100)
- CMYK: cyan %, magenta %, yellow %, black %

Each space except CMYK has an alpha-carrying sibling (RGBA, HSLA, HSVA, HWBA).
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence


# =============================================================================
# Color Spaces
# =============================================================================


class ColorSpace(Enum):
    """
    Supported color spaces.

    Values are the CSS function names used by the string codec.
    """

    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"
    HSV = "hsv"
    HSVA = "hsva"
    HWB = "hwb"
    HWBA = "hwba"
    CMYK = "cmyk"

    @property
    def has_alpha(self) -> bool:
        """True for the alpha-carrying spaces (RGBA, HSLA, HSVA, HWBA)."""
        return self is not self.base

    @property
    def base(self) -> ColorSpace:
        """The plain space this one belongs to (HSLA -> HSL)."""
        return _BASES[self]

    @property
    def alpha_variant(self) -> ColorSpace:
        """The alpha-carrying sibling (HSL -> HSLA). CMYK maps to itself."""
        return _ALPHA_VARIANTS[self.base]

    @property
    def arity(self) -> int:
        """Number of channels, excluding alpha."""
        return len(self.channel_names)

    @property
    def channel_names(self) -> tuple[str, ...]:
        """Short channel keys as used by Color.to_object()."""
        return _CHANNEL_NAMES[self.base]


_BASES = {
    ColorSpace.RGB: ColorSpace.RGB,
    ColorSpace.RGBA: ColorSpace.RGB,
    ColorSpace.HSL: ColorSpace.HSL,
    ColorSpace.HSLA: ColorSpace.HSL,
    ColorSpace.HSV: ColorSpace.HSV,
    ColorSpace.HSVA: ColorSpace.HSV,
    ColorSpace.HWB: ColorSpace.HWB,
    ColorSpace.HWBA: ColorSpace.HWB,
    ColorSpace.CMYK: ColorSpace.CMYK,
}

_ALPHA_VARIANTS = {
    ColorSpace.RGB: ColorSpace.RGBA,
    ColorSpace.HSL: ColorSpace.HSLA,
    ColorSpace.HSV: ColorSpace.HSVA,
    ColorSpace.HWB: ColorSpace.HWBA,
    ColorSpace.CMYK: ColorSpace.CMYK,
}

_CHANNEL_NAMES = {
    ColorSpace.RGB: ("r", "g", "b"),
    ColorSpace.HSL: ("h", "s", "l"),
    ColorSpace.HSV: ("h", "s", "v"),
    ColorSpace.HWB: ("h", "w", "b"),
    ColorSpace.CMYK: ("c", "m", "y", "k"),
}


# =============================================================================
# Construction Helpers
# =============================================================================


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    Python's round() uses banker's rounding (round(0.5) == 0); color
    channels need 127.5 -> 128 and -0.5 -> 0. Infinities and NaN are
    returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def _normalize_hwb(w: float, b: float) -> tuple[float, float]:
    """Rescale whiteness and blackness so their sum is at most 100."""
    if w + b > 100:
        return (w / (w + b)) * 100, (b / (w + b)) * 100
    return w, b


# =============================================================================
# Color
# =============================================================================


@dataclass(frozen=True, slots=True)
class Color:
    """
    An immutable color in one color space.

    Build colors with the named constructors (``Color.rgb``, ``Color.hsla``,
    ...), ``Color.of`` or ``Color.from_string``; those round the channels and
    enforce the HWB invariant. The raw dataclass constructor stores the values
    as given.

    Attributes:
        space: Color space tag
        channels: Channel values, 3 for RGB/HSL/HSV/HWB, 4 for CMYK
        alpha: Opacity (0.0-1.0). Always present; only alpha spaces print it.
    """
    space: ColorSpace
    channels: tuple[float, ...]
    alpha: float = 1.0

    def __post_init__(self) -> None:
        """Validate the channel count against the space."""
        if len(self.channels) != self.space.arity:
            raise ValueError(
                f"{self.space.value} expects {self.space.arity} channels, "
                f"got {len(self.channels)}"
            )

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def of(
        cls,
        space: ColorSpace,
        channels: Sequence[float],
        alpha: Optional[float] = None,
    ) -> Color:
        """
        Build a color in any space.

        Channels are rounded to the nearest integer. HWB whiteness and
        blackness are rescaled when their sum exceeds 100.

        Args:
            space: Target color space
            channels: Channel values in the space's order
            alpha: Opacity, 1.0 when None

        Returns:
            New Color
        """
        values = tuple(channels)
        if space.base is ColorSpace.HWB and len(values) == 3:
            w, b = _normalize_hwb(values[1], values[2])
            values = (values[0], w, b)
        return cls(
            space=space,
            channels=tuple(round_half_up(v) for v in values),
            alpha=1.0 if alpha is None else alpha,
        )

    @classmethod
    def rgb(cls, r: float, g: float, b: float) -> Color:
        """Create a color from red, green and blue (0-255)."""
        return cls.of(ColorSpace.RGB, (r, g, b))

    @classmethod
    def rgba(cls, r: float, g: float, b: float, a: Optional[float] = None) -> Color:
        """Create a color from red, green, blue and alpha."""
        return cls.of(ColorSpace.RGBA, (r, g, b), a)

    @classmethod
    def hsl(cls, h: float, s: float, l: float) -> Color:
        """Create a color from hue, saturation and lightness."""
        return cls.of(ColorSpace.HSL, (h, s, l))

    @classmethod
    def hsla(cls, h: float, s: float, l: float, a: Optional[float] = None) -> Color:
        """Create a color from hue, saturation, lightness and alpha."""
        return cls.of(ColorSpace.HSLA, (h, s, l), a)

    @classmethod
    def hsv(cls, h: float, s: float, v: float) -> Color:
        """Create a color from hue, saturation and value."""
        return cls.of(ColorSpace.HSV, (h, s, v))

    @classmethod
    def hsva(cls, h: float, s: float, v: float, a: Optional[float] = None) -> Color:
        """Create a color from hue, saturation, value and alpha."""
        return cls.of(ColorSpace.HSVA, (h, s, v), a)

    @classmethod
    def hwb(cls, h: float, w: float, b: float) -> Color:
        """Create a color from hue, whiteness and blackness."""
        return cls.of(ColorSpace.HWB, (h, w, b))

    @classmethod
    def hwba(cls, h: float, w: float, b: float, a: Optional[float] = None) -> Color:
        """Create a color from hue, whiteness, blackness and alpha."""
        return cls.of(ColorSpace.HWBA, (h, w, b), a)

    @classmethod
    def cmyk(cls, c: float, m: float, y: float, k: float) -> Color:
        """Create a color from cyan, magenta, yellow and black."""
        return cls.of(ColorSpace.CMYK, (c, m, y, k))

    @classmethod
    def from_string(cls, text: str) -> Color:
        """
        Parse a CSS-style color string.

        Accepts ``#rgb``, ``#rrggbb`` and functional notation such as
        ``rgb(10, 20, 30)``, ``hsla(120 50% 50% / 0.5)`` or ``hwb(0.5turn, 10%, 20%)``.

        Raises:
            InvalidColorString: If the text is not a recognized color
        """
        from tincture.css.parser import parse_color
        return parse_color(text)

    # -------------------------------------------------------------------------
    # Conversions
    # -------------------------------------------------------------------------

    def to_space(self, space: ColorSpace) -> Color:
        """Convert to any color space."""
        from tincture.convert.colorspace import convert
        return convert(self, space)

    def to_alpha_variant(self, space: ColorSpace) -> Color:
        """Convert to the alpha-carrying sibling of ``space``."""
        from tincture.convert.colorspace import to_alpha_variant
        return to_alpha_variant(self, space)

    def to_rgb(self) -> Color:
        return self.to_space(ColorSpace.RGB)

    def to_rgba(self) -> Color:
        return self.to_space(ColorSpace.RGBA)

    def to_hsl(self) -> Color:
        return self.to_space(ColorSpace.HSL)

    def to_hsla(self) -> Color:
        return self.to_space(ColorSpace.HSLA)

    def to_hsv(self) -> Color:
        return self.to_space(ColorSpace.HSV)

    def to_hsva(self) -> Color:
        return self.to_space(ColorSpace.HSVA)

    def to_hwb(self) -> Color:
        return self.to_space(ColorSpace.HWB)

    def to_hwba(self) -> Color:
        return self.to_space(ColorSpace.HWBA)

    def to_cmyk(self) -> Color:
        return self.to_space(ColorSpace.CMYK)

    # -------------------------------------------------------------------------
    # Getters
    # -------------------------------------------------------------------------

    @property
    def red(self) -> int:
        return self.to_rgb().channels[0]

    @property
    def green(self) -> int:
        return self.to_rgb().channels[1]

    @property
    def blue(self) -> int:
        return self.to_rgb().channels[2]

    @property
    def hue(self) -> int:
        return self.to_hsl().channels[0]

    @property
    def saturation(self) -> int:
        return self.to_hsl().channels[1]

    @property
    def lightness(self) -> int:
        return self.to_hsl().channels[2]

    @property
    def value(self) -> int:
        return self.to_hsv().channels[2]

    @property
    def whiteness(self) -> int:
        return self.to_hwb().channels[1]

    @property
    def blackness(self) -> int:
        return self.to_hwb().channels[2]

    @property
    def cyan(self) -> int:
        return self.to_cmyk().channels[0]

    @property
    def magenta(self) -> int:
        return self.to_cmyk().channels[1]

    @property
    def yellow(self) -> int:
        return self.to_cmyk().channels[2]

    @property
    def black(self) -> int:
        return self.to_cmyk().channels[3]

    def to_object(self) -> dict:
        """
        Channels keyed by their short names.

        Alpha spaces add an ``"a"`` entry:
        ``Color.rgba(1, 2, 3, 0.5).to_object() == {"r": 1, "g": 2, "b": 3, "a": 0.5}``
        """
        d = dict(zip(self.space.channel_names, self.channels))
        if self.space.has_alpha:
            d["a"] = self.alpha
        return d

    def to_array(self) -> list:
        """Channels as a list, with alpha appended when it is not 1."""
        if self.alpha == 1:
            return list(self.channels)
        return [*self.channels, self.alpha]

    def to_hex(self) -> str:
        """Hex string like ``"#234073"``."""
        from tincture.css.formatter import to_hex
        return to_hex(self)

    def to_hex_alpha(self) -> str:
        """Hex string with alpha like ``"#23407380"``."""
        from tincture.css.formatter import to_hex_alpha
        return to_hex_alpha(self)

    def to_number(self) -> int:
        """Packed 24-bit RGB integer (``#ffffff`` -> 16777215)."""
        return int(self.to_hex()[1:], 16)

    def to_string(self) -> str:
        """CSS string for this color, e.g. ``"hsl(100, 50%, 75%)"``."""
        from tincture.css.formatter import format_color
        return format_color(self)

    def __str__(self) -> str:
        return self.to_string()

    def luminosity(self) -> float:
        """WCAG relative luminance (0.0 = black, 1.0 = white)."""
        from tincture.convert.luminance import luminosity
        return luminosity(self)

    def contrast(self, other: Color) -> float:
        """WCAG contrast ratio against another color (1-21)."""
        from tincture.convert.luminance import contrast
        return contrast(self, other)

    @property
    def is_dark(self) -> bool:
        """True when black text would be hard to read on this color."""
        from tincture.convert.luminance import is_dark
        return is_dark(self)

    @property
    def is_light(self) -> bool:
        return not self.is_dark

    # -------------------------------------------------------------------------
    # Manipulation
    # -------------------------------------------------------------------------

    def set_red(self, value: float) -> Color:
        from tincture.adjust import operations
        return operations.set_red(self, value)

    def set_green(self, value: float) -> Color:
        from tincture.adjust import operations
        return operations.set_green(self, value)

    def set_blue(self, value: float) -> Color:
        from tincture.adjust import operations
        return operations.set_blue(self, value)

    def set_alpha(self, value: float) -> Color:
        """Set alpha. Promotes plain spaces to their alpha sibling (HSL -> HSLA)."""
        from tincture.adjust import operations
        return operations.set_alpha(self, value)

    def set_hue(self, value: float) -> Color:
        from tincture.adjust import operations
        return operations.set_hue(self, value)

    def set_saturation(self, value: float) -> Color:
        from tincture.adjust import operations
        return operations.set_saturation(self, value)

    def set_lightness(self, value: float) -> Color:
        from tincture.adjust import operations
        return operations.set_lightness(self, value)

    def set_value(self, value: float) -> Color:
        from tincture.adjust import operations
        return operations.set_value(self, value)

    def set_whiteness(self, value: float) -> Color:
        from tincture.adjust import operations
        return operations.set_whiteness(self, value)

    def set_blackness(self, value: float) -> Color:
        from tincture.adjust import operations
        return operations.set_blackness(self, value)

    def set_cyan(self, value: float) -> Color:
        from tincture.adjust import operations
        return operations.set_cyan(self, value)

    def set_magenta(self, value: float) -> Color:
        from tincture.adjust import operations
        return operations.set_magenta(self, value)

    def set_yellow(self, value: float) -> Color:
        from tincture.adjust import operations
        return operations.set_yellow(self, value)

    def set_black(self, value: float) -> Color:
        from tincture.adjust import operations
        return operations.set_black(self, value)

    def negate(self) -> Color:
        from tincture.adjust import operations
        return operations.negate(self)

    def lighten(self, factor: float) -> Color:
        from tincture.adjust import operations
        return operations.lighten(self, factor)

    def darken(self, factor: float) -> Color:
        from tincture.adjust import operations
        return operations.darken(self, factor)

    def saturate(self, factor: float) -> Color:
        from tincture.adjust import operations
        return operations.saturate(self, factor)

    def desaturate(self, factor: float) -> Color:
        from tincture.adjust import operations
        return operations.desaturate(self, factor)

    def grayscale(self) -> Color:
        """Unweighted gray. Always returns plain RGB."""
        from tincture.adjust import operations
        return operations.grayscale(self)

    def fade(self, factor: float) -> Color:
        from tincture.adjust import operations
        return operations.fade(self, factor)

    def opaquer(self, factor: float) -> Color:
        from tincture.adjust import operations
        return operations.opaquer(self, factor)

    def rotate(self, degrees: float) -> Color:
        from tincture.adjust import operations
        return operations.rotate(self, degrees)

    def mix(self, other: Color, weight: float = 0.5) -> Color:
        """
        Blend with another color.

        Args:
            other: Color to mix in
            weight: Share of ``other`` in the result (0.0 = self, 1.0 = other)

        Returns:
            Mixed color in this color's space
        """
        from tincture.adjust.mix import mix
        return mix(self, other, weight)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "space": self.space.value,
            "channels": list(self.channels),
            "alpha": self.alpha,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Color:
        """
        Deserialize from dictionary.

        Goes through ``Color.of`` so rounding and the HWB invariant hold
        for external input.
        """
        try:
            space = ColorSpace(data["space"])
        except ValueError:
            raise ValueError(f"Unknown color space: {data['space']!r}") from None
        return cls.of(space, data["channels"], data.get("alpha"))

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, s: str) -> Color:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(s))
