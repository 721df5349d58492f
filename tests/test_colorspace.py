# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (RGB ↔ HSL / HSV / HWB / CMYK)."""

import pytest

from tincture import Color, ColorSpace
from tincture import rgb, rgba, hsl, hsla, hsv, hwb, cmyk
from tincture.convert.colorspace import (
    hsl_to_rgb,
    rgb_to_hsl,
    hsv_to_rgb,
    rgb_to_hsv,
    hwb_to_rgb,
    rgb_to_hwb,
    cmyk_to_rgb,
    rgb_to_cmyk,
    convert,
    to_alpha_variant,
)


# Colors whose RGB → X → RGB trip stays within ±1 per channel
ROUNDTRIP_COLORS = [
    (0, 0, 0),
    (255, 255, 255),
    (128, 128, 128),
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (255, 255, 0),
    (0, 255, 255),
    (255, 0, 255),
]


class TestScalarFormulas:
    """Single-color formulas against known values."""

    def test_hsl_to_rgb_red(self):
        assert hsl_to_rgb(0, 100, 50) == pytest.approx((255, 0, 0))

    def test_hsl_to_rgb_achromatic(self):
        assert hsl_to_rgb(200, 0, 50) == pytest.approx((127.5, 127.5, 127.5))

    def test_rgb_to_hsl_red(self):
        assert rgb_to_hsl(255, 0, 0) == pytest.approx((0, 100, 50))

    def test_rgb_to_hsl_achromatic(self):
        h, s, l = rgb_to_hsl(51, 51, 51)
        assert (h, s) == (0, 0)
        assert l == pytest.approx(20)

    def test_rgb_to_hsl_wraps_red_branch(self):
        # red is max and green < blue: hue lands just below 360
        h, _, _ = rgb_to_hsl(255, 0, 10)
        assert 350 < h < 360

    def test_hsv_to_rgb_sectors(self):
        assert hsv_to_rgb(0, 100, 100) == pytest.approx((255, 0, 0))
        assert hsv_to_rgb(180, 100, 100) == pytest.approx((0, 255, 255))
        assert hsv_to_rgb(300, 100, 100) == pytest.approx((255, 0, 255))

    def test_hsv_to_rgb_scales_to_255(self):
        assert hsv_to_rgb(0, 0, 50) == pytest.approx((127.5, 127.5, 127.5))

    def test_rgb_to_hsv(self):
        assert rgb_to_hsv(35, 64, 115) == pytest.approx((218.25, 69.565, 45.098), abs=1e-3)

    def test_rgb_to_hsv_black(self):
        assert rgb_to_hsv(0, 0, 0) == (0, 0, 0)

    def test_hwb_to_rgb_pure_hue(self):
        assert hwb_to_rgb(0, 0, 0) == pytest.approx((255, 0, 0))

    def test_hwb_to_rgb_hue_360_is_red(self):
        assert hwb_to_rgb(360, 0, 0) == pytest.approx((255, 0, 0))

    def test_hwb_to_rgb_rescales_overflow(self):
        # w + b = 200% → treated as 50% / 50%
        assert hwb_to_rgb(0, 100, 100) == pytest.approx((127.5, 127.5, 127.5))

    def test_rgb_to_hwb(self):
        assert rgb_to_hwb(35, 64, 115) == pytest.approx((218, 13.5, 55))

    def test_rgb_to_cmyk(self):
        c, m, y, k = rgb_to_cmyk(35, 64, 115)
        assert (c, m, y, k) == pytest.approx((69.565, 44.348, 0, 54.902), abs=1e-3)

    def test_rgb_to_cmyk_black_guarded(self):
        assert rgb_to_cmyk(0, 0, 0) == (0, 0, 0, 100)

    def test_cmyk_to_rgb_black_from_third_channel(self):
        assert cmyk_to_rgb(0, 100, 100, 255) == pytest.approx((0, 0, 0))
        assert cmyk_to_rgb(0, 0, 50, 0) == pytest.approx((127.5, 127.5, 63.75))


class TestReadmeConversions:
    """rgb(35, 64, 115) in every notation."""

    def test_string(self):
        assert rgb(35, 64, 115).to_string() == "rgb(35, 64, 115)"

    def test_cmyk(self):
        assert rgb(35, 64, 115).to_cmyk().to_string() == "cmyk(70%, 44%, 0%, 55%)"

    def test_hsv(self):
        assert rgb(35, 64, 115).to_hsv().to_string() == "hsv(218, 70%, 45%)"

    def test_hsl(self):
        assert rgb(35, 64, 115).to_hsl().to_string() == "hsl(218, 53%, 29%)"

    def test_hex(self):
        assert rgb(35, 64, 115).to_hex() == "#234073"

    def test_white_to_hsl(self):
        assert rgb(255, 255, 255).to_hsl().to_string() == "hsl(0, 0%, 100%)"

    def test_set_black_through_cmyk(self):
        assert rgb(255, 0, 0).set_black(255).to_string() == "rgb(0, 0, 0)"

    def test_set_hue_through_hsl(self):
        assert rgb(255, 0, 0).set_hue(200).to_string() == "rgb(0, 170, 255)"


class TestRoundtrip:
    """Conversions out of a space and back again."""

    @pytest.mark.parametrize("space", [ColorSpace.HSL, ColorSpace.HSV, ColorSpace.HWB])
    @pytest.mark.parametrize("channels", ROUNDTRIP_COLORS)
    def test_rgb_roundtrip_within_one(self, space, channels):
        original = rgb(*channels)
        recovered = original.to_space(space).to_rgb()
        for a, b in zip(recovered.channels, original.channels):
            assert abs(a - b) <= 1

    def test_hsv_roundtrip_readme_color(self):
        recovered = rgb(35, 64, 115).to_hsv().to_rgb()
        assert recovered.channels == (34, 64, 115)

    def test_hwb_roundtrip_readme_color(self):
        recovered = rgb(35, 64, 115).to_hwb().to_rgb()
        assert recovered.channels == (36, 65, 115)

    @pytest.mark.parametrize("color", [
        rgb(1, 2, 3),
        rgba(1, 2, 3, 0.5),
        hsl(100, 50, 50),
        hsla(100, 50, 50, 0.2),
        hsv(10, 20, 30),
        hwb(173, 20, 10),
        cmyk(77, 0, 9, 11),
    ])
    def test_identity_conversion(self, color):
        assert color.to_space(color.space) == color


class TestAlphaHandling:
    """Alpha forwarding across conversions."""

    def test_alpha_sibling_forwards_alpha(self):
        c = rgba(35, 64, 115, 0.4).to_hsla()
        assert c.space is ColorSpace.HSLA
        assert c.alpha == 0.4

    def test_plain_conversion_drops_alpha(self):
        c = rgba(35, 64, 115, 0.4).to_hsl()
        assert c.space is ColorSpace.HSL
        assert c.alpha == 1.0

    def test_same_family_copies_channels(self):
        c = hsla(100, 50, 50, 0.3).to_hsl()
        assert c == hsl(100, 50, 50)

    def test_cmyk_keeps_alpha(self):
        assert rgba(35, 64, 115, 0.4).to_cmyk().alpha == 0.4

    def test_to_alpha_variant(self):
        c = hsl(100, 50, 50)
        assert to_alpha_variant(c, ColorSpace.RGB).space is ColorSpace.RGBA
        assert c.to_alpha_variant(ColorSpace.HSV).space is ColorSpace.HSVA
        assert c.to_alpha_variant(ColorSpace.HWBA).space is ColorSpace.HWBA
        assert c.to_alpha_variant(ColorSpace.CMYK).space is ColorSpace.CMYK

    def test_convert_matches_method(self):
        c = hsv(10, 20, 30)
        assert convert(c, ColorSpace.HWB) == c.to_hwb()
        assert Color.of(ColorSpace.RGB, c.to_rgb().channels) == c.to_rgb()
