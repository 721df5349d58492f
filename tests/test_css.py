# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""Tests for the CSS string parser and formatter."""

import logging
import math

import pytest

from tincture import Color, ColorSpace, InvalidColorString, from_string
from tincture import rgb, rgba, hsl, hsla, hsv, hsva, hwb, hwba, cmyk
from tincture.css import (
    format_color,
    format_number,
    parse_color,
    parse_number,
    to_hex,
    to_hex_alpha,
)


class TestParseHex:
    """Hex notation, three and six digits."""

    def test_six_digit(self):
        assert from_string("#234073") == rgb(35, 64, 115)

    def test_three_digit_expands(self):
        assert from_string("#fff") == rgb(255, 255, 255)
        assert from_string("#ABC") == rgb(170, 187, 204)

    def test_case_insensitive(self):
        assert from_string("#FfFfFf") == rgb(255, 255, 255)

    def test_wrong_length_rejected(self):
        with pytest.raises(InvalidColorString):
            from_string("#23407")

    def test_hash_required(self):
        with pytest.raises(InvalidColorString):
            from_string("234073")


class TestParseFunctional:
    """Functional notation with separators and units."""

    def test_comma_separated(self):
        assert from_string("rgb(35, 64, 115)") == rgb(35, 64, 115)

    def test_space_separated(self):
        assert from_string("rgb(35 64 115)") == rgb(35, 64, 115)

    def test_name_case_insensitive(self):
        assert from_string("RGB(35,64,115)") == rgb(35, 64, 115)

    def test_rgba(self):
        c = from_string("rgba(10, 10, 10, 0.8)")
        assert c.space is ColorSpace.RGBA
        assert c.alpha == 0.8

    def test_rgba_without_alpha(self):
        assert from_string("rgba(1, 2, 3)") == rgba(1, 2, 3, 1)

    def test_percent_suffix_ignored(self):
        assert from_string("hsl(218, 53%, 29%)") == hsl(218, 53, 29)

    def test_slash_alpha(self):
        assert from_string("hsla(120 50% 50% / 0.25)") == hsla(120, 50, 50, 0.25)

    def test_turn_unit(self):
        assert from_string("hsl(0.5turn, 50%, 50%)") == hsl(180, 50, 50)

    def test_rad_unit(self):
        assert from_string(f"hsv({math.pi}rad, 10%, 20%)") == hsv(180, 10, 20)

    def test_deg_unit(self):
        assert from_string("hwb(90deg, 10%, 20%)") == hwb(90, 10, 20)

    def test_hwb_normalized(self):
        assert from_string("hwba(0, 150%, 50%, 0.5)") == hwba(0, 75, 25, 0.5)

    def test_cmyk(self):
        assert from_string("cmyk(70%, 44%, 0%, 55%)") == cmyk(70, 44, 0, 55)

    def test_plain_space_ignores_fourth_value(self):
        assert from_string("rgb(1, 2, 3, 0.5)") == rgb(1, 2, 3)

    def test_surrounding_whitespace(self):
        assert from_string("  hsv(1, 2, 3)\n") == hsv(1, 2, 3)

    def test_classmethod(self):
        assert Color.from_string("#234073") == parse_color("#234073")


class TestParseErrors:
    """Malformed strings raise InvalidColorString."""

    @pytest.mark.parametrize("text", [
        "red",
        "",
        "rgb(1, 2)",
        "rgb(1, 2, 3, 4, 5)",
        "rgb()",
        "rgb(a, b, c)",
        "lab(1, 2, 3)",
        "cmyk(1, 2, 3)",
        "rgb(1, 2, 3",
    ])
    def test_rejected(self, text):
        with pytest.raises(InvalidColorString):
            from_string(text)

    @pytest.mark.parametrize("text", ["rgb(1e400, 0, 0)", "hsla(0, 0%, 0%, -1e999)"])
    def test_non_finite_rejected(self, text):
        with pytest.raises(InvalidColorString, match="non-finite value"):
            from_string(text)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            from_string("nope")

    def test_carries_text(self):
        with pytest.raises(InvalidColorString, match="not a valid color") as excinfo:
            from_string(" nope ")
        assert excinfo.value.text == " nope "

    def test_reason_for_bad_count(self):
        with pytest.raises(InvalidColorString) as excinfo:
            from_string("hsl(1, 2)")
        assert "expected 3 or 4 values" in str(excinfo.value)

    def test_rejection_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="tincture.css.parser"):
            with pytest.raises(InvalidColorString):
                from_string("nope")
        assert "nope" in caplog.text


class TestParseNumber:
    """Numeric tokens with unit suffixes."""

    def test_plain(self):
        assert parse_number("90") == 90.0
        assert parse_number("-12.5") == -12.5
        assert parse_number(".5") == 0.5

    def test_units(self):
        assert parse_number("90deg") == 90.0
        assert parse_number("0.25turn") == 90.0
        assert parse_number(f"{math.pi / 2}rad") == pytest.approx(90.0)

    def test_not_a_number(self):
        with pytest.raises(ValueError, match="Not a number"):
            parse_number("deg")


class TestFormat:
    """Canonical CSS output."""

    def test_every_space(self):
        assert format_color(rgb(1, 2, 3)) == "rgb(1, 2, 3)"
        assert format_color(rgba(1, 2, 3, 0.5)) == "rgba(1, 2, 3, 0.5)"
        assert format_color(hsl(1, 2, 3)) == "hsl(1, 2%, 3%)"
        assert format_color(hsla(1, 2, 3, 0.5)) == "hsla(1, 2%, 3%, 0.5)"
        assert format_color(hsv(1, 2, 3)) == "hsv(1, 2%, 3%)"
        assert format_color(hsva(1, 2, 3, 0.5)) == "hsva(1, 2%, 3%, 0.5)"
        assert format_color(hwb(1, 2, 3)) == "hwb(1, 2%, 3%)"
        assert format_color(hwba(1, 2, 3, 0.5)) == "hwba(1, 2%, 3%, 0.5)"
        assert format_color(cmyk(1, 2, 3, 4)) == "cmyk(1%, 2%, 3%, 4%)"

    def test_whole_alpha_has_no_decimals(self):
        assert format_color(rgba(1, 2, 3)) == "rgba(1, 2, 3, 1)"

    def test_out_of_range_printed_literally(self):
        assert format_color(rgb(260, -5, 0)) == "rgb(260, -5, 0)"

    def test_str(self):
        c = hsla(100, 50, 75, 0.5)
        assert str(c) == c.to_string() == "hsla(100, 50%, 75%, 0.5)"

    def test_format_number(self):
        assert format_number(1.0) == "1"
        assert format_number(0.4) == "0.4"
        assert format_number(260) == "260"
        assert format_number(-395) == "-395"

    def test_parse_format_roundtrip(self):
        for c in (rgba(10, 20, 30, 0.5), hsla(100, 50, 75, 0.25), cmyk(1, 2, 3, 4)):
            assert parse_color(format_color(c)) == c


class TestHex:
    """Hex output is lowercase and zero-padded."""

    def test_to_hex(self):
        assert to_hex(rgb(35, 64, 115)) == "#234073"
        assert rgb(255, 255, 255).to_hex() == "#ffffff"

    def test_zero_padded(self):
        assert to_hex(rgb(0, 1, 15)) == "#00010f"

    def test_from_other_space(self):
        assert hsl(0, 100, 50).to_hex() == "#ff0000"

    def test_hex_alpha(self):
        assert to_hex_alpha(rgba(35, 64, 115, 0.5)) == "#23407380"
        assert rgb(35, 64, 115).to_hex_alpha() == "#234073ff"
