# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""Tests for CSS-like color string parsing and formatting."""

import pytest

from chromaform.color import Color
from chromaform.core.parse import (
    cmyk_string,
    color_space_string,
    format_number,
    hsl_string,
    lab_string,
    looks_like_css_function,
    oklch_string,
    parse_css_color_string,
    parse_css_function,
    rgb_string,
)
from chromaform.errors import ColorError, InvalidColorError
from chromaform.schema.models import CMYK, HSLA, LAB, OKLCH, RGBA


def _rgb255(rgba):
    return tuple(int(v + 0.5) for v in (rgba.r, rgba.g, rgba.b))


class TestParseCssFunction:
    """Strict parsing."""

    def test_comma_separated_rgb(self):
        assert parse_css_function("rgb(255, 0, 0)") == RGBA(255.0, 0.0, 0.0, 1.0)

    def test_slash_alpha_percentage(self):
        assert parse_css_function("rgb(255 0 0 / 50%)").a == 0.5

    def test_fourth_argument_alpha(self):
        assert parse_css_function("rgba(255, 0, 0, 0.25)").a == 0.25

    def test_channel_percentages(self):
        assert _rgb255(parse_css_function("rgb(100% 50% 0%)")) == (255, 128, 0)

    def test_case_and_whitespace(self):
        assert parse_css_function("  RGB( 0 , 0 , 255 ) ") == RGBA(0.0, 0.0, 255.0, 1.0)

    def test_hsl_with_units(self):
        assert _rgb255(parse_css_function("hsl(120deg 100% 50%)")) == (0, 255, 0)

    def test_hue_in_turns(self):
        assert _rgb255(parse_css_function("hsl(0.5turn 100% 50%)")) == (0, 255, 255)

    def test_hwb(self):
        assert _rgb255(parse_css_function("hwb(0 0% 0%)")) == (255, 0, 0)

    def test_device_cmyk(self):
        assert _rgb255(parse_css_function("device-cmyk(0% 100% 100% 0%)")) == (255, 0, 0)

    def test_lab_lightness_percentage(self):
        assert _rgb255(parse_css_function("lab(100% 0 0)")) == (255, 255, 255)

    def test_oklch(self):
        assert _rgb255(parse_css_function("oklch(62.796% 0.25768 29.234)")) == (255, 0, 0)

    def test_display_p3(self):
        assert _rgb255(parse_css_function("color(display-p3 0.5 0.2 0.1)")) == (138, 44, 13)

    def test_rec2020(self):
        assert _rgb255(parse_css_function("color(rec2020 0.25 0.5 0.75)")) == (0, 144, 204)

    def test_color_function_alpha(self):
        assert parse_css_function("color(srgb 1 0 0 / 0.4)").a == 0.4

    @pytest.mark.parametrize(
        "text",
        [
            "rgba(255,0,0,2)",
            "rgb(256, 0, 0)",
            "rgb(1, 2)",
            "hsl(10% 50% 50%)",
            "rgb(1px 2 3)",
            "cmyk(0 100 100 0 / 0.5)",
            "color(srgb 1.5 0 0)",
            "rgb(1 2 3 / )",
            "not-a-function",
        ],
    )
    def test_invalid(self, text):
        with pytest.raises(InvalidColorError):
            parse_css_function(text)

    def test_unknown_function(self):
        with pytest.raises(InvalidColorError, match="unknown color function"):
            parse_css_function("foo(1 2 3)")

    def test_unknown_color_space(self):
        with pytest.raises(ColorError):
            parse_css_function("color(prophoto 1 0 0)")

    def test_looks_like_function(self):
        assert looks_like_css_function("rgb(1 2 3)")
        assert not looks_like_css_function("red")


class TestParseCssColorString:
    """Permissive parsing never raises."""

    def test_hex(self):
        assert parse_css_color_string("#abc").to_hex() == "#aabbcc"

    def test_function(self):
        assert parse_css_color_string("rgba(255, 0, 0, 50%)").to_rgba() == RGBA(255, 0, 0, 0.5)

    def test_returns_color(self):
        assert isinstance(parse_css_color_string("hsl(0 100% 50%)"), Color)

    @pytest.mark.parametrize("text", ["rgba(255,0,0,2)", "", "#12", "rgb(", "red", 42, None])
    def test_invalid_returns_none(self, text):
        assert parse_css_color_string(text) is None


class TestNonFiniteNumbers:
    """Numbers that overflow to infinity are rejected, not raised as OverflowError."""

    @pytest.mark.parametrize(
        "text",
        [
            "rgb(255 0 0 / 1e400)",
            "hsl(0 50% 50% / 1e400%)",
            "rgb(1e400, 0, 0, 1e400)",
            "rgb(1e400 0 0)",
            "hsl(1e308turn 50% 50%)",
            "color(srgb 1 0 0 / 1e400)",
        ],
    )
    def test_permissive_returns_none(self, text):
        assert parse_css_color_string(text) is None

    def test_strict_raises(self):
        with pytest.raises(InvalidColorError):
            parse_css_function("rgb(255 0 0 / 1e400)")

    def test_color_raises(self):
        with pytest.raises(InvalidColorError):
            Color("rgb(255 0 0 / 1e400)")


class TestEmptyCommaSlots:
    """Comma syntax needs a value between every pair of commas."""

    @pytest.mark.parametrize(
        "text",
        ["rgb(255,,0,0)", "rgb(,255,0,0)", "rgb(255,0,0,)", "hsl(0, , 50%)", "rgb(255, 0, 0, / 0.5)"],
    )
    def test_permissive_returns_none(self, text):
        assert parse_css_color_string(text) is None

    @pytest.mark.parametrize("text", ["rgb(255,,0,0)", "rgb(,255,0,0)", "rgb(255,0,0,)"])
    def test_color_raises(self, text):
        with pytest.raises(InvalidColorError):
            Color(text)

    def test_filled_slots_still_parse(self):
        assert parse_css_function("rgb( 255 ,0,  0 )") == RGBA(255.0, 0.0, 0.0, 1.0)


class TestFormatting:
    """Modern space-separated output."""

    def test_format_number_trims_zeros(self):
        assert format_number(0.1230) == "0.123"
        assert format_number(1.0) == "1"
        assert format_number(2.5) == "2.5"

    def test_format_number_negative_zero(self):
        assert format_number(-0.0001) == "0"

    def test_format_number_rounds_half_up(self):
        assert format_number(-20.5) == "-20.5"

    def test_rgb_string(self):
        assert rgb_string(RGBA(255, 0, 0, 1)) == "rgb(255 0 0)"
        assert rgb_string(RGBA(255, 0, 0, 0.5)) == "rgb(255 0 0 / 0.5)"

    def test_rgb_string_forced_alpha(self):
        assert rgb_string(RGBA(255, 0, 0, 1), force_alpha=True) == "rgb(255 0 0 / 1)"

    def test_hsl_string(self):
        assert hsl_string(HSLA(0, 100, 50, 1)) == "hsl(0 100% 50%)"

    def test_cmyk_string(self):
        assert cmyk_string(CMYK(0, 100, 100, 0)) == "device-cmyk(0% 100% 100% 0%)"

    def test_lab_string(self):
        assert lab_string(LAB(50, -20.5, 10)) == "lab(50% -20.5 10)"

    def test_oklch_string_with_alpha(self):
        assert oklch_string(OKLCH(0.5, 0.1, 120), 0.25) == "oklch(0.5 0.1 120 / 0.25)"

    def test_color_space_string(self):
        assert color_space_string("display-p3", [1, 0, 0]) == "color(display-p3 1 0 0)"
