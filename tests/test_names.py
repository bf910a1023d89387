# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""Tests for CSS color keywords and descriptive color names."""

import pytest

from chromaform.color import Color
from chromaform.palette.names import (
    CSS_COLOR_NAMES,
    BaseColorName,
    ColorLightnessModifier,
    get_base_color_name,
    lookup_css_color_name,
)


class TestCssNames:
    def test_lookup_is_case_insensitive(self):
        assert lookup_css_color_name("RebeccaPurple") == "#663399"
        assert lookup_css_color_name("  navy ") == "#000080"

    def test_unknown(self):
        assert lookup_css_color_name("blurple") is None

    def test_grey_aliases(self):
        assert CSS_COLOR_NAMES["darkgrey"] == CSS_COLOR_NAMES["darkgray"]

    def test_transparent(self):
        assert Color("transparent").alpha == 0.0

    def test_parsed_by_color(self):
        assert Color("cornflowerblue").to_hex() == "#6495ed"


class TestBaseColorName:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("#ff0000", "red"),
            ("#ff002b", "red"),
            ("#ffa500", "orange"),
            ("#ffff00", "yellow"),
            ("#00ff00", "green"),
            ("#0000ff", "blue"),
            ("#87cefa", "light blue"),
            ("#8000ff", "purple"),
            ("#ff00ff", "pink"),
            ("#800000", "dark red"),
            ("#808080", "gray"),
            ("#333333", "dark gray"),
            ("#cccccc", "light gray"),
        ],
    )
    def test_names(self, value, expected):
        assert str(get_base_color_name(Color(value))) == expected

    @pytest.mark.parametrize("value", ["#000000", "#0a0a0a", "#100f0f"])
    def test_black(self, value):
        assert get_base_color_name(Color(value)).name is BaseColorName.BLACK

    @pytest.mark.parametrize("value", ["#ffffff", "#f0f0f0"])
    def test_white(self, value):
        assert get_base_color_name(Color(value)).name is BaseColorName.WHITE

    def test_structured_result(self):
        name = get_base_color_name(Color("#87cefa"))
        assert name.name is BaseColorName.BLUE
        assert name.lightness is ColorLightnessModifier.LIGHT

    def test_color_methods(self):
        assert Color("#ff0000").get_name().name is BaseColorName.RED
        assert Color("#800000").get_name_as_string() == "dark red"
