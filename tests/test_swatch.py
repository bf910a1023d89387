# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""Tests for tonal swatches."""

import pytest

from chromaform.color import Color
from chromaform.palette.swatch import (
    BASE_STOPS,
    EXTENDED_STOPS,
    ColorSwatch,
    get_color_swatch,
    get_main_stop,
)
from chromaform.schema.options import SwatchOptions

RED = Color("#ff0000")


class TestMainStop:
    @pytest.mark.parametrize(
        "value, stop",
        [
            ("#123456", 700),
            ("#abcdef", 300),
            ("#ff0000", 500),
            ("#808080", 500),
            ("#0a0a0a", 800),
        ],
    )
    def test_from_lightness(self, value, stop):
        assert get_main_stop(Color(value)) == stop

    @pytest.mark.parametrize("value", ["#000000", "#ffffff"])
    def test_black_and_white_center(self, value):
        assert get_main_stop(Color(value)) == 500

    def test_center_on_500(self):
        assert get_main_stop(Color("#123456"), center_on_500=True) == 500


class TestSwatch:
    def test_base_stops(self):
        swatch = get_color_swatch(RED)
        assert list(swatch) == list(BASE_STOPS)
        assert len(swatch) == 9
        assert not swatch.extended

    def test_shades(self):
        swatch = get_color_swatch(RED)
        assert swatch[100].to_hex() == "#ffcccc"
        assert swatch[900].to_hex() == "#2e0505"

    def test_main_stop_holds_input(self):
        swatch = get_color_swatch(RED)
        assert swatch.main_stop == 500
        assert swatch.main is RED
        assert swatch[500] is RED

    def test_lighter_toward_low_stops(self):
        swatch = get_color_swatch(Color("#6699cc"))
        lightness = [swatch[stop].to_hsl().l for stop in swatch]
        assert lightness == sorted(lightness, reverse=True)

    def test_extended(self):
        swatch = get_color_swatch(RED, SwatchOptions(extended=True))
        assert list(swatch) == list(EXTENDED_STOPS)
        assert 950 in swatch
        assert swatch[50].to_hex() == "#ffe5e5"
        assert swatch[550].to_hex() == "#e30303"
        assert swatch[950].to_hex() == "#170303"

    def test_gray_stays_gray(self):
        swatch = get_color_swatch(Color("#808080"))
        assert all(color.to_hsl().s == 0 for _, color in swatch.items())

    def test_dark_input_off_center(self):
        swatch = get_color_swatch(Color("#123456"))
        assert swatch.main_stop == 700
        assert swatch[700].to_hex() == "#123456"

    def test_alpha_carried(self):
        swatch = get_color_swatch(Color("#ff000080"))
        assert swatch[100].alpha == pytest.approx(0.502)

    def test_to_dict(self):
        data = get_color_swatch(RED).to_dict()
        assert data["main_stop"] == 500
        assert data["extended"] is False
        assert data["stops"][100] == "#ffcccc"
        assert data["stops"][500] == "#ff0000"


class TestColorMethod:
    def test_overrides(self):
        swatch = RED.get_color_swatch(extended=True)
        assert isinstance(swatch, ColorSwatch)
        assert swatch.extended

    def test_center_on_500(self):
        assert Color("#123456").get_color_swatch(center_on_500=True).main_stop == 500
