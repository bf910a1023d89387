# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""Tests for descriptive color temperature."""

import math

import pytest

from chromaform.color import Color
from chromaform.errors import InvalidColorError
from chromaform.palette.temperature import (
    LABEL_KELVIN,
    ColorTemperature,
    ColorTemperatureLabel,
    get_color_from_temperature,
    get_color_from_temperature_label,
    get_color_temperature,
    get_color_temperature_string,
    label_for_kelvin,
    parse_temperature_label,
)
from chromaform.schema.options import TemperatureStringOptions


class TestLabels:
    @pytest.mark.parametrize(
        "text, label",
        [
            ("daylight", ColorTemperatureLabel.DAYLIGHT),
            ("Blue sky", ColorTemperatureLabel.BLUE_SKY),
            ("BLUE_SKY", ColorTemperatureLabel.BLUE_SKY),
            ("  incandescent bulb ", ColorTemperatureLabel.INCANDESCENT),
        ],
    )
    def test_parse(self, text, label):
        assert parse_temperature_label(text) is label

    def test_parse_unknown(self):
        assert parse_temperature_label("sunset") is None

    @pytest.mark.parametrize(
        "kelvin, label",
        [
            (1000, ColorTemperatureLabel.CANDLELIGHT),
            (2700, ColorTemperatureLabel.INCANDESCENT),
            (5500, ColorTemperatureLabel.DAYLIGHT),
            (6500, ColorTemperatureLabel.CLOUDY),
            (20000, ColorTemperatureLabel.BLUE_SKY),
        ],
    )
    def test_label_for_kelvin(self, kelvin, label):
        assert label_for_kelvin(kelvin) is label

    @pytest.mark.parametrize("kelvin", [0, -100, math.nan, math.inf, True])
    def test_label_for_bad_kelvin(self, kelvin):
        with pytest.raises(ValueError):
            label_for_kelvin(kelvin)


class TestColorTemperature:
    def test_white_is_daylight(self):
        assert get_color_temperature(Color("#ffffff")) == ColorTemperature(5500, ColorTemperatureLabel.DAYLIGHT)

    @pytest.mark.parametrize("label", list(ColorTemperatureLabel))
    def test_reference_colors_map_to_their_label(self, label):
        temperature = get_color_temperature(get_color_from_temperature_label(label))
        assert temperature.label is label
        assert temperature.kelvin == LABEL_KELVIN[label]

    def test_to_dict(self):
        data = get_color_temperature(Color("#ffffff")).to_dict()
        assert data == {"kelvin": 5500, "label": "Daylight"}


class TestTemperatureString:
    def test_light_neutral_gets_label(self):
        assert get_color_temperature_string(Color("#ffffff")) == "5500K (Daylight)"

    def test_saturated_color_has_no_label(self):
        assert get_color_temperature_string(Color("#ff0000")) == "1900K"

    def test_forced_label(self):
        opts = TemperatureStringOptions(include_label=True)
        assert get_color_temperature_string(Color("#ff0000"), opts) == "1900K (Candlelight)"

    def test_suppressed_label(self):
        opts = TemperatureStringOptions(include_label=False)
        assert get_color_temperature_string(Color("#ffffff"), opts) == "5500K"

    def test_color_method(self):
        assert Color("#ffffff").get_temperature_as_string(include_label=False) == "5500K"
        assert Color("#ffffff").get_temperature().kelvin == 5500


class TestFromTemperature:
    def test_from_label(self):
        daylight = get_color_from_temperature_label("daylight")
        assert daylight == Color({"h": 60, "s": 8, "l": 96})

    def test_from_unknown_label(self):
        with pytest.raises(InvalidColorError, match="sunset"):
            get_color_from_temperature_label("sunset")

    def test_from_kelvin(self):
        assert get_color_from_temperature(5600) == get_color_from_temperature_label(ColorTemperatureLabel.DAYLIGHT)

    def test_color_factories(self):
        assert Color.from_temperature(10000) == Color.from_temperature_label("blue sky")

    def test_label_is_a_color_input(self):
        assert Color("Candlelight") == get_color_from_temperature_label(ColorTemperatureLabel.CANDLELIGHT)
