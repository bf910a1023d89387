# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""Tests for lightness, saturation, hue and grayscale manipulation."""

import math

import pytest

from chromaform.color import Color
from chromaform.errors import UnsupportedOptionError
from chromaform.ops.manipulations import (
    LAB_STEP,
    brighten_color,
    color_to_grayscale,
    darken_color,
    desaturate_color,
    saturate_color,
    spin_color_hue,
)
from chromaform.schema.options import ManipulationOptions, ManipulationSpace


class TestLightness:
    """brighten / darken."""

    def test_brighten_black(self):
        assert brighten_color(Color("#000000")).to_hex() == "#1a1a1a"

    def test_brighten_red(self):
        assert brighten_color(Color("#ff0000")).to_hex() == "#ff3333"

    def test_darken_red(self):
        assert darken_color(Color("#ff0000")).to_hex() == "#cc0000"

    def test_lightness_is_clamped(self):
        assert darken_color(Color("#000000")).to_hex() == "#000000"
        assert brighten_color(Color("#ffffff"), ManipulationOptions(amount=50)).to_hex() == "#ffffff"

    def test_lab_space_scales_amount(self):
        gray = Color("#808080")
        brighter = brighten_color(gray, ManipulationOptions(space=ManipulationSpace.LAB))
        assert brighter.to_lab().l == pytest.approx(gray.to_lab().l + LAB_STEP, abs=0.01)

    def test_lch_space(self):
        gray = Color("#808080")
        darker = darken_color(gray, ManipulationOptions(amount=5, space="LCH"))
        assert darker.to_lch().l == pytest.approx(gray.to_lch().l - LAB_STEP / 2, abs=0.01)

    def test_alpha_is_kept(self):
        assert brighten_color(Color("#ff000080")).alpha == pytest.approx(0.502)


class TestSaturation:
    def test_saturate_hsl(self):
        assert saturate_color(Color("#6699cc"), ManipulationOptions(amount=20)).to_hex() == "#5299e0"

    def test_desaturate_to_gray(self):
        assert desaturate_color(Color("#ff0000"), ManipulationOptions(amount=100)).to_hex() == "#808080"

    def test_lch_saturate_gray_gains_chroma(self):
        result = saturate_color(Color("#808080"), ManipulationOptions(space="LCH"))
        assert result.to_lch().c == pytest.approx(LAB_STEP, abs=0.05)

    def test_lch_desaturate_floors_chroma(self):
        result = desaturate_color(Color("#ff0000"), ManipulationOptions(amount=100, space="LCH"))
        assert result.to_hsl().s < 1.0

    def test_lab_mode_moves_chroma(self):
        red = Color("#ff0000")
        duller = desaturate_color(red, ManipulationOptions(space="LAB"))
        assert duller.to_lch().c < red.to_lch().c


class TestSpin:
    def test_complement(self):
        assert spin_color_hue(Color("#ff0000"), 180).to_hex() == "#00ffff"

    def test_fractional_negative_spin_floors(self):
        assert spin_color_hue(Color("#ff0000"), -30.7).to_hex() == "#ff0084"

    def test_full_turn(self):
        assert spin_color_hue(Color("#ff0000"), 360).to_hex() == "#ff0000"

    def test_rejects_non_finite(self):
        with pytest.raises(ValueError):
            spin_color_hue(Color("#ff0000"), math.nan)

    def test_rejects_bool(self):
        with pytest.raises(ValueError):
            spin_color_hue(Color("#ff0000"), True)


class TestGrayscale:
    def test_red(self):
        assert color_to_grayscale(Color("#ff0000")).to_hex() == "#808080"

    def test_keeps_alpha(self):
        assert color_to_grayscale(Color("#ff000080")).to_hex8() == "#80808080"


class TestManipulationOptions:
    def test_defaults(self):
        opts = ManipulationOptions()
        assert opts.amount == 10.0
        assert opts.space is ManipulationSpace.HSL

    def test_space_name_is_case_insensitive(self):
        assert ManipulationOptions(space="lch").space is ManipulationSpace.LCH

    def test_bad_space(self):
        with pytest.raises(UnsupportedOptionError):
            ManipulationOptions(space="xyz")

    def test_non_finite_amount(self):
        with pytest.raises(ValueError):
            ManipulationOptions(amount=math.inf)

    @pytest.mark.parametrize("amount", [True, False, "10"])
    def test_amount_must_be_a_number(self, amount):
        """Booleans are not amounts even though bool subclasses int."""
        with pytest.raises(ValueError):
            ManipulationOptions(amount=amount)
