# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""Tests for mixing, averaging and blending."""

import numpy as np
import pytest

from chromaform.color import Color
from chromaform.ops.combinations import (
    average_colors,
    blend_colors,
    circular_mean,
    mix_colors,
    resolve_weights,
)
from chromaform.schema.models import RGBA
from chromaform.schema.options import (
    AverageOptions,
    BlendMode,
    BlendOptions,
    MixOptions,
    MixSpace,
    MixType,
)

RED = Color("#ff0000")
GREEN = Color("#00ff00")
BLUE = Color("#0000ff")


class TestWeights:
    def test_default_equal(self):
        raw, normalized = resolve_weights(4)
        np.testing.assert_allclose(raw, [1, 1, 1, 1])
        np.testing.assert_allclose(normalized, [0.25] * 4)

    def test_custom_weights_normalized(self):
        raw, normalized = resolve_weights(2, [3, 1])
        np.testing.assert_allclose(raw, [3, 1])
        np.testing.assert_allclose(normalized, [0.75, 0.25])

    def test_wrong_length_ignored(self):
        _, normalized = resolve_weights(2, [1, 2, 3])
        np.testing.assert_allclose(normalized, [0.5, 0.5])

    def test_zero_sum_reset(self):
        _, normalized = resolve_weights(2, [0, 0])
        np.testing.assert_allclose(normalized, [0.5, 0.5])


class TestCircularMean:
    def test_wraps_through_zero(self):
        h = circular_mean([350.0, 10.0], np.array([0.5, 0.5]))
        assert min(h, 360.0 - h) == pytest.approx(0.0, abs=1e-9)

    def test_weighted(self):
        h = circular_mean([0.0, 90.0], np.array([0.5, 0.5]))
        assert h == pytest.approx(45.0)


class TestMix:
    """Additive RGB mixing sums light."""

    def test_red_green_is_yellow(self):
        assert mix_colors([RED, GREEN]).to_hex() == "#ffff00"

    def test_primaries_make_white(self):
        assert mix_colors([RED, GREEN, BLUE]).to_hex() == "#ffffff"

    def test_alpha_is_weighted_mean(self):
        half_red = RED.set_alpha(0.5)
        mixed = mix_colors([half_red, BLUE])
        assert mixed.to_rgba() == RGBA(255, 0, 255, 0.75)

    def test_weights_select_one_color(self):
        assert mix_colors([RED, BLUE], MixOptions(weights=[1, 0])).to_hex() == "#ff0000"

    def test_subtractive_red_blue(self):
        assert mix_colors([RED, BLUE], MixOptions(type=MixType.SUBTRACTIVE)).to_hex() == "#000000"

    def test_subtractive_yellow_cyan_is_green(self):
        opts = MixOptions(type="subtractive")
        assert mix_colors([Color("#ffff00"), Color("#00ffff")], opts).to_hex() == "#00ff00"

    def test_linear_rgb(self):
        mixed = mix_colors([RED, GREEN], MixOptions(space=MixSpace.LINEAR_RGB))
        assert mixed.to_hex() == "#ffff00"

    def test_hsl_uses_circular_hue(self):
        mixed = mix_colors([RED, GREEN], MixOptions(space="HSL"))
        assert mixed.to_hsl().h == pytest.approx(60.0, abs=1e-6)

    def test_hsl_hue_wraps(self):
        a = Color({"h": 350, "s": 100, "l": 50})
        b = Color({"h": 10, "s": 100, "l": 50})
        h = mix_colors([a, b], MixOptions(space="HSL")).to_hsl().h
        assert min(h, 360.0 - h) == pytest.approx(0.0, abs=1e-6)

    def test_oklch_identical_colors(self):
        c = Color("#6699cc")
        assert mix_colors([c, c], MixOptions(space="OKLCH")).to_hex() == "#6699cc"

    def test_requires_two_colors(self):
        with pytest.raises(ValueError, match="at least two colors"):
            mix_colors([RED])


class TestAverage:
    def test_red_blue(self):
        assert average_colors([RED, BLUE]).to_hex() == "#800080"

    def test_never_exceeds_inputs(self):
        assert average_colors([RED, GREEN, BLUE]).to_hex() == "#555555"

    def test_linear_rgb(self):
        avg = average_colors([RED, BLUE], AverageOptions(space="LINEAR_RGB"))
        assert avg.to_float_rgba().r == pytest.approx(187.5, abs=0.1)
        assert avg.to_float_rgba().g == 0.0

    def test_weights(self):
        avg = average_colors([RED, BLUE], AverageOptions(weights=[3, 1]))
        assert avg.to_rgb().r == 191
        assert avg.to_rgb().b == 64

    def test_hsl_weighted_hue(self):
        avg = average_colors([RED, GREEN], AverageOptions(space="HSL", weights=[2, 1]))
        assert 0.0 < avg.to_hsl().h < 60.0

    def test_lch_same_color(self):
        c = Color("#abcdef")
        assert average_colors([c, c], AverageOptions(space=MixSpace.LCH)).to_hex() == "#abcdef"

    def test_requires_two_colors(self):
        with pytest.raises(ValueError, match="averaging"):
            average_colors([])


class TestBlend:
    def test_normal(self):
        assert blend_colors(RED, BLUE).to_hex() == "#800080"

    def test_multiply(self):
        assert blend_colors(RED, BLUE, BlendOptions(mode=BlendMode.MULTIPLY)).to_hex() == "#800000"

    def test_screen(self):
        assert blend_colors(RED, BLUE, BlendOptions(mode="screen")).to_hex() == "#ff0080"

    def test_overlay(self):
        opts = BlendOptions(mode="OVERLAY", ratio=1)
        assert blend_colors(Color("#808080"), Color("#ffffff"), opts).to_hex() == "#ffffff"

    def test_hsl_shortest_hue(self):
        opts = BlendOptions(space="HSL")
        assert blend_colors(RED, Color("#ff00ff"), opts).to_hex() == "#ff0080"

    def test_ratio_is_clamped(self):
        assert blend_colors(RED, BLUE, BlendOptions(ratio=2)).to_hex() == "#0000ff"
        assert blend_colors(RED, BLUE, BlendOptions(ratio=-1)).to_hex() == "#ff0000"

    def test_alpha_interpolates(self):
        assert blend_colors(RED, BLUE.set_alpha(0)).alpha == 0.5

    def test_hsl_alpha_interpolates(self):
        """HSL blending treats alpha the same way RGB blending does."""
        opts = BlendOptions(space="HSL")
        assert blend_colors(RED, BLUE.set_alpha(0), opts).alpha == 0.5
        assert blend_colors(RED.set_alpha(0.2), BLUE, BlendOptions(space="HSL", ratio=1)).alpha == 1.0
