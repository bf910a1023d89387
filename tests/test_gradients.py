# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""Tests for multi-stop gradient generation."""

import math

import pytest

from chromaform.color import Color
from chromaform.errors import UnsupportedOptionError
from chromaform.ops.gradients import (
    create_color_gradient,
    get_easing_function,
    unwind_hues,
)
from chromaform.schema.options import (
    Easing,
    GradientOptions,
    GradientSpace,
    HueInterpolationMode,
    Interpolation,
)

RED = Color("#ff0000")
GREEN = Color("#00ff00")
BLUE = Color("#0000ff")


def _hexes(colors):
    return [c.to_hex() for c in colors]


def _hsl_mid_hue(a, b, mode):
    opts = GradientOptions(stops=3, space="HSL", hue_interpolation_mode=mode)
    return create_color_gradient([a, b], opts)[1].to_hsl().h


class TestLinearRgb:
    def test_red_to_blue(self):
        stops = create_color_gradient([RED, BLUE], GradientOptions(space="RGB"))
        assert _hexes(stops) == ["#ff0000", "#bf0040", "#800080", "#4000bf", "#0000ff"]

    def test_through_three_anchors(self):
        stops = create_color_gradient([RED, GREEN, BLUE], GradientOptions(stops=5, space="RGB"))
        assert _hexes(stops) == ["#ff0000", "#808000", "#00ff00", "#008080", "#0000ff"]

    def test_alpha_interpolates(self):
        stops = create_color_gradient([RED.set_alpha(0), RED], GradientOptions(stops=3, space="RGB"))
        assert stops[1].alpha == 0.5


class TestAnchors:
    """Samples that land on an anchor return the anchor itself."""

    def test_endpoints_are_identical_objects(self):
        stops = create_color_gradient([RED, BLUE])
        assert stops[0] is RED
        assert stops[-1] is BLUE

    def test_inner_anchor_is_pinned(self):
        stops = create_color_gradient([RED, GREEN, BLUE], GradientOptions(stops=5))
        assert stops[2] is GREEN

    def test_inner_anchor_pinned_with_easing(self):
        opts = GradientOptions(stops=5, easing=Easing.EASE_IN)
        assert create_color_gradient([RED, GREEN, BLUE], opts)[2] is GREEN

    def test_stop_count(self):
        assert len(create_color_gradient([RED, BLUE], GradientOptions(stops=11))) == 11

    def test_requires_two_colors(self):
        with pytest.raises(ValueError, match="at least two colors"):
            create_color_gradient([RED])


class TestHueModes:
    """Hue paths in the polar spaces."""

    def test_unwind_shortest(self):
        assert unwind_hues([350, 10, 30], HueInterpolationMode.SHORTEST) == [350, 370.0, 390.0]

    def test_hsl_wraps_through_red(self):
        a = Color({"h": 350, "s": 100, "l": 50})
        b = Color({"h": 10, "s": 100, "l": 50})
        stops = create_color_gradient([a, b], GradientOptions(space=GradientSpace.HSL))
        assert _hexes(stops) == ["#ff002b", "#ff0015", "#ff0000", "#ff1500", "#ff2a00"]

    @pytest.mark.parametrize(
        "mode, hue",
        [
            (HueInterpolationMode.SHORTEST, 300.0),
            (HueInterpolationMode.LONGEST, 120.0),
            (HueInterpolationMode.INCREASING, 120.0),
            (HueInterpolationMode.DECREASING, 300.0),
        ],
    )
    def test_direction(self, mode, hue):
        assert _hsl_mid_hue(RED, BLUE, mode) == pytest.approx(hue, abs=0.5)

    def test_longest_with_equal_hues_stays(self):
        assert _hsl_mid_hue(RED, Color("#800000"), "longest") == pytest.approx(0.0, abs=0.5)

    def test_raw_interpolates_numbers(self):
        a = Color({"h": 350, "s": 100, "l": 50})
        b = Color({"h": 10, "s": 100, "l": 50})
        assert _hsl_mid_hue(a, b, HueInterpolationMode.RAW) == pytest.approx(180.0, abs=0.5)

    def test_cartesian_passes_through_gray(self):
        opts = GradientOptions(stops=3, space="HSL", hue_interpolation_mode="cartesian")
        mid = create_color_gradient([RED, Color("#00ffff")], opts)[1]
        assert mid.to_hex() == "#808080"

    def test_gray_anchor_borrows_hue(self):
        assert _hsl_mid_hue(Color("#ffffff"), BLUE, "shortest") == pytest.approx(240.0, abs=0.5)

    def test_oklch_gray_anchor_borrows_hue(self):
        opts = GradientOptions(stops=3, space="OKLCH")
        steel = Color("#6699cc")
        mid = create_color_gradient([Color("#808080"), steel], opts)[1]
        assert mid.to_oklch().h == pytest.approx(steel.to_oklch().h, abs=1.0)


class TestSpaces:
    @pytest.mark.parametrize("space", list(GradientSpace))
    def test_every_space_keeps_endpoints(self, space):
        stops = create_color_gradient([Color("#6699cc"), Color("#ffcc00")], GradientOptions(space=space))
        assert stops[0].to_hex() == "#6699cc"
        assert stops[-1].to_hex() == "#ffcc00"
        assert len(stops) == 5

    def test_oklab_midpoint_is_between(self):
        stops = create_color_gradient([Color("#000000"), Color("#ffffff")], GradientOptions(stops=3, space="OKLAB"))
        assert stops[1].to_oklab().l == pytest.approx(0.5, abs=1e-6)


class TestEndpointsAcrossOptions:
    """The first and last anchors come back unchanged for every option combination."""

    ANCHORS = (Color("#6699cc"), Color("#808080"), Color("#ffcc0080"))

    @pytest.mark.parametrize("interpolation", list(Interpolation))
    @pytest.mark.parametrize("stops", [2, 3, 17])
    @pytest.mark.parametrize("mode", list(HueInterpolationMode))
    @pytest.mark.parametrize("space", list(GradientSpace))
    def test_endpoints_are_the_anchors(self, space, mode, stops, interpolation):
        first, middle, last = self.ANCHORS
        opts = GradientOptions(
            stops=stops,
            space=space,
            hue_interpolation_mode=mode,
            interpolation=interpolation,
        )
        result = create_color_gradient([first, middle, last], opts)
        assert len(result) == stops
        assert result[0] is first
        assert result[-1] is last
        if interpolation is Interpolation.LINEAR and stops > 2:
            assert result[(stops - 1) // 2] is middle


class TestBezier:
    def test_middle_anchor_is_a_control_point(self):
        opts = GradientOptions(stops=3, space="RGB", interpolation=Interpolation.BEZIER)
        stops = create_color_gradient([RED, GREEN, BLUE], opts)
        assert stops[1] is not GREEN
        assert stops[1].to_float_rgba().g == pytest.approx(127.5)
        assert stops[1].to_float_rgba().r == pytest.approx(63.75)

    def test_endpoints_pinned(self):
        opts = GradientOptions(interpolation="bezier")
        stops = create_color_gradient([RED, GREEN, BLUE], opts)
        assert stops[0] is RED
        assert stops[-1] is BLUE


class TestEasing:
    def test_named_functions(self):
        assert get_easing_function(Easing.EASE_IN)(0.5) == 0.25
        assert get_easing_function("ease-out")(0.5) == 0.75
        assert get_easing_function("EASE_IN_OUT")(0.25) == 0.125

    def test_ease_in_gradient(self):
        opts = GradientOptions(stops=3, space="RGB", easing="ease-in")
        mid = create_color_gradient([Color("#000000"), Color("#ffffff")], opts)[1]
        assert mid.to_float_rgba().r == pytest.approx(63.75)

    def test_custom_callable(self):
        opts = GradientOptions(stops=3, space="RGB", easing=lambda t: 0.0)
        mid = create_color_gradient([RED, BLUE], opts)[1]
        assert mid.to_hex() == "#ff0000"

    def test_easing_output_is_clamped(self):
        opts = GradientOptions(stops=3, space="RGB", easing=lambda t: 2.0)
        assert create_color_gradient([RED, BLUE], opts)[1].to_hex() == "#0000ff"


class TestGradientOptions:
    def test_defaults(self):
        opts = GradientOptions()
        assert opts.stops == 5
        assert opts.space is GradientSpace.OKLCH
        assert opts.hue_interpolation_mode is HueInterpolationMode.SHORTEST

    def test_stops_rounded_and_floored(self):
        assert GradientOptions(stops=2.5).stops == 3
        assert GradientOptions(stops=1).stops == 2
        assert GradientOptions(stops=-4).stops == 2

    def test_stops_must_be_finite(self):
        with pytest.raises(ValueError):
            GradientOptions(stops=math.nan)

    @pytest.mark.parametrize("stops", [True, False])
    def test_stops_rejects_bool(self, stops):
        """A bool is not a stop count even though bool subclasses int."""
        with pytest.raises(ValueError):
            GradientOptions(stops=stops)

    def test_bad_space(self):
        with pytest.raises(UnsupportedOptionError):
            GradientOptions(space="cmyk")
