# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""Tests for WCAG contrast, APCA scores and readable color selection."""

import numpy as np
import pytest

from chromaform.color import Color
from chromaform.measure.readability import (
    apca_contrast,
    composite_over,
    get_apca_readability_score,
    get_best_background_color,
    get_most_readable_text_color,
    get_text_readability_report,
    get_wcag_contrast_ratio,
    is_text_readable,
)
from chromaform.schema.models import RGBA
from chromaform.schema.options import (
    ConformanceLevel,
    ReadabilityAlgorithm,
    ReadabilityComparisonOptions,
    TextReadabilityOptions,
    TextSize,
)

BLACK = Color("#000000")
WHITE = Color("#ffffff")
MID_GRAY = Color("#777777")


class TestCompositing:
    def test_opaque_foreground_wins(self):
        assert composite_over(RGBA(255, 0, 0, 1.0), RGBA(0, 0, 255, 1.0)) == RGBA(255, 0, 0, 1.0)

    def test_half_transparent(self):
        out = composite_over(RGBA(0, 0, 0, 0.5), RGBA(255, 255, 255, 1.0))
        assert out.r == pytest.approx(127.5)
        assert out.a == 1.0

    def test_both_transparent(self):
        assert composite_over(RGBA(0, 0, 0, 0.0), RGBA(10, 20, 30, 0.0)).a == 0.0


class TestWcagContrast:
    def test_black_white(self):
        assert get_wcag_contrast_ratio(BLACK, WHITE) == 21.0
        assert get_wcag_contrast_ratio(WHITE, BLACK) == 21.0

    def test_same_color(self):
        assert get_wcag_contrast_ratio(MID_GRAY, MID_GRAY) == 1.0

    def test_grays(self):
        assert get_wcag_contrast_ratio(Color("#444444"), Color("#bbbbbb")) == 5.07

    def test_transparent_text_vanishes(self):
        assert get_wcag_contrast_ratio(BLACK.set_alpha(0), WHITE) == 1.0

    def test_color_method_coerces(self):
        assert BLACK.get_contrast_ratio("white") == 21.0

    @pytest.mark.parametrize("seed", [0, 3, 2026])
    def test_symmetric_and_bounded(self, seed):
        """Random pairs, some translucent, give the same ratio both ways within [1, 21]."""
        rng = np.random.default_rng(seed)
        for _ in range(200):
            a = Color.random(rng)
            b = Color.random(rng).set_alpha(float(rng.random()))
            ratio = get_wcag_contrast_ratio(a, b)
            assert ratio == get_wcag_contrast_ratio(b, a)
            assert 1.0 <= ratio <= 21.0


class TestApca:
    def test_dark_on_light_is_positive(self):
        assert get_apca_readability_score(BLACK, WHITE) == pytest.approx(106.04, abs=0.01)

    def test_light_on_dark_is_negative(self):
        assert get_apca_readability_score(WHITE, BLACK) == pytest.approx(-107.88, abs=0.01)

    def test_same_color_is_zero(self):
        assert get_apca_readability_score(MID_GRAY, MID_GRAY) == 0.0

    def test_out_of_range_luminance(self):
        assert apca_contrast(-0.1, 0.5) == 0.0
        assert apca_contrast(0.2, 1.5) == 0.0

    def test_color_method(self):
        assert BLACK.get_readability_score(WHITE) > 100


class TestTextReadability:
    def test_report_below_aa(self):
        report = get_text_readability_report(MID_GRAY, WHITE)
        assert report.contrast_ratio == 4.48
        assert report.required_contrast == 4.5
        assert not report.is_readable
        assert report.shortfall == pytest.approx(0.02)

    def test_large_text_passes(self):
        opts = TextReadabilityOptions(size=TextSize.LARGE)
        assert is_text_readable(MID_GRAY, WHITE, opts)

    def test_aaa_thresholds(self):
        opts = TextReadabilityOptions(level="aaa", size="large")
        report = get_text_readability_report(BLACK, WHITE, opts)
        assert report.required_contrast == 4.5
        assert report.shortfall == 0.0

    def test_report_to_dict(self):
        data = get_text_readability_report(BLACK, WHITE).to_dict()
        assert data == {
            "contrast_ratio": 21.0,
            "required_contrast": 4.5,
            "is_readable": True,
            "shortfall": 0.0,
        }

    def test_color_methods(self):
        assert MID_GRAY.is_readable_as_text_color(WHITE, size="LARGE")
        assert not MID_GRAY.is_readable_as_text_color(WHITE, level=ConformanceLevel.AA)
        assert MID_GRAY.get_text_readability_report("#ffffff").contrast_ratio == 4.48


class TestMostReadable:
    def test_picks_black_on_white(self):
        candidates = [Color("#ffff00"), MID_GRAY, BLACK]
        assert get_most_readable_text_color(WHITE, candidates) is BLACK

    def test_readable_beats_unreadable(self):
        # White on #777777 is 4.48, black is 4.69
        assert get_most_readable_text_color(MID_GRAY, [WHITE, BLACK]) is BLACK

    def test_smallest_shortfall_among_unreadable(self):
        candidates = [Color("#eeeeee"), Color("#cccccc")]
        assert get_most_readable_text_color(WHITE, candidates).to_hex() == "#cccccc"

    def test_tie_keeps_first(self):
        first, second = Color("#000000"), Color("#000000")
        assert get_most_readable_text_color(WHITE, [first, second]) is first

    def test_apca(self):
        opts = ReadabilityComparisonOptions(algorithm=ReadabilityAlgorithm.APCA)
        assert get_most_readable_text_color(BLACK, [MID_GRAY, WHITE], opts) is WHITE

    def test_empty_candidates(self):
        with pytest.raises(ValueError, match="at least one"):
            get_most_readable_text_color(WHITE, [])

    def test_color_method_uses_self_as_background(self):
        assert Color("#111111").get_most_readable_text_color(["#000000", "#ffffff"]).to_hex() == "#ffffff"


class TestBestBackground:
    def test_picks_white_for_black_text(self):
        assert get_best_background_color(BLACK, [MID_GRAY, WHITE]) is WHITE

    def test_empty_candidates(self):
        with pytest.raises(ValueError, match="background"):
            get_best_background_color(BLACK, [])

    def test_color_method_uses_self_as_text(self):
        assert WHITE.get_best_background_color(["#eeeeee", "#222222"]).to_hex() == "#222222"


class TestOptions:
    def test_defaults(self):
        opts = ReadabilityComparisonOptions()
        assert opts.algorithm is ReadabilityAlgorithm.WCAG
        assert opts.text.level is ConformanceLevel.AA
        assert opts.text.size is TextSize.SMALL

    def test_algorithm_coerced(self):
        assert ReadabilityComparisonOptions(algorithm="apca").algorithm is ReadabilityAlgorithm.APCA
