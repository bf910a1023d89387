# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
Text readability: WCAG 2.x contrast ratio and the APCA (WCAG 3 draft) score.

WCAG contrast ratio: (L_lighter + 0.05) / (L_darker + 0.05), in [1, 21],
rounded to 2 decimals. Translucent colors are composited over each other
first.

APCA: signed lightness contrast Lc, roughly -108 to +106. Positive means
dark text on a light background, negative the reverse. The draft is not
final; treat scores as advisory.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from chromaform.core.numeric import round_half_up, wcag_relative_luminance
from chromaform.schema.models import RGBA
from chromaform.schema.options import (
    ConformanceLevel,
    ReadabilityAlgorithm,
    ReadabilityComparisonOptions,
    TextReadabilityOptions,
    TextSize,
)

if TYPE_CHECKING:
    from chromaform.color import Color


# =============================================================================
# Compositing
# =============================================================================

_OPAQUE_WHITE = RGBA(255.0, 255.0, 255.0, 1.0)


def composite_over(fg: RGBA, bg: RGBA) -> RGBA:
    """Source-over alpha compositing of ``fg`` on ``bg``."""
    alpha = fg.a + bg.a * (1.0 - fg.a)
    if alpha == 0:
        return RGBA(bg.r, bg.g, bg.b, 0.0)

    def channel(f: float, b: float) -> float:
        return (f * fg.a + b * bg.a * (1.0 - fg.a)) / alpha

    return RGBA(channel(fg.r, bg.r), channel(fg.g, bg.g), channel(fg.b, bg.b), alpha)


def _relative_luminance(rgba: RGBA) -> float:
    return wcag_relative_luminance(rgba.r, rgba.g, rgba.b)


# =============================================================================
# WCAG 2.x
# =============================================================================


def get_wcag_contrast_ratio(color_a: "Color", color_b: "Color") -> float:
    """
    WCAG 2.x contrast ratio, symmetric in its arguments.

    Example:
        >>> get_wcag_contrast_ratio(Color("#000000"), Color("#ffffff"))
        21.0
    """
    a = color_a.to_rgba()
    b = color_b.to_rgba()
    if a.a == 0 and b.a == 0:
        return 1.0

    a_over_b = composite_over(a, b) if a.a < 1 else a
    b_over_a = composite_over(b, a) if b.a < 1 else b
    l1 = _relative_luminance(a_over_b)
    l2 = _relative_luminance(b_over_a)
    ratio = (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)
    return round_half_up(ratio, 2)


# =============================================================================
# APCA
# =============================================================================

# SA98G constants
APCA_MAIN_TRC = 2.4
APCA_R_COEFFICIENT = 0.2126729
APCA_G_COEFFICIENT = 0.7151522
APCA_B_COEFFICIENT = 0.072175
APCA_NORM_BG = 0.56
APCA_NORM_TXT = 0.57
APCA_REV_BG = 0.65
APCA_REV_TXT = 0.62
APCA_SCALE_BOW = 1.14
APCA_SCALE_WOB = 1.14
APCA_BLACK_THRESHOLD = 0.022
APCA_BLACK_CLAMP = 1.414
APCA_DELTA_Y_MIN = 0.0005
APCA_LOW_CLIP = 0.1
APCA_LOW_BOW_OFFSET = 0.027
APCA_LOW_WOB_OFFSET = 0.027


def _apca_luminance(rgba: RGBA) -> float:
    def linear(c: float) -> float:
        return (c / 255.0) ** APCA_MAIN_TRC

    return (
        APCA_R_COEFFICIENT * linear(rgba.r)
        + APCA_G_COEFFICIENT * linear(rgba.g)
        + APCA_B_COEFFICIENT * linear(rgba.b)
    )


def _soft_clamp_black(y: float) -> float:
    if y > APCA_BLACK_THRESHOLD:
        return y
    return y + (APCA_BLACK_THRESHOLD - y) ** APCA_BLACK_CLAMP


def apca_contrast(text_y: float, background_y: float) -> float:
    """Lc from text and background luminance; 0 for out-of-range input."""
    if not (0.0 <= min(text_y, background_y) and max(text_y, background_y) <= 1.1):
        return 0.0

    text_y = _soft_clamp_black(text_y)
    background_y = _soft_clamp_black(background_y)
    if abs(background_y - text_y) < APCA_DELTA_Y_MIN:
        return 0.0

    if background_y > text_y:
        sapc = (background_y ** APCA_NORM_BG - text_y ** APCA_NORM_TXT) * APCA_SCALE_BOW
        output = 0.0 if sapc < APCA_LOW_CLIP else sapc - APCA_LOW_BOW_OFFSET
    else:
        sapc = (background_y ** APCA_REV_BG - text_y ** APCA_REV_TXT) * APCA_SCALE_WOB
        output = 0.0 if sapc > -APCA_LOW_CLIP else sapc + APCA_LOW_WOB_OFFSET
    return output * 100.0


def get_apca_readability_score(foreground: "Color", background: "Color") -> float:
    """
    APCA Lc of ``foreground`` text on ``background``.

    A translucent background is composited over white, then a translucent
    foreground over the result.
    """
    fg = foreground.to_rgba()
    bg = background.to_rgba()
    bg_opaque = composite_over(bg, _OPAQUE_WHITE) if bg.a < 1 else bg
    fg_opaque = composite_over(fg, bg_opaque) if fg.a < 1 else fg
    return apca_contrast(_apca_luminance(fg_opaque), _apca_luminance(bg_opaque))


# =============================================================================
# Text readability
# =============================================================================

WCAG_CONTRAST_THRESHOLDS: dict[ConformanceLevel, dict[TextSize, float]] = {
    ConformanceLevel.AA: {TextSize.SMALL: 4.5, TextSize.LARGE: 3.0},
    ConformanceLevel.AAA: {TextSize.SMALL: 7.0, TextSize.LARGE: 4.5},
}


@dataclass(frozen=True)
class TextReadabilityReport:
    """
    WCAG conformance of a text/background pair.

    Attributes:
        contrast_ratio: WCAG contrast ratio of the pair
        required_contrast: Minimum ratio for the requested level and size
        is_readable: contrast_ratio >= required_contrast
        shortfall: How far below the requirement the pair is (0 when met)
    """

    contrast_ratio: float
    required_contrast: float
    is_readable: bool
    shortfall: float

    def to_dict(self) -> dict:
        return {
            "contrast_ratio": self.contrast_ratio,
            "required_contrast": self.required_contrast,
            "is_readable": self.is_readable,
            "shortfall": self.shortfall,
        }


def get_text_readability_report(
    foreground: "Color",
    background: "Color",
    options: Optional[TextReadabilityOptions] = None,
) -> TextReadabilityReport:
    opts = options or TextReadabilityOptions()
    ratio = get_wcag_contrast_ratio(foreground, background)
    required = WCAG_CONTRAST_THRESHOLDS[opts.level][opts.size]
    return TextReadabilityReport(
        contrast_ratio=ratio,
        required_contrast=required,
        is_readable=ratio >= required,
        shortfall=max(0.0, required - ratio),
    )


def is_text_readable(
    foreground: "Color",
    background: "Color",
    options: Optional[TextReadabilityOptions] = None,
) -> bool:
    return get_text_readability_report(foreground, background, options).is_readable


@dataclass(frozen=True)
class _Candidate:
    score: float
    is_readable: bool
    shortfall: float

    def beats(self, best: "_Candidate") -> bool:
        if self.is_readable != best.is_readable:
            return self.is_readable
        if not self.is_readable and self.shortfall != best.shortfall:
            return self.shortfall < best.shortfall
        return self.score > best.score


def _evaluate(
    foreground: "Color",
    background: "Color",
    opts: ReadabilityComparisonOptions,
) -> _Candidate:
    if opts.algorithm is ReadabilityAlgorithm.APCA:
        return _Candidate(abs(get_apca_readability_score(foreground, background)), True, 0.0)
    report = get_text_readability_report(foreground, background, opts.text)
    return _Candidate(report.contrast_ratio, report.is_readable, report.shortfall)


def get_most_readable_text_color(
    background: "Color",
    candidates: Sequence["Color"],
    options: Optional[ReadabilityComparisonOptions] = None,
) -> "Color":
    """
    Pick the candidate text color that reads best on ``background``.

    Readable candidates win over unreadable ones; among unreadable ones the
    smallest shortfall wins; otherwise the highest score. Ties keep the
    earliest candidate.

    Raises:
        ValueError: if ``candidates`` is empty.
    """
    if not candidates:
        raise ValueError("at least one text color must be provided")
    opts = options or ReadabilityComparisonOptions()

    best = candidates[0]
    best_result = _evaluate(best, background, opts)
    for candidate in candidates[1:]:
        result = _evaluate(candidate, background, opts)
        if result.beats(best_result):
            best, best_result = candidate, result
    return best


def get_best_background_color(
    text: "Color",
    candidates: Sequence["Color"],
    options: Optional[ReadabilityComparisonOptions] = None,
) -> "Color":
    """
    Pick the candidate background on which ``text`` reads best.

    Raises:
        ValueError: if ``candidates`` is empty.
    """
    if not candidates:
        raise ValueError("at least one background color must be provided")
    opts = options or ReadabilityComparisonOptions()

    best = candidates[0]
    best_result = _evaluate(text, best, opts)
    for candidate in candidates[1:]:
        result = _evaluate(text, candidate, opts)
        if result.beats(best_result):
            best, best_result = candidate, result
    return best
