# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
Measurements on colors: perceptual difference, text readability and
dark/light classification.
"""

from chromaform.measure.classify import is_color_dark, is_off_white
from chromaform.measure.delta_e import get_delta_e
from chromaform.measure.readability import (
    TextReadabilityReport,
    get_apca_readability_score,
    get_best_background_color,
    get_most_readable_text_color,
    get_text_readability_report,
    get_wcag_contrast_ratio,
    is_text_readable,
)

__all__ = [
    "get_delta_e",
    "get_wcag_contrast_ratio",
    "get_apca_readability_score",
    "TextReadabilityReport",
    "get_text_readability_report",
    "is_text_readable",
    "get_most_readable_text_color",
    "get_best_background_color",
    "is_color_dark",
    "is_off_white",
]
