# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
Full palette generation from one base color.

A palette holds:
1. The primary swatch (the base color) and one swatch per harmony color
2. Neutral swatches: pure gray and a gray faintly tinted with the base hue,
   both at the base's OKLCH lightness
3. Semantic swatches (info, positive, negative, warning, special) whose
   OKLCH hues are pulled part of the way toward the base hue so they sit
   comfortably beside it
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from chromaform.color import Color
from chromaform.core.conversions import oklch_to_rgba
from chromaform.core.numeric import clamp, normalize_hue, shortest_hue_delta
from chromaform.palette.harmonies import get_harmony_colors
from chromaform.palette.swatch import ColorSwatch, get_color_swatch
from chromaform.schema.models import OKLCH
from chromaform.schema.options import (
    ColorHarmony,
    PaletteOptions,
    SemanticHarmonizationOptions,
)


class SemanticColor(Enum):
    INFO = "info"
    POSITIVE = "positive"
    NEGATIVE = "negative"
    WARNING = "warning"
    SPECIAL = "special"


# Base OKLCH hue per semantic color
SEMANTIC_HUES: dict[SemanticColor, float] = {
    SemanticColor.INFO: 265.0,  # blue
    SemanticColor.POSITIVE: 150.0,  # green
    SemanticColor.NEGATIVE: 20.0,  # red
    SemanticColor.WARNING: 90.0,  # amber
    SemanticColor.SPECIAL: 302.0,  # magenta
}

# (chroma factor relative to the base, minimum chroma)
SEMANTIC_CHROMA: dict[SemanticColor, tuple[float, float]] = {
    SemanticColor.INFO: (0.9, 0.04),
    SemanticColor.POSITIVE: (1.0, 0.05),
    SemanticColor.NEGATIVE: (1.1, 0.06),
    SemanticColor.WARNING: (1.1, 0.06),
    SemanticColor.SPECIAL: (1.0, 0.05),
}

# Below this OKLCH chroma the base hue is noise
USABLE_HUE_MIN_CHROMA = 0.015

TINTED_NEUTRAL_CHROMA_FACTOR = 0.12
TINTED_NEUTRAL_MAX_CHROMA = 0.03


@dataclass(frozen=True)
class ColorPalette:
    primary: ColorSwatch
    secondary_colors: tuple[ColorSwatch, ...]
    neutrals: ColorSwatch
    tinted_neutrals: ColorSwatch
    black: Color
    white: Color
    info: ColorSwatch
    positive: ColorSwatch
    negative: ColorSwatch
    warning: ColorSwatch
    special: ColorSwatch

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON output."""
        result = {
            "primary": self.primary.to_dict(),
            "secondary_colors": [s.to_dict() for s in self.secondary_colors],
            "neutrals": self.neutrals.to_dict(),
            "tinted_neutrals": self.tinted_neutrals.to_dict(),
            "black": str(self.black),
            "white": str(self.white),
        }
        for semantic in SemanticColor:
            result[semantic.value] = getattr(self, semantic.value).to_dict()
        return result

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)


def _oklch_color(l: float, c: float, h: float) -> Color:
    return Color.from_rgba(oklch_to_rgba(OKLCH(l, c, h)))


def harmonize_semantic_color(
    base: Color,
    semantic: SemanticColor,
    options: Optional[SemanticHarmonizationOptions] = None,
) -> Color:
    """
    Semantic color adapted to ``base``.

    The hue moves ``hue_pull`` of the way from the semantic hue toward the
    base hue along the shortest arc. Chroma follows the base, scaled per
    semantic color and kept within ``chroma_range``, with a per-color floor
    so near-gray bases still yield recognisable colors.
    """
    opts = options or SemanticHarmonizationOptions()
    pull = clamp(opts.hue_pull, 0.0, 1.0)
    range_min = max(opts.chroma_range[0], 0.0)
    range_max = max(opts.chroma_range[1], range_min)

    base_oklch = base.to_oklch()
    hue = SEMANTIC_HUES[semantic]
    if base_oklch.c >= USABLE_HUE_MIN_CHROMA:
        hue = normalize_hue(hue + shortest_hue_delta(hue, base_oklch.h) * pull)

    factor, min_chroma = SEMANTIC_CHROMA[semantic]
    chroma = clamp(
        max(base_oklch.c * factor, min_chroma),
        max(range_min, min_chroma),
        range_max,
    )
    return _oklch_color(base_oklch.l, chroma, hue)


def generate_color_palette(
    base: Color,
    harmony: Union[ColorHarmony, str] = ColorHarmony.COMPLEMENTARY,
    options: Optional[PaletteOptions] = None,
) -> ColorPalette:
    """
    Build a complete palette around ``base``.

    Raises:
        UnsupportedOptionError: if ``harmony`` names no harmony.
    """
    opts = options or PaletteOptions()
    harmony_colors = get_harmony_colors(base, harmony, opts.harmony)
    base_oklch = base.to_oklch()
    tint = min(base_oklch.c * TINTED_NEUTRAL_CHROMA_FACTOR, TINTED_NEUTRAL_MAX_CHROMA)

    def swatch(color: Color) -> ColorSwatch:
        return get_color_swatch(color, opts.swatch)

    semantic = {
        s.value: swatch(harmonize_semantic_color(base, s, opts.semantic)) for s in SemanticColor
    }
    return ColorPalette(
        primary=swatch(base),
        secondary_colors=tuple(swatch(c) for c in harmony_colors[1:]),
        neutrals=swatch(_oklch_color(base_oklch.l, 0.0, 0.0)),
        tinted_neutrals=swatch(_oklch_color(base_oklch.l, tint, base_oklch.h)),
        black=Color("#000000"),
        white=Color("#ffffff"),
        **semantic,
    )
