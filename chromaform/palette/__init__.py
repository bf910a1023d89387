# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
Palette building: names, temperature, harmonies, swatches and full palettes.
"""

from chromaform.palette.harmonies import get_harmony_colors
from chromaform.palette.names import (
    BaseColorName,
    ColorLightnessModifier,
    ColorNameAndLightness,
    get_base_color_name,
    lookup_css_color_name,
)
from chromaform.palette.palette import (
    ColorPalette,
    SemanticColor,
    generate_color_palette,
    harmonize_semantic_color,
)
from chromaform.palette.swatch import ColorSwatch, get_color_swatch
from chromaform.palette.temperature import (
    ColorTemperature,
    ColorTemperatureLabel,
    get_color_from_temperature,
    get_color_from_temperature_label,
    get_color_temperature,
    get_color_temperature_string,
)

__all__ = [
    # Names
    "BaseColorName",
    "ColorLightnessModifier",
    "ColorNameAndLightness",
    "get_base_color_name",
    "lookup_css_color_name",
    # Temperature
    "ColorTemperature",
    "ColorTemperatureLabel",
    "get_color_temperature",
    "get_color_temperature_string",
    "get_color_from_temperature",
    "get_color_from_temperature_label",
    # Harmonies
    "get_harmony_colors",
    # Swatches and palettes
    "ColorSwatch",
    "get_color_swatch",
    "SemanticColor",
    "ColorPalette",
    "harmonize_semantic_color",
    "generate_color_palette",
]
