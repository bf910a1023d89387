# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
Color model records and option records.

All types in this module are immutable (frozen dataclasses).
"""

from chromaform.schema.models import (
    CMYK,
    HSL,
    HSLA,
    HSV,
    HSVA,
    HWB,
    HWBA,
    LAB,
    LCH,
    OKLAB,
    OKLCH,
    RGB,
    RGBA,
    ModelRecord,
)
from chromaform.schema.options import (
    AverageOptions,
    BlendMode,
    BlendOptions,
    BlendSpace,
    CIE94Options,
    CIEDE2000Options,
    ColorHarmony,
    ConformanceLevel,
    DarknessMode,
    DarknessOptions,
    DeltaEMethod,
    DeltaEOptions,
    Easing,
    GradientOptions,
    GradientSpace,
    GrayscaleHandlingMode,
    HarmonyOptions,
    HueInterpolationMode,
    Interpolation,
    ManipulationOptions,
    ManipulationSpace,
    MixOptions,
    MixSpace,
    MixType,
    PaletteOptions,
    ReadabilityAlgorithm,
    ReadabilityComparisonOptions,
    SemanticHarmonizationOptions,
    SwatchOptions,
    TemperatureStringOptions,
    TextReadabilityOptions,
    TextSize,
)

__all__ = [
    # Model records
    "RGB",
    "RGBA",
    "HSL",
    "HSLA",
    "HSV",
    "HSVA",
    "HWB",
    "HWBA",
    "CMYK",
    "LAB",
    "OKLAB",
    "LCH",
    "OKLCH",
    "ModelRecord",
    # Manipulation
    "ManipulationSpace",
    "ManipulationOptions",
    # Combination
    "MixType",
    "MixSpace",
    "BlendMode",
    "BlendSpace",
    "MixOptions",
    "AverageOptions",
    "BlendOptions",
    # Gradients
    "GradientSpace",
    "Interpolation",
    "Easing",
    "HueInterpolationMode",
    "GradientOptions",
    # Difference
    "DeltaEMethod",
    "CIE94Options",
    "CIEDE2000Options",
    "DeltaEOptions",
    # Readability
    "ConformanceLevel",
    "TextSize",
    "ReadabilityAlgorithm",
    "TextReadabilityOptions",
    "ReadabilityComparisonOptions",
    "DarknessMode",
    "DarknessOptions",
    # Harmonies, swatches, palettes
    "ColorHarmony",
    "GrayscaleHandlingMode",
    "HarmonyOptions",
    "SwatchOptions",
    "SemanticHarmonizationOptions",
    "PaletteOptions",
    "TemperatureStringOptions",
]
