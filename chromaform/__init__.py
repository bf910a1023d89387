# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
Chromaform -- color parsing, conversion, manipulation and palettes.

One immutable ``Color`` value accepts hex, CSS strings, color names and
model records, converts to every common model (RGB, HSL, HSV, HWB, CMYK,
CIELAB, CIELCh, OKLab, OKLCh, Display-P3, Rec.2020) and derives new colors:
mixes, gradients, harmonies, swatches and full palettes.

Quick start::

    from chromaform import Color

    c = Color("#6699cc")
    c.brighten(10).to_hex()
    c.create_gradient_to("tomato", stops=5)
    c.get_contrast_ratio("white")
"""

from __future__ import annotations

import logging

__version__ = "1.0.0"

from chromaform.color import Color
from chromaform.core.colorspaces import ColorSpace
from chromaform.core.formats import ColorFormatTag
from chromaform.core.parse import parse_css_color_string
from chromaform.errors import (
    ColorError,
    InvalidColorError,
    UnknownFormatError,
    UnsupportedOptionError,
)
from chromaform.palette.palette import ColorPalette
from chromaform.palette.swatch import ColorSwatch
from chromaform.schema.models import CMYK, HSL, HSLA, HSV, HSVA, HWB, HWBA, LAB, LCH, OKLAB, OKLCH, RGB, RGBA
from chromaform.schema.options import (
    AverageOptions,
    BlendOptions,
    ColorHarmony,
    DarknessOptions,
    DeltaEOptions,
    GradientOptions,
    HarmonyOptions,
    ManipulationOptions,
    MixOptions,
    PaletteOptions,
    ReadabilityComparisonOptions,
    SwatchOptions,
    TextReadabilityOptions,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core API
    "Color",
    "ColorSpace",
    "ColorFormatTag",
    "parse_css_color_string",
    # Results
    "ColorSwatch",
    "ColorPalette",
    # Errors
    "ColorError",
    "UnknownFormatError",
    "InvalidColorError",
    "UnsupportedOptionError",
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
    # Options
    "ManipulationOptions",
    "MixOptions",
    "AverageOptions",
    "BlendOptions",
    "GradientOptions",
    "DeltaEOptions",
    "TextReadabilityOptions",
    "ReadabilityComparisonOptions",
    "DarknessOptions",
    "ColorHarmony",
    "HarmonyOptions",
    "SwatchOptions",
    "PaletteOptions",
    # Version
    "__version__",
]
