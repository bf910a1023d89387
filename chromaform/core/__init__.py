# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
Conversion core: numeric helpers, format detection, model conversions,
wide-gamut color spaces and CSS string parsing/formatting.

Everything here works on plain model records; nothing depends on Color.
"""

from chromaform.core.colorspaces import (
    ColorSpace,
    color_space_to_srgb,
    parse_color_space,
    resolve_color_space,
    srgb_to_color_space,
)
from chromaform.core.conversions import convert, from_rgba, to_rgba
from chromaform.core.formats import (
    ColorFormatTag,
    is_valid_hex,
    parse_format,
    resolve_format,
    validate_format,
)
from chromaform.core.parse import (
    format_number,
    parse_css_color_string,
    parse_css_function,
)

__all__ = [
    # Formats
    "ColorFormatTag",
    "resolve_format",
    "validate_format",
    "parse_format",
    "is_valid_hex",
    # Conversions
    "to_rgba",
    "from_rgba",
    "convert",
    # Color spaces
    "ColorSpace",
    "parse_color_space",
    "resolve_color_space",
    "color_space_to_srgb",
    "srgb_to_color_space",
    # Strings
    "parse_css_function",
    "parse_css_color_string",
    "format_number",
]
