# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
Input format model and disambiguator.

``resolve_format`` maps any structural input to exactly one
``ColorFormatTag`` plus a typed value (a hex string or a model record).
Disambiguation is structural (which keys are present), except for two
shapes that CIE and OK spaces share:

- {l, a, b}: OKLAB when l is in [0, 1] and a, b are within +/-0.5, else LAB
- {l, c, h}: OKLCH when l in [0, 1], c in [0, 0.5] and h in [0, 360];
  else LCH when l in [0, 100] and c >= 0; else OKLCH when l <= 1 and
  c <= 1; else LCH

A CIE color with L in [0, 1] is therefore read as its OK counterpart. Pass
an explicit ``hint`` (or a model record) to override.
"""

from __future__ import annotations

import json
import re
from typing import Any, Mapping, Optional, Union

from chromaform.core.numeric import is_real_number
from chromaform.errors import InvalidColorError, UnknownFormatError
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
from chromaform.schema.options import OptionEnum


class ColorFormatTag(OptionEnum):
    HEX = "HEX"
    HEX8 = "HEX8"
    RGB = "RGB"
    RGBA = "RGBA"
    HSL = "HSL"
    HSLA = "HSLA"
    HSV = "HSV"
    HSVA = "HSVA"
    HWB = "HWB"
    HWBA = "HWBA"
    CMYK = "CMYK"
    LAB = "LAB"
    OKLAB = "OKLAB"
    LCH = "LCH"
    OKLCH = "OKLCH"

    @classmethod
    def label(cls) -> str:
        return "color format"


RECORD_TYPES: dict[ColorFormatTag, type] = {
    ColorFormatTag.RGB: RGB,
    ColorFormatTag.RGBA: RGBA,
    ColorFormatTag.HSL: HSL,
    ColorFormatTag.HSLA: HSLA,
    ColorFormatTag.HSV: HSV,
    ColorFormatTag.HSVA: HSVA,
    ColorFormatTag.HWB: HWB,
    ColorFormatTag.HWBA: HWBA,
    ColorFormatTag.CMYK: CMYK,
    ColorFormatTag.LAB: LAB,
    ColorFormatTag.OKLAB: OKLAB,
    ColorFormatTag.LCH: LCH,
    ColorFormatTag.OKLCH: OKLCH,
}

_TAG_BY_RECORD_TYPE = {record_type: tag for tag, record_type in RECORD_TYPES.items()}

HEX_COLOR_RE = re.compile(
    r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$"
)

FormatValue = Union[str, ModelRecord]


# =============================================================================
# Disambiguation
# =============================================================================


def _describe(value: Any) -> str:
    try:
        return json.dumps(value, default=str, sort_keys=True)
    except (TypeError, ValueError):
        return repr(value)


def _in_range(value: Any, lo: float, hi: float) -> bool:
    return is_real_number(value) and lo <= value <= hi


def _classify_lab(shape: Mapping[str, Any]) -> ColorFormatTag:
    l, a, b = shape["l"], shape["a"], shape["b"]
    if _in_range(l, 0, 1) and _in_range(a, -0.5, 0.5) and _in_range(b, -0.5, 0.5):
        return ColorFormatTag.OKLAB
    return ColorFormatTag.LAB


def _classify_lch(shape: Mapping[str, Any]) -> ColorFormatTag:
    l, c, h = shape["l"], shape["c"], shape["h"]
    if _in_range(l, 0, 1) and _in_range(c, 0, 0.5) and _in_range(h, 0, 360):
        return ColorFormatTag.OKLCH
    if _in_range(l, 0, 100) and is_real_number(c) and c >= 0:
        return ColorFormatTag.LCH
    if is_real_number(l) and is_real_number(c) and l <= 1 and c <= 1:
        return ColorFormatTag.OKLCH
    return ColorFormatTag.LCH


def _classify_shape(shape: Mapping[str, Any]) -> ColorFormatTag:
    keys = set(shape)
    if {"c", "m", "y", "k"} <= keys:
        return ColorFormatTag.CMYK
    if {"h", "w", "b"} <= keys:
        return ColorFormatTag.HWBA if "a" in keys else ColorFormatTag.HWB
    if {"h", "s", "v"} <= keys:
        return ColorFormatTag.HSVA if "a" in keys else ColorFormatTag.HSV
    if {"h", "s", "l"} <= keys:
        return ColorFormatTag.HSLA if "a" in keys else ColorFormatTag.HSL
    if {"l", "a", "b"} <= keys:
        return _classify_lab(shape)
    if {"l", "c", "h"} <= keys:
        return _classify_lch(shape)
    if {"r", "g", "b"} <= keys:
        return ColorFormatTag.RGBA if "a" in keys else ColorFormatTag.RGB
    raise UnknownFormatError(f'unknown color format: "{_describe(dict(shape))}"')


def _classify_hex(text: str) -> ColorFormatTag:
    if len(text) in (5, 9):
        return ColorFormatTag.HEX8
    return ColorFormatTag.HEX


def resolve_format(
    value: Any,
    hint: Optional[Union[ColorFormatTag, str]] = None,
) -> tuple[ColorFormatTag, FormatValue]:
    """
    Classify a color input.

    Args:
        value: Hex string, model record, or mapping with model keys
        hint: Optional explicit tag (or case-insensitive tag name) that
            overrides structural detection

    Returns:
        (tag, typed value) where the value is a lowercase hex string for
        HEX/HEX8 and a model record otherwise

    Raises:
        UnknownFormatError: if the shape matches no format
        UnsupportedOptionError: if ``hint`` names no format
        InvalidColorError: if a hinted mapping lacks the hinted fields
    """
    tag = ColorFormatTag.coerce(hint) if hint is not None else None

    if isinstance(value, str):
        text = value.strip().lower()
        if tag is None:
            tag = _classify_hex(text)
        elif tag not in (ColorFormatTag.HEX, ColorFormatTag.HEX8):
            raise InvalidColorError(f'{tag.value} color cannot be a string: "{value}"')
        return tag, text

    record_tag = _TAG_BY_RECORD_TYPE.get(type(value))
    if record_tag is not None:
        if tag is not None and tag is not record_tag:
            value = value.to_dict()
        else:
            return record_tag, value

    if not isinstance(value, Mapping):
        raise UnknownFormatError(f'unknown color format: "{_describe(value)}"')

    shape = {str(k).lower(): v for k, v in value.items()}
    if tag is None:
        tag = _classify_shape(shape)
    elif tag in (ColorFormatTag.HEX, ColorFormatTag.HEX8):
        raise InvalidColorError(f'{tag.value} color must be a string: "{_describe(value)}"')

    try:
        record = RECORD_TYPES[tag].from_dict(shape)
    except (KeyError, TypeError) as exc:
        raise InvalidColorError(
            f'invalid {tag.value} color: "{_describe(value)}"'
        ) from exc
    return tag, record


# =============================================================================
# Validation
# =============================================================================

# Per-record field ranges; None means "any finite number".
_FIELD_RANGES: dict[type, dict[str, Optional[tuple[float, float]]]] = {
    RGB: {"r": (0, 255), "g": (0, 255), "b": (0, 255)},
    HSL: {"h": (0, 360), "s": (0, 100), "l": (0, 100)},
    HSV: {"h": (0, 360), "s": (0, 100), "v": (0, 100)},
    HWB: {"h": (0, 360), "w": (0, 100), "b": (0, 100)},
    CMYK: {"c": (0, 100), "m": (0, 100), "y": (0, 100), "k": (0, 100)},
    LAB: {"l": (0, 100), "a": None, "b": None},
    OKLAB: {"l": (0, 1), "a": None, "b": None},
    LCH: {"l": (0, 100), "c": (0, float("inf")), "h": (0, 360)},
    OKLCH: {"l": (0, 1), "c": (0, float("inf")), "h": (0, 360)},
}
_FIELD_RANGES[RGBA] = {**_FIELD_RANGES[RGB], "a": (0, 1)}
_FIELD_RANGES[HSLA] = {**_FIELD_RANGES[HSL], "a": (0, 1)}
_FIELD_RANGES[HSVA] = {**_FIELD_RANGES[HSV], "a": (0, 1)}
_FIELD_RANGES[HWBA] = {**_FIELD_RANGES[HWB], "a": (0, 1)}


def is_valid_hex(text: str) -> bool:
    return bool(HEX_COLOR_RE.match(text))


def validate_format(tag: ColorFormatTag, value: FormatValue) -> None:
    """
    Raise InvalidColorError unless ``value`` is a well-formed ``tag`` color.

    Hex must be ``#`` plus 3, 4, 6 or 8 hex digits (and match the tag's
    alpha-ness); every numeric field must be a finite real number inside
    its model's range.
    """
    if tag in (ColorFormatTag.HEX, ColorFormatTag.HEX8):
        if not isinstance(value, str) or not is_valid_hex(value):
            raise InvalidColorError(f'invalid hex color: "{value}"')
        has_alpha = len(value) in (5, 9)
        if has_alpha != (tag is ColorFormatTag.HEX8):
            raise InvalidColorError(f'invalid {tag.value} color: "{value}"')
        return

    ranges = _FIELD_RANGES[type(value)]
    for name, bounds in ranges.items():
        channel = getattr(value, name)
        if not is_real_number(channel):
            raise InvalidColorError(
                f'invalid {tag.value} color: "{_describe(value.to_dict())}"'
            )
        if bounds is not None and not bounds[0] <= channel <= bounds[1]:
            raise InvalidColorError(
                f'invalid {tag.value} color: "{_describe(value.to_dict())}"'
            )


def parse_format(
    value: Any,
    hint: Optional[Union[ColorFormatTag, str]] = None,
) -> tuple[ColorFormatTag, FormatValue]:
    """resolve_format followed by validate_format."""
    tag, typed = resolve_format(value, hint)
    validate_format(tag, typed)
    return tag, typed
