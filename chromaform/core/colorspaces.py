# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
Physical RGB color spaces: sRGB, Display-P3 and Rec.2020.

A color space is orthogonal to a color *format*: it reinterprets an RGB
triple's primaries and transfer function. Every space converts through
CIE XYZ (D65):

    space values -> decode -> linear -> XYZ -> linear sRGB -> encode -> sRGB

Display-P3 shares the sRGB transfer curve; Rec.2020 has its own.

Matrices from CSS Color Module Level 4.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from chromaform.core.numeric import (
    linear_to_rec2020,
    linear_to_srgb,
    rec2020_to_linear,
    srgb_to_linear,
)
from chromaform.schema.options import OptionEnum


class ColorSpace(OptionEnum):
    SRGB = "srgb"
    DISPLAY_P3 = "display-p3"
    REC2020 = "rec2020"

    @classmethod
    def label(cls) -> str:
        return "color space"

    @property
    def css_name(self) -> str:
        """Identifier used in ``color(<space> r g b)`` strings."""
        return self.value


# =============================================================================
# Primaries (linear RGB <-> XYZ D65)
# =============================================================================

SRGB_TO_XYZ = np.array([
    [0.41239079926595934, 0.357584339383878, 0.1804807884018343],
    [0.21263900587151027, 0.715168678767756, 0.07219231536073371],
    [0.01933081871559185, 0.11919477979462598, 0.9505321522496607],
], dtype=np.float64)

XYZ_TO_SRGB = np.array([
    [3.240969941904521, -1.537383177570093, -0.498610760293],
    [-0.96924363628087, 1.87596750150772, 0.041555057407175],
    [0.055630079696993, -0.20397695888897, 1.056971514242878],
], dtype=np.float64)

P3_TO_XYZ = np.array([
    [0.4865709486482162, 0.26566769316909306, 0.1982172852343625],
    [0.2289745640697488, 0.6917385218365064, 0.079286914093745],
    [0.0, 0.04511338185890264, 1.043944368900976],
], dtype=np.float64)

XYZ_TO_P3 = np.array([
    [2.493496911941425, -0.9313836179191239, -0.40271078445071684],
    [-0.8294889695615747, 1.7626640603183463, 0.023624685841943577],
    [0.03584583024378447, -0.07617238926804182, 0.9568845240076872],
], dtype=np.float64)

REC2020_TO_XYZ = np.array([
    [0.6369580483012914, 0.14461690358620832, 0.1688809751641721],
    [0.2627002120112671, 0.6779980715188708, 0.05930171646986196],
    [0.0, 0.028072693049087428, 1.060985057710791],
], dtype=np.float64)

XYZ_TO_REC2020 = np.array([
    [1.716651187971268, -0.355670783776392, -0.25336628137366],
    [-0.666684351832489, 1.616481236634939, 0.0157685458139111],
    [0.0176398574453108, -0.0427706132578085, 0.942103121235474],
], dtype=np.float64)

_TO_XYZ = {
    ColorSpace.SRGB: SRGB_TO_XYZ,
    ColorSpace.DISPLAY_P3: P3_TO_XYZ,
    ColorSpace.REC2020: REC2020_TO_XYZ,
}

_FROM_XYZ = {
    ColorSpace.SRGB: XYZ_TO_SRGB,
    ColorSpace.DISPLAY_P3: XYZ_TO_P3,
    ColorSpace.REC2020: XYZ_TO_REC2020,
}


# =============================================================================
# Space lookup
# =============================================================================


def parse_color_space(value: object) -> Optional[ColorSpace]:
    """Permissive lookup: the matching ColorSpace, or None."""
    try:
        return ColorSpace.coerce(value)
    except ValueError:
        return None


def resolve_color_space(value: Union[ColorSpace, str, None] = None) -> ColorSpace:
    """
    Strict lookup defaulting to sRGB.

    Raises:
        UnsupportedOptionError: if ``value`` is given but names no space.
    """
    if value is None:
        return ColorSpace.SRGB
    return ColorSpace.coerce(value)


# =============================================================================
# Transfer functions per space
# =============================================================================


def _decode(values: NDArray[np.float64], space: ColorSpace) -> NDArray[np.float64]:
    if space is ColorSpace.REC2020:
        return rec2020_to_linear(values)
    return srgb_to_linear(values)


def _encode(linear: NDArray[np.float64], space: ColorSpace) -> NDArray[np.float64]:
    if space is ColorSpace.REC2020:
        return linear_to_rec2020(linear)
    return linear_to_srgb(linear)


# =============================================================================
# Conversions
# =============================================================================


def color_space_to_srgb(
    values: Sequence[float],
    space: Union[ColorSpace, str, None] = None,
) -> NDArray[np.float64]:
    """
    Convert an RGB triple in ``space`` (channels 0-1) to sRGB 0-255.

    The result is clamped to the sRGB gamut but not rounded.

    Example:
        >>> color_space_to_srgb([0.5, 0.2, 0.1], "display-p3").round()
        array([138.,  44.,  13.])
    """
    space = resolve_color_space(space)
    encoded = np.asarray(values, dtype=np.float64)
    if space is ColorSpace.SRGB:
        srgb = np.clip(encoded, 0.0, 1.0)
    else:
        linear = _decode(encoded, space)
        xyz = _TO_XYZ[space] @ linear
        srgb = np.clip(linear_to_srgb(XYZ_TO_SRGB @ xyz), 0.0, 1.0)
    return srgb * 255.0


def srgb_to_color_space(
    rgb: Sequence[float],
    space: Union[ColorSpace, str, None] = None,
) -> NDArray[np.float64]:
    """
    Convert sRGB 0-255 to an RGB triple in ``space`` (channels 0-1).

    Every sRGB color fits inside the wider P3 and Rec.2020 gamuts; the
    result is still clipped to [0, 1] to absorb float error.
    """
    space = resolve_color_space(space)
    srgb = np.asarray(rgb, dtype=np.float64) / 255.0
    if space is ColorSpace.SRGB:
        return np.clip(srgb, 0.0, 1.0)
    xyz = SRGB_TO_XYZ @ srgb_to_linear(srgb)
    linear = _FROM_XYZ[space] @ xyz
    return np.clip(_encode(linear, space), 0.0, 1.0)


def linear_srgb_to_xyz(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """Linear sRGB (0-1) to CIE XYZ D65, Y of white = 1."""
    return np.einsum("...j,ij->...i", np.asarray(linear, dtype=np.float64), SRGB_TO_XYZ)


def xyz_to_linear_srgb(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """CIE XYZ D65 to linear sRGB; out-of-gamut values are kept."""
    return np.einsum("...j,ij->...i", np.asarray(xyz, dtype=np.float64), XYZ_TO_SRGB)
