# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
Color harmonies: fixed HSL hue rotations of a base color.

Every harmony list starts with the base color, followed by the derived
colors in the rotation order of ``HARMONY_ROTATIONS``. Grayscale colors have
no hue to rotate; see ``HarmonyOptions`` for how they are handled.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from chromaform.color import Color
from chromaform.core.conversions import hsl_to_rgba
from chromaform.core.numeric import clamp
from chromaform.ops.manipulations import spin_color_hue
from chromaform.schema.models import HSLA
from chromaform.schema.options import ColorHarmony, GrayscaleHandlingMode, HarmonyOptions

logger = logging.getLogger(__name__)


HARMONY_ROTATIONS: dict[ColorHarmony, tuple[float, ...]] = {
    ColorHarmony.COMPLEMENTARY: (180.0,),
    ColorHarmony.SPLIT_COMPLEMENTARY: (150.0, 210.0),
    ColorHarmony.TRIADIC: (120.0, 240.0),
    ColorHarmony.SQUARE: (90.0, 180.0, 270.0),
    ColorHarmony.TETRADIC: (60.0, 180.0, 240.0),
    ColorHarmony.ANALOGOUS: (-30.0, 30.0, -60.0, 60.0),
}

# (lightness delta, saturation delta) per monochromatic variant
MONOCHROMATIC_VARIANTS: tuple[tuple[float, float], ...] = (
    (20.0, 0.0),
    (-20.0, 0.0),
    (0.0, -20.0),
    (-10.0, 10.0),
)


def _is_grayscale(color: Color) -> bool:
    return color.to_hsl().s == 0


def spin_lightness(color: Color, degrees: float) -> Color:
    """
    Rotate a gray's lightness as if it sat on a circle.

    L maps to a position in [0, 180]; after rotating, positions past 180
    fold back, so black (0) rotated by 180 lands on white (100).
    """
    hsl = color.to_hsl()
    position = hsl.l / 100.0 * 180.0
    rotated = abs((position + degrees) % 360.0)
    if rotated > 180.0:
        rotated = 360.0 - rotated
    lightness = rotated / 180.0 * 100.0
    return Color.from_rgba(hsl_to_rgba(HSLA(hsl.h, hsl.s, lightness, color.alpha)))


def _rotate(color: Color, degrees: float, mode: GrayscaleHandlingMode) -> Color:
    if not _is_grayscale(color):
        return spin_color_hue(color, degrees)
    if mode is GrayscaleHandlingMode.IGNORE:
        return color.clone()
    return spin_lightness(color, degrees)


def _rotations(color: Color, harmony: ColorHarmony, options: Optional[HarmonyOptions]) -> list[Color]:
    opts = options or HarmonyOptions()
    mode = opts.grayscale_handling_mode
    if _is_grayscale(color):
        logger.debug("grayscale base for %s harmony; using %s", harmony.name, mode.name)
    return [color.clone()] + [_rotate(color, d, mode) for d in HARMONY_ROTATIONS[harmony]]


def get_complementary_colors(color: Color, options: Optional[HarmonyOptions] = None) -> list[Color]:
    """
    Example:
        >>> [c.to_hex() for c in get_complementary_colors(Color("#ff0000"))]
        ['#ff0000', '#00ffff']
    """
    return _rotations(color, ColorHarmony.COMPLEMENTARY, options)


def get_split_complementary_colors(color: Color, options: Optional[HarmonyOptions] = None) -> list[Color]:
    return _rotations(color, ColorHarmony.SPLIT_COMPLEMENTARY, options)


def get_triadic_harmony_colors(color: Color, options: Optional[HarmonyOptions] = None) -> list[Color]:
    return _rotations(color, ColorHarmony.TRIADIC, options)


def get_square_harmony_colors(color: Color, options: Optional[HarmonyOptions] = None) -> list[Color]:
    return _rotations(color, ColorHarmony.SQUARE, options)


def get_tetradic_harmony_colors(color: Color, options: Optional[HarmonyOptions] = None) -> list[Color]:
    return _rotations(color, ColorHarmony.TETRADIC, options)


def get_analogous_harmony_colors(color: Color, options: Optional[HarmonyOptions] = None) -> list[Color]:
    return _rotations(color, ColorHarmony.ANALOGOUS, options)


def get_monochromatic_harmony_colors(color: Color, options: Optional[HarmonyOptions] = None) -> list[Color]:
    """
    Base color plus four lightness/saturation variants at the same hue.

    Saturation is left untouched for grayscale colors.
    """
    hsl = color.to_hsl()
    grayscale = hsl.s == 0
    result = [color.clone()]
    for dl, ds in MONOCHROMATIC_VARIANTS:
        s = hsl.s if grayscale else clamp(hsl.s + ds, 0.0, 100.0)
        l = clamp(hsl.l + dl, 0.0, 100.0)
        result.append(Color.from_rgba(hsl_to_rgba(HSLA(hsl.h, s, l, color.alpha))))
    return result


def get_harmony_colors(
    color: Color,
    harmony: Union[ColorHarmony, str],
    options: Optional[HarmonyOptions] = None,
) -> list[Color]:
    """
    Harmony colors by name.

    Raises:
        UnsupportedOptionError: if ``harmony`` names no harmony.
    """
    resolved = ColorHarmony.coerce(harmony)
    if resolved is ColorHarmony.MONOCHROMATIC:
        return get_monochromatic_harmony_colors(color, options)
    return _rotations(color, resolved, options)
