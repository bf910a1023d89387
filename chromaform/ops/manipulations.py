# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
Single-color manipulations: lightness, saturation, hue and grayscale.

HSL mode adds ``amount`` percentage points to L or S. LAB and LCH modes
scale ``amount`` by LAB_STEP / 10 first (so the default 10 moves L* or C*
by 18), matching the familiar chroma-js brighten/saturate steps.
"""

from __future__ import annotations

import math
from typing import Optional

from chromaform.color import Color
from chromaform.core.conversions import (
    LCH_ACHROMATIC_CHROMA,
    hsl_to_rgba,
    lab_to_rgba,
    lch_to_rgba,
)
from chromaform.core.numeric import clamp, is_real_number, normalize_hue
from chromaform.schema.models import HSLA, LAB, LCH
from chromaform.schema.options import ManipulationOptions, ManipulationSpace

# L* / C* change per 10 units of ``amount`` in LAB and LCH modes
LAB_STEP = 18.0


def _perceptual_delta(amount: float) -> float:
    return amount / 10.0 * LAB_STEP


def _with_hsl(color: Color, h: float, s: float, l: float) -> Color:
    hsla = HSLA(normalize_hue(h), clamp(s, 0.0, 100.0), clamp(l, 0.0, 100.0), color.alpha)
    return Color.from_rgba(hsl_to_rgba(hsla))


def _with_lch(color: Color, l: float, c: float, h: float) -> Color:
    c = max(c, 0.0)
    if c < LCH_ACHROMATIC_CHROMA:
        h = 0.0
    lch = LCH(clamp(l, 0.0, 100.0), c, normalize_hue(h))
    return Color.from_rgba(lch_to_rgba(lch, color.alpha))


# =============================================================================
# Lightness
# =============================================================================


def _shift_lightness(color: Color, delta: float, space: ManipulationSpace) -> Color:
    if space is ManipulationSpace.HSL:
        hsl = color.to_hsl()
        return _with_hsl(color, hsl.h, hsl.s, hsl.l + delta)

    step = _perceptual_delta(delta)
    if space is ManipulationSpace.LAB:
        lab = color.to_lab()
        shifted = LAB(clamp(lab.l + step, 0.0, 100.0), lab.a, lab.b)
        return Color.from_rgba(lab_to_rgba(shifted, color.alpha))

    lch = color.to_lch()
    return _with_lch(color, lch.l + step, lch.c, lch.h)


def brighten_color(color: Color, options: Optional[ManipulationOptions] = None) -> Color:
    """
    Increase lightness.

    Example:
        >>> brighten_color(Color("#000000")).to_hex()
        '#1a1a1a'
    """
    opts = options or ManipulationOptions()
    return _shift_lightness(color, opts.amount, opts.space)


def darken_color(color: Color, options: Optional[ManipulationOptions] = None) -> Color:
    """Decrease lightness; the mirror of brighten_color."""
    opts = options or ManipulationOptions()
    return _shift_lightness(color, -opts.amount, opts.space)


# =============================================================================
# Saturation
# =============================================================================


def _shift_saturation(color: Color, delta: float, space: ManipulationSpace) -> Color:
    if space is ManipulationSpace.HSL:
        hsl = color.to_hsl()
        return _with_hsl(color, hsl.h, hsl.s + delta, hsl.l)

    # LAB has no saturation axis; both perceptual modes move LCH chroma
    lch = color.to_lch()
    return _with_lch(color, lch.l, lch.c + _perceptual_delta(delta), lch.h)


def saturate_color(color: Color, options: Optional[ManipulationOptions] = None) -> Color:
    opts = options or ManipulationOptions()
    return _shift_saturation(color, opts.amount, opts.space)


def desaturate_color(color: Color, options: Optional[ManipulationOptions] = None) -> Color:
    opts = options or ManipulationOptions()
    return _shift_saturation(color, -opts.amount, opts.space)


# =============================================================================
# Hue and grayscale
# =============================================================================


def spin_color_hue(color: Color, degrees: float) -> Color:
    """
    Rotate the HSL hue; the rotated hue is floored to a whole degree.

    Example:
        >>> spin_color_hue(Color("#ff0000"), 180).to_hex()
        '#00ffff'
    """
    if not is_real_number(degrees):
        raise ValueError(f"degrees must be a finite number, got {degrees!r}")
    hsl = color.to_hsl()
    hue = math.floor(normalize_hue(hsl.h + degrees))
    return _with_hsl(color, hue, hsl.s, hsl.l)


def color_to_grayscale(color: Color) -> Color:
    """Zero the HSL saturation, keeping lightness and alpha."""
    hsl = color.to_hsl()
    return _with_hsl(color, hsl.h, 0.0, hsl.l)
