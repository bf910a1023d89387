# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
Multi-color combination: mixing, averaging and blending.

Mixing and averaging take per-color weights. Additive RGB mixing sums
channels with the raw weights (light adds up, so red + green + blue is
white); every other path uses weights normalized to sum to 1. Hue channels
are combined with a weighted circular mean so 350 and 10 average to 0, not
180.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from chromaform.color import Color
from chromaform.core.conversions import (
    cmyk_to_rgba,
    hsl_to_rgba,
    lch_to_rgba,
    oklch_to_rgba,
    rgba_to_cmyk,
)
from chromaform.core.numeric import (
    clamp,
    linear_to_srgb,
    normalize_hue,
    round_half_up,
    shortest_hue_delta,
    srgb_to_linear,
)
from chromaform.schema.models import CMYK, HSLA, LCH, OKLCH, RGBA
from chromaform.schema.options import (
    AverageOptions,
    BlendMode,
    BlendOptions,
    BlendSpace,
    MixOptions,
    MixSpace,
    MixType,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Weights
# =============================================================================


def resolve_weights(
    count: int,
    weights: Optional[Sequence[float]] = None,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Resolve per-color weights.

    Weights default to 1 each. A list whose length does not match ``count``,
    or whose sum is 0, is replaced by equal weights.

    Returns:
        (raw weights, normalized weights summing to 1)
    """
    raw = np.ones(count, dtype=np.float64)
    if weights is not None:
        if len(weights) != count:
            logger.debug("ignoring %d weights for %d colors", len(weights), count)
        elif float(np.sum(weights)) == 0.0:
            logger.debug("weights sum to zero; using equal weights")
        else:
            raw = np.asarray(weights, dtype=np.float64)
    return raw, raw / raw.sum()


def _require_colors(colors: Sequence[Color], action: str) -> None:
    if len(colors) < 2:
        raise ValueError(f"at least two colors are required for {action}")


def _float_rgba(colors: Sequence[Color]) -> NDArray[np.float64]:
    return np.array([c.to_float_rgba().to_tuple() for c in colors], dtype=np.float64)


def circular_mean(hues: Sequence[float], weights: NDArray[np.float64]) -> float:
    """Weighted mean angle in degrees, in [0, 360)."""
    rad = np.radians(np.asarray(hues, dtype=np.float64))
    y = float(np.dot(weights, np.sin(rad)))
    x = float(np.dot(weights, np.cos(rad)))
    return normalize_hue(math.degrees(math.atan2(y, x)))


# =============================================================================
# Shared channel math
# =============================================================================


def _rgb_sum(colors: Sequence[Color], weights: NDArray[np.float64]) -> Color:
    """Weighted channel sum; alpha is always the weighted mean."""
    rgba = _float_rgba(colors)
    rgb = np.clip(weights @ rgba[:, :3], 0.0, 255.0)
    alpha = float(weights @ rgba[:, 3]) / float(weights.sum())
    return Color.from_rgba(RGBA(*(float(v) for v in rgb), round_half_up(clamp(alpha, 0.0, 1.0), 3)))


def _linear_rgb_sum(colors: Sequence[Color], weights: NDArray[np.float64]) -> Color:
    rgba = _float_rgba(colors)
    linear = srgb_to_linear(rgba[:, :3] / 255.0)
    srgb = linear_to_srgb(np.clip(weights @ linear, 0.0, 1.0)) * 255.0
    alpha = float(weights @ rgba[:, 3]) / float(weights.sum())
    return Color.from_rgba(RGBA(*(float(v) for v in srgb), round_half_up(clamp(alpha, 0.0, 1.0), 3)))


def _polar_mean(colors: Sequence[Color], space: MixSpace, weights: NDArray[np.float64]) -> Color:
    """Arithmetic mean of the linear channels, circular mean of hue."""
    alpha = round_half_up(clamp(float(weights @ _float_rgba(colors)[:, 3]), 0.0, 1.0), 3)

    if space is MixSpace.HSL:
        values = [c.to_hsl() for c in colors]
        s = float(weights @ np.array([v.s for v in values]))
        l = float(weights @ np.array([v.l for v in values]))
        h = circular_mean([v.h for v in values], weights)
        return Color.from_rgba(hsl_to_rgba(HSLA(h, clamp(s, 0, 100), clamp(l, 0, 100), alpha)))

    values = [c.to_lch() for c in colors] if space is MixSpace.LCH else [c.to_oklch() for c in colors]
    l = float(weights @ np.array([v.l for v in values]))
    chroma = float(weights @ np.array([v.c for v in values]))
    h = circular_mean([v.h for v in values], weights)
    if space is MixSpace.LCH:
        return Color.from_rgba(lch_to_rgba(LCH(l, chroma, h), alpha))
    return Color.from_rgba(oklch_to_rgba(OKLCH(l, chroma, h), alpha))


# =============================================================================
# Mixing and averaging
# =============================================================================


def _mix_subtractive(colors: Sequence[Color], weights: NDArray[np.float64]) -> Color:
    """Multiplicative complement composition in CMYK: 1 - prod((1 - x)^w)."""
    cmyk = np.array([rgba_to_cmyk(c.to_float_rgba()).to_tuple() for c in colors]) / 100.0
    remaining = np.prod(np.power(np.clip(1.0 - cmyk, 0.0, 1.0), weights[:, np.newaxis]), axis=0)
    mixed = CMYK(*(round_half_up(100.0 * (1.0 - v), 2) for v in remaining))

    rgba = cmyk_to_rgba(mixed)
    alpha = round_half_up(float(weights @ _float_rgba(colors)[:, 3]), 3)
    return Color.from_rgba(RGBA(rgba.r, rgba.g, rgba.b, alpha))


def mix_colors(colors: Sequence[Color], options: Optional[MixOptions] = None) -> Color:
    """
    Mix two or more colors.

    Example:
        >>> mix_colors([Color("#ff0000"), Color("#00ff00"), Color("#0000ff")]).to_hex()
        '#ffffff'

    Raises:
        ValueError: if fewer than two colors are given.
    """
    _require_colors(colors, "mixing")
    opts = options or MixOptions()
    raw, normalized = resolve_weights(len(colors), opts.weights)

    if opts.type is MixType.SUBTRACTIVE:
        return _mix_subtractive(colors, normalized)
    if opts.space is MixSpace.RGB:
        return _rgb_sum(colors, raw)
    if opts.space is MixSpace.LINEAR_RGB:
        return _linear_rgb_sum(colors, raw)
    return _polar_mean(colors, opts.space, normalized)


def average_colors(colors: Sequence[Color], options: Optional[AverageOptions] = None) -> Color:
    """
    Weighted average of two or more colors; weights are always normalized.

    Raises:
        ValueError: if fewer than two colors are given.
    """
    _require_colors(colors, "averaging")
    opts = options or AverageOptions()
    _, normalized = resolve_weights(len(colors), opts.weights)

    if opts.space is MixSpace.RGB:
        return _rgb_sum(colors, normalized)
    if opts.space is MixSpace.LINEAR_RGB:
        return _linear_rgb_sum(colors, normalized)
    return _polar_mean(colors, opts.space, normalized)


# =============================================================================
# Blending
# =============================================================================


def _blend_channel(mode: BlendMode, base: NDArray[np.float64], blend: NDArray[np.float64]) -> NDArray[np.float64]:
    if mode is BlendMode.MULTIPLY:
        return base * blend / 255.0
    if mode is BlendMode.SCREEN:
        return 255.0 - (255.0 - base) * (255.0 - blend) / 255.0
    if mode is BlendMode.OVERLAY:
        return np.where(
            base < 128.0,
            2.0 * base * blend / 255.0,
            255.0 - 2.0 * (255.0 - base) * (255.0 - blend) / 255.0,
        )
    return blend


def blend_colors(base: Color, blend: Color, options: Optional[BlendOptions] = None) -> Color:
    """
    Blend ``blend`` over ``base``.

    ``ratio`` (clamped to [0, 1]) is how much of the blended result to apply.
    In HSL space the hue moves along the shortest arc and ``mode`` is
    ignored.
    """
    opts = options or BlendOptions()
    ratio = clamp(float(opts.ratio), 0.0, 1.0)
    alpha = round_half_up(clamp((1 - ratio) * base.alpha + ratio * blend.alpha, 0.0, 1.0), 3)

    if opts.space is BlendSpace.HSL:
        b = base.to_hsl()
        a = blend.to_hsl()
        h = normalize_hue(b.h + shortest_hue_delta(b.h, a.h) * ratio)
        s = (1 - ratio) * b.s + ratio * a.s
        l = (1 - ratio) * b.l + ratio * a.l
        return Color.from_rgba(hsl_to_rgba(HSLA(h, s, l, alpha)))

    base_rgba = np.array(base.to_float_rgba().to_tuple())
    blend_rgba = np.array(blend.to_float_rgba().to_tuple())
    mixed = _blend_channel(opts.mode, base_rgba[:3], blend_rgba[:3])
    rgb = np.clip((1 - ratio) * base_rgba[:3] + ratio * mixed, 0.0, 255.0)
    return Color.from_rgba(RGBA(*(float(v) for v in rgb), alpha))
