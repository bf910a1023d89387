# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
Multi-stop gradient generation.

Anchors are converted to a three-channel vector in the interpolation space
plus a separate alpha. Linear interpolation walks the N - 1 segments between
consecutive anchors; bezier interpolation treats every anchor as a control
point of one curve (De Casteljau). Samples are evenly spaced and passed
through the easing function first.

Hue handling in the polar spaces (HSL, HSV, LCH, OKLCH):

- CARTESIAN: (chroma, hue) becomes (x, y) before interpolating; mid-points
  between distant hues desaturate
- SHORTEST / LONGEST / INCREASING / DECREASING: anchor hues are unwound into
  one continuous track, each step chosen by the mode
- RAW: hues are interpolated as plain numbers

A sample that lands exactly on an anchor returns that anchor object.
"""

from __future__ import annotations

import math
from typing import Callable, Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from chromaform.color import Color
from chromaform.core.conversions import (
    LCH_ACHROMATIC_CHROMA,
    OKLCH_ACHROMATIC_CHROMA,
    hsl_to_rgba,
    hsv_to_rgba,
    lch_to_rgba,
    oklab_to_rgba,
    oklch_to_rgba,
)
from chromaform.core.numeric import normalize_hue, round_half_up, shortest_hue_delta
from chromaform.schema.models import HSLA, HSVA, LCH, OKLAB, OKLCH, RGBA
from chromaform.schema.options import (
    Easing,
    GradientOptions,
    GradientSpace,
    HueInterpolationMode,
    Interpolation,
)

MIN_GRADIENT_STOPS = 2
MAX_LCH_CHROMA = 150.0
MAX_OKLCH_CHROMA = 0.5
HSX_ACHROMATIC_SATURATION = 1e-4


# =============================================================================
# Easing
# =============================================================================

EASING_FUNCTIONS: dict[Easing, Callable[[float], float]] = {
    Easing.LINEAR: lambda t: t,
    Easing.EASE_IN: lambda t: t * t,
    Easing.EASE_OUT: lambda t: 1.0 - (1.0 - t) ** 2,
    Easing.EASE_IN_OUT: lambda t: 2.0 * t * t if t < 0.5 else 1.0 - (-2.0 * t + 2.0) ** 2 / 2.0,
}


def get_easing_function(easing) -> Callable[[float], float]:
    if isinstance(easing, Easing):
        return EASING_FUNCTIONS[easing]
    if callable(easing):
        return easing
    return EASING_FUNCTIONS[Easing.coerce(easing)]


def _eased(easing: Callable[[float], float], t: float) -> float:
    return min(max(float(easing(t)), 0.0), 1.0)


# =============================================================================
# Space layout
# =============================================================================

# Channel order follows the record: (h, s, l) / (h, s, v) / (l, c, h).
# Values are (hue index, chroma index, achromatic threshold).
_POLAR_LAYOUT: dict[GradientSpace, tuple[int, int, float]] = {
    GradientSpace.HSL: (0, 1, HSX_ACHROMATIC_SATURATION),
    GradientSpace.HSV: (0, 1, HSX_ACHROMATIC_SATURATION),
    GradientSpace.LCH: (2, 1, LCH_ACHROMATIC_CHROMA),
    GradientSpace.OKLCH: (2, 1, OKLCH_ACHROMATIC_CHROMA),
}


def _channels(color: Color, space: GradientSpace) -> tuple[float, float, float]:
    if space is GradientSpace.RGB:
        rgba = color.to_float_rgba()
        return rgba.r, rgba.g, rgba.b
    if space is GradientSpace.HSL:
        hsl = color.to_hsl()
        return hsl.h, hsl.s, hsl.l
    if space is GradientSpace.HSV:
        hsv = color.to_hsv()
        return hsv.h, hsv.s, hsv.v
    if space is GradientSpace.LCH:
        return color.to_lch().to_tuple()
    if space is GradientSpace.OKLAB:
        return color.to_oklab().to_tuple()
    return color.to_oklch().to_tuple()


def _to_cartesian(values: NDArray[np.float64], hue: int, chroma: int) -> NDArray[np.float64]:
    """Replace (chroma, hue) with (x, y), x stored at the chroma index."""
    out = values.copy()
    rad = np.radians(values[:, hue])
    out[:, chroma] = values[:, chroma] * np.cos(rad)
    out[:, hue] = values[:, chroma] * np.sin(rad)
    return out


def _from_cartesian(values: NDArray[np.float64], hue: int, chroma: int) -> NDArray[np.float64]:
    out = values.copy()
    out[chroma] = math.hypot(values[chroma], values[hue])
    out[hue] = math.degrees(math.atan2(values[hue], values[chroma]))
    return out


# =============================================================================
# Hue unwinding
# =============================================================================


def _borrow_achromatic_hues(hues: list[float], chromas: Sequence[float], threshold: float) -> list[float]:
    """Give each gray anchor the hue of its nearest earlier chromatic anchor."""
    chromatic = [i for i, c in enumerate(chromas) if c >= threshold]
    if not chromatic:
        return hues
    result = list(hues)
    previous = hues[chromatic[0]]
    for i, c in enumerate(chromas):
        if c >= threshold:
            previous = hues[i]
        else:
            result[i] = previous
    return result


def _hue_step(previous: float, target: float, mode: HueInterpolationMode) -> float:
    """Signed distance to travel from ``previous`` to ``target``."""
    shortest = shortest_hue_delta(previous, target)
    if mode is HueInterpolationMode.SHORTEST:
        return shortest
    if mode is HueInterpolationMode.LONGEST:
        if shortest > 0:
            return shortest - 360.0
        if shortest < 0:
            return shortest + 360.0
        return 0.0
    if mode is HueInterpolationMode.INCREASING:
        return (target - previous) % 360.0
    return -((previous - target) % 360.0)


def unwind_hues(hues: Sequence[float], mode: HueInterpolationMode) -> list[float]:
    """
    Turn anchor hues into one continuous track.

    Example:
        >>> unwind_hues([350, 10, 30], HueInterpolationMode.SHORTEST)
        [350, 370.0, 390.0]
    """
    track = [hues[0]]
    for target in hues[1:]:
        track.append(track[-1] + _hue_step(track[-1], target, mode))
    return track


# =============================================================================
# Vector construction
# =============================================================================


def _anchor_vectors(
    colors: Sequence[Color],
    space: GradientSpace,
    mode: HueInterpolationMode,
) -> NDArray[np.float64]:
    values = np.array([_channels(c, space) for c in colors], dtype=np.float64)
    layout = _POLAR_LAYOUT.get(space)
    if layout is None or mode is HueInterpolationMode.RAW:
        return values

    hue, chroma, threshold = layout
    if mode is HueInterpolationMode.CARTESIAN:
        return _to_cartesian(values, hue, chroma)

    hues = _borrow_achromatic_hues(list(values[:, hue]), values[:, chroma], threshold)
    values[:, hue] = unwind_hues(hues, mode)
    return values


def _vector_to_color(
    values: NDArray[np.float64],
    alpha: float,
    space: GradientSpace,
    mode: HueInterpolationMode,
    clamp: bool,
) -> Color:
    layout = _POLAR_LAYOUT.get(space)
    if layout is not None:
        hue, chroma, _ = layout
        if mode is HueInterpolationMode.CARTESIAN:
            values = _from_cartesian(values, hue, chroma)
        values = values.copy()
        values[hue] = normalize_hue(values[hue])

    a, b, c = (float(v) for v in values)
    if clamp:
        alpha = min(max(alpha, 0.0), 1.0)
    alpha = round_half_up(alpha, 3)

    if space is GradientSpace.RGB:
        if clamp:
            a, b, c = (min(max(v, 0.0), 255.0) for v in (a, b, c))
        return Color.from_rgba(RGBA(a, b, c, alpha))
    if space is GradientSpace.HSL:
        if clamp:
            b, c = min(max(b, 0.0), 100.0), min(max(c, 0.0), 100.0)
        return Color.from_rgba(hsl_to_rgba(HSLA(a, b, c, alpha)))
    if space is GradientSpace.HSV:
        if clamp:
            b, c = min(max(b, 0.0), 100.0), min(max(c, 0.0), 100.0)
        return Color.from_rgba(hsv_to_rgba(HSVA(a, b, c, alpha)))
    if space is GradientSpace.LCH:
        if clamp:
            a, b = min(max(a, 0.0), 100.0), min(max(b, 0.0), MAX_LCH_CHROMA)
        return Color.from_rgba(lch_to_rgba(LCH(a, b, c), alpha))
    if space is GradientSpace.OKLAB:
        if clamp:
            a = min(max(a, 0.0), 1.0)
        return Color.from_rgba(oklab_to_rgba(OKLAB(a, b, c), alpha))
    if clamp:
        a, b = min(max(a, 0.0), 1.0), min(max(b, 0.0), MAX_OKLCH_CHROMA)
    return Color.from_rgba(oklch_to_rgba(OKLCH(a, b, c), alpha))


# =============================================================================
# Sampling
# =============================================================================


def _de_casteljau(points: NDArray[np.float64], t: float) -> NDArray[np.float64]:
    """Evaluate the bezier curve with control points ``points`` (rows) at t."""
    working = points.astype(np.float64)
    while len(working) > 1:
        working = working[:-1] + (working[1:] - working[:-1]) * t
    return working[0]


def _sample_linear(
    vectors: NDArray[np.float64],
    alphas: NDArray[np.float64],
    easing: Callable[[float], float],
    index: int,
    count: int,
) -> tuple[NDArray[np.float64], float]:
    segments = len(vectors) - 1
    position = index / (count - 1) * segments
    segment = min(int(math.floor(position)), segments - 1)
    t = _eased(easing, position - segment)
    start, end = vectors[segment], vectors[segment + 1]
    alpha = alphas[segment] + (alphas[segment + 1] - alphas[segment]) * t
    return start + (end - start) * t, float(alpha)


def _sample_bezier(
    vectors: NDArray[np.float64],
    alphas: NDArray[np.float64],
    easing: Callable[[float], float],
    index: int,
    count: int,
) -> tuple[NDArray[np.float64], float]:
    t = _eased(easing, index / (count - 1))
    values = _de_casteljau(vectors, t)
    alpha = _de_casteljau(alphas[:, np.newaxis], t)[0]
    return values, float(alpha)


def _anchor_at(index: int, count: int, anchors: int, interpolation: Interpolation) -> Optional[int]:
    """Anchor index when sample ``index`` sits exactly on an anchor."""
    if index == 0:
        return 0
    if index == count - 1:
        return anchors - 1
    if interpolation is Interpolation.BEZIER:
        return None
    segments = anchors - 1
    if (index * segments) % (count - 1) == 0:
        return index * segments // (count - 1)
    return None


def create_color_gradient(colors: Sequence[Color], options: Optional[GradientOptions] = None) -> list[Color]:
    """
    Build ``options.stops`` evenly spaced colors through the anchors.

    Example:
        >>> red, blue = Color("#ff0000"), Color("#0000ff")
        >>> [c.to_hex() for c in create_color_gradient([red, blue], GradientOptions(space="RGB"))]
        ['#ff0000', '#bf0040', '#800080', '#4000bf', '#0000ff']

    Raises:
        ValueError: if fewer than two anchors are given.
    """
    if len(colors) < MIN_GRADIENT_STOPS:
        raise ValueError("at least two colors are required to build a gradient")
    opts = options or GradientOptions()
    easing = get_easing_function(opts.easing)
    mode = opts.hue_interpolation_mode

    vectors = _anchor_vectors(colors, opts.space, mode)
    alphas = np.array([c.alpha for c in colors], dtype=np.float64)
    sample = _sample_bezier if opts.interpolation is Interpolation.BEZIER else _sample_linear

    result = []
    for i in range(opts.stops):
        anchor = _anchor_at(i, opts.stops, len(colors), opts.interpolation)
        if anchor is not None:
            result.append(colors[anchor])
            continue
        values, alpha = sample(vectors, alphas, easing, i, opts.stops)
        result.append(_vector_to_color(values, alpha, opts.space, mode, opts.clamp))
    return result
