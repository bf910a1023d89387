# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
Numeric primitives shared by every conversion.

Transfer functions:
- sRGB: piecewise curve, linear segment below 0.04045 (decode) /
  0.0031308 (encode), slope 12.92, gamma 2.4
- Rec.2020: linear segment below 4.5 * BETA, gamma 0.45
- WCAG 2.x: same shape as sRGB but with the historical 0.03928 pivot

The sRGB functions accept scalars or arrays and are pure NumPy.
"""

from __future__ import annotations

import math
from numbers import Real

import numpy as np
from numpy.typing import ArrayLike, NDArray


# =============================================================================
# Scalar helpers
# =============================================================================


def clamp(value: float, lo: float, hi: float) -> float:
    """Constrain ``value`` to the closed range [lo, hi]."""
    return min(max(value, lo), hi)


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round with ties going toward +infinity (126.5 -> 127, 127.5 -> 128).

    Unlike the builtin ``round``, which rounds ties to even.
    """
    factor = 10.0 ** digits
    return math.floor(value * factor + 0.5) / factor


def round_channel(value: float) -> int:
    """Round an 8-bit channel for output: half-up, clamped to 0-255."""
    return int(clamp(math.floor(value + 0.5), 0, 255))


def normalize_hue(hue: float) -> float:
    """Wrap a hue angle into [0, 360)."""
    wrapped = ((hue % 360.0) + 360.0) % 360.0
    # -1e-17 % 360 lands on 360.0 in float arithmetic
    return 0.0 if wrapped >= 360.0 else wrapped


def shortest_hue_delta(start: float, end: float) -> float:
    """Signed shortest arc from ``start`` to ``end``, in (-180, 180]."""
    return ((end - start + 540.0) % 360.0) - 180.0


def is_real_number(value: object) -> bool:
    """True for finite real numbers; booleans are rejected."""
    return (
        isinstance(value, Real)
        and not isinstance(value, bool)
        and math.isfinite(float(value))
    )


# =============================================================================
# sRGB transfer function
# =============================================================================


def srgb_to_linear(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear light.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: value / 12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4

    Negative (out-of-gamut) inputs are mirrored through the origin.
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    magnitude = np.abs(srgb)
    linear = np.where(
        magnitude <= 0.04045,
        magnitude / 12.92,
        np.power((magnitude + 0.055) / 1.055, 2.4),
    )
    return np.sign(srgb) * linear


def linear_to_srgb(linear: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear light to sRGB values [0,1].

    Inverse of srgb_to_linear. Values outside [0,1] are not clipped; gamut
    mapping is left to the caller.
    """
    linear = np.asarray(linear, dtype=np.float64)
    magnitude = np.abs(linear)
    srgb = np.where(
        magnitude <= 0.0031308,
        magnitude * 12.92,
        1.055 * np.power(magnitude, 1.0 / 2.4) - 0.055,
    )
    return np.sign(linear) * srgb


# =============================================================================
# Rec.2020 transfer function
# =============================================================================

REC2020_ALPHA = 1.09929682680944
REC2020_BETA = 0.018053968510807
REC2020_GAMMA = 0.45


def rec2020_to_linear(value: ArrayLike) -> NDArray[np.float64]:
    """Decode Rec.2020 gamma-encoded values [0,1] to linear light."""
    v = np.clip(np.asarray(value, dtype=np.float64), 0.0, 1.0)
    return np.where(
        v < 4.5 * REC2020_BETA,
        v / 4.5,
        np.power((v + REC2020_ALPHA - 1.0) / REC2020_ALPHA, 1.0 / REC2020_GAMMA),
    )


def linear_to_rec2020(value: ArrayLike) -> NDArray[np.float64]:
    """Encode linear light [0,1] with the Rec.2020 transfer function."""
    v = np.clip(np.asarray(value, dtype=np.float64), 0.0, 1.0)
    return np.where(
        v < REC2020_BETA,
        4.5 * v,
        REC2020_ALPHA * np.power(v, REC2020_GAMMA) - (REC2020_ALPHA - 1.0),
    )


# =============================================================================
# WCAG 2.x linearization
# =============================================================================


def wcag_channel_to_linear(channel: float) -> float:
    """
    Linearize an 8-bit channel the way WCAG 2.x defines relative luminance.

    The pivot is 0.03928 (from an early sRGB draft), not 0.04045.
    """
    c = channel / 255.0
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def wcag_relative_luminance(r: float, g: float, b: float) -> float:
    """WCAG relative luminance of an 8-bit RGB triple."""
    return (
        0.2126 * wcag_channel_to_linear(r)
        + 0.7152 * wcag_channel_to_linear(g)
        + 0.0722 * wcag_channel_to_linear(b)
    )
