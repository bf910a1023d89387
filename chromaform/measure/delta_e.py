# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
Perceptual color difference (Delta E) in CIE L*a*b*.

Three formulas:
1. CIE76: plain Euclidean distance
2. CIE94: weighted L/C/H terms; SC and SH scale with the first color's
   chroma, so the result is not symmetric
3. CIEDE2000: CIE94 plus the a* G-factor correction, a hue rotation term
   and lightness/chroma/hue weighting functions

All three return 0 for identical colors.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional

import numpy as np
from numpy.typing import NDArray

from chromaform.schema.options import (
    CIE94Options,
    CIEDE2000Options,
    DeltaEMethod,
    DeltaEOptions,
)

if TYPE_CHECKING:
    from chromaform.color import Color


def _lab(color: "Color") -> NDArray[np.float64]:
    return np.array(color.to_lab().to_tuple(), dtype=np.float64)


def delta_e_cie76(lab1: NDArray[np.float64], lab2: NDArray[np.float64]) -> float:
    """Euclidean distance between two LAB vectors."""
    delta = lab1 - lab2
    return float(np.sqrt(np.sum(delta ** 2)))


def delta_e_cie94(
    lab1: NDArray[np.float64],
    lab2: NDArray[np.float64],
    options: Optional[CIE94Options] = None,
) -> float:
    """CIE94 with ``lab1`` as the reference color."""
    opts = options or CIE94Options()
    l1, a1, b1 = lab1
    l2, a2, b2 = lab2

    c1 = math.hypot(a1, b1)
    c2 = math.hypot(a2, b2)
    delta_l = l1 - l2
    delta_c = c1 - c2
    delta_h = math.sqrt(max(0.0, (a1 - a2) ** 2 + (b1 - b2) ** 2 - delta_c ** 2))

    s_c = 1.0 + opts.k1 * c1
    s_h = 1.0 + opts.k2 * c1

    l_term = delta_l / opts.k_l
    c_term = delta_c / (opts.k_c * s_c)
    h_term = delta_h / (opts.k_h * s_h)
    return math.sqrt(l_term ** 2 + c_term ** 2 + h_term ** 2)


def _hue_degrees(b: float, a: float) -> float:
    h = math.degrees(math.atan2(b, a))
    return h + 360.0 if h < 0 else h


def delta_e_ciede2000(
    lab1: NDArray[np.float64],
    lab2: NDArray[np.float64],
    options: Optional[CIEDE2000Options] = None,
) -> float:
    """CIEDE2000 (Sharma, Wu and Dalal formulation)."""
    opts = options or CIEDE2000Options()
    l1, a1, b1 = (float(v) for v in lab1)
    l2, a2, b2 = (float(v) for v in lab2)

    l_bar = (l1 + l2) / 2.0
    c_bar = (math.hypot(a1, b1) + math.hypot(a2, b2)) / 2.0
    c_bar7 = c_bar ** 7
    g = 0.5 * (1.0 - math.sqrt(c_bar7 / (c_bar7 + 25.0 ** 7)))

    a1p = a1 * (1.0 + g)
    a2p = a2 * (1.0 + g)
    c1p = math.hypot(a1p, b1)
    c2p = math.hypot(a2p, b2)
    c_bar_p = (c1p + c2p) / 2.0
    h1p = _hue_degrees(b1, a1p)
    h2p = _hue_degrees(b2, a2p)

    delta_lp = l2 - l1
    delta_cp = c2p - c1p

    # Hue difference is undefined when either chroma is zero
    if c1p * c2p == 0:
        delta_hp = 0.0
        h_bar_p = h1p + h2p
    else:
        diff = h2p - h1p
        if abs(diff) <= 180:
            delta_hp = diff
        elif h2p <= h1p:
            delta_hp = diff + 360.0
        else:
            delta_hp = diff - 360.0
        if abs(h1p - h2p) > 180:
            h_bar_p = (h1p + h2p + 360.0) / 2.0
        else:
            h_bar_p = (h1p + h2p) / 2.0
    delta_big_hp = 2.0 * math.sqrt(c1p * c2p) * math.sin(math.radians(delta_hp / 2.0))

    l_bar_sq = (l_bar - 50.0) ** 2
    s_l = 1.0 + 0.015 * l_bar_sq / math.sqrt(20.0 + l_bar_sq)
    s_c = 1.0 + 0.045 * c_bar_p
    t = (
        1.0
        - 0.17 * math.cos(math.radians(h_bar_p - 30.0))
        + 0.24 * math.cos(math.radians(2.0 * h_bar_p))
        + 0.32 * math.cos(math.radians(3.0 * h_bar_p + 6.0))
        - 0.20 * math.cos(math.radians(4.0 * h_bar_p - 63.0))
    )
    s_h = 1.0 + 0.015 * c_bar_p * t

    delta_theta = 30.0 * math.exp(-(((h_bar_p - 275.0) / 25.0) ** 2))
    c_bar_p7 = c_bar_p ** 7
    r_c = 2.0 * math.sqrt(c_bar_p7 / (c_bar_p7 + 25.0 ** 7))
    r_t = -r_c * math.sin(math.radians(2.0 * delta_theta))

    l_term = delta_lp / (opts.k_l * s_l)
    c_term = delta_cp / (opts.k_c * s_c)
    h_term = delta_big_hp / (opts.k_h * s_h)
    return math.sqrt(max(0.0, l_term ** 2 + c_term ** 2 + h_term ** 2 + r_t * c_term * h_term))


def get_delta_e(color_a: "Color", color_b: "Color", options: Optional[DeltaEOptions] = None) -> float:
    """
    Perceptual difference between two colors.

    Example:
        >>> get_delta_e(Color("#ff0000"), Color("#ff0000"))
        0.0

    Raises:
        UnsupportedOptionError: if the method is not one of CIE76, CIE94,
            CIEDE2000 (raised while building ``DeltaEOptions``).
    """
    opts = options or DeltaEOptions()
    lab1 = _lab(color_a)
    lab2 = _lab(color_b)

    if opts.method is DeltaEMethod.CIE76:
        return delta_e_cie76(lab1, lab2)
    if opts.method is DeltaEMethod.CIE94:
        return delta_e_cie94(lab1, lab2, opts.cie94)
    return delta_e_ciede2000(lab1, lab2, opts.ciede2000)
