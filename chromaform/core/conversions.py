# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
Color model conversions.

Every conversion routes through an RGBA hub: X -> RGBA -> Y. RGBA channels
are floats (r, g, b on the 0-255 scale, a in 0-1) and are never rounded or
clamped here; rounding belongs to serialization.

Perceptual chains:
    sRGB -> Linear RGB -> XYZ (D65) -> CIE Lab -> LCH
    sRGB -> Linear RGB -> OKLab -> OKLCH

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- CIE Lab: CIE 15:2004, with the exact epsilon / kappa constants
"""

from __future__ import annotations

import math
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from chromaform.core.colorspaces import linear_srgb_to_xyz, xyz_to_linear_srgb
from chromaform.core.formats import ColorFormatTag, FormatValue, is_valid_hex
from chromaform.core.numeric import (
    linear_to_srgb,
    normalize_hue,
    round_channel,
    round_half_up,
    srgb_to_linear,
)
from chromaform.errors import InvalidColorError
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
)

# Hue is meaningless below these chroma levels and is reported as 0.
LCH_ACHROMATIC_CHROMA = 1e-4
OKLCH_ACHROMATIC_CHROMA = 1e-6


# =============================================================================
# Hex
# =============================================================================


def hex_to_rgba(hex_color: str) -> RGBA:
    """
    Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``.

    Short forms double each digit. The alpha byte maps 0-255 -> 0-1 and is
    rounded to 3 decimals.
    """
    if not isinstance(hex_color, str) or not is_valid_hex(hex_color.strip()):
        raise InvalidColorError(f'invalid hex color: "{hex_color}"')
    raw = hex_color.strip()[1:]
    if len(raw) in (3, 4):
        raw = "".join(ch * 2 for ch in raw)

    r = int(raw[0:2], 16)
    g = int(raw[2:4], 16)
    b = int(raw[4:6], 16)
    a = 1.0
    if len(raw) == 8:
        a = round_half_up(int(raw[6:8], 16) / 255.0, 3)
    return RGBA(float(r), float(g), float(b), a)


def rgba_to_hex(rgba: RGBA) -> str:
    """Lowercase ``#rrggbb``; channels rounded half-up and clamped."""
    r, g, b = (round_channel(v) for v in (rgba.r, rgba.g, rgba.b))
    return f"#{r:02x}{g:02x}{b:02x}"


def rgba_to_hex8(rgba: RGBA) -> str:
    """Lowercase ``#rrggbbaa``."""
    alpha = round_channel(rgba.a * 255.0)
    return f"{rgba_to_hex(rgba)}{alpha:02x}"


# =============================================================================
# HSL / HSV / HWB
# =============================================================================


def _rgb_hue(r: float, g: float, b: float, mx: float, delta: float) -> float:
    if delta == 0:
        return 0.0
    if mx == r:
        h = (g - b) / delta + (6.0 if g < b else 0.0)
    elif mx == g:
        h = (b - r) / delta + 2.0
    else:
        h = (r - g) / delta + 4.0
    return normalize_hue(h * 60.0)


def rgba_to_hsl(rgba: RGBA) -> HSLA:
    r, g, b = rgba.r / 255.0, rgba.g / 255.0, rgba.b / 255.0
    mx = max(r, g, b)
    mn = min(r, g, b)
    delta = mx - mn
    l = (mx + mn) / 2.0

    s = 0.0
    if delta != 0:
        s = delta / (2.0 - mx - mn) if l > 0.5 else delta / (mx + mn)
    return HSLA(_rgb_hue(r, g, b, mx, delta), s * 100.0, l * 100.0, rgba.a)


def _hue_sector(h: float, c: float, x: float) -> tuple[float, float, float]:
    # h in [0, 1)
    if h < 1 / 6:
        return c, x, 0.0
    if h < 1 / 3:
        return x, c, 0.0
    if h < 1 / 2:
        return 0.0, c, x
    if h < 2 / 3:
        return 0.0, x, c
    if h < 5 / 6:
        return x, 0.0, c
    return c, 0.0, x


def hsl_to_rgba(hsl: HSL | HSLA) -> RGBA:
    h = normalize_hue(hsl.h) / 360.0
    s = hsl.s / 100.0
    l = hsl.l / 100.0

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h * 6) % 2 - 1))
    m = l - c / 2
    r1, g1, b1 = _hue_sector(h, c, x)
    return RGBA((r1 + m) * 255.0, (g1 + m) * 255.0, (b1 + m) * 255.0, getattr(hsl, "a", 1.0))


def rgba_to_hsv(rgba: RGBA) -> HSVA:
    r, g, b = rgba.r / 255.0, rgba.g / 255.0, rgba.b / 255.0
    mx = max(r, g, b)
    delta = mx - min(r, g, b)
    s = 0.0 if mx == 0 else delta / mx
    return HSVA(_rgb_hue(r, g, b, mx, delta), s * 100.0, mx * 100.0, rgba.a)


def hsv_to_rgba(hsv: HSV | HSVA) -> RGBA:
    h = normalize_hue(hsv.h) / 360.0
    s = hsv.s / 100.0
    v = hsv.v / 100.0

    c = v * s
    x = c * (1 - abs((h * 6) % 2 - 1))
    m = v - c
    r1, g1, b1 = _hue_sector(h, c, x)
    return RGBA((r1 + m) * 255.0, (g1 + m) * 255.0, (b1 + m) * 255.0, getattr(hsv, "a", 1.0))


def rgba_to_hwb(rgba: RGBA) -> HWBA:
    hsv = rgba_to_hsv(rgba)
    white = (1 - hsv.s / 100.0) * hsv.v
    black = 100.0 - hsv.v
    return HWBA(hsv.h, white, black, rgba.a)


def hwb_to_rgba(hwb: HWB | HWBA) -> RGBA:
    """HWB -> RGBA; whiteness + blackness above 100 collapses to gray."""
    w = hwb.w / 100.0
    bk = hwb.b / 100.0
    alpha = getattr(hwb, "a", 1.0)
    if w + bk >= 1:
        gray = w / (w + bk) * 255.0
        return RGBA(gray, gray, gray, alpha)
    v = 1 - bk
    s = 1 - w / v if v > 0 else 0.0
    return hsv_to_rgba(HSVA(hwb.h, s * 100.0, v * 100.0, alpha))


# =============================================================================
# CMYK
# =============================================================================


def rgba_to_cmyk(rgba: RGBA) -> CMYK:
    r, g, b = rgba.r / 255.0, rgba.g / 255.0, rgba.b / 255.0
    k = 1 - max(r, g, b)
    if k >= 1:
        return CMYK(0.0, 0.0, 0.0, 100.0)
    c = (1 - r - k) / (1 - k)
    m = (1 - g - k) / (1 - k)
    y = (1 - b - k) / (1 - k)
    return CMYK(c * 100.0, m * 100.0, y * 100.0, k * 100.0)


def cmyk_to_rgba(cmyk: CMYK) -> RGBA:
    k = cmyk.k / 100.0
    r = 255.0 * (1 - cmyk.c / 100.0) * (1 - k)
    g = 255.0 * (1 - cmyk.m / 100.0) * (1 - k)
    b = 255.0 * (1 - cmyk.y / 100.0) * (1 - k)
    return RGBA(r, g, b, 1.0)


# =============================================================================
# CIE Lab / LCH
# =============================================================================

# D65 reference white, derived from its xy chromaticity (0.3127, 0.3290) so
# that sRGB white maps to a* = b* = 0.
D65_WHITE = np.array([0.3127 / 0.3290, 1.0, (1 - 0.3127 - 0.3290) / 0.3290])

_LAB_EPSILON = 216.0 / 24389.0
_LAB_KAPPA = 24389.0 / 27.0


def _lab_f(t: NDArray[np.float64]) -> NDArray[np.float64]:
    return np.where(t > _LAB_EPSILON, np.cbrt(t), (_LAB_KAPPA * t + 16.0) / 116.0)


def xyz_to_lab(xyz: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIE XYZ (D65, Y of white = 1) to CIE Lab.

    Args:
        xyz: Array of shape (..., 3)

    Returns:
        Array of shape (..., 3) with (L, a, b), L in [0, 100]
    """
    f = _lab_f(np.asarray(xyz, dtype=np.float64) / D65_WHITE)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)], axis=-1)


def lab_to_xyz(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """Inverse of xyz_to_lab."""
    lab = np.asarray(lab, dtype=np.float64)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]
    fy = (L + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0

    xr = np.where(fx ** 3 > _LAB_EPSILON, fx ** 3, (116.0 * fx - 16.0) / _LAB_KAPPA)
    yr = np.where(L > _LAB_KAPPA * _LAB_EPSILON, fy ** 3, L / _LAB_KAPPA)
    zr = np.where(fz ** 3 > _LAB_EPSILON, fz ** 3, (116.0 * fz - 16.0) / _LAB_KAPPA)
    return np.stack([xr, yr, zr], axis=-1) * D65_WHITE


def _rgb_array(rgba: RGBA) -> NDArray[np.float64]:
    return np.array([rgba.r, rgba.g, rgba.b], dtype=np.float64) / 255.0


def _rgba_from_array(srgb: NDArray[np.float64], alpha: float) -> RGBA:
    r, g, b = (float(v) * 255.0 for v in srgb)
    return RGBA(r, g, b, alpha)


def rgba_to_lab(rgba: RGBA) -> LAB:
    lab = xyz_to_lab(linear_srgb_to_xyz(srgb_to_linear(_rgb_array(rgba))))
    return LAB(float(lab[0]), float(lab[1]), float(lab[2]))


def lab_to_rgba(lab: LAB, alpha: float = 1.0) -> RGBA:
    xyz = lab_to_xyz(np.array([lab.l, lab.a, lab.b], dtype=np.float64))
    return _rgba_from_array(linear_to_srgb(xyz_to_linear_srgb(xyz)), alpha)


def _to_polar(l: float, a: float, b: float, achromatic: float) -> tuple[float, float, float]:
    c = math.hypot(a, b)
    h = 0.0 if c < achromatic else normalize_hue(math.degrees(math.atan2(b, a)))
    return l, c, h


def _from_polar(l: float, c: float, h: float) -> tuple[float, float, float]:
    rad = math.radians(h)
    return l, c * math.cos(rad), c * math.sin(rad)


def lab_to_lch(lab: LAB) -> LCH:
    return LCH(*_to_polar(lab.l, lab.a, lab.b, LCH_ACHROMATIC_CHROMA))


def lch_to_lab(lch: LCH) -> LAB:
    return LAB(*_from_polar(lch.l, lch.c, lch.h))


def rgba_to_lch(rgba: RGBA) -> LCH:
    return lab_to_lch(rgba_to_lab(rgba))


def lch_to_rgba(lch: LCH, alpha: float = 1.0) -> RGBA:
    return lab_to_rgba(lch_to_lab(lch), alpha)


# =============================================================================
# OKLab / OKLCH
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

_M1_INV = np.linalg.inv(_M1)
_M2_INV = np.linalg.inv(_M2)


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear sRGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    lms = np.einsum("...j,ij->...i", rgb, _M1)
    # Signed cube root keeps out-of-gamut colors invertible
    lms_cbrt = np.cbrt(lms)
    return np.einsum("...j,ij->...i", lms_cbrt, _M2)


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to linear sRGB.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values, not gamut-clipped
    """
    lab = np.asarray(lab, dtype=np.float64)
    lms_cbrt = np.einsum("...j,ij->...i", lab, _M2_INV)
    return np.einsum("...j,ij->...i", lms_cbrt ** 3, _M1_INV)


def rgba_to_oklab(rgba: RGBA) -> OKLAB:
    lab = linear_rgb_to_oklab(srgb_to_linear(_rgb_array(rgba)))
    return OKLAB(float(lab[0]), float(lab[1]), float(lab[2]))


def oklab_to_rgba(oklab: OKLAB, alpha: float = 1.0) -> RGBA:
    linear = oklab_to_linear_rgb(np.array([oklab.l, oklab.a, oklab.b], dtype=np.float64))
    return _rgba_from_array(linear_to_srgb(linear), alpha)


def oklab_to_oklch(oklab: OKLAB) -> OKLCH:
    return OKLCH(*_to_polar(oklab.l, oklab.a, oklab.b, OKLCH_ACHROMATIC_CHROMA))


def oklch_to_oklab(oklch: OKLCH) -> OKLAB:
    return OKLAB(*_from_polar(oklch.l, oklch.c, oklch.h))


def rgba_to_oklch(rgba: RGBA) -> OKLCH:
    return oklab_to_oklch(rgba_to_oklab(rgba))


def oklch_to_rgba(oklch: OKLCH, alpha: float = 1.0) -> RGBA:
    return oklab_to_rgba(oklch_to_oklab(oklch), alpha)


# =============================================================================
# Hub dispatch
# =============================================================================


def to_rgba(tag: ColorFormatTag, value: FormatValue) -> RGBA:
    """
    Convert any tagged format value to float RGBA.

    RGB -> RGBA is a field copy with alpha 1. The value is assumed to be
    validated already (see ``chromaform.core.formats.parse_format``).
    """
    if tag in (ColorFormatTag.HEX, ColorFormatTag.HEX8):
        return hex_to_rgba(value)
    if tag is ColorFormatTag.RGB:
        return RGBA(float(value.r), float(value.g), float(value.b), 1.0)
    if tag is ColorFormatTag.RGBA:
        return RGBA(float(value.r), float(value.g), float(value.b), float(value.a))
    if tag in (ColorFormatTag.HSL, ColorFormatTag.HSLA):
        return hsl_to_rgba(value)
    if tag in (ColorFormatTag.HSV, ColorFormatTag.HSVA):
        return hsv_to_rgba(value)
    if tag in (ColorFormatTag.HWB, ColorFormatTag.HWBA):
        return hwb_to_rgba(value)
    if tag is ColorFormatTag.CMYK:
        return cmyk_to_rgba(value)
    if tag is ColorFormatTag.LAB:
        return lab_to_rgba(value)
    if tag is ColorFormatTag.OKLAB:
        return oklab_to_rgba(value)
    if tag is ColorFormatTag.LCH:
        return lch_to_rgba(value)
    return oklch_to_rgba(value)


def _opaque(convert: Callable[[RGBA], Any], record_type: type) -> Callable[[RGBA], Any]:
    return lambda rgba: record_type(*convert(rgba).to_tuple()[:3])


_FROM_RGBA: dict[ColorFormatTag, Callable[[RGBA], Any]] = {
    ColorFormatTag.HEX: rgba_to_hex,
    ColorFormatTag.HEX8: rgba_to_hex8,
    ColorFormatTag.RGB: lambda rgba: RGB(rgba.r, rgba.g, rgba.b),
    ColorFormatTag.RGBA: lambda rgba: rgba,
    ColorFormatTag.HSL: _opaque(rgba_to_hsl, HSL),
    ColorFormatTag.HSLA: rgba_to_hsl,
    ColorFormatTag.HSV: _opaque(rgba_to_hsv, HSV),
    ColorFormatTag.HSVA: rgba_to_hsv,
    ColorFormatTag.HWB: _opaque(rgba_to_hwb, HWB),
    ColorFormatTag.HWBA: rgba_to_hwb,
    ColorFormatTag.CMYK: rgba_to_cmyk,
    ColorFormatTag.LAB: rgba_to_lab,
    ColorFormatTag.OKLAB: rgba_to_oklab,
    ColorFormatTag.LCH: rgba_to_lch,
    ColorFormatTag.OKLCH: rgba_to_oklch,
}


def from_rgba(tag: ColorFormatTag, rgba: RGBA) -> FormatValue:
    """Convert float RGBA to the format named by ``tag``."""
    return _FROM_RGBA[ColorFormatTag.coerce(tag)](rgba)


def convert(value: FormatValue, source: ColorFormatTag, target: ColorFormatTag) -> FormatValue:
    """Convert between any two formats through the RGBA hub."""
    return from_rgba(target, to_rgba(source, value))
