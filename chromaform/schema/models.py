# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
Value records for every supported color model.

Design principles:
- Immutable: All records are frozen dataclasses
- Explicit: A record's type is its format tag, so passing a record to
  ``Color`` never goes through structural guessing
- Serializable: ``to_dict`` / ``from_dict`` round-trip through plain dicts

Channel ranges:
- RGB: r, g, b in [0, 255]; a in [0, 1]
- HSL / HSV / HWB: h in [0, 360); s, l, v, w, b in [0, 100]
- CMYK: c, m, y, k in [0, 100]
- LAB / LCH: l in [0, 100]; a, b unbounded; c >= 0 (~150 for sRGB)
- OKLAB / OKLCH: l in [0, 1]; a, b unbounded; c >= 0 (~0.4 for sRGB)

Records do not validate their ranges: conversion outputs can sit a hair
outside them. Input validation lives in ``chromaform.core.formats``.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass, fields
from typing import Any, Mapping


class _ModelRecord:
    """Shared serialization for model records."""

    __slots__ = ()

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def to_tuple(self) -> tuple:
        """Channels in declaration order."""
        return astuple(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        """
        Deserialize from a mapping.

        Optional fields (alpha) may be omitted; required ones raise KeyError.
        """
        kwargs = {}
        for f in fields(cls):
            if f.name in data:
                kwargs[f.name] = data[f.name]
        return cls(**kwargs)


# =============================================================================
# RGB family
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGB(_ModelRecord):
    r: float
    g: float
    b: float


@dataclass(frozen=True, slots=True)
class RGBA(_ModelRecord):
    r: float
    g: float
    b: float
    a: float = 1.0


# =============================================================================
# Cylindrical sRGB models
# =============================================================================


@dataclass(frozen=True, slots=True)
class HSL(_ModelRecord):
    h: float
    s: float
    l: float


@dataclass(frozen=True, slots=True)
class HSLA(_ModelRecord):
    h: float
    s: float
    l: float
    a: float = 1.0


@dataclass(frozen=True, slots=True)
class HSV(_ModelRecord):
    h: float
    s: float
    v: float


@dataclass(frozen=True, slots=True)
class HSVA(_ModelRecord):
    h: float
    s: float
    v: float
    a: float = 1.0


@dataclass(frozen=True, slots=True)
class HWB(_ModelRecord):
    """Hue, whiteness, blackness."""

    h: float
    w: float
    b: float


@dataclass(frozen=True, slots=True)
class HWBA(_ModelRecord):
    h: float
    w: float
    b: float
    a: float = 1.0


@dataclass(frozen=True, slots=True)
class CMYK(_ModelRecord):
    """Naive (device) CMYK as percentages."""

    c: float
    m: float
    y: float
    k: float


# =============================================================================
# Perceptual models
# =============================================================================


@dataclass(frozen=True, slots=True)
class LAB(_ModelRecord):
    """CIE L*a*b* (D65)."""

    l: float
    a: float
    b: float


@dataclass(frozen=True, slots=True)
class OKLAB(_ModelRecord):
    l: float
    a: float
    b: float


@dataclass(frozen=True, slots=True)
class LCH(_ModelRecord):
    """Cylindrical CIE L*a*b*: lightness, chroma, hue in degrees."""

    l: float
    c: float
    h: float


@dataclass(frozen=True, slots=True)
class OKLCH(_ModelRecord):
    """
    Cylindrical OKLab.

    Attributes:
        l: Lightness (0.0 = black, 1.0 = white)
        c: Chroma (0.0 = neutral gray, typical max ~0.32 for sRGB)
        h: Hue in degrees [0, 360); 0 for achromatic colors
    """

    l: float
    c: float
    h: float


ModelRecord = (
    RGB | RGBA | HSL | HSLA | HSV | HSVA | HWB | HWBA | CMYK | LAB | OKLAB | LCH | OKLCH
)
