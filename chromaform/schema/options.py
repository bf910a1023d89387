# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
Option enums and configuration records for every operation family.

Each record is a frozen dataclass whose defaults are the documented
defaults of the operation. Enum-valued fields also accept their member
name as a case-insensitive string ("oklch", "Ease-In-Out"); the string is
normalized to the enum member once, in ``__post_init__``, and nothing
downstream sees the raw string.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Union

from chromaform.errors import UnsupportedOptionError

logger = logging.getLogger(__name__)


# =============================================================================
# Enum normalization
# =============================================================================


class OptionEnum(Enum):
    """Enum whose members can be looked up case-insensitively by name or value."""

    @classmethod
    def label(cls) -> str:
        """Human-readable name used in error messages."""
        return re.sub(r"(?<!^)(?=[A-Z])", " ", cls.__name__).lower()

    @classmethod
    def coerce(cls, value: object):
        """
        Normalize ``value`` to a member of this enum.

        Raises:
            UnsupportedOptionError: if ``value`` names no member.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            key = re.sub(r"[\s\-]+", "_", text).upper()
            if key in cls.__members__:
                return cls.__members__[key]
            for member in cls:
                if isinstance(member.value, str) and member.value.lower() == text.lower():
                    return member
        raise UnsupportedOptionError(cls.label(), value)


def _set(record: object, name: str, value: object) -> None:
    object.__setattr__(record, name, value)


def _is_finite_number(value: object) -> bool:
    return not isinstance(value, bool) and isinstance(value, (int, float)) and math.isfinite(value)


# =============================================================================
# Manipulation
# =============================================================================


class ManipulationSpace(OptionEnum):
    HSL = "HSL"
    LAB = "LAB"
    LCH = "LCH"


@dataclass(frozen=True)
class ManipulationOptions:
    """
    Configuration for brighten / darken / saturate / desaturate.

    In HSL space ``amount`` is added to L or S directly (percentage points).
    In LAB and LCH space it is scaled by 18/10 first, so the default of 10
    moves L* (or C*) by 18.
    """

    amount: float = 10.0
    space: ManipulationSpace = ManipulationSpace.HSL

    def __post_init__(self) -> None:
        _set(self, "space", ManipulationSpace.coerce(self.space))
        if not _is_finite_number(self.amount):
            raise ValueError(f"amount must be a finite number, got {self.amount!r}")


# =============================================================================
# Combination
# =============================================================================


class MixType(OptionEnum):
    ADDITIVE = "ADDITIVE"
    SUBTRACTIVE = "SUBTRACTIVE"


class MixSpace(OptionEnum):
    RGB = "RGB"
    LINEAR_RGB = "LINEAR_RGB"
    HSL = "HSL"
    LCH = "LCH"
    OKLCH = "OKLCH"


class BlendMode(OptionEnum):
    NORMAL = "NORMAL"
    MULTIPLY = "MULTIPLY"
    SCREEN = "SCREEN"
    OVERLAY = "OVERLAY"


class BlendSpace(OptionEnum):
    RGB = "RGB"
    HSL = "HSL"


def _weights_tuple(weights) -> Optional[tuple[float, ...]]:
    if weights is None:
        return None
    return tuple(float(w) for w in weights)


@dataclass(frozen=True)
class MixOptions:
    """
    Configuration for mixing.

    ``weights`` are raw (non-normalized) per-color weights. A weights list
    whose length does not match the number of colors is ignored, and
    weights summing to zero are reset to equal weights.
    """

    type: MixType = MixType.ADDITIVE
    space: MixSpace = MixSpace.RGB
    weights: Optional[tuple[float, ...]] = None

    def __post_init__(self) -> None:
        _set(self, "type", MixType.coerce(self.type))
        _set(self, "space", MixSpace.coerce(self.space))
        _set(self, "weights", _weights_tuple(self.weights))


@dataclass(frozen=True)
class AverageOptions:
    """Configuration for averaging; weights are always normalized."""

    space: MixSpace = MixSpace.RGB
    weights: Optional[tuple[float, ...]] = None

    def __post_init__(self) -> None:
        _set(self, "space", MixSpace.coerce(self.space))
        _set(self, "weights", _weights_tuple(self.weights))


@dataclass(frozen=True)
class BlendOptions:
    """
    Configuration for blending a color over a base.

    ``ratio`` is how much of the blend color to apply; it is clamped to
    [0, 1] at use. ``mode`` only applies in RGB space.
    """

    mode: BlendMode = BlendMode.NORMAL
    space: BlendSpace = BlendSpace.RGB
    ratio: float = 0.5

    def __post_init__(self) -> None:
        _set(self, "mode", BlendMode.coerce(self.mode))
        _set(self, "space", BlendSpace.coerce(self.space))


# =============================================================================
# Gradients
# =============================================================================


class GradientSpace(OptionEnum):
    RGB = "RGB"
    HSL = "HSL"
    HSV = "HSV"
    LCH = "LCH"
    OKLAB = "OKLAB"
    OKLCH = "OKLCH"


class Interpolation(OptionEnum):
    LINEAR = "LINEAR"
    BEZIER = "BEZIER"


class Easing(OptionEnum):
    LINEAR = "LINEAR"
    EASE_IN = "EASE_IN"
    EASE_OUT = "EASE_OUT"
    EASE_IN_OUT = "EASE_IN_OUT"


class HueInterpolationMode(OptionEnum):
    CARTESIAN = "CARTESIAN"
    SHORTEST = "SHORTEST"
    LONGEST = "LONGEST"
    INCREASING = "INCREASING"
    DECREASING = "DECREASING"
    RAW = "RAW"


EasingFunction = Callable[[float], float]


@dataclass(frozen=True)
class GradientOptions:
    """
    Configuration for gradient generation.

    ``stops`` is rounded half-up and floored at 2. ``easing`` is either an
    ``Easing`` member (or its name) or any callable mapping [0,1] -> [0,1].
    ``hue_interpolation_mode`` only matters for HSL, HSV, LCH and OKLCH.
    """

    stops: int = 5
    space: GradientSpace = GradientSpace.OKLCH
    interpolation: Interpolation = Interpolation.LINEAR
    easing: Union[Easing, EasingFunction] = Easing.LINEAR
    hue_interpolation_mode: HueInterpolationMode = HueInterpolationMode.SHORTEST
    clamp: bool = True

    def __post_init__(self) -> None:
        _set(self, "space", GradientSpace.coerce(self.space))
        _set(self, "interpolation", Interpolation.coerce(self.interpolation))
        _set(
            self,
            "hue_interpolation_mode",
            HueInterpolationMode.coerce(self.hue_interpolation_mode),
        )
        if not callable(self.easing) or isinstance(self.easing, Easing):
            _set(self, "easing", Easing.coerce(self.easing))

        if not _is_finite_number(self.stops):
            raise ValueError(f"stops must be a finite number, got {self.stops!r}")
        stops = max(2, int(math.floor(self.stops + 0.5)))
        if stops != self.stops:
            logger.debug("gradient stops %r normalized to %d", self.stops, stops)
        _set(self, "stops", stops)


# =============================================================================
# Color difference
# =============================================================================


class DeltaEMethod(OptionEnum):
    CIE76 = "CIE76"
    CIE94 = "CIE94"
    CIEDE2000 = "CIEDE2000"

    @classmethod
    def label(cls) -> str:
        return "Delta E method"


@dataclass(frozen=True)
class CIE94Options:
    """CIE94 weighting (graphic-arts defaults)."""

    k_l: float = 1.0
    k_c: float = 1.0
    k_h: float = 1.0
    k1: float = 0.045
    k2: float = 0.015


@dataclass(frozen=True)
class CIEDE2000Options:
    """CIEDE2000 parametric weighting factors."""

    k_l: float = 1.0
    k_c: float = 1.0
    k_h: float = 1.0


@dataclass(frozen=True)
class DeltaEOptions:
    """Configuration for color difference."""

    method: DeltaEMethod = DeltaEMethod.CIEDE2000
    cie94: CIE94Options = field(default_factory=CIE94Options)
    ciede2000: CIEDE2000Options = field(default_factory=CIEDE2000Options)

    def __post_init__(self) -> None:
        _set(self, "method", DeltaEMethod.coerce(self.method))


# =============================================================================
# Readability
# =============================================================================


class ConformanceLevel(OptionEnum):
    AA = "AA"
    AAA = "AAA"


class TextSize(OptionEnum):
    """SMALL is body text; LARGE is >= 18pt, or >= 14pt bold."""

    SMALL = "SMALL"
    LARGE = "LARGE"


class ReadabilityAlgorithm(OptionEnum):
    WCAG = "WCAG"
    APCA = "APCA"


@dataclass(frozen=True)
class TextReadabilityOptions:
    """WCAG conformance target for text."""

    level: ConformanceLevel = ConformanceLevel.AA
    size: TextSize = TextSize.SMALL

    def __post_init__(self) -> None:
        _set(self, "level", ConformanceLevel.coerce(self.level))
        _set(self, "size", TextSize.coerce(self.size))


@dataclass(frozen=True)
class ReadabilityComparisonOptions:
    """Configuration for picking the most readable color among candidates."""

    algorithm: ReadabilityAlgorithm = ReadabilityAlgorithm.WCAG
    text: TextReadabilityOptions = field(default_factory=TextReadabilityOptions)

    def __post_init__(self) -> None:
        _set(self, "algorithm", ReadabilityAlgorithm.coerce(self.algorithm))


class DarknessMode(OptionEnum):
    WCAG = "WCAG"
    YIQ = "YIQ"


@dataclass(frozen=True)
class DarknessOptions:
    """
    Configuration for dark/light classification.

    ``threshold`` defaults per mode: 0.215 relative luminance for WCAG,
    128 brightness for YIQ.
    """

    mode: DarknessMode = DarknessMode.WCAG
    threshold: Optional[float] = None

    def __post_init__(self) -> None:
        _set(self, "mode", DarknessMode.coerce(self.mode))


# =============================================================================
# Harmonies, swatches, palettes
# =============================================================================


class ColorHarmony(OptionEnum):
    COMPLEMENTARY = "COMPLEMENTARY"
    SPLIT_COMPLEMENTARY = "SPLIT_COMPLEMENTARY"
    TRIADIC = "TRIADIC"
    SQUARE = "SQUARE"
    TETRADIC = "TETRADIC"
    ANALOGOUS = "ANALOGOUS"
    MONOCHROMATIC = "MONOCHROMATIC"

    @classmethod
    def label(cls) -> str:
        return "color harmony"


class GrayscaleHandlingMode(OptionEnum):
    SPIN_LIGHTNESS = "SPIN_LIGHTNESS"
    IGNORE = "IGNORE"


@dataclass(frozen=True)
class HarmonyOptions:
    """
    Configuration for harmonies.

    Grayscale colors have no hue to rotate. SPIN_LIGHTNESS rotates their
    lightness around a circle instead (black's complement is white);
    IGNORE returns copies of the base color.
    """

    grayscale_handling_mode: GrayscaleHandlingMode = GrayscaleHandlingMode.SPIN_LIGHTNESS

    def __post_init__(self) -> None:
        _set(
            self,
            "grayscale_handling_mode",
            GrayscaleHandlingMode.coerce(self.grayscale_handling_mode),
        )


@dataclass(frozen=True)
class SwatchOptions:
    """
    Configuration for swatches.

    ``extended`` adds the half stops 50, 150, ..., 950. ``center_on_500``
    anchors the input color on stop 500 instead of the stop matching its
    lightness.
    """

    extended: bool = False
    center_on_500: bool = False


@dataclass(frozen=True)
class SemanticHarmonizationOptions:
    """
    How semantic colors (info, positive, ...) adapt to the palette base.

    Attributes:
        hue_pull: Fraction (0-1) of the way to pull each semantic hue toward
            the base hue along the shortest arc
        chroma_range: (min, max) OKLCH chroma; sRGB tops out around 0.32
    """

    hue_pull: float = 0.3
    chroma_range: tuple[float, float] = (0.02, 0.25)

    def __post_init__(self) -> None:
        if len(self.chroma_range) != 2:
            raise ValueError(
                f"chroma_range must be a (min, max) pair, got {self.chroma_range!r}"
            )
        _set(self, "chroma_range", (float(self.chroma_range[0]), float(self.chroma_range[1])))


@dataclass(frozen=True)
class PaletteOptions:
    """Configuration for full palette generation."""

    semantic: SemanticHarmonizationOptions = field(
        default_factory=SemanticHarmonizationOptions
    )
    swatch: SwatchOptions = field(default_factory=lambda: SwatchOptions(center_on_500=True))
    harmony: HarmonyOptions = field(default_factory=HarmonyOptions)


@dataclass(frozen=True)
class TemperatureStringOptions:
    """
    ``include_label``: True always appends the label ("5500K (Daylight)"),
    False never does, None appends it only for light neutral colors.
    """

    include_label: Optional[bool] = None
