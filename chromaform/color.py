# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
The immutable ``Color`` value.

A Color stores one canonical float RGBA (r, g, b in [0, 255], a in [0, 1]).
Every other representation is computed on request, and channels are rounded
only at output boundaries (``to_rgb``, ``to_hex``, strings), so chained
operations do not accumulate rounding error.

Accepted inputs:
- another Color
- a model record (``RGB``, ``HSLA``, ``OKLCH``, ...)
- a mapping with model keys, e.g. ``{"h": 0, "s": 100, "l": 50}``
- a string: hex, CSS function (``rgb()``, ``oklch()``, ``color()`` ...),
  CSS color name, or color temperature label
- None, for a random color

Every operation returns a new Color; instances never change, so they are
safe to share between threads.

Example:
    >>> red = Color("#ff0000")
    >>> red.spin(180).to_hex()
    '#00ffff'
    >>> red.to_hex()
    '#ff0000'
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Optional, Sequence, Union

import numpy as np

from chromaform.core.colorspaces import ColorSpace, color_space_to_srgb, srgb_to_color_space
from chromaform.core.conversions import (
    hex_to_rgba,
    hsl_to_rgba,
    rgba_to_cmyk,
    rgba_to_hex,
    rgba_to_hex8,
    rgba_to_hsl,
    rgba_to_hsv,
    rgba_to_hwb,
    rgba_to_lab,
    rgba_to_lch,
    rgba_to_oklab,
    rgba_to_oklch,
    to_rgba,
)
from chromaform.core.formats import RECORD_TYPES, ColorFormatTag, parse_format
from chromaform.core.numeric import clamp, is_real_number, round_channel, round_half_up
from chromaform.core.parse import (
    cmyk_string,
    color_space_string,
    hsl_string,
    hsv_string,
    hwb_string,
    lab_string,
    lch_string,
    looks_like_css_function,
    oklab_string,
    oklch_string,
    parse_css_function,
    rgb_string,
)
from chromaform.errors import InvalidColorError
from chromaform.schema.models import CMYK, HSL, HSLA, HSV, HSVA, HWB, HWBA, LAB, LCH, OKLAB, OKLCH, RGB, RGBA
from chromaform.schema.options import (
    AverageOptions,
    BlendOptions,
    ColorHarmony,
    DarknessOptions,
    DeltaEOptions,
    GradientOptions,
    HarmonyOptions,
    ManipulationOptions,
    MixOptions,
    PaletteOptions,
    ReadabilityComparisonOptions,
    SwatchOptions,
    TemperatureStringOptions,
    TextReadabilityOptions,
)

ColorInput = Union["Color", str, Mapping, RGB, RGBA, HSL, HSLA, HSV, HSVA, HWB, HWBA, CMYK, LAB, OKLAB, LCH, OKLCH]

_RECORD_CLASSES = tuple(RECORD_TYPES.values())


# =============================================================================
# Input resolution
# =============================================================================


def _clamped(rgba: RGBA) -> RGBA:
    return RGBA(
        clamp(float(rgba.r), 0.0, 255.0),
        clamp(float(rgba.g), 0.0, 255.0),
        clamp(float(rgba.b), 0.0, 255.0),
        clamp(float(rgba.a), 0.0, 1.0),
    )


def _random_rgba(rng: Optional[np.random.Generator] = None) -> RGBA:
    generator = rng if rng is not None else np.random.default_rng()
    r, g, b = (float(v) for v in generator.integers(0, 256, size=3))
    return RGBA(r, g, b, 1.0)


def _parse_string(text: str) -> RGBA:
    """Hex, then CSS function, then CSS name, then temperature label."""
    from chromaform.palette.names import lookup_css_color_name
    from chromaform.palette.temperature import LABEL_REFERENCE_HSL, parse_temperature_label

    normalized = text.strip().lower()
    if normalized.startswith("#"):
        tag, value = parse_format(normalized)
        return to_rgba(tag, value)
    if looks_like_css_function(normalized):
        return parse_css_function(normalized)

    named = lookup_css_color_name(normalized)
    if named is not None:
        return hex_to_rgba(named)
    label = parse_temperature_label(normalized)
    if label is not None:
        return hsl_to_rgba(LABEL_REFERENCE_HSL[label])
    raise InvalidColorError(f'unknown color name: "{text}"')


def _resolve_input(value: Any, hint: Optional[Union[ColorFormatTag, str]], rng) -> RGBA:
    if isinstance(value, Color):
        return value._rgba
    if value is None:
        return _random_rgba(rng)
    if isinstance(value, str) and hint is None:
        return _parse_string(value)
    if isinstance(value, (str, Mapping, _RECORD_CLASSES)):
        tag, typed = parse_format(value, hint)
        return to_rgba(tag, typed)
    raise TypeError(f"cannot build a Color from {type(value).__name__}")


def _options(options, record_type, **overrides):
    """Build or update an option record from keyword overrides."""
    given = {k: v for k, v in overrides.items() if v is not None}
    if options is None:
        return record_type(**given)
    if given:
        return dataclasses.replace(options, **given)
    return options


# =============================================================================
# Color
# =============================================================================


class Color:
    """
    Immutable color value.

    Args:
        value: Any accepted input (see module docs); None draws a random
            color
        hint: Explicit format tag (or its name, e.g. ``"lab"``) overriding
            structural detection for mappings
        rng: numpy Generator used when ``value`` is None

    Raises:
        TypeError: if ``value`` is of an unsupported type
        UnknownFormatError: if a mapping's keys match no format
        InvalidColorError: if the input is malformed or out of range
        UnsupportedOptionError: if ``hint`` names no format
    """

    __slots__ = ("_rgba",)

    def __init__(
        self,
        value: Optional[ColorInput] = None,
        *,
        hint: Optional[Union[ColorFormatTag, str]] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        object.__setattr__(self, "_rgba", _clamped(_resolve_input(value, hint, rng)))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Color is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Color is immutable")

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def from_rgba(cls, rgba: RGBA) -> Color:
        """Wrap float RGBA without validation; channels are clamped."""
        color = cls.__new__(cls)
        object.__setattr__(color, "_rgba", _clamped(rgba))
        return color

    @classmethod
    def random(cls, rng: Optional[np.random.Generator] = None) -> Color:
        """Uniform random 8-bit RGB with alpha 1; pass a seeded ``rng`` for repeatability."""
        return cls.from_rgba(_random_rgba(rng))

    @classmethod
    def from_temperature(cls, kelvin: float) -> Color:
        from chromaform.palette.temperature import get_color_from_temperature

        return get_color_from_temperature(kelvin)

    @classmethod
    def from_temperature_label(cls, label) -> Color:
        from chromaform.palette.temperature import get_color_from_temperature_label

        return get_color_from_temperature_label(label)

    @classmethod
    def from_color_space(
        cls,
        space: Union[ColorSpace, str],
        r: float,
        g: float,
        b: float,
        a: float = 1.0,
    ) -> Color:
        """
        Build from an RGB triple (channels 0-1) in sRGB, Display-P3 or Rec.2020.

        Colors outside the sRGB gamut are clipped.

        Raises:
            InvalidColorError: if a channel is not a number in [0, 1]
            UnsupportedOptionError: if ``space`` names no color space
        """
        for channel in (r, g, b, a):
            if not is_real_number(channel) or not 0.0 <= channel <= 1.0:
                raise InvalidColorError(f"invalid {space} color: ({r}, {g}, {b}, {a})")
        srgb = color_space_to_srgb([r, g, b], space)
        return cls.from_rgba(RGBA(float(srgb[0]), float(srgb[1]), float(srgb[2]), float(a)))

    @classmethod
    def create_interpolated_gradient(
        cls,
        colors: Sequence[ColorInput],
        options: Optional[GradientOptions] = None,
        **overrides,
    ) -> list[Color]:
        """
        Gradient through ``colors``; keyword overrides (``stops=7``,
        ``space="RGB"``, ...) update ``options``.
        """
        from chromaform.ops.gradients import create_color_gradient

        anchors = [_coerce(c) for c in colors]
        return create_color_gradient(anchors, _options(options, GradientOptions, **overrides))

    def clone(self) -> Color:
        return Color.from_rgba(self._rgba)

    # -------------------------------------------------------------------------
    # Conversion views
    # -------------------------------------------------------------------------

    def to_float_rgba(self) -> RGBA:
        """The stored, unrounded channels."""
        return self._rgba

    def to_hex(self) -> str:
        return rgba_to_hex(self._rgba)

    def to_hex8(self) -> str:
        return rgba_to_hex8(self._rgba)

    def to_rgb(self) -> RGB:
        """8-bit channels, rounded half-up."""
        return RGB(*(round_channel(v) for v in (self._rgba.r, self._rgba.g, self._rgba.b)))

    def to_rgba(self) -> RGBA:
        """8-bit channels rounded half-up, alpha rounded to 3 decimals."""
        rgb = self.to_rgb()
        return RGBA(rgb.r, rgb.g, rgb.b, round_half_up(self._rgba.a, 3))

    def to_hsl(self) -> HSL:
        hsla = rgba_to_hsl(self._rgba)
        return HSL(hsla.h, hsla.s, hsla.l)

    def to_hsla(self) -> HSLA:
        return rgba_to_hsl(self._rgba)

    def to_hsv(self) -> HSV:
        hsva = rgba_to_hsv(self._rgba)
        return HSV(hsva.h, hsva.s, hsva.v)

    def to_hsva(self) -> HSVA:
        return rgba_to_hsv(self._rgba)

    def to_hwb(self) -> HWB:
        hwba = rgba_to_hwb(self._rgba)
        return HWB(hwba.h, hwba.w, hwba.b)

    def to_hwba(self) -> HWBA:
        return rgba_to_hwb(self._rgba)

    def to_cmyk(self) -> CMYK:
        return rgba_to_cmyk(self._rgba)

    def to_lab(self) -> LAB:
        return rgba_to_lab(self._rgba)

    def to_oklab(self) -> OKLAB:
        return rgba_to_oklab(self._rgba)

    def to_lch(self) -> LCH:
        return rgba_to_lch(self._rgba)

    def to_oklch(self) -> OKLCH:
        return rgba_to_oklch(self._rgba)

    def to_color_space(self, space: Union[ColorSpace, str]) -> tuple[float, float, float]:
        """RGB triple (channels 0-1) in the given color space."""
        r, g, b = srgb_to_color_space([self._rgba.r, self._rgba.g, self._rgba.b], space)
        return float(r), float(g), float(b)

    # -------------------------------------------------------------------------
    # Strings
    # -------------------------------------------------------------------------

    def to_rgb_string(self) -> str:
        return rgb_string(self._rgba)

    def to_rgba_string(self) -> str:
        return rgb_string(self._rgba, force_alpha=True)

    def to_hsl_string(self) -> str:
        return hsl_string(self.to_hsla())

    def to_hsla_string(self) -> str:
        return hsl_string(self.to_hsla(), force_alpha=True)

    def to_hsv_string(self) -> str:
        return hsv_string(self.to_hsva())

    def to_hsva_string(self) -> str:
        return hsv_string(self.to_hsva(), force_alpha=True)

    def to_hwb_string(self) -> str:
        return hwb_string(self.to_hwba())

    def to_hwba_string(self) -> str:
        return hwb_string(self.to_hwba(), force_alpha=True)

    def to_cmyk_string(self) -> str:
        return cmyk_string(self.to_cmyk())

    def to_lab_string(self) -> str:
        return lab_string(self.to_lab(), self.alpha)

    def to_lch_string(self) -> str:
        return lch_string(self.to_lch(), self.alpha)

    def to_oklab_string(self) -> str:
        return oklab_string(self.to_oklab(), self.alpha)

    def to_oklch_string(self) -> str:
        return oklch_string(self.to_oklch(), self.alpha)

    def to_color_space_string(self, space: Union[ColorSpace, str] = ColorSpace.SRGB) -> str:
        """
        Example:
            >>> Color("#ff0000").to_color_space_string("srgb")
            'color(srgb 1 0 0)'
        """
        return color_space_string(ColorSpace.coerce(space), self.to_color_space(space), self.alpha)

    # -------------------------------------------------------------------------
    # Alpha
    # -------------------------------------------------------------------------

    @property
    def alpha(self) -> float:
        return self._rgba.a

    def get_alpha(self) -> float:
        return self._rgba.a

    def set_alpha(self, alpha: float) -> Color:
        """
        New color with ``alpha`` clamped to [0, 1] and rounded to 3 decimals.

        A non-finite (or non-numeric) alpha becomes 1.
        """
        if not is_real_number(alpha):
            alpha = 1.0
        a = round_half_up(clamp(float(alpha), 0.0, 1.0), 3)
        return Color.from_rgba(RGBA(self._rgba.r, self._rgba.g, self._rgba.b, a))

    # -------------------------------------------------------------------------
    # Equality and serialization
    # -------------------------------------------------------------------------

    def _key(self) -> tuple:
        return self.to_rgba().to_tuple()

    def equals(self, other: ColorInput) -> bool:
        """Equal at the output boundary: 8-bit channels and 3-decimal alpha."""
        return self._key() == _coerce(other)._key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"hex8": self.to_hex8(), "rgba": self.to_rgba().to_dict()}

    def __str__(self) -> str:
        return self.to_hex8() if self.to_rgba().a < 1 else self.to_hex()

    def __repr__(self) -> str:
        return f"Color('{self}')"

    # -------------------------------------------------------------------------
    # Manipulation
    # -------------------------------------------------------------------------

    def spin(self, degrees: float) -> Color:
        """Rotate the HSL hue; the result is floored to a whole degree."""
        from chromaform.ops.manipulations import spin_color_hue

        return spin_color_hue(self, degrees)

    def brighten(
        self,
        amount: Optional[float] = None,
        *,
        space=None,
        options: Optional[ManipulationOptions] = None,
    ) -> Color:
        from chromaform.ops.manipulations import brighten_color

        return brighten_color(self, _options(options, ManipulationOptions, amount=amount, space=space))

    def darken(
        self,
        amount: Optional[float] = None,
        *,
        space=None,
        options: Optional[ManipulationOptions] = None,
    ) -> Color:
        from chromaform.ops.manipulations import darken_color

        return darken_color(self, _options(options, ManipulationOptions, amount=amount, space=space))

    def saturate(
        self,
        amount: Optional[float] = None,
        *,
        space=None,
        options: Optional[ManipulationOptions] = None,
    ) -> Color:
        from chromaform.ops.manipulations import saturate_color

        return saturate_color(self, _options(options, ManipulationOptions, amount=amount, space=space))

    def desaturate(
        self,
        amount: Optional[float] = None,
        *,
        space=None,
        options: Optional[ManipulationOptions] = None,
    ) -> Color:
        from chromaform.ops.manipulations import desaturate_color

        return desaturate_color(self, _options(options, ManipulationOptions, amount=amount, space=space))

    def grayscale(self) -> Color:
        from chromaform.ops.manipulations import color_to_grayscale

        return color_to_grayscale(self)

    # -------------------------------------------------------------------------
    # Combination
    # -------------------------------------------------------------------------

    def mix(
        self,
        others: Sequence[ColorInput],
        options: Optional[MixOptions] = None,
        *,
        type=None,
        space=None,
        weights: Optional[Sequence[float]] = None,
    ) -> Color:
        """Mix with ``others``; weights cover this color first, then ``others``."""
        from chromaform.ops.combinations import mix_colors

        if not others:
            return self.clone()
        opts = _options(options, MixOptions, type=type, space=space, weights=weights)
        return mix_colors([self] + [_coerce(c) for c in others], opts)

    def average(
        self,
        others: Sequence[ColorInput],
        options: Optional[AverageOptions] = None,
        *,
        space=None,
        weights: Optional[Sequence[float]] = None,
    ) -> Color:
        from chromaform.ops.combinations import average_colors

        if not others:
            return self.clone()
        opts = _options(options, AverageOptions, space=space, weights=weights)
        return average_colors([self] + [_coerce(c) for c in others], opts)

    def blend(
        self,
        other: ColorInput,
        options: Optional[BlendOptions] = None,
        *,
        mode=None,
        space=None,
        ratio: Optional[float] = None,
    ) -> Color:
        """Blend ``other`` over this color."""
        from chromaform.ops.combinations import blend_colors

        opts = _options(options, BlendOptions, mode=mode, space=space, ratio=ratio)
        return blend_colors(self, _coerce(other), opts)

    # -------------------------------------------------------------------------
    # Gradients
    # -------------------------------------------------------------------------

    def create_gradient_to(
        self,
        other: ColorInput,
        options: Optional[GradientOptions] = None,
        **overrides,
    ) -> list[Color]:
        return Color.create_interpolated_gradient([self, other], options, **overrides)

    def create_gradient_through(
        self,
        others: Sequence[ColorInput],
        options: Optional[GradientOptions] = None,
        **overrides,
    ) -> list[Color]:
        return Color.create_interpolated_gradient([self, *others], options, **overrides)

    # -------------------------------------------------------------------------
    # Harmonies, swatches, palettes
    # -------------------------------------------------------------------------

    def get_complementary_colors(self, options: Optional[HarmonyOptions] = None) -> list[Color]:
        return self.get_harmony_colors(ColorHarmony.COMPLEMENTARY, options)

    def get_split_complementary_colors(self, options: Optional[HarmonyOptions] = None) -> list[Color]:
        return self.get_harmony_colors(ColorHarmony.SPLIT_COMPLEMENTARY, options)

    def get_triadic_harmony_colors(self, options: Optional[HarmonyOptions] = None) -> list[Color]:
        return self.get_harmony_colors(ColorHarmony.TRIADIC, options)

    def get_square_harmony_colors(self, options: Optional[HarmonyOptions] = None) -> list[Color]:
        return self.get_harmony_colors(ColorHarmony.SQUARE, options)

    def get_tetradic_harmony_colors(self, options: Optional[HarmonyOptions] = None) -> list[Color]:
        return self.get_harmony_colors(ColorHarmony.TETRADIC, options)

    def get_analogous_harmony_colors(self, options: Optional[HarmonyOptions] = None) -> list[Color]:
        return self.get_harmony_colors(ColorHarmony.ANALOGOUS, options)

    def get_monochromatic_harmony_colors(self, options: Optional[HarmonyOptions] = None) -> list[Color]:
        return self.get_harmony_colors(ColorHarmony.MONOCHROMATIC, options)

    def get_harmony_colors(
        self,
        harmony: Union[ColorHarmony, str],
        options: Optional[HarmonyOptions] = None,
        *,
        grayscale_handling_mode=None,
    ) -> list[Color]:
        from chromaform.palette.harmonies import get_harmony_colors

        opts = _options(options, HarmonyOptions, grayscale_handling_mode=grayscale_handling_mode)
        return get_harmony_colors(self, harmony, opts)

    def get_color_swatch(
        self,
        options: Optional[SwatchOptions] = None,
        *,
        extended: Optional[bool] = None,
        center_on_500: Optional[bool] = None,
    ):
        from chromaform.palette.swatch import get_color_swatch

        opts = _options(options, SwatchOptions, extended=extended, center_on_500=center_on_500)
        return get_color_swatch(self, opts)

    def get_color_palette(
        self,
        harmony: Union[ColorHarmony, str] = ColorHarmony.COMPLEMENTARY,
        options: Optional[PaletteOptions] = None,
    ):
        from chromaform.palette.palette import generate_color_palette

        return generate_color_palette(self, harmony, options)

    # -------------------------------------------------------------------------
    # Difference and readability
    # -------------------------------------------------------------------------

    def difference_from(
        self,
        other: ColorInput,
        options: Optional[DeltaEOptions] = None,
        *,
        method=None,
    ) -> float:
        """Delta E from ``other`` (CIEDE2000 unless ``method`` says otherwise)."""
        from chromaform.measure.delta_e import get_delta_e

        return get_delta_e(self, _coerce(other), _options(options, DeltaEOptions, method=method))

    def get_contrast_ratio(self, other: ColorInput) -> float:
        from chromaform.measure.readability import get_wcag_contrast_ratio

        return get_wcag_contrast_ratio(self, _coerce(other))

    def get_readability_score(self, background: ColorInput) -> float:
        """APCA Lc of this color as text on ``background``."""
        from chromaform.measure.readability import get_apca_readability_score

        return get_apca_readability_score(self, _coerce(background))

    def get_text_readability_report(
        self,
        background: ColorInput,
        options: Optional[TextReadabilityOptions] = None,
        *,
        level=None,
        size=None,
    ):
        from chromaform.measure.readability import get_text_readability_report

        opts = _options(options, TextReadabilityOptions, level=level, size=size)
        return get_text_readability_report(self, _coerce(background), opts)

    def is_readable_as_text_color(
        self,
        background: ColorInput,
        options: Optional[TextReadabilityOptions] = None,
        *,
        level=None,
        size=None,
    ) -> bool:
        return self.get_text_readability_report(background, options, level=level, size=size).is_readable

    def get_most_readable_text_color(
        self,
        candidates: Sequence[ColorInput],
        options: Optional[ReadabilityComparisonOptions] = None,
    ) -> Color:
        """Best text color among ``candidates`` with this color as background."""
        from chromaform.measure.readability import get_most_readable_text_color

        return get_most_readable_text_color(self, [_coerce(c) for c in candidates], options)

    def get_best_background_color(
        self,
        candidates: Sequence[ColorInput],
        options: Optional[ReadabilityComparisonOptions] = None,
    ) -> Color:
        """Best background among ``candidates`` for this color as text."""
        from chromaform.measure.readability import get_best_background_color

        return get_best_background_color(self, [_coerce(c) for c in candidates], options)

    # -------------------------------------------------------------------------
    # Classification, temperature, names
    # -------------------------------------------------------------------------

    def is_dark(
        self,
        options: Optional[DarknessOptions] = None,
        *,
        mode=None,
        threshold: Optional[float] = None,
    ) -> bool:
        from chromaform.measure.classify import is_color_dark

        return is_color_dark(self, _options(options, DarknessOptions, mode=mode, threshold=threshold))

    def is_off_white(self) -> bool:
        from chromaform.measure.classify import is_off_white

        return is_off_white(self)

    def get_temperature(self):
        from chromaform.palette.temperature import get_color_temperature

        return get_color_temperature(self)

    def get_temperature_as_string(
        self,
        options: Optional[TemperatureStringOptions] = None,
        *,
        include_label: Optional[bool] = None,
    ) -> str:
        from chromaform.palette.temperature import get_color_temperature_string

        opts = _options(options, TemperatureStringOptions, include_label=include_label)
        return get_color_temperature_string(self, opts)

    def get_name(self):
        from chromaform.palette.names import get_base_color_name

        return get_base_color_name(self)

    def get_name_as_string(self) -> str:
        return str(self.get_name())


def _coerce(value: ColorInput) -> Color:
    return value if isinstance(value, Color) else Color(value)
