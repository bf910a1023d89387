# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
Descriptive color temperature.

Each label pairs a nominal Kelvin value with a light, slightly tinted
reference color. A color's temperature is the label whose reference is
nearest in RGB; a Kelvin value maps back to a label by range.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

from chromaform.core.numeric import is_real_number
from chromaform.errors import InvalidColorError
from chromaform.schema.models import HSL
from chromaform.schema.options import TemperatureStringOptions

if TYPE_CHECKING:
    from chromaform.color import Color


class ColorTemperatureLabel(Enum):
    CANDLELIGHT = "Candlelight"
    INCANDESCENT = "Incandescent bulb"
    HALOGEN = "Halogen"
    FLUORESCENT = "Fluorescent"
    DAYLIGHT = "Daylight"
    CLOUDY = "Cloudy sky"
    SHADE = "Shade"
    BLUE_SKY = "Blue sky"


@dataclass(frozen=True)
class ColorTemperature:
    kelvin: int
    label: ColorTemperatureLabel

    def to_dict(self) -> dict:
        return {"kelvin": self.kelvin, "label": self.label.value}


LABEL_KELVIN: dict[ColorTemperatureLabel, int] = {
    ColorTemperatureLabel.CANDLELIGHT: 1900,
    ColorTemperatureLabel.INCANDESCENT: 2700,
    ColorTemperatureLabel.HALOGEN: 3200,
    ColorTemperatureLabel.FLUORESCENT: 4200,
    ColorTemperatureLabel.DAYLIGHT: 5500,
    ColorTemperatureLabel.CLOUDY: 7000,
    ColorTemperatureLabel.SHADE: 8000,
    ColorTemperatureLabel.BLUE_SKY: 10000,
}

LABEL_REFERENCE_HSL: dict[ColorTemperatureLabel, HSL] = {
    ColorTemperatureLabel.CANDLELIGHT: HSL(30, 20, 88),
    ColorTemperatureLabel.INCANDESCENT: HSL(35, 18, 92),
    ColorTemperatureLabel.HALOGEN: HSL(40, 16, 94),
    ColorTemperatureLabel.FLUORESCENT: HSL(55, 12, 95),
    ColorTemperatureLabel.DAYLIGHT: HSL(60, 8, 96),
    ColorTemperatureLabel.CLOUDY: HSL(210, 12, 95),
    ColorTemperatureLabel.SHADE: HSL(220, 12, 93),
    ColorTemperatureLabel.BLUE_SKY: HSL(230, 15, 92),
}

# Exclusive upper Kelvin limit per label, in ascending order.
_KELVIN_LIMITS = (
    (2000, ColorTemperatureLabel.CANDLELIGHT),
    (3000, ColorTemperatureLabel.INCANDESCENT),
    (4000, ColorTemperatureLabel.HALOGEN),
    (5000, ColorTemperatureLabel.FLUORESCENT),
    (6500, ColorTemperatureLabel.DAYLIGHT),
    (7500, ColorTemperatureLabel.CLOUDY),
    (9000, ColorTemperatureLabel.SHADE),
    (math.inf, ColorTemperatureLabel.BLUE_SKY),
)

# Light neutrals get the label appended in temperature strings.
LABELLED_MAX_SATURATION = 25.0
LABELLED_MIN_LIGHTNESS = 70.0


def parse_temperature_label(value: Union[ColorTemperatureLabel, str]) -> Optional[ColorTemperatureLabel]:
    """Case-insensitive label lookup by value ("daylight") or member name."""
    if isinstance(value, ColorTemperatureLabel):
        return value
    text = value.strip().lower()
    for label in ColorTemperatureLabel:
        if text in (label.value.lower(), label.name.lower()):
            return label
    return None


def label_for_kelvin(kelvin: float) -> ColorTemperatureLabel:
    """
    Raises:
        ValueError: if ``kelvin`` is not a finite positive number.
    """
    if not is_real_number(kelvin) or kelvin <= 0:
        raise ValueError(f"temperature must be a finite positive number, got {kelvin!r}")
    for limit, label in _KELVIN_LIMITS:
        if kelvin < limit:
            return label
    return ColorTemperatureLabel.BLUE_SKY


def get_color_temperature(color: "Color") -> ColorTemperature:
    """Nearest temperature label by squared distance in 8-bit RGB."""
    from chromaform.color import Color

    rgb = color.to_rgb()
    closest = ColorTemperatureLabel.DAYLIGHT
    best = math.inf
    for label, hsl in LABEL_REFERENCE_HSL.items():
        ref = Color(hsl).to_rgb()
        dist = (rgb.r - ref.r) ** 2 + (rgb.g - ref.g) ** 2 + (rgb.b - ref.b) ** 2
        if dist < best:
            best = dist
            closest = label
    return ColorTemperature(LABEL_KELVIN[closest], closest)


def get_color_temperature_string(
    color: "Color",
    options: Optional[TemperatureStringOptions] = None,
) -> str:
    """
    Format as "5500K", or "5500K (Daylight)" for light neutral colors.

    ``options.include_label`` overrides the light-neutral rule.
    """
    opts = options or TemperatureStringOptions()
    temperature = get_color_temperature(color)

    include = opts.include_label
    if include is None:
        hsl = color.to_hsl()
        include = hsl.s < LABELLED_MAX_SATURATION and hsl.l > LABELLED_MIN_LIGHTNESS
    if include:
        return f"{temperature.kelvin}K ({temperature.label.value})"
    return f"{temperature.kelvin}K"


def get_color_from_temperature_label(label: Union[ColorTemperatureLabel, str]) -> "Color":
    """
    Raises:
        InvalidColorError: if ``label`` names no temperature.
    """
    from chromaform.color import Color

    resolved = parse_temperature_label(label)
    if resolved is None:
        raise InvalidColorError(f'unknown color temperature: "{label}"')
    return Color(LABEL_REFERENCE_HSL[resolved])


def get_color_from_temperature(kelvin: float) -> "Color":
    """Reference color of the label whose Kelvin range contains ``kelvin``."""
    return get_color_from_temperature_label(label_for_kelvin(kelvin))
