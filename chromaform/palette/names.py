# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
Color names.

Two unrelated kinds of names live here:

- ``CSS_COLOR_NAMES``: the CSS Color Module Level 4 keywords (plus
  ``transparent``), accepted as inputs by ``Color``.
- ``get_base_color_name``: a coarse, human-friendly description of any
  color ("Red", "Light Blue") derived from its HSL coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from chromaform.color import Color


CSS_COLOR_NAMES: dict[str, str] = {
    "aliceblue": "#f0f8ff",
    "antiquewhite": "#faebd7",
    "aqua": "#00ffff",
    "aquamarine": "#7fffd4",
    "azure": "#f0ffff",
    "beige": "#f5f5dc",
    "bisque": "#ffe4c4",
    "black": "#000000",
    "blanchedalmond": "#ffebcd",
    "blue": "#0000ff",
    "blueviolet": "#8a2be2",
    "brown": "#a52a2a",
    "burlywood": "#deb887",
    "cadetblue": "#5f9ea0",
    "chartreuse": "#7fff00",
    "chocolate": "#d2691e",
    "coral": "#ff7f50",
    "cornflowerblue": "#6495ed",
    "cornsilk": "#fff8dc",
    "crimson": "#dc143c",
    "cyan": "#00ffff",
    "darkblue": "#00008b",
    "darkcyan": "#008b8b",
    "darkgoldenrod": "#b8860b",
    "darkgray": "#a9a9a9",
    "darkgreen": "#006400",
    "darkgrey": "#a9a9a9",
    "darkkhaki": "#bdb76b",
    "darkmagenta": "#8b008b",
    "darkolivegreen": "#556b2f",
    "darkorange": "#ff8c00",
    "darkorchid": "#9932cc",
    "darkred": "#8b0000",
    "darksalmon": "#e9967a",
    "darkseagreen": "#8fbc8f",
    "darkslateblue": "#483d8b",
    "darkslategray": "#2f4f4f",
    "darkslategrey": "#2f4f4f",
    "darkturquoise": "#00ced1",
    "darkviolet": "#9400d3",
    "deeppink": "#ff1493",
    "deepskyblue": "#00bfff",
    "dimgray": "#696969",
    "dimgrey": "#696969",
    "dodgerblue": "#1e90ff",
    "firebrick": "#b22222",
    "floralwhite": "#fffaf0",
    "forestgreen": "#228b22",
    "fuchsia": "#ff00ff",
    "gainsboro": "#dcdcdc",
    "ghostwhite": "#f8f8ff",
    "gold": "#ffd700",
    "goldenrod": "#daa520",
    "gray": "#808080",
    "green": "#008000",
    "greenyellow": "#adff2f",
    "grey": "#808080",
    "honeydew": "#f0fff0",
    "hotpink": "#ff69b4",
    "indianred": "#cd5c5c",
    "indigo": "#4b0082",
    "ivory": "#fffff0",
    "khaki": "#f0e68c",
    "lavender": "#e6e6fa",
    "lavenderblush": "#fff0f5",
    "lawngreen": "#7cfc00",
    "lemonchiffon": "#fffacd",
    "lightblue": "#add8e6",
    "lightcoral": "#f08080",
    "lightcyan": "#e0ffff",
    "lightgoldenrodyellow": "#fafad2",
    "lightgray": "#d3d3d3",
    "lightgreen": "#90ee90",
    "lightgrey": "#d3d3d3",
    "lightpink": "#ffb6c1",
    "lightsalmon": "#ffa07a",
    "lightseagreen": "#20b2aa",
    "lightskyblue": "#87cefa",
    "lightslategray": "#778899",
    "lightslategrey": "#778899",
    "lightsteelblue": "#b0c4de",
    "lightyellow": "#ffffe0",
    "lime": "#00ff00",
    "limegreen": "#32cd32",
    "linen": "#faf0e6",
    "magenta": "#ff00ff",
    "maroon": "#800000",
    "mediumaquamarine": "#66cdaa",
    "mediumblue": "#0000cd",
    "mediumorchid": "#ba55d3",
    "mediumpurple": "#9370db",
    "mediumseagreen": "#3cb371",
    "mediumslateblue": "#7b68ee",
    "mediumspringgreen": "#00fa9a",
    "mediumturquoise": "#48d1cc",
    "mediumvioletred": "#c71585",
    "midnightblue": "#191970",
    "mintcream": "#f5fffa",
    "mistyrose": "#ffe4e1",
    "moccasin": "#ffe4b5",
    "navajowhite": "#ffdead",
    "navy": "#000080",
    "oldlace": "#fdf5e6",
    "olive": "#808000",
    "olivedrab": "#6b8e23",
    "orange": "#ffa500",
    "orangered": "#ff4500",
    "orchid": "#da70d6",
    "palegoldenrod": "#eee8aa",
    "palegreen": "#98fb98",
    "paleturquoise": "#afeeee",
    "palevioletred": "#db7093",
    "papayawhip": "#ffefd5",
    "peachpuff": "#ffdab9",
    "peru": "#cd853f",
    "pink": "#ffc0cb",
    "plum": "#dda0dd",
    "powderblue": "#b0e0e6",
    "purple": "#800080",
    "rebeccapurple": "#663399",
    "red": "#ff0000",
    "rosybrown": "#bc8f8f",
    "royalblue": "#4169e1",
    "saddlebrown": "#8b4513",
    "salmon": "#fa8072",
    "sandybrown": "#f4a460",
    "seagreen": "#2e8b57",
    "seashell": "#fff5ee",
    "sienna": "#a0522d",
    "silver": "#c0c0c0",
    "skyblue": "#87ceeb",
    "slateblue": "#6a5acd",
    "slategray": "#708090",
    "slategrey": "#708090",
    "snow": "#fffafa",
    "springgreen": "#00ff7f",
    "steelblue": "#4682b4",
    "tan": "#d2b48c",
    "teal": "#008080",
    "thistle": "#d8bfd8",
    "tomato": "#ff6347",
    "turquoise": "#40e0d0",
    "violet": "#ee82ee",
    "wheat": "#f5deb3",
    "white": "#ffffff",
    "whitesmoke": "#f5f5f5",
    "yellow": "#ffff00",
    "yellowgreen": "#9acd32",
    "transparent": "#00000000",
}


def lookup_css_color_name(name: str) -> Optional[str]:
    """Hex value for a CSS color keyword (case-insensitive), or None."""
    return CSS_COLOR_NAMES.get(name.strip().lower())


# =============================================================================
# Descriptive names
# =============================================================================


class BaseColorName(Enum):
    RED = "Red"
    ORANGE = "Orange"
    YELLOW = "Yellow"
    GREEN = "Green"
    BLUE = "Blue"
    PURPLE = "Purple"
    PINK = "Pink"
    BLACK = "Black"
    GRAY = "Gray"
    WHITE = "White"


class ColorLightnessModifier(Enum):
    LIGHT = "Light"
    NORMAL = "Normal"
    DARK = "Dark"


@dataclass(frozen=True)
class ColorNameAndLightness:
    name: BaseColorName
    lightness: ColorLightnessModifier

    def __str__(self) -> str:
        if self.lightness is ColorLightnessModifier.NORMAL:
            return self.name.value.lower()
        return f"{self.lightness.value} {self.name.value}".lower()


# Upper hue bound (exclusive) per name, walked in order; red wraps at 345.
_HUE_BOUNDS = (
    (15.0, BaseColorName.RED),
    (45.0, BaseColorName.ORANGE),
    (75.0, BaseColorName.YELLOW),
    (165.0, BaseColorName.GREEN),
    (255.0, BaseColorName.BLUE),
    (285.0, BaseColorName.PURPLE),
    (345.0, BaseColorName.PINK),
    (360.0, BaseColorName.RED),
)

BLACK_MAX_LIGHTNESS = 5.0
WHITE_MIN_LIGHTNESS = 99.0
GRAYSCALE_MAX_SATURATION = 10.0
LOW_SATURATION_BLACK_MAX_LIGHTNESS = 10.0
LOW_SATURATION_WHITE_MIN_LIGHTNESS = 90.0


def _name_by_hue(hue: float) -> BaseColorName:
    for bound, name in _HUE_BOUNDS:
        if hue < bound:
            return name
    return BaseColorName.RED


def _lightness_modifier(l: float) -> ColorLightnessModifier:
    if l <= 30:
        return ColorLightnessModifier.DARK
    if l >= 70:
        return ColorLightnessModifier.LIGHT
    return ColorLightnessModifier.NORMAL


def get_base_color_name(color: "Color") -> ColorNameAndLightness:
    """
    Approximate the everyday name of a color.

    Example:
        >>> str(get_base_color_name(Color("#87cefa")))
        'light blue'
    """
    hsl = color.to_hsl()
    normal = ColorLightnessModifier.NORMAL

    if hsl.l < BLACK_MAX_LIGHTNESS:
        return ColorNameAndLightness(BaseColorName.BLACK, normal)
    if hsl.l > WHITE_MIN_LIGHTNESS:
        return ColorNameAndLightness(BaseColorName.WHITE, normal)

    if hsl.s < GRAYSCALE_MAX_SATURATION:
        if hsl.l < LOW_SATURATION_BLACK_MAX_LIGHTNESS:
            return ColorNameAndLightness(BaseColorName.BLACK, normal)
        if hsl.l > LOW_SATURATION_WHITE_MIN_LIGHTNESS:
            return ColorNameAndLightness(BaseColorName.WHITE, normal)
        return ColorNameAndLightness(BaseColorName.GRAY, _lightness_modifier(hsl.l))

    return ColorNameAndLightness(_name_by_hue(hsl.h), _lightness_modifier(hsl.l))
