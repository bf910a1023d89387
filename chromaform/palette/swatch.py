# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
Tonal swatches: a base color spread over numbered stops.

Stops run 100 (lightest) to 900 (darkest); extended swatches add the half
stops 50, 150, ..., 950. The input color sits on ``main_stop``, chosen from
its lightness so a dark color lands on a dark stop. Each step of 100 away
from the main stop moves HSL lightness by 10 and saturation by 5 (more
saturated toward the light end).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping, Optional

from chromaform.color import Color
from chromaform.core.conversions import hsl_to_rgba
from chromaform.core.numeric import clamp, round_half_up
from chromaform.schema.models import HSLA
from chromaform.schema.options import SwatchOptions

BASE_STOPS: tuple[int, ...] = tuple(range(100, 1000, 100))
EXTENDED_STOPS: tuple[int, ...] = tuple(range(50, 1000, 50))

CENTER_STOP = 500
LIGHTNESS_PER_STEP = 10.0
SATURATION_PER_STEP = 5.0
# HSL lightness covered by one step when picking the main stop
MAIN_STOP_LIGHTNESS_BAND = 15.0


@dataclass(frozen=True)
class ColorSwatch:
    """
    Stop -> Color mapping of one tonal ramp.

    Attributes:
        stops: Colors keyed by stop, lightest first
        main_stop: Stop holding the input color
        extended: True when half stops (50, 150, ...) are present
    """

    stops: Mapping[int, Color]
    main_stop: int
    extended: bool = False

    def __getitem__(self, stop: int) -> Color:
        return self.stops[stop]

    def __iter__(self) -> Iterator[int]:
        return iter(self.stops)

    def __len__(self) -> int:
        return len(self.stops)

    def __contains__(self, stop: object) -> bool:
        return stop in self.stops

    def items(self):
        return self.stops.items()

    @property
    def main(self) -> Color:
        """The input color."""
        return self.stops[self.main_stop]

    def to_dict(self) -> dict:
        """Serialize to dictionary; colors become hex strings."""
        return {
            "main_stop": self.main_stop,
            "extended": self.extended,
            "stops": {stop: str(color) for stop, color in self.stops.items()},
        }


def get_main_stop(color: Color, center_on_500: bool = False) -> int:
    """
    Stop matching the color's lightness.

    Pure black and pure white always center on 500.

    Example:
        >>> get_main_stop(Color("#123456"))
        700
    """
    if center_on_500:
        return CENTER_STOP
    hsl = color.to_hsl()
    if hsl.s == 0 and hsl.l in (0.0, 100.0):
        return CENTER_STOP
    steps = round_half_up((50.0 - hsl.l) / MAIN_STOP_LIGHTNESS_BAND)
    return int(clamp(CENTER_STOP + 100 * steps, BASE_STOPS[0], BASE_STOPS[-1]))


def _adjusted_saturation(base: float, delta: float) -> float:
    # Grays stay gray
    if base == 0:
        return base
    return clamp(base + delta, 0.0, 100.0)


def get_color_swatch(color: Color, options: Optional[SwatchOptions] = None) -> ColorSwatch:
    """
    Build the swatch of ``color``.

    Example:
        >>> get_color_swatch(Color("#ff0000"))[100].to_hex()
        '#ffcccc'
    """
    opts = options or SwatchOptions()
    main_stop = get_main_stop(color, opts.center_on_500)
    hsl = color.to_hsl()

    stops: dict[int, Color] = {}
    for stop in EXTENDED_STOPS if opts.extended else BASE_STOPS:
        if stop == main_stop:
            stops[stop] = color
            continue
        k = (stop - main_stop) / 100.0
        shade = HSLA(
            hsl.h,
            _adjusted_saturation(hsl.s, -SATURATION_PER_STEP * k),
            clamp(hsl.l - LIGHTNESS_PER_STEP * k, 0.0, 100.0),
            color.alpha,
        )
        stops[stop] = Color.from_rgba(hsl_to_rgba(shade))
    return ColorSwatch(stops=stops, main_stop=main_stop, extended=opts.extended)
