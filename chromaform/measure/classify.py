# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""Dark/light and off-white classification."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from chromaform.core.numeric import wcag_relative_luminance
from chromaform.schema.options import DarknessMode, DarknessOptions

if TYPE_CHECKING:
    from chromaform.color import Color

# Just under the luminance of #808080 (0.2159), so #7f7f7f is dark and
# #808080 is not.
WCAG_DARKNESS_THRESHOLD = 0.215
YIQ_DARKNESS_THRESHOLD = 128.0

OFF_WHITE_MIN_LIGHTNESS = 94.0
OFF_WHITE_MAX_SATURATION = 20.0


def yiq_brightness(r: float, g: float, b: float) -> float:
    """Perceived brightness on a 0-255 scale (W3C 1999 formula)."""
    return (299.0 * r + 587.0 * g + 114.0 * b) / 1000.0


def is_color_dark(color: "Color", options: Optional[DarknessOptions] = None) -> bool:
    """
    Whether light text reads better than dark text on ``color``.

    Example:
        >>> is_color_dark(Color("#7f7f7f")), is_color_dark(Color("#808080"))
        (True, False)
    """
    opts = options or DarknessOptions()
    rgb = color.to_rgb()

    if opts.mode is DarknessMode.WCAG:
        threshold = WCAG_DARKNESS_THRESHOLD if opts.threshold is None else opts.threshold
        return wcag_relative_luminance(rgb.r, rgb.g, rgb.b) < threshold

    threshold = YIQ_DARKNESS_THRESHOLD if opts.threshold is None else opts.threshold
    brightness = yiq_brightness(rgb.r, rgb.g, rgb.b)
    # Moderately bright reds just under the cut read as light
    if 120 <= brightness < 128 and rgb.r > rgb.g and rgb.r > rgb.b and rgb.g > 0 and rgb.b > 0:
        return False
    return brightness < threshold


def is_off_white(color: "Color") -> bool:
    """Pure white or a very light, barely tinted color."""
    hsl = color.to_hsl()
    return hsl.l >= OFF_WHITE_MIN_LIGHTNESS and hsl.s <= OFF_WHITE_MAX_SATURATION
