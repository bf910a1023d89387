# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
Color operations: manipulation, mixing, blending and gradients.

Every operation returns new Color values; inputs are never modified.
"""

from chromaform.ops.combinations import average_colors, blend_colors, mix_colors
from chromaform.ops.gradients import create_color_gradient, get_easing_function
from chromaform.ops.manipulations import (
    brighten_color,
    color_to_grayscale,
    darken_color,
    desaturate_color,
    saturate_color,
    spin_color_hue,
)

__all__ = [
    "brighten_color",
    "darken_color",
    "saturate_color",
    "desaturate_color",
    "spin_color_hue",
    "color_to_grayscale",
    "mix_colors",
    "average_colors",
    "blend_colors",
    "create_color_gradient",
    "get_easing_function",
]
