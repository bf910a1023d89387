# Copyright (c) 2026 Chromaform
# SPDX-License-Identifier: MIT

"""
CSS-like color strings: parsing and formatting.

Parsing comes in two flavours:

- ``parse_css_function`` is strict and raises ``InvalidColorError``;
  ``Color`` uses it for string inputs.
- ``parse_css_color_string`` never raises and returns ``None`` on any
  failure, for interactive callers where "invalid while typing" is normal.

Accepted functions: rgb, rgba, hsl, hsla, hsv, hsva, hwb, hwba, cmyk,
device-cmyk, lab, lch, oklab, oklch and ``color(<space> r g b)``. Channels
may be separated by commas or whitespace; alpha is a fourth argument or
follows a slash. Percentages scale by each channel's natural range.

Formatters emit modern space-separated syntax with numbers rounded to 3
decimals (6 for the OK models and ``color()`` channels), trailing zeros
trimmed.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from chromaform.core.colorspaces import ColorSpace, color_space_to_srgb
from chromaform.core.conversions import to_rgba
from chromaform.core.formats import is_valid_hex, parse_format
from chromaform.core.numeric import round_channel, round_half_up
from chromaform.errors import ColorError, InvalidColorError
from chromaform.schema.models import (
    CMYK,
    HSLA,
    HSVA,
    HWBA,
    LAB,
    LCH,
    OKLAB,
    OKLCH,
    RGBA,
    HSL,
    HSV,
    HWB,
    RGB,
)

if TYPE_CHECKING:
    from chromaform.color import Color

logger = logging.getLogger(__name__)


# =============================================================================
# Grammar
# =============================================================================

_FUNCTION_RE = re.compile(r"^([a-z][a-z0-9-]*)\(\s*(.*?)\s*\)$", re.DOTALL)
_TOKEN_RE = re.compile(
    r"^([+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)(%|deg|grad|rad|turn)?$"
)
_SEPARATOR_RE = re.compile(r"\s*,\s*|\s+")

# Degrees per hue unit
_HUE_UNITS = {None: 1.0, "deg": 1.0, "rad": 180.0 / math.pi, "grad": 0.9, "turn": 360.0}

HUE = "hue"


@dataclass(frozen=True)
class _Grammar:
    """
    Per-function channel scales (the value that 100% maps to).

    ``alpha_record`` is the record used when an alpha is given; formats
    without an alpha field keep alpha beside the record instead.
    """

    scales: tuple
    record: type
    alpha_record: Optional[type] = None
    accepts_alpha: bool = True


_RGB = _Grammar((255.0, 255.0, 255.0), RGB, RGBA)
_HSL = _Grammar((HUE, 100.0, 100.0), HSL, HSLA)
_HSV = _Grammar((HUE, 100.0, 100.0), HSV, HSVA)
_HWB = _Grammar((HUE, 100.0, 100.0), HWB, HWBA)
_CMYK = _Grammar((100.0, 100.0, 100.0, 100.0), CMYK, accepts_alpha=False)

_GRAMMARS: dict[str, _Grammar] = {
    "rgb": _RGB,
    "rgba": _RGB,
    "hsl": _HSL,
    "hsla": _HSL,
    "hsv": _HSV,
    "hsva": _HSV,
    "hwb": _HWB,
    "hwba": _HWB,
    "cmyk": _CMYK,
    "device-cmyk": _CMYK,
    "lab": _Grammar((100.0, 125.0, 125.0), LAB),
    "lch": _Grammar((100.0, 150.0, HUE), LCH),
    "oklab": _Grammar((1.0, 0.4, 0.4), OKLAB),
    "oklch": _Grammar((1.0, 0.4, HUE), OKLCH),
}


def _parse_number(token: str, scale) -> float:
    match = _TOKEN_RE.match(token)
    if match is None:
        raise InvalidColorError(f'invalid color channel: "{token}"')
    number = float(match.group(1))
    if not math.isfinite(number):
        raise InvalidColorError(f'invalid color channel: "{token}"')
    unit = match.group(2)

    if scale == HUE:
        if unit == "%":
            raise InvalidColorError(f'invalid hue: "{token}"')
        hue = number * _HUE_UNITS[unit]
        if not math.isfinite(hue):
            raise InvalidColorError(f'invalid hue: "{token}"')
        return hue
    if unit == "%":
        return number / 100.0 * scale
    if unit is not None:
        raise InvalidColorError(f'invalid color channel: "{token}"')
    return number


def _parse_alpha(token: str) -> float:
    return round_half_up(_parse_number(token, 1.0), 3)


def _split_arguments(body: str) -> tuple[list[str], Optional[str]]:
    alpha = None
    if "/" in body:
        body, _, alpha = body.partition("/")
        alpha = alpha.strip()
        if not alpha or "/" in alpha:
            raise InvalidColorError(f'invalid alpha: "{alpha}"')
    body = body.strip()
    if "," in body:
        segments = [segment.strip() for segment in body.split(",")]
        if not all(segments):
            raise InvalidColorError(f'empty color channel: "{body}"')
        body = " ".join(segments)
    tokens = [t for t in _SEPARATOR_RE.split(body) if t]
    return tokens, alpha


def _parse_color_function(body: str, text: str) -> RGBA:
    tokens, alpha_token = _split_arguments(body)
    if not tokens:
        raise InvalidColorError(f'invalid color string: "{text}"')
    space = ColorSpace.coerce(tokens[0])
    channels = tokens[1:]
    if len(channels) == 4 and alpha_token is None:
        alpha_token = channels.pop()
    if len(channels) != 3:
        raise InvalidColorError(f'invalid color string: "{text}"')

    values = [_parse_number(token, 1.0) for token in channels]
    alpha = _parse_alpha(alpha_token) if alpha_token is not None else 1.0
    if any(not 0.0 <= v <= 1.0 for v in values) or not 0.0 <= alpha <= 1.0:
        raise InvalidColorError(f'invalid color string: "{text}"')

    r, g, b = (float(v) for v in color_space_to_srgb(values, space))
    return RGBA(r, g, b, alpha)


def parse_css_function(text: str) -> RGBA:
    """
    Strictly parse a CSS-like color function into float RGBA.

    Raises:
        InvalidColorError: on any syntax error or out-of-range channel.
    """
    normalized = text.strip().lower()
    match = _FUNCTION_RE.match(normalized)
    if match is None:
        raise InvalidColorError(f'invalid color string: "{text}"')
    name, body = match.groups()

    if name == "color":
        return _parse_color_function(body, text)

    grammar = _GRAMMARS.get(name)
    if grammar is None:
        raise InvalidColorError(f'unknown color function: "{name}"')

    tokens, alpha_token = _split_arguments(body)
    arity = len(grammar.scales)
    if len(tokens) == arity + 1 and alpha_token is None and grammar.accepts_alpha:
        alpha_token = tokens.pop()
    if len(tokens) != arity:
        raise InvalidColorError(f'invalid color string: "{text}"')
    if alpha_token is not None and not grammar.accepts_alpha:
        raise InvalidColorError(f'invalid color string: "{text}"')

    channels = [_parse_number(token, scale) for token, scale in zip(tokens, grammar.scales)]
    alpha = _parse_alpha(alpha_token) if alpha_token is not None else None

    if alpha is not None and grammar.alpha_record is not None:
        record = grammar.alpha_record(*channels, alpha)
    else:
        record = grammar.record(*channels)

    tag, value = parse_format(record)
    rgba = to_rgba(tag, value)
    if alpha is not None and grammar.alpha_record is None:
        if not 0.0 <= alpha <= 1.0:
            raise InvalidColorError(f'invalid color string: "{text}"')
        rgba = RGBA(rgba.r, rgba.g, rgba.b, alpha)
    return rgba


def looks_like_css_function(text: str) -> bool:
    return bool(_FUNCTION_RE.match(text.strip().lower()))


def parse_css_color_string(text: str) -> Optional["Color"]:
    """
    Permissively parse a hex or CSS function string.

    Returns:
        A Color, or None when the string is not a valid color. Never raises.

    Example:
        >>> parse_css_color_string("rgba(255, 0, 0, 50%)").to_rgba()
        RGBA(r=255, g=0, b=0, a=0.5)
        >>> parse_css_color_string("rgba(255,0,0,2)") is None
        True
    """
    from chromaform.color import Color

    if not isinstance(text, str):
        return None
    stripped = text.strip().lower()
    try:
        if is_valid_hex(stripped):
            return Color(stripped)
        return Color.from_rgba(parse_css_function(stripped))
    except (ColorError, ValueError) as exc:
        logger.debug("rejected color string %r: %s", text, exc)
        return None


# =============================================================================
# Formatting
# =============================================================================


def format_number(value: float, digits: int = 3) -> str:
    """Round half-up to ``digits`` decimals and trim trailing zeros."""
    rounded = round_half_up(value, digits)
    if rounded == 0:
        return "0"
    text = f"{rounded:.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _alpha_suffix(alpha: float, force: bool) -> str:
    if force or alpha < 1:
        return f" / {format_number(alpha)}"
    return ""


def rgb_string(rgba: RGBA, force_alpha: bool = False) -> str:
    """``rgb(r g b)``; channels are integers rounded half-up."""
    r, g, b = (round_channel(v) for v in (rgba.r, rgba.g, rgba.b))
    return f"rgb({r} {g} {b}{_alpha_suffix(rgba.a, force_alpha)})"


def _cylindrical_string(name: str, h: float, x: float, y: float, alpha: float, force: bool) -> str:
    return (
        f"{name}({format_number(h)} {format_number(x)}% {format_number(y)}%"
        f"{_alpha_suffix(alpha, force)})"
    )


def hsl_string(hsla: HSLA, force_alpha: bool = False) -> str:
    return _cylindrical_string("hsl", hsla.h, hsla.s, hsla.l, hsla.a, force_alpha)


def hsv_string(hsva: HSVA, force_alpha: bool = False) -> str:
    return _cylindrical_string("hsv", hsva.h, hsva.s, hsva.v, hsva.a, force_alpha)


def hwb_string(hwba: HWBA, force_alpha: bool = False) -> str:
    return _cylindrical_string("hwb", hwba.h, hwba.w, hwba.b, hwba.a, force_alpha)


def cmyk_string(cmyk: CMYK) -> str:
    channels = " ".join(f"{format_number(v)}%" for v in cmyk.to_tuple())
    return f"device-cmyk({channels})"


def lab_string(lab: LAB, alpha: float = 1.0) -> str:
    return (
        f"lab({format_number(lab.l)}% {format_number(lab.a)} {format_number(lab.b)}"
        f"{_alpha_suffix(alpha, False)})"
    )


def lch_string(lch: LCH, alpha: float = 1.0) -> str:
    return (
        f"lch({format_number(lch.l)}% {format_number(lch.c)} {format_number(lch.h)}"
        f"{_alpha_suffix(alpha, False)})"
    )


def oklab_string(oklab: OKLAB, alpha: float = 1.0) -> str:
    return (
        f"oklab({format_number(oklab.l, 6)} {format_number(oklab.a, 6)} "
        f"{format_number(oklab.b, 6)}{_alpha_suffix(alpha, False)})"
    )


def oklch_string(oklch: OKLCH, alpha: float = 1.0) -> str:
    return (
        f"oklch({format_number(oklch.l, 6)} {format_number(oklch.c, 6)} "
        f"{format_number(oklch.h)}{_alpha_suffix(alpha, False)})"
    )


def color_space_string(space: ColorSpace, values: Sequence[float], alpha: float = 1.0) -> str:
    """``color(display-p3 r g b [/ a])`` with channels in [0, 1]."""
    channels = " ".join(format_number(float(v), 6) for v in values)
    return f"color({ColorSpace.coerce(space).css_name} {channels}{_alpha_suffix(alpha, False)})"

