# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
ColorResult construction and parsing.

Every ColorResult is built here. The canonical path is OKLCH: the requested
color is converted to OKLCH, chroma is clamped into sRGB (L and H held
fixed), and RGB/HSL/hex/CSS strings are derived from the clamped value.
Channels are rounded to integers only at the very end.
"""

from __future__ import annotations

import math
import re
from typing import Optional, Union

import numpy as np

from palettekit.errors import InvalidColorFormat
from palettekit.model.colorspace import (
    clamp_chroma,
    hsl_to_srgb,
    oklch_to_srgb,
    srgb_to_hsl,
    srgb_to_oklch,
)
from palettekit.schema import ACHROMATIC_CHROMA, HSL, OKLCH, RGB, ColorResult


ColorLike = Union[ColorResult, str]


# =============================================================================
# Numeric helpers
# =============================================================================


def normalize_hue(h: float) -> float:
    """
    Wrap a hue into [0, 360).

    NaN (undefined hue) passes through unchanged.
    """
    h = float(h)
    if math.isnan(h):
        return h
    wrapped = h % 360.0
    # -1e-20 % 360 is 360.0 in floating point
    return 0.0 if wrapped >= 360.0 else wrapped


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp a number into [lo, hi]."""
    return min(max(value, lo), hi)


def clamp_int(value: float, lo: int, hi: int) -> int:
    """Round and clamp a numeric option into [lo, hi]."""
    return int(clamp(round(value), lo, hi))


def _to_byte(value: float) -> int:
    """Round a 0-255 channel half-up to an 8-bit integer."""
    return int(clamp(math.floor(value + 0.5), 0, 255))


# =============================================================================
# Construction
# =============================================================================


def from_oklch(l: float, c: float, h: float) -> ColorResult:
    """
    Create a color from OKLCH values.

    Out-of-gamut requests keep their lightness and hue; chroma is reduced
    until the color fits in sRGB.

    Args:
        l: Lightness (clamped to [0, 1])
        c: Chroma (negative values become 0)
        h: Hue in degrees (any real value, NaN for achromatic)
    """
    l = 0.0 if math.isnan(l) else l
    c = 0.0 if math.isnan(c) else c
    hue = 0.0 if math.isnan(h) else normalize_hue(h)

    L, C, H = clamp_chroma(l, c, hue)
    srgb = oklch_to_srgb(np.array([L, C, H]))
    hs, ss, ls = (float(v) for v in srgb_to_hsl(srgb))

    return _build(srgb, L, C, H, hs, ss * 100.0, ls * 100.0)


def from_hsl(h: float, s: float, l: float) -> ColorResult:
    """
    Create a color from HSL values.

    Every HSL color lies inside sRGB, so the requested HSL is kept as-is
    (hue wrapped, saturation and lightness clamped to [0, 100]).

    Args:
        h: Hue in degrees
        s: Saturation percent
        l: Lightness percent
    """
    h = 0.0 if math.isnan(h) else normalize_hue(h)
    s = clamp(0.0 if math.isnan(s) else s, 0.0, 100.0)
    l = clamp(0.0 if math.isnan(l) else l, 0.0, 100.0)

    srgb = hsl_to_srgb(np.array([h, s / 100.0, l / 100.0]))
    L, C, H = (float(v) for v in srgb_to_oklch(srgb))
    L, C, H = clamp_chroma(L, C, H)

    return _build(srgb, L, C, H, h, s, l)


def from_rgb(r: float, g: float, b: float) -> ColorResult:
    """
    Create a color from sRGB channels in 0-255 (floats allowed).
    """
    channels = np.clip(np.array([r, g, b], dtype=np.float64), 0.0, 255.0)
    srgb = channels / 255.0
    L, C, H = (float(v) for v in srgb_to_oklch(srgb))
    hs, ss, ls = (float(v) for v in srgb_to_hsl(srgb))

    return _build(
        srgb, clamp(L, 0.0, 1.0), C, H, hs, ss * 100.0, ls * 100.0, channels=channels
    )


def random_color(rng: Optional[np.random.Generator] = None) -> ColorResult:
    """
    Generate a random mid-range color.

    Lightness 0.3-0.8, chroma 0.05-0.25, any hue.

    Args:
        rng: Generator to draw from. A fresh, unseeded one if None.
    """
    rng = rng if rng is not None else np.random.default_rng()
    l = 0.3 + rng.random() * 0.5
    c = 0.05 + rng.random() * 0.2
    h = rng.random() * 360.0
    return from_oklch(l, c, h)


def _build(
    srgb: np.ndarray,
    L: float,
    C: float,
    H: float,
    hsl_h: float,
    hsl_s: float,
    hsl_l: float,
    channels: Optional[np.ndarray] = None,
) -> ColorResult:
    """Assemble a ColorResult from a clamped color.

    channels, when given, are the caller's own 0-255 values and are
    rounded as-is.
    """
    if channels is None:
        channels = srgb * 255.0
    r, g, b = (_to_byte(float(v)) for v in channels)
    hex_val = f"#{r:02X}{g:02X}{b:02X}"

    hue = float("nan") if C < ACHROMATIC_CHROMA else H
    hsl_h = normalize_hue(hsl_h)
    hsl_s = clamp(hsl_s, 0.0, 100.0)
    hsl_l = clamp(hsl_l, 0.0, 100.0)

    hue_css = "none" if math.isnan(hue) else f"{hue:.1f}"

    return ColorResult(
        hex=hex_val,
        rgb=RGB(r, g, b),
        oklch=OKLCH(l=L, c=C, h=hue),
        hsl=HSL(h=hsl_h, s=hsl_s, l=hsl_l),
        css_rgb=f"rgb({r}, {g}, {b})",
        css_oklch=f"oklch({L * 100:.1f}% {C:.3f} {hue_css})",
        css_hsl=f"hsl({hsl_h:.0f}, {hsl_s:.0f}%, {hsl_l:.0f}%)",
    )


# =============================================================================
# Parsing
# =============================================================================

_HEX_RE = re.compile(r"^#?([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$")
_FUNC_RE = re.compile(r"^(rgba?|hsla?|oklch)\(\s*(.*?)\s*\)$")
_TOKEN_RE = re.compile(
    r"^([-+]?(?:\d+\.?\d*|\.\d+)(?:e[-+]?\d+)?)(%|deg|turn|rad|grad)?$"
)

_ANGLE_TO_DEG = {
    None: 1.0,
    "deg": 1.0,
    "turn": 360.0,
    "rad": 180.0 / math.pi,
    "grad": 0.9,
}

# oklch() chroma percentages are relative to 0.4 (CSS Color 4)
_OKLCH_CHROMA_100 = 0.4


def parse(value: str) -> ColorResult:
    """
    Parse a color literal and return a normalized ColorResult.

    Recognized (case-insensitive):
        - Hex: "#6366F1", "6366f1", "#66F", with optional alpha digits
        - rgb()/rgba(): "rgb(99, 102, 241)", "rgb(39% 40% 95% / 0.5)"
        - hsl()/hsla(): "hsl(239, 84%, 67%)", "hsl(0.66turn 84% 67%)"
        - oklch(): "oklch(58.5% 0.233 277.1)", "oklch(0.585 0.233 none)"

    Alpha must be 0-1 or a percentage; it is validated and then ignored.

    Raises:
        InvalidColorFormat: If the string is not one of the above.
    """
    if not isinstance(value, str):
        raise InvalidColorFormat(value)
    text = value.strip().lower()

    m = _HEX_RE.match(text)
    if m:
        return _parse_hex(m.group(1))

    m = _FUNC_RE.match(text)
    if not m:
        raise InvalidColorFormat(value)

    func, body = m.group(1), m.group(2)
    tokens = body.replace(",", " ").replace("/", " ").split()
    if len(tokens) not in (3, 4):
        raise InvalidColorFormat(value)

    try:
        if len(tokens) == 4:
            _parse_alpha(tokens[3])
        if func.startswith("rgb"):
            return _parse_rgb_tokens(tokens[:3])
        if func.startswith("hsl"):
            return _parse_hsl_tokens(tokens[:3])
        return _parse_oklch_tokens(tokens[:3])
    except ValueError as exc:
        raise InvalidColorFormat(value) from exc


def as_color(value: ColorLike) -> ColorResult:
    """Accept a ColorResult or anything parse() understands."""
    if isinstance(value, ColorResult):
        return value
    return parse(value)


def _parse_hex(digits: str) -> ColorResult:
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits[:3])
    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    return from_rgb(r, g, b)


def _split_token(token: str) -> tuple[float, Optional[str]]:
    m = _TOKEN_RE.match(token)
    if not m:
        raise ValueError(f"Invalid numeric token: {token!r}")
    number = float(m.group(1))
    if not math.isfinite(number):
        raise ValueError(f"Non-finite numeric token: {token!r}")
    return number, m.group(2)


def _parse_angle(token: str) -> float:
    if token == "none":
        return float("nan")
    number, unit = _split_token(token)
    if unit == "%":
        raise ValueError("Hue cannot be a percentage")
    return number * _ANGLE_TO_DEG[unit]


def _parse_alpha(token: str) -> float:
    """Opacity: 0-1 or 0%-100%. Validated, then dropped by callers."""
    if token == "none":
        return 1.0
    number, unit = _split_token(token)
    if unit == "%":
        number /= 100.0
    elif unit is not None:
        raise ValueError(f"Unexpected unit in alpha {token!r}")
    if not 0.0 <= number <= 1.0:
        raise ValueError(f"Alpha out of range: {token!r}")
    return number


def _parse_percent(token: str) -> float:
    """Saturation/lightness: "84%" or bare 84 both mean 84 percent."""
    if token == "none":
        return 0.0
    number, unit = _split_token(token)
    if unit not in (None, "%"):
        raise ValueError(f"Unexpected unit in {token!r}")
    return number


def _parse_rgb_tokens(tokens: list[str]) -> ColorResult:
    channels = []
    for token in tokens:
        number, unit = _split_token(token)
        if unit == "%":
            number = number / 100.0 * 255.0
        elif unit is not None:
            raise ValueError(f"Unexpected unit in {token!r}")
        channels.append(clamp(number, 0.0, 255.0))
    return from_rgb(*channels)


def _parse_hsl_tokens(tokens: list[str]) -> ColorResult:
    h = _parse_angle(tokens[0])
    s = _parse_percent(tokens[1])
    l = _parse_percent(tokens[2])
    return from_hsl(0.0 if math.isnan(h) else h, s, l)


def _parse_oklch_tokens(tokens: list[str]) -> ColorResult:
    l_num, l_unit = _split_token(tokens[0])
    if l_unit == "%":
        l_num /= 100.0
    elif l_unit is not None:
        raise ValueError(f"Unexpected unit in {tokens[0]!r}")

    c_num, c_unit = _split_token(tokens[1])
    if c_unit == "%":
        c_num = c_num / 100.0 * _OKLCH_CHROMA_100
    elif c_unit is not None:
        raise ValueError(f"Unexpected unit in {tokens[1]!r}")

    h = _parse_angle(tokens[2])
    return from_oklch(l_num, c_num, h)
