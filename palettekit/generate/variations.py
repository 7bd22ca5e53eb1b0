# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Variation generation: one-parameter sweeps from a base color.

Each variation samples t = i / (count - 1) for i in [0, count) and applies a
fixed curve to the base color's coordinates. OKLCH curves attenuate chroma
near black and white, where sRGB cannot hold much of it; HSL curves are the
scaled equivalents.

    Type                 OKLCH                                   HSL
    monochromatic        L = 0.15 + 0.75t, C *= 1-((L-.5)/.5)²·.5   L = 10 + 80t, S *= 0.9
    shades               L *= 1 - 0.85t (>= 0.05), C *= 1 - 0.3t   L *= 1 - 0.9t (>= 5)
    tints                L += (0.97 - L)t, C *= 1 - 0.7t           L += (95 - L)t, S *= 1 - 0.5t
    tones                C *= 1 - 0.9t                             S *= 1 - 0.95t
    temperature          H = 240 - 210t, C *= 0.8                  H = 240 - 210t
    saturation-gradient  C = 0.01 + 0.28t                          S = 5 + 90t
    lightness-gradient   L = 0.1 + 0.85t, C *= 1-((L-.55)/.55)²·.4 L = 5 + 90t
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

from palettekit.model.color import clamp_int, from_hsl, from_oklch
from palettekit.schema import ColorResult, ColorSpace


class VariationType(Enum):
    MONOCHROMATIC = "monochromatic"
    SHADES = "shades"
    TINTS = "tints"
    TONES = "tones"
    TEMPERATURE = "temperature"
    SATURATION_GRADIENT = "saturation-gradient"
    LIGHTNESS_GRADIENT = "lightness-gradient"


_NAMES = {
    VariationType.MONOCHROMATIC: "Monochromatic",
    VariationType.SHADES: "Shades (Darker)",
    VariationType.TINTS: "Tints (Lighter)",
    VariationType.TONES: "Tones (Muted)",
    VariationType.TEMPERATURE: "Temperature",
    VariationType.SATURATION_GRADIENT: "Saturation",
    VariationType.LIGHTNESS_GRADIENT: "Lightness",
}


@dataclass(frozen=True)
class VariationConfig:
    """Configuration for variation generation."""

    type: Union[VariationType, str] = VariationType.MONOCHROMATIC

    # Number of colors, clamped to [2, 100]
    count: int = 10


# A curve maps (base coordinates, t) to new coordinates:
# OKLCH curves take and return (L, C, H); HSL curves (H, S, L).
Curve = Callable[[float, float, float, float], tuple[float, float, float]]


# =============================================================================
# OKLCH curves
# =============================================================================


def _mono_oklch(l: float, c: float, h: float, t: float) -> tuple[float, float, float]:
    new_l = 0.15 + t * 0.75
    return new_l, c * (1 - ((new_l - 0.5) / 0.5) ** 2 * 0.5), h


def _shades_oklch(l: float, c: float, h: float, t: float) -> tuple[float, float, float]:
    return max(0.05, l * (1 - t * 0.85)), c * (1 - t * 0.3), h


def _tints_oklch(l: float, c: float, h: float, t: float) -> tuple[float, float, float]:
    return l + (0.97 - l) * t, c * (1 - t * 0.7), h


def _tones_oklch(l: float, c: float, h: float, t: float) -> tuple[float, float, float]:
    return l, c * (1 - t * 0.9), h


def _temperature_oklch(l: float, c: float, h: float, t: float) -> tuple[float, float, float]:
    # Cool blue (240°) to warm orange (30°)
    return l, c * 0.8, 240 - t * 210


def _saturation_oklch(l: float, c: float, h: float, t: float) -> tuple[float, float, float]:
    return l, 0.01 + t * 0.28, h


def _lightness_oklch(l: float, c: float, h: float, t: float) -> tuple[float, float, float]:
    new_l = 0.1 + t * 0.85
    return new_l, c * (1 - ((new_l - 0.55) / 0.55) ** 2 * 0.4), h


# =============================================================================
# HSL curves
# =============================================================================


def _mono_hsl(h: float, s: float, l: float, t: float) -> tuple[float, float, float]:
    return h, s * 0.9, 10 + t * 80


def _shades_hsl(h: float, s: float, l: float, t: float) -> tuple[float, float, float]:
    return h, s, max(5.0, l * (1 - t * 0.9))


def _tints_hsl(h: float, s: float, l: float, t: float) -> tuple[float, float, float]:
    return h, s * (1 - t * 0.5), l + (95 - l) * t


def _tones_hsl(h: float, s: float, l: float, t: float) -> tuple[float, float, float]:
    return h, s * (1 - t * 0.95), l


def _temperature_hsl(h: float, s: float, l: float, t: float) -> tuple[float, float, float]:
    return 240 - t * 210, s, l


def _saturation_hsl(h: float, s: float, l: float, t: float) -> tuple[float, float, float]:
    return h, 5 + t * 90, l


def _lightness_hsl(h: float, s: float, l: float, t: float) -> tuple[float, float, float]:
    return h, s, 5 + t * 90


_OKLCH_CURVES: dict[VariationType, Curve] = {
    VariationType.MONOCHROMATIC: _mono_oklch,
    VariationType.SHADES: _shades_oklch,
    VariationType.TINTS: _tints_oklch,
    VariationType.TONES: _tones_oklch,
    VariationType.TEMPERATURE: _temperature_oklch,
    VariationType.SATURATION_GRADIENT: _saturation_oklch,
    VariationType.LIGHTNESS_GRADIENT: _lightness_oklch,
}

_HSL_CURVES: dict[VariationType, Curve] = {
    VariationType.MONOCHROMATIC: _mono_hsl,
    VariationType.SHADES: _shades_hsl,
    VariationType.TINTS: _tints_hsl,
    VariationType.TONES: _tones_hsl,
    VariationType.TEMPERATURE: _temperature_hsl,
    VariationType.SATURATION_GRADIENT: _saturation_hsl,
    VariationType.LIGHTNESS_GRADIENT: _lightness_hsl,
}


def generate_variations(
    base: ColorResult,
    config: VariationConfig = VariationConfig(),
    color_space: ColorSpace = ColorSpace.OKLCH,
) -> list[ColorResult]:
    """
    Generate a variation sweep from a base color.

    Args:
        base: Base color
        config: Variation type and color count
        color_space: Space in which the curve is applied

    Returns:
        config.count colors (clamped to [2, 100]), ordered by t from 0 to 1

    Raises:
        ValueError: If config.type is not a known variation
    """
    variation = VariationType(config.type)
    count = clamp_int(config.count, 2, 100)
    samples = [i / (count - 1) for i in range(count)]

    if ColorSpace(color_space) is ColorSpace.OKLCH:
        curve = _OKLCH_CURVES[variation]
        l, c, h = base.oklch.l, base.oklch.c, base.oklch.h
        return [from_oklch(*curve(l, c, h, t)) for t in samples]

    curve = _HSL_CURVES[variation]
    h, s, l = base.hsl.h, base.hsl.s, base.hsl.l
    return [from_hsl(*curve(h, s, l, t)) for t in samples]


def variation_name(variation: Union[VariationType, str]) -> str:
    """Display name for a variation type."""
    return _NAMES[VariationType(variation)]


def all_variation_types() -> list[VariationType]:
    return list(VariationType)
