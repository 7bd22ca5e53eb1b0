# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Colorful palettes without a base color.

Methods:
- spectrum: even hue division at a balanced lightness/chroma
- vibrant, pastel, dark, neon: even hue division with styled defaults
- warm: hues in [300°, 360°) ∪ [0°, 80°)
- cool: hues in [120°, 280°]
- earth: hues in [20°, 90°] at low chroma
- random: hue and lightness/chroma drawn uniformly

Every stochastic choice comes from a numpy Generator created per call from
the config seed, so the same seed always yields the same palette and
concurrent calls never share state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import numpy as np

from palettekit.model.color import clamp, clamp_int, from_hsl, from_oklch, normalize_hue
from palettekit.schema import ColorResult, ColorSpace


class ColorfulMethod(Enum):
    SPECTRUM = "spectrum"
    VIBRANT = "vibrant"
    PASTEL = "pastel"
    DARK = "dark"
    NEON = "neon"
    WARM = "warm"
    COOL = "cool"
    EARTH = "earth"
    RANDOM = "random"


@dataclass(frozen=True)
class ColorfulConfig:
    """
    Configuration for colorful palette generation.

    The fixed_* fields override the method's default lightness/chroma
    (OKLCH) or saturation/lightness (HSL). None means "use the default"
    (or, for random, "draw it").
    """

    method: Union[ColorfulMethod, str] = ColorfulMethod.SPECTRUM

    # Number of colors, clamped to [2, 200]
    count: int = 12

    # PRNG seed; None draws fresh entropy (not reproducible)
    seed: Optional[int] = None

    # Seeded Fisher-Yates shuffle of the hue-ordered output (not for random)
    shuffle: bool = False

    # OKLCH overrides
    fixed_lightness: Optional[float] = None  # 0-1
    fixed_chroma: Optional[float] = None  # 0-0.4

    # HSL overrides
    fixed_saturation: Optional[float] = None  # 0-100
    fixed_lightness_hsl: Optional[float] = None  # 0-100


@dataclass(frozen=True)
class _Style:
    """Default coordinates for a method family."""
    oklch_l: float
    oklch_c: float
    hsl_s: float
    hsl_l: float


_STYLES: dict[ColorfulMethod, _Style] = {
    ColorfulMethod.SPECTRUM: _Style(0.65, 0.18, 75, 55),
    ColorfulMethod.VIBRANT: _Style(0.65, 0.22, 85, 55),
    ColorfulMethod.PASTEL: _Style(0.88, 0.08, 50, 85),
    ColorfulMethod.DARK: _Style(0.35, 0.12, 60, 25),
    ColorfulMethod.NEON: _Style(0.80, 0.28, 100, 60),
    ColorfulMethod.WARM: _Style(0.65, 0.18, 75, 55),
    ColorfulMethod.COOL: _Style(0.60, 0.15, 65, 50),
    ColorfulMethod.EARTH: _Style(0.50, 0.08, 35, 40),
}

_NAMES = {
    ColorfulMethod.SPECTRUM: "Spectrum",
    ColorfulMethod.VIBRANT: "Vibrant",
    ColorfulMethod.PASTEL: "Pastel",
    ColorfulMethod.DARK: "Dark",
    ColorfulMethod.NEON: "Neon",
    ColorfulMethod.WARM: "Warm",
    ColorfulMethod.COOL: "Cool",
    ColorfulMethod.EARTH: "Earth",
    ColorfulMethod.RANDOM: "Random",
}

WARM_START = 300.0
WARM_SPAN = 140.0
COOL_RANGE = (120.0, 280.0)
EARTH_RANGE = (20.0, 90.0)


# =============================================================================
# Hue layouts
# =============================================================================


def _even_hues(count: int) -> list[float]:
    step = 360.0 / count
    return [normalize_hue(i * step) for i in range(count)]


def _warm_hues(count: int) -> list[float]:
    # 140° starting at 300°, wrapping through 360° into [0°, 80°)
    step = WARM_SPAN / count
    return [normalize_hue(WARM_START + i * step) for i in range(count)]


def _range_hues(count: int, start: float, end: float) -> list[float]:
    step = (end - start) / (count - 1)
    return [normalize_hue(start + i * step) for i in range(count)]


def _hues_for(method: ColorfulMethod, count: int) -> list[float]:
    if method is ColorfulMethod.WARM:
        # Ascending by requested hue, so the wrapped run starts at 0°
        return sorted(_warm_hues(count))
    if method is ColorfulMethod.COOL:
        return _range_hues(count, *COOL_RANGE)
    if method is ColorfulMethod.EARTH:
        return _range_hues(count, *EARTH_RANGE)
    return _even_hues(count)


# =============================================================================
# Generation
# =============================================================================


def _styled(
    hues: list[float],
    style: _Style,
    config: ColorfulConfig,
    space: ColorSpace,
) -> list[ColorResult]:
    if space is ColorSpace.OKLCH:
        l = _override(config.fixed_lightness, 0.0, 1.0, style.oklch_l)
        c = _override(config.fixed_chroma, 0.0, 0.4, style.oklch_c)
        return [from_oklch(l, c, h) for h in hues]

    s = _override(config.fixed_saturation, 0.0, 100.0, style.hsl_s)
    l = _override(config.fixed_lightness_hsl, 0.0, 100.0, style.hsl_l)
    return [from_hsl(h, s, l) for h in hues]


def _random(
    count: int,
    rng: np.random.Generator,
    config: ColorfulConfig,
    space: ColorSpace,
) -> list[ColorResult]:
    """Draw order per color: hue, then lightness, then chroma (or S, then L)."""
    results = []
    for _ in range(count):
        h = rng.random() * 360.0

        if space is ColorSpace.OKLCH:
            l = _override(config.fixed_lightness, 0.0, 1.0, None)
            if l is None:
                l = 0.4 + rng.random() * 0.4
            c = _override(config.fixed_chroma, 0.0, 0.4, None)
            if c is None:
                c = 0.1 + rng.random() * 0.18
            results.append(from_oklch(l, c, h))
        else:
            s = _override(config.fixed_saturation, 0.0, 100.0, None)
            if s is None:
                s = 50 + rng.random() * 45
            l = _override(config.fixed_lightness_hsl, 0.0, 100.0, None)
            if l is None:
                l = 35 + rng.random() * 40
            results.append(from_hsl(h, s, l))
    return results


def _override(value: Optional[float], lo: float, hi: float, default):
    return default if value is None else clamp(float(value), lo, hi)


def shuffle_colors(colors: list, rng: np.random.Generator) -> list:
    """Fisher-Yates shuffle driven by rng. Returns a new list."""
    result = list(colors)
    for i in range(len(result) - 1, 0, -1):
        j = int(rng.random() * (i + 1))
        result[i], result[j] = result[j], result[i]
    return result


def generate_colorful(
    config: ColorfulConfig = ColorfulConfig(),
    color_space: ColorSpace = ColorSpace.OKLCH,
) -> list[ColorResult]:
    """
    Generate a colorful palette with no base color.

    Args:
        config: Method, count, seed, shuffle flag and fixed overrides
        color_space: Space in which lightness/chroma (or S/L) are fixed

    Returns:
        config.count colors (clamped to [2, 200]). Non-random methods are
        ordered by hue (warm by OKLCH hue) unless shuffle is set.

    Raises:
        ValueError: If config.method is not a known method
    """
    method = ColorfulMethod(config.method)
    space = ColorSpace(color_space)
    count = clamp_int(config.count, 2, 200)
    rng = np.random.default_rng(config.seed)

    if method is ColorfulMethod.RANDOM:
        return _random(count, rng, config, space)

    colors = _styled(_hues_for(method, count), _STYLES[method], config, space)

    if config.shuffle:
        colors = shuffle_colors(colors, rng)

    return colors


def colorful_method_name(method: Union[ColorfulMethod, str]) -> str:
    """Display name for a colorful method."""
    return _NAMES[ColorfulMethod(method)]


def all_colorful_methods() -> list[ColorfulMethod]:
    return list(ColorfulMethod)
