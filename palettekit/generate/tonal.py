# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Tonal scales and tonal matrices.

A tonal scale maps design-system steps (50 = lightest ... 950 = darkest) to
lightness, holding hue and letting chroma follow a parabola that peaks at
mid lightness. A tonal matrix stacks one scale per hue.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from palettekit.model.color import clamp, clamp_int, from_hsl, from_oklch, normalize_hue
from palettekit.schema import ColorResult, ColorSpace, TonalMatrix


# Material/Tailwind-like step scale
DEFAULT_STEPS: tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)
MINIMAL_STEPS: tuple[int, ...] = (100, 300, 500, 700, 900)

# Chroma peaks at this OKLCH lightness
CHROMA_PEAK_LIGHTNESS = 0.55


@dataclass(frozen=True)
class TonalConfig:
    """Configuration for tonal matrix generation."""

    # Step values, clamped to [0, 1000]; column order
    steps: Sequence[int] = DEFAULT_STEPS

    # Row hues in degrees; None means the base color's hue only
    hues: Optional[Sequence[float]] = None


def step_to_lightness(step: float) -> float:
    """
    Map a step (0-1000) to OKLCH lightness.

    50 → 0.9265, 500 → 0.535, 950 → 0.1435. Strictly decreasing.
    """
    return 0.97 - (step / 1000.0) * 0.87


def step_to_hsl_lightness(step: float) -> float:
    """Map a step to HSL lightness percent, kept within [5, 98]."""
    return clamp((1000.0 - step) / 10.0, 5.0, 98.0)


def chroma_for_lightness(base_chroma: float, lightness: float) -> float:
    """
    Chroma for a target lightness.

    Parabolic attenuation peaking at L = 0.55, never below 30% nor above
    120% of the base chroma, and never below 0.01.
    """
    curve = 1.0 - ((lightness - CHROMA_PEAK_LIGHTNESS) / CHROMA_PEAK_LIGHTNESS) ** 2
    max_chroma = base_chroma * 1.2
    return max(0.01, min(max_chroma, base_chroma * max(0.3, curve)))


def saturation_for_lightness(base_saturation: float, lightness: float) -> float:
    """HSL saturation attenuated toward the lightness extremes (floor 20%)."""
    multiplier = 1.0 - ((lightness - 50.0) / 50.0) ** 2 * 0.3
    return base_saturation * max(0.2, multiplier)


def _clamp_steps(steps: Sequence[float]) -> tuple[int, ...]:
    return tuple(clamp_int(step, 0, 1000) for step in steps)


def generate_tonal_scale(
    base: ColorResult,
    steps: Sequence[int] = DEFAULT_STEPS,
    color_space: ColorSpace = ColorSpace.OKLCH,
) -> list[ColorResult]:
    """
    Generate a tonal scale for the base color's hue.

    Returns:
        One color per step, in step order
    """
    steps = _clamp_steps(steps)

    if ColorSpace(color_space) is ColorSpace.OKLCH:
        c, h = base.oklch.c, base.oklch.h
        results = []
        for step in steps:
            l = step_to_lightness(step)
            results.append(from_oklch(l, chroma_for_lightness(c, l), h))
        return results

    h, s = base.hsl.h, base.hsl.s
    results = []
    for step in steps:
        l = step_to_hsl_lightness(step)
        results.append(from_hsl(h, saturation_for_lightness(s, l), l))
    return results


def generate_tonal_matrix(
    base: ColorResult,
    config: TonalConfig = TonalConfig(),
    color_space: ColorSpace = ColorSpace.OKLCH,
) -> TonalMatrix:
    """
    Generate a tonal matrix (hues × steps).

    Each row starts from a color with the row's hue and the base color's
    lightness and chroma (or saturation and lightness), then runs a tonal
    scale over the configured steps.

    Returns:
        TonalMatrix indexed [hue][step]
    """
    space = ColorSpace(color_space)
    steps = _clamp_steps(config.steps)

    if config.hues is None:
        base_hue = base.oklch.h if space is ColorSpace.OKLCH else base.hsl.h
        hues: tuple[float, ...] = (base_hue,)
    else:
        hues = tuple(normalize_hue(h) for h in config.hues)

    rows = []
    for hue in hues:
        if space is ColorSpace.OKLCH:
            row_base = from_oklch(base.oklch.l, base.oklch.c, hue)
        else:
            row_base = from_hsl(0.0 if math.isnan(hue) else hue, base.hsl.s, base.hsl.l)
        rows.append(tuple(generate_tonal_scale(row_base, steps, space)))

    return TonalMatrix(steps=steps, hues=hues, matrix=tuple(rows))


# =============================================================================
# Presets
# =============================================================================


def even_steps(count: int) -> tuple[int, ...]:
    """
    Spread `count` steps evenly over 50-950.

    even_steps(5) == (50, 275, 500, 725, 950). count is clamped to [2, 20].
    """
    count = clamp_int(count, 2, 20)
    interval = 900.0 / (count - 1)
    return tuple(int(math.floor(50 + i * interval + 0.5)) for i in range(count))


def even_hues(count: int, start_hue: float = 0.0) -> tuple[float, ...]:
    """`count` hues at equal intervals around the wheel, starting at start_hue."""
    count = clamp_int(count, 1, 360)
    start = 0.0 if math.isnan(start_hue) else start_hue
    interval = 360.0 / count
    return tuple(normalize_hue(start + i * interval) for i in range(count))


_HUE_PRESETS: dict[str, tuple[float, ...]] = {
    "triadic": (0.0, 120.0, 240.0),
    "tetradic": (0.0, 90.0, 180.0, 270.0),
    "complementary-split": (0.0, 150.0, 210.0),
}


def harmony_hues(base_hue: float, preset: str) -> tuple[float, ...]:
    """
    Row hues related to a base hue by a harmony.

    Args:
        base_hue: Hue in degrees
        preset: "triadic", "tetradic" or "complementary-split"; anything
            else yields the base hue alone
    """
    start = 0.0 if math.isnan(base_hue) else base_hue
    offsets = _HUE_PRESETS.get(preset, (0.0,))
    return tuple(normalize_hue(start + offset) for offset in offsets)
