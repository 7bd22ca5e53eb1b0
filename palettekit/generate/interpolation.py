# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Gradient interpolation through ordered control colors.

Two methods:
1. Linear: piecewise linear per segment (hue along the shortest arc)
2. Catmull-Rom: smooth cubic spline passing through every control point

Samples are spread evenly over the whole sequence, so a segment receives a
share of the samples proportional to 1 / (n - 1).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence, Union

from palettekit.model.circular import catmull_rom, catmull_rom_hue, lerp, lerp_hue
from palettekit.model.color import clamp, from_hsl, from_oklch
from palettekit.schema import ColorResult, ColorSpace


MAX_STEPS = 1000


class InterpolationMethod(Enum):
    LINEAR = "linear"
    CATMULL_ROM = "catmull-rom"


_NAMES = {
    InterpolationMethod.LINEAR: "Linear",
    InterpolationMethod.CATMULL_ROM: "Catmull-Rom (Smooth)",
}


@dataclass(frozen=True)
class InterpolationConfig:
    """Configuration for interpolation."""

    method: Union[InterpolationMethod, str] = InterpolationMethod.LINEAR

    # Output length; below 2 returns the first and last control points
    steps: int = 12

    # Control points, used when called through palettekit.generate()
    colors: Sequence[ColorResult] = field(default_factory=tuple)


def _positions(n_colors: int, steps: int):
    """Yield (segment_index, local_t) for each evenly spaced sample."""
    segments = n_colors - 1
    for i in range(steps):
        global_pos = (i / (steps - 1)) * segments
        segment = min(int(math.floor(global_pos)), segments - 1)
        yield segment, global_pos - segment


def _short_circuit(colors: Sequence[ColorResult], steps: int):
    if len(colors) == 0:
        return []
    if len(colors) == 1:
        return [colors[0]]
    if steps < 2:
        return [colors[0], colors[-1]]
    return None


def _mix(
    c1: ColorResult,
    c2: ColorResult,
    t: float,
    space: ColorSpace,
) -> ColorResult:
    """Blend two colors; t = 0 and t = 1 return the endpoints themselves."""
    if t <= 0.0:
        return c1
    if t >= 1.0:
        return c2

    if space is ColorSpace.OKLCH:
        return from_oklch(
            lerp(c1.oklch.l, c2.oklch.l, t),
            lerp(c1.oklch.c, c2.oklch.c, t),
            lerp_hue(c1.oklch.h, c2.oklch.h, t),
        )

    return from_hsl(
        lerp_hue(c1.hsl.h, c2.hsl.h, t),
        lerp(c1.hsl.s, c2.hsl.s, t),
        lerp(c1.hsl.l, c2.hsl.l, t),
    )


def interpolate_linear(
    colors: Sequence[ColorResult],
    steps: int,
    color_space: ColorSpace = ColorSpace.OKLCH,
) -> list[ColorResult]:
    """
    Linear interpolation through two or more colors.

    Returns:
        `steps` colors; the first is colors[0] and the last is colors[-1].
        Empty input gives [], a single color gives [that color].
    """
    colors = list(colors)
    short = _short_circuit(colors, steps)
    if short is not None:
        return short

    space = ColorSpace(color_space)
    steps = min(int(steps), MAX_STEPS)

    return [
        _mix(colors[segment], colors[segment + 1], local_t, space)
        for segment, local_t in _positions(len(colors), steps)
    ]


def interpolate_catmull_rom(
    colors: Sequence[ColorResult],
    steps: int,
    color_space: ColorSpace = ColorSpace.OKLCH,
) -> list[ColorResult]:
    """
    Catmull-Rom spline interpolation through the colors.

    Each segment uses four control points; the first and last colors are
    reused at the ends of the sequence. Lightness is clamped to [0, 1]
    (OKLCH) or [0, 100] (HSL), chroma and saturation to >= 0. With two
    control points this is identical to linear interpolation.
    """
    colors = list(colors)
    short = _short_circuit(colors, steps)
    if short is not None:
        return short
    if len(colors) == 2:
        return interpolate_linear(colors, steps, color_space)

    space = ColorSpace(color_space)
    steps = min(int(steps), MAX_STEPS)
    last = len(colors) - 1

    results = []
    for segment, local_t in _positions(len(colors), steps):
        p0 = colors[max(0, segment - 1)]
        p1 = colors[segment]
        p2 = colors[min(last, segment + 1)]
        p3 = colors[min(last, segment + 2)]

        if local_t <= 0.0:
            results.append(p1)
            continue
        if local_t >= 1.0:
            results.append(p2)
            continue

        if space is ColorSpace.OKLCH:
            l = catmull_rom(p0.oklch.l, p1.oklch.l, p2.oklch.l, p3.oklch.l, local_t)
            c = catmull_rom(p0.oklch.c, p1.oklch.c, p2.oklch.c, p3.oklch.c, local_t)
            h = catmull_rom_hue(p0.oklch.h, p1.oklch.h, p2.oklch.h, p3.oklch.h, local_t)
            results.append(from_oklch(clamp(l, 0.0, 1.0), max(0.0, c), h))
        else:
            h = catmull_rom_hue(p0.hsl.h, p1.hsl.h, p2.hsl.h, p3.hsl.h, local_t)
            s = catmull_rom(p0.hsl.s, p1.hsl.s, p2.hsl.s, p3.hsl.s, local_t)
            l = catmull_rom(p0.hsl.l, p1.hsl.l, p2.hsl.l, p3.hsl.l, local_t)
            results.append(from_hsl(h, clamp(s, 0.0, 100.0), clamp(l, 0.0, 100.0)))

    return results


def interpolate(
    colors: Sequence[ColorResult],
    config: InterpolationConfig = InterpolationConfig(),
    color_space: ColorSpace = ColorSpace.OKLCH,
) -> list[ColorResult]:
    """
    Interpolate using the configured method.

    Raises:
        ValueError: If config.method is not a known method
    """
    method = InterpolationMethod(config.method)
    if method is InterpolationMethod.CATMULL_ROM:
        return interpolate_catmull_rom(colors, config.steps, color_space)
    return interpolate_linear(colors, config.steps, color_space)


def interpolation_method_name(method: Union[InterpolationMethod, str]) -> str:
    """Display name for an interpolation method."""
    return _NAMES[InterpolationMethod(method)]


def all_interpolation_methods() -> list[InterpolationMethod]:
    return list(InterpolationMethod)
