# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Interpolation primitives for linear and circular (hue) coordinates.

Hue lives on a circle: 350° and 10° are 20° apart, not 340°. Every generator
that blends hues goes through lerp_hue or catmull_rom_hue so the shortest arc
is always taken.

Undefined hues (NaN, from achromatic colors) adopt the other endpoint's hue,
so blending gray into blue stays blue instead of sweeping through red.
"""

from __future__ import annotations

import math

from palettekit.model.color import normalize_hue


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b."""
    return a + (b - a) * t


def shortest_hue_delta(h1: float, h2: float) -> float:
    """Signed hue difference h2 - h1 wrapped into [-180, 180]."""
    diff = (h2 - h1) % 360.0
    if diff > 180.0:
        diff -= 360.0
    return diff


def lerp_hue(h1: float, h2: float, t: float) -> float:
    """
    Interpolate hue along the shortest arc.

    Example:
        >>> lerp_hue(350.0, 10.0, 0.5)
        0.0

    Returns:
        Hue in [0, 360)
    """
    if math.isnan(h1) and math.isnan(h2):
        return 0.0
    if math.isnan(h1):
        h1 = h2
    if math.isnan(h2):
        h2 = h1

    return normalize_hue(h1 + shortest_hue_delta(h1, h2) * t)


def unwrap_hue(reference: float, hue: float) -> float:
    """
    Express hue as the value closest to reference on the real line.

    unwrap_hue(350, 10) == 370, so a spline through both moves forward.
    """
    return reference + shortest_hue_delta(reference, hue)


def catmull_rom(p0: float, p1: float, p2: float, p3: float, t: float) -> float:
    """
    Uniform Catmull-Rom spline between p1 (t=0) and p2 (t=1).

    p0 and p3 are the neighboring control points that shape the tangents.
    """
    t2 = t * t
    t3 = t2 * t

    return 0.5 * (
        2.0 * p1
        + (-p0 + p2) * t
        + (2.0 * p0 - 5.0 * p1 + 4.0 * p2 - p3) * t2
        + (-p0 + 3.0 * p1 - 3.0 * p2 + p3) * t3
    )


def catmull_rom_hue(h0: float, h1: float, h2: float, h3: float, t: float) -> float:
    """
    Catmull-Rom spline for hue.

    The four hues are unwrapped into a continuous run around h1 (each relative
    to its spline neighbor), the spline is evaluated, then the result is
    wrapped back into [0, 360).
    """
    h0, h1, h2, h3 = _fill_undefined([h0, h1, h2, h3])

    uh1 = h1
    uh0 = unwrap_hue(uh1, h0)
    uh2 = unwrap_hue(uh1, h2)
    uh3 = unwrap_hue(uh2, h3)

    return normalize_hue(catmull_rom(uh0, uh1, uh2, uh3, t))


def _fill_undefined(hues: list[float]) -> list[float]:
    """Replace NaN hues with the nearest defined neighbor (0 if none)."""
    defined = [i for i, h in enumerate(hues) if not math.isnan(h)]
    if not defined:
        return [0.0] * len(hues)
    return [
        h if not math.isnan(h) else hues[min(defined, key=lambda j: abs(j - i))]
        for i, h in enumerate(hues)
    ]
