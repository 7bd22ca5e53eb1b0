# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Harmony generation: hue rotations of a base color.

Only hue changes. Chroma and lightness (OKLCH) or saturation and lightness
(HSL) are held at the base color's values, and the base itself occupies the
zero-offset slot.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from palettekit.model.color import clamp_int, from_hsl, from_oklch, normalize_hue
from palettekit.schema import ColorResult, ColorSpace


GOLDEN_ANGLE = 137.507764


class HarmonyType(Enum):
    COMPLEMENTARY = "complementary"
    SPLIT_COMPLEMENTARY = "split-complementary"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    ANALOGOUS = "analogous"
    GOLDEN_RATIO = "golden-ratio"


_FIXED_OFFSETS: dict[HarmonyType, tuple[float, ...]] = {
    HarmonyType.COMPLEMENTARY: (0.0, 180.0),
    HarmonyType.SPLIT_COMPLEMENTARY: (0.0, 150.0, 210.0),
    HarmonyType.TRIADIC: (0.0, 120.0, 240.0),
    HarmonyType.TETRADIC: (0.0, 90.0, 180.0, 270.0),
}

_NAMES = {
    HarmonyType.COMPLEMENTARY: "Complementary",
    HarmonyType.SPLIT_COMPLEMENTARY: "Split Complementary",
    HarmonyType.TRIADIC: "Triadic",
    HarmonyType.TETRADIC: "Tetradic",
    HarmonyType.ANALOGOUS: "Analogous",
    HarmonyType.GOLDEN_RATIO: "Golden Ratio",
}


@dataclass(frozen=True)
class HarmonyConfig:
    """Configuration for harmony generation."""

    type: Union[HarmonyType, str] = HarmonyType.COMPLEMENTARY

    # Colors produced by golden-ratio, clamped to [3, 200]
    count: int = 5

    # Degrees between analogous neighbors, clamped to [5, 90]
    spread: float = 30.0


def harmony_offsets(config: HarmonyConfig) -> tuple[float, ...]:
    """Hue offsets (degrees from the base hue) for a harmony, in output order."""
    harmony = HarmonyType(config.type)

    if harmony in _FIXED_OFFSETS:
        return _FIXED_OFFSETS[harmony]

    if harmony is HarmonyType.ANALOGOUS:
        spread = min(max(float(config.spread), 5.0), 90.0)
        return (-2 * spread, -spread, 0.0, spread, 2 * spread)

    count = clamp_int(config.count, 3, 200)
    return tuple(i * GOLDEN_ANGLE for i in range(count))


def generate_harmony(
    base: ColorResult,
    config: HarmonyConfig = HarmonyConfig(),
    color_space: ColorSpace = ColorSpace.OKLCH,
) -> list[ColorResult]:
    """
    Generate harmonic colors from a base color.

    Args:
        base: Base color
        config: Harmony type and its options
        color_space: Space whose hue is rotated

    Returns:
        Ordered colors. Fixed harmonies start with the base; analogous puts
        it in the middle; golden-ratio starts with it.

    Raises:
        ValueError: If config.type is not a known harmony
    """
    offsets = harmony_offsets(config)

    if ColorSpace(color_space) is ColorSpace.OKLCH:
        l, c, h = base.oklch.l, base.oklch.c, base.oklch.h

        def rotate(offset: float) -> ColorResult:
            return from_oklch(l, c, normalize_hue(h + offset))
    else:
        h, s, l = base.hsl.h, base.hsl.s, base.hsl.l

        def rotate(offset: float) -> ColorResult:
            return from_hsl(normalize_hue(h + offset), s, l)

    return [base if offset == 0.0 else rotate(offset) for offset in offsets]


def harmony_name(harmony: Union[HarmonyType, str]) -> str:
    """Display name for a harmony type."""
    return _NAMES[HarmonyType(harmony)]


def all_harmony_types() -> list[HarmonyType]:
    return list(HarmonyType)
