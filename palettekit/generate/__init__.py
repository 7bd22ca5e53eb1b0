# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Palette generators.

Every generator is a pure function of its inputs (plus the seed, for
colorful palettes) and builds its colors through the color model.
"""

from palettekit.generate.colorful import (
    ColorfulConfig,
    ColorfulMethod,
    generate_colorful,
)
from palettekit.generate.engine import KINDS, generate
from palettekit.generate.harmony import HarmonyConfig, HarmonyType, generate_harmony
from palettekit.generate.interpolation import (
    InterpolationConfig,
    InterpolationMethod,
    interpolate,
    interpolate_catmull_rom,
    interpolate_linear,
)
from palettekit.generate.tonal import (
    DEFAULT_STEPS,
    TonalConfig,
    generate_tonal_matrix,
    generate_tonal_scale,
)
from palettekit.generate.variations import (
    VariationConfig,
    VariationType,
    generate_variations,
)

__all__ = [
    # Dispatcher
    "generate",
    "KINDS",
    # Harmony
    "HarmonyType",
    "HarmonyConfig",
    "generate_harmony",
    # Variations
    "VariationType",
    "VariationConfig",
    "generate_variations",
    # Tonal
    "DEFAULT_STEPS",
    "TonalConfig",
    "generate_tonal_scale",
    "generate_tonal_matrix",
    # Interpolation
    "InterpolationMethod",
    "InterpolationConfig",
    "interpolate",
    "interpolate_linear",
    "interpolate_catmull_rom",
    # Colorful
    "ColorfulMethod",
    "ColorfulConfig",
    "generate_colorful",
]
