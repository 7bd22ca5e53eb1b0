# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Schema definitions for palette colors.

All types in this module are immutable (frozen dataclasses).
Generators build new instances and never mutate a produced color.
"""

from palettekit.schema.color_result import (
    ACHROMATIC_CHROMA,
    HSL,
    OKLCH,
    RGB,
    ColorResult,
    ColorSpace,
    TonalMatrix,
)

__all__ = [
    "ACHROMATIC_CHROMA",
    # Channel types
    "RGB",
    "OKLCH",
    "HSL",
    # Core value
    "ColorResult",
    "ColorSpace",
    # Tonal grid
    "TonalMatrix",
]
