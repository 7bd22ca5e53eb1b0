# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Palettekit -- Perceptual color palettes in OKLCH.

Builds consistent hex/RGB/OKLCH/HSL colors, generates harmonies, variations,
tonal matrices, gradients and colorful palettes, and extracts palettes from
images.

Quick start::

    import palettekit
    from palettekit import HarmonyConfig, parse

    base = parse("#6366F1")
    colors = palettekit.generate("harmony", base, HarmonyConfig(type="triadic"))
    [c.hex for c in colors]

    palettekit.extract_colors("photo.jpg", 6)
"""

from __future__ import annotations

__version__ = "1.0.0"

from palettekit.errors import (
    GamutClampError,
    ImageDecodeFailure,
    InvalidColorFormat,
    PaletteKitError,
)
from palettekit.extract import extract_colors, extract_colors_async
from palettekit.generate import (
    ColorfulConfig,
    ColorfulMethod,
    HarmonyConfig,
    HarmonyType,
    InterpolationConfig,
    InterpolationMethod,
    TonalConfig,
    VariationConfig,
    VariationType,
    generate,
)
from palettekit.model import (
    apca_contrast,
    best_text_color,
    best_text_color_fast,
    from_hsl,
    from_oklch,
    from_rgb,
    parse,
    wcag_contrast,
)
from palettekit.schema import ColorResult, ColorSpace, TonalMatrix

__all__ = [
    # Core API
    "generate",
    "extract_colors",
    "extract_colors_async",
    "parse",
    "from_oklch",
    "from_hsl",
    "from_rgb",
    # Types
    "ColorResult",
    "ColorSpace",
    "TonalMatrix",
    # Configs
    "HarmonyType",
    "HarmonyConfig",
    "VariationType",
    "VariationConfig",
    "TonalConfig",
    "InterpolationMethod",
    "InterpolationConfig",
    "ColorfulMethod",
    "ColorfulConfig",
    # Contrast
    "wcag_contrast",
    "apca_contrast",
    "best_text_color",
    "best_text_color_fast",
    # Errors
    "PaletteKitError",
    "InvalidColorFormat",
    "ImageDecodeFailure",
    "GamutClampError",
    # Version
    "__version__",
]
