# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Color model for palettekit.

Conversions, construction, parsing, circular interpolation and contrast.
"""

from palettekit.model.color import (
    as_color,
    from_hsl,
    from_oklch,
    from_rgb,
    normalize_hue,
    parse,
    random_color,
)
from palettekit.model.contrast import (
    apca_contrast,
    best_text_color,
    best_text_color_fast,
    relative_luminance,
    wcag_contrast,
)

__all__ = [
    "parse",
    "as_color",
    "from_oklch",
    "from_hsl",
    "from_rgb",
    "normalize_hue",
    "random_color",
    "relative_luminance",
    "wcag_contrast",
    "apca_contrast",
    "best_text_color",
    "best_text_color_fast",
]
