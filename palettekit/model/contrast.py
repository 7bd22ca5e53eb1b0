# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Contrast math over ColorResult values.

- WCAG 2.1 contrast ratio (1:1 to 21:1)
- APCA lightness contrast (Lc, roughly -108 to +106)
- Black/white text selection for a background

Generators never call this module; it is for callers rendering swatches.

References:
- https://www.w3.org/TR/WCAG21/#dfn-relative-luminance
- https://github.com/Myndex/SAPC-APCA (simplified APCA-W3)
"""

from __future__ import annotations

import numpy as np

from palettekit.model.color import ColorLike, as_color, from_rgb
from palettekit.schema import ColorResult


WHITE = from_rgb(255, 255, 255)
BLACK = from_rgb(0, 0, 0)

# OKLCH lightness below which white text reads better (fast path)
FAST_LIGHTNESS_THRESHOLD = 0.6

# APCA-W3 constants
_MAIN_TRC = 2.4
_SRGB_Y = np.array([0.2126729, 0.7151522, 0.0721750], dtype=np.float64)
_NORM_BG = 0.56
_NORM_TXT = 0.57
_REV_TXT = 0.62
_REV_BG = 0.65
_SCALE_BOW = 1.14
_SCALE_WOB = 1.14
_LO_BOW_OFFSET = 0.027
_LO_WOB_OFFSET = 0.027
_LO_CLIP = 0.1


def _channels(color: ColorResult) -> np.ndarray:
    return np.array([color.rgb.r, color.rgb.g, color.rgb.b], dtype=np.float64) / 255.0


# =============================================================================
# WCAG 2.1
# =============================================================================


def relative_luminance(color: ColorLike) -> float:
    """WCAG relative luminance (0 = black, 1 = white)."""
    srgb = _channels(as_color(color))
    linear = np.where(
        srgb <= 0.03928,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )
    return float(0.2126 * linear[0] + 0.7152 * linear[1] + 0.0722 * linear[2])


def wcag_contrast(color1: ColorLike, color2: ColorLike) -> float:
    """
    WCAG 2.1 contrast ratio between two colors.

    Symmetric; 1.0 for identical colors, 21.0 for black on white.
    """
    l1 = relative_luminance(color1)
    l2 = relative_luminance(color2)
    return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)


# =============================================================================
# APCA
# =============================================================================


def _screen_luminance(color: ColorResult) -> float:
    """APCA estimated screen luminance Y (simple 2.4 power curve)."""
    return float(np.dot(np.power(_channels(color), _MAIN_TRC), _SRGB_Y))


def _sapc(txt_y: float, bg_y: float) -> float:
    txt_y = max(0.0, txt_y)
    bg_y = max(0.0, bg_y)

    if bg_y > txt_y:
        # Normal polarity: dark text on light background
        sapc = (bg_y ** _NORM_BG - txt_y ** _NORM_TXT) * _SCALE_BOW
        return 0.0 if sapc < _LO_CLIP else sapc - _LO_BOW_OFFSET

    # Reverse polarity: light text on dark background
    sapc = (bg_y ** _REV_BG - txt_y ** _REV_TXT) * _SCALE_WOB
    return 0.0 if sapc > -_LO_CLIP else sapc + _LO_WOB_OFFSET


def apca_contrast(text: ColorLike, background: ColorLike) -> float:
    """
    APCA lightness contrast (Lc) of text over a background.

    Positive values mean dark text on a light background, negative values
    light text on a dark background. Contrast below Lc 10 is reported as 0.
    """
    txt_y = _screen_luminance(as_color(text))
    bg_y = _screen_luminance(as_color(background))
    return _sapc(txt_y, bg_y) * 100.0


# =============================================================================
# Text color selection
# =============================================================================


def best_text_color(background: ColorLike) -> ColorResult:
    """
    Pick black or white text for a background using APCA.

    Returns:
        WHITE if white text has the larger |Lc|, otherwise BLACK.
    """
    bg = as_color(background)
    white_contrast = abs(apca_contrast(WHITE, bg))
    black_contrast = abs(apca_contrast(BLACK, bg))
    return WHITE if white_contrast > black_contrast else BLACK


def best_text_color_fast(background: ColorLike) -> ColorResult:
    """
    Pick black or white text from OKLCH lightness alone.

    Cheaper than best_text_color for repeated calls (no APCA math).
    """
    bg = as_color(background)
    return WHITE if bg.oklch.l < FAST_LIGHTNESS_THRESHOLD else BLACK
