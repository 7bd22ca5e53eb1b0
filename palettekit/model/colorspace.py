# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chains:
    sRGB → Linear RGB → OKLab → OKLCH
    sRGB ↔ HSL

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- OKLCH: Cylindrical form of OKLab (Lightness, Chroma, Hue)
- HSL: CSS Color Module Level 4, hsl-to-rgb

All conversions are pure NumPy, operate on arrays of shape (..., 3) and keep
float64 precision. Rounding to 8-bit channels happens only in palettekit.model.color.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from palettekit.errors import GamutClampError

logger = logging.getLogger(__name__)


# Linear RGB may overshoot [0, 1] by this much and still count as in gamut.
GAMUT_TOLERANCE = 1e-6

# Bisection stops once the chroma interval is narrower than this.
CHROMA_RESOLUTION = 1e-7

# No sRGB color has an OKLCH chroma above ~0.37.
MAX_CHROMA = 0.5


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((np.maximum(srgb, 0.04045) + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear. Output is clipped to [0, 1].
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Negative values would produce NaN in the power function
    linear_safe = np.maximum(linear, 0.0)
    srgb = np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055,
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# Linear RGB ↔ OKLab
# =============================================================================

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS (cube root) to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

_M1_INV = np.linalg.inv(_M1)
_M2_INV = np.linalg.inv(_M2)


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    lms = np.einsum('...j,ij->...i', rgb, _M1)
    # Signed cube root keeps out-of-gamut inputs well defined
    lms_cbrt = np.cbrt(lms)
    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB (unclipped).

    Values outside [0, 1] mean the color lies outside the sRGB gamut.
    """
    lab = np.asarray(lab, dtype=np.float64)
    lms = np.einsum('...j,ij->...i', lab, _M2_INV) ** 3
    return np.einsum('...j,ij->...i', lms, _M1_INV)


# =============================================================================
# OKLab ↔ OKLCH
# =============================================================================


def oklab_to_oklch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to OKLCH (cylindrical coordinates).

    H is in degrees [0, 360). Hue is always numeric here; the caller decides
    whether a low-chroma color counts as achromatic.
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.hypot(a, b)
    H = np.degrees(np.arctan2(b, a)) % 360.0
    # Tiny negative angles wrap to exactly 360.0 in floating point
    H = np.where(H >= 360.0, 0.0, H)

    return np.stack([L, C, H], axis=-1)


def oklch_to_oklab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert OKLCH (H in degrees) to OKLab."""
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = np.radians(lch[..., 2])

    return np.stack([L, C * np.cos(H_rad), C * np.sin(H_rad)], axis=-1)


# =============================================================================
# Convenience: sRGB ↔ OKLCH (full chain)
# =============================================================================


def srgb_to_oklch(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to OKLCH.

    Full chain: sRGB → Linear RGB → OKLab → OKLCH
    """
    return oklab_to_oklch(linear_rgb_to_oklab(srgb_to_linear(srgb)))


def oklch_to_linear_rgb(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """OKLCH → OKLab → Linear RGB, without clipping."""
    return oklab_to_linear_rgb(oklch_to_oklab(lch))


def oklch_to_srgb(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to sRGB [0,1].

    Values are clipped to [0, 1]. Callers that need hue-preserving gamut
    mapping run clamp_chroma first.
    """
    return linear_to_srgb(oklch_to_linear_rgb(lch))


# =============================================================================
# sRGB ↔ HSL
# =============================================================================


def srgb_to_hsl(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to HSL.

    Returns:
        Array of shape (..., 3) with H in degrees [0, 360) and S, L in [0, 1].
        Achromatic colors (max == min) get H = 0 and S = 0.
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    r, g, b = srgb[..., 0], srgb[..., 1], srgb[..., 2]

    mx = np.max(srgb, axis=-1)
    mn = np.min(srgb, axis=-1)
    delta = mx - mn
    light = (mx + mn) / 2.0

    chromatic = delta > 0.0
    safe_delta = np.where(chromatic, delta, 1.0)

    denom = 1.0 - np.abs(2.0 * light - 1.0)
    sat = np.where(chromatic & (denom > 0.0), delta / np.where(denom > 0.0, denom, 1.0), 0.0)

    hue = np.where(
        mx == r,
        ((g - b) / safe_delta) % 6.0,
        np.where(mx == g, (b - r) / safe_delta + 2.0, (r - g) / safe_delta + 4.0),
    )
    hue = np.where(chromatic, (hue * 60.0) % 360.0, 0.0)
    hue = np.where(hue >= 360.0, 0.0, hue)

    return np.stack([hue, np.clip(sat, 0.0, 1.0), light], axis=-1)


def hsl_to_srgb(hsl: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert HSL (H degrees, S and L in [0, 1]) to sRGB [0,1].

    Uses the CSS Color 4 formulation f(n) = L - a * max(-1, min(k-3, 9-k, 1)).
    """
    hsl = np.asarray(hsl, dtype=np.float64)
    h = hsl[..., 0] % 360.0
    s = np.clip(hsl[..., 1], 0.0, 1.0)
    l = np.clip(hsl[..., 2], 0.0, 1.0)

    a = s * np.minimum(l, 1.0 - l)

    def channel(n: float) -> NDArray[np.float64]:
        k = (n + h / 30.0) % 12.0
        return l - a * np.maximum(-1.0, np.minimum(np.minimum(k - 3.0, 9.0 - k), 1.0))

    return np.clip(np.stack([channel(0.0), channel(8.0), channel(4.0)], axis=-1), 0.0, 1.0)


# =============================================================================
# Gamut clamping
# =============================================================================


def in_srgb_gamut(
    lch: NDArray[np.float64],
    tolerance: float = GAMUT_TOLERANCE,
) -> NDArray[np.bool_]:
    """
    Check whether OKLCH colors map into the sRGB cube.

    Args:
        lch: Array of shape (..., 3) with OKLCH values (H in degrees)

    Returns:
        Boolean array of shape (...)
    """
    linear = oklch_to_linear_rgb(lch)
    inside = (linear >= -tolerance) & (linear <= 1.0 + tolerance)
    return np.all(inside, axis=-1)


def clamp_chroma(
    L: float,
    C: float,
    H: float,
    max_iter: int = 64,
) -> tuple[float, float, float]:
    """
    Reduce chroma until an OKLCH color lies inside sRGB.

    Lightness is clamped to [0, 1] and hue is preserved. Chroma is found by
    bisection between 0 (always in gamut for L in [0, 1]) and the requested
    value, keeping the largest in-gamut chroma.

    Args:
        L: Lightness (any value, clamped to [0, 1])
        C: Chroma (negative values become 0)
        H: Hue in degrees (must be finite)

    Returns:
        (L, C, H) inside the sRGB gamut

    Raises:
        GamutClampError: If the result is still outside sRGB. This means the
            conversion matrices are broken, not that the input was extreme.
    """
    L = min(max(float(L), 0.0), 1.0)
    C = max(float(C), 0.0)
    H = float(H)

    if bool(in_srgb_gamut(np.array([L, C, H]))):
        return L, C, H

    lo, hi = 0.0, min(C, MAX_CHROMA)
    for _ in range(max_iter):
        if hi - lo <= CHROMA_RESOLUTION:
            break
        mid = (lo + hi) / 2.0
        if bool(in_srgb_gamut(np.array([L, mid, H]))):
            lo = mid
        else:
            hi = mid

    if not bool(in_srgb_gamut(np.array([L, lo, H]))):
        raise GamutClampError(
            f"Chroma reduction did not converge for L={L}, C={C}, H={H}"
        )

    logger.debug("Clamped chroma %.4f -> %.4f at L=%.4f H=%.1f", C, lo, L, H)
    return L, lo, H
