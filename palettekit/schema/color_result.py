# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
ColorResult — canonical color value for palette generation.

Design principles:
- Immutable: All types are frozen dataclasses
- Consistent: hex, RGB, OKLCH and HSL describe the same sRGB-clamped color
- Ordered: Generators return lists whose order is the palette order
- Serializable: JSON-ready for export collaborators

OKLCH Color Space:
- L (Lightness): 0.0 = black, 1.0 = white
- C (Chroma): 0.0 = gray, ~0.32 = max saturation in sRGB
- H (Hue): 0-360 degrees (≈30=orange, ≈90=yellow, ≈145=green, ≈250=blue, ≈330=pink/red)
  NaN for achromatic colors, where hue is undefined.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional


# Chroma below this is treated as achromatic (hue undefined).
ACHROMATIC_CHROMA = 1e-4


class ColorSpace(Enum):
    """Space in which generators vary their coordinates."""

    OKLCH = "oklch"
    HSL = "hsl"


# =============================================================================
# Channel Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGB:
    """8-bit sRGB channels (0-255)."""
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name} must be 0-255, got {value}")

    def to_dict(self) -> dict:
        return {"r": self.r, "g": self.g, "b": self.b}


@dataclass(frozen=True, slots=True)
class OKLCH:
    """
    A color in OKLCH space.

    Attributes:
        l: Lightness (0.0 = black, 1.0 = white)
        c: Chroma (>= 0)
        h: Hue in degrees [0, 360), NaN when achromatic
    """
    l: float
    c: float
    h: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.l <= 1.0:
            raise ValueError(f"Lightness must be 0-1, got {self.l}")
        if self.c < 0.0:
            raise ValueError(f"Chroma must be >= 0, got {self.c}")
        if not math.isnan(self.h) and not 0.0 <= self.h < 360.0:
            raise ValueError(f"Hue must be 0-360, got {self.h}")

    @property
    def is_achromatic(self) -> bool:
        """True if the hue is undefined (gray/white/black)."""
        return math.isnan(self.h) or self.c < ACHROMATIC_CHROMA

    def to_dict(self) -> dict:
        """Serialize to dictionary. Undefined hue becomes None."""
        return {
            "l": self.l,
            "c": self.c,
            "h": None if math.isnan(self.h) else self.h,
        }


@dataclass(frozen=True, slots=True)
class HSL:
    """
    A color in HSL space.

    Attributes:
        h: Hue in degrees [0, 360)
        s: Saturation percent (0-100)
        l: Lightness percent (0-100)
    """
    h: float
    s: float
    l: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.h < 360.0:
            raise ValueError(f"Hue must be 0-360, got {self.h}")
        if not 0.0 <= self.s <= 100.0:
            raise ValueError(f"Saturation must be 0-100, got {self.s}")
        if not 0.0 <= self.l <= 100.0:
            raise ValueError(f"Lightness must be 0-100, got {self.l}")

    def to_dict(self) -> dict:
        return {"h": self.h, "s": self.s, "l": self.l}


# =============================================================================
# ColorResult
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorResult:
    """
    A single generated or parsed color.

    Every representation is derived from the same gamut-clamped value, so a
    collaborator can export any of them without recomputation. Build instances
    with palettekit.model.color (parse, from_oklch, from_hsl, from_rgb) rather
    than directly.

    Attributes:
        hex: "#RRGGBB", upper-case
        rgb: 8-bit channels
        oklch: OKLCH coordinates (float precision, not re-derived from hex)
        hsl: HSL coordinates (float precision)
        css_rgb: "rgb(R, G, B)"
        css_oklch: "oklch(L% C H)"
        css_hsl: "hsl(H, S%, L%)"
    """
    hex: str
    rgb: RGB
    oklch: OKLCH
    hsl: HSL
    css_rgb: str
    css_oklch: str
    css_hsl: str

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hex": self.hex,
            "rgb": self.rgb.to_dict(),
            "oklch": self.oklch.to_dict(),
            "hsl": self.hsl.to_dict(),
            "css": {
                "rgb": self.css_rgb,
                "oklch": self.css_oklch,
                "hsl": self.css_hsl,
            },
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> ColorResult:
        """
        Deserialize from dictionary.

        The color is rebuilt from its hex so that all representations stay
        consistent even if the dictionary was edited by hand.
        """
        from palettekit.model.color import parse
        return parse(data["hex"])


# =============================================================================
# Tonal Matrix
# =============================================================================


@dataclass(frozen=True, slots=True)
class TonalMatrix:
    """
    A grid of tonal scales: one row per hue, one column per step.

    Attributes:
        steps: Step values (50 = lightest ... 950 = darkest), column order
        hues: Row hues in degrees, row order
        matrix: matrix[hue_index][step_index]
    """
    steps: tuple[int, ...]
    hues: tuple[float, ...]
    matrix: tuple[tuple[ColorResult, ...], ...]

    def __post_init__(self) -> None:
        if len(self.matrix) != len(self.hues):
            raise ValueError(
                f"Matrix has {len(self.matrix)} rows for {len(self.hues)} hues"
            )
        for row in self.matrix:
            if len(row) != len(self.steps):
                raise ValueError(
                    f"Matrix row has {len(row)} colors for {len(self.steps)} steps"
                )

    def row(self, hue_index: int) -> tuple[ColorResult, ...]:
        """Get the tonal scale for one hue."""
        return self.matrix[hue_index]

    def column(self, step: int) -> tuple[ColorResult, ...]:
        """Get every hue's color at a given step value."""
        try:
            idx = self.steps.index(step)
        except ValueError:
            raise KeyError(f"No step {step} in matrix") from None
        return tuple(row[idx] for row in self.matrix)

    def flatten(self) -> list[ColorResult]:
        """Hue-major flattening used for exports."""
        return [color for row in self.matrix for color in row]

    def to_dict(self) -> dict:
        return {
            "steps": list(self.steps),
            "hues": [None if math.isnan(h) else h for h in self.hues],
            "matrix": [[c.to_dict() for c in row] for row in self.matrix],
        }
