# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""
Single entry point over every palette generator.

    generate("harmony", "#6366F1", HarmonyConfig(type="triadic"))
    generate("colorful", None, ColorfulConfig(method="pastel", seed=7))

Each kind accepts exactly one config type. The tonal kind returns the
matrix flattened hue-major, which is the order colors are exported in.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from palettekit.generate.colorful import ColorfulConfig, generate_colorful
from palettekit.generate.harmony import HarmonyConfig, generate_harmony
from palettekit.generate.interpolation import InterpolationConfig, interpolate
from palettekit.generate.tonal import TonalConfig, generate_tonal_matrix
from palettekit.generate.variations import VariationConfig, generate_variations
from palettekit.model.color import ColorLike, as_color
from palettekit.schema import ColorResult, ColorSpace


logger = logging.getLogger(__name__)


GeneratorConfig = Union[
    HarmonyConfig,
    VariationConfig,
    TonalConfig,
    InterpolationConfig,
    ColorfulConfig,
]

_CONFIG_TYPES: dict[str, type] = {
    "harmony": HarmonyConfig,
    "variations": VariationConfig,
    "tonal": TonalConfig,
    "interpolation": InterpolationConfig,
    "colorful": ColorfulConfig,
}

KINDS: tuple[str, ...] = tuple(_CONFIG_TYPES)


def _require_base(kind: str, base: Optional[ColorLike]) -> ColorResult:
    if base is None:
        raise ValueError(f"{kind} generation requires a base color")
    return as_color(base)


def generate(
    kind: str,
    base: Optional[ColorLike],
    config: GeneratorConfig,
    color_space: Union[ColorSpace, str] = ColorSpace.OKLCH,
) -> list[ColorResult]:
    """
    Run one generator and return its colors.

    Args:
        kind: "harmony", "variations", "tonal", "interpolation" or "colorful"
        base: Base color (ColorResult or parseable string). Ignored by
            colorful. For interpolation it is used as the only control point
            when config.colors is empty.
        config: Config record matching `kind`
        color_space: Space the generator works in

    Returns:
        Ordered list of colors

    Raises:
        ValueError: Unknown kind, or a missing base where one is needed
        TypeError: Config type does not match the kind
        InvalidColorFormat: base is a string that cannot be parsed
    """
    if kind not in _CONFIG_TYPES:
        raise ValueError(
            f"Unknown generator kind {kind!r}; expected one of {', '.join(KINDS)}"
        )

    expected = _CONFIG_TYPES[kind]
    if not isinstance(config, expected):
        raise TypeError(
            f"{kind} generation expects {expected.__name__}, "
            f"got {type(config).__name__}"
        )

    space = ColorSpace(color_space)
    logger.debug("Generating %s palette in %s with %r", kind, space.value, config)

    if kind == "colorful":
        return generate_colorful(config, space)

    if kind == "interpolation":
        colors = [as_color(color) for color in config.colors]
        if not colors and base is not None:
            colors = [as_color(base)]
        return interpolate(colors, config, space)

    base_color = _require_base(kind, base)

    if kind == "harmony":
        return generate_harmony(base_color, config, space)
    if kind == "variations":
        return generate_variations(base_color, config, space)
    return generate_tonal_matrix(base_color, config, space).flatten()
