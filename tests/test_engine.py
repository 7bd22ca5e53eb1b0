# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""Tests for the generate() dispatcher."""

import pytest

import palettekit
from palettekit.errors import InvalidColorFormat
from palettekit.generate import (
    KINDS,
    ColorfulConfig,
    HarmonyConfig,
    InterpolationConfig,
    TonalConfig,
    VariationConfig,
    generate,
)
from palettekit.model.color import parse
from palettekit.schema import ColorSpace


class TestDispatch:

    def test_harmony_from_string(self):
        colors = generate("harmony", "#6366F1", HarmonyConfig())
        assert len(colors) == 2
        assert colors[0].hex == "#6366F1"

    def test_variations(self):
        colors = generate("variations", parse("#6366F1"), VariationConfig(count=6))
        assert len(colors) == 6

    def test_tonal_flattened(self):
        config = TonalConfig(steps=(100, 500, 900), hues=(0.0, 120.0))
        colors = generate("tonal", "#6366F1", config)
        assert len(colors) == 6

    def test_interpolation_uses_config_colors(self):
        config = InterpolationConfig(steps=5, colors=("#FF0000", "#0000FF"))
        colors = generate("interpolation", None, config)
        assert len(colors) == 5
        assert colors[0].hex == "#FF0000"
        assert colors[-1].hex == "#0000FF"

    def test_interpolation_base_only(self):
        colors = generate("interpolation", "#6366F1", InterpolationConfig())
        assert [c.hex for c in colors] == ["#6366F1"]

    def test_interpolation_nothing(self):
        assert generate("interpolation", None, InterpolationConfig()) == []

    def test_colorful_ignores_base(self):
        config = ColorfulConfig(method="random", count=5, seed=4)
        with_base = generate("colorful", "#6366F1", config)
        without = generate("colorful", None, config)
        assert [c.hex for c in with_base] == [c.hex for c in without]

    def test_hsl_space_string(self):
        colors = generate("harmony", "hsl(10, 70%, 45%)", HarmonyConfig(), "hsl")
        assert colors[1].hsl.h == pytest.approx(190.0)

    def test_top_level_alias(self):
        assert palettekit.generate is generate

    def test_kinds(self):
        assert set(KINDS) == {"harmony", "variations", "tonal", "interpolation", "colorful"}


class TestDispatchErrors:

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown generator kind"):
            generate("gradient", "#6366F1", HarmonyConfig())

    def test_config_mismatch(self):
        with pytest.raises(TypeError, match="HarmonyConfig"):
            generate("harmony", "#6366F1", VariationConfig())

    def test_missing_base(self):
        with pytest.raises(ValueError, match="requires a base color"):
            generate("variations", None, VariationConfig())

    def test_invalid_base(self):
        with pytest.raises(InvalidColorFormat):
            generate("harmony", "not-a-color", HarmonyConfig())

    def test_unknown_space(self):
        with pytest.raises(ValueError):
            generate("harmony", "#6366F1", HarmonyConfig(), "lab")

    def test_default_space(self):
        colors = generate("harmony", "#6366F1", HarmonyConfig(), ColorSpace.OKLCH)
        assert colors[1].oklch.l == pytest.approx(colors[0].oklch.l)
