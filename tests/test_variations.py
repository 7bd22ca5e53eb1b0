# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""Tests for variation generation."""

import pytest

from palettekit.generate.variations import (
    VariationConfig,
    VariationType,
    all_variation_types,
    generate_variations,
    variation_name,
)
from palettekit.model.color import from_hsl, from_oklch, parse
from palettekit.schema import ColorSpace


BASE = from_oklch(0.6, 0.1, 250.0)


class TestOKLCHVariations:

    @pytest.mark.parametrize("variation", list(VariationType))
    def test_default_count(self, variation):
        assert len(generate_variations(BASE, VariationConfig(type=variation))) == 10

    def test_monochromatic_lightness_sweep(self):
        colors = generate_variations(BASE, VariationConfig(type="monochromatic", count=4))
        assert [c.oklch.l for c in colors] == pytest.approx([0.15, 0.40, 0.65, 0.90])

    def test_shades_start_at_base_and_darken(self):
        colors = generate_variations(BASE, VariationConfig(type="shades"))
        assert colors[0].hex == BASE.hex
        lightness = [c.oklch.l for c in colors]
        assert lightness == sorted(lightness, reverse=True)
        assert lightness[-1] >= 0.05

    def test_tints_end_near_white(self):
        colors = generate_variations(BASE, VariationConfig(type="tints"))
        assert colors[-1].oklch.l == pytest.approx(0.97)
        lightness = [c.oklch.l for c in colors]
        assert lightness == sorted(lightness)

    def test_tones_reduce_chroma_only(self):
        colors = generate_variations(BASE, VariationConfig(type="tones", count=5))
        assert all(c.oklch.l == pytest.approx(0.6) for c in colors)
        assert colors[-1].oklch.c == pytest.approx(0.01)

    def test_temperature_runs_cool_to_warm(self):
        colors = generate_variations(parse("#6366F1"), VariationConfig(type="temperature"))
        assert colors[0].oklch.h == pytest.approx(240.0)
        assert colors[-1].oklch.h == pytest.approx(30.0)

    def test_saturation_gradient_chroma(self):
        colors = generate_variations(
            from_oklch(0.6, 0.1, 250.0),
            VariationConfig(type="saturation-gradient", count=2),
        )
        assert colors[0].oklch.c == pytest.approx(0.01)

    def test_lightness_gradient_range(self):
        colors = generate_variations(BASE, VariationConfig(type="lightness-gradient", count=3))
        assert [c.oklch.l for c in colors] == pytest.approx([0.1, 0.525, 0.95])


class TestHSLVariations:

    BASE_HSL = from_hsl(210.0, 60.0, 50.0)

    def test_monochromatic(self):
        colors = generate_variations(
            self.BASE_HSL, VariationConfig(type="monochromatic", count=3), ColorSpace.HSL
        )
        assert [c.hsl.l for c in colors] == pytest.approx([10.0, 50.0, 90.0])
        assert all(c.hsl.s == pytest.approx(54.0) for c in colors)

    def test_saturation_gradient(self):
        colors = generate_variations(
            self.BASE_HSL, VariationConfig(type="saturation-gradient", count=3), ColorSpace.HSL
        )
        assert [c.hsl.s for c in colors] == pytest.approx([5.0, 50.0, 95.0])

    def test_shades_floor(self):
        colors = generate_variations(
            self.BASE_HSL, VariationConfig(type="shades", count=2), ColorSpace.HSL
        )
        assert colors[-1].hsl.l == pytest.approx(5.0)

    def test_temperature_hues(self):
        colors = generate_variations(
            self.BASE_HSL, VariationConfig(type="temperature", count=3), ColorSpace.HSL
        )
        assert [c.hsl.h for c in colors] == pytest.approx([240.0, 135.0, 30.0])


class TestVariationOptions:

    @pytest.mark.parametrize("count, expected", [(0, 2), (1, 2), (2, 2), (500, 100)])
    def test_count_clamped(self, count, expected):
        colors = generate_variations(BASE, VariationConfig(count=count))
        assert len(colors) == expected

    def test_unknown_type(self):
        with pytest.raises(ValueError):
            generate_variations(BASE, VariationConfig(type="sepia"))

    def test_names(self):
        assert variation_name("shades") == "Shades (Darker)"
        assert len(all_variation_types()) == 7
