# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""Tests for schema types and serialization."""

import dataclasses
import json
import math

import pytest

from palettekit.model.color import from_rgb, parse
from palettekit.schema import HSL, OKLCH, RGB, ColorResult, ColorSpace, TonalMatrix


class TestRGB:

    def test_valid(self):
        assert RGB(0, 128, 255).to_dict() == {"r": 0, "g": 128, "b": 255}

    @pytest.mark.parametrize("channels", [(-1, 0, 0), (0, 256, 0), (0, 0, 300)])
    def test_out_of_range(self, channels):
        with pytest.raises(ValueError, match="Channel"):
            RGB(*channels)


class TestOKLCH:

    def test_undefined_hue(self):
        c = OKLCH(l=0.5, c=0.0, h=float("nan"))
        assert c.is_achromatic
        assert c.to_dict()["h"] is None

    def test_low_chroma_is_achromatic(self):
        assert OKLCH(l=0.5, c=5e-5, h=200.0).is_achromatic

    def test_chromatic(self):
        assert not OKLCH(l=0.5, c=0.1, h=200.0).is_achromatic

    def test_invalid_lightness(self):
        with pytest.raises(ValueError, match="Lightness"):
            OKLCH(l=1.5, c=0.1, h=200.0)

    def test_invalid_chroma(self):
        with pytest.raises(ValueError, match="Chroma"):
            OKLCH(l=0.5, c=-0.1, h=200.0)

    def test_invalid_hue(self):
        with pytest.raises(ValueError, match="Hue"):
            OKLCH(l=0.5, c=0.1, h=360.0)


class TestHSL:

    def test_invalid_hue(self):
        with pytest.raises(ValueError, match="Hue"):
            HSL(h=360.0, s=50.0, l=50.0)

    def test_invalid_saturation(self):
        with pytest.raises(ValueError, match="Saturation"):
            HSL(h=0.0, s=101.0, l=50.0)


class TestColorResult:

    def test_to_dict(self):
        d = parse("#FF0000").to_dict()
        assert d["hex"] == "#FF0000"
        assert d["rgb"] == {"r": 255, "g": 0, "b": 0}
        assert d["css"]["rgb"] == "rgb(255, 0, 0)"
        assert set(d) == {"hex", "rgb", "oklch", "hsl", "css"}

    def test_to_json(self):
        data = json.loads(parse("#6366F1").to_json())
        assert data["hex"] == "#6366F1"

    def test_to_json_gray(self):
        data = json.loads(from_rgb(128, 128, 128).to_json(indent=2))
        assert data["oklch"]["h"] is None

    def test_from_dict_roundtrip(self):
        original = parse("#6366F1")
        restored = ColorResult.from_dict(original.to_dict())
        assert restored == original

    def test_from_dict_uses_hex(self):
        d = parse("#6366F1").to_dict()
        d["rgb"] = {"r": 0, "g": 0, "b": 0}
        assert ColorResult.from_dict(d).rgb == RGB(99, 102, 241)

    def test_frozen(self):
        c = parse("#6366F1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.rgb = RGB(0, 0, 0)


class TestColorSpace:

    def test_values(self):
        assert ColorSpace("oklch") is ColorSpace.OKLCH
        assert ColorSpace("hsl") is ColorSpace.HSL


class TestTonalMatrixValidation:

    def test_row_count_mismatch(self):
        c = parse("#6366F1")
        with pytest.raises(ValueError, match="rows"):
            TonalMatrix(steps=(500,), hues=(0.0, 120.0), matrix=((c,),))

    def test_column_count_mismatch(self):
        c = parse("#6366F1")
        with pytest.raises(ValueError, match="steps"):
            TonalMatrix(steps=(100, 500), hues=(0.0,), matrix=((c,),))

    def test_nan_hue_serialized_as_none(self):
        c = from_rgb(128, 128, 128)
        m = TonalMatrix(steps=(500,), hues=(float("nan"),), matrix=((c,),))
        assert m.to_dict()["hues"] == [None]
        assert math.isnan(m.hues[0])
