# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""Tests for color space conversions and gamut clamping."""

import numpy as np
import pytest

from palettekit.errors import GamutClampError
from palettekit.model import colorspace
from palettekit.model.colorspace import (
    clamp_chroma,
    hsl_to_srgb,
    in_srgb_gamut,
    linear_to_srgb,
    oklab_to_oklch,
    oklch_to_oklab,
    oklch_to_srgb,
    srgb_to_hsl,
    srgb_to_linear,
    srgb_to_oklch,
)


class TestSRGBLinearRoundtrip:
    """sRGB ↔ Linear RGB conversions must roundtrip accurately."""

    def test_roundtrip_mid_gray(self):
        srgb = np.array([0.5, 0.5, 0.5])
        np.testing.assert_allclose(linear_to_srgb(srgb_to_linear(srgb)), srgb, atol=1e-10)

    def test_gamma_threshold(self):
        """Values below 0.04045 use the linear segment."""
        linear = srgb_to_linear(np.array([0.03]))
        assert float(linear[0]) == pytest.approx(0.03 / 12.92, abs=1e-10)

    def test_batch_roundtrip(self):
        srgb = np.random.default_rng(42).random((100, 3))
        np.testing.assert_allclose(linear_to_srgb(srgb_to_linear(srgb)), srgb, atol=1e-10)


class TestOKLCH:

    def test_white(self):
        L, C, _ = srgb_to_oklch(np.array([1.0, 1.0, 1.0]))
        assert L == pytest.approx(1.0, abs=1e-6)
        assert C == pytest.approx(0.0, abs=1e-6)

    def test_black(self):
        L, C, _ = srgb_to_oklch(np.array([0.0, 0.0, 0.0]))
        assert L == pytest.approx(0.0, abs=1e-9)
        assert C == pytest.approx(0.0, abs=1e-9)

    def test_red_reference_values(self):
        L, C, H = srgb_to_oklch(np.array([1.0, 0.0, 0.0]))
        assert L == pytest.approx(0.62796, abs=1e-4)
        assert C == pytest.approx(0.25768, abs=1e-4)
        assert H == pytest.approx(29.234, abs=1e-2)

    def test_roundtrip_batch(self):
        srgb = np.random.default_rng(7).random((200, 3))
        recovered = oklch_to_srgb(srgb_to_oklch(srgb))
        np.testing.assert_allclose(recovered, srgb, atol=1e-6)

    def test_hue_in_range(self):
        lab = np.array([[0.5, 1e-3, -1e-18], [0.5, -0.1, -1e-12], [0.5, 0.0, 0.1]])
        hues = oklab_to_oklch(lab)[:, 2]
        assert np.all(hues >= 0.0)
        assert np.all(hues < 360.0)

    def test_lab_lch_roundtrip(self):
        lch = np.array([0.7, 0.12, 145.0])
        np.testing.assert_allclose(oklab_to_oklch(oklch_to_oklab(lch)), lch, atol=1e-10)


class TestHSL:

    def test_red(self):
        np.testing.assert_allclose(srgb_to_hsl(np.array([1.0, 0.0, 0.0])), [0.0, 1.0, 0.5])

    def test_green_from_hsl(self):
        np.testing.assert_allclose(hsl_to_srgb(np.array([120.0, 1.0, 0.5])), [0.0, 1.0, 0.0], atol=1e-12)

    def test_gray_is_achromatic(self):
        h, s, l = srgb_to_hsl(np.array([0.5, 0.5, 0.5]))
        assert h == 0.0
        assert s == 0.0
        assert l == pytest.approx(0.5)

    def test_roundtrip_batch(self):
        srgb = np.random.default_rng(3).random((100, 3))
        np.testing.assert_allclose(hsl_to_srgb(srgb_to_hsl(srgb)), srgb, atol=1e-9)


class TestGamutClamp:

    def test_in_gamut_unchanged(self):
        assert clamp_chroma(0.6, 0.05, 210.0) == (0.6, 0.05, 210.0)

    def test_out_of_gamut_reduced(self):
        L, C, H = clamp_chroma(0.7, 0.4, 150.0)
        assert L == 0.7
        assert H == 150.0
        assert 0.0 < C < 0.4
        assert in_srgb_gamut(np.array([L, C, H]))

    def test_lightness_clamped(self):
        L, C, _ = clamp_chroma(1.5, 0.1, 40.0)
        assert L == 1.0
        L, C, _ = clamp_chroma(-0.2, 0.1, 40.0)
        assert L == 0.0

    def test_negative_chroma_becomes_zero(self):
        _, C, _ = clamp_chroma(0.5, -0.3, 40.0)
        assert C == 0.0

    @pytest.mark.parametrize("L", np.linspace(0.0, 1.0, 11))
    def test_extreme_grid_terminates_in_gamut(self, L):
        for C in (0.0, 0.1, 0.2, 0.37, 0.5, 1.0, 5.0):
            for H in range(0, 360, 15):
                cl, cc, ch = clamp_chroma(L, C, H)
                assert cl == pytest.approx(L)
                assert ch == H
                assert cc <= C
                assert in_srgb_gamut(np.array([cl, cc, ch]))

    def test_broken_gamut_check_raises(self, monkeypatch):
        monkeypatch.setattr(colorspace, "in_srgb_gamut", lambda lch, tolerance=0.0: np.False_)
        with pytest.raises(GamutClampError):
            clamp_chroma(0.5, 0.2, 30.0)
