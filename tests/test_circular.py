# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""Tests for circular (hue) interpolation helpers."""

import math

import pytest

from palettekit.model.circular import (
    catmull_rom,
    catmull_rom_hue,
    lerp,
    lerp_hue,
    shortest_hue_delta,
    unwrap_hue,
)


class TestShortestHueDelta:

    def test_forward(self):
        assert shortest_hue_delta(10.0, 50.0) == 40.0

    def test_across_zero(self):
        assert shortest_hue_delta(350.0, 10.0) == 20.0
        assert shortest_hue_delta(10.0, 350.0) == -20.0

    def test_half_turn_is_positive(self):
        assert shortest_hue_delta(0.0, 180.0) == 180.0

    def test_just_past_half_turn(self):
        assert shortest_hue_delta(0.0, 190.0) == -170.0


class TestLerpHue:

    def test_wraps_through_zero(self):
        assert lerp_hue(350.0, 10.0, 0.5) == pytest.approx(0.0)
        assert lerp_hue(10.0, 350.0, 0.5) == pytest.approx(0.0)

    def test_not_naive_average(self):
        assert lerp_hue(350.0, 10.0, 0.25) == pytest.approx(355.0)

    def test_endpoints(self):
        assert lerp_hue(30.0, 120.0, 0.0) == 30.0
        assert lerp_hue(30.0, 120.0, 1.0) == 120.0

    def test_result_in_range(self):
        for t in (0.0, 0.1, 0.5, 0.9, 1.0):
            h = lerp_hue(300.0, 60.0, t)
            assert 0.0 <= h < 360.0

    def test_undefined_hue_takes_other(self):
        assert lerp_hue(float("nan"), 90.0, 0.3) == 90.0
        assert lerp_hue(45.0, float("nan"), 0.7) == 45.0

    def test_both_undefined(self):
        assert lerp_hue(float("nan"), float("nan"), 0.5) == 0.0


class TestUnwrap:

    def test_forward_across_zero(self):
        assert unwrap_hue(350.0, 10.0) == 370.0

    def test_backward_across_zero(self):
        assert unwrap_hue(10.0, 350.0) == -10.0


class TestCatmullRom:

    def test_passes_through_inner_points(self):
        assert catmull_rom(0.0, 1.0, 3.0, 4.0, 0.0) == 1.0
        assert catmull_rom(0.0, 1.0, 3.0, 4.0, 1.0) == 3.0

    def test_linear_on_evenly_spaced_points(self):
        assert catmull_rom(0.0, 1.0, 2.0, 3.0, 0.5) == pytest.approx(1.5)

    def test_lerp(self):
        assert lerp(2.0, 4.0, 0.25) == 2.5

    def test_hue_crosses_zero(self):
        h = catmull_rom_hue(340.0, 350.0, 10.0, 20.0, 0.5)
        assert abs(shortest_hue_delta(0.0, h)) < 1e-9
        assert 0.0 <= h < 360.0

    def test_hue_undefined_filled(self):
        h = catmull_rom_hue(float("nan"), 100.0, 120.0, float("nan"), 0.5)
        assert not math.isnan(h)
        assert 100.0 < h < 120.0
