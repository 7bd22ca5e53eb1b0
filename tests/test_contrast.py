# Copyright (c) 2026 Palettekit
# SPDX-License-Identifier: MIT

"""Tests for WCAG and APCA contrast."""

import pytest

from palettekit.model.color import parse
from palettekit.model.contrast import (
    apca_contrast,
    best_text_color,
    best_text_color_fast,
    relative_luminance,
    wcag_contrast,
)


class TestWCAG:

    def test_luminance_extremes(self):
        assert relative_luminance("#000000") == 0.0
        assert relative_luminance("#FFFFFF") == pytest.approx(1.0)

    def test_black_on_white(self):
        assert wcag_contrast("#000000", "#FFFFFF") == pytest.approx(21.0)

    def test_symmetric(self):
        assert wcag_contrast("#6366F1", "#FFFFFF") == pytest.approx(
            wcag_contrast("#FFFFFF", "#6366F1")
        )

    def test_identical_is_one(self):
        assert wcag_contrast("#6366F1", "#6366F1") == pytest.approx(1.0)

    def test_accepts_color_results(self):
        assert wcag_contrast(parse("#000"), parse("#fff")) == pytest.approx(21.0)


class TestAPCA:

    def test_black_text_on_white(self):
        assert apca_contrast("#000000", "#FFFFFF") == pytest.approx(111.3, abs=0.1)

    def test_white_text_on_black(self):
        assert apca_contrast("#FFFFFF", "#000000") == pytest.approx(-111.3, abs=0.1)

    def test_same_color_is_zero(self):
        assert apca_contrast("#777777", "#777777") == 0.0

    def test_low_contrast_clipped(self):
        assert apca_contrast("#FEFEFE", "#FFFFFF") == 0.0


class TestBestTextColor:

    def test_white_background(self):
        assert best_text_color("#FFFFFF").hex == "#000000"

    def test_black_background(self):
        assert best_text_color("#000000").hex == "#FFFFFF"

    def test_indigo_background(self):
        assert best_text_color("#6366F1").hex == "#FFFFFF"

    def test_yellow_background(self):
        assert best_text_color("#FFEB3B").hex == "#000000"

    def test_fast_uses_lightness(self):
        assert best_text_color_fast("#1E1E1E").hex == "#FFFFFF"
        assert best_text_color_fast("#F5F5F5").hex == "#000000"
