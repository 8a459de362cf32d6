"""Tests for ennu.ui.colors – color blending and constants."""

from __future__ import annotations

from ennu.ui.colors import GameColors, blend_hex


# ===========================================================================
# GameColors – constants exist
# ===========================================================================

class TestGameColors:
    def test_bg_top_is_hex(self):
        assert GameColors.BG_TOP.startswith("#")
        assert len(GameColors.BG_TOP) == 7

    def test_feedback_colors_differ(self):
        assert GameColors.CORRECT != GameColors.WRONG

    def test_one_color_per_option(self):
        assert len(GameColors.OPTION_COLORS) == 3
        assert all(c.startswith("#") and len(c) == 7 for c in GameColors.OPTION_COLORS)

    def test_card_bg_is_rgba(self):
        assert GameColors.CARD_BG.startswith("rgba(")


# ===========================================================================
# blend_hex
# ===========================================================================

class TestBlendHex:
    def test_t_zero_returns_a(self):
        assert blend_hex("#FF0000", "#0000FF", 0.0) == "#FF0000"

    def test_t_one_returns_b(self):
        assert blend_hex("#FF0000", "#0000FF", 1.0) == "#0000FF"

    def test_midpoint(self):
        result = blend_hex("#000000", "#FFFFFF", 0.5)
        assert result == "#7F7F7F"

    def test_lowercase_input_uppercase_output(self):
        assert blend_hex("#ff0000", "#ff0000", 0.3) == "#FF0000"

    def test_t_clamped(self):
        assert blend_hex("#000000", "#FFFFFF", 2.0) == "#FFFFFF"
        assert blend_hex("#000000", "#FFFFFF", -1.0) == "#000000"

    def test_strips_whitespace(self):
        assert blend_hex(" #000000 ", "#FFFFFF", 1.0) == "#FFFFFF"


class TestBlendHexInvalid:
    def test_short_hex_returns_a(self):
        assert blend_hex("#FFF", "#000000", 0.5) == "#FFF"

    def test_rgba_returns_a(self):
        assert blend_hex(GameColors.CARD_BG, "#000000", 0.5) == GameColors.CARD_BG

    def test_non_hex_digits_returns_a(self):
        assert blend_hex("#GGGGGG", "#000000", 0.5) == "#GGGGGG"
