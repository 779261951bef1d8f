# (c) Copyright Datacraft, 2026
"""Tests for color math."""
import pytest

from docenhance.core.features.enhancement import colors
from docenhance.core.features.enhancement.colors import HSL
from docenhance.core.features.enhancement.exceptions import EnhancementError, InvalidColorError


class TestHexParsing:
	"""Tests for hex normalization and conversion."""

	def test_normalize_six_digits(self):
		"""Test uppercase hex is lowercased and keeps its hash."""
		assert colors.normalize_hex("#FF8800") == "#ff8800"

	def test_normalize_short_form(self):
		"""Test three-digit hex is expanded."""
		assert colors.normalize_hex("#abc") == "#aabbcc"

	def test_normalize_without_hash(self):
		assert colors.normalize_hex("00ff00") == "#00ff00"

	@pytest.mark.parametrize("value", ["blue", "#12345", "#gggggg", "", None])
	def test_invalid_color(self, value):
		"""Test invalid colors raise a ValueError subclass."""
		with pytest.raises(InvalidColorError) as exc_info:
			colors.normalize_hex(value)

		assert isinstance(exc_info.value, ValueError)
		assert isinstance(exc_info.value, EnhancementError)

	def test_hex_to_rgb(self):
		assert colors.hex_to_rgb("#2563eb") == (37, 99, 235)

	def test_rgb_to_hex(self):
		assert colors.rgb_to_hex(37, 99, 235) == "#2563eb"


class TestHSL:
	"""Tests for HSL conversion."""

	def test_red_to_hsl(self):
		hsl = colors.hex_to_hsl("#ff0000")
		assert hsl.h == pytest.approx(0)
		assert hsl.s == pytest.approx(100)
		assert hsl.l == pytest.approx(50)

	def test_grey_has_no_saturation(self):
		hsl = colors.hex_to_hsl("#808080")
		assert hsl.s == 0
		assert hsl.h == 0

	def test_hsl_to_hex_primary(self):
		assert colors.hsl_to_hex(HSL(0, 100, 50)) == "#ff0000"
		assert colors.hsl_to_hex(HSL(120, 100, 50)) == "#00ff00"
		assert colors.hsl_to_hex(HSL(240, 100, 50)) == "#0000ff"

	def test_hsl_to_hex_extremes(self):
		assert colors.hsl_to_hex(HSL(200, 50, 0)) == "#000000"
		assert colors.hsl_to_hex(HSL(200, 50, 100)) == "#ffffff"

	def test_rotate_hue_wraps(self):
		"""Test rotating past 360 degrees wraps around."""
		rotated = colors.rotate_hue(HSL(300, 50, 50), 90)
		assert rotated.h == pytest.approx(30)
		assert rotated.s == 50

	def test_complement_of_red(self):
		complement = colors.rotate_hue(colors.hex_to_hsl("#ff0000"), 180)
		assert colors.hsl_to_hex(complement) == "#00ffff"


class TestLighten:
	"""Tests for lightening toward white."""

	def test_lighten_half(self):
		assert colors.lighten("#000000", 50) == "#808080"

	def test_lighten_full(self):
		assert colors.lighten("#2563eb", 100) == "#ffffff"

	def test_lighten_none(self):
		assert colors.lighten("#2563EB", 0) == "#2563eb"


class TestContrast:
	"""Tests for WCAG luminance and contrast."""

	def test_luminance_bounds(self):
		assert colors.relative_luminance("#ffffff") == pytest.approx(1.0)
		assert colors.relative_luminance("#000000") == pytest.approx(0.0)

	def test_black_on_white(self):
		assert colors.contrast_ratio("#000000", "#ffffff") == pytest.approx(21.0)

	def test_contrast_is_symmetric(self):
		assert colors.contrast_ratio("#2563eb", "#ffffff") == pytest.approx(
			colors.contrast_ratio("#ffffff", "#2563eb")
		)

	def test_same_color(self):
		assert colors.contrast_ratio("#777777", "#777777") == pytest.approx(1.0)

	def test_ensure_contrast_keeps_passing_color(self):
		"""Test a color that already passes is only normalized."""
		assert colors.ensure_contrast("#000000", "#ffffff") == "#000000"

	def test_ensure_contrast_darkens_on_white(self):
		"""Test yellow is darkened until it is readable on white."""
		adjusted = colors.ensure_contrast("#ffff00", "#ffffff", 4.5)

		assert colors.contrast_ratio(adjusted, "#ffffff") >= 4.5
		assert colors.hex_to_hsl(adjusted).l < colors.hex_to_hsl("#ffff00").l

	def test_ensure_contrast_lightens_on_black(self):
		adjusted = colors.ensure_contrast("#000080", "#000000", 4.5)

		assert colors.contrast_ratio(adjusted, "#000000") >= 4.5
		assert colors.hex_to_hsl(adjusted).l > colors.hex_to_hsl("#000080").l

	def test_ensure_contrast_unreachable_target(self):
		"""Test an impossible ratio stops at the lightness bound."""
		assert colors.ensure_contrast("#808080", "#ffffff", 25) == "#000000"
