# (c) Copyright Datacraft, 2026
"""
Color math for palette strategies.

Hex/HSL conversion, lightening, and WCAG 2.x contrast:
- Relative luminance from gamma-corrected sRGB channels
- Contrast ratio (L1 + 0.05) / (L2 + 0.05)
- Iterative lightness adjustment until a target ratio is met
"""
import logging
import re
from dataclasses import dataclass, replace

import numpy as np

from .exceptions import InvalidColorError

logger = logging.getLogger(__name__)

HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

# sRGB channel weights for relative luminance
LUMINANCE_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])

WCAG_AA_RATIO = 4.5
LIGHTNESS_STEP = 5.0


@dataclass(frozen=True)
class HSL:
	"""Hue in degrees, saturation and lightness in percent."""
	h: float
	s: float
	l: float


def normalize_hex(value: str) -> str:
	"""Return a lowercase ``#rrggbb`` string."""
	match = HEX_PATTERN.match(value.strip()) if isinstance(value, str) else None
	if match is None:
		raise InvalidColorError(value)

	digits = match.group(1)
	if len(digits) == 3:
		digits = "".join(c * 2 for c in digits)
	return f"#{digits.lower()}"


def hex_to_rgb(value: str) -> tuple[int, int, int]:
	digits = normalize_hex(value)[1:]
	return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def rgb_to_hex(r: int, g: int, b: int) -> str:
	return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_hsl(value: str) -> HSL:
	r, g, b = (c / 255 for c in hex_to_rgb(value))

	high = max(r, g, b)
	low = min(r, g, b)
	lightness = (high + low) / 2

	if high == low:
		return HSL(0.0, 0.0, lightness * 100)

	d = high - low
	saturation = d / (2 - high - low) if lightness > 0.5 else d / (high + low)

	if high == r:
		hue = ((g - b) / d + (6 if g < b else 0)) / 6
	elif high == g:
		hue = ((b - r) / d + 2) / 6
	else:
		hue = ((r - g) / d + 4) / 6

	return HSL(hue * 360, saturation * 100, lightness * 100)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
	if t < 0:
		t += 1
	if t > 1:
		t -= 1
	if t < 1 / 6:
		return p + (q - p) * 6 * t
	if t < 1 / 2:
		return q
	if t < 2 / 3:
		return p + (q - p) * (2 / 3 - t) * 6
	return p


def _channel(value: float) -> int:
	# Half-up rounding, clamped to a byte
	return max(0, min(255, int(value * 255 + 0.5)))


def hsl_to_hex(color: HSL) -> str:
	h = (color.h % 360) / 360
	s = max(0.0, min(100.0, color.s)) / 100
	l = max(0.0, min(100.0, color.l)) / 100

	if s == 0:
		grey = _channel(l)
		return rgb_to_hex(grey, grey, grey)

	q = l * (1 + s) if l < 0.5 else l + s - l * s
	p = 2 * l - q

	return rgb_to_hex(
		_channel(_hue_to_rgb(p, q, h + 1 / 3)),
		_channel(_hue_to_rgb(p, q, h)),
		_channel(_hue_to_rgb(p, q, h - 1 / 3)),
	)


def rotate_hue(color: HSL, degrees: float) -> HSL:
	return replace(color, h=(color.h + degrees) % 360)


def lighten(value: str, percent: float) -> str:
	"""Mix a color toward white by ``percent`` (0-100)."""
	ratio = max(0.0, min(100.0, percent)) / 100
	channels = np.array(hex_to_rgb(value), dtype=float)
	mixed = channels + (255 - channels) * ratio
	r, g, b = (int(c + 0.5) for c in mixed)
	return rgb_to_hex(r, g, b)


def relative_luminance(value: str) -> float:
	srgb = np.array(hex_to_rgb(value), dtype=float) / 255
	linear = np.where(srgb <= 0.03928, srgb / 12.92, ((srgb + 0.055) / 1.055) ** 2.4)
	return float(np.dot(LUMINANCE_WEIGHTS, linear))


def contrast_ratio(first: str, second: str) -> float:
	"""WCAG contrast ratio between two colors, 1.0 to 21.0."""
	l1 = relative_luminance(first)
	l2 = relative_luminance(second)
	lighter, darker = max(l1, l2), min(l1, l2)
	return (lighter + 0.05) / (darker + 0.05)


def ensure_contrast(color: str, against: str, min_ratio: float = WCAG_AA_RATIO) -> str:
	"""
	Adjust the lightness of ``color`` until it reaches ``min_ratio`` against ``against``.

	Darkens on light backdrops and lightens on dark ones, one step at a
	time. Stops at black or white if the target cannot be met.
	"""
	color = normalize_hex(color)
	if contrast_ratio(color, against) >= min_ratio:
		return color

	hsl = hex_to_hsl(color)
	darken = relative_luminance(against) > 0.5
	candidate = color

	while contrast_ratio(candidate, against) < min_ratio:
		if darken:
			if hsl.l <= 0:
				break
			hsl = replace(hsl, l=max(0.0, hsl.l - LIGHTNESS_STEP))
		else:
			if hsl.l >= 100:
				break
			hsl = replace(hsl, l=min(100.0, hsl.l + LIGHTNESS_STEP))
		candidate = hsl_to_hex(hsl)

	if contrast_ratio(candidate, against) < min_ratio:
		logger.debug(f"Could not reach contrast {min_ratio} for {color} against {against}")

	return candidate
