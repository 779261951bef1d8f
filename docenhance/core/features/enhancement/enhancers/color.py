# (c) Copyright Datacraft, 2026
"""
Color enhancer.

Proposes a harmonized palette derived from the document's dominant
color, and an accessibility palette when contrast is reported poor.
"""
import logging
from dataclasses import replace

from docenhance.core.config import Settings, get_settings
from docenhance.core.types import ColorScheme, Priority

from .. import colors
from ..analysis import DocumentAnalysis
from ..exceptions import AnalysisError
from ..schema import EnhancementPreferences
from ..scoring import generate_strategy_id, score_to_impact
from ..strategy import (
	ColorAdjustments,
	ColorChanges,
	ColorPalette,
	EnhancementStrategy,
	StrategyChanges,
)

logger = logging.getLogger(__name__)

DEFAULT_PRIMARY = "#2563eb"
POOR_CONTRAST = "Poor contrast"
SCORE_THRESHOLD = 80
ACCESSIBILITY_IMPACT = 90

SATURATION_BY_SCHEME = {
	ColorScheme.VIBRANT: 1.2,
	ColorScheme.MUTED: 0.7,
	ColorScheme.MONOCHROME: 0.5,
}


class ColorEnhancer:
	"""Optimizes color harmony, contrast, and accessibility."""

	name = "Color Palette Optimization"

	def __init__(self, settings: Settings | None = None):
		self.settings = settings or get_settings()

	def analyze(
		self,
		analysis: DocumentAnalysis,
		preferences: EnhancementPreferences | None = None,
	) -> list[EnhancementStrategy]:
		strategies = []

		if analysis.colors.score < SCORE_THRESHOLD:
			strategies.append(self._palette_strategy(analysis, preferences))

		if POOR_CONTRAST in analysis.colors.issues:
			strategies.append(self._accessibility_strategy(analysis))

		return strategies

	def _palette_strategy(
		self,
		analysis: DocumentAnalysis,
		preferences: EnhancementPreferences | None,
	) -> EnhancementStrategy:
		scheme = None
		if preferences is not None:
			scheme = preferences.color_scheme
		if scheme is None:
			scheme = detect_color_scheme(analysis.colors.palette)

		current = list(analysis.colors.palette)
		palette = optimize_palette(current, scheme)

		changes = ColorChanges(
			palette=palette,
			adjustments=ColorAdjustments(
				contrast=contrast_adjustment(analysis.colors.score),
				saturation=SATURATION_BY_SCHEME.get(scheme, 1.0),
				brightness=brightness_adjustment(analysis.colors.issues),
			),
			replacements=color_replacements(current, palette),
		)

		return EnhancementStrategy(
			id=generate_strategy_id(self.name),
			name="Optimize Color Palette",
			description=f"Apply {scheme.value} color scheme with improved harmony and contrast",
			priority=Priority.HIGH,
			impact=score_to_impact(analysis.colors.score),
			changes=StrategyChanges(colors=changes),
		)

	def _accessibility_strategy(self, analysis: DocumentAnalysis) -> EnhancementStrategy:
		current = list(analysis.colors.palette)
		if not current:
			raise AnalysisError("colors.palette", "Poor contrast reported but colors.palette is empty")

		min_ratio = self.settings.min_contrast_ratio
		accessible = [colors.ensure_contrast(c, "#ffffff", min_ratio) for c in current]

		palette = ColorPalette(
			primary=accessible[0],
			secondary=accessible[1:3],
			accent=accessible[3] if len(accessible) > 3 else accessible[0],
			background=colors.ensure_contrast("#ffffff", accessible[0], min_ratio),
			text=colors.ensure_contrast("#000000", "#ffffff", min_ratio),
		)

		replacements = {}
		for old, new in zip(current, accessible):
			if colors.normalize_hex(old) != new:
				replacements.setdefault(old, new)

		return EnhancementStrategy(
			id=generate_strategy_id(self.name),
			name="Improve Color Accessibility",
			description="Enhance color contrast to meet WCAG AA standards",
			priority=Priority.HIGH,
			impact=ACCESSIBILITY_IMPACT,
			changes=StrategyChanges(colors=ColorChanges(
				palette=palette,
				adjustments=ColorAdjustments(contrast=1.5, saturation=0.9, brightness=1.1),
				replacements=list(replacements.items()),
			)),
		)


def detect_color_scheme(palette: tuple[str, ...] | list[str]) -> ColorScheme:
	"""Infer a scheme from how many colors the document already uses."""
	count = len(palette)
	if count <= 2:
		return ColorScheme.MONOCHROME
	if count <= 3:
		return ColorScheme.COMPLEMENTARY
	if count <= 5:
		return ColorScheme.ANALOGOUS
	return ColorScheme.VIBRANT


def optimize_palette(current: list[str], scheme: ColorScheme) -> ColorPalette:
	base = colors.normalize_hex(current[0]) if current else DEFAULT_PRIMARY
	hsl = colors.hex_to_hsl(base)
	to_hex = colors.hsl_to_hex

	if scheme == ColorScheme.MONOCHROME:
		return ColorPalette(
			primary=base,
			secondary=[
				to_hex(replace(hsl, l=min(90, hsl.l + 30))),
				to_hex(replace(hsl, l=max(20, hsl.l - 20))),
			],
			accent=to_hex(replace(hsl, s=min(100, hsl.s + 20))),
			background="#ffffff",
			text="#1f2937",
		)

	if scheme == ColorScheme.COMPLEMENTARY:
		complement = colors.rotate_hue(hsl, 180)
		return ColorPalette(
			primary=base,
			secondary=[
				to_hex(complement),
				to_hex(replace(hsl, l=min(80, hsl.l + 20))),
			],
			accent=to_hex(replace(complement, s=min(100, complement.s + 10))),
			background="#fafafa",
			text="#111827",
		)

	if scheme == ColorScheme.ANALOGOUS:
		return ColorPalette(
			primary=base,
			secondary=[
				to_hex(colors.rotate_hue(hsl, 30)),
				to_hex(colors.rotate_hue(hsl, -30)),
			],
			accent=to_hex(replace(colors.rotate_hue(hsl, 60), s=min(100, hsl.s + 10))),
			background="#ffffff",
			text="#1f2937",
		)

	if scheme == ColorScheme.VIBRANT:
		return ColorPalette(
			primary=to_hex(replace(hsl, s=min(100, hsl.s + 20))),
			secondary=[
				to_hex(replace(colors.rotate_hue(hsl, 120), s=80)),
				to_hex(replace(colors.rotate_hue(hsl, 240), s=80)),
			],
			accent=to_hex(replace(colors.rotate_hue(hsl, 45), s=90, l=50)),
			background="#ffffff",
			text="#111827",
		)

	# Muted
	return ColorPalette(
		primary=to_hex(replace(hsl, s=max(20, hsl.s - 30))),
		secondary=[
			to_hex(replace(hsl, s=20, l=70)),
			to_hex(replace(hsl, s=15, l=50)),
		],
		accent=to_hex(replace(hsl, s=40)),
		background="#f9fafb",
		text="#374151",
	)


def contrast_adjustment(score: float) -> float:
	if score < 50:
		return 1.5
	if score < 70:
		return 1.2
	return 1.0


def brightness_adjustment(issues: tuple[str, ...]) -> float:
	if "Too dark" in issues:
		return 1.2
	if "Too bright" in issues:
		return 0.8
	return 1.0


def color_replacements(current: list[str], palette: ColorPalette) -> list[tuple[str, str]]:
	"""Pair existing colors with their optimized counterparts, in palette order."""
	targets = [palette.primary, *palette.secondary[:2], palette.accent]
	replacements: dict[str, str] = {}
	for old, new in zip(current, targets):
		# First occurrence keeps its slot, later duplicates update the target
		replacements[old] = new
	return list(replacements.items())
