# (c) Copyright Datacraft, 2026
"""Typography enhancer."""
from dataclasses import dataclass

from docenhance.core.types import Priority, Style

from ..analysis import DocumentAnalysis
from ..schema import EnhancementPreferences
from ..scoring import generate_strategy_id, score_to_impact
from ..strategy import (
	EnhancementStrategy,
	FontSelection,
	StrategyChanges,
	TypeImprovements,
	TypeSizes,
	TypographyChanges,
)
from .base import preferred_style

SCORE_THRESHOLD = 85
READABILITY_THRESHOLD = 70
READABILITY_IMPACT = 85
HEADING_LEVELS = 6


@dataclass(frozen=True)
class FontPairing:
	heading: str
	body: str
	style: Style


FONT_PAIRINGS = [
	FontPairing("Playfair Display", "Source Sans Pro", Style.CLASSIC),
	FontPairing("Montserrat", "Open Sans", Style.MODERN),
	FontPairing("Roboto Slab", "Roboto", Style.PROFESSIONAL),
	FontPairing("Fredoka One", "Nunito", Style.PLAYFUL),
	FontPairing("Inter", "Inter", Style.MINIMAL),
]

ACCENT_FONT = "Pacifico"

# Type scale ratio by hierarchy need
MINOR_THIRD = 1.2
MAJOR_THIRD = 1.25
PERFECT_FIFTH = 1.5

TIGHT_FONTS = {"Inter", "Helvetica", "Arial"}
LOOSE_FONTS = {"Georgia", "Times New Roman", "Playfair Display"}
SERIF_MARKERS = ("Georgia", "Times", "Playfair", "Merriweather")

SERIF_READABLE = FontSelection(heading="Merriweather", body="Source Sans Pro")
SANS_READABLE = FontSelection(heading="Lato", body="Lato")


class TypographyEnhancer:
	"""Improves font selection, hierarchy, and readability."""

	name = "Typography Enhancement"

	def analyze(
		self,
		analysis: DocumentAnalysis,
		preferences: EnhancementPreferences | None = None,
	) -> list[EnhancementStrategy]:
		strategies = []

		if analysis.typography.score < SCORE_THRESHOLD:
			strategies.append(self._typography_strategy(analysis, preferences))

		if analysis.engagement.readability < READABILITY_THRESHOLD:
			strategies.append(self._readability_strategy(analysis))

		return strategies

	def _typography_strategy(
		self,
		analysis: DocumentAnalysis,
		preferences: EnhancementPreferences | None,
	) -> EnhancementStrategy:
		style = preferred_style(preferences)
		fonts = select_font_pairing(style)
		base = base_font_size(analysis)
		scale = type_scale(analysis)

		changes = TypographyChanges(
			fonts=fonts,
			sizes=TypeSizes(base=base, scale=scale, headings=heading_sizes(base, scale)),
			improvements=TypeImprovements(
				line_height=line_height(base),
				letter_spacing=letter_spacing(fonts.body),
				paragraph_spacing=paragraph_spacing(base),
			),
		)

		return EnhancementStrategy(
			id=generate_strategy_id(self.name),
			name="Optimize Typography System",
			description=(
				f"Apply {style.value} typography with {fonts.heading} headings "
				f"and {fonts.body} body text"
			),
			priority=Priority.HIGH,
			impact=score_to_impact(analysis.typography.score),
			changes=StrategyChanges(typography=changes),
		)

	def _readability_strategy(self, analysis: DocumentAnalysis) -> EnhancementStrategy:
		base = max(18, base_font_size(analysis) + 2)

		changes = TypographyChanges(
			fonts=readable_fonts(analysis.typography.fonts),
			sizes=TypeSizes(base=base, scale=MAJOR_THIRD, headings=heading_sizes(base, MAJOR_THIRD)),
			improvements=TypeImprovements(line_height=1.6, letter_spacing=0.02, paragraph_spacing=1.5),
		)

		return EnhancementStrategy(
			id=generate_strategy_id(self.name),
			name="Enhance Readability",
			description="Improve text readability with larger sizes and better spacing",
			priority=Priority.HIGH,
			impact=READABILITY_IMPACT,
			changes=StrategyChanges(typography=changes),
		)


def select_font_pairing(style: Style) -> FontSelection:
	pairing = next((p for p in FONT_PAIRINGS if p.style == style), None)
	if pairing is None:
		pairing = next(p for p in FONT_PAIRINGS if p.style == Style.MODERN)

	accent = ACCENT_FONT if style in (Style.PLAYFUL, Style.CREATIVE) else None
	return FontSelection(heading=pairing.heading, body=pairing.body, accent=accent)


def base_font_size(analysis: DocumentAnalysis) -> int:
	if "Text too small" in analysis.typography.issues:
		return 18
	return 16


def type_scale(analysis: DocumentAnalysis) -> float:
	"""Pick a modular scale ratio from how much hierarchy the document needs."""
	if "Poor hierarchy" in analysis.typography.issues:
		return PERFECT_FIFTH
	if "Inconsistent sizes" in analysis.typography.issues or "Unclear hierarchy" in analysis.layout.issues:
		return MAJOR_THIRD
	return MINOR_THIRD


def heading_sizes(base: int, scale: float) -> list[int]:
	"""Sizes for h1..h6, h6 being one step above the base size."""
	sizes = []
	current = float(base)
	for _ in range(HEADING_LEVELS):
		current *= scale
		sizes.append(int(current + 0.5))
	sizes.reverse()
	return sizes


def line_height(base: int) -> float:
	if base <= 14:
		return 1.7
	if base <= 16:
		return 1.6
	if base <= 18:
		return 1.5
	return 1.4


def letter_spacing(font_family: str) -> float:
	if font_family in TIGHT_FONTS:
		return 0.01
	if font_family in LOOSE_FONTS:
		return -0.01
	return 0.0


def paragraph_spacing(base: int) -> float:
	"""Paragraph gap as a ratio of the base size."""
	return round(base * 0.75) / base


def readable_fonts(current_fonts: tuple[str, ...]) -> FontSelection:
	has_serif = any(marker in font for font in current_fonts for marker in SERIF_MARKERS)
	return SERIF_READABLE if has_serif else SANS_READABLE
