# (c) Copyright Datacraft, 2026
"""
Layout enhancer.

Restructures the page grid, spacing, alignment, and emphasis levels.
"""
from docenhance.core.types import Alignment, Priority, Style

from ..analysis import DocumentAnalysis
from ..schema import EnhancementPreferences
from ..scoring import generate_strategy_id, score_to_impact
from ..strategy import (
	EnhancementStrategy,
	GridSpec,
	HierarchySpec,
	LayoutChanges,
	SpacingSpec,
	StrategyChanges,
)
from .base import preferred_style

SCORE_THRESHOLD = 80
WHITE_SPACE_ISSUE = "Insufficient white space"
ALIGNMENT_ISSUE = "Poor alignment"
WHITE_SPACE_IMPACT = 80
ALIGNMENT_IMPACT = 70

# Grid presets: (columns, gutters, margins)
GRID_PRESETS = {
	"classic": (12, 20, 60),
	"modern": (16, 24, 80),
	"minimal": (8, 32, 120),
	"magazine": (6, 16, 40),
	"presentation": (4, 40, 100),
}

GRID_BY_STYLE = {
	Style.MINIMAL: "minimal",
	Style.CLASSIC: "classic",
	Style.PROFESSIONAL: "modern",
	Style.PLAYFUL: "magazine",
	Style.CREATIVE: "presentation",
}

EMPHASIS_LEVELS = [
	("title", 5),
	("heading", 4),
	("subheading", 3),
	("callout", 3),
	("body", 1),
	("caption", 1),
]


class LayoutEnhancer:
	"""Restructures layout for better visual hierarchy and flow."""

	name = "Layout Optimization"

	def analyze(
		self,
		analysis: DocumentAnalysis,
		preferences: EnhancementPreferences | None = None,
	) -> list[EnhancementStrategy]:
		strategies = []

		if analysis.layout.score < SCORE_THRESHOLD:
			strategies.append(self._structure_strategy(analysis, preferences))

		if WHITE_SPACE_ISSUE in analysis.layout.issues:
			strategies.append(self._spacing_strategy(analysis))

		if ALIGNMENT_ISSUE in analysis.layout.issues:
			strategies.append(self._alignment_strategy(analysis))

		return strategies

	def _structure_strategy(
		self,
		analysis: DocumentAnalysis,
		preferences: EnhancementPreferences | None,
	) -> EnhancementStrategy:
		style = preferred_style(preferences)
		preset = GRID_BY_STYLE.get(style, "modern")
		columns, gutters, margins = GRID_PRESETS[preset]

		if WHITE_SPACE_ISSUE in analysis.layout.issues:
			spacing = SpacingSpec(sections=72, elements=24, padding=28)
		else:
			spacing = SpacingSpec(sections=60, elements=20, padding=24)

		changes = LayoutChanges(
			grid=GridSpec(columns=columns, rows=optimal_rows(analysis), gutters=gutters, margins=margins),
			spacing=spacing,
			alignment=style_alignment(style),
			hierarchy=HierarchySpec(levels=hierarchy_levels(analysis), emphasis=list(EMPHASIS_LEVELS)),
		)

		return EnhancementStrategy(
			id=generate_strategy_id(self.name),
			name="Optimize Layout Structure",
			description=f"Apply {style.value} grid system with {columns}-column layout",
			priority=Priority.HIGH,
			impact=score_to_impact(analysis.layout.score),
			changes=StrategyChanges(layout=changes),
		)

	def _spacing_strategy(self, analysis: DocumentAnalysis) -> EnhancementStrategy:
		changes = LayoutChanges(
			grid=GridSpec(columns=12, rows=optimal_rows(analysis), gutters=32, margins=100),
			spacing=SpacingSpec(sections=80, elements=24, padding=32),
			alignment=Alignment.LEFT,
			hierarchy=HierarchySpec(levels=3, emphasis=[("heading", 3), ("subheading", 2), ("body", 1)]),
		)

		return EnhancementStrategy(
			id=generate_strategy_id(self.name),
			name="Improve White Space",
			description="Add breathing room with increased spacing and margins",
			priority=Priority.HIGH,
			impact=WHITE_SPACE_IMPACT,
			changes=StrategyChanges(layout=changes),
		)

	def _alignment_strategy(self, analysis: DocumentAnalysis) -> EnhancementStrategy:
		alignment = content_alignment(analysis)

		changes = LayoutChanges(
			grid=GridSpec(columns=12, rows=optimal_rows(analysis), gutters=24, margins=60),
			spacing=SpacingSpec(sections=60, elements=20, padding=24),
			alignment=alignment,
			hierarchy=HierarchySpec(levels=hierarchy_levels(analysis), emphasis=list(EMPHASIS_LEVELS)),
		)

		return EnhancementStrategy(
			id=generate_strategy_id(self.name),
			name="Fix Alignment Issues",
			description=f"Apply consistent {alignment.value} alignment throughout",
			priority=Priority.MEDIUM,
			impact=ALIGNMENT_IMPACT,
			changes=StrategyChanges(layout=changes),
		)


def optimal_rows(analysis: DocumentAnalysis) -> int:
	# Dense issue lists point at content that needs more sections
	return 8 if len(analysis.layout.issues) > 3 else 6


def style_alignment(style: Style) -> Alignment:
	if style in (Style.CLASSIC, Style.PROFESSIONAL):
		return Alignment.JUSTIFY
	if style == Style.PLAYFUL:
		return Alignment.CENTER
	return Alignment.LEFT


def hierarchy_levels(analysis: DocumentAnalysis) -> int:
	if analysis.layout.score < 50:
		return 4
	if analysis.layout.score < 70:
		return 3
	return 2


def content_alignment(analysis: DocumentAnalysis) -> Alignment:
	"""Alignment from readability and formality signals."""
	long_text = "Poor readability" in analysis.typography.issues
	formal = analysis.engagement.score > 70

	if long_text and formal:
		return Alignment.JUSTIFY
	if formal:
		return Alignment.LEFT
	return Alignment.CENTER
