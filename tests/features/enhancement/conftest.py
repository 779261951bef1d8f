# (c) Copyright Datacraft, 2026
"""Pytest fixtures for enhancement tests."""
import pytest

from docenhance.core.config import Settings
from docenhance.core.features.enhancement.analysis import (
	ColorAnalysis,
	DocumentAnalysis,
	EngagementAnalysis,
	LayoutAnalysis,
	TypographyAnalysis,
)
from docenhance.core.features.enhancement.strategy import (
	BackgroundChanges,
	ColorAdjustments,
	ColorChanges,
	ColorPalette,
	EnhancementStrategy,
	FontSelection,
	GridSpec,
	HierarchySpec,
	LayoutChanges,
	SpacingSpec,
	StrategyChanges,
	TypeImprovements,
	TypeSizes,
	TypographyChanges,
)
from docenhance.core.types import Alignment, BackgroundType, ChangeDomain, Priority


class StubEnhancer:
	"""Enhancer returning fixed strategies, or raising."""

	def __init__(self, name: str, strategies=None, error: Exception | None = None):
		self.name = name
		self.strategies = list(strategies or [])
		self.error = error
		self.calls = 0

	def analyze(self, analysis, preferences=None):
		self.calls += 1
		if self.error is not None:
			raise self.error
		return list(self.strategies)


PAYLOADS = {
	ChangeDomain.COLORS: lambda: ColorChanges(
		palette=ColorPalette("#1e40af", ["#3b82f6"], "#f59e0b", "#ffffff", "#1f2937"),
		adjustments=ColorAdjustments(contrast=1.5),
		replacements=[("#ff0000", "#ef4444")],
	),
	ChangeDomain.TYPOGRAPHY: lambda: TypographyChanges(
		fonts=FontSelection("Inter", "Open Sans"),
		sizes=TypeSizes(base=16, scale=1.25, headings=[61, 49, 39, 31, 25, 20]),
		improvements=TypeImprovements(line_height=1.5, letter_spacing=0.0, paragraph_spacing=1.5),
	),
	ChangeDomain.LAYOUT: lambda: LayoutChanges(
		grid=GridSpec(columns=12, rows=8, gutters=16, margins=24),
		spacing=SpacingSpec(sections=48, elements=24, padding=16),
		alignment=Alignment.LEFT,
		hierarchy=HierarchySpec(levels=3, emphasis=[("title", 3), ("subtitle", 2), ("body", 1)]),
	),
	ChangeDomain.BACKGROUND: lambda: BackgroundChanges(type=BackgroundType.SOLID, value="#f3f4f6"),
	ChangeDomain.DECORATIVE_ELEMENTS: lambda: [],
}

FIELD_NAMES = {
	ChangeDomain.COLORS: "colors",
	ChangeDomain.TYPOGRAPHY: "typography",
	ChangeDomain.LAYOUT: "layout",
	ChangeDomain.BACKGROUND: "background",
	ChangeDomain.DECORATIVE_ELEMENTS: "decorative_elements",
}


@pytest.fixture
def make_strategy():
	"""Factory for strategies touching the given domains."""

	def _make(
		strategy_id: str,
		*domains: ChangeDomain,
		impact: float = 50,
		priority: Priority = Priority.MEDIUM,
	) -> EnhancementStrategy:
		changes = StrategyChanges(**{FIELD_NAMES[d]: PAYLOADS[d]() for d in domains})
		return EnhancementStrategy(
			id=strategy_id,
			name=f"Strategy {strategy_id}",
			description=f"Test strategy {strategy_id}",
			priority=priority,
			impact=impact,
			changes=changes,
		)

	return _make


@pytest.fixture
def stub_enhancer():
	return StubEnhancer


@pytest.fixture
def settings():
	"""Sequential enhancer fan-out, no logging file."""
	return Settings(parallel_enhancers=False, log_config=None, _env_file=None)


@pytest.fixture
def parallel_settings():
	return Settings(parallel_enhancers=True, max_workers=5, log_config=None, _env_file=None)


@pytest.fixture
def make_analysis():
	"""Factory for analyses; every dimension healthy unless overridden."""

	def _make(
		color_score: float = 90,
		color_issues: tuple[str, ...] = (),
		palette: tuple[str, ...] = ("#2563eb", "#f59e0b"),
		typography_score: float = 90,
		typography_issues: tuple[str, ...] = (),
		fonts: tuple[str, ...] = ("Arial",),
		layout_score: float = 90,
		layout_issues: tuple[str, ...] = (),
		engagement_score: float = 90,
		readability: float = 90,
		visual_appeal: float = 90,
		overall_score: float = 90,
	) -> DocumentAnalysis:
		return DocumentAnalysis(
			colors=ColorAnalysis(score=color_score, issues=tuple(color_issues), palette=tuple(palette)),
			typography=TypographyAnalysis(
				score=typography_score, issues=tuple(typography_issues), fonts=tuple(fonts)
			),
			layout=LayoutAnalysis(score=layout_score, issues=tuple(layout_issues)),
			engagement=EngagementAnalysis(
				score=engagement_score, readability=readability, visual_appeal=visual_appeal
			),
			overall_score=overall_score,
		)

	return _make


@pytest.fixture
def poor_analysis(make_analysis):
	"""A weak document that triggers every enhancer."""
	return make_analysis(
		color_score=45,
		color_issues=("Poor contrast", "Too dark"),
		palette=("#ff0000", "#00ff00", "#0000ff", "#ffff00"),
		typography_score=55,
		typography_issues=("Text too small", "Poor hierarchy"),
		fonts=("Times New Roman", "Arial"),
		layout_score=45,
		layout_issues=("Insufficient white space", "Poor alignment", "Unclear hierarchy", "Cluttered"),
		engagement_score=50,
		readability=60,
		visual_appeal=35,
		overall_score=40,
	)


@pytest.fixture
def analysis_record():
	"""Serialized analysis as sent by the analysis service."""
	return {
		"colors": {
			"score": 55,
			"issues": ["Poor contrast"],
			"palette": ["#FF0000", "#00FF00", "#0000FF"],
		},
		"typography": {"score": 70, "issues": ["Text too small"], "fonts": ["Georgia"]},
		"layout": {"score": 65, "issues": ["Insufficient white space"]},
		"engagement": {"score": 60, "readability": 65, "visualAppeal": 45},
		"overallScore": 62,
	}
