# (c) Copyright Datacraft, 2026
"""Background enhancer."""
import logging

from docenhance.core.config import Settings, get_settings
from docenhance.core.types import BackgroundType, Priority, Style

from .. import colors
from ..analysis import DocumentAnalysis
from ..schema import EnhancementPreferences
from ..scoring import generate_strategy_id
from ..strategy import BackgroundChanges, BackgroundFill, EnhancementStrategy, StrategyChanges
from .base import pick, preferred_style

logger = logging.getLogger(__name__)

FALLBACK_BACKGROUND = "#f8f9fa"
PATTERN_IMPACT = 40

PATTERNS = {
	"subtle": ["dots", "grid", "lines", "waves", "circles"],
	"geometric": ["triangles", "hexagons", "diamonds", "squares", "polygons"],
	"organic": ["blobs", "clouds", "bubbles", "leaves", "curves"],
}

PATTERNS_BY_STYLE = {
	Style.MINIMAL: "subtle",
	Style.PROFESSIONAL: "subtle",
	Style.MODERN: "geometric",
	Style.PLAYFUL: "organic",
	Style.CREATIVE: "organic",
}

# (colors, direction)
GRADIENTS = {
	Style.MODERN: [
		(["#667eea", "#764ba2"], "135deg"),
		(["#f093fb", "#f5576c"], "120deg"),
		(["#4facfe", "#00f2fe"], "45deg"),
	],
	Style.PROFESSIONAL: [
		(["#e0e0e0", "#f5f5f5"], "180deg"),
		(["#d3d3d3", "#ffffff"], "90deg"),
		(["#f8f9fa", "#e9ecef"], "135deg"),
	],
	Style.PLAYFUL: [
		(["#fa709a", "#fee140"], "30deg"),
		(["#30cfd0", "#330867"], "150deg"),
		(["#a8edea", "#fed6e3"], "60deg"),
	],
}


class BackgroundEnhancer:
	"""Adds or improves background treatment for visual depth."""

	name = "Background Enhancement"

	def __init__(self, settings: Settings | None = None):
		self.settings = settings or get_settings()

	def analyze(
		self,
		analysis: DocumentAnalysis,
		preferences: EnhancementPreferences | None = None,
	) -> list[EnhancementStrategy]:
		strategies = []

		if needs_background(analysis):
			strategies.append(self._background_strategy(analysis, preferences))

		# Plain documents also get a barely visible texture
		if analysis.engagement.visual_appeal < 50:
			strategies.append(self._pattern_strategy(analysis, preferences))

		return strategies

	def _background_strategy(
		self,
		analysis: DocumentAnalysis,
		preferences: EnhancementPreferences | None,
	) -> EnhancementStrategy:
		style = preferred_style(preferences)
		background = self._select_background(style, analysis)

		return EnhancementStrategy(
			id=generate_strategy_id(self.name),
			name="Enhance Background",
			description=f"Add {background.type.value} background for visual depth",
			priority=Priority.MEDIUM,
			impact=background_impact(analysis),
			changes=StrategyChanges(background=background),
		)

	def _pattern_strategy(
		self,
		analysis: DocumentAnalysis,
		preferences: EnhancementPreferences | None,
	) -> EnhancementStrategy:
		style = preferred_style(preferences)
		pattern = select_pattern(style, analysis)

		return EnhancementStrategy(
			id=generate_strategy_id(self.name),
			name="Add Subtle Pattern",
			description=f"Add subtle {pattern} pattern for texture",
			priority=Priority.LOW,
			impact=PATTERN_IMPACT,
			changes=StrategyChanges(background=BackgroundChanges(
				type=BackgroundType.PATTERN,
				value=BackgroundFill(pattern=pattern, opacity=0.05, colors=[pattern_color(analysis)]),
			)),
		)

	def _select_background(self, style: Style, analysis: DocumentAnalysis) -> BackgroundChanges:
		if style == Style.MINIMAL:
			return BackgroundChanges(type=BackgroundType.SOLID, value=solid_color(analysis))

		if style in (Style.MODERN, Style.PROFESSIONAL):
			return BackgroundChanges(type=BackgroundType.GRADIENT, value=select_gradient(style, analysis))

		if style == Style.PLAYFUL:
			return BackgroundChanges(
				type=BackgroundType.PATTERN,
				value=BackgroundFill(
					pattern=select_pattern(style, analysis),
					opacity=0.1,
					colors=["#e0e0e0", "#f5f5f5"],
				),
			)

		if style == Style.CREATIVE:
			if self.settings.background_image_url:
				return BackgroundChanges(
					type=BackgroundType.IMAGE,
					value=BackgroundFill(image_url=self.settings.background_image_url, opacity=0.15),
				)
			logger.debug("No background image configured, using gradient")
			return BackgroundChanges(type=BackgroundType.GRADIENT, value=select_gradient(style, analysis))

		if analysis.engagement.visual_appeal < 40:
			return BackgroundChanges(type=BackgroundType.GRADIENT, value=select_gradient(style, analysis))
		return BackgroundChanges(type=BackgroundType.SOLID, value=solid_color(analysis))


def needs_background(analysis: DocumentAnalysis) -> bool:
	plain = analysis.engagement.visual_appeal < 60
	lacks_depth = "Lacks visual hierarchy" in analysis.layout.issues
	low_engagement = analysis.engagement.score < 70
	return plain or lacks_depth or low_engagement


def background_impact(analysis: DocumentAnalysis) -> int:
	visual_appeal = analysis.engagement.visual_appeal
	if visual_appeal < 40:
		return 70
	if visual_appeal < 60:
		return 50
	if analysis.overall_score < 70:
		return 40
	return 30


def solid_color(analysis: DocumentAnalysis) -> str:
	"""A very light tint of the dominant color."""
	if analysis.colors.palette:
		return colors.lighten(analysis.colors.palette[0], 90)
	return FALLBACK_BACKGROUND


def pattern_color(analysis: DocumentAnalysis) -> str:
	if analysis.colors.palette:
		return colors.lighten(analysis.colors.palette[0], 80)
	return "#e0e0e0"


def select_gradient(style: Style, analysis: DocumentAnalysis) -> BackgroundFill:
	options = GRADIENTS.get(style, GRADIENTS[Style.MODERN])
	gradient_colors, direction = pick(options, analysis.engagement.visual_appeal)
	return BackgroundFill(colors=list(gradient_colors), direction=direction)


def select_pattern(style: Style, analysis: DocumentAnalysis) -> str:
	family = PATTERNS_BY_STYLE.get(style, "subtle")
	return pick(PATTERNS[family], analysis.overall_score)
