# (c) Copyright Datacraft, 2026
"""
Decorative enhancer.

Adds icons, dividers, corner patterns and background shapes to plain
documents, and emphasis shapes where the hierarchy is unclear.
Positions and sizes are in page layout units, with the origin at the top left.
"""
from docenhance.core.types import ElementPurpose, ElementType, Priority, Style

from ..analysis import DocumentAnalysis
from ..schema import EnhancementPreferences
from ..scoring import generate_strategy_id
from ..strategy import DecorativeElement, EnhancementStrategy, StrategyChanges
from .base import preferred_style

VISUAL_APPEAL_THRESHOLD = 60
EMPHASIS_IMPACT = 60
ICON_COUNT = 3
BACKGROUND_SHAPE_COUNT = 5

ICONS = {
	"education": ["book", "pencil", "graduation", "lightbulb", "calculator"],
	"business": ["chart", "briefcase", "handshake", "target", "growth"],
	"creative": ["palette", "brush", "camera", "music", "design"],
	"general": ["star", "heart", "check", "arrow", "info"],
}

DIVIDER_STYLES = {
	Style.MINIMAL: {"type": "solid", "color": "#e5e7eb", "width": 1},
	Style.PLAYFUL: {"type": "dotted", "color": "#f59e0b", "width": 2},
	Style.PROFESSIONAL: {"type": "solid", "color": "#9ca3af", "width": 2},
}
DEFAULT_DIVIDER = {"type": "solid", "color": "#d1d5db", "width": 1}


class DecorativeEnhancer:
	"""Adds visual interest with shapes, icons, and decorative elements."""

	name = "Decorative Elements"

	def analyze(
		self,
		analysis: DocumentAnalysis,
		preferences: EnhancementPreferences | None = None,
	) -> list[EnhancementStrategy]:
		strategies = []

		if analysis.engagement.visual_appeal < VISUAL_APPEAL_THRESHOLD:
			strategies.append(self._decorative_strategy(analysis, preferences))

		if "Unclear hierarchy" in analysis.layout.issues:
			strategies.append(self._emphasis_strategy(analysis))

		return strategies

	def _decorative_strategy(
		self,
		analysis: DocumentAnalysis,
		preferences: EnhancementPreferences | None,
	) -> EnhancementStrategy:
		style = preferred_style(preferences)
		elements: list[DecorativeElement] = []

		if style in (Style.PLAYFUL, Style.CREATIVE):
			elements.extend(corner_decorations(style))

		if "Poor section separation" in analysis.layout.issues:
			elements.extend(section_dividers(style))

		elements.extend(icon_elements(ICONS[document_type(analysis)], style))

		if analysis.engagement.visual_appeal < 50:
			elements.extend(background_shapes(style))

		return EnhancementStrategy(
			id=generate_strategy_id(self.name),
			name="Add Decorative Elements",
			description=f"Enhance visual appeal with {style.value} decorative elements",
			priority=Priority.MEDIUM,
			impact=decorative_impact(analysis),
			changes=StrategyChanges(decorative_elements=elements),
		)

	def _emphasis_strategy(self, analysis: DocumentAnalysis) -> EnhancementStrategy:
		palette = analysis.colors.palette
		primary = palette[0] if palette else "#2563eb"
		accent = palette[2] if len(palette) > 2 else primary

		elements = [
			# Highlight block behind key content
			DecorativeElement(
				type=ElementType.SHAPE,
				position=(10, 10),
				size=(200, 60),
				style={"shape": "rectangle", "fill": accent, "opacity": 0.1, "borderRadius": 8},
				purpose=ElementPurpose.EMPHASIS,
			),
			# Badge for key points
			DecorativeElement(
				type=ElementType.SHAPE,
				position=(20, 100),
				size=(40, 40),
				style={"shape": "circle", "fill": primary, "border": "2px solid white"},
				purpose=ElementPurpose.EMPHASIS,
			),
		]

		return EnhancementStrategy(
			id=generate_strategy_id(self.name),
			name="Add Emphasis Elements",
			description="Improve hierarchy with visual emphasis elements",
			priority=Priority.MEDIUM,
			impact=EMPHASIS_IMPACT,
			changes=StrategyChanges(decorative_elements=elements),
		)


def document_type(analysis: DocumentAnalysis) -> str:
	if analysis.engagement.score > 80:
		return "education"
	if analysis.layout.score > 80:
		return "business"
	if len(analysis.colors.palette) > 4:
		return "creative"
	return "general"


def decorative_impact(analysis: DocumentAnalysis) -> int:
	if analysis.engagement.visual_appeal < 40:
		return 70
	if analysis.engagement.visual_appeal < 60:
		return 50
	return 30


def corner_decorations(style: Style) -> list[DecorativeElement]:
	corners = [(0, 0), (100, 0), (0, 100), (100, 100)]
	return [
		DecorativeElement(
			type=ElementType.PATTERN,
			position=corner,
			size=(80, 80),
			style={
				"pattern": "dots" if style == Style.PLAYFUL else "lines",
				"opacity": 0.15,
				"rotation": index * 90,
			},
			purpose=ElementPurpose.DECORATION,
		)
		for index, corner in enumerate(corners)
	]


def section_dividers(style: Style) -> list[DecorativeElement]:
	divider_style = DIVIDER_STYLES.get(style, DEFAULT_DIVIDER)
	return [
		DecorativeElement(
			type=ElementType.DIVIDER,
			position=(10, 30 + i * 100),
			size=(80, 2),
			style=dict(divider_style),
			purpose=ElementPurpose.SEPARATION,
		)
		for i in range(3)
	]


def icon_elements(icon_set: list[str], style: Style) -> list[DecorativeElement]:
	color = "#f59e0b" if style == Style.PLAYFUL else "#6b7280"
	return [
		DecorativeElement(
			type=ElementType.ICON,
			position=(20 + index * 30, 20),
			size=(24, 24),
			style={"icon": icon, "color": color, "opacity": 0.8},
			purpose=ElementPurpose.DECORATION,
		)
		for index, icon in enumerate(icon_set[:ICON_COUNT])
	]


def background_shapes(style: Style) -> list[DecorativeElement]:
	shape_types = ["circle", "star"] if style == Style.PLAYFUL else ["hexagon", "square"]
	shapes = []
	for i in range(BACKGROUND_SHAPE_COUNT):
		# Spread shapes across the page on a fixed stride
		shapes.append(DecorativeElement(
			type=ElementType.SHAPE,
			position=(10 + i * 18, (15 + i * 37) % 90),
			size=(40 + (i * 15) % 60, 40 + (i * 25) % 60),
			style={
				"shape": shape_types[i % len(shape_types)],
				"fill": "#e5e7eb",
				"opacity": 0.3,
				"rotation": (i * 72) % 360,
			},
			purpose=ElementPurpose.BACKGROUND,
		))
	return shapes
