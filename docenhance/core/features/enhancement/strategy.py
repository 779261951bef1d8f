# (c) Copyright Datacraft, 2026
"""
Enhancement strategy types.

A strategy is a scored, named recommendation whose ``changes`` carry one
payload per change domain (colors, typography, layout, background,
decorative elements). Payloads serialize to the camelCase shape consumed
by the rendering and reporting services.
"""
from dataclasses import dataclass, field, fields, replace
from typing import Any, Iterable

from docenhance.core.types import (
	Alignment,
	BackgroundType,
	ChangeDomain,
	ElementPurpose,
	ElementType,
	Priority,
)


# Colors

@dataclass(frozen=True)
class ColorPalette:
	primary: str
	secondary: list[str]
	accent: str
	background: str
	text: str

	def to_dict(self) -> dict[str, Any]:
		return {
			"primary": self.primary,
			"secondary": list(self.secondary),
			"accent": self.accent,
			"background": self.background,
			"text": self.text,
		}


@dataclass(frozen=True)
class ColorAdjustments:
	"""Multipliers, 1.0 = unchanged."""
	contrast: float = 1.0
	saturation: float = 1.0
	brightness: float = 1.0

	def to_dict(self) -> dict[str, Any]:
		return {
			"contrast": self.contrast,
			"saturation": self.saturation,
			"brightness": self.brightness,
		}


@dataclass(frozen=True)
class ColorChanges:
	palette: ColorPalette
	adjustments: ColorAdjustments
	replacements: list[tuple[str, str]] = field(default_factory=list)  # (old hex, new hex)

	def to_dict(self) -> dict[str, Any]:
		return {
			"palette": self.palette.to_dict(),
			"adjustments": self.adjustments.to_dict(),
			"replacements": [[old, new] for old, new in self.replacements],
		}


# Typography

@dataclass(frozen=True)
class FontSelection:
	heading: str
	body: str
	accent: str | None = None

	def to_dict(self) -> dict[str, Any]:
		data = {"heading": self.heading, "body": self.body}
		if self.accent is not None:
			data["accent"] = self.accent
		return data


@dataclass(frozen=True)
class TypeSizes:
	base: int
	scale: float
	headings: list[int]  # h1 first

	def to_dict(self) -> dict[str, Any]:
		return {"base": self.base, "scale": self.scale, "headings": list(self.headings)}


@dataclass(frozen=True)
class TypeImprovements:
	line_height: float
	letter_spacing: float
	paragraph_spacing: float

	def to_dict(self) -> dict[str, Any]:
		return {
			"lineHeight": self.line_height,
			"letterSpacing": self.letter_spacing,
			"paragraphSpacing": self.paragraph_spacing,
		}


@dataclass(frozen=True)
class TypographyChanges:
	fonts: FontSelection
	sizes: TypeSizes
	improvements: TypeImprovements

	def to_dict(self) -> dict[str, Any]:
		return {
			"fonts": self.fonts.to_dict(),
			"sizes": self.sizes.to_dict(),
			"improvements": self.improvements.to_dict(),
		}


# Layout

@dataclass(frozen=True)
class GridSpec:
	columns: int
	rows: int
	gutters: int
	margins: int

	def to_dict(self) -> dict[str, Any]:
		return {
			"columns": self.columns,
			"rows": self.rows,
			"gutters": self.gutters,
			"margins": self.margins,
		}


@dataclass(frozen=True)
class SpacingSpec:
	sections: int
	elements: int
	padding: int

	def to_dict(self) -> dict[str, Any]:
		return {"sections": self.sections, "elements": self.elements, "padding": self.padding}


@dataclass(frozen=True)
class HierarchySpec:
	levels: int
	emphasis: list[tuple[str, int]]  # (content role, emphasis level)

	def to_dict(self) -> dict[str, Any]:
		return {
			"levels": self.levels,
			"emphasis": [[role, level] for role, level in self.emphasis],
		}


@dataclass(frozen=True)
class LayoutChanges:
	grid: GridSpec
	spacing: SpacingSpec
	alignment: Alignment
	hierarchy: HierarchySpec

	def to_dict(self) -> dict[str, Any]:
		return {
			"grid": self.grid.to_dict(),
			"spacing": self.spacing.to_dict(),
			"alignment": self.alignment.value,
			"hierarchy": self.hierarchy.to_dict(),
		}


# Background

@dataclass(frozen=True)
class BackgroundFill:
	colors: list[str] | None = None
	direction: str | None = None
	pattern: str | None = None
	image_url: str | None = None
	opacity: float | None = None

	def to_dict(self) -> dict[str, Any]:
		data = {
			"colors": list(self.colors) if self.colors is not None else None,
			"direction": self.direction,
			"pattern": self.pattern,
			"imageUrl": self.image_url,
			"opacity": self.opacity,
		}
		return {key: value for key, value in data.items() if value is not None}


@dataclass(frozen=True)
class BackgroundChanges:
	type: BackgroundType
	value: str | BackgroundFill  # Solid backgrounds carry a hex string

	def to_dict(self) -> dict[str, Any]:
		value = self.value if isinstance(self.value, str) else self.value.to_dict()
		return {"type": self.type.value, "value": value}


# Decorative elements

@dataclass(frozen=True)
class DecorativeElement:
	type: ElementType
	position: tuple[float, float]  # (x, y) in page layout units
	size: tuple[float, float]  # (width, height)
	style: dict[str, str | int | float | bool]
	purpose: ElementPurpose

	def to_dict(self) -> dict[str, Any]:
		return {
			"type": self.type.value,
			"position": {"x": self.position[0], "y": self.position[1]},
			"size": {"width": self.size[0], "height": self.size[1]},
			"style": dict(self.style),
			"purpose": self.purpose.value,
		}


_DOMAIN_FIELDS: dict[ChangeDomain, str] = {
	ChangeDomain.COLORS: "colors",
	ChangeDomain.TYPOGRAPHY: "typography",
	ChangeDomain.LAYOUT: "layout",
	ChangeDomain.BACKGROUND: "background",
	ChangeDomain.DECORATIVE_ELEMENTS: "decorative_elements",
}


@dataclass(frozen=True)
class StrategyChanges:
	"""
	Payloads keyed by change domain.

	Each field is one domain; ``None`` means the domain is untouched.
	"""
	colors: ColorChanges | None = None
	typography: TypographyChanges | None = None
	layout: LayoutChanges | None = None
	background: BackgroundChanges | None = None
	decorative_elements: list[DecorativeElement] | None = None

	def domains(self) -> list[ChangeDomain]:
		"""Domains present, in canonical order."""
		return [domain for domain, name in _DOMAIN_FIELDS.items() if getattr(self, name) is not None]

	def get(self, domain: ChangeDomain) -> Any:
		return getattr(self, _DOMAIN_FIELDS[ChangeDomain(domain)])

	def __contains__(self, domain: object) -> bool:
		try:
			return self.get(ChangeDomain(domain)) is not None
		except ValueError:
			return False

	def __len__(self) -> int:
		return len(self.domains())

	def is_empty(self) -> bool:
		return not self.domains()

	def restricted_to(self, domains: Iterable[ChangeDomain]) -> "StrategyChanges":
		"""Copy keeping only the given domains."""
		keep = {_DOMAIN_FIELDS[ChangeDomain(d)] for d in domains}
		return replace(self, **{f.name: None for f in fields(self) if f.name not in keep})

	def with_domain(self, domain: ChangeDomain, payload: Any) -> "StrategyChanges":
		return replace(self, **{_DOMAIN_FIELDS[ChangeDomain(domain)]: payload})

	def to_dict(self) -> dict[str, Any]:
		data: dict[str, Any] = {}
		for domain in self.domains():
			payload = self.get(domain)
			if domain == ChangeDomain.DECORATIVE_ELEMENTS:
				data[domain.value] = [element.to_dict() for element in payload]
			else:
				data[domain.value] = payload.to_dict()
		return data


@dataclass(frozen=True)
class EnhancementStrategy:
	"""A candidate enhancement proposed by one enhancer."""
	id: str
	name: str
	description: str
	priority: Priority
	impact: float  # 0-100 estimated benefit
	changes: StrategyChanges = field(default_factory=StrategyChanges)

	@property
	def domains(self) -> list[ChangeDomain]:
		return self.changes.domains()

	def to_dict(self) -> dict[str, Any]:
		return {
			"id": self.id,
			"name": self.name,
			"description": self.description,
			"priority": self.priority.value,
			"impact": self.impact,
			"changes": self.changes.to_dict(),
		}
