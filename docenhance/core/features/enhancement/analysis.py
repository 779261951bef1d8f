# (c) Copyright Datacraft, 2026
"""
Document analysis records.

A read-only snapshot of per-dimension quality scores and detected
issues. Produced by the analysis service; never mutated here.
"""
from dataclasses import dataclass
from typing import Any, Mapping

from .exceptions import AnalysisError


@dataclass(frozen=True)
class ColorAnalysis:
	score: float
	issues: tuple[str, ...] = ()
	palette: tuple[str, ...] = ()  # Ordered hex colors, dominant first


@dataclass(frozen=True)
class TypographyAnalysis:
	score: float
	issues: tuple[str, ...] = ()
	fonts: tuple[str, ...] = ()


@dataclass(frozen=True)
class LayoutAnalysis:
	score: float
	issues: tuple[str, ...] = ()


@dataclass(frozen=True)
class EngagementAnalysis:
	score: float
	readability: float = 100.0
	visual_appeal: float = 100.0
	issues: tuple[str, ...] = ()


@dataclass(frozen=True)
class DocumentAnalysis:
	"""Quality assessment of a visual document (scores are 0-100)."""
	colors: ColorAnalysis
	typography: TypographyAnalysis
	layout: LayoutAnalysis
	engagement: EngagementAnalysis
	overall_score: float

	@classmethod
	def from_dict(cls, data: Mapping[str, Any]) -> "DocumentAnalysis":
		"""
		Build an analysis from its serialized form.

		Accepts the camelCase record produced by the analysis service
		(``overallScore``, ``visualAppeal``) as well as snake_case keys.

		Raises:
			AnalysisError: if a dimension or a score is missing
		"""
		colors = _section(data, "colors")
		typography = _section(data, "typography")
		layout = _section(data, "layout")
		engagement = _section(data, "engagement")

		return cls(
			colors=ColorAnalysis(
				score=_number(colors, "colors.score", "score"),
				issues=tuple(colors.get("issues") or ()),
				palette=tuple(colors.get("palette") or ()),
			),
			typography=TypographyAnalysis(
				score=_number(typography, "typography.score", "score"),
				issues=tuple(typography.get("issues") or ()),
				fonts=tuple(typography.get("fonts") or ()),
			),
			layout=LayoutAnalysis(
				score=_number(layout, "layout.score", "score"),
				issues=tuple(layout.get("issues") or ()),
			),
			engagement=EngagementAnalysis(
				score=_number(engagement, "engagement.score", "score"),
				readability=_number(engagement, "engagement.readability", "readability", default=100.0),
				visual_appeal=_number(
					engagement, "engagement.visualAppeal", "visualAppeal", "visual_appeal", default=100.0
				),
				issues=tuple(engagement.get("issues") or ()),
			),
			overall_score=_number(data, "overallScore", "overallScore", "overall_score"),
		)

	@property
	def all_issues(self) -> tuple[str, ...]:
		return self.colors.issues + self.typography.issues + self.layout.issues + self.engagement.issues


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
	section = data.get(name)
	if not isinstance(section, Mapping):
		raise AnalysisError(name)
	return section


def _number(
	section: Mapping[str, Any],
	path: str,
	*keys: str,
	default: float | None = None,
) -> float:
	"""Read the first present key as a float."""
	for key in keys:
		if section.get(key) is not None:
			return float(section[key])
	if default is None:
		raise AnalysisError(path)
	return default
