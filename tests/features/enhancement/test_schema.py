# (c) Copyright Datacraft, 2026
"""Tests for enhancement schemas and strategy serialization."""
import json

import pytest
from pydantic import ValidationError

from docenhance.core.features.enhancement.enhancers import ColorEnhancer, LayoutEnhancer
from docenhance.core.features.enhancement.generator import StrategyGenerator
from docenhance.core.features.enhancement.schema import (
	EnhancementPreferences,
	EnhancementStrategyInfo,
	StrategyListResponse,
)
from docenhance.core.types import ColorScheme, Style


class TestEnhancementPreferences:
	"""Tests for EnhancementPreferences."""

	def test_defaults(self):
		preferences = EnhancementPreferences()

		assert preferences.style is None
		assert preferences.color_scheme is None
		assert preferences.preserve_content is False
		assert preferences.auto_approve is False

	def test_camel_case_input(self):
		preferences = EnhancementPreferences.model_validate({
			"style": "playful",
			"colorScheme": "vibrant",
			"preserveContent": True,
			"autoApprove": True,
		})

		assert preferences.style == Style.PLAYFUL
		assert preferences.color_scheme == ColorScheme.VIBRANT
		assert preferences.preserve_content is True
		assert preferences.auto_approve is True

	def test_snake_case_input(self):
		preferences = EnhancementPreferences(color_scheme="muted", preserve_content=True)

		assert preferences.color_scheme == ColorScheme.MUTED
		assert preferences.preserve_content is True

	def test_unknown_style(self):
		with pytest.raises(ValidationError):
			EnhancementPreferences(style="baroque")

	def test_serializes_by_alias(self):
		data = EnhancementPreferences(style=Style.MINIMAL).model_dump(by_alias=True, mode="json")

		assert data == {
			"style": "minimal",
			"colorScheme": None,
			"preserveContent": False,
			"autoApprove": False,
		}

	def test_frozen(self):
		preferences = EnhancementPreferences()

		with pytest.raises(ValidationError):
			preferences.auto_approve = True


class TestStrategySerialization:
	"""Tests for strategy dictionaries and response models."""

	def test_color_strategy_dict(self, settings, make_analysis):
		analysis = make_analysis(color_score=60, palette=("#ff0000",))
		strategy, = ColorEnhancer(settings).analyze(analysis)

		data = strategy.to_dict()

		assert data["id"] == strategy.id
		assert data["priority"] == "high"
		assert data["impact"] == 60
		assert list(data["changes"]) == ["colors"]
		assert data["changes"]["colors"]["replacements"] == [["#ff0000", "#ff0000"]]
		assert set(data["changes"]["colors"]["palette"]) == {"primary", "secondary", "accent", "background", "text"}

	def test_layout_strategy_dict(self, make_analysis):
		strategy, = LayoutEnhancer().analyze(make_analysis(layout_score=60))

		layout = strategy.to_dict()["changes"]["layout"]

		assert layout["alignment"] == "left"
		assert layout["hierarchy"]["emphasis"][0] == ["title", 5]
		assert layout["grid"] == {"columns": 16, "rows": 6, "gutters": 24, "margins": 80}

	def test_strategy_dict_is_json(self, settings, poor_analysis):
		strategies = StrategyGenerator(settings=settings).generate_strategies(poor_analysis)

		payload = json.loads(json.dumps([s.to_dict() for s in strategies]))

		assert [item["name"] for item in payload] == [s.name for s in strategies]

	def test_strategy_info(self, make_analysis):
		strategy, = LayoutEnhancer().analyze(make_analysis(layout_issues=("Poor alignment",)))

		info = EnhancementStrategyInfo.from_strategy(strategy)

		assert info.id == strategy.id
		assert info.impact == 70
		assert info.changes["layout"]["alignment"] == strategy.changes.layout.alignment.value

	def test_strategy_list_response(self, settings, poor_analysis):
		strategies = StrategyGenerator(settings=settings).generate_strategies(poor_analysis)

		response = StrategyListResponse.from_strategies(strategies)

		assert response.total == len(strategies)
		assert [item.id for item in response.items] == [s.id for s in strategies]
		assert response.model_dump(mode="json")["items"][0]["priority"] in {"low", "medium", "high"}

	def test_impact_out_of_range(self):
		with pytest.raises(ValidationError):
			EnhancementStrategyInfo(
				id="x-1",
				name="x",
				description="x",
				priority="high",
				impact=120,
				changes={},
			)
