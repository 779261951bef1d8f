# (c) Copyright Datacraft, 2026
"""Enhancement Pydantic schemas."""
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from docenhance.core.types import ColorScheme, Priority, Style

from .strategy import EnhancementStrategy


class EnhancementPreferences(BaseModel):
	"""Caller preferences; unset options fall back to enhancer defaults."""
	style: Style | None = None
	color_scheme: ColorScheme | None = None
	preserve_content: bool = False
	auto_approve: bool = False

	model_config = ConfigDict(
		alias_generator=to_camel,
		populate_by_name=True,
		frozen=True,
		extra='ignore',
	)


class EnhancementStrategyInfo(BaseModel):
	"""Serialized enhancement strategy."""
	id: str
	name: str
	description: str
	priority: Priority
	impact: float = Field(ge=0, le=100)
	changes: dict[str, Any]

	@classmethod
	def from_strategy(cls, strategy: EnhancementStrategy) -> "EnhancementStrategyInfo":
		return cls.model_validate(strategy.to_dict())


class StrategyListResponse(BaseModel):
	"""Ranked strategy list."""
	items: list[EnhancementStrategyInfo]
	total: int

	@classmethod
	def from_strategies(cls, strategies: Iterable[EnhancementStrategy]) -> "StrategyListResponse":
		items = [EnhancementStrategyInfo.from_strategy(s) for s in strategies]
		return cls(items=items, total=len(items))
