# (c) Copyright Datacraft, 2026
"""Enhancer contract."""
from typing import Protocol, runtime_checkable

from docenhance.core.types import Style

from ..analysis import DocumentAnalysis
from ..schema import EnhancementPreferences
from ..strategy import EnhancementStrategy

DEFAULT_STYLE = Style.MODERN


@runtime_checkable
class Enhancer(Protocol):
	"""
	Proposes candidate strategies for one concern.

	Implementations are stateless: ``analyze`` depends only on its
	arguments and fixed lookup tables, so instances may be shared
	across threads.
	"""
	name: str

	def analyze(
		self,
		analysis: DocumentAnalysis,
		preferences: EnhancementPreferences | None = None,
	) -> list[EnhancementStrategy]:
		...


def preferred_style(preferences: EnhancementPreferences | None) -> Style:
	if preferences is not None and preferences.style is not None:
		return preferences.style
	return DEFAULT_STYLE


def pick(options: list, key: float):
	"""Deterministically pick an option from a numeric analysis signal."""
	return options[int(key) % len(options)]
