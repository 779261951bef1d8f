# (c) Copyright Datacraft, 2026
"""Specialized enhancers, one per visual concern."""
from docenhance.core.config import Settings

from .background import BackgroundEnhancer
from .base import Enhancer
from .color import ColorEnhancer
from .decorative import DecorativeEnhancer
from .layout import LayoutEnhancer
from .typography import TypographyEnhancer


def default_enhancers(settings: Settings | None = None) -> list[Enhancer]:
	"""Enhancers in canonical invocation order."""
	return [
		ColorEnhancer(settings),
		TypographyEnhancer(),
		LayoutEnhancer(),
		BackgroundEnhancer(settings),
		DecorativeEnhancer(),
	]


__all__ = [
	'Enhancer',
	'ColorEnhancer',
	'TypographyEnhancer',
	'LayoutEnhancer',
	'BackgroundEnhancer',
	'DecorativeEnhancer',
	'default_enhancers',
]
