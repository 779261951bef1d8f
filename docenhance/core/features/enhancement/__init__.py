# (c) Copyright Datacraft, 2026
"""
Document enhancement strategy selection.

Turns a document quality analysis into a ranked, conflict-free set of
enhancement strategies covering colors, typography, layout, background
and decorative elements, and can merge them into one optimal strategy.
"""
from .analysis import (
	ColorAnalysis,
	DocumentAnalysis,
	EngagementAnalysis,
	LayoutAnalysis,
	TypographyAnalysis,
)
from .exceptions import AnalysisError, EnhancementError, InvalidColorError
from .generator import (
	StrategyGenerator,
	generate_optimal_strategy,
	generate_strategies,
)
from .schema import EnhancementPreferences, EnhancementStrategyInfo, StrategyListResponse
from .strategy import EnhancementStrategy, StrategyChanges

__all__ = [
	'ColorAnalysis',
	'DocumentAnalysis',
	'EngagementAnalysis',
	'LayoutAnalysis',
	'TypographyAnalysis',
	'AnalysisError',
	'EnhancementError',
	'InvalidColorError',
	'StrategyGenerator',
	'generate_optimal_strategy',
	'generate_strategies',
	'EnhancementPreferences',
	'EnhancementStrategyInfo',
	'StrategyListResponse',
	'EnhancementStrategy',
	'StrategyChanges',
]
