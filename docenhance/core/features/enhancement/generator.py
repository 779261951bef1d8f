# (c) Copyright Datacraft, 2026
"""
Strategy generation.

Fans out to every enhancer, then runs the candidates through a
sequential pipeline:
- Preference filtering (skipped on auto-approve)
- Impact boost for low-scoring documents
- Conflict resolution, one strategy per change domain
- Ranking by impact weighted by priority
and can merge the top of the ranking into one optimal strategy.
"""
import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import replace
from typing import Any, Iterable, Mapping, Sequence

from docenhance.core.config import Settings, get_settings
from docenhance.core.types import ChangeDomain, Priority

from .analysis import DocumentAnalysis
from .enhancers import Enhancer, default_enhancers
from .schema import EnhancementPreferences
from .scoring import boost_impact, combine_impacts, generate_strategy_id, ranking_score
from .strategy import EnhancementStrategy, StrategyChanges

logger = logging.getLogger(__name__)

# Domains that restructure existing content
CONTENT_DOMAINS = (ChangeDomain.LAYOUT, ChangeDomain.TYPOGRAPHY)


class StrategyGenerator:
	"""
	Produces a ranked, conflict-free list of enhancement strategies.

	Holds no per-call state; one instance can serve concurrent calls
	for different documents.
	"""

	def __init__(
		self,
		enhancers: Sequence[Enhancer] | None = None,
		settings: Settings | None = None,
	):
		self.settings = settings or get_settings()
		if enhancers is None:
			enhancers = default_enhancers(self.settings)
		self.enhancers = list(enhancers)

	def generate_strategies(
		self,
		analysis: DocumentAnalysis | Mapping[str, Any],
		preferences: EnhancementPreferences | Mapping[str, Any] | None = None,
	) -> list[EnhancementStrategy]:
		"""
		Generate ranked strategies for a document.

		Args:
			analysis: Document analysis, or its serialized form
			preferences: Optional caller preferences

		Returns:
			Strategies sorted by ranking score, at most one per change domain

		Raises:
			Exception: whatever an enhancer raised; no partial result is returned
		"""
		analysis = _as_analysis(analysis)
		preferences = _as_preferences(preferences)

		candidates = self._collect_candidates(analysis, preferences)
		filtered = self._filter_strategies(candidates, preferences)
		boosted = self._apply_low_score_boost(filtered, analysis)
		resolved = resolve_conflicts(boosted)
		ranked = rank_strategies(resolved)

		logger.info(
			f"Generated {len(ranked)} strategies from {len(candidates)} candidates "
			f"(overall score {analysis.overall_score:.0f})"
		)
		return ranked

	def generate_optimal_strategy(
		self,
		analysis: DocumentAnalysis | Mapping[str, Any],
		preferences: EnhancementPreferences | Mapping[str, Any] | None = None,
	) -> EnhancementStrategy:
		"""
		Merge the top-ranked strategies into one comprehensive strategy.

		The combined impact uses diminishing returns rather than a sum.
		With no strategies the result has impact 0 and no changes.
		"""
		strategies = self.generate_strategies(analysis, preferences)
		top = strategies[:self.settings.optimal_top_n]

		if top:
			names = ", ".join(s.name for s in top)
			description = f"Combined optimal enhancements for maximum improvement: {names}"
		else:
			description = "No enhancements needed"

		return EnhancementStrategy(
			id=generate_strategy_id("optimal"),
			name="Comprehensive Enhancement",
			description=description,
			priority=Priority.HIGH,
			impact=combine_impacts(s.impact for s in top),
			changes=merge_changes(top),
		)

	async def generate_strategies_async(
		self,
		analysis: DocumentAnalysis | Mapping[str, Any],
		preferences: EnhancementPreferences | Mapping[str, Any] | None = None,
	) -> list[EnhancementStrategy]:
		return await asyncio.to_thread(self.generate_strategies, analysis, preferences)

	async def generate_optimal_strategy_async(
		self,
		analysis: DocumentAnalysis | Mapping[str, Any],
		preferences: EnhancementPreferences | Mapping[str, Any] | None = None,
	) -> EnhancementStrategy:
		return await asyncio.to_thread(self.generate_optimal_strategy, analysis, preferences)

	def _collect_candidates(
		self,
		analysis: DocumentAnalysis,
		preferences: EnhancementPreferences | None,
	) -> list[EnhancementStrategy]:
		"""Run every enhancer; results keep enhancer order regardless of completion order."""
		if not self.settings.parallel_enhancers or len(self.enhancers) < 2:
			results = [self._run_enhancer(e, analysis, preferences) for e in self.enhancers]
		else:
			workers = min(self.settings.max_workers, len(self.enhancers))
			pool = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="enhancer")
			try:
				futures = [
					pool.submit(self._run_enhancer, e, analysis, preferences)
					for e in self.enhancers
				]
				for future in as_completed(futures):
					# Surface the first failure without waiting for the rest
					future.result()
				results = [future.result() for future in futures]
			except Exception:
				pool.shutdown(wait=False, cancel_futures=True)
				raise
			else:
				pool.shutdown()

		return [strategy for strategies in results for strategy in strategies]

	def _run_enhancer(
		self,
		enhancer: Enhancer,
		analysis: DocumentAnalysis,
		preferences: EnhancementPreferences | None,
	) -> list[EnhancementStrategy]:
		name = getattr(enhancer, "name", type(enhancer).__name__)
		try:
			strategies = list(enhancer.analyze(analysis, preferences))
		except Exception as e:
			logger.error(f"Enhancer '{name}' failed: {e}")
			raise

		logger.debug(f"Enhancer '{name}': {len(strategies)} candidates")
		return strategies

	def _filter_strategies(
		self,
		strategies: list[EnhancementStrategy],
		preferences: EnhancementPreferences | None,
	) -> list[EnhancementStrategy]:
		if preferences is not None and preferences.auto_approve:
			return list(strategies)

		preserve_content = preferences is not None and preferences.preserve_content
		kept = []
		for strategy in strategies:
			if preserve_content and modifies_content(strategy):
				logger.debug(f"Dropping '{strategy.name}': content must be preserved")
				continue
			if strategy.impact < self.settings.min_impact:
				logger.debug(f"Dropping '{strategy.name}': impact {strategy.impact} below minimum")
				continue
			kept.append(strategy)
		return kept

	def _apply_low_score_boost(
		self,
		strategies: list[EnhancementStrategy],
		analysis: DocumentAnalysis,
	) -> list[EnhancementStrategy]:
		"""Raise every impact by the configured factor for low-scoring documents."""
		if analysis.overall_score >= self.settings.low_score_threshold:
			return strategies

		boost = self.settings.low_score_boost
		logger.debug(f"Overall score {analysis.overall_score:.0f} is low, boosting impacts by {boost}")
		return [replace(s, impact=boost_impact(s.impact, boost)) for s in strategies]


def modifies_content(strategy: EnhancementStrategy) -> bool:
	return any(domain in strategy.changes for domain in CONTENT_DOMAINS)


def resolve_conflicts(strategies: Iterable[EnhancementStrategy]) -> list[EnhancementStrategy]:
	"""
	Keep the highest-impact strategy per change domain.

	Ties go to the earlier strategy. A strategy spanning several domains
	survives with only the domains it wins; one that wins none is dropped.
	Strategies without changes conflict with nothing and are kept.
	"""
	strategies = list(strategies)
	# Winner per domain, by position so repeated instances stay distinct
	winners: dict[ChangeDomain, int] = {}

	for index, strategy in enumerate(strategies):
		for domain in strategy.domains:
			current = winners.get(domain)
			if current is None or strategy.impact > strategies[current].impact:
				winners[domain] = index

	resolved = []
	for index, strategy in enumerate(strategies):
		domains = strategy.domains
		won = [d for d in domains if winners[d] == index]

		if len(won) == len(domains):
			resolved.append(strategy)
		elif won:
			resolved.append(replace(strategy, changes=strategy.changes.restricted_to(won)))
		else:
			logger.debug(f"Dropping '{strategy.name}': superseded on {', '.join(d.value for d in domains)}")

	return resolved


def rank_strategies(strategies: Iterable[EnhancementStrategy]) -> list[EnhancementStrategy]:
	"""Sort by impact x priority weight, highest first; stable for ties."""
	return sorted(
		strategies,
		key=lambda s: ranking_score(s.impact, s.priority),
		reverse=True,
	)


def merge_changes(strategies: Iterable[EnhancementStrategy]) -> StrategyChanges:
	"""Union of changes; on a shared domain the higher-impact payload wins."""
	merged = StrategyChanges()
	owners: dict[ChangeDomain, float] = {}

	for strategy in strategies:
		for domain in strategy.domains:
			if domain not in owners or strategy.impact > owners[domain]:
				merged = merged.with_domain(domain, strategy.changes.get(domain))
				owners[domain] = strategy.impact

	return merged


def _as_analysis(analysis: DocumentAnalysis | Mapping[str, Any]) -> DocumentAnalysis:
	if isinstance(analysis, DocumentAnalysis):
		return analysis
	return DocumentAnalysis.from_dict(analysis)


def _as_preferences(
	preferences: EnhancementPreferences | Mapping[str, Any] | None,
) -> EnhancementPreferences | None:
	if preferences is None or isinstance(preferences, EnhancementPreferences):
		return preferences
	return EnhancementPreferences.model_validate(preferences)


# Convenience functions
def generate_strategies(
	analysis: DocumentAnalysis | Mapping[str, Any],
	preferences: EnhancementPreferences | Mapping[str, Any] | None = None,
	settings: Settings | None = None,
) -> list[EnhancementStrategy]:
	"""Generate ranked strategies with the default enhancers."""
	return StrategyGenerator(settings=settings).generate_strategies(analysis, preferences)


def generate_optimal_strategy(
	analysis: DocumentAnalysis | Mapping[str, Any],
	preferences: EnhancementPreferences | Mapping[str, Any] | None = None,
	settings: Settings | None = None,
) -> EnhancementStrategy:
	"""Generate the merged optimal strategy with the default enhancers."""
	return StrategyGenerator(settings=settings).generate_optimal_strategy(analysis, preferences)
