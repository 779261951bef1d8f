# (c) Copyright Datacraft, 2026
"""
Scoring helpers shared by every enhancer and the generator.
"""
import re
import threading
import time
from typing import Iterable

import numpy as np

from docenhance.core.types import Priority

PRIORITY_WEIGHTS: dict[Priority, float] = {
	Priority.HIGH: 1.5,
	Priority.MEDIUM: 1.0,
	Priority.LOW: 0.7,
}

_id_lock = threading.Lock()
_last_timestamp = 0


def score_to_impact(score: float) -> int:
	"""Map a dimension score (0-100) to the impact of fixing it; worse documents gain more."""
	if score < 50:
		return 80
	if score < 70:
		return 60
	if score < 85:
		return 40
	return 20


def calculate_impact(current: float, potential: float) -> float:
	"""Expected gain from ``current`` to ``potential``, clamped to 0-100."""
	return float(min(100.0, max(0.0, potential - current)))


def slugify(name: str) -> str:
	slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
	return slug or "strategy"


def _timestamp() -> int:
	# Strictly increasing within the process
	global _last_timestamp
	with _id_lock:
		now = time.time_ns()
		if now <= _last_timestamp:
			now = _last_timestamp + 1
		_last_timestamp = now
		return now


def generate_strategy_id(name: str) -> str:
	"""``<name-slug>-<timestamp>``; unique within a process, not globally."""
	return f"{slugify(name)}-{_timestamp()}"


def priority_weight(priority: Priority) -> float:
	return PRIORITY_WEIGHTS[Priority(priority)]


def ranking_score(impact: float, priority: Priority) -> float:
	return impact * priority_weight(priority)


def boost_impact(impact: float, boost: float) -> float:
	"""Scale an impact by ``boost``, capped at 100."""
	return round(min(100.0, max(0.0, impact * boost)), 2)


def combine_impacts(impacts: Iterable[float]) -> float:
	"""
	Combine impacts with diminishing returns.

	Treats each impact as an independent chance of improvement:
	100 * (1 - prod(1 - impact_i / 100)), clamped to 0-100.
	"""
	values = np.clip(np.array(list(impacts), dtype=float), 0.0, 100.0)
	if values.size == 0:
		return 0.0
	combined = 100.0 * (1.0 - float(np.prod(1.0 - values / 100.0)))
	return min(100.0, max(0.0, combined))
