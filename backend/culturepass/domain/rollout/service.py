"""Deterministic percentage rollout of named features.

A user lands in a stable bucket in [0, 100) per feature, so raising the phase
percentage only ever adds users.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable

from culturepass.obs import metrics as obs_metrics

logger = logging.getLogger(__name__)

PHASE_PERCENTAGES: Dict[str, int] = {
	"internal": 10,
	"pilot": 25,
	"half": 50,
	"full": 100,
}
DEFAULT_PHASE = "internal"


@dataclass(slots=True, frozen=True)
class RolloutConfig:
	phase: str
	percentage: int


def hash_to_percent(value: str) -> int:
	"""Polynomial rolling hash (x31) over UTF-16 code units, unsigned 32-bit, mod 100."""

	acc = 0
	encoded = value.encode("utf-16-le")
	for i in range(0, len(encoded), 2):
		unit = encoded[i] | (encoded[i + 1] << 8)
		acc = (acc * 31 + unit) & 0xFFFFFFFF
	return acc % 100


def resolve_config(phase: str | None) -> RolloutConfig:
	name = (phase or DEFAULT_PHASE).strip().lower()
	if name not in PHASE_PERCENTAGES:
		logger.warning("rollout.unknown_phase phase=%s fallback=%s", phase, DEFAULT_PHASE)
		name = DEFAULT_PHASE
	return RolloutConfig(phase=name, percentage=PHASE_PERCENTAGES[name])


class RolloutService:
	def __init__(self, phase: str | None = None, features: Iterable[str] = ()) -> None:
		self.config = resolve_config(phase)
		self.features = tuple(features)

	def is_enabled(self, feature_key: str, user_id: str = "guest") -> bool:
		if self.config.percentage >= 100:
			enabled = True
		else:
			enabled = hash_to_percent(f"{feature_key}:{user_id}") < self.config.percentage
		obs_metrics.inc_rollout_evaluation(feature_key, enabled)
		return enabled

	def flags_for(self, user_id: str = "guest") -> Dict[str, bool]:
		return {feature: self.is_enabled(feature, user_id) for feature in self.features}
