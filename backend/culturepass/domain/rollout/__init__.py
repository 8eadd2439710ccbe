"""Rollout domain exports."""

from .service import PHASE_PERCENTAGES, RolloutConfig, RolloutService, hash_to_percent, resolve_config

__all__ = [
	"RolloutService",
	"RolloutConfig",
	"PHASE_PERCENTAGES",
	"hash_to_percent",
	"resolve_config",
]
