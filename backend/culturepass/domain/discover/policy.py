"""Errors and rate limits for the Discover API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from culturepass.infra.rate_limit import RateLimiter
from culturepass.obs import metrics as obs_metrics


@dataclass(slots=True)
class DiscoverPolicyError(Exception):
	detail: str
	status_code: int = 400

	def __str__(self) -> str:  # pragma: no cover - debugging aid
		return self.detail


class UnknownSectionError(DiscoverPolicyError):
	def __init__(self, valid_keys: Iterable[str]) -> None:
		super().__init__(
			detail=f"Invalid section type. Must be one of: {', '.join(valid_keys)}",
			status_code=400,
		)


class DiscoverRateLimitError(DiscoverPolicyError):
	def __init__(self) -> None:
		super().__init__(detail="rate_limit", status_code=429)


async def enforce_rate_limit(limiter: RateLimiter, actor_id: str, *, limit: int) -> None:
	"""Ensure the caller remains within the configured budget."""

	if not await limiter.allow("discover", actor_id, limit=limit):
		obs_metrics.inc_rate_limited("discover")
		raise DiscoverRateLimitError()
