"""Query coercion and rate limits for the Search API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from culturepass.domain.search.models import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, SEARCH_TYPES, SearchQuery
from culturepass.infra.rate_limit import RateLimiter
from culturepass.obs import metrics as obs_metrics


@dataclass(slots=True)
class SearchPolicyError(Exception):
	detail: str
	status_code: int = 400

	def __str__(self) -> str:  # pragma: no cover - debugging aid
		return self.detail


class SearchRateLimitError(SearchPolicyError):
	def __init__(self) -> None:
		super().__init__(detail="rate_limit", status_code=429)


async def enforce_rate_limit(limiter: RateLimiter, actor_id: str, *, kind: str = "search", limit: int) -> None:
	"""Ensure the caller remains within the configured budget."""

	if not await limiter.allow(kind, actor_id, limit=limit):
		obs_metrics.inc_rate_limited(kind)
		raise SearchRateLimitError()


def _coerce_int(raw: Optional[str], default: int) -> int:
	try:
		value = int(str(raw).strip())
	except (TypeError, ValueError):
		return default
	return value or default


def coerce_page(raw: Optional[str]) -> int:
	return max(1, _coerce_int(raw, 1))


def coerce_page_size(raw: Optional[str]) -> int:
	return max(1, min(MAX_PAGE_SIZE, _coerce_int(raw, DEFAULT_PAGE_SIZE)))


def coerce_type(raw: Optional[str]) -> str:
	value = (raw or "all").strip().lower()
	return value if value in SEARCH_TYPES else "all"


def split_tags(raw: Optional[str]) -> Tuple[str, ...]:
	if not raw:
		return ()
	return tuple(part.strip() for part in raw.split(",") if part.strip())


def _blank_to_none(value: Optional[str]) -> Optional[str]:
	if value is None:
		return None
	value = value.strip()
	return value or None


def build_query(
	q: Optional[str],
	*,
	type: Optional[str] = None,
	city: Optional[str] = None,
	country: Optional[str] = None,
	tags: Optional[str] = None,
	start_date: Optional[str] = None,
	end_date: Optional[str] = None,
	page: Optional[str] = None,
	page_size: Optional[str] = None,
) -> SearchQuery:
	"""Turn raw query-string values into a SearchQuery without ever failing."""

	return SearchQuery(
		q=(q or "").strip(),
		type=coerce_type(type),
		city=_blank_to_none(city),
		country=_blank_to_none(country),
		tags=split_tags(tags),
		start_date=_blank_to_none(start_date),
		end_date=_blank_to_none(end_date),
		page=coerce_page(page),
		page_size=coerce_page_size(page_size),
	)
