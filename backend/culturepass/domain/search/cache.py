"""In-process TTL cache fronting search and suggest responses."""

from __future__ import annotations

import json
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

from culturepass.domain.search.models import SearchQuery

T = TypeVar("T")


def _now_ms() -> float:
	return time.time() * 1000


@dataclass(slots=True)
class CacheEntry(Generic[T]):
	value: T
	expires_at: float


class SearchCache:
	"""Key/value store whose entries expire lazily.

	Expiry is only checked on ``get``: an expired entry is deleted and reported as
	a miss. Reads and writes never await, so no locking is needed under asyncio.
	"""

	def __init__(self, default_ttl_ms: int = 60_000, *, clock: Optional[Callable[[], float]] = None) -> None:
		self._default_ttl_ms = default_ttl_ms
		self._clock = clock or _now_ms
		self._store: Dict[str, CacheEntry[Any]] = {}

	def __len__(self) -> int:
		return len(self._store)

	def get(self, key: str) -> Optional[Any]:
		entry = self._store.get(key)
		if entry is None:
			return None
		if self._clock() > entry.expires_at:
			del self._store[key]
			return None
		return entry.value

	def set(self, key: str, value: Any, ttl_ms: Optional[int] = None) -> None:
		ttl = self._default_ttl_ms if ttl_ms is None else ttl_ms
		self._store[key] = CacheEntry(value=value, expires_at=self._clock() + ttl)

	def delete(self, key: str) -> None:
		self._store.pop(key, None)

	def flush(self) -> None:
		self._store.clear()


def build_search_cache_key(query: SearchQuery) -> str:
	"""Canonical key; tag order is irrelevant."""

	payload = {
		"q": query.q,
		"type": query.type,
		"city": query.city,
		"country": query.country,
		"tags": sorted(query.tags),
		"startDate": query.start_date,
		"endDate": query.end_date,
		"page": query.page,
		"pageSize": query.page_size,
	}
	return json.dumps(payload, sort_keys=True, separators=(",", ":"))


def build_suggest_cache_key(prefix: str, limit: int) -> str:
	return json.dumps({"suggest": prefix.strip().lower(), "limit": limit}, sort_keys=True, separators=(",", ":"))
