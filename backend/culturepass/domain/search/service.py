"""Service layer for text search and typeahead suggestions."""

from __future__ import annotations

import logging
import time
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Tuple

from culturepass.domain.catalog.models import ContentCatalog
from culturepass.domain.catalog.repository import UserDirectory
from culturepass.domain.search import indexing, ranking
from culturepass.domain.search.cache import SearchCache, build_search_cache_key, build_suggest_cache_key
from culturepass.domain.search.models import SearchableItem, SearchQuery
from culturepass.obs import metrics as obs_metrics

logger = logging.getLogger(__name__)


def _page_payload(page) -> Dict[str, Any]:
	return {
		"total": page.total,
		"page": page.page,
		"page_size": page.page_size,
		"results": [asdict(item) for item in page.results],
	}


class SearchService:
	"""Runs ranked search and suggest over the catalog plus user profiles.

	Responses are memoised in two caches: one for full searches, one for suggest.
	Empty queries short-circuit without touching either cache.
	"""

	def __init__(
		self,
		catalog: ContentCatalog,
		directory: UserDirectory,
		*,
		search_cache: SearchCache,
		suggest_cache: SearchCache,
		suggest_limit: int = ranking.DEFAULT_SUGGEST_LIMIT,
	) -> None:
		self._catalog = catalog
		self._directory = directory
		self._search_cache = search_cache
		self._suggest_cache = suggest_cache
		self._suggest_limit = suggest_limit

	async def corpus(self) -> List[SearchableItem]:
		users = await self._directory.list_users()
		return indexing.build_corpus(self._catalog, users)

	async def search(self, query: SearchQuery) -> Tuple[Dict[str, Any], bool]:
		"""Return the page payload and whether it came from cache."""

		if not query.q:
			return (
				{"total": 0, "page": query.page, "page_size": query.page_size, "results": []},
				False,
			)
		key = build_search_cache_key(query)
		cached = self._search_cache.get(key)
		obs_metrics.mark_search_cache("search", cached is not None)
		if cached is not None:
			return cached, True

		started = time.perf_counter()
		page = ranking.run_search(await self.corpus(), query)
		payload = _page_payload(page)
		self._search_cache.set(key, payload)
		obs_metrics.inc_search_query("search")
		obs_metrics.observe_search_latency("search", time.perf_counter() - started)
		logger.info(
			"search.query type=%s page=%d total=%d",
			query.type,
			query.page,
			page.total,
		)
		return payload, False

	async def suggest(self, prefix: str, limit: Optional[int] = None) -> Tuple[List[str], bool]:
		normalized = (prefix or "").strip()
		if not normalized:
			return [], False
		limit = limit or self._suggest_limit
		key = build_suggest_cache_key(normalized, limit)
		cached = self._suggest_cache.get(key)
		obs_metrics.mark_search_cache("suggest", cached is not None)
		if cached is not None:
			return list(cached), True

		started = time.perf_counter()
		suggestions = ranking.run_suggest(await self.corpus(), normalized, limit)
		self._suggest_cache.set(key, suggestions)
		obs_metrics.inc_search_query("suggest")
		obs_metrics.observe_search_latency("suggest", time.perf_counter() - started)
		return suggestions, False
