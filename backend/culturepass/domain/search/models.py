"""Domain models backing text search and typeahead suggestions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

SEARCH_TYPES = ("all", "event", "community", "business", "profile")
MAX_PAGE_SIZE = 50
DEFAULT_PAGE_SIZE = 20


@dataclass(slots=True)
class SearchQuery:
	"""Normalised search request; ``tags`` order does not matter for caching."""

	q: str
	type: str = "all"
	city: Optional[str] = None
	country: Optional[str] = None
	tags: Tuple[str, ...] = ()
	start_date: Optional[str] = None
	end_date: Optional[str] = None
	page: int = 1
	page_size: int = DEFAULT_PAGE_SIZE


@dataclass(slots=True)
class SearchableItem:
	"""Uniform projection of any searchable entity."""

	id: str
	type: str
	title: str
	subtitle: str
	description: Optional[str] = None
	city: Optional[str] = None
	country: Optional[str] = None
	tags: Tuple[str, ...] = ()
	date: Optional[str] = None


@dataclass(slots=True)
class SearchPage:
	total: int
	page: int
	page_size: int
	results: List[SearchableItem] = field(default_factory=list)
