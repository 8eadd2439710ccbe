"""Weighted text relevance scoring shared by search and suggest."""

from __future__ import annotations

import math
from typing import Iterable, List, Optional, Sequence, Set

from culturepass.domain.search.models import SearchableItem, SearchPage, SearchQuery

TITLE_EXACT = 200
TITLE_PREFIX = 120
TITLE_CONTAINS = 90
TOKEN_IN_TITLE = 35
TOKEN_IN_SUBTITLE = 15
TOKEN_IN_DESCRIPTION = 8
TOKEN_IN_TAG = 20
FUZZY_TITLE = 80
CITY_BOOST = 30
COUNTRY_BOOST = 20

SUGGEST_PREFIX = 100
SUGGEST_FUZZY = 60
DEFAULT_SUGGEST_LIMIT = 8


def round_half_up(value: float) -> int:
	return int(math.floor(value + 0.5))


def tokenize(text: str) -> List[str]:
	return text.lower().split()


def trigram_set(text: str) -> Set[str]:
	"""3-grams of the lower-cased text padded with two spaces on each side."""

	padded = f"  {text.lower()}  "
	return {padded[i : i + 3] for i in range(len(padded) - 2)}


def trigram_similarity(a: str, b: str) -> float:
	set_a = trigram_set(a)
	set_b = trigram_set(b)
	union = set_a | set_b
	if not union:
		return 0.0
	return len(set_a & set_b) / len(union)


def _same(a: Optional[str], b: Optional[str]) -> bool:
	return a is not None and b is not None and a.lower() == b.lower()


def _date_in_range(value: Optional[str], start: Optional[str], end: Optional[str]) -> bool:
	# ISO dates compare correctly as strings
	if not value:
		return True
	if start and value < start:
		return False
	if end and value > end:
		return False
	return True


def matches_filters(item: SearchableItem, query: SearchQuery) -> bool:
	if query.type != "all" and item.type != query.type:
		return False
	if query.city and not _same(item.city, query.city):
		return False
	if query.country and not _same(item.country, query.country):
		return False
	if query.tags:
		item_tags = {tag.lower() for tag in item.tags}
		if not any(tag.lower() in item_tags for tag in query.tags):
			return False
	return _date_in_range(item.date, query.start_date, query.end_date)


def weighted_score(item: SearchableItem, query: SearchQuery) -> int:
	q = query.q.lower()
	title = item.title.lower()
	item_tags = [tag.lower() for tag in item.tags]

	score = 0
	if title == q:
		score += TITLE_EXACT
	if title.startswith(q):
		score += TITLE_PREFIX
	if q in title:
		score += TITLE_CONTAINS

	title_tokens = tokenize(title)
	subtitle_tokens = tokenize(item.subtitle)
	description_tokens = tokenize(item.description or "")
	for token in tokenize(q):
		if token in title_tokens:
			score += TOKEN_IN_TITLE
		if token in subtitle_tokens:
			score += TOKEN_IN_SUBTITLE
		if token in description_tokens:
			score += TOKEN_IN_DESCRIPTION
		score += TOKEN_IN_TAG * sum(1 for tag in item_tags if token in tag)

	score += round_half_up(trigram_similarity(title, q) * FUZZY_TITLE)

	if query.city and _same(item.city, query.city):
		score += CITY_BOOST
	if query.country and _same(item.country, query.country):
		score += COUNTRY_BOOST
	return score


def run_search(items: Sequence[SearchableItem], query: SearchQuery) -> SearchPage:
	"""Filter, score and paginate; zero-scoring items are dropped, ties keep input order."""

	scored = [(weighted_score(item, query), item) for item in items if matches_filters(item, query)]
	ranked = [row for row in scored if row[0] > 0]
	ranked.sort(key=lambda row: row[0], reverse=True)
	start = (query.page - 1) * query.page_size
	page = ranked[start : start + query.page_size]
	return SearchPage(
		total=len(ranked),
		page=query.page,
		page_size=query.page_size,
		results=[item for _, item in page],
	)


def run_suggest(items: Iterable[SearchableItem], prefix: str, limit: int = DEFAULT_SUGGEST_LIMIT) -> List[str]:
	normalized = prefix.strip().lower()
	if not normalized:
		return []
	titles = list(dict.fromkeys(item.title for item in items))
	scored = []
	for title in titles:
		if title.lower().startswith(normalized):
			score = SUGGEST_PREFIX
		else:
			score = round_half_up(trigram_similarity(title, normalized) * SUGGEST_FUZZY)
		if score > 0:
			scored.append((score, title))
	scored.sort(key=lambda row: row[0], reverse=True)
	return [title for _, title in scored[:limit]]
