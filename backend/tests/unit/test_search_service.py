import pytest

from culturepass.domain.search import policy
from culturepass.domain.search.cache import SearchCache
from culturepass.domain.search.models import SearchQuery
from culturepass.domain.search.service import SearchService


@pytest.fixture
def service(catalog, directory):
	return SearchService(
		catalog,
		directory,
		search_cache=SearchCache(60_000),
		suggest_cache=SearchCache(60_000),
	)


@pytest.mark.asyncio
async def test_corpus_covers_events_communities_businesses_and_profiles(service):
	corpus = await service.corpus()
	types = {item.type for item in corpus}
	assert types == {"event", "community", "business", "profile"}
	assert any(item.id == "u1" and item.title == "Raman Arc" for item in corpus)


@pytest.mark.asyncio
async def test_event_projection_carries_tags_and_date(service):
	corpus = await service.corpus()
	onam = next(item for item in corpus if item.id == "e1")
	assert onam.type == "event"
	assert onam.date == "2026-03-15"
	assert "Malayalee" in onam.tags
	assert onam.subtitle.startswith("Malayalee · ")


@pytest.mark.asyncio
async def test_second_identical_search_is_served_from_cache(service):
	first, first_cached = await service.search(SearchQuery(q="festival", tags=("Tamil", "Punjabi")))
	second, second_cached = await service.search(SearchQuery(q="festival", tags=("Punjabi", "Tamil")))

	assert first_cached is False
	assert second_cached is True
	assert first == second


@pytest.mark.asyncio
async def test_empty_query_skips_cache(service):
	payload, cached = await service.search(SearchQuery(q=""))

	assert payload == {"total": 0, "page": 1, "page_size": 20, "results": []}
	assert cached is False
	assert len(service._search_cache) == 0


@pytest.mark.asyncio
async def test_profile_search(service):
	payload, _ = await service.search(SearchQuery(q="maria", type="profile"))
	assert payload["results"][0]["id"] == "u3"
	assert all(row["type"] == "profile" for row in payload["results"])


@pytest.mark.asyncio
async def test_suggest_is_cached_per_prefix(service):
	first, first_cached = await service.suggest("onam")
	second, second_cached = await service.suggest("ONAM ")

	assert first[0] == "Onam Grand Celebration 2026"
	assert first_cached is False
	assert second_cached is True
	assert first == second


@pytest.mark.asyncio
async def test_suggest_blank_prefix(service):
	assert await service.suggest("  ") == ([], False)


def test_build_query_never_fails_on_bad_input():
	query = policy.build_query(
		"  diwali ",
		type="nonsense",
		city="",
		tags="music, ,food",
		page="-3",
		page_size="500",
	)
	assert query.q == "diwali"
	assert query.type == "all"
	assert query.city is None
	assert query.tags == ("music", "food")
	assert query.page == 1
	assert query.page_size == 50


def test_page_size_defaults_when_unparseable():
	assert policy.coerce_page_size("abc") == 20
	assert policy.coerce_page_size(None) == 20
	assert policy.coerce_page_size("0") == 20
	assert policy.coerce_page("2") == 2
	assert policy.coerce_type("Business") == "business"
