import logging

import pytest

from culturepass.domain.catalog import ContentCatalog, Event, MemoryUserDirectory, UserContext
from culturepass.domain.discover import ranking
from culturepass.domain.discover.policy import UnknownSectionError
from culturepass.domain.discover.service import (
	ALGORITHM_VERSION,
	EXPLORE,
	FIRST_NATIONS,
	FROM_YOUR_HOMELAND,
	NEAR_YOU,
	RECOMMENDED,
	TRENDING,
	YOUR_COMMUNITIES,
	DiscoverService,
)

ONAM = Event(
	id="e1",
	title="Onam Grand Celebration 2026",
	description="Traditional Onam feast and cultural performances.",
	date="2026-03-15",
	venue="Sydney Olympic Park",
	category="Festivals",
	community_tag="Malayalee",
	city="Sydney",
	country="Australia",
	attending=1456,
	is_featured=True,
)


def _ids(section):
	return [item.id for item in section.items]


class FailingCommunitiesDirectory(MemoryUserDirectory):
	async def get_all_communities(self):
		raise RuntimeError("directory offline")


@pytest.mark.asyncio
async def test_single_event_feed_for_sydney_user(frozen_clock):
	user = UserContext(
		id="u1",
		display_name="Raman Arc",
		username="ramanarc",
		city="Sydney",
		country="Australia",
		origin_country="India",
		latitude=-33.8688,
		longitude=151.2093,
		radius_km=50.0,
	)
	directory = MemoryUserDirectory(users=[user])
	service = DiscoverService(ContentCatalog(events=(ONAM,)), directory, clock=frozen_clock)

	feed = await service.get_feed("u1")

	assert [section.title for section in feed.sections] == [NEAR_YOU, FROM_YOUR_HOMELAND, TRENDING]
	for section in feed.sections:
		assert _ids(section) == ["e1"]
	assert feed.total_items == 3
	assert feed.section(RECOMMENDED) is None
	assert feed.section(YOUR_COMMUNITIES) is None

	ctx = ranking.FeedContext(
		user_id=user.id,
		city=user.city,
		country=user.country,
		latitude=user.latitude,
		longitude=user.longitude,
		radius_km=user.radius_km,
	)
	# same city, same country and inside the radius
	assert ranking.near_you_score(ONAM, ctx) == pytest.approx(20.0)


@pytest.mark.asyncio
async def test_sample_feed_sections_and_counts(catalog, directory, frozen_clock):
	service = DiscoverService(catalog, directory, clock=frozen_clock)

	feed = await service.get_feed("u1")

	assert [section.priority for section in feed.sections] == sorted(section.priority for section in feed.sections)
	assert [section.title for section in feed.sections] == [
		NEAR_YOU,
		YOUR_COMMUNITIES,
		FIRST_NATIONS,
		FROM_YOUR_HOMELAND,
		RECOMMENDED,
		TRENDING,
		EXPLORE,
	]
	assert _ids(feed.section(NEAR_YOU)) == ["e1", "e2", "e4", "e7", "e8", "ei1", "ei5", "e3", "e9", "e10"]
	assert _ids(feed.section(YOUR_COMMUNITIES)) == ["e1", "e2", "e8", "e18", "c1", "c2"]
	assert _ids(feed.section(FROM_YOUR_HOMELAND)) == ["e1", "e2", "e4", "e8", "e10", "e18", "e22", "e26"]
	assert _ids(feed.section(RECOMMENDED)) == ["e5"]
	assert _ids(feed.section(TRENDING))[:3] == ["e26", "e5", "ei1"]
	assert "c1" not in _ids(feed.section(EXPLORE))
	assert "c2" not in _ids(feed.section(EXPLORE))
	assert feed.total_items == sum(len(section.items) for section in feed.sections) == 58
	assert feed.algorithm_version == ALGORITHM_VERSION


@pytest.mark.asyncio
async def test_first_nations_section_order(catalog, directory):
	service = DiscoverService(catalog, directory)

	feed = await service.get_feed("u1")

	assert _ids(feed.section(FIRST_NATIONS)) == [
		"ei1", "ei2", "ei3", "ei5",
		"is1", "is2", "is3", "is4",
		"bi1", "bi2", "bi3",
		"ai1", "ai2",
	]


@pytest.mark.asyncio
async def test_sections_never_repeat_an_item(catalog, directory):
	service = DiscoverService(catalog, directory)

	feed = await service.get_feed("u1")

	for section in feed.sections:
		ids = _ids(section)
		assert len(ids) == len(set(ids))


@pytest.mark.asyncio
async def test_recommended_skips_events_shown_earlier(catalog, directory):
	service = DiscoverService(catalog, directory)

	feed = await service.get_feed("u1")

	earlier = set()
	for title in (NEAR_YOU, YOUR_COMMUNITIES, FIRST_NATIONS, FROM_YOUR_HOMELAND):
		earlier.update(_ids(feed.section(title)))
	assert not earlier & set(_ids(feed.section(RECOMMENDED)))


@pytest.mark.asyncio
async def test_feed_is_deterministic_with_fixed_clock(catalog, directory, frozen_clock):
	service = DiscoverService(catalog, directory, clock=frozen_clock)

	first = await service.get_feed("u2")
	second = await service.get_feed("u2")

	assert first.to_dict() == second.to_dict()
	assert first.generated_at == frozen_clock()


@pytest.mark.asyncio
async def test_unknown_user_uses_request_location(catalog, directory):
	service = DiscoverService(catalog, directory)

	feed = await service.get_feed("nobody", city="Melbourne", country="Australia")

	assert feed.city == "Melbourne"
	assert feed.country == "Australia"
	assert feed.section(YOUR_COMMUNITIES) is None
	assert feed.section(FROM_YOUR_HOMELAND) is None
	assert _ids(feed.section(NEAR_YOU))[:2] == ["e3", "ei2"]
	assert len(feed.section(EXPLORE).items) == 10


@pytest.mark.asyncio
async def test_profile_location_wins_over_request_location(catalog, directory):
	service = DiscoverService(catalog, directory)

	feed = await service.get_feed("u1", city="Perth", country="Australia")

	assert feed.city == "Sydney"


@pytest.mark.asyncio
async def test_indigenous_visibility_disabled_hides_spotlight(catalog, directory):
	service = DiscoverService(catalog, directory)

	feed = await service.get_feed("u3")

	assert feed.section(FIRST_NATIONS) is None
	assert _ids(feed.section(NEAR_YOU)) == ["e5"]


@pytest.mark.asyncio
async def test_homeland_disabled_hides_homeland_section(catalog, directory):
	directory.add_user(
		UserContext(
			id="u9",
			display_name="No Homeland",
			username="nohomeland",
			city="Sydney",
			country="Australia",
			origin_country="India",
			homeland_content_enabled=False,
		)
	)
	service = DiscoverService(catalog, directory)

	feed = await service.get_feed("u9")

	assert feed.section(FROM_YOUR_HOMELAND) is None
	assert feed.section(NEAR_YOU) is not None


@pytest.mark.asyncio
async def test_explore_failure_is_omitted_and_logged(catalog, caplog):
	directory = FailingCommunitiesDirectory()
	service = DiscoverService(catalog, directory)

	with caplog.at_level(logging.WARNING, logger="culturepass.domain.discover.service"):
		feed = await service.get_feed("guest", city="Sydney", country="Australia")

	assert feed.section(EXPLORE) is None
	assert feed.section(NEAR_YOU) is not None
	assert any("discover.section_omitted" in record.getMessage() for record in caplog.records)


@pytest.mark.asyncio
async def test_get_section_by_route_key(catalog, directory):
	service = DiscoverService(catalog, directory)

	section, feed = await service.get_section("u1", "trending")

	assert section is not None
	assert section.title == TRENDING
	assert feed.section(TRENDING) is section


@pytest.mark.asyncio
async def test_get_section_missing_returns_none(catalog, directory):
	service = DiscoverService(catalog, directory)

	section, _ = await service.get_section("nobody", "yourCommunities")

	assert section is None


@pytest.mark.asyncio
async def test_get_section_rejects_unknown_key(catalog, directory):
	service = DiscoverService(catalog, directory)

	with pytest.raises(UnknownSectionError) as excinfo:
		await service.get_section("u1", "popular")

	assert excinfo.value.status_code == 400
	assert excinfo.value.detail.startswith("Invalid section type. Must be one of: nearYou, yourCommunities")


def test_near_you_score_adds_proximity_to_location_match():
	ctx = ranking.FeedContext(user_id="u", city="Sydney", country="Australia", latitude=-33.8688, longitude=151.2093)
	assert ranking.near_you_score(ONAM, ctx) == pytest.approx(20.0)

	no_city = ranking.FeedContext(user_id="u", latitude=-33.8688, longitude=151.2093)
	assert ranking.near_you_score(ONAM, no_city) == pytest.approx(10.0)

	far = ranking.FeedContext(user_id="u", country="Australia", latitude=-37.8136, longitude=144.9631, radius_km=1000)
	assert ranking.near_you_score(ONAM, far) == pytest.approx(5.0)


def test_trending_ties_keep_catalog_order(catalog):
	trending = ranking.rank_trending(catalog.events)
	assert [event.id for event in trending][:5] == ["e26", "e5", "ei1", "e22", "ei5"]


@pytest.mark.asyncio
async def test_partial_coordinates_are_ignored(frozen_clock):
	user = UserContext(id="u2", city="Sydney", country="Australia", latitude=-33.8688)
	service = DiscoverService(ContentCatalog(events=(ONAM,)), MemoryUserDirectory(users=[user]), clock=frozen_clock)

	ctx, _ = await service._resolve_context("u2", None, None)

	assert ctx.latitude is None
	assert ctx.longitude is None
	assert not ctx.has_coordinates()
