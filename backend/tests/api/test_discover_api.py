import pytest
from httpx import ASGITransport, AsyncClient
from redis.exceptions import ConnectionError as RedisConnectionError

from culturepass.domain.catalog import MemoryUserDirectory
from culturepass.main import create_app
from culturepass.settings import settings


class BrokenDirectory(MemoryUserDirectory):
	async def get_user(self, user_id):
		raise RuntimeError("directory unavailable")


class UnreachableRedis:
	def pipeline(self, transaction=True):
		raise RedisConnectionError("connection refused")


@pytest.mark.asyncio
async def test_discover_feed_endpoint(api_client):
	response = await api_client.get("/api/discover/u1", headers={"X-User-Id": "u1"})
	payload = response.json()

	assert response.status_code == 200
	priorities = [section["priority"] for section in payload["sections"]]
	assert priorities == sorted(priorities)
	assert set(payload["meta"]) == {"userId", "city", "country", "generatedAt", "totalItems", "algorithmVersion"}
	assert payload["meta"]["userId"] == "u1"
	assert payload["meta"]["city"] == "Sydney"
	assert payload["meta"]["algorithmVersion"] == "2.0"
	assert payload["meta"]["totalItems"] == sum(len(section["items"]) for section in payload["sections"])
	near_you = payload["sections"][0]
	assert near_you["title"] == "Near You"
	assert near_you["items"][0]["id"] == "e1"
	assert near_you["items"][0]["kind"] == "event"
	assert near_you["items"][0]["communityTag"] == "Malayalee"
	assert near_you["items"][0]["isFeatured"] is True
	assert "community_tag" not in near_you["items"][0]
	assert "X-Request-Id" in response.headers


@pytest.mark.asyncio
async def test_discover_feed_for_guest_uses_query_location(api_client):
	response = await api_client.get("/api/discover/guest", params={"city": "Melbourne", "country": "Australia"})
	payload = response.json()

	assert response.status_code == 200
	assert payload["meta"]["city"] == "Melbourne"
	titles = [section["title"] for section in payload["sections"]]
	assert "Your Communities" not in titles


@pytest.mark.asyncio
async def test_discover_section_endpoint(api_client):
	response = await api_client.get("/api/discover/u1/section/fromYourHomeland")
	payload = response.json()

	assert response.status_code == 200
	assert payload["section"]["title"] == "From Your Homeland"
	assert payload["section"]["type"] == "events"
	assert payload["meta"]["userId"] == "u1"


@pytest.mark.asyncio
async def test_discover_section_absent_is_null(api_client):
	response = await api_client.get("/api/discover/nobody/section/yourCommunities")

	assert response.status_code == 200
	assert response.json()["section"] is None


@pytest.mark.asyncio
async def test_discover_section_rejects_unknown_type(api_client):
	response = await api_client.get("/api/discover/u1/section/popular")
	payload = response.json()

	assert response.status_code == 400
	assert payload["detail"] == (
		"Invalid section type. Must be one of: nearYou, yourCommunities, firstNationsSpotlight, "
		"fromYourHomeland, recommended, trending, explore"
	)
	assert "request_id" in payload


@pytest.mark.asyncio
async def test_discover_feed_directory_failure_is_500(catalog, fake_redis):
	app = create_app(config=settings, catalog=catalog, directory=BrokenDirectory(), redis=fake_redis)
	async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
		response = await client.get("/api/discover/u1")

	assert response.status_code == 500
	assert response.json()["detail"] == "directory unavailable"


@pytest.mark.asyncio
async def test_discover_feed_rate_limited(catalog, directory, fake_redis):
	config = settings.model_copy(update={"discover_rate_limit_per_minute": 1})
	app = create_app(config=config, catalog=catalog, directory=directory, redis=fake_redis)
	async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
		first = await client.get("/api/discover/u1", headers={"X-User-Id": "u-limit"})
		second = await client.get("/api/discover/u1", headers={"X-User-Id": "u-limit"})
		other = await client.get("/api/discover/u1", headers={"X-User-Id": "u-other"})

	assert first.status_code == 200
	assert second.status_code == 429
	assert second.json()["detail"] == "rate_limit"
	assert other.status_code == 200


@pytest.mark.asyncio
async def test_discover_and_search_survive_redis_outage(catalog, directory):
	app = create_app(config=settings, catalog=catalog, directory=directory, redis=UnreachableRedis())
	async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
		feed = await client.get("/api/discover/u1", headers={"X-User-Id": "u1"})
		results = await client.get("/api/search", params={"q": "onam"})

	assert feed.status_code == 200
	assert feed.json()["meta"]["userId"] == "u1"
	assert results.status_code == 200
	assert results.json()["total"] >= 1
