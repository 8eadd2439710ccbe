import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from fakeredis.aioredis import FakeRedis

# Ensure backend package is importable when tests run from repo root
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
	sys.path.insert(0, str(BACKEND_ROOT))

from culturepass.domain.catalog import build_sample_catalog, build_sample_directory
from culturepass.infra import postgres
from culturepass.main import create_app
from culturepass.settings import settings

FROZEN_NOW = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)


@pytest_asyncio.fixture(autouse=True)
async def fake_redis():
	from culturepass.infra.redis import redis_client, set_redis_client
	original = redis_client.client
	client = FakeRedis(decode_responses=True)
	set_redis_client(client)
	try:
		yield client
	finally:
		set_redis_client(original)
		await client.flushall()


@pytest.fixture(autouse=True)
def patch_postgres(monkeypatch):
	async def _noop():
		return None

	monkeypatch.setattr(postgres, "init_pool", _noop)
	monkeypatch.setattr(postgres, "close_pool", _noop)


@pytest.fixture
def catalog():
	return build_sample_catalog()


@pytest.fixture
def directory():
	return build_sample_directory()


@pytest.fixture
def frozen_clock():
	return lambda: FROZEN_NOW


@pytest.fixture
def app(catalog, directory, fake_redis):
	return create_app(config=settings, catalog=catalog, directory=directory, redis=fake_redis)


@pytest_asyncio.fixture
async def api_client(app):
	transport = ASGITransport(app=app)
	async with AsyncClient(transport=transport, base_url="http://testserver") as client:
		yield client
