"""Shared async Redis handle used by the rate limiter and readiness probe.

Modules import ``redis_client`` once; tests swap the client behind it with
``set_redis_client`` (fakeredis) without re-importing anything.
"""

from __future__ import annotations

import redis.asyncio as redis

from culturepass.settings import settings


def build_client(url: str) -> redis.Redis:
	# Connections are opened lazily, so building the client never touches the network
	return redis.from_url(url, decode_responses=True)


class RedisProxy:
	def __init__(self, client: redis.Redis):
		self._client: redis.Redis = client

	@property
	def client(self) -> redis.Redis:
		return self._client

	def set_client(self, client: redis.Redis) -> None:
		self._client = client

	def __getattr__(self, item):
		return getattr(self._client, item)


redis_client: RedisProxy = RedisProxy(build_client(settings.redis_url))


def set_redis_client(client: redis.Redis) -> None:
	redis_client.set_client(client)
