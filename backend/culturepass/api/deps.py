"""Dependency helpers resolving services wired onto ``app.state``."""

from __future__ import annotations

from fastapi import Request

from culturepass.domain.discover.service import DiscoverService
from culturepass.domain.rollout.service import RolloutService
from culturepass.domain.search.service import SearchService
from culturepass.infra.rate_limit import RateLimiter
from culturepass.settings import Settings

USER_HEADER = "X-User-Id"


def get_discover_service(request: Request) -> DiscoverService:
	return request.app.state.discover_service


def get_search_service(request: Request) -> SearchService:
	return request.app.state.search_service


def get_rollout_service(request: Request) -> RolloutService:
	return request.app.state.rollout_service


def get_rate_limiter(request: Request) -> RateLimiter:
	return request.app.state.rate_limiter


def get_settings(request: Request) -> Settings:
	return request.app.state.settings


def caller_id(request: Request) -> str:
	"""Rate-limit identity: the user header, else the client address."""

	header = (request.headers.get(USER_HEADER) or "").strip()
	if header:
		return header
	client = request.client
	return client.host if client and client.host else "anonymous"
