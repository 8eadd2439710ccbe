"""FastAPI application entrypoint."""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import Any, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from culturepass.api import discover, ops, rollout, search
from culturepass.api.errors import install_error_handlers
from culturepass.api.middleware_request_id import RequestIdMiddleware
from culturepass.domain.catalog import (
	ContentCatalog,
	PostgresUserDirectory,
	UserDirectory,
	build_sample_catalog,
	build_sample_directory,
)
from culturepass.domain.discover.service import DiscoverService
from culturepass.domain.rollout.service import RolloutService
from culturepass.domain.search.cache import SearchCache
from culturepass.domain.search.service import SearchService
from culturepass.infra import postgres
from culturepass.infra.rate_limit import RateLimiter
from culturepass.infra.redis import redis_client
from culturepass.obs import init as obs_init
from culturepass.settings import Settings, settings as default_settings


def _default_directory(config: Settings) -> UserDirectory:
	if config.catalog_backend.lower() == "postgres":
		return PostgresUserDirectory()
	return build_sample_directory()


def _allow_origins(config: Settings) -> list[str]:
	origins = [origin for origin in config.cors_allow_origins if origin != "*"]
	if origins:
		return origins
	return ["http://localhost:8081", "http://localhost:19006"] if config.is_dev() else []


def create_app(
	*,
	config: Optional[Settings] = None,
	catalog: Optional[ContentCatalog] = None,
	directory: Optional[UserDirectory] = None,
	redis: Any = None,
	rollout_service: Optional[RolloutService] = None,
	search_cache: Optional[SearchCache] = None,
	suggest_cache: Optional[SearchCache] = None,
) -> FastAPI:
	"""Wire services explicitly so tests can swap any collaborator."""

	config = config or default_settings
	catalog = catalog or build_sample_catalog()
	directory = directory or _default_directory(config)
	redis = redis if redis is not None else redis_client
	uses_postgres = isinstance(directory, PostgresUserDirectory)

	@asynccontextmanager
	async def lifespan(app: FastAPI):
		if uses_postgres:
			await postgres.init_pool()
		try:
			yield
		finally:
			if uses_postgres:
				await postgres.close_pool()

	app = FastAPI(title="CulturePass Discover", lifespan=lifespan)
	app.state.settings = config
	app.state.catalog = catalog
	app.state.directory = directory
	app.state.redis = redis
	app.state.rate_limiter = RateLimiter(redis)
	app.state.discover_service = DiscoverService(
		catalog,
		directory,
		default_radius_km=config.default_radius_km,
	)
	app.state.search_service = SearchService(
		catalog,
		directory,
		search_cache=search_cache or SearchCache(config.search_cache_ttl_ms),
		suggest_cache=suggest_cache or SearchCache(config.suggest_cache_ttl_ms),
		suggest_limit=config.suggest_limit,
	)
	app.state.rollout_service = rollout_service or RolloutService(
		config.rollout_phase,
		config.rollout_features,
	)

	install_error_handlers(app)
	origins = _allow_origins(config)
	if origins:
		app.add_middleware(
			CORSMiddleware,
			allow_origins=origins,
			allow_credentials=True,
			allow_methods=["*"],
			allow_headers=["*"],
		)
	obs_init(app, config)
	app.add_middleware(RequestIdMiddleware)

	app.include_router(discover.router)
	app.include_router(search.router)
	app.include_router(rollout.router)
	app.include_router(ops.router)
	return app


app = create_app()


def run() -> None:
	uvicorn.run("culturepass.main:app", host="0.0.0.0", port=int(os.environ.get("PORT", "8000")))
