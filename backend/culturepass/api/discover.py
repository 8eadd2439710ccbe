"""REST endpoints for the personalised Discover feed."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from culturepass.api.deps import caller_id, get_discover_service, get_rate_limiter, get_settings
from culturepass.api.errors import as_http_error
from culturepass.domain.discover import policy, schemas
from culturepass.domain.discover.service import DiscoverService
from culturepass.infra.rate_limit import RateLimiter
from culturepass.settings import Settings

router = APIRouter(prefix="/api/discover", tags=["discover"])


@router.get("/{user_id}", response_model=schemas.DiscoverFeedResponse)
async def discover_feed_endpoint(
	user_id: str,
	request: Request,
	city: Optional[str] = Query(default=None),
	country: Optional[str] = Query(default=None),
	service: DiscoverService = Depends(get_discover_service),
	limiter: RateLimiter = Depends(get_rate_limiter),
	config: Settings = Depends(get_settings),
) -> dict:
	try:
		await policy.enforce_rate_limit(limiter, caller_id(request), limit=config.discover_rate_limit_per_minute)
		feed = await service.get_feed(user_id, city, country)
	except Exception as exc:
		raise as_http_error(exc) from exc
	return feed.to_dict()


@router.get("/{user_id}/section/{section_type}", response_model=schemas.DiscoverSectionResponse)
async def discover_section_endpoint(
	user_id: str,
	section_type: str,
	request: Request,
	city: Optional[str] = Query(default=None),
	country: Optional[str] = Query(default=None),
	service: DiscoverService = Depends(get_discover_service),
	limiter: RateLimiter = Depends(get_rate_limiter),
	config: Settings = Depends(get_settings),
) -> dict:
	try:
		await policy.enforce_rate_limit(limiter, caller_id(request), limit=config.discover_rate_limit_per_minute)
		section, feed = await service.get_section(user_id, section_type, city, country)
	except Exception as exc:
		raise as_http_error(exc) from exc
	return {
		"section": section.to_dict() if section is not None else None,
		"meta": feed.meta(),
	}
