"""REST endpoints for text search and typeahead suggestions."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from culturepass.api.deps import caller_id, get_rate_limiter, get_search_service, get_settings
from culturepass.api.errors import as_http_error
from culturepass.domain.search import policy, schemas
from culturepass.domain.search.service import SearchService
from culturepass.infra.rate_limit import RateLimiter
from culturepass.settings import Settings

router = APIRouter(prefix="/api/search", tags=["search"])


@router.get("", response_model=schemas.SearchResponse)
async def search_endpoint(
	request: Request,
	q: Optional[str] = Query(default=None),
	type: Optional[str] = Query(default=None),
	city: Optional[str] = Query(default=None),
	country: Optional[str] = Query(default=None),
	tags: Optional[str] = Query(default=None, description="Comma-separated tags"),
	start_date: Optional[str] = Query(default=None, alias="startDate"),
	end_date: Optional[str] = Query(default=None, alias="endDate"),
	page: Optional[str] = Query(default=None),
	page_size: Optional[str] = Query(default=None, alias="pageSize"),
	service: SearchService = Depends(get_search_service),
	limiter: RateLimiter = Depends(get_rate_limiter),
	config: Settings = Depends(get_settings),
) -> dict:
	query = policy.build_query(
		q,
		type=type,
		city=city,
		country=country,
		tags=tags,
		start_date=start_date,
		end_date=end_date,
		page=page,
		page_size=page_size,
	)
	try:
		if query.q:
			await policy.enforce_rate_limit(
				limiter, caller_id(request), limit=config.search_rate_limit_per_minute
			)
		payload, cached = await service.search(query)
	except Exception as exc:
		raise as_http_error(exc) from exc
	return {**payload, "cached": cached}


@router.get("/suggest", response_model=schemas.SuggestResponse)
async def suggest_endpoint(
	request: Request,
	q: Optional[str] = Query(default=None),
	service: SearchService = Depends(get_search_service),
	limiter: RateLimiter = Depends(get_rate_limiter),
	config: Settings = Depends(get_settings),
) -> dict:
	if not (q or "").strip():
		return {"suggestions": [], "cached": False}
	try:
		await policy.enforce_rate_limit(
			limiter, caller_id(request), kind="suggest", limit=config.search_rate_limit_per_minute
		)
		suggestions, cached = await service.suggest(q or "")
	except Exception as exc:
		raise as_http_error(exc) from exc
	return {"suggestions": suggestions, "cached": cached}
