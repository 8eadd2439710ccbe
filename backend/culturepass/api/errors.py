"""Global error handlers ensuring request_id is included in JSON responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from culturepass.api.request_id import get_request_id
from culturepass.domain.discover.policy import DiscoverPolicyError
from culturepass.domain.search.policy import SearchPolicyError

logger = logging.getLogger(__name__)


def as_http_error(exc: Exception) -> HTTPException:
	"""Policy errors keep their status; anything else is a 500 carrying the message."""

	if isinstance(exc, (DiscoverPolicyError, SearchPolicyError)):
		return HTTPException(status_code=exc.status_code, detail=exc.detail)
	logger.exception("request.failed error=%s", exc)
	return HTTPException(status_code=500, detail=str(exc))


def install_error_handlers(app: FastAPI) -> None:
	@app.exception_handler(StarletteHTTPException)
	async def http_exc_handler(request: Request, exc: StarletteHTTPException):  # type: ignore[override]
		payload = {"detail": exc.detail, "request_id": get_request_id(request)}
		return JSONResponse(status_code=exc.status_code, content=payload, headers=getattr(exc, "headers", None))

	@app.exception_handler(RequestValidationError)
	async def validation_exc_handler(request: Request, exc: RequestValidationError):  # type: ignore[override]
		payload = {
			"detail": "validation_error",
			"errors": jsonable_encoder(exc.errors()),
			"request_id": get_request_id(request),
		}
		return JSONResponse(status_code=422, content=payload)
