"""Request instrumentation: Prometheus timings plus one access log line per call."""

from __future__ import annotations

import time
from uuid import uuid4

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from culturepass.obs import logging as obs_logging
from culturepass.obs import metrics

REQUEST_ID_HEADER = "X-Request-Id"

access_logger = obs_logging.get_logger("culturepass.http")


def route_label(request: Request) -> str:
	"""Path template when the router matched, so metric labels stay bounded."""

	route = request.scope.get("route")
	return getattr(route, "path", None) or request.url.path


def _request_id(request: Request) -> str:
	rid = getattr(request.state, "request_id", None) or request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
	request.state.request_id = rid
	return rid


class ObservabilityMiddleware(BaseHTTPMiddleware):
	async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
		rid = _request_id(request)
		token = obs_logging.bind_context(
			request_id=rid,
			route=request.url.path,
			user_id=request.headers.get("X-User-Id"),
			client_ip=request.client.host if request.client else None,
		)
		started = time.perf_counter()
		try:
			response = await call_next(request)
		except Exception:
			metrics.observe_request(route_label(request), request.method, 500, time.perf_counter() - started)
			access_logger.exception("http.request_failed method=%s path=%s", request.method, request.url.path)
			obs_logging.reset_context(token)
			raise

		elapsed = time.perf_counter() - started
		route = route_label(request)
		metrics.observe_request(route, request.method, response.status_code, elapsed)
		access_logger.info(
			"http.request method=%s route=%s status=%d",
			request.method,
			route,
			response.status_code,
			extra={"latency_ms": round(elapsed * 1000, 3)},
		)
		obs_logging.reset_context(token)
		response.headers.setdefault(REQUEST_ID_HEADER, rid)
		return response


def install(app: FastAPI) -> None:
	app.add_middleware(ObservabilityMiddleware)
