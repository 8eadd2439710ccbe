"""Health check helpers for liveness and readiness probes."""

from __future__ import annotations

import asyncio
import logging
from time import perf_counter
from typing import Any, Dict, Optional, Tuple

from culturepass.infra.redis import redis_client
from culturepass.obs import metrics

LOGGER = logging.getLogger(__name__)


async def _redis_status(client: Any = None, timeout: float = 0.2) -> Dict[str, Any]:
	client = client if client is not None else redis_client
	start = perf_counter()
	try:
		await asyncio.wait_for(client.ping(), timeout=timeout)
		latency = perf_counter() - start
		metrics.mark_redis(True)
		return {"ok": True, "latency_ms": round(latency * 1000, 2)}
	except Exception as exc:  # pragma: no cover - depends on runtime
		metrics.mark_redis(False)
		LOGGER.warning("Redis readiness check failed", exc_info=True)
		return {"ok": False, "error": str(exc)}


async def _directory_status(directory: Any, timeout: float = 0.3) -> Dict[str, Any]:
	if directory is None:
		metrics.mark_catalog(False)
		return {"ok": False, "error": "directory_unavailable"}
	start = perf_counter()
	try:
		await asyncio.wait_for(directory.ping(), timeout=timeout)
		latency = perf_counter() - start
		metrics.mark_catalog(True)
		return {"ok": True, "latency_ms": round(latency * 1000, 2)}
	except Exception as exc:  # pragma: no cover - depends on runtime
		metrics.mark_catalog(False)
		LOGGER.warning("User directory readiness check failed", exc_info=True)
		return {"ok": False, "error": str(exc)}


async def liveness() -> Dict[str, Any]:
	return {"status": "ok"}


async def readiness(directory: Any = None, redis: Optional[Any] = None) -> Tuple[int, Dict[str, Any]]:
	redis_state = await _redis_status(redis)
	directory_state = await _directory_status(directory)
	ok = bool(redis_state.get("ok") and directory_state.get("ok"))
	status_code = 200 if ok else 503
	return (
		status_code,
		{
			"status": "ok" if ok else "degraded",
			"checks": {
				"redis": redis_state,
				"directory": directory_state,
			},
		},
	)
