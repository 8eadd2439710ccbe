"""Redis-backed fixed-window rate limiting."""

from __future__ import annotations

import logging
import math
import time
from typing import Any, Optional

from redis.exceptions import RedisError

from culturepass.infra.redis import redis_client
from culturepass.obs import metrics as obs_metrics

logger = logging.getLogger(__name__)


class RateLimiter:
	"""Counts operations per actor in fixed windows stored in Redis.

	Keys look like ``rl:{kind}:{actor}:{slot}:{window}`` and expire with the window,
	so no sweeping is needed. When Redis cannot be reached the limiter fails open.
	"""

	def __init__(self, client: Any = None, *, window_seconds: int = 60) -> None:
		self._client = client if client is not None else redis_client
		self._window = max(1, int(window_seconds))

	async def allow(
		self,
		kind: str,
		actor_id: str,
		*,
		limit: int,
		now: Optional[float] = None,
	) -> bool:
		"""Return True when the operation is still within the allowed budget."""
		if limit <= 0:
			return False
		now = now or time.time()
		slot = int(math.floor(now / self._window))
		key = f"rl:{kind}:{actor_id}:{slot}:{self._window}"
		try:
			async with self._client.pipeline(transaction=True) as pipe:
				pipe.incr(key)
				pipe.expire(key, self._window)
				count, _ = await pipe.execute()
		except (RedisError, ConnectionError, OSError) as exc:
			logger.warning("rate_limit.unavailable kind=%s error=%s", kind, exc)
			obs_metrics.inc_rate_limit_unavailable(kind)
			return True
		return int(count) <= limit
