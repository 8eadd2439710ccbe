"""JSON logging with per-request context for the CulturePass API."""

from __future__ import annotations

import json
import logging
import random
from contextvars import ContextVar, Token
from dataclasses import asdict, dataclass, replace
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from culturepass.settings import settings

_ROOT_LOGGER = "culturepass"

# Field names whose values never reach the log stream
_REDACTED_FIELDS = frozenset(
	{
		"authorization",
		"password",
		"secret",
		"token",
		"admin_token",
		"latitude",
		"longitude",
		"lat",
		"lng",
	}
)

_MAX_TEXT = 256
_MAX_ITEMS = 10

# Attributes every LogRecord carries; anything else came in through ``extra``
_STANDARD_ATTRS = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime"}


@dataclass(slots=True, frozen=True)
class RequestLogContext:
	request_id: Optional[str] = None
	route: Optional[str] = None
	user_id: Optional[str] = None
	ip: Optional[str] = None


_CONTEXT: ContextVar[RequestLogContext] = ContextVar("culturepass_log_context", default=RequestLogContext())


def bind_context(
	*,
	request_id: Optional[str] = None,
	route: Optional[str] = None,
	user_id: Optional[str] = None,
	client_ip: Optional[str] = None,
) -> Token:
	"""Overlay non-empty fields on the current context; pass the token to ``reset_context``."""

	current = _CONTEXT.get()
	updates = {
		name: value
		for name, value in (("request_id", request_id), ("route", route), ("user_id", user_id), ("ip", client_ip))
		if value is not None
	}
	return _CONTEXT.set(replace(current, **updates))


def reset_context(token: Token) -> None:
	_CONTEXT.reset(token)


def current_request_id() -> Optional[str]:
	return _CONTEXT.get().request_id


def _clip(value: Any) -> Any:
	if isinstance(value, str):
		return value if len(value) <= _MAX_TEXT else value[:_MAX_TEXT] + "…"
	if isinstance(value, dict):
		clipped = {str(key): redact(str(key), nested) for key, nested in list(value.items())[:_MAX_ITEMS]}
		if len(value) > _MAX_ITEMS:
			clipped["…"] = f"+{len(value) - _MAX_ITEMS} keys"
		return clipped
	if isinstance(value, (list, tuple, set)):
		items = [_clip(item) for item in list(value)[:_MAX_ITEMS]]
		if len(value) > _MAX_ITEMS:
			items.append("…")
		return items
	return value


def redact(key: str, value: Any) -> Any:
	if key.lower() in _REDACTED_FIELDS:
		return "[redacted]"
	return _clip(value)


class JSONLogFormatter(logging.Formatter):
	"""One JSON object per record: base fields, request context, then extras."""

	def format(self, record: logging.LogRecord) -> str:  # noqa: A003 (match logging api)
		payload: Dict[str, Any] = {
			"ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
			"level": record.levelname.lower(),
			"msg": record.getMessage(),
			"logger": record.name,
			"service": settings.service_name,
			"env": settings.environment,
			"commit": settings.git_commit,
		}
		payload.update({key: value for key, value in asdict(_CONTEXT.get()).items() if value})
		if record.exc_info:
			payload["exc_info"] = self.formatException(record.exc_info)
		for key, value in record.__dict__.items():
			if key not in _STANDARD_ATTRS and key not in payload:
				payload[key] = redact(key, value)
		return json.dumps(payload, separators=(",", ":"), default=str)


class InfoSamplingFilter(logging.Filter):
	"""Keep a random share of info records; everything else passes."""

	def __init__(self, rate: Optional[float] = None) -> None:
		super().__init__()
		self._rate = rate

	@property
	def rate(self) -> float:
		rate = settings.obs_log_sampling_rate_info if self._rate is None else self._rate
		return max(0.0, min(1.0, rate))

	def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
		if record.levelno != logging.INFO:
			return True
		rate = self.rate
		return rate >= 1.0 or random.random() < rate


def configure_logging(level: Optional[str] = None) -> logging.Logger:
	"""Route the root logger through a single sampled JSON stream handler."""

	handler = logging.StreamHandler()
	handler.setFormatter(JSONLogFormatter())
	handler.addFilter(InfoSamplingFilter())
	root = logging.getLogger()
	root.handlers.clear()
	root.addHandler(handler)
	root.setLevel((level or settings.obs_log_level).upper())
	return logging.getLogger(_ROOT_LOGGER)


def get_logger(name: Optional[str] = None) -> logging.Logger:
	return logging.getLogger(name or _ROOT_LOGGER)
