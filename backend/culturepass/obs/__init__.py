"""Observability package bootstrap."""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from culturepass.obs import logging as obs_logging
from culturepass.obs import middleware
from culturepass.settings import Settings, settings

_logging_configured = False


def init(app: FastAPI, config: Optional[Settings] = None) -> None:
	global _logging_configured
	config = config or settings
	if not config.obs_enabled:
		return
	if not _logging_configured:
		obs_logging.configure_logging(config.obs_log_level)
		_logging_configured = True
	middleware.install(app)


__all__ = ["init"]
