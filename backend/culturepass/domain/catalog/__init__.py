"""Catalog exports: content models, seeded sample data and user directories."""

from .models import (
	Activity,
	Business,
	Community,
	ContentCatalog,
	ContentItem,
	Event,
	Spotlight,
	UserContext,
	to_payload,
)
from .repository import MemoryUserDirectory, PostgresUserDirectory, UserDirectory
from .seed import build_sample_catalog, build_sample_directory

__all__ = [
	"Activity",
	"Business",
	"Community",
	"ContentCatalog",
	"ContentItem",
	"Event",
	"Spotlight",
	"UserContext",
	"to_payload",
	"UserDirectory",
	"MemoryUserDirectory",
	"PostgresUserDirectory",
	"build_sample_catalog",
	"build_sample_directory",
]
