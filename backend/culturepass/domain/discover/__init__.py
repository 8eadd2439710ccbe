"""Discover domain exports."""

from .policy import DiscoverPolicyError, UnknownSectionError
from .service import SECTION_KEYS, DiscoverFeed, DiscoverSection, DiscoverService, SectionResult

__all__ = [
	"DiscoverService",
	"DiscoverFeed",
	"DiscoverSection",
	"SectionResult",
	"SECTION_KEYS",
	"DiscoverPolicyError",
	"UnknownSectionError",
]
