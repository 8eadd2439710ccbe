"""Search domain exports."""

from .cache import SearchCache, build_search_cache_key
from .models import SearchableItem, SearchPage, SearchQuery
from .ranking import run_search, run_suggest
from .service import SearchService

__all__ = [
	"SearchService",
	"SearchCache",
	"SearchQuery",
	"SearchableItem",
	"SearchPage",
	"build_search_cache_key",
	"run_search",
	"run_suggest",
]
