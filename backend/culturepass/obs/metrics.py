"""Central registry for Prometheus metrics used across the backend."""

from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram


REQUEST_COUNTER = Counter(
	"culturepass_http_requests_total",
	"Total HTTP requests processed",
	["route", "method", "status"],
)

REQUEST_LATENCY = Histogram(
	"culturepass_http_request_duration_seconds",
	"HTTP request latency in seconds",
	["route", "method"],
	buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 5.0),
)

DISCOVER_FEEDS = Counter(
	"culturepass_discover_feeds_total",
	"Discover feeds generated",
	["personalised"],
)

DISCOVER_LATENCY = Histogram(
	"culturepass_discover_latency_seconds",
	"Discover feed generation latency in seconds",
	buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)

DISCOVER_SECTION_ERRORS = Counter(
	"culturepass_discover_section_errors_total",
	"Optional discover sections omitted because a collaborator failed",
	["section"],
)

DISCOVER_FEED_ITEMS = Gauge(
	"culturepass_discover_feed_items",
	"Items in the most recently generated discover feed",
)

SEARCH_QUERIES = Counter(
	"culturepass_search_queries_total",
	"Search queries executed",
	["kind"],
)

SEARCH_LATENCY = Histogram(
	"culturepass_search_latency_seconds",
	"Search latency in seconds",
	["kind"],
	buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0),
)

SEARCH_CACHE = Counter(
	"culturepass_search_cache_total",
	"Search cache lookups",
	["kind", "result"],
)

ROLLOUT_EVALUATIONS = Counter(
	"culturepass_rollout_evaluations_total",
	"Feature rollout evaluations",
	["feature", "enabled"],
)

RATE_LIMITED = Counter(
	"culturepass_rate_limited_total",
	"Requests rejected by the rate limiter",
	["kind"],
)

RATE_LIMIT_UNAVAILABLE = Counter(
	"culturepass_rate_limit_unavailable_total",
	"Rate limit checks skipped because Redis was unreachable",
	["kind"],
)

REDIS_UP = Gauge(
	"culturepass_redis_up",
	"Redis readiness (1 = healthy)",
)

CATALOG_UP = Gauge(
	"culturepass_catalog_up",
	"User directory readiness (1 = healthy)",
)


def observe_request(route: str, method: str, status: int, elapsed_seconds: float) -> None:
	REQUEST_COUNTER.labels(route=route, method=method, status=str(status)).inc()
	REQUEST_LATENCY.labels(route=route, method=method).observe(elapsed_seconds)


def inc_discover_feed(personalised: bool) -> None:
	DISCOVER_FEEDS.labels(personalised="true" if personalised else "false").inc()


def observe_discover_latency(latency_seconds: float) -> None:
	DISCOVER_LATENCY.observe(latency_seconds)


def inc_discover_section_error(section: str) -> None:
	DISCOVER_SECTION_ERRORS.labels(section=section).inc()


def inc_search_query(kind: str) -> None:
	SEARCH_QUERIES.labels(kind=kind).inc()


def observe_search_latency(kind: str, latency_seconds: float) -> None:
	SEARCH_LATENCY.labels(kind=kind).observe(latency_seconds)


def mark_search_cache(kind: str, hit: bool) -> None:
	SEARCH_CACHE.labels(kind=kind, result="hit" if hit else "miss").inc()


def inc_rollout_evaluation(feature: str, enabled: bool) -> None:
	ROLLOUT_EVALUATIONS.labels(feature=feature, enabled="true" if enabled else "false").inc()


def inc_rate_limited(kind: str) -> None:
	RATE_LIMITED.labels(kind=kind).inc()


def inc_rate_limit_unavailable(kind: str) -> None:
	RATE_LIMIT_UNAVAILABLE.labels(kind=kind).inc()


def mark_redis(ok: bool) -> None:
	REDIS_UP.set(1 if ok else 0)


def mark_catalog(ok: bool) -> None:
	CATALOG_UP.set(1 if ok else 0)
