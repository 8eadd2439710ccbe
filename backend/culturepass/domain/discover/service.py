"""Personalised Discover feed assembly."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

from culturepass.domain.catalog.models import (
	Community,
	ContentCatalog,
	ContentItem,
	UserContext,
	to_payload,
)
from culturepass.domain.catalog.repository import UserDirectory
from culturepass.domain.discover import affinity, ranking
from culturepass.domain.discover.policy import UnknownSectionError
from culturepass.obs import metrics as obs_metrics

logger = logging.getLogger(__name__)

ALGORITHM_VERSION = "2.0"

NEAR_YOU = "Near You"
YOUR_COMMUNITIES = "Your Communities"
FIRST_NATIONS = "First Nations Spotlight"
FROM_YOUR_HOMELAND = "From Your Homeland"
RECOMMENDED = "Recommended For You"
TRENDING = "Trending Events"
EXPLORE = "Communities to Explore"

# Route keys accepted by the single-section endpoint, in priority order
SECTION_KEYS: Dict[str, str] = {
	"nearYou": NEAR_YOU,
	"yourCommunities": YOUR_COMMUNITIES,
	"firstNationsSpotlight": FIRST_NATIONS,
	"fromYourHomeland": FROM_YOUR_HOMELAND,
	"recommended": RECOMMENDED,
	"trending": TRENDING,
	"explore": EXPLORE,
}


@dataclass(slots=True)
class DiscoverSection:
	title: str
	type: str
	priority: int
	items: List[ContentItem] = field(default_factory=list)
	subtitle: Optional[str] = None

	def to_dict(self) -> Dict[str, Any]:
		return {
			"title": self.title,
			"subtitle": self.subtitle,
			"type": self.type,
			"items": [to_payload(item) for item in self.items],
			"priority": self.priority,
		}


@dataclass(slots=True)
class SectionResult:
	"""Outcome of one section builder: a section, nothing to show, or an error."""

	name: str
	section: Optional[DiscoverSection] = None
	error: Optional[Exception] = None

	@property
	def ok(self) -> bool:
		return self.error is None


@dataclass(slots=True)
class DiscoverFeed:
	user_id: str
	city: str
	country: str
	generated_at: datetime
	sections: List[DiscoverSection] = field(default_factory=list)
	algorithm_version: str = ALGORITHM_VERSION

	@property
	def total_items(self) -> int:
		return sum(len(section.items) for section in self.sections)

	def section(self, title: str) -> Optional[DiscoverSection]:
		for section in self.sections:
			if section.title == title:
				return section
		return None

	def meta(self) -> Dict[str, Any]:
		return {
			"user_id": self.user_id,
			"city": self.city,
			"country": self.country,
			"generated_at": self.generated_at,
			"total_items": self.total_items,
			"algorithm_version": self.algorithm_version,
		}

	def to_dict(self) -> Dict[str, Any]:
		return {"sections": [section.to_dict() for section in self.sections], "meta": self.meta()}


def _utcnow() -> datetime:
	return datetime.now(timezone.utc)


def _omit_empty(name: str, section: DiscoverSection) -> SectionResult:
	return SectionResult(name, section if section.items else None)


class DiscoverService:
	"""Builds the ranked, multi-section Discover feed for one user.

	The service is stateless between calls: the user profile and memberships are
	read from ``directory`` on every request, content comes from ``catalog``.
	"""

	def __init__(
		self,
		catalog: ContentCatalog,
		directory: UserDirectory,
		*,
		clock: Optional[Callable[[], datetime]] = None,
		default_radius_km: float = 50.0,
	) -> None:
		self._catalog = catalog
		self._directory = directory
		self._clock = clock or _utcnow
		self._default_radius_km = default_radius_km

	async def _resolve_context(
		self,
		user_id: str,
		city: Optional[str],
		country: Optional[str],
	) -> Tuple[ranking.FeedContext, Optional[UserContext]]:
		user = await self._directory.get_user(user_id)
		joined: List[Community] = await self._directory.get_user_communities(user_id) if user else []
		origin_country = user.origin_country if user else ""
		located = user is not None and user.has_coordinates()
		ctx = ranking.FeedContext(
			user_id=user_id,
			city=(user.city if user else "") or city or "",
			country=(user.country if user else "") or country or "",
			origin_country=origin_country,
			latitude=user.latitude if located else None,
			longitude=user.longitude if located else None,
			radius_km=user.radius_km if user else self._default_radius_km,
			indigenous_visibility_enabled=user.indigenous_visibility_enabled if user else True,
			homeland_content_enabled=user.homeland_content_enabled if user else True,
			joined=joined,
			affinity_tags=affinity.community_affinity_tags(c.name for c in joined),
			origin_tags=affinity.origin_country_tags.tags_for(origin_country),
		)
		return ctx, user

	def _near_you(self, ctx: ranking.FeedContext, shown: Set[str]) -> SectionResult:
		events = ranking.rank_near_you(self._catalog.events, ctx)
		shown.update(event.id for event in events)
		return _omit_empty(
			NEAR_YOU,
			DiscoverSection(
				title=NEAR_YOU,
				subtitle=f"Events in and around {ctx.city}" if ctx.city else None,
				type="events",
				priority=1,
				items=list(events),
			),
		)

	def _your_communities(self, ctx: ranking.FeedContext, shown: Set[str]) -> SectionResult:
		if not ctx.joined:
			return SectionResult(YOUR_COMMUNITIES)
		events, communities = ranking.community_matches(
			self._catalog.events, self._catalog.communities, ctx.affinity_tags
		)
		shown.update(event.id for event in events)
		return _omit_empty(
			YOUR_COMMUNITIES,
			DiscoverSection(
				title=YOUR_COMMUNITIES,
				subtitle="Events and groups you belong to",
				type="mixed",
				priority=2,
				items=[*events, *communities],
			),
		)

	def _first_nations(self, ctx: ranking.FeedContext, shown: Set[str]) -> SectionResult:
		if not ctx.indigenous_visibility_enabled:
			return SectionResult(FIRST_NATIONS)
		events, items = ranking.first_nations_items(self._catalog)
		shown.update(event.id for event in events)
		return _omit_empty(
			FIRST_NATIONS,
			DiscoverSection(
				title=FIRST_NATIONS,
				subtitle="Celebrating Indigenous culture and businesses",
				type="spotlight",
				priority=3,
				items=items,
			),
		)

	def _from_your_homeland(self, ctx: ranking.FeedContext, shown: Set[str]) -> SectionResult:
		if not ctx.homeland_content_enabled or not ctx.origin_tags:
			return SectionResult(FROM_YOUR_HOMELAND)
		events = ranking.homeland_events(self._catalog.events, ctx.origin_tags)
		shown.update(event.id for event in events)
		return _omit_empty(
			FROM_YOUR_HOMELAND,
			DiscoverSection(
				title=FROM_YOUR_HOMELAND,
				subtitle=f"Content connected to {ctx.origin_country}",
				type="events",
				priority=4,
				items=list(events),
			),
		)

	def _recommended(self, ctx: ranking.FeedContext, shown: Set[str]) -> SectionResult:
		events = ranking.rank_recommended(self._catalog.events, ctx, shown)
		return _omit_empty(
			RECOMMENDED,
			DiscoverSection(
				title=RECOMMENDED,
				subtitle="Personalised picks based on your interests",
				type="events",
				priority=5,
				items=list(events),
			),
		)

	def _trending(self) -> SectionResult:
		return _omit_empty(
			TRENDING,
			DiscoverSection(
				title=TRENDING,
				subtitle="Most popular right now",
				type="events",
				priority=6,
				items=list(ranking.rank_trending(self._catalog.events)),
			),
		)

	async def _explore(self, ctx: ranking.FeedContext) -> SectionResult:
		try:
			communities = await self._directory.get_all_communities()
		except Exception as exc:
			return SectionResult(EXPLORE, error=exc)
		joined_ids = {community.id for community in ctx.joined}
		return _omit_empty(
			EXPLORE,
			DiscoverSection(
				title=EXPLORE,
				subtitle="Discover new groups to join",
				type="communities",
				priority=7,
				items=list(ranking.explore_communities(communities, joined_ids)),
			),
		)

	async def get_feed(
		self,
		user_id: str,
		city: Optional[str] = None,
		country: Optional[str] = None,
	) -> DiscoverFeed:
		"""Return the personalised feed; a missing user falls back to ``city``/``country``."""

		started = time.perf_counter()
		ctx, user = await self._resolve_context(user_id, city, country)
		shown: Set[str] = set()
		# Builders run in priority order; the first four record the events they show.
		results = [
			self._near_you(ctx, shown),
			self._your_communities(ctx, shown),
			self._first_nations(ctx, shown),
			self._from_your_homeland(ctx, shown),
			self._recommended(ctx, shown),
			self._trending(),
			await self._explore(ctx),
		]
		sections: List[DiscoverSection] = []
		for result in results:
			if not result.ok:
				logger.warning("discover.section_omitted section=%s error=%s", result.name, result.error)
				obs_metrics.inc_discover_section_error(result.name)
				continue
			if result.section is not None:
				sections.append(result.section)
		sections.sort(key=lambda section: section.priority)

		feed = DiscoverFeed(
			user_id=user_id,
			city=ctx.city,
			country=ctx.country,
			generated_at=self._clock(),
			sections=sections,
		)
		obs_metrics.inc_discover_feed(user is not None)
		obs_metrics.observe_discover_latency(time.perf_counter() - started)
		obs_metrics.DISCOVER_FEED_ITEMS.set(feed.total_items)
		logger.info(
			"discover.feed user=%s sections=%d items=%d",
			user_id,
			len(feed.sections),
			feed.total_items,
		)
		return feed

	async def get_section(
		self,
		user_id: str,
		section_key: str,
		city: Optional[str] = None,
		country: Optional[str] = None,
	) -> Tuple[Optional[DiscoverSection], DiscoverFeed]:
		"""Return one section of the feed by route key, with the feed it was cut from."""

		title = SECTION_KEYS.get(section_key)
		if title is None:
			raise UnknownSectionError(SECTION_KEYS.keys())
		feed = await self.get_feed(user_id, city, country)
		return feed.section(title), feed
