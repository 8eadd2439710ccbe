"""Scoring and selection rules for the individual discover sections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Set

from culturepass.domain.catalog.models import (
	Activity,
	Business,
	Community,
	ContentCatalog,
	ContentItem,
	Event,
)
from culturepass.domain.discover import geo
from culturepass.domain.discover.affinity import tag_overlaps

NEAR_YOU_LIMIT = 10
RECOMMENDED_LIMIT = 15
TRENDING_LIMIT = 10
EXPLORE_LIMIT = 10

CITY_MATCH_SCORE = 10.0
COUNTRY_MATCH_SCORE = 5.0
PROXIMITY_MAX_BOOST = 10.0


@dataclass(slots=True)
class FeedContext:
	"""Personalisation inputs resolved once per feed request."""

	user_id: str
	city: str = ""
	country: str = ""
	origin_country: str = ""
	latitude: Optional[float] = None
	longitude: Optional[float] = None
	radius_km: float = 50.0
	indigenous_visibility_enabled: bool = True
	homeland_content_enabled: bool = True
	joined: List[Community] = field(default_factory=list)
	affinity_tags: List[str] = field(default_factory=list)
	origin_tags: List[str] = field(default_factory=list)

	def has_coordinates(self) -> bool:
		return self.latitude is not None and self.longitude is not None


def _same(a: str, b: str) -> bool:
	return bool(a) and a.lower() == b.lower()


def near_you_score(event: Event, ctx: FeedContext) -> float:
	score = 0.0
	if _same(ctx.city, event.city):
		score = CITY_MATCH_SCORE
	elif _same(ctx.country, event.country):
		score = COUNTRY_MATCH_SCORE
	if ctx.has_coordinates():
		coords = geo.city_coordinates(event.city, event.country)
		if coords is not None:
			distance = geo.distance_km(ctx.latitude, ctx.longitude, coords[0], coords[1])  # type: ignore[arg-type]
			if distance <= ctx.radius_km:
				score += max(0.0, PROXIMITY_MAX_BOOST - distance / 10.0)
	return score


def rank_near_you(events: Sequence[Event], ctx: FeedContext, *, limit: int = NEAR_YOU_LIMIT) -> List[Event]:
	scored = [(near_you_score(event, ctx), event) for event in events]
	kept = [row for row in scored if row[0] > 0]
	kept.sort(key=lambda row: row[0], reverse=True)
	return [event for _, event in kept[:limit]]


def community_matches(
	events: Sequence[Event],
	communities: Sequence[Community],
	affinity_tags: Sequence[str],
) -> tuple[List[Event], List[Community]]:
	"""Events whose community tag and communities whose name overlap the affinity tags."""

	if not affinity_tags:
		return [], []
	matched_events = [event for event in events if tag_overlaps(event.community_tag, affinity_tags)]
	matched_communities = [c for c in communities if tag_overlaps(c.name, affinity_tags)]
	return matched_events, matched_communities


def first_nations_items(catalog: ContentCatalog) -> tuple[List[Event], List[ContentItem]]:
	"""Indigenous events plus every other spotlight-worthy item, in display order."""

	events = [event for event in catalog.events if event.is_indigenous]
	businesses: List[Business] = [b for b in catalog.businesses if b.is_indigenous_owned]
	activities: List[Activity] = [a for a in catalog.activities if a.indigenous_tags]
	items: List[ContentItem] = [*events, *catalog.spotlights, *businesses, *activities]
	return events, items


def homeland_events(events: Sequence[Event], origin_tags: Sequence[str]) -> List[Event]:
	wanted = {tag.lower() for tag in origin_tags}
	if not wanted:
		return []
	return [event for event in events if event.community_tag.lower() in wanted]


def recommended_score(event: Event, ctx: FeedContext) -> int:
	score = 0
	if _same(ctx.city, event.city):
		score += 5
	if _same(ctx.country, event.country):
		score += 3
	if tag_overlaps(event.community_tag, ctx.affinity_tags):
		score += 2
	if ctx.indigenous_visibility_enabled and event.is_indigenous:
		score += 1
	if event.is_featured:
		score += 1
	return score


def rank_recommended(
	events: Sequence[Event],
	ctx: FeedContext,
	shown_event_ids: Set[str],
	*,
	limit: int = RECOMMENDED_LIMIT,
) -> List[Event]:
	scored = [(recommended_score(event, ctx), event) for event in events if event.id not in shown_event_ids]
	scored.sort(key=lambda row: row[0], reverse=True)
	return [event for _, event in scored[:limit]]


def rank_trending(events: Sequence[Event], *, limit: int = TRENDING_LIMIT) -> List[Event]:
	return sorted(events, key=lambda event: event.attending, reverse=True)[:limit]


def explore_communities(
	communities: Iterable[Community],
	joined_ids: Set[str],
	*,
	limit: int = EXPLORE_LIMIT,
) -> List[Community]:
	return [community for community in communities if community.id not in joined_ids][:limit]
