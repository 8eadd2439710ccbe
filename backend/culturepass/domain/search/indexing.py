"""Projection of catalog content and user profiles into searchable items."""

from __future__ import annotations

from typing import Iterable, List

from culturepass.domain.catalog.models import (
	Business,
	Community,
	ContentCatalog,
	Event,
	UserContext,
)
from culturepass.domain.search.models import SearchableItem


def _join(*parts: str) -> str:
	return " · ".join(part for part in parts if part)


def event_item(event: Event) -> SearchableItem:
	tags = tuple(tag for tag in (event.community_tag, event.category, *event.indigenous_tags) if tag)
	return SearchableItem(
		id=event.id,
		type="event",
		title=event.title,
		subtitle=_join(event.community_tag, event.venue),
		description=event.description,
		city=event.city,
		country=event.country,
		tags=tags,
		date=event.date or None,
	)


def community_item(community: Community) -> SearchableItem:
	return SearchableItem(
		id=community.id,
		type="community",
		title=community.name,
		subtitle=_join(community.category, f"{community.members} members"),
		description=community.description,
		city=community.city or None,
		country=community.country or None,
		tags=tuple(tag for tag in (community.category,) if tag),
	)


def business_item(business: Business) -> SearchableItem:
	return SearchableItem(
		id=business.id,
		type="business",
		title=business.name,
		subtitle=_join(business.category, business.location),
		description=business.description,
		city=business.city,
		country=business.country,
		tags=tuple(tag for tag in (business.category,) if tag),
	)


def profile_item(user: UserContext) -> SearchableItem:
	return SearchableItem(
		id=user.id,
		type="profile",
		title=user.display_name or user.username or user.id,
		subtitle=f"@{user.username}" if user.username else "",
		city=user.city or None,
		country=user.country or None,
	)


def build_corpus(catalog: ContentCatalog, users: Iterable[UserContext] = ()) -> List[SearchableItem]:
	"""Events, then communities, businesses and profiles, in repository order."""

	items: List[SearchableItem] = [event_item(event) for event in catalog.events]
	items.extend(community_item(community) for community in catalog.communities)
	items.extend(business_item(business) for business in catalog.businesses)
	items.extend(profile_item(user) for user in users)
	return items
