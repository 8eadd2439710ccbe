"""Content and user models read by the discover and search services."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Dict, Optional, Tuple, Union

from pydantic.alias_generators import to_camel


@dataclass(slots=True)
class Event:
	id: str
	title: str
	description: str
	date: str
	venue: str
	category: str
	community_tag: str
	city: str
	country: str
	attending: int = 0
	is_featured: bool = False
	indigenous_tags: Tuple[str, ...] = ()
	price_label: str = ""

	kind: ClassVar[str] = "event"

	@property
	def is_indigenous(self) -> bool:
		return bool(self.indigenous_tags)


@dataclass(slots=True)
class Community:
	id: str
	name: str
	description: str = ""
	category: str = ""
	members: int = 0
	city: str = ""
	country: str = ""
	is_indigenous: bool = False

	kind: ClassVar[str] = "community"


@dataclass(slots=True)
class Business:
	id: str
	name: str
	description: str
	category: str
	location: str
	city: str
	country: str
	rating: float = 0.0
	is_indigenous_owned: bool = False

	kind: ClassVar[str] = "business"


@dataclass(slots=True)
class Activity:
	id: str
	name: str
	description: str
	category: str
	location: str
	city: str
	country: str
	indigenous_tags: Tuple[str, ...] = ()

	kind: ClassVar[str] = "activity"


@dataclass(slots=True)
class Spotlight:
	"""Editorial feature pointing at an Indigenous artist, business, event or community."""

	id: str
	spotlight_type: str
	title: str
	subtitle: str
	description: str
	link_id: str
	link_type: str
	nation: Optional[str] = None

	kind: ClassVar[str] = "spotlight"


ContentItem = Union[Event, Community, Business, Activity, Spotlight]


def to_payload(item: ContentItem) -> Dict[str, Any]:
	"""JSON-ready projection of a content item with camelCase keys, discriminated by ``kind``."""
	payload = {to_camel(key): value for key, value in asdict(item).items()}
	payload["kind"] = item.kind
	return payload


@dataclass(slots=True)
class UserContext:
	"""Read-only snapshot of the profile fields that drive personalisation."""

	id: str
	display_name: str = ""
	username: str = ""
	city: str = ""
	country: str = ""
	origin_country: str = ""
	latitude: Optional[float] = None
	longitude: Optional[float] = None
	radius_km: float = 50.0
	indigenous_visibility_enabled: bool = True
	homeland_content_enabled: bool = True

	def has_coordinates(self) -> bool:
		return self.latitude is not None and self.longitude is not None


@dataclass(slots=True)
class ContentCatalog:
	"""Static content collections, kept in repository order."""

	events: Tuple[Event, ...] = ()
	communities: Tuple[Community, ...] = ()
	businesses: Tuple[Business, ...] = ()
	activities: Tuple[Activity, ...] = ()
	spotlights: Tuple[Spotlight, ...] = ()
