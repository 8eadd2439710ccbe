"""Pydantic schemas for the Discover API."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SectionType = Literal["events", "communities", "businesses", "activities", "spotlight", "mixed"]


class CamelModel(BaseModel):
	"""Snake_case attributes, camelCase JSON."""

	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DiscoverSectionOut(CamelModel):
	title: str
	subtitle: Optional[str] = None
	type: SectionType
	items: list[dict[str, Any]] = Field(default_factory=list)
	priority: int


class DiscoverMeta(CamelModel):
	user_id: str
	city: str
	country: str
	generated_at: datetime
	total_items: int = Field(..., ge=0)
	algorithm_version: str


class DiscoverFeedResponse(CamelModel):
	sections: list[DiscoverSectionOut]
	meta: DiscoverMeta


class DiscoverSectionResponse(CamelModel):
	section: Optional[DiscoverSectionOut] = None
	meta: DiscoverMeta
