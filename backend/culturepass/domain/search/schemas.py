"""Pydantic schemas for the Search API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SearchableItemOut(CamelModel):
	id: str
	type: str
	title: str
	subtitle: str
	description: Optional[str] = None
	city: Optional[str] = None
	country: Optional[str] = None
	tags: list[str] = Field(default_factory=list)
	date: Optional[str] = None


class SearchResponse(CamelModel):
	total: int = Field(..., ge=0)
	page: int = Field(..., ge=1)
	page_size: int = Field(..., ge=1, le=50)
	results: list[SearchableItemOut] = Field(default_factory=list)
	cached: bool = False


class SuggestResponse(CamelModel):
	suggestions: list[str] = Field(default_factory=list)
	cached: bool = False
