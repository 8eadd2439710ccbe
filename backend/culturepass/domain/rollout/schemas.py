"""Pydantic schemas for the rollout config endpoint."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RolloutConfigOut(CamelModel):
	phase: str
	percentage: int = Field(..., ge=0, le=100)


class RolloutResponse(CamelModel):
	user_id: str
	rollout: RolloutConfigOut
	flags: dict[str, bool] = Field(default_factory=dict)
