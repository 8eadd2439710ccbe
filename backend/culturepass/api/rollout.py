"""Rollout configuration endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from culturepass.api.deps import get_rollout_service
from culturepass.domain.rollout import schemas
from culturepass.domain.rollout.service import RolloutService

router = APIRouter(prefix="/api/rollout", tags=["rollout"])


@router.get("/config", response_model=schemas.RolloutResponse)
async def rollout_config_endpoint(
	user_id: str = Query(default="guest", alias="userId"),
	service: RolloutService = Depends(get_rollout_service),
) -> schemas.RolloutResponse:
	user_id = user_id.strip() or "guest"
	return schemas.RolloutResponse(
		user_id=user_id,
		rollout=schemas.RolloutConfigOut(
			phase=service.config.phase,
			percentage=service.config.percentage,
		),
		flags=service.flags_for(user_id),
	)
