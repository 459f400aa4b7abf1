"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, StrictInt

from deliberate.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from deliberate.domain.service import JWTService
from deliberate.interface.api.auth import require_principal

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for casting a vote (+1 or -1)."""

    value: StrictInt


@router.post("/procons/{procon_id}/vote", response_model=CastVoteResponse)
async def cast_vote(
    procon_id: UUID,
    request: CastVoteAPIRequest,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Vote on a pro or con.

    Casting the value already held is a no-op; a different value overwrites
    it. Votes cannot be withdrawn.

    Args:
        procon_id: Pro/con UUID
        request: Vote value
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        New tally and the caller's current vote
    """
    principal = require_principal(jwt_service, auth_token)
    return await cast_vote_use_case.execute(
        CastVoteRequest(principal=principal, procon_id=procon_id, value=request.value)
    )
