"""Solution and pro/con routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from deliberate.application.usecase.procon import (
    CreateProConRequest,
    CreateProConResponse,
    CreateProConUseCase,
)
from deliberate.application.usecase.solution import (
    CreateSolutionRequest,
    CreateSolutionResponse,
    CreateSolutionUseCase,
)
from deliberate.domain.service import JWTService
from deliberate.domain.value import Polarity
from deliberate.interface.api.auth import require_principal

router = APIRouter(tags=["solutions"], route_class=DishkaRoute)


class CreateSolutionAPIRequest(BaseModel):
    """API request for proposing a solution."""

    title: str
    content: str


class CreateProConAPIRequest(BaseModel):
    """API request for adding a pro or a con."""

    content: str


@router.post(
    "/questions/{question_id}/solutions",
    response_model=CreateSolutionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_solution(
    question_id: UUID,
    request: CreateSolutionAPIRequest,
    create_solution_use_case: FromDishka[CreateSolutionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateSolutionResponse:
    """Propose a solution to a question.

    Requires an invited (or admin) session.

    Args:
        question_id: Question UUID
        request: Solution data
        create_solution_use_case: Create solution use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created solution with empty pros and cons
    """
    principal = require_principal(jwt_service, auth_token)
    return await create_solution_use_case.execute(
        CreateSolutionRequest(
            principal=principal,
            question_id=question_id,
            title=request.title,
            content=request.content,
        )
    )


@router.post(
    "/solutions/{solution_id}/pros",
    response_model=CreateProConResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_pro(
    solution_id: UUID,
    request: CreateProConAPIRequest,
    create_procon_use_case: FromDishka[CreateProConUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateProConResponse:
    """Add a pro to a solution."""
    principal = require_principal(jwt_service, auth_token)
    return await create_procon_use_case.execute(
        CreateProConRequest(
            principal=principal,
            solution_id=solution_id,
            polarity=Polarity.PRO,
            content=request.content,
        )
    )


@router.post(
    "/solutions/{solution_id}/cons",
    response_model=CreateProConResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_con(
    solution_id: UUID,
    request: CreateProConAPIRequest,
    create_procon_use_case: FromDishka[CreateProConUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateProConResponse:
    """Add a con to a solution."""
    principal = require_principal(jwt_service, auth_token)
    return await create_procon_use_case.execute(
        CreateProConRequest(
            principal=principal,
            solution_id=solution_id,
            polarity=Polarity.CON,
            content=request.content,
        )
    )
