"""Question routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from deliberate.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
    DeactivateQuestionRequest,
    DeactivateQuestionResponse,
    DeactivateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionResponse,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    UpdateQuestionRequest,
    UpdateQuestionResponse,
    UpdateQuestionUseCase,
)
from deliberate.domain.service import JWTService
from deliberate.interface.api.auth import require_principal

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for creating a question.

    Length bounds are enforced by the domain so that they come back as
    validation errors rather than schema errors.
    """

    title: str
    description: str
    tags: list[str] = Field(default_factory=list)
    allowed_emails: list[str] = Field(default_factory=list)
    is_active: bool = True


class UpdateQuestionAPIRequest(BaseModel):
    """API request for overwriting a question. Every field is required."""

    title: str
    description: str
    tags: list[str]
    allowed_emails: list[str]
    is_active: bool


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ListQuestionsResponse:
    """List the questions the caller may open, newest first.

    Requires authentication.
    """
    principal = require_principal(jwt_service, auth_token)
    return await list_questions_use_case.execute(
        ListQuestionsRequest(principal=principal)
    )


@router.post(
    "", response_model=CreateQuestionResponse, status_code=status.HTTP_201_CREATED
)
async def create_question(
    request: CreateQuestionAPIRequest,
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateQuestionResponse:
    """Create a question.

    Requires an admin session.

    Args:
        request: Question data
        create_question_use_case: Create question use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created question
    """
    principal = require_principal(jwt_service, auth_token)
    return await create_question_use_case.execute(
        CreateQuestionRequest(
            principal=principal,
            title=request.title,
            description=request.description,
            tags=request.tags,
            allowed_emails=request.allowed_emails,
            is_active=request.is_active,
        )
    )


@router.get("/{question_id}", response_model=GetQuestionResponse)
async def get_question(
    question_id: UUID,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetQuestionResponse:
    """Get a question with its solutions, pros/cons and vote state.

    Inactive questions are reported as not found to non-admins; active
    questions the caller is not invited to are reported as access denied.
    """
    principal = require_principal(jwt_service, auth_token)
    return await get_question_use_case.execute(
        GetQuestionRequest(question_id=question_id, principal=principal)
    )


@router.put("/{question_id}", response_model=UpdateQuestionResponse)
async def update_question(
    question_id: UUID,
    request: UpdateQuestionAPIRequest,
    update_question_use_case: FromDishka[UpdateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateQuestionResponse:
    """Overwrite a question's metadata. Requires an admin session."""
    principal = require_principal(jwt_service, auth_token)
    return await update_question_use_case.execute(
        UpdateQuestionRequest(
            principal=principal,
            question_id=question_id,
            title=request.title,
            description=request.description,
            tags=request.tags,
            allowed_emails=request.allowed_emails,
            is_active=request.is_active,
        )
    )


@router.post("/{question_id}/deactivate", response_model=DeactivateQuestionResponse)
async def deactivate_question(
    question_id: UUID,
    deactivate_question_use_case: FromDishka[DeactivateQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeactivateQuestionResponse:
    """Hide a question from everyone but admins. Requires an admin session."""
    principal = require_principal(jwt_service, auth_token)
    return await deactivate_question_use_case.execute(
        DeactivateQuestionRequest(principal=principal, question_id=question_id)
    )


@router.delete("/{question_id}", response_model=DeleteQuestionResponse)
async def delete_question(
    question_id: UUID,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteQuestionResponse:
    """Delete a question with its solutions, pros/cons and votes.

    Requires an admin session.
    """
    principal = require_principal(jwt_service, auth_token)
    return await delete_question_use_case.execute(
        DeleteQuestionRequest(principal=principal, question_id=question_id)
    )
