"""Update question use case."""

from uuid import UUID

from pydantic import BaseModel

from deliberate.application.usecase.base import BaseUseCase
from deliberate.application.usecase.common import QuestionItem
from deliberate.domain.model import Principal
from deliberate.domain.service import QuestionService
from deliberate.domain.value import QuestionId


class UpdateQuestionRequest(BaseModel):
    """Update question request.

    Every field is required: the stored question is overwritten, not merged.
    """

    principal: Principal
    question_id: UUID
    title: str
    description: str
    tags: list[str]
    allowed_emails: list[str]
    is_active: bool


class UpdateQuestionResponse(QuestionItem):
    """Update question response."""


class UpdateQuestionUseCase(BaseUseCase):
    """Use case for editing question metadata (admins only)."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: UpdateQuestionRequest) -> UpdateQuestionResponse:
        """Execute update question flow.

        Raises:
            NotAdminError: If the principal is not an admin
            ValidationError: If a field is blank, too long or malformed
            NotFoundError: If the question does not exist
        """
        question = await self.question_service.update_question(
            principal=request.principal,
            question_id=QuestionId(request.question_id),
            title=request.title,
            description=request.description,
            tags=request.tags,
            allowed_emails=request.allowed_emails,
            is_active=request.is_active,
        )
        item = QuestionItem.from_domain(question, include_emails=True)
        return UpdateQuestionResponse(**item.model_dump())
