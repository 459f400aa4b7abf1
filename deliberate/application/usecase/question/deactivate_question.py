"""Deactivate question use case."""

from uuid import UUID

from pydantic import BaseModel

from deliberate.application.usecase.base import BaseUseCase
from deliberate.application.usecase.common import QuestionItem
from deliberate.domain.model import Principal
from deliberate.domain.service import QuestionService
from deliberate.domain.value import QuestionId


class DeactivateQuestionRequest(BaseModel):
    """Deactivate question request."""

    principal: Principal
    question_id: UUID


class DeactivateQuestionResponse(QuestionItem):
    """Deactivate question response."""


class DeactivateQuestionUseCase(BaseUseCase):
    """Use case for hiding a question from everyone but admins."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(
        self, request: DeactivateQuestionRequest
    ) -> DeactivateQuestionResponse:
        """Execute deactivate question flow.

        Deactivating an inactive question returns it unchanged.

        Raises:
            NotAdminError: If the principal is not an admin
            NotFoundError: If the question does not exist
        """
        question = await self.question_service.deactivate_question(
            request.principal, QuestionId(request.question_id)
        )
        item = QuestionItem.from_domain(question, include_emails=True)
        return DeactivateQuestionResponse(**item.model_dump())
