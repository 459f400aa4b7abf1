"""Delete question use case."""

from uuid import UUID

from pydantic import BaseModel

from deliberate.application.usecase.base import BaseUseCase
from deliberate.domain.model import Principal
from deliberate.domain.service import QuestionService
from deliberate.domain.value import QuestionId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    principal: Principal
    question_id: UUID


class DeleteQuestionResponse(BaseModel):
    """Delete question response."""

    success: bool


class DeleteQuestionUseCase(BaseUseCase):
    """Use case for deleting a question and everything beneath it."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: DeleteQuestionRequest) -> DeleteQuestionResponse:
        """Execute delete question flow.

        Raises:
            NotAdminError: If the principal is not an admin
            NotFoundError: If the question does not exist
        """
        await self.question_service.delete_question(
            request.principal, QuestionId(request.question_id)
        )
        return DeleteQuestionResponse(success=True)
