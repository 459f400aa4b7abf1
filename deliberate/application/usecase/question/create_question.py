"""Create question use case."""

from pydantic import BaseModel, Field

from deliberate.application.usecase.base import BaseUseCase
from deliberate.application.usecase.common import QuestionItem
from deliberate.domain.model import Principal
from deliberate.domain.service import QuestionService


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    principal: Principal
    title: str
    description: str
    tags: list[str] = Field(default_factory=list)
    allowed_emails: list[str] = Field(default_factory=list)
    is_active: bool = True


class CreateQuestionResponse(QuestionItem):
    """Create question response (the stored question)."""


class CreateQuestionUseCase(BaseUseCase):
    """Use case for posting a new question (admins only)."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        """Execute create question flow.

        Args:
            request: Create question request

        Returns:
            Created question

        Raises:
            NotAdminError: If the principal is not an admin
            ValidationError: If a field is blank, too long or malformed
        """
        question = await self.question_service.create_question(
            principal=request.principal,
            title=request.title,
            description=request.description,
            tags=request.tags,
            allowed_emails=request.allowed_emails,
            is_active=request.is_active,
        )
        item = QuestionItem.from_domain(question, include_emails=True)
        return CreateQuestionResponse(**item.model_dump())
