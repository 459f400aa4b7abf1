"""Question use cases."""

from .create_question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
)
from .deactivate_question import (
    DeactivateQuestionRequest,
    DeactivateQuestionResponse,
    DeactivateQuestionUseCase,
)
from .delete_question import (
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
)
from .get_question import GetQuestionRequest, GetQuestionResponse, GetQuestionUseCase
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from .update_question import (
    UpdateQuestionRequest,
    UpdateQuestionResponse,
    UpdateQuestionUseCase,
)

__all__ = [
    "CreateQuestionRequest",
    "CreateQuestionResponse",
    "CreateQuestionUseCase",
    "DeactivateQuestionRequest",
    "DeactivateQuestionResponse",
    "DeactivateQuestionUseCase",
    "DeleteQuestionRequest",
    "DeleteQuestionResponse",
    "DeleteQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionResponse",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "UpdateQuestionRequest",
    "UpdateQuestionResponse",
    "UpdateQuestionUseCase",
]
