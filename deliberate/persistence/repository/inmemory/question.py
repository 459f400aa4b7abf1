"""In-memory question repository for testing."""

from typing import Optional

from deliberate.domain.model.question import Question
from deliberate.domain.repository.question import QuestionRepository
from deliberate.domain.value import Email, QuestionId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def find_all(self) -> list[Question]:
        """Find every question, newest first."""
        return self._newest_first(self._questions.values())

    async def find_visible_to(self, email: Email) -> list[Question]:
        """Find active questions listing an email."""
        return self._newest_first(
            q for q in self._questions.values() if q.is_active and q.allows(email)
        )

    async def save(self, question: Question) -> Question:
        """Save a question."""
        self._questions[question.id] = question
        return question

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question."""
        return self._questions.pop(question_id, None) is not None

    @staticmethod
    def _newest_first(questions) -> list[Question]:
        return sorted(questions, key=lambda q: (q.created_at, str(q.id)), reverse=True)
