"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from deliberate.domain.model.question import Question
from deliberate.domain.value import Email, QuestionId


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found (active or not), None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Question]:
        """Find every question, newest first.

        Returns:
            All questions ordered by (created_at, id) descending
        """
        pass

    @abstractmethod
    async def find_visible_to(self, email: Email) -> List[Question]:
        """Find active questions whose allow-list contains an email.

        Args:
            email: Normalized email of the principal

        Returns:
            Matching questions ordered by (created_at, id) descending
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or full overwrite).

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question (hard delete).

        Args:
            question_id: The question ID to delete

        Returns:
            True if a question was deleted, False if none existed
        """
        pass
