"""Solution repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from deliberate.domain.model.solution import Solution
from deliberate.domain.value import QuestionId, SolutionId


class SolutionRepository(ABC):
    """Repository for Solution entity."""

    @abstractmethod
    async def find_by_id(self, solution_id: SolutionId) -> Optional[Solution]:
        """Find a solution by ID.

        Args:
            solution_id: The solution's unique identifier

        Returns:
            The solution if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[Solution]:
        """Find all solutions of a question.

        Args:
            question_id: Parent question ID

        Returns:
            Solutions ordered by (created_at, id) ascending
        """
        pass

    @abstractmethod
    async def find_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> List[Solution]:
        """Find the solutions of several questions (batch query).

        Args:
            question_ids: Parent question IDs

        Returns:
            Solutions of every listed question, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, solution: Solution) -> Solution:
        """Save a solution (create or update).

        Args:
            solution: The solution to save

        Returns:
            The saved solution
        """
        pass

    @abstractmethod
    async def delete_by_ids(self, solution_ids: Sequence[SolutionId]) -> int:
        """Delete solutions in bulk.

        Args:
            solution_ids: IDs to delete

        Returns:
            Number of deleted rows
        """
        pass
