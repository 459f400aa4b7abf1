"""In-memory solution repository for testing."""

from typing import Optional, Sequence

from deliberate.domain.model.solution import Solution
from deliberate.domain.repository.solution import SolutionRepository
from deliberate.domain.value import QuestionId, SolutionId


class InMemorySolutionRepository(SolutionRepository):
    """In-memory implementation of SolutionRepository for testing."""

    def __init__(self) -> None:
        self._solutions: dict[SolutionId, Solution] = {}

    async def find_by_id(self, solution_id: SolutionId) -> Optional[Solution]:
        """Find a solution by ID."""
        return self._solutions.get(solution_id)

    async def find_by_question(self, question_id: QuestionId) -> list[Solution]:
        """Find all solutions of a question, oldest first."""
        solutions = [
            s for s in self._solutions.values() if s.question_id == question_id
        ]
        solutions.sort(key=lambda s: (s.created_at, str(s.id)))
        return solutions

    async def find_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> list[Solution]:
        """Find the solutions of several questions."""
        wanted = set(question_ids)
        return [s for s in self._solutions.values() if s.question_id in wanted]

    async def save(self, solution: Solution) -> Solution:
        """Save a solution."""
        self._solutions[solution.id] = solution
        return solution

    async def delete_by_ids(self, solution_ids: Sequence[SolutionId]) -> int:
        """Delete solutions in bulk."""
        deleted = 0
        for solution_id in solution_ids:
            if self._solutions.pop(solution_id, None) is not None:
                deleted += 1
        return deleted
