"""Votable store: solutions and the pros/cons beneath them."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire

from deliberate.domain.model import ProCon, Solution
from deliberate.domain.model.common import utcnow
from deliberate.domain.repository import ProConRepository, SolutionRepository
from deliberate.domain.value import (
    Polarity,
    ProConId,
    QuestionId,
    SolutionId,
    UserId,
)

from .base import Service


class VotableStore(Service):
    """Domain service for persisting votable items and their parents.

    Holds no vote state; tallies live in the vote ledger.
    """

    def __init__(
        self,
        solution_repository: SolutionRepository,
        procon_repository: ProConRepository,
    ) -> None:
        """Initialize votable store.

        Args:
            solution_repository: Solution repository
            procon_repository: Pro/con repository
        """
        self.solution_repository = solution_repository
        self.procon_repository = procon_repository

    async def add_solution(
        self,
        question_id: QuestionId,
        author_id: UserId,
        title: str,
        content: str,
    ) -> Solution:
        """Create a solution under a question.

        Args:
            question_id: Parent question ID
            author_id: Author user ID
            title: Solution title
            content: Solution body

        Returns:
            Created solution
        """
        with logfire.span(
            "votable_store.add_solution",
            question_id=str(question_id),
            author_id=str(author_id),
        ):
            now = utcnow()
            solution = Solution(
                id=SolutionId(uuid4()),
                question_id=question_id,
                author_id=author_id,
                title=title,
                content=content,
                is_active=True,
                created_at=now,
                updated_at=now,
            )
            saved = await self.solution_repository.save(solution)
            logfire.info(
                "Solution created",
                solution_id=str(saved.id),
                question_id=str(question_id),
            )
            return saved

    async def add_procon(
        self,
        solution_id: SolutionId,
        author_id: UserId,
        polarity: Polarity,
        content: str,
    ) -> ProCon:
        """Create a pro or con under a solution.

        Args:
            solution_id: Parent solution ID
            author_id: Author user ID
            polarity: Pro or con
            content: Argument text

        Returns:
            Created pro/con
        """
        with logfire.span(
            "votable_store.add_procon",
            solution_id=str(solution_id),
            author_id=str(author_id),
            polarity=polarity.value,
        ):
            now = utcnow()
            procon = ProCon(
                id=ProConId(uuid4()),
                solution_id=solution_id,
                author_id=author_id,
                polarity=polarity,
                content=content,
                created_at=now,
                updated_at=now,
            )
            saved = await self.procon_repository.save(procon)
            logfire.info(
                "Pro/con created",
                procon_id=str(saved.id),
                solution_id=str(solution_id),
                polarity=polarity.value,
            )
            return saved

    async def get_solution(self, solution_id: SolutionId) -> Solution | None:
        """Get a solution by ID.

        Args:
            solution_id: Solution ID

        Returns:
            Solution if found, None otherwise
        """
        solution = await self.solution_repository.find_by_id(solution_id)
        if not solution:
            logfire.warn("Solution not found", solution_id=str(solution_id))
        return solution

    async def get_procon(self, procon_id: ProConId) -> ProCon | None:
        """Get a pro/con by ID.

        Args:
            procon_id: Pro/con ID

        Returns:
            Pro/con if found, None otherwise
        """
        procon = await self.procon_repository.find_by_id(procon_id)
        if not procon:
            logfire.warn("Pro/con not found", procon_id=str(procon_id))
        return procon

    async def list_solutions(self, question_id: QuestionId) -> list[Solution]:
        """Solutions of a question, oldest first.

        Args:
            question_id: Question ID

        Returns:
            Solutions ordered by (created_at, id)
        """
        solutions = await self.solution_repository.find_by_question(question_id)
        return sorted(solutions, key=_creation_order)

    async def list_solutions_for_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> list[Solution]:
        """Solutions of several questions, for batch reads.

        Args:
            question_ids: Question IDs

        Returns:
            Solutions of every listed question, oldest first
        """
        if not question_ids:
            return []
        solutions = await self.solution_repository.find_by_questions(question_ids)
        return sorted(solutions, key=_creation_order)

    async def list_procons(self, solution_ids: Sequence[SolutionId]) -> list[ProCon]:
        """Pros and cons of several solutions, oldest first.

        Args:
            solution_ids: Solution IDs

        Returns:
            Pros and cons ordered by (created_at, id)
        """
        if not solution_ids:
            return []
        procons = await self.procon_repository.find_by_solutions(solution_ids)
        return sorted(procons, key=_creation_order)

    async def remove_for_question(self, question_id: QuestionId) -> list[ProConId]:
        """Delete every solution and pro/con under a question.

        Args:
            question_id: Question being deleted

        Returns:
            IDs of the deleted pros/cons, so their votes can be purged
        """
        with logfire.span(
            "votable_store.remove_for_question", question_id=str(question_id)
        ):
            solutions = await self.solution_repository.find_by_question(question_id)
            solution_ids = [s.id for s in solutions]
            procons = (
                await self.procon_repository.find_by_solutions(solution_ids)
                if solution_ids
                else []
            )
            procon_ids = [p.id for p in procons]

            await self.procon_repository.delete_by_ids(procon_ids)
            await self.solution_repository.delete_by_ids(solution_ids)

            logfire.info(
                "Votable items removed",
                question_id=str(question_id),
                solutions=len(solution_ids),
                procons=len(procon_ids),
            )
            return procon_ids


def _creation_order(item: Solution | ProCon) -> tuple[datetime, str]:
    # id breaks ties between rows created within the same timestamp
    return (item.created_at, str(item.id))
