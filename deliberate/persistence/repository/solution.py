"""PostgreSQL implementation of Solution repository."""

from typing import List, Optional, Sequence

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from deliberate.domain.model import Solution
from deliberate.domain.repository import SolutionRepository
from deliberate.domain.value import QuestionId, SolutionId
from deliberate.persistence.mappers import row_to_solution, solution_to_dict
from deliberate.persistence.tables import solutions_table


class PostgresSolutionRepository(SolutionRepository):
    """PostgreSQL implementation of SolutionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, solution_id: SolutionId) -> Optional[Solution]:
        """Find a solution by ID."""
        stmt = select(solutions_table).where(solutions_table.c.id == solution_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_solution(row._asdict()) if row else None

    async def find_by_question(self, question_id: QuestionId) -> List[Solution]:
        """Find all solutions of a question, oldest first."""
        stmt = (
            select(solutions_table)
            .where(solutions_table.c.question_id == question_id)
            .order_by(solutions_table.c.created_at.asc(), solutions_table.c.id.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_solution(row._asdict()) for row in result.fetchall()]

    async def find_by_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> List[Solution]:
        """Find the solutions of several questions in one query."""
        if not question_ids:
            return []

        stmt = select(solutions_table).where(
            solutions_table.c.question_id.in_(question_ids)
        )
        result = await self.session.execute(stmt)
        return [row_to_solution(row._asdict()) for row in result.fetchall()]

    async def save(self, solution: Solution) -> Solution:
        """Save a solution (create or update)."""
        existing = await self.find_by_id(solution.id)
        solution_dict = solution_to_dict(solution)

        if existing:
            stmt = (
                update(solutions_table)
                .where(solutions_table.c.id == solution.id)
                .values(**solution_dict)
            )
        else:
            stmt = insert(solutions_table).values(**solution_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return solution

    async def delete_by_ids(self, solution_ids: Sequence[SolutionId]) -> int:
        """Delete solutions in bulk."""
        if not solution_ids:
            return 0

        stmt = delete(solutions_table).where(solutions_table.c.id.in_(solution_ids))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
