"""PostgreSQL implementation of ProCon repository."""

from typing import List, Optional, Sequence

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from deliberate.domain.model import ProCon
from deliberate.domain.repository import ProConRepository
from deliberate.domain.value import ProConId, SolutionId
from deliberate.persistence.mappers import procon_to_dict, row_to_procon
from deliberate.persistence.tables import procons_table


class PostgresProConRepository(ProConRepository):
    """PostgreSQL implementation of ProConRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, procon_id: ProConId) -> Optional[ProCon]:
        """Find a pro/con by ID."""
        stmt = select(procons_table).where(procons_table.c.id == procon_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_procon(row._asdict()) if row else None

    async def find_by_solutions(
        self, solution_ids: Sequence[SolutionId]
    ) -> List[ProCon]:
        """Find pros and cons of several solutions (batch query)."""
        if not solution_ids:
            return []

        stmt = (
            select(procons_table)
            .where(procons_table.c.solution_id.in_(solution_ids))
            .order_by(procons_table.c.created_at.asc(), procons_table.c.id.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_procon(row._asdict()) for row in result.fetchall()]

    async def save(self, procon: ProCon) -> ProCon:
        """Save a pro/con (create only; pros and cons are never edited)."""
        stmt = insert(procons_table).values(**procon_to_dict(procon))
        await self.session.execute(stmt)
        await self.session.flush()
        return procon

    async def delete_by_ids(self, procon_ids: Sequence[ProConId]) -> int:
        """Delete pros/cons in bulk."""
        if not procon_ids:
            return 0

        stmt = delete(procons_table).where(procons_table.c.id.in_(procon_ids))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
