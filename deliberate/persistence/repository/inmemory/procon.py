"""In-memory pro/con repository for testing."""

from typing import Optional, Sequence

from deliberate.domain.model.procon import ProCon
from deliberate.domain.repository.procon import ProConRepository
from deliberate.domain.value import ProConId, SolutionId


class InMemoryProConRepository(ProConRepository):
    """In-memory implementation of ProConRepository for testing."""

    def __init__(self) -> None:
        self._procons: dict[ProConId, ProCon] = {}

    async def find_by_id(self, procon_id: ProConId) -> Optional[ProCon]:
        """Find a pro/con by ID."""
        return self._procons.get(procon_id)

    async def find_by_solutions(
        self, solution_ids: Sequence[SolutionId]
    ) -> list[ProCon]:
        """Find pros and cons of several solutions (batch query)."""
        if not solution_ids:
            return []

        wanted = set(solution_ids)
        procons = [p for p in self._procons.values() if p.solution_id in wanted]
        procons.sort(key=lambda p: (p.created_at, str(p.id)))
        return procons

    async def save(self, procon: ProCon) -> ProCon:
        """Save a pro/con."""
        self._procons[procon.id] = procon
        return procon

    async def delete_by_ids(self, procon_ids: Sequence[ProConId]) -> int:
        """Delete pros/cons in bulk."""
        deleted = 0
        for procon_id in procon_ids:
            if self._procons.pop(procon_id, None) is not None:
                deleted += 1
        return deleted
