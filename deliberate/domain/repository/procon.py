"""Pro/con repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from deliberate.domain.model.procon import ProCon
from deliberate.domain.value import ProConId, SolutionId


class ProConRepository(ABC):
    """Repository for ProCon entity (the votable items)."""

    @abstractmethod
    async def find_by_id(self, procon_id: ProConId) -> Optional[ProCon]:
        """Find a pro/con by ID.

        Args:
            procon_id: The pro/con's unique identifier

        Returns:
            The pro/con if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_solutions(
        self, solution_ids: Sequence[SolutionId]
    ) -> List[ProCon]:
        """Find pros and cons of several solutions (batch query).

        Args:
            solution_ids: Parent solution IDs

        Returns:
            Pros and cons ordered by (created_at, id) ascending
        """
        pass

    @abstractmethod
    async def save(self, procon: ProCon) -> ProCon:
        """Save a pro/con.

        Args:
            procon: The pro/con to save

        Returns:
            The saved pro/con
        """
        pass

    @abstractmethod
    async def delete_by_ids(self, procon_ids: Sequence[ProConId]) -> int:
        """Delete pros/cons in bulk.

        Args:
            procon_ids: IDs to delete

        Returns:
            Number of deleted rows
        """
        pass
