"""
Calculation Repository Interface.
The ledger only grows: there is no update or delete.
"""

from typing import List, Optional

from ivacalc.domain.repositories.base import BaseRepository
from ivacalc.domain.models.calculation import IvaCalculation


class CalculationRepository(BaseRepository[IvaCalculation]):
    """Interface for ledger queries."""

    def list_all(self, limit: Optional[int] = None) -> List[IvaCalculation]:
        """All calculations, most recent first, optionally truncated."""
        ...
