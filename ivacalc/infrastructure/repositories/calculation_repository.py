"""
SQLAlchemy Implementation of Calculation Repository.
"""

from typing import List, Optional

from ivacalc.domain.models.calculation import IvaCalculation
from ivacalc.domain.repositories.calculation_repository import CalculationRepository
from ivacalc.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyCalculationRepository(SQLAlchemyRepository[IvaCalculation], CalculationRepository):
    """Calculation ledger backed by SQLAlchemy."""

    def list_all(self, limit: Optional[int] = None) -> List[IvaCalculation]:
        query = self.db.query(IvaCalculation).order_by(
            IvaCalculation.created_at.desc(),
            IvaCalculation.id.desc(),
        )
        if limit:
            query = query.limit(limit)
        return query.all()
