"""
API Dependencies.
Repositories are built per request around the request's session.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from ivacalc.infrastructure.database import get_db
from ivacalc.domain.models.product import Product
from ivacalc.domain.models.calculation import IvaCalculation
from ivacalc.domain.repositories.product_repository import ProductRepository
from ivacalc.domain.repositories.calculation_repository import CalculationRepository
from ivacalc.infrastructure.repositories.product_repository import SQLAlchemyProductRepository
from ivacalc.infrastructure.repositories.calculation_repository import SQLAlchemyCalculationRepository


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    """Get product repository instance."""
    return SQLAlchemyProductRepository(db, Product)


def get_calculation_repository(db: Session = Depends(get_db)) -> CalculationRepository:
    """Get calculation ledger instance."""
    return SQLAlchemyCalculationRepository(db, IvaCalculation)
