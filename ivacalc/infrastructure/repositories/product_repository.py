"""
SQLAlchemy Implementation of Product Repository.
"""

from typing import List, Optional

from sqlalchemy import func

from ivacalc.domain.models.product import Product
from ivacalc.domain.repositories.product_repository import ProductRepository
from ivacalc.infrastructure.repositories.base_repository import SQLAlchemyRepository


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SQLAlchemyProductRepository(SQLAlchemyRepository[Product], ProductRepository):
    """Product repository implementation using SQLAlchemy."""

    def get_by_name(self, name: str) -> Optional[Product]:
        return (
            self.db.query(Product)
            .filter(func.lower(Product.name) == name.lower())
            .first()
        )

    def search_by_name(self, query: str) -> List[Product]:
        pattern = f"%{_escape_like(query.lower())}%"
        return (
            self.db.query(Product)
            .filter(func.lower(Product.name).like(pattern, escape="\\"))
            .order_by(Product.id.asc())
            .all()
        )

    def list_all(self) -> List[Product]:
        return (
            self.db.query(Product)
            .order_by(func.lower(Product.name).asc(), Product.id.asc())
            .all()
        )
