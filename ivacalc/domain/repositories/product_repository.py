"""
Product Repository Interface.
Defines the catalog lookups.
"""

from typing import List, Optional

from ivacalc.domain.repositories.base import BaseRepository
from ivacalc.domain.models.product import Product


class ProductRepository(BaseRepository[Product]):
    """Interface for Product-specific operations."""

    def get_by_name(self, name: str) -> Optional[Product]:
        """Exact, case-insensitive name match."""
        ...

    def search_by_name(self, query: str) -> List[Product]:
        """Case-insensitive substring match, oldest product first."""
        ...

    def list_all(self) -> List[Product]:
        """Every product, ordered by name."""
        ...
