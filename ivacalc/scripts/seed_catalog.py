"""Insert a starter catalog. Run with ``python -m ivacalc.scripts.seed_catalog``."""

import structlog

from ivacalc.core.exceptions import ConflictError
from ivacalc.core.logging import configure_logging
from ivacalc.domain.models.product import Product
from ivacalc.domain.repositories.product_repository import ProductRepository
from ivacalc.infrastructure.database import SessionLocal, init_db
from ivacalc.infrastructure.repositories.product_repository import SQLAlchemyProductRepository
from ivacalc.application.services.product_service import register_product

logger = structlog.get_logger(__name__)

STARTER_PRODUCTS = [
    {"name": "Milk", "price": 2.00, "quantity": 10},
    {"name": "Bread", "price": 1.50, "quantity": 25},
    {"name": "Eggs", "price": 3.00, "quantity": 12},
    {"name": "Cheese", "price": 4.50, "quantity": 8},
    {"name": "Butter", "price": 2.50, "quantity": 15},
]


def seed_catalog(repo: ProductRepository, products=STARTER_PRODUCTS) -> int:
    """Register each product unless its name is already taken. Returns how many were added."""
    inserted = 0
    for payload in products:
        try:
            register_product(repo, payload)
        except ConflictError:
            continue
        inserted += 1
    return inserted


def main():
    configure_logging()
    init_db()
    db = SessionLocal()
    try:
        inserted = seed_catalog(SQLAlchemyProductRepository(db, Product))
        logger.info("Catalog seeded", inserted=inserted)
    finally:
        db.close()


if __name__ == "__main__":
    main()
