"""
Pytest configuration - shared fixtures
"""
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from ivacalc.infrastructure.database import Base, get_db
from ivacalc.domain.models.product import Product
from ivacalc.domain.models.calculation import IvaCalculation
from ivacalc.infrastructure.repositories.product_repository import SQLAlchemyProductRepository
from ivacalc.infrastructure.repositories.calculation_repository import SQLAlchemyCalculationRepository
from ivacalc.main import app


@pytest.fixture
def test_db() -> Generator[Session, None, None]:
    """Create in-memory SQLite database for testing"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def product_repo(test_db):
    return SQLAlchemyProductRepository(test_db, Product)


@pytest.fixture
def calc_repo(test_db):
    return SQLAlchemyCalculationRepository(test_db, IvaCalculation)


@pytest.fixture
def five_products():
    """Groceries from the worked example: total 13.50, IVA 2.84, final 16.34"""
    return [
        {"name": "Milk", "price": 2.00},
        {"name": "Bread", "price": 1.50},
        {"name": "Eggs", "price": 3.00},
        {"name": "Cheese", "price": 4.50},
        {"name": "Butter", "price": 2.50},
    ]


@pytest.fixture
def milk(product_repo):
    return product_repo.create({"name": "Milk", "price": 2.00, "quantity": 10})


@pytest.fixture
def client(test_db):
    def _get_db():
        yield test_db

    app.dependency_overrides[get_db] = _get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
