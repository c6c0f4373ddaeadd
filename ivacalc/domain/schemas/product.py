"""Pydantic schemas for the product catalog."""

from datetime import datetime

from ivacalc.domain.schemas.common import CamelModel


class ProductCreate(CamelModel):
    name: str
    price: float
    quantity: int


class ProductRead(ProductCreate):
    id: int
    created_at: datetime


class ProductSummary(CamelModel):
    id: int
    name: str
    price: float
    quantity: int
