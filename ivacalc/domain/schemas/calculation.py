"""Pydantic schemas for IVA calculations and the ledger."""

from datetime import datetime
from typing import Annotated, List, Literal, Union

from pydantic import Field

from ivacalc.domain.models.calculation import IvaCalculation, KIND_MULTI_ITEM
from ivacalc.domain.schemas.common import CamelModel
from ivacalc.domain.schemas.product import ProductSummary


class LineItem(CamelModel):
    name: str
    price: float


class MultiItemCalculationRead(CamelModel):
    id: int
    kind: Literal["multi_item"] = "multi_item"
    products: List[LineItem]
    total_price: float
    iva_rate: float
    iva_amount: float
    final_price: float
    created_at: datetime


class ProductCalculationRead(CamelModel):
    id: int
    kind: Literal["product"] = "product"
    product_id: int
    product_name: str
    product_price: float
    iva_rate: float
    iva_amount: float
    price_with_iva: float = Field(alias="priceWithIVA")
    created_at: datetime


CalculationRead = Annotated[
    Union[MultiItemCalculationRead, ProductCalculationRead],
    Field(discriminator="kind"),
]


class MultiItemCalculationResult(MultiItemCalculationRead):
    saved_id: int


class ProductCalculationSummary(CamelModel):
    product_price: float
    iva_rate: float
    iva_amount: float
    price_with_iva: float = Field(alias="priceWithIVA")


class ProductCalculationResult(CamelModel):
    product: ProductSummary
    calculation: ProductCalculationSummary
    saved_id: int


CalculationResult = Union[MultiItemCalculationResult, ProductCalculationResult]


def calculation_to_read(calc: IvaCalculation) -> Union[MultiItemCalculationRead, ProductCalculationRead]:
    """Pick the read schema matching the stored variant."""
    if calc.kind == KIND_MULTI_ITEM:
        return MultiItemCalculationRead.model_validate(calc)
    return ProductCalculationRead.model_validate(calc)
