"""Calculation service — validate, compute IVA, record in the ledger."""

import re
from typing import Any, Dict, List, Optional, Union

import structlog

from ivacalc.core.exceptions import NotFoundError, ValidationError
from ivacalc.domain.models.calculation import IvaCalculation, KIND_MULTI_ITEM, KIND_PRODUCT
from ivacalc.domain.models.product import Product
from ivacalc.domain.repositories.calculation_repository import CalculationRepository
from ivacalc.domain.repositories.product_repository import ProductRepository
from ivacalc.domain.schemas.calculation import (
    MultiItemCalculationResult,
    ProductCalculationResult,
    ProductCalculationSummary,
    calculation_to_read,
)
from ivacalc.domain.schemas.product import ProductSummary
from ivacalc.domain.tax import MULTI_ITEM_IVA_RATE, PRODUCT_IVA_RATE, compute_tax, sum_prices
from ivacalc.application.services.validation import (
    MSG_PRODUCTS_OR_NAME,
    validate_line_items,
    validate_lookup_name,
)

logger = structlog.get_logger(__name__)

MSG_PRODUCT_NOT_FOUND = "product not found"
MSG_CALCULATION_NOT_FOUND = "calculation not found"

ID_PATTERN = re.compile(r"[0-9]+")


def _parse_id(raw: Any) -> Optional[int]:
    """Ids arrive as path strings; anything non-numeric cannot exist."""
    text = str(raw).strip()
    # Plain decimal digits only: int() would also take "+5" and "1_0"
    if not ID_PATTERN.fullmatch(text):
        return None
    parsed = int(text)
    # Beyond a signed 64-bit key no row can match
    if not 0 < parsed < 2 ** 63:
        return None
    return parsed


def calculate_for_line_items(repo: CalculationRepository, products: Any) -> MultiItemCalculationResult:
    """Sum five line items, apply 21% IVA and record the result."""
    items = validate_line_items(products)

    total_price = sum_prices(item.price for item in items)
    tax = compute_tax(total_price, MULTI_ITEM_IVA_RATE)

    calc = repo.create({
        "kind": KIND_MULTI_ITEM,
        "products": [item.model_dump() for item in items],
        "total_price": float(total_price),
        "iva_rate": MULTI_ITEM_IVA_RATE,
        "iva_amount": float(tax.amount),
        "final_price": float(tax.total),
    })
    logger.info(
        "IVA calculation stored",
        calculation_id=calc.id,
        kind=KIND_MULTI_ITEM,
        total_price=calc.total_price,
        final_price=calc.final_price,
    )

    return MultiItemCalculationResult(
        **calculation_to_read(calc).model_dump(),
        saved_id=calc.id,
    )


def find_product_by_name(repo: ProductRepository, name: Any) -> Product:
    """
    Case-insensitive substring lookup. When several products match, an exact
    name match wins, otherwise the oldest matching product.
    """
    query = validate_lookup_name(name)
    matches = repo.search_by_name(query)
    if not matches:
        logger.info("Product lookup missed", name=query)
        raise NotFoundError(MSG_PRODUCT_NOT_FOUND)

    if len(matches) > 1:
        logger.warning("Ambiguous product lookup", name=query, candidates=len(matches))
        for product in matches:
            if product.name.lower() == query.lower():
                return product
    return matches[0]


def find_product_by_id(repo: ProductRepository, product_id: Any) -> Product:
    parsed = _parse_id(product_id)
    product = repo.get_by_id(parsed) if parsed is not None else None
    if product is None:
        logger.info("Product lookup missed", product_id=product_id)
        raise NotFoundError(MSG_PRODUCT_NOT_FOUND)
    return product


def calculate_for_product(repo: CalculationRepository, product: Product) -> ProductCalculationResult:
    """Apply 15% IVA to a catalog product and record a snapshot of it."""
    tax = compute_tax(product.price, PRODUCT_IVA_RATE)

    calc = repo.create({
        "kind": KIND_PRODUCT,
        "product_id": product.id,
        "product_name": product.name,
        "product_price": product.price,
        "iva_rate": PRODUCT_IVA_RATE,
        "iva_amount": float(tax.amount),
        "price_with_iva": float(tax.total),
    })
    logger.info(
        "IVA calculation stored",
        calculation_id=calc.id,
        kind=KIND_PRODUCT,
        product_id=product.id,
        price_with_iva=calc.price_with_iva,
    )

    return ProductCalculationResult(
        product=ProductSummary.model_validate(product),
        calculation=ProductCalculationSummary(
            product_price=calc.product_price,
            iva_rate=calc.iva_rate,
            iva_amount=calc.iva_amount,
            price_with_iva=calc.price_with_iva,
        ),
        saved_id=calc.id,
    )


def calculate_iva(
    product_repo: ProductRepository,
    calc_repo: CalculationRepository,
    payload: Dict[str, Any],
) -> Union[MultiItemCalculationResult, ProductCalculationResult]:
    """Dispatch on the request shape: ``{products: [...]}`` or ``{name}``."""
    if "products" in payload:
        return calculate_for_line_items(calc_repo, payload["products"])
    if "name" in payload:
        product = find_product_by_name(product_repo, payload["name"])
        return calculate_for_product(calc_repo, product)
    raise ValidationError(MSG_PRODUCTS_OR_NAME)


def calculate_iva_for_product_id(
    product_repo: ProductRepository,
    calc_repo: CalculationRepository,
    product_id: Any,
) -> ProductCalculationResult:
    product = find_product_by_id(product_repo, product_id)
    return calculate_for_product(calc_repo, product)


def list_calculations(repo: CalculationRepository, limit: Optional[int] = None) -> List[IvaCalculation]:
    return repo.list_all(limit)


def get_calculation(repo: CalculationRepository, calculation_id: Any) -> IvaCalculation:
    parsed = _parse_id(calculation_id)
    calc = repo.get_by_id(parsed) if parsed is not None else None
    if calc is None:
        raise NotFoundError(MSG_CALCULATION_NOT_FOUND)
    return calc
