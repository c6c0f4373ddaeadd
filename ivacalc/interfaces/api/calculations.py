"""Calculation API routes — compute IVA and browse the ledger."""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query

from ivacalc.interfaces.deps import get_calculation_repository, get_product_repository
from ivacalc.domain.repositories.calculation_repository import CalculationRepository
from ivacalc.domain.repositories.product_repository import ProductRepository
from ivacalc.domain.schemas.common import Envelope
from ivacalc.domain.schemas.calculation import (
    CalculationRead,
    CalculationResult,
    ProductCalculationResult,
    calculation_to_read,
)
from ivacalc.application.services.calculation_service import (
    calculate_iva,
    calculate_iva_for_product_id,
    get_calculation,
    list_calculations,
)

router = APIRouter(prefix="/api", tags=["Calculations"])


@router.post("/calculate-iva", response_model=Envelope[CalculationResult])
def post_calculate_iva(
    payload: Dict[str, Any] = Body(...),
    product_repo: ProductRepository = Depends(get_product_repository),
    calc_repo: CalculationRepository = Depends(get_calculation_repository),
):
    """Five line items at 21% (``{products}``) or a catalog product at 15% (``{name}``)."""
    return Envelope(data=calculate_iva(product_repo, calc_repo, payload))


@router.post("/calculate-iva/{product_id}", response_model=Envelope[ProductCalculationResult])
def post_calculate_iva_for_product(
    product_id: str,
    product_repo: ProductRepository = Depends(get_product_repository),
    calc_repo: CalculationRepository = Depends(get_calculation_repository),
):
    return Envelope(data=calculate_iva_for_product_id(product_repo, calc_repo, product_id))


@router.get("/calculations", response_model=Envelope[List[CalculationRead]])
def get_calculations(
    limit: Optional[int] = Query(None, ge=1),
    repo: CalculationRepository = Depends(get_calculation_repository),
):
    """Most recent first."""
    calculations = list_calculations(repo, limit)
    return Envelope(data=[calculation_to_read(c) for c in calculations])


@router.get("/calculation/{calculation_id}", response_model=Envelope[CalculationRead])
def get_calculation_by_id(
    calculation_id: str,
    repo: CalculationRepository = Depends(get_calculation_repository),
):
    return Envelope(data=calculation_to_read(get_calculation(repo, calculation_id)))
