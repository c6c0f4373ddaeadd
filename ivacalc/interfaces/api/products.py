"""Products API routes — catalog listing and registration."""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status

from ivacalc.interfaces.deps import get_product_repository
from ivacalc.domain.repositories.product_repository import ProductRepository
from ivacalc.domain.schemas.common import Envelope
from ivacalc.domain.schemas.product import ProductRead
from ivacalc.application.services.product_service import list_products, register_product

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=Envelope[List[ProductRead]])
def get_products(repo: ProductRepository = Depends(get_product_repository)):
    products = list_products(repo)
    return Envelope(data=[ProductRead.model_validate(p) for p in products])


@router.post("", response_model=Envelope[ProductRead], status_code=status.HTTP_201_CREATED)
def create_product(
    payload: Dict[str, Any] = Body(...),
    repo: ProductRepository = Depends(get_product_repository),
):
    """Register a product. Names are unique regardless of case."""
    product = register_product(repo, payload)
    return Envelope(data=ProductRead.model_validate(product))
