"""Product service — catalog listing and registration."""

from typing import Any, Dict, List

import structlog
from sqlalchemy.exc import IntegrityError

from ivacalc.core.exceptions import ConflictError
from ivacalc.domain.models.product import Product
from ivacalc.domain.repositories.product_repository import ProductRepository
from ivacalc.application.services.validation import validate_product_registration

logger = structlog.get_logger(__name__)

MSG_PRODUCT_EXISTS = "product already exists"


def list_products(repo: ProductRepository) -> List[Product]:
    return repo.list_all()


def register_product(repo: ProductRepository, payload: Dict[str, Any]) -> Product:
    """Validate and store a new catalog product.

    The read-then-write name check is racy under concurrent writers; the
    unique index on lower(name) catches what slips through.
    """
    product_in = validate_product_registration(payload)

    if repo.get_by_name(product_in.name) is not None:
        logger.info("Product registration conflict", name=product_in.name)
        raise ConflictError(MSG_PRODUCT_EXISTS)

    try:
        product = repo.create(product_in)
    except IntegrityError:
        logger.info("Product registration conflict on insert", name=product_in.name)
        raise ConflictError(MSG_PRODUCT_EXISTS)

    logger.info("Product registered", product_id=product.id, name=product.name)
    return product
