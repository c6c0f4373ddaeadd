"""Request validation rules — raw payloads in, validated values out."""

import math
from typing import Any, Dict, List

from ivacalc.core.exceptions import ValidationError
from ivacalc.domain.schemas.calculation import LineItem
from ivacalc.domain.schemas.product import ProductCreate

REQUIRED_LINE_ITEMS = 5

MSG_EXACTLY_FIVE = "exactly 5 products required"
MSG_NAME_AND_PRICE = "name and price required"
MSG_NAME_REQUIRED = "name required"
MSG_PRODUCTS_OR_NAME = "products or name required"
MSG_PRODUCT_FIELDS = "name, price and quantity required"
MSG_PRICE_INVALID = "price must be a non-negative number"
MSG_QUANTITY_INVALID = "quantity must be a non-negative integer"

# Five items at this price plus IVA still fit in a float
MAX_PRICE = 1e300


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def coerce_price(value: Any) -> float | None:
    """Return the value as a finite float, or None if it is not numeric."""
    if value is None or isinstance(value, bool):
        return None
    try:
        price = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(price):
        return None
    return price


def coerce_quantity(value: Any) -> int | None:
    """Accept ints, integral floats and their string forms."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or not number.is_integer():
        return None
    return int(number)


def validate_line_items(products: Any) -> List[LineItem]:
    """Exactly five ``{name, price}`` entries, each with a non-empty name and numeric price."""
    if not isinstance(products, list) or len(products) != REQUIRED_LINE_ITEMS:
        raise ValidationError(MSG_EXACTLY_FIVE)

    items = []
    for entry in products:
        if not isinstance(entry, dict) or _is_blank(entry.get("name")):
            raise ValidationError(MSG_NAME_AND_PRICE)
        price = coerce_price(entry.get("price"))
        if price is None:
            raise ValidationError(MSG_NAME_AND_PRICE)
        if not 0 <= price <= MAX_PRICE:
            raise ValidationError(MSG_PRICE_INVALID)
        items.append(LineItem(name=entry["name"].strip(), price=price))
    return items


def validate_lookup_name(name: Any) -> str:
    if _is_blank(name):
        raise ValidationError(MSG_NAME_REQUIRED)
    return name.strip()


def validate_product_registration(payload: Dict[str, Any]) -> ProductCreate:
    """
    name, price and quantity must all be present. A zero quantity is
    rejected as missing, which existing clients rely on.
    """
    name = payload.get("name")
    price = payload.get("price")
    quantity = payload.get("quantity")

    if _is_blank(name) or price is None or quantity is None or not quantity:
        raise ValidationError(MSG_PRODUCT_FIELDS)

    coerced_price = coerce_price(price)
    if coerced_price is None or not 0 <= coerced_price <= MAX_PRICE:
        raise ValidationError(MSG_PRICE_INVALID)

    coerced_quantity = coerce_quantity(quantity)
    if coerced_quantity is None or coerced_quantity < 0:
        raise ValidationError(MSG_QUANTITY_INVALID)

    return ProductCreate(name=name.strip(), price=coerced_price, quantity=coerced_quantity)
