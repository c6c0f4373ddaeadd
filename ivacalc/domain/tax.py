"""IVA calculation engine — pure decimal arithmetic, rounded to cents."""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Iterable, Union

CENT = Decimal("0.01")

# Enough digits to hold any finite float to the cent (max float has 309 integer digits)
PRECISION = 400

# Flat list of five line items
MULTI_ITEM_IVA_RATE = 21
# Single catalog product looked up by name or id
PRODUCT_IVA_RATE = 15

Number = Union[int, float, Decimal]


def to_decimal(value: Number) -> Decimal:
    """Build a Decimal from the decimal text of a number, not its binary value."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round2(value: Number) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = PRECISION
        return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class TaxBreakdown:
    amount: Decimal
    total: Decimal


def compute_tax(price_basis: Number, rate: Number) -> TaxBreakdown:
    """
    amount = round2(price_basis * rate / 100)
    total  = round2(price_basis + amount)

    Negative prices must be rejected before reaching this function.
    """
    with localcontext() as ctx:
        ctx.prec = PRECISION
        basis = to_decimal(price_basis)
        amount = round2(basis * to_decimal(rate) / Decimal("100"))
        return TaxBreakdown(amount=amount, total=round2(basis + amount))


def sum_prices(prices: Iterable[Number]) -> Decimal:
    """Sum line-item prices exactly and round the result to cents."""
    with localcontext() as ctx:
        ctx.prec = PRECISION
        return round2(sum((to_decimal(p) for p in prices), Decimal("0")))
