"""IVA calculation ledger — maps to the 'iva_calculations' table.

One table holds both calculation variants, told apart by ``kind``:

* ``multi_item``: five named line items summed and taxed at 21%.
* ``product``: a catalog product snapshot taxed at 15%.

Rows are written once and never updated.
"""

from sqlalchemy import Column, Integer, String, Float, DateTime, JSON

from ivacalc.infrastructure.database import Base

KIND_MULTI_ITEM = "multi_item"
KIND_PRODUCT = "product"


class IvaCalculation(Base):
    __tablename__ = "iva_calculations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    kind = Column(String(20), nullable=False, index=True)

    iva_rate = Column(Float, nullable=False)
    iva_amount = Column(Float, nullable=False)

    # multi_item
    products = Column(JSON, nullable=True)
    total_price = Column(Float, nullable=True)
    final_price = Column(Float, nullable=True)

    # product (weak reference: no foreign key, the snapshot outlives the product)
    product_id = Column(Integer, nullable=True, index=True)
    product_name = Column(String(200), nullable=True)
    product_price = Column(Float, nullable=True)
    price_with_iva = Column(Float, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, index=True)

    def __repr__(self):
        return f"<IvaCalculation {self.id} - {self.kind}>"
