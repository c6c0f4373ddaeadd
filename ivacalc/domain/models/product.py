"""Product domain model — maps to the 'products' table."""

from sqlalchemy import Column, Integer, String, Float, DateTime, Index, func

from ivacalc.infrastructure.database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(String(200), nullable=False)
    price = Column(Float, nullable=False)
    quantity = Column(Integer, nullable=False)

    # Stamped by the repository on insert, never updated
    created_at = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        Index("uq_products_name_lower", func.lower(name), unique=True),
    )

    def __repr__(self):
        return f"<Product {self.id} - {self.name}>"
