"""
Product table
"""
from sqlalchemy import DECIMAL, Column, DateTime, Integer, String, UniqueConstraint, Uuid
from sqlalchemy.sql import func

from kiosk.core.database import Base


class ProductModel(Base):
    """
    Product catalog - SKU is optional but unique when present
    """
    __tablename__ = "products"
    __table_args__ = (
        UniqueConstraint("sku", name="uq_products_sku"),
    )

    id = Column(Uuid, primary_key=True)

    name = Column(String(200), nullable=False)
    description = Column(String(1000))

    # Pricing and inventory
    price = Column(DECIMAL(18, 2), nullable=False)
    stock_quantity = Column(Integer, nullable=False, server_default="0")
    sku = Column(String(50))

    # Metadata
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True))
