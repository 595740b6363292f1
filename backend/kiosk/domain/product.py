"""
Product Domain Model

Represents a product sold at the kiosk.
This is the single source of truth for product data structure.
"""
from datetime import datetime
from decimal import Decimal
from typing import ClassVar, Optional

from pydantic import Field

from kiosk.domain.entity import Entity


class Product(Entity):
    """
    Product domain model - represents a product in our catalog

    Fields:
        id: Unique identifier (assigned on create)
        name: Product name
        description: Product description (optional)
        price: Unit price, never negative (enforced by ProductService)
        stock_quantity: Units on hand, never negative (enforced by ProductService)
        sku: Stock Keeping Unit, unique when present
        created_at: When product was created
        updated_at: When product was last updated
    """

    timestamped: ClassVar[bool] = True

    name: str = Field(..., description="Product name")
    description: Optional[str] = Field(None, description="Product description")

    # Pricing and inventory
    price: Decimal = Field(..., description="Unit price")
    stock_quantity: int = Field(0, description="Units in stock")
    sku: Optional[str] = Field(None, description="Stock Keeping Unit")

    # Metadata
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    @property
    def is_out_of_stock(self) -> bool:
        """Check if product is out of stock"""
        return self.stock_quantity <= 0

    def is_low_stock(self, threshold: int = 10) -> bool:
        """Check if stock is below the given threshold"""
        return self.stock_quantity < threshold

    def to_dict(self) -> dict:
        """
        Convert to dictionary with computed fields

        Returns dict with all fields plus computed properties
        """
        data = self.model_dump(mode="json")
        data["is_out_of_stock"] = self.is_out_of_stock

        # Convert Decimal to float for JSON compatibility
        data["price"] = float(self.price)

        return data
