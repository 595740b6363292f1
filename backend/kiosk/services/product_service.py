"""
Product Service - catalog and stock rules
"""
from decimal import Decimal
from typing import List, Optional, Union
from uuid import UUID

from kiosk.core.exceptions import ConflictError, NotFoundError, ValidationError
from kiosk.core.time_utils import utcnow
from kiosk.domain.product import Product
from kiosk.domain.query import Op, where
from kiosk.repositories.base import Repository
from kiosk.services.validation import build, money, optional_text, require_text, to_decimal

Number = Union[Decimal, int, float, str]


class ProductService:
    """
    Service for product business logic

    Rules:
    - price and stock_quantity are never negative
    - sku is unique when present
    """

    def __init__(self, repository: Repository[Product]):
        self.repository = repository

    def get_all_products(self) -> List[Product]:
        return self.repository.get_all()

    def get_product_by_id(self, product_id: UUID) -> Optional[Product]:
        return self.repository.get_by_id(product_id)

    def create_product(
        self,
        name: str,
        description: Optional[str],
        price: Number,
        stock_quantity: int,
        sku: Optional[str] = None,
    ) -> Product:
        """
        Create a new product

        Raises:
            ValidationError: blank name, negative price or stock, price
                with more than 2 decimal places
            ConflictError: SKU already in use
        """
        product = build(
            Product,
            name=name,
            description=description,
            price=to_decimal(price, "price"),
            stock_quantity=stock_quantity,
            sku=sku,
        )
        self._validate(product)
        self._ensure_sku_available(product.sku)
        product.created_at = utcnow()
        return self.repository.add(product)

    def update_product(self, product: Product) -> None:
        if product.id is None or not self.repository.exists(product.id):
            raise NotFoundError("Product", product.id)

        self._validate(product)
        self._ensure_sku_available(product.sku, exclude_id=product.id)
        product.updated_at = utcnow()
        self.repository.update(product)

    def delete_product(self, product_id: UUID) -> None:
        self.repository.delete_by_id(product_id)

    def product_exists(self, product_id: UUID) -> bool:
        return self.repository.exists(product_id)

    def get_product_count(self) -> int:
        return self.repository.count()

    def search_products(self, search_term: str) -> List[Product]:
        """Case-insensitive match on name, description or SKU"""
        if not search_term or not search_term.strip():
            return self.get_all_products()

        term = search_term.strip()
        return self.repository.find(
            where("name", Op.ICONTAINS, term)
            | where("description", Op.ICONTAINS, term)
            | where("sku", Op.ICONTAINS, term)
        )

    def get_low_stock_products(self, threshold: int = 10) -> List[Product]:
        """Products with fewer than `threshold` units in stock"""
        return self.repository.find(where("stock_quantity", Op.LT, threshold))

    def get_products_by_price_range(self, min_price: Number, max_price: Number) -> List[Product]:
        """Products priced between min_price and max_price, both inclusive"""
        low = to_decimal(min_price, "min_price")
        high = to_decimal(max_price, "max_price")
        if low > high:
            raise ValidationError("min_price cannot be greater than max_price.", field="min_price")

        return self.repository.find(where("price", Op.GE, low) & where("price", Op.LE, high))

    # ------------------------------------------------------------------

    @staticmethod
    def _validate(product: Product) -> None:
        # a blank SKU means no SKU
        if product.sku is not None and not product.sku.strip():
            product.sku = None

        require_text(product.name, "name", 200)
        optional_text(product.description, "description", 1000)
        optional_text(product.sku, "sku", 50)
        product.price = money(product.price, "price")

        if product.price < 0:
            raise ValidationError("Price cannot be negative.", field="price")
        if product.stock_quantity < 0:
            raise ValidationError("Stock quantity cannot be negative.", field="stock_quantity")

    def _ensure_sku_available(self, sku: Optional[str], exclude_id: Optional[UUID] = None) -> None:
        if not sku:
            return

        spec = where("sku", Op.EQ, sku)
        if exclude_id is not None:
            spec = spec & where("id", Op.NE, exclude_id)

        if self.repository.first_or_default(spec) is not None:
            raise ConflictError(f"A product with SKU '{sku}' already exists.", field="sku", value=sku)
