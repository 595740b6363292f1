"""
Product Repository - direct SQL access to the products table
"""
from typing import Iterable, List, Optional
from uuid import UUID

from kiosk.core.time_utils import as_utc
from kiosk.domain.product import Product
from kiosk.repositories.base import prepare_new
from kiosk.repositories.sql.base import SqlRepository

_COLUMNS = "id, name, description, price, stock_quantity, sku, created_at, updated_at"

_INSERT = """
    INSERT INTO products (id, name, description, price, stock_quantity, sku, created_at, updated_at)
    VALUES (%(id)s, %(name)s, %(description)s, %(price)s, %(stock_quantity)s, %(sku)s, %(created_at)s, %(updated_at)s)
"""


class SqlProductRepository(SqlRepository[Product]):
    """
    Repository for Product data access

    All SQL queries for products are centralized here.
    Returns Product domain models, not raw dictionaries.
    """

    table = "products"

    @staticmethod
    def _map_row_to_product(row: dict) -> Product:
        return Product(
            id=row['id'],
            name=row['name'],
            description=row['description'],
            price=row['price'],
            stock_quantity=row['stock_quantity'],
            sku=row['sku'],
            created_at=as_utc(row['created_at']),
            updated_at=as_utc(row['updated_at']),
        )

    def get_by_id(self, entity_id: UUID) -> Optional[Product]:
        """
        Find product by ID

        Returns:
            Product or None if not found
        """
        with self._cursor() as cursor:
            cursor.execute(f"SELECT {_COLUMNS} FROM products WHERE id = %s", (entity_id,))
            row = cursor.fetchone()
            if not row:
                return None
            return self._map_row_to_product(row)

    def get_all(self) -> List[Product]:
        with self._cursor() as cursor:
            cursor.execute(f"SELECT {_COLUMNS} FROM products ORDER BY name")
            return [self._map_row_to_product(row) for row in cursor.fetchall()]

    def add(self, entity: Product) -> Product:
        prepare_new(entity)
        with self._cursor(entity) as cursor:
            cursor.execute(_INSERT, entity.model_dump())
        return entity

    def add_range(self, entities: Iterable[Product]) -> List[Product]:
        entities = [prepare_new(entity) for entity in entities]
        with self._cursor() as cursor:
            cursor.executemany(_INSERT, [entity.model_dump() for entity in entities])
        return entities

    def update(self, entity: Product) -> None:
        with self._cursor(entity) as cursor:
            cursor.execute("""
                UPDATE products
                SET name = %(name)s,
                    description = %(description)s,
                    price = %(price)s,
                    stock_quantity = %(stock_quantity)s,
                    sku = %(sku)s,
                    updated_at = %(updated_at)s
                WHERE id = %(id)s
            """, entity.model_dump())
