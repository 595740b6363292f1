"""
Customer Repository - direct SQL access to the customers table
"""
from typing import Iterable, List, Optional
from uuid import UUID

from kiosk.core.time_utils import as_utc
from kiosk.domain.customer import Customer
from kiosk.repositories.base import prepare_new
from kiosk.repositories.sql.base import SqlRepository

_COLUMNS = "id, first_name, last_name, email, phone, created_at, updated_at"

_INSERT = """
    INSERT INTO customers (id, first_name, last_name, email, phone, created_at, updated_at)
    VALUES (%(id)s, %(first_name)s, %(last_name)s, %(email)s, %(phone)s, %(created_at)s, %(updated_at)s)
"""


class SqlCustomerRepository(SqlRepository[Customer]):
    """
    Repository for Customer data access

    All SQL queries for customers are centralized here.
    Returns Customer domain models, not raw dictionaries.
    """

    table = "customers"

    @staticmethod
    def _map_row_to_customer(row: dict) -> Customer:
        return Customer(
            id=row['id'],
            first_name=row['first_name'],
            last_name=row['last_name'],
            email=row['email'],
            phone=row['phone'],
            created_at=as_utc(row['created_at']),
            updated_at=as_utc(row['updated_at']),
        )

    def get_by_id(self, entity_id: UUID) -> Optional[Customer]:
        with self._cursor() as cursor:
            cursor.execute(f"SELECT {_COLUMNS} FROM customers WHERE id = %s", (entity_id,))
            row = cursor.fetchone()
            if not row:
                return None
            return self._map_row_to_customer(row)

    def get_all(self) -> List[Customer]:
        with self._cursor() as cursor:
            cursor.execute(f"SELECT {_COLUMNS} FROM customers ORDER BY last_name, first_name")
            return [self._map_row_to_customer(row) for row in cursor.fetchall()]

    def add(self, entity: Customer) -> Customer:
        prepare_new(entity)
        with self._cursor(entity) as cursor:
            cursor.execute(_INSERT, entity.model_dump())
        return entity

    def add_range(self, entities: Iterable[Customer]) -> List[Customer]:
        entities = [prepare_new(entity) for entity in entities]
        with self._cursor() as cursor:
            cursor.executemany(_INSERT, [entity.model_dump() for entity in entities])
        return entities

    def update(self, entity: Customer) -> None:
        with self._cursor(entity) as cursor:
            cursor.execute("""
                UPDATE customers
                SET first_name = %(first_name)s,
                    last_name = %(last_name)s,
                    email = %(email)s,
                    phone = %(phone)s,
                    updated_at = %(updated_at)s
                WHERE id = %(id)s
            """, entity.model_dump())
