"""
Employee Repository - direct SQL access to the employees table
"""
from typing import Iterable, List, Optional
from uuid import UUID

from kiosk.core.time_utils import as_utc
from kiosk.domain.employee import Employee
from kiosk.repositories.base import prepare_new
from kiosk.repositories.sql.base import SqlRepository

_COLUMNS = "id, first_name, last_name, email, phone, hire_date, hourly_rate, is_active"

_INSERT = """
    INSERT INTO employees (id, first_name, last_name, email, phone, hire_date, hourly_rate, is_active)
    VALUES (%(id)s, %(first_name)s, %(last_name)s, %(email)s, %(phone)s, %(hire_date)s, %(hourly_rate)s, %(is_active)s)
"""


class SqlEmployeeRepository(SqlRepository[Employee]):
    """
    Repository for Employee data access
    """

    table = "employees"

    @staticmethod
    def _map_row_to_employee(row: dict) -> Employee:
        return Employee(
            id=row['id'],
            first_name=row['first_name'],
            last_name=row['last_name'],
            email=row['email'],
            phone=row['phone'],
            hire_date=as_utc(row['hire_date']),
            hourly_rate=row['hourly_rate'],
            is_active=row['is_active'],
        )

    def get_by_id(self, entity_id: UUID) -> Optional[Employee]:
        with self._cursor() as cursor:
            cursor.execute(f"SELECT {_COLUMNS} FROM employees WHERE id = %s", (entity_id,))
            row = cursor.fetchone()
            if not row:
                return None
            return self._map_row_to_employee(row)

    def get_all(self) -> List[Employee]:
        with self._cursor() as cursor:
            cursor.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY last_name, first_name")
            return [self._map_row_to_employee(row) for row in cursor.fetchall()]

    def add(self, entity: Employee) -> Employee:
        prepare_new(entity)
        with self._cursor(entity) as cursor:
            cursor.execute(_INSERT, entity.model_dump())
        return entity

    def add_range(self, entities: Iterable[Employee]) -> List[Employee]:
        entities = [prepare_new(entity) for entity in entities]
        with self._cursor() as cursor:
            cursor.executemany(_INSERT, [entity.model_dump() for entity in entities])
        return entities

    def update(self, entity: Employee) -> None:
        with self._cursor(entity) as cursor:
            cursor.execute("""
                UPDATE employees
                SET first_name = %(first_name)s,
                    last_name = %(last_name)s,
                    email = %(email)s,
                    phone = %(phone)s,
                    hire_date = %(hire_date)s,
                    hourly_rate = %(hourly_rate)s,
                    is_active = %(is_active)s
                WHERE id = %(id)s
            """, entity.model_dump())
