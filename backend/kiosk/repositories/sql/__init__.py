"""
Backend B - direct SQL repositories (psycopg2)

These repositories write hand-written parameterized statements and map rows
to domain models. Query specifications are evaluated in memory.
"""
from kiosk.repositories.sql.base import SqlRepository
from kiosk.repositories.sql.customer_repository import SqlCustomerRepository
from kiosk.repositories.sql.product_repository import SqlProductRepository
from kiosk.repositories.sql.employee_repository import SqlEmployeeRepository

__all__ = [
    'SqlRepository',
    'SqlCustomerRepository',
    'SqlProductRepository',
    'SqlEmployeeRepository',
]
