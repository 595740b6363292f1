"""
Domain Layer - Business Entities

This layer contains Pydantic models representing business entities, plus the
query specification type both storage backends understand.
"""
from kiosk.domain.entity import Entity
from kiosk.domain.customer import Customer
from kiosk.domain.product import Product
from kiosk.domain.employee import Employee
from kiosk.domain.records import PaymentMethod, Receipt, ReceiptItem, TimeEntry, Paycheck
from kiosk.domain.query import Op, Condition, AllOf, AnyOf, Spec, where, matches

__all__ = [
    'Entity',
    'Customer',
    'Product',
    'Employee',
    'PaymentMethod',
    'Receipt',
    'ReceiptItem',
    'TimeEntry',
    'Paycheck',
    'Op',
    'Condition',
    'AllOf',
    'AnyOf',
    'Spec',
    'where',
    'matches',
]
