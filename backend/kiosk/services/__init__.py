"""
Service Layer - Business Logic

The only place business rules are enforced. Each service wraps exactly one
repository and never knows which backend it is.
"""
from kiosk.services.customer_service import CustomerService
from kiosk.services.product_service import ProductService
from kiosk.services.employee_service import EmployeeService

__all__ = [
    'CustomerService',
    'ProductService',
    'EmployeeService',
]
