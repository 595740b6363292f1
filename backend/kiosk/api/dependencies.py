"""
Request-scoped access to the service container on app.state
"""
from fastapi import Request

from kiosk.container import ServiceContainer
from kiosk.services import CustomerService, EmployeeService, ProductService


def get_container(request: Request) -> ServiceContainer:
    return request.app.state.services


def get_customer_service(request: Request) -> CustomerService:
    return get_container(request).customers


def get_product_service(request: Request) -> ProductService:
    return get_container(request).products


def get_employee_service(request: Request) -> EmployeeService:
    return get_container(request).employees
