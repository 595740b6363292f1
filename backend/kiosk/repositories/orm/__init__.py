"""
Backend A - SQLAlchemy ORM repositories
"""
from kiosk.domain import Customer, Employee, Product
from kiosk.models import CustomerModel, EmployeeModel, ProductModel
from kiosk.repositories.orm.repository import OrmRepository, compile_spec, is_unique_violation


class OrmCustomerRepository(OrmRepository[Customer]):
    model = CustomerModel
    entity = Customer
    order_by = ("last_name", "first_name")


class OrmProductRepository(OrmRepository[Product]):
    model = ProductModel
    entity = Product
    order_by = ("name",)


class OrmEmployeeRepository(OrmRepository[Employee]):
    model = EmployeeModel
    entity = Employee
    order_by = ("last_name", "first_name")


__all__ = [
    'OrmRepository',
    'OrmCustomerRepository',
    'OrmProductRepository',
    'OrmEmployeeRepository',
    'compile_spec',
    'is_unique_violation',
]
