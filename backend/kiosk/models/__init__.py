"""
Database models (SQLAlchemy ORM)
"""
from .customer import CustomerModel
from .product import ProductModel
from .employee import EmployeeModel
from .sales import PaymentMethodModel, ReceiptModel, ReceiptItemModel
from .payroll import TimeEntryModel, PaycheckModel

# Every table both backends must create
EXPECTED_TABLES = (
    "customers",
    "products",
    "employees",
    "payment_methods",
    "receipts",
    "receipt_items",
    "time_entries",
    "paychecks",
)

__all__ = [
    "CustomerModel",
    "ProductModel",
    "EmployeeModel",
    "PaymentMethodModel",
    "ReceiptModel",
    "ReceiptItemModel",
    "TimeEntryModel",
    "PaycheckModel",
    "EXPECTED_TABLES",
]
