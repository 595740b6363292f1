"""
Referential records

Receipts, payment methods and payroll records exist in the schema for future
extension. They carry no business behavior and have no service.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import Field

from kiosk.domain.entity import Entity


class PaymentMethod(Entity):
    """e.g. "Cash", "Credit Card", "Debit Card\""""

    name: str
    description: Optional[str] = None
    is_active: bool = True


class Receipt(Entity):
    customer_id: UUID
    payment_method_id: UUID
    purchase_date: datetime
    total_amount: Decimal
    tax_amount: Optional[Decimal] = None
    notes: Optional[str] = None


class ReceiptItem(Entity):
    receipt_id: UUID
    product_id: UUID
    quantity: int = Field(..., ge=1)
    unit_price: Decimal
    total_price: Decimal


class TimeEntry(Entity):
    employee_id: UUID
    clock_in: datetime
    clock_out: Optional[datetime] = None
    hours_worked: Optional[Decimal] = None
    notes: Optional[str] = None


class Paycheck(Entity):
    employee_id: UUID
    pay_period_start: datetime
    pay_period_end: datetime
    pay_date: datetime
    gross_pay: Decimal
    net_pay: Decimal
    tax_deduction: Optional[Decimal] = None
    other_deductions: Optional[Decimal] = None
    notes: Optional[str] = None
