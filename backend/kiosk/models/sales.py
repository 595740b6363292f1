"""
Sales tables - payment methods, receipts and receipt lines

Schema only: no service reads or writes these yet.
"""
from sqlalchemy import DECIMAL, Boolean, Column, DateTime, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression, func

from kiosk.core.database import Base


class PaymentMethodModel(Base):
    """
    Accepted payment types: Cash, Credit Card, Debit Card
    """
    __tablename__ = "payment_methods"

    id = Column(Uuid, primary_key=True)
    name = Column(String(100), nullable=False)
    description = Column(String(500))
    is_active = Column(Boolean, nullable=False, server_default=expression.true())

    receipts = relationship("ReceiptModel", back_populates="payment_method")


class ReceiptModel(Base):
    """
    One purchase by one customer
    """
    __tablename__ = "receipts"

    id = Column(Uuid, primary_key=True)
    customer_id = Column(Uuid, ForeignKey("customers.id", name="fk_receipts_customers"), nullable=False)
    payment_method_id = Column(Uuid, ForeignKey("payment_methods.id", name="fk_receipts_payment_methods"), nullable=False)

    purchase_date = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    total_amount = Column(DECIMAL(18, 2), nullable=False)
    tax_amount = Column(DECIMAL(18, 2))
    notes = Column(String(1000))

    payment_method = relationship("PaymentMethodModel", back_populates="receipts")
    items = relationship("ReceiptItemModel", back_populates="receipt", cascade="all, delete-orphan", passive_deletes=True)


class ReceiptItemModel(Base):
    """
    Line items of a receipt
    """
    __tablename__ = "receipt_items"

    id = Column(Uuid, primary_key=True)
    receipt_id = Column(
        Uuid,
        ForeignKey("receipts.id", name="fk_receipt_items_receipts", ondelete="CASCADE"),
        nullable=False,
    )
    product_id = Column(Uuid, ForeignKey("products.id", name="fk_receipt_items_products"), nullable=False)

    quantity = Column(Integer, nullable=False)
    unit_price = Column(DECIMAL(18, 2), nullable=False)
    total_price = Column(DECIMAL(18, 2), nullable=False)

    receipt = relationship("ReceiptModel", back_populates="items")
