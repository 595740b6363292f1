"""
Customer table
"""
from sqlalchemy import Column, DateTime, String, UniqueConstraint, Uuid
from sqlalchemy.sql import func

from kiosk.core.database import Base


class CustomerModel(Base):
    """
    Kiosk customers - email is unique
    """
    __tablename__ = "customers"
    __table_args__ = (
        UniqueConstraint("email", name="uq_customers_email"),
    )

    id = Column(Uuid, primary_key=True)

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(20))

    # Metadata
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True))
