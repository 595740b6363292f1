"""
Employee table
"""
from sqlalchemy import DECIMAL, Boolean, Column, DateTime, String, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from kiosk.core.database import Base


class EmployeeModel(Base):
    """
    Kiosk staff - email is unique
    """
    __tablename__ = "employees"
    __table_args__ = (
        UniqueConstraint("email", name="uq_employees_email"),
    )

    id = Column(Uuid, primary_key=True)

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(20))

    hire_date = Column(DateTime(timezone=True), nullable=False)
    hourly_rate = Column(DECIMAL(18, 2), nullable=False)
    is_active = Column(Boolean, nullable=False, server_default=expression.true())

    # Relationships
    time_entries = relationship("TimeEntryModel", back_populates="employee", cascade="all, delete-orphan", passive_deletes=True)
    paychecks = relationship("PaycheckModel", back_populates="employee", cascade="all, delete-orphan", passive_deletes=True)
