"""
Payroll tables - time entries and paychecks

Schema only: no service reads or writes these yet.
"""
from sqlalchemy import DECIMAL, Column, DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import relationship

from kiosk.core.database import Base


class TimeEntryModel(Base):
    """
    Clock in / clock out records
    """
    __tablename__ = "time_entries"

    id = Column(Uuid, primary_key=True)
    employee_id = Column(
        Uuid,
        ForeignKey("employees.id", name="fk_time_entries_employees", ondelete="CASCADE"),
        nullable=False,
    )

    clock_in = Column(DateTime(timezone=True), nullable=False)
    clock_out = Column(DateTime(timezone=True))
    hours_worked = Column(DECIMAL(5, 2))
    notes = Column(String(500))

    employee = relationship("EmployeeModel", back_populates="time_entries")


class PaycheckModel(Base):
    """
    Pay issued to an employee for one pay period
    """
    __tablename__ = "paychecks"

    id = Column(Uuid, primary_key=True)
    employee_id = Column(
        Uuid,
        ForeignKey("employees.id", name="fk_paychecks_employees", ondelete="CASCADE"),
        nullable=False,
    )

    pay_period_start = Column(DateTime(timezone=True), nullable=False)
    pay_period_end = Column(DateTime(timezone=True), nullable=False)
    pay_date = Column(DateTime(timezone=True), nullable=False)

    gross_pay = Column(DECIMAL(18, 2), nullable=False)
    net_pay = Column(DECIMAL(18, 2), nullable=False)
    tax_deduction = Column(DECIMAL(18, 2))
    other_deductions = Column(DECIMAL(18, 2))
    notes = Column(String(1000))

    employee = relationship("EmployeeModel", back_populates="paychecks")
