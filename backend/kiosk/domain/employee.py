"""
Employee Domain Model
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from kiosk.domain.entity import Entity


class Employee(Entity):
    """
    Employee domain model

    Employees move between two states, active and inactive, through
    EmployeeService.activate_employee / deactivate_employee.
    """

    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    email: str = Field(..., description="Email address (unique)")
    phone: Optional[str] = Field(None, description="Phone number")
    hire_date: datetime = Field(..., description="Date of hire, never in the future")
    hourly_rate: Decimal = Field(..., description="Pay per hour, strictly positive")
    is_active: bool = Field(True, description="Whether the employee is active")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_dict(self) -> dict:
        data = self.model_dump(mode="json")
        data["full_name"] = self.full_name
        data["hourly_rate"] = float(self.hourly_rate)
        return data
