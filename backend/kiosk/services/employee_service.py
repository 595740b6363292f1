"""
Employee Service - staff records and the active/inactive state machine
"""
from datetime import datetime
from decimal import Decimal
from typing import Callable, List, Optional, Union
from uuid import UUID

from kiosk.core.exceptions import ConflictError, NotFoundError, ValidationError
from kiosk.core.time_utils import utcnow
from kiosk.domain.employee import Employee
from kiosk.domain.query import Op, where
from kiosk.repositories.base import Repository
from kiosk.services.validation import (
    build,
    money,
    not_in_future,
    optional_text,
    require_email,
    require_text,
    to_decimal,
)


class EmployeeService:
    """
    Service for employee business logic

    Args:
        repository: Employee repository (either backend)
        clock: returns "now"; hire dates after it are rejected
    """

    def __init__(self, repository: Repository[Employee], clock: Callable[[], datetime] = utcnow):
        self.repository = repository
        self.clock = clock

    def get_all_employees(self) -> List[Employee]:
        return self.repository.get_all()

    def get_employee_by_id(self, employee_id: UUID) -> Optional[Employee]:
        return self.repository.get_by_id(employee_id)

    def create_employee(
        self,
        first_name: str,
        last_name: str,
        email: str,
        hire_date: datetime,
        hourly_rate: Union[Decimal, int, float, str],
        phone: Optional[str] = None,
        is_active: bool = True,
    ) -> Employee:
        """
        Create a new employee

        Raises:
            ValidationError: blank names, bad email, future hire date,
                hourly rate not strictly positive or finer than a cent
            ConflictError: email already in use
        """
        employee = build(
            Employee,
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone=phone,
            hire_date=hire_date,
            hourly_rate=to_decimal(hourly_rate, "hourly_rate"),
            is_active=is_active,
        )
        self._validate(employee)
        self._ensure_email_available(employee.email)
        return self.repository.add(employee)

    def update_employee(self, employee: Employee) -> None:
        if employee.id is None or not self.repository.exists(employee.id):
            raise NotFoundError("Employee", employee.id)

        self._validate(employee)
        self._ensure_email_available(employee.email, exclude_id=employee.id)
        self.repository.update(employee)

    def delete_employee(self, employee_id: UUID) -> None:
        self.repository.delete_by_id(employee_id)

    def employee_exists(self, employee_id: UUID) -> bool:
        return self.repository.exists(employee_id)

    def get_employee_count(self) -> int:
        return self.repository.count()

    def get_active_employee_count(self) -> int:
        return self.repository.count(where("is_active", Op.EQ, True))

    def get_active_employees(self) -> List[Employee]:
        return self.repository.find(where("is_active", Op.EQ, True))

    def get_inactive_employees(self) -> List[Employee]:
        return self.repository.find(where("is_active", Op.EQ, False))

    def search_employees(self, search_term: str) -> List[Employee]:
        """Case-insensitive match on first name, last name or email"""
        if not search_term or not search_term.strip():
            return self.get_all_employees()

        term = search_term.strip()
        return self.repository.find(
            where("first_name", Op.ICONTAINS, term)
            | where("last_name", Op.ICONTAINS, term)
            | where("email", Op.ICONTAINS, term)
        )

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------

    def activate_employee(self, employee_id: UUID) -> None:
        """Inactive -> Active. No write when already active."""
        self._set_active(employee_id, True)

    def deactivate_employee(self, employee_id: UUID) -> None:
        """Active -> Inactive. No write when already inactive."""
        self._set_active(employee_id, False)

    def _set_active(self, employee_id: UUID, active: bool) -> None:
        employee = self.repository.get_by_id(employee_id)
        if employee is None:
            raise NotFoundError("Employee", employee_id)

        if employee.is_active == active:
            return

        # Only the flag changes, so the update verb's checks are skipped
        employee.is_active = active
        self.repository.update(employee)

    # ------------------------------------------------------------------

    def _validate(self, employee: Employee) -> None:
        require_text(employee.first_name, "first_name", 100)
        require_text(employee.last_name, "last_name", 100)
        require_email(employee.email)
        optional_text(employee.phone, "phone", 20)

        employee.hire_date = not_in_future(employee.hire_date, self.clock(), "hire_date")
        employee.hourly_rate = money(employee.hourly_rate, "hourly_rate")
        if employee.hourly_rate <= 0:
            raise ValidationError("Hourly rate must be greater than zero.", field="hourly_rate")

    def _ensure_email_available(self, email: str, exclude_id: Optional[UUID] = None) -> None:
        spec = where("email", Op.EQ, email)
        if exclude_id is not None:
            spec = spec & where("id", Op.NE, exclude_id)

        if self.repository.first_or_default(spec) is not None:
            raise ConflictError(
                f"An employee with email '{email}' already exists.",
                field="email",
                value=email,
            )
