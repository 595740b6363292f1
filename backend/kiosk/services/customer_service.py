"""
Customer Service - business rules for customers

Validates input, enforces email uniqueness and stamps timestamps before
delegating to whichever repository it was given.
"""
from typing import List, Optional
from uuid import UUID

from kiosk.core.exceptions import ConflictError, NotFoundError
from kiosk.core.time_utils import utcnow
from kiosk.domain.customer import Customer
from kiosk.domain.query import Op, where
from kiosk.repositories.base import Repository
from kiosk.services.validation import build, optional_text, require_email, require_text


class CustomerService:
    """
    Service for customer business logic

    Usage:
        service = CustomerService(repository)
        customer = service.create_customer("Jane", "Doe", "jane@x.com")
    """

    def __init__(self, repository: Repository[Customer]):
        self.repository = repository

    def get_all_customers(self) -> List[Customer]:
        return self.repository.get_all()

    def get_customer_by_id(self, customer_id: UUID) -> Optional[Customer]:
        return self.repository.get_by_id(customer_id)

    def create_customer(
        self,
        first_name: str,
        last_name: str,
        email: str,
        phone: Optional[str] = None,
    ) -> Customer:
        """
        Create a new customer

        Raises:
            ValidationError: blank or oversized fields, malformed email
            ConflictError: email already in use
        """
        customer = build(Customer, first_name=first_name, last_name=last_name, email=email, phone=phone)
        self._validate(customer)
        self._ensure_email_available(customer.email)
        customer.created_at = utcnow()
        return self.repository.add(customer)

    def update_customer(self, customer: Customer) -> None:
        """
        Replace a stored customer

        Raises:
            NotFoundError: no customer with this id
            ValidationError / ConflictError: as for create
        """
        if customer.id is None or not self.repository.exists(customer.id):
            raise NotFoundError("Customer", customer.id)

        self._validate(customer)
        self._ensure_email_available(customer.email, exclude_id=customer.id)
        customer.updated_at = utcnow()
        self.repository.update(customer)

    def delete_customer(self, customer_id: UUID) -> None:
        self.repository.delete_by_id(customer_id)

    def customer_exists(self, customer_id: UUID) -> bool:
        return self.repository.exists(customer_id)

    def get_customer_count(self) -> int:
        return self.repository.count()

    def search_customers(self, search_term: str) -> List[Customer]:
        """Case-insensitive match on first name, last name or email"""
        if not search_term or not search_term.strip():
            return self.get_all_customers()

        term = search_term.strip()
        return self.repository.find(
            where("first_name", Op.ICONTAINS, term)
            | where("last_name", Op.ICONTAINS, term)
            | where("email", Op.ICONTAINS, term)
        )

    # ------------------------------------------------------------------

    @staticmethod
    def _validate(customer: Customer) -> None:
        require_text(customer.first_name, "first_name", 100)
        require_text(customer.last_name, "last_name", 100)
        require_email(customer.email)
        optional_text(customer.phone, "phone", 20)

    def _ensure_email_available(self, email: str, exclude_id: Optional[UUID] = None) -> None:
        spec = where("email", Op.EQ, email)
        if exclude_id is not None:
            spec = spec & where("id", Op.NE, exclude_id)

        if self.repository.first_or_default(spec) is not None:
            raise ConflictError(
                f"A customer with email '{email}' already exists.",
                field="email",
                value=email,
            )
