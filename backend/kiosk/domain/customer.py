"""
Customer Domain Model

Represents a kiosk customer. Email is unique across all customers; the
service layer enforces it.
"""
from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from kiosk.domain.entity import Entity


class Customer(Entity):
    """
    Customer domain model

    Fields:
        id: Unique identifier (assigned on create)
        first_name: Given name
        last_name: Family name
        email: Contact email (unique)
        phone: Optional phone number
        created_at: When the customer was created
        updated_at: When the customer was last updated
    """

    timestamped: ClassVar[bool] = True

    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    email: str = Field(..., description="Email address (unique)")
    phone: Optional[str] = Field(None, description="Phone number")

    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Last update timestamp")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_dict(self) -> dict:
        """JSON-friendly dict including the computed full name"""
        data = self.model_dump(mode="json")
        data["full_name"] = self.full_name
        return data
