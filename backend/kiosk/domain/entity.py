"""
Entity base model

Every stored record has an opaque UUID identity. The identity is optional on
the model because it is assigned when the record is first added.
"""
from typing import ClassVar, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class Entity(BaseModel):
    """Base for all domain records"""

    model_config = ConfigDict(from_attributes=True)

    # True when the entity carries created_at / updated_at
    timestamped: ClassVar[bool] = False

    id: Optional[UUID] = Field(None, description="Unique identifier")
