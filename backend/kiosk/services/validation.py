"""
Field checks shared by the services

Each check raises ValidationError naming the offending field and never
touches storage.
"""
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Type, TypeVar

import pydantic

from kiosk.core.exceptions import ValidationError
from kiosk.core.time_utils import as_utc
from kiosk.domain.entity import Entity

E = TypeVar("E", bound=Entity)

# NUMERIC(18, 2)
CENT = Decimal("0.01")
MONEY_LIMIT = Decimal("1E16")


def build(model: Type[E], **fields: Any) -> E:
    """Construct an entity, reporting bad input shapes as ValidationError"""
    try:
        return model(**fields)
    except pydantic.ValidationError as e:
        error = e.errors()[0]
        field = str(error["loc"][0]) if error["loc"] else None
        raise ValidationError(f"{field}: {error['msg']}", field=field) from e


def require_text(value: Optional[str], field: str, max_length: int) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field} is required.", field=field)
    if len(value) > max_length:
        raise ValidationError(f"{field} cannot exceed {max_length} characters.", field=field)
    return value


def optional_text(value: Optional[str], field: str, max_length: int) -> Optional[str]:
    if value is not None and len(value) > max_length:
        raise ValidationError(f"{field} cannot exceed {max_length} characters.", field=field)
    return value


def require_email(value: Optional[str], field: str = "email", max_length: int = 255) -> str:
    require_text(value, field, max_length)
    if "@" not in value:
        raise ValidationError(f"'{value}' is not a valid email address.", field=field)
    return value


def to_decimal(value: Any, field: str) -> Decimal:
    """Coerce to Decimal; floats go through str so 19.99 stays 19.99"""
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(f"{field} must be a number.", field=field)
    if not number.is_finite():
        raise ValidationError(f"{field} must be a finite number.", field=field)
    return number


def not_in_future(value: datetime, now: datetime, field: str) -> datetime:
    if value is None:
        raise ValidationError(f"{field} is required.", field=field)
    value = as_utc(value)
    if value > as_utc(now):
        raise ValidationError(f"{field} cannot be in the future.", field=field)
    return value


def money(value: Any, field: str) -> Decimal:
    """Decimal that fits NUMERIC(18, 2) exactly, never rounded by storage"""
    number = to_decimal(value, field)
    if abs(number) >= MONEY_LIMIT:
        raise ValidationError(f"{field} is too large.", field=field)
    if number != number.quantize(CENT):
        raise ValidationError(f"{field} cannot have more than 2 decimal places.", field=field)
    return number
