"""
Error taxonomy shared by services and storage backends

ValidationError    - malformed or out-of-range input, raised before any I/O
ConflictError      - a uniqueness rule would be violated
NotFoundError      - referenced id does not exist (update/activate/deactivate)
StorageUnavailable - the backend could not reach or execute against the store
"""
from typing import Any, Optional


class KioskError(Exception):
    """Base class for every error raised by the kiosk core"""


class ValidationError(KioskError, ValueError):
    """Bad input shape or range. `field` names the offending input."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class ConflictError(KioskError):
    """Duplicate value for a field that must be unique"""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


class NotFoundError(KioskError):
    """Referenced entity does not exist"""

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(f"{entity} with ID '{entity_id}' does not exist.")
        self.entity = entity
        self.entity_id = entity_id


class StorageUnavailable(KioskError):
    """Connection failure, malformed query or driver error"""
