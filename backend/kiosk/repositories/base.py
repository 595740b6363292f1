"""
Repository contract

Every storage backend implements this protocol for every entity type, so the
service layer depends on the contract and never on a concrete backend.

Rules every implementation must honor:
- get_by_id / first_or_default return None for "not found", never raise
- add / add_range assign a fresh id (and created_at for timestamped
  entities) when absent
- update is a full replace by id and does not check existence
- delete / delete_by_id succeed silently when the id is absent
- connection, transport and SQL failures raise StorageUnavailable
- a storage-level unique constraint violation raises ConflictError
- no validation of business rules happens here
"""
import re
from typing import Any, Iterable, List, Optional, Protocol, TypeVar, runtime_checkable
from uuid import UUID, uuid4

from kiosk.core.exceptions import ConflictError
from kiosk.core.time_utils import utcnow
from kiosk.domain.entity import Entity
from kiosk.domain.query import Spec

T = TypeVar("T", bound=Entity)

# Named unique constraints and the field each one guards
UNIQUE_CONSTRAINT_FIELDS = {
    "uq_customers_email": "email",
    "uq_products_sku": "sku",
    "uq_employees_email": "email",
}

# SQLite names the column instead: "UNIQUE constraint failed: customers.email"
_SQLITE_UNIQUE = re.compile(r"UNIQUE constraint failed: \w+\.(\w+)")


@runtime_checkable
class Repository(Protocol[T]):
    """Storage operations any backend must support for entity type T"""

    def get_by_id(self, entity_id: UUID) -> Optional[T]:
        """Entity with this id, or None"""
        ...

    def get_all(self) -> List[T]:
        """Full snapshot in a stable display order"""
        ...

    def find(self, spec: Spec) -> List[T]:
        """All entities satisfying the spec"""
        ...

    def first_or_default(self, spec: Spec) -> Optional[T]:
        """First entity satisfying the spec, or None"""
        ...

    def add(self, entity: T) -> T:
        """Persist a new entity and return it as stored"""
        ...

    def add_range(self, entities: Iterable[T]) -> List[T]:
        """Persist several new entities"""
        ...

    def update(self, entity: T) -> None:
        """Replace the stored row with the same id"""
        ...

    def delete(self, entity: T) -> None:
        """Remove the entity (no-op if absent)"""
        ...

    def delete_by_id(self, entity_id: UUID) -> None:
        """Remove by id (no-op if absent)"""
        ...

    def exists(self, entity_id: UUID) -> bool:
        ...

    def count(self, spec: Optional[Spec] = None) -> int:
        """Number of entities, optionally only those satisfying the spec"""
        ...


def prepare_new(entity: T) -> T:
    """
    Assign identity and creation time when absent.

    Shared by every backend's add / add_range so both assign the same way.
    """
    if entity.id is None:
        entity.id = uuid4()
    if entity.timestamped and getattr(entity, "created_at", None) is None:
        entity.created_at = utcnow()
    return entity


def unique_conflict(driver_error: Any, table: str, entity: Optional[Entity] = None) -> ConflictError:
    """
    ConflictError for a storage-level unique violation.

    The field comes from the violated constraint's name (PostgreSQL) or from
    the error message (SQLite). The value is read from `entity` when the
    write involved a single entity.
    """
    constraint = getattr(getattr(driver_error, "diag", None), "constraint_name", None)
    field = UNIQUE_CONSTRAINT_FIELDS.get(constraint)
    if field is None:
        match = _SQLITE_UNIQUE.search(str(driver_error))
        field = match.group(1) if match else None

    if field is None:
        return ConflictError(f"A row in {table} with the same unique value already exists.")

    value = getattr(entity, field, None) if entity is not None else None
    if value is None:
        return ConflictError(f"A row in {table} with the same {field} already exists.", field=field)
    return ConflictError(f"A row in {table} with {field} '{value}' already exists.", field=field, value=value)
