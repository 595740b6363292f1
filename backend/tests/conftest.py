"""
Pytest fixtures and configuration for the Kiosk backend tests

Provides:
- InMemoryRepository: a Repository implementation backed by a dict that
  counts writes, for service and API tests
- SQLite-backed ORM fixtures
- PostgreSQL fixtures gated on TEST_DATABASE_URL
"""
import os
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Sequence
from uuid import UUID

import pytest
from dotenv import load_dotenv

from kiosk.core.config import DataProvider
from kiosk.core.database import Base, create_db_engine, create_session_factory
from kiosk.domain import matches
from kiosk.repositories.base import prepare_new
from kiosk.services import CustomerService, EmployeeService, ProductService
import kiosk.models  # noqa: F401

# Load environment variables for tests
load_dotenv()

FIXED_NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


class InMemoryRepository:
    """
    Repository contract over a dict, with write counters

    Stored entities are copies, so mutating a returned entity never changes
    storage without an explicit update().
    """

    def __init__(self, order_by: Sequence[str] = ()):
        self._rows: Dict[UUID, object] = {}
        self._order_by = order_by
        self.adds = 0
        self.updates = 0
        self.deletes = 0

    @property
    def writes(self) -> int:
        return self.adds + self.updates + self.deletes

    def _sorted(self, entities) -> List:
        return sorted(entities, key=lambda e: tuple(getattr(e, name) for name in self._order_by))

    def get_by_id(self, entity_id):
        row = self._rows.get(entity_id)
        return row.model_copy() if row is not None else None

    def get_all(self):
        return [row.model_copy() for row in self._sorted(self._rows.values())]

    def find(self, spec):
        return [row for row in self.get_all() if matches(spec, row)]

    def first_or_default(self, spec):
        found = self.find(spec)
        return found[0] if found else None

    def add(self, entity):
        prepare_new(entity)
        self._rows[entity.id] = entity.model_copy()
        self.adds += 1
        return entity

    def add_range(self, entities: Iterable):
        return [self.add(entity) for entity in entities]

    def update(self, entity):
        self.updates += 1
        if entity.id in self._rows:
            self._rows[entity.id] = entity.model_copy()

    def delete(self, entity):
        self.delete_by_id(entity.id)

    def delete_by_id(self, entity_id):
        self.deletes += 1
        self._rows.pop(entity_id, None)

    def exists(self, entity_id) -> bool:
        return entity_id in self._rows

    def count(self, spec: Optional[object] = None) -> int:
        if spec is None:
            return len(self._rows)
        return len(self.find(spec))


# ============================================================================
# In-memory services
# ============================================================================

@pytest.fixture
def customer_repository():
    return InMemoryRepository(order_by=("last_name", "first_name"))


@pytest.fixture
def product_repository():
    return InMemoryRepository(order_by=("name",))


@pytest.fixture
def employee_repository():
    return InMemoryRepository(order_by=("last_name", "first_name"))


@pytest.fixture
def clock():
    """Fixed 'now' for hire date checks"""
    return lambda: FIXED_NOW


@pytest.fixture
def customer_service(customer_repository):
    return CustomerService(customer_repository)


@pytest.fixture
def product_service(product_repository):
    return ProductService(product_repository)


@pytest.fixture
def employee_service(employee_repository, clock):
    return EmployeeService(employee_repository, clock=clock)


@pytest.fixture
def service_container(customer_service, product_service, employee_service):
    from kiosk.container import ServiceContainer

    return ServiceContainer(
        provider=DataProvider.ORM,
        customers=customer_service,
        products=product_service,
        employees=employee_service,
    )


# ============================================================================
# SQLite (ORM backend)
# ============================================================================

@pytest.fixture
def sqlite_url(tmp_path):
    return f"sqlite:///{tmp_path / 'kiosk.db'}"


@pytest.fixture
def sqlite_engine(sqlite_url):
    engine = create_db_engine(sqlite_url)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(sqlite_engine):
    """Session factory over a SQLite database with every table created"""
    Base.metadata.create_all(sqlite_engine)
    return create_session_factory(sqlite_engine)


# ============================================================================
# PostgreSQL (integration)
# ============================================================================

@pytest.fixture(scope="session")
def test_database_url():
    """
    Dedicated PostgreSQL database for integration tests

    Its tables are emptied by the tests; never point it at real data.
    """
    url = os.getenv("TEST_DATABASE_URL")
    if not url:
        pytest.skip("TEST_DATABASE_URL not configured")
    return url


@pytest.fixture
def sample_customer_data():
    return {
        "first_name": "Jane",
        "last_name": "Doe",
        "email": "jane@x.com",
        "phone": None,
    }


@pytest.fixture
def sample_employee_data():
    return {
        "first_name": "John",
        "last_name": "Smith",
        "email": "john.smith@kiosk.test",
        "hire_date": datetime(2024, 3, 1, tzinfo=timezone.utc),
        "hourly_rate": "15.50",
    }
