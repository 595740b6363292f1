"""
Composition root

The only module that constructs concrete repositories. Everything above it
(API routers, scripts) receives services and never sees a backend.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

import psycopg2
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from kiosk.core.config import DataProvider, Settings
from kiosk.core.database import create_db_engine, create_session_factory, get_db_connection
from kiosk.core.exceptions import StorageUnavailable
from kiosk.repositories.orm import OrmCustomerRepository, OrmEmployeeRepository, OrmProductRepository
from kiosk.repositories.sql import SqlCustomerRepository, SqlEmployeeRepository, SqlProductRepository
from kiosk.services import CustomerService, EmployeeService, ProductService

logger = logging.getLogger(__name__)


def _no_op() -> None:
    return None


@dataclass
class ServiceContainer:
    """Services for one process, bound to one backend"""

    provider: DataProvider
    customers: CustomerService
    products: ProductService
    employees: EmployeeService
    # Raises StorageUnavailable when the database cannot be reached
    ping: Callable[[], None] = field(default=_no_op)
    close: Callable[[], None] = field(default=_no_op)


def _orm_ping(engine: Engine) -> Callable[[], None]:
    def ping() -> None:
        try:
            with engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            raise StorageUnavailable(f"Database unreachable: {e}") from e
    return ping


def _sql_ping(database_url: str) -> Callable[[], None]:
    def ping() -> None:
        try:
            conn = get_db_connection(database_url)
        except psycopg2.Error as e:
            raise StorageUnavailable(f"Database unreachable: {e}") from e

        cursor = conn.cursor()
        try:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        finally:
            cursor.close()
            conn.close()
    return ping


def build_services(settings: Settings, provider: Optional[DataProvider] = None) -> ServiceContainer:
    """
    Wire the three services to the backend named by DATA_PROVIDER.

    The choice is made once; a running process never switches backend.
    """
    provider = DataProvider(provider or settings.DATA_PROVIDER)
    logger.info(f"Using the {provider.value} data provider")

    if provider is DataProvider.SQL:
        url = settings.DATABASE_URL
        return ServiceContainer(
            provider=provider,
            customers=CustomerService(SqlCustomerRepository(url)),
            products=ProductService(SqlProductRepository(url)),
            employees=EmployeeService(SqlEmployeeRepository(url)),
            ping=_sql_ping(url),
        )

    engine = create_db_engine(settings.DATABASE_URL)
    session_factory = create_session_factory(engine)
    return ServiceContainer(
        provider=provider,
        customers=CustomerService(OrmCustomerRepository(session_factory)),
        products=ProductService(OrmProductRepository(session_factory)),
        employees=EmployeeService(OrmEmployeeRepository(session_factory)),
        ping=_orm_ping(engine),
        close=engine.dispose,
    )
