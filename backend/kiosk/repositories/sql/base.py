"""
Direct-SQL Repository base - Backend B

Each method issues one parameterized statement over a connection that is
opened and closed inside the call. Raw statements cannot express arbitrary
query specifications, so find / first_or_default / count(spec) fetch the
whole table through get_all() and filter in process memory: correct, but
O(n) per query.
"""
import logging
from contextlib import contextmanager
from typing import Generic, Iterator, List, Optional, TypeVar
from uuid import UUID

import psycopg2
from psycopg2 import errors as pg_errors

from kiosk.core.database import get_db_connection_dict
from kiosk.core.exceptions import StorageUnavailable
from kiosk.domain.entity import Entity
from kiosk.domain.query import Spec, matches
from kiosk.repositories.base import unique_conflict

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Entity)


class SqlRepository(Generic[T]):
    """
    Shared plumbing for the psycopg2 repositories

    Subclasses set `table` and implement the statements that depend on
    column lists: get_by_id, get_all, add, add_range, update.
    """

    table: str

    def __init__(self, database_url: str):
        self._database_url = database_url

    @contextmanager
    def _cursor(self, entity: Optional[T] = None) -> Iterator:
        """
        RealDictCursor on a fresh connection.

        Commits when the block succeeds, rolls back otherwise, and always
        closes cursor and connection. `entity` is the single entity being
        written, if any, so a unique violation can report its value.
        """
        try:
            conn = get_db_connection_dict(self._database_url)
        except psycopg2.Error as e:
            logger.error(f"Could not connect to database: {e}")
            raise StorageUnavailable(f"Could not connect to database: {e}") from e

        cursor = conn.cursor()
        try:
            yield cursor
            conn.commit()
        except pg_errors.UniqueViolation as e:
            conn.rollback()
            raise unique_conflict(e, self.table, entity) from e
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Database error on {self.table}: {e}")
            raise StorageUnavailable(f"Database error on {self.table}: {e}") from e
        finally:
            cursor.close()
            conn.close()

    # ------------------------------------------------------------------
    # Implemented per entity
    # ------------------------------------------------------------------

    def get_all(self) -> List[T]:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Predicate queries - evaluated in memory
    # ------------------------------------------------------------------

    def find(self, spec: Spec) -> List[T]:
        return [entity for entity in self.get_all() if matches(spec, entity)]

    def first_or_default(self, spec: Spec) -> Optional[T]:
        for entity in self.get_all():
            if matches(spec, entity):
                return entity
        return None

    # ------------------------------------------------------------------
    # Statements that only need the table name
    # ------------------------------------------------------------------

    def exists(self, entity_id: UUID) -> bool:
        with self._cursor() as cursor:
            cursor.execute(f"SELECT 1 FROM {self.table} WHERE id = %s", (entity_id,))
            return cursor.fetchone() is not None

    def count(self, spec: Optional[Spec] = None) -> int:
        if spec is not None:
            return len(self.find(spec))

        with self._cursor() as cursor:
            cursor.execute(f"SELECT COUNT(*) AS total FROM {self.table}")
            return cursor.fetchone()['total']

    def delete(self, entity: T) -> None:
        self.delete_by_id(entity.id)

    def delete_by_id(self, entity_id: UUID) -> None:
        with self._cursor() as cursor:
            cursor.execute(f"DELETE FROM {self.table} WHERE id = %s", (entity_id,))
