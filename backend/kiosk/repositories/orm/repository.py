"""
ORM Repository - Backend A

Generic SQLAlchemy implementation of the repository contract. Every public
call is one unit of work: it opens a session, does its work, commits (for
writes) and closes the session before returning. Query specifications are
compiled into server-side WHERE clauses.

Rows are converted to pydantic domain entities on the way out, so callers
never hold live ORM objects.
"""
import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Generic, Iterable, Iterator, List, Optional, Sequence, Type, TypeVar
from uuid import UUID

from sqlalchemy import and_, false, func, or_, true
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from kiosk.core.database import Base
from kiosk.core.exceptions import StorageUnavailable, ValidationError
from kiosk.core.time_utils import as_utc
from kiosk.domain.entity import Entity
from kiosk.domain.query import AllOf, AnyOf, Condition, Op, Spec
from kiosk.repositories.base import prepare_new, unique_conflict

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Entity)

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    """True when an IntegrityError comes from a UNIQUE constraint"""
    orig = getattr(error, "orig", None)
    if getattr(orig, "pgcode", None) == UNIQUE_VIOLATION:
        return True
    # SQLite: "UNIQUE constraint failed: customers.email"
    return "unique" in str(orig).lower()


def compile_spec(spec: Spec, model: Type[Base]):
    """
    Translate a query specification into a SQLAlchemy filter expression.

    Mirrors kiosk.domain.query.matches so both backends select the same rows.
    """
    if isinstance(spec, AllOf):
        if not spec.specs:
            return true()
        return and_(*(compile_spec(s, model) for s in spec.specs))
    if isinstance(spec, AnyOf):
        if not spec.specs:
            return false()
        return or_(*(compile_spec(s, model) for s in spec.specs))
    if not isinstance(spec, Condition):
        raise TypeError(f"Unsupported spec type: {type(spec).__name__}")

    if spec.field not in model.__table__.columns:
        raise ValidationError(f"Unknown field '{spec.field}' for {model.__tablename__}", field=spec.field)

    column = getattr(model, spec.field)
    value = spec.value

    if spec.op is Op.EQ:
        return column.is_(None) if value is None else column == value
    if spec.op is Op.NE:
        return column.is_not(None) if value is None else column != value
    if spec.op is Op.ICONTAINS:
        if value is None:
            return false()
        return func.lower(column).contains(str(value).lower(), autoescape=True)

    if value is None:
        return false()
    if spec.op is Op.LT:
        return column < value
    if spec.op is Op.LE:
        return column <= value
    if spec.op is Op.GT:
        return column > value
    return column >= value


class OrmRepository(Generic[T]):
    """
    Repository[T] backed by SQLAlchemy sessions

    Args:
        session_factory: sessionmaker bound to the kiosk engine
        model: ORM table class
        entity: pydantic domain class
        order_by: column names for get_all / find ordering
    """

    model: Type[Base]
    entity: Type[T]
    order_by: Sequence[str] = ()

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    # ------------------------------------------------------------------
    # Plumbing
    # ------------------------------------------------------------------

    @contextmanager
    def _unit_of_work(self, entity: Optional[T] = None) -> Iterator[Session]:
        """
        Session scoped to one call; driver errors become typed kiosk errors.

        `entity` is the single entity being written, if any, so a unique
        violation can report the offending value.
        """
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            session.rollback()
            if is_unique_violation(e):
                raise unique_conflict(e.orig, self.model.__tablename__, entity) from e
            logger.error(f"Integrity error on {self.model.__tablename__}: {e}")
            raise StorageUnavailable(f"Storage rejected write to {self.model.__tablename__}: {e.orig}") from e
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Database error on {self.model.__tablename__}: {e}")
            raise StorageUnavailable(f"Database error on {self.model.__tablename__}: {e}") from e
        finally:
            session.close()

    def _ordering(self):
        return [getattr(self.model, name) for name in self.order_by]

    def _to_entity(self, row) -> T:
        data = {}
        for column in self.model.__table__.columns:
            value = getattr(row, column.key)
            # SQLite hands back naive datetimes; everything we store is UTC
            if isinstance(value, datetime):
                value = as_utc(value)
            data[column.key] = value
        return self.entity(**data)

    def _to_row(self, entity: T):
        return self.model(**entity.model_dump())

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_by_id(self, entity_id: UUID) -> Optional[T]:
        with self._unit_of_work() as session:
            row = session.get(self.model, entity_id)
            return self._to_entity(row) if row is not None else None

    def get_all(self) -> List[T]:
        with self._unit_of_work() as session:
            rows = session.query(self.model).order_by(*self._ordering()).all()
            return [self._to_entity(row) for row in rows]

    def find(self, spec: Spec) -> List[T]:
        criteria = compile_spec(spec, self.model)
        with self._unit_of_work() as session:
            rows = (
                session.query(self.model)
                .filter(criteria)
                .order_by(*self._ordering())
                .all()
            )
            return [self._to_entity(row) for row in rows]

    def first_or_default(self, spec: Spec) -> Optional[T]:
        criteria = compile_spec(spec, self.model)
        with self._unit_of_work() as session:
            row = (
                session.query(self.model)
                .filter(criteria)
                .order_by(*self._ordering())
                .first()
            )
            return self._to_entity(row) if row is not None else None

    def exists(self, entity_id: UUID) -> bool:
        with self._unit_of_work() as session:
            return session.query(self.model.id).filter(self.model.id == entity_id).first() is not None

    def count(self, spec: Optional[Spec] = None) -> int:
        with self._unit_of_work() as session:
            query = session.query(self.model)
            if spec is not None:
                query = query.filter(compile_spec(spec, self.model))
            return query.count()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def add(self, entity: T) -> T:
        prepare_new(entity)
        with self._unit_of_work(entity) as session:
            session.add(self._to_row(entity))
            session.commit()
        return entity

    def add_range(self, entities: Iterable[T]) -> List[T]:
        entities = [prepare_new(entity) for entity in entities]
        with self._unit_of_work() as session:
            session.add_all([self._to_row(entity) for entity in entities])
            session.commit()
        return entities

    def update(self, entity: T) -> None:
        with self._unit_of_work(entity) as session:
            row = session.get(self.model, entity.id)
            if row is None:
                # Same as an UPDATE that matches no rows
                return
            # Creation time is never rewritten, same as the SQL backend
            for key, value in entity.model_dump(exclude={"id", "created_at"}).items():
                setattr(row, key, value)
            session.commit()

    def delete(self, entity: T) -> None:
        self.delete_by_id(entity.id)

    def delete_by_id(self, entity_id: UUID) -> None:
        with self._unit_of_work() as session:
            row = session.get(self.model, entity_id)
            if row is None:
                return
            session.delete(row)
            session.commit()
