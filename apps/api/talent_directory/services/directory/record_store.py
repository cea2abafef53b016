"""
Record store collaborator: executes ProfileQuery predicates against the profiles table.

Predicate mapping (PostgreSQL):
- Equals         -> column = value
- ArrayContains  -> column @> ARRAY[value]
- ArrayOverlaps  -> column && ARRAY[values]
- NotOwnedBy     -> user_id IS DISTINCT FROM value
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from talent_directory.db.models import Profile
from talent_directory.domain import ProfileStatus
from talent_directory.schemas.directory import ProfileRecord
from .errors import RecordStoreError, StoreOperation
from .query_compiler import (
    ArrayContains,
    ArrayOverlaps,
    Equals,
    NotOwnedBy,
    Predicate,
    ProfileQuery,
)


class RecordStore(ABC):
    """Queryable profile collection. Implementations raise RecordStoreError on I/O failure."""

    @abstractmethod
    async def query(self, query: ProfileQuery) -> list[ProfileRecord]:
        ...

    @abstractmethod
    async def query_all(self, projection: Sequence[str], status: ProfileStatus) -> list[dict[str, Any]]:
        ...


def _column(field: str):
    col = getattr(Profile, field, None)
    if col is None:
        raise ValueError(f"Unknown profile field: {field}")
    return col


def _to_clause(predicate: Predicate):
    if isinstance(predicate, Equals):
        return _column(predicate.field) == predicate.value
    if isinstance(predicate, ArrayContains):
        return _column(predicate.field).contains([predicate.value])
    if isinstance(predicate, ArrayOverlaps):
        return _column(predicate.field).overlap(list(predicate.values))
    if isinstance(predicate, NotOwnedBy):
        return Profile.user_id.is_distinct_from(predicate.user_id)
    raise TypeError(f"Unsupported predicate: {type(predicate).__name__}")


def build_profile_statement(query: ProfileQuery) -> Select:
    """SELECT profiles matching every predicate, newest first (stable input order for ranking)."""
    stmt = select(Profile)
    for predicate in query.predicates:
        stmt = stmt.where(_to_clause(predicate))
    return stmt.order_by(Profile.created_at.desc(), Profile.id)


def build_projection_statement(projection: Sequence[str], status: ProfileStatus) -> Select:
    return select(*[_column(f) for f in projection]).where(Profile.status == status.value)


class SqlAlchemyRecordStore(RecordStore):
    """Postgres-backed store. Opens one AsyncSession per call so concurrent searches never share one."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def query(self, query: ProfileQuery) -> list[ProfileRecord]:
        stmt = build_profile_statement(query)
        try:
            async with self._session_factory() as db:
                result = await db.execute(stmt)
                profiles = result.scalars().all()
        except (SQLAlchemyError, OSError) as e:
            raise RecordStoreError(StoreOperation.QUERY, query.describe(), e) from e
        return [ProfileRecord.model_validate(p) for p in profiles]

    async def query_all(self, projection: Sequence[str], status: ProfileStatus) -> list[dict[str, Any]]:
        stmt = build_projection_statement(projection, status)
        try:
            async with self._session_factory() as db:
                result = await db.execute(stmt)
                rows = result.all()
        except (SQLAlchemyError, OSError) as e:
            raise RecordStoreError(StoreOperation.QUERY_ALL, ", ".join(projection), e) from e
        return [dict(row._mapping) for row in rows]
