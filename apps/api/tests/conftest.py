import asyncio
import sys
from pathlib import Path
from typing import Any, Sequence
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Ensure apps/api is importable when tests run from repo root
API_ROOT = Path(__file__).resolve().parents[1]
if str(API_ROOT) not in sys.path:
    sys.path.insert(0, str(API_ROOT))

from talent_directory.core import limiter
from talent_directory.dependencies import get_db, get_record_store
from talent_directory.domain import ProfileStatus
from talent_directory.main import app
from talent_directory.schemas import ProfileRecord
from talent_directory.services.directory import RecordStore, RecordStoreError, StoreOperation
from talent_directory.services.directory.query_compiler import (
    ArrayContains,
    ArrayOverlaps,
    Equals,
    NotOwnedBy,
    ProfileQuery,
)


def make_profile(**overrides: Any) -> ProfileRecord:
    data: dict[str, Any] = {
        "id": str(uuid4()),
        "status": ProfileStatus.APPROVED,
        "name": "Test Person",
        "interested_in": ["speaker"],
        "email": "person@example.com",
    }
    data.update(overrides)
    return ProfileRecord.model_validate(data)


def _matches(record: ProfileRecord, predicate) -> bool:
    if isinstance(predicate, Equals):
        return getattr(record, predicate.field) == predicate.value
    if isinstance(predicate, ArrayContains):
        return predicate.value in getattr(record, predicate.field)
    if isinstance(predicate, ArrayOverlaps):
        return bool(set(getattr(record, predicate.field)) & set(predicate.values))
    if isinstance(predicate, NotOwnedBy):
        return record.user_id != predicate.user_id
    raise TypeError(predicate)


class FakeRecordStore(RecordStore):
    """In-memory store that evaluates ProfileQuery predicates like the Postgres store does."""

    def __init__(self, records: Sequence[ProfileRecord] = (), *, fail: bool = False):
        self.records = list(records)
        self.fail = fail
        self.queries: list[ProfileQuery] = []

    async def query(self, query: ProfileQuery) -> list[ProfileRecord]:
        self.queries.append(query)
        if self.fail:
            raise RecordStoreError(StoreOperation.QUERY, query.describe())
        return [r for r in self.records if all(_matches(r, p) for p in query.predicates)]

    async def query_all(self, projection: Sequence[str], status: ProfileStatus) -> list[dict[str, Any]]:
        if self.fail:
            raise RecordStoreError(StoreOperation.QUERY_ALL, ", ".join(projection))
        return [
            {f: getattr(r, f) for f in projection}
            for r in self.records
            if r.status == status
        ]


class GatedRecordStore(FakeRecordStore):
    """Each query blocks until its gate is set, so tests control completion order."""

    def __init__(self, records: Sequence[ProfileRecord] = ()):
        super().__init__(records)
        self.gates: list[asyncio.Event] = []

    async def query(self, query: ProfileQuery) -> list[ProfileRecord]:
        gate = asyncio.Event()
        self.gates.append(gate)
        await gate.wait()
        return await super().query(query)


@pytest.fixture
def fake_store() -> FakeRecordStore:
    return FakeRecordStore()


@pytest.fixture
def mock_db() -> MagicMock:
    db = MagicMock()
    db.execute = AsyncMock()
    db.flush = AsyncMock()
    db.delete = AsyncMock()
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    return db


@pytest.fixture(autouse=True)
def disable_rate_limits():
    original = limiter.enabled
    limiter.enabled = False
    try:
        yield
    finally:
        limiter.enabled = original


@pytest_asyncio.fixture
async def api_client(fake_store, mock_db):
    async def _get_db():
        yield mock_db

    app.dependency_overrides[get_record_store] = lambda: fake_store
    app.dependency_overrides[get_db] = _get_db
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client
    finally:
        app.dependency_overrides.clear()
