"""Infrastructure fixtures — in-memory SQLite engine and SQL store.

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for the four
      store operations (PostgreSQL-specific features not exercised here)
"""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine

from checklist.db.base import Base
from checklist.infrastructure.database import DatabaseSessionManager
from checklist.infrastructure.task_store_sql import SqlTaskStore
import checklist.models  # noqa: F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def db_manager(test_engine):
    return DatabaseSessionManager.from_engine(test_engine)


@pytest.fixture
def sql_store(db_manager):
    return SqlTaskStore(db_manager)
