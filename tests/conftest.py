"""
Pytest configuration and fixtures.
"""

import sys
from pathlib import Path
import pytest
import pytest_asyncio
import httpx

# Add project root
sys.path.insert(0, str(Path(__file__).parent.parent))

from todoapp.domain.models import Task, TaskListing, StorageError
from todoapp.infra.db import DatabaseEngine
from todoapp.infra.repository import TaskRepository, TaskStore
from todoapp.web.app import create_app


class FailingStore(TaskStore):
    """Store whose every operation hits a broken database"""

    def __init__(self, message: str = "connection reset by peer"):
        self.message = message

    async def list_tasks(self) -> TaskListing:
        return TaskListing(tasks=[], error=self.message)

    async def add_task(self, text: str) -> Task:
        raise StorageError(self.message)

    async def mark_done(self, task_id: int) -> None:
        raise StorageError(self.message)

    async def delete_task(self, task_id: int) -> None:
        raise StorageError(self.message)


@pytest_asyncio.fixture
async def db():
    """Create an in-memory SQLite database for testing"""
    engine = DatabaseEngine("sqlite+aiosqlite:///:memory:")
    await engine.create_tables()

    yield engine

    await engine.dispose()


@pytest.fixture
def repo(db):
    return TaskRepository(db)


def make_client(store: TaskStore) -> httpx.AsyncClient:
    app = create_app(store=store)
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")


@pytest_asyncio.fixture
async def client(repo):
    """HTTP client talking to the app wired to the in-memory repository"""
    async with make_client(repo) as c:
        yield c


@pytest.fixture
def failing_store():
    return FailingStore()


@pytest_asyncio.fixture
async def failing_client(failing_store):
    async with make_client(failing_store) as c:
        yield c
