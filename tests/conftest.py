"""Pytest configuration and fixtures."""
import os
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

TEST_DB_PATH = Path("test_mission_control.db")
if TEST_DB_PATH.exists():
    TEST_DB_PATH.unlink()

TEST_DATABASE_URL = f"sqlite+aiosqlite:///{TEST_DB_PATH}"
os.environ.setdefault("DATABASE_URL", TEST_DATABASE_URL)
os.environ.setdefault("HEARTBEAT_ENABLED", "false")

from mission_control.main import app  # noqa: E402
from mission_control.config import settings  # noqa: E402
from mission_control.database import Base, create_engine_for, create_session_factory, get_db  # noqa: E402
from mission_control.models.task import Task, Comment, TaskPriority, TaskStatus  # noqa: E402


test_engine = create_engine_for(TEST_DATABASE_URL)
TestSessionLocal = create_session_factory(test_engine)


@pytest_asyncio.fixture(scope="function")
async def db_session():
    """Create a test database session."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionLocal() as session:
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture(scope="function")
def client(db_session: AsyncSession):
    """Create a test client overriding database dependency."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Point the memory workspace at a temporary directory."""
    memory_dir = tmp_path / settings.MEMORY_DIR_NAME
    memory_dir.mkdir()
    monkeypatch.setattr(settings, "WORKSPACE_ROOT", tmp_path)
    return tmp_path


@pytest_asyncio.fixture
async def test_task(db_session: AsyncSession):
    """Create a task with two comments."""
    task = Task(
        title="Backend Integration",
        desc="Connect the dashboard client to the REST backend.",
        status=TaskStatus.IN_PROGRESS,
        priority=TaskPriority.HIGH,
        assigned_to="VIPIN",
    )
    task.comments = [Comment(text="Initial setup done."), Comment(text="Wiring up fetch hooks.")]
    db_session.add(task)
    await db_session.commit()
    await db_session.refresh(task)
    return task


@pytest.fixture
def session_factory(db_session):
    """Session factory bound to the test engine (tables already created)."""
    return TestSessionLocal
