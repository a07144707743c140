import asyncio
from datetime import date

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.api.deps import (
    get_custom_exercise_store,
    get_exercise_catalog,
    get_session_store,
    get_today,
)
import app.models  # noqa: F401 - register all models
from app.db.base import Base
from app.schemas.session import WorkoutSession
from app.services.exercise_catalog import ExerciseCatalogError

TODAY = date(2024, 3, 15)


def make_session(day: str, *entries) -> WorkoutSession:
    """make_session("2024-01-01", ("Chest", "Bench Press", [(10, 100), (8, 110)]))"""
    return WorkoutSession.model_validate(
        {
            "date": day,
            "exercises": [
                {
                    "muscle_group": group,
                    "exercise_name": name,
                    "sets": [{"reps": r, "weight": w} for r, w in sets],
                }
                for group, name, sets in entries
            ],
        }
    )


class FakeSessionStore:
    def __init__(self, sessions=None, fail: Exception | None = None):
        self.sessions = list(sessions or [])
        self.fail = fail
        self.calls = []

    async def list_sessions(self, start_date=None, end_date=None):
        self.calls.append((start_date, end_date))
        if self.fail:
            raise self.fail
        return list(self.sessions)


class FakeCustomStore:
    def __init__(self, by_group=None, fail: Exception | None = None):
        self.by_group = {k: list(v) for k, v in (by_group or {}).items()}
        self.fail = fail
        self.grouped_calls = 0

    async def names_for(self, muscle_group):
        if self.fail:
            raise self.fail
        return list(self.by_group.get(muscle_group, []))

    async def grouped(self):
        self.grouped_calls += 1
        if self.fail:
            raise self.fail
        return {k: list(v) for k, v in self.by_group.items()}

    async def add(self, muscle_group, name):
        names = self.by_group.setdefault(muscle_group, [])
        if name in names:
            return False
        names.append(name)
        return True


class FakeCatalog:
    def __init__(self, by_group=None, failing=(), delays=None):
        self.by_group = by_group or {}
        self.failing = set(failing)
        self.delays = delays or {}
        self.calls = []

    async def exercise_names(self, muscle_group):
        self.calls.append(muscle_group)
        delay = self.delays.get(muscle_group)
        if delay:
            await asyncio.sleep(delay)
        if muscle_group in self.failing:
            raise ExerciseCatalogError("catalog unreachable")
        return list(self.by_group.get(muscle_group, []))


@pytest.fixture
def session_store():
    return FakeSessionStore()


@pytest.fixture
def custom_store():
    return FakeCustomStore()


@pytest.fixture
def catalog():
    return FakeCatalog()


@pytest.fixture
def client(session_store, custom_store, catalog):
    from app.main import app

    app.dependency_overrides[get_session_store] = lambda: session_store
    app.dependency_overrides[get_custom_exercise_store] = lambda: custom_store
    app.dependency_overrides[get_exercise_catalog] = lambda: catalog
    app.dependency_overrides[get_today] = lambda: TODAY

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def db_session():
    """AsyncSession on a fresh in-memory SQLite database with all tables created."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    maker = async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
    async with maker() as session:
        yield session
    await engine.dispose()
