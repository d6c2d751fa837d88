"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from exercise_tracker.config import Settings
from exercise_tracker.db import Database, ExerciseRepository, UserRepository
from exercise_tracker.services import ExerciseService, UserService
from exercise_tracker.web import create_app


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest_asyncio.fixture
async def database(temp_db_path):
    """An open database with the schema applied."""
    db = Database(temp_db_path)
    await db.open()
    yield db
    await db.close()


@pytest.fixture
def user_repo(database):
    return UserRepository(database.connection)


@pytest.fixture
def exercise_repo(database):
    return ExerciseRepository(database.connection)


@pytest.fixture
def user_service(user_repo):
    return UserService(user_repo)


@pytest.fixture
def exercise_service(exercise_repo, user_service):
    return ExerciseService(exercise_repo, user_service)


@pytest.fixture
def settings(temp_db_path):
    """Settings pointing at the temporary database, ignoring any .env file."""
    return Settings(database_path=temp_db_path, _env_file=None)


@pytest.fixture
def client(settings):
    """Test client with the app lifespan running."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client
