"""Tests for the data access layer."""

import aiosqlite
import pytest

from exercise_tracker.db import Database, UsernameConflictError
from exercise_tracker.models import ExerciseFilters, User


async def _seed_exercises(exercise_repo, user_id, dates):
    for i, day in enumerate(dates):
        await exercise_repo.create(user_id, f"Session {i}", 30 + i, day)


class TestDatabase:
    """Tests for the shared connection lifecycle."""

    @pytest.mark.asyncio
    async def test_open_creates_schema(self, temp_db_path):
        async with Database(temp_db_path) as db:
            cursor = await db.execute(
                "SELECT name FROM sqlite_master WHERE type IN ('table', 'index')"
            )
            names = {row["name"] for row in await cursor.fetchall()}

        assert {"users", "exercises", "idx_exercises_user_id", "idx_exercises_date"} <= names

    @pytest.mark.asyncio
    async def test_foreign_keys_enforced(self, database):
        cursor = await database.connection.execute("PRAGMA foreign_keys")
        row = await cursor.fetchone()
        assert row[0] == 1

    @pytest.mark.asyncio
    async def test_connection_unavailable_after_close(self, temp_db_path):
        db = Database(temp_db_path)
        await db.open()
        await db.close()

        assert not db.is_open
        with pytest.raises(RuntimeError):
            db.connection
        # Closing twice is harmless
        await db.close()

    @pytest.mark.asyncio
    async def test_reopen_keeps_data(self, temp_db_path):
        async with Database(temp_db_path) as db:
            await db.execute("INSERT INTO users (username) VALUES ('alice')")
            await db.commit()

        async with Database(temp_db_path) as db:
            cursor = await db.execute("SELECT username FROM users")
            rows = await cursor.fetchall()

        assert [row["username"] for row in rows] == ["alice"]


class TestUserRepository:
    """Tests for UserRepository."""

    @pytest.mark.asyncio
    async def test_create_and_get(self, user_repo):
        user = await user_repo.create("alice")

        assert user == User(id=1, username="alice")
        assert await user_repo.get(user.id) == user
        assert await user_repo.get_by_username("alice") == user

    @pytest.mark.asyncio
    async def test_missing_user(self, user_repo):
        assert await user_repo.get(99) is None
        assert await user_repo.get_by_username("nobody") is None
        assert await user_repo.exists(99) is False

    @pytest.mark.asyncio
    async def test_duplicate_username_conflict(self, user_repo):
        await user_repo.create("alice")

        with pytest.raises(UsernameConflictError):
            await user_repo.create("alice")

        # The shared connection is still usable after the failed insert
        bob = await user_repo.create("bob")
        assert await user_repo.exists(bob.id)
        assert [u.username for u in await user_repo.list_all()] == ["alice", "bob"]

    @pytest.mark.asyncio
    async def test_list_all_ascending(self, user_repo):
        assert await user_repo.list_all() == []

        for name in ["carol", "alice", "bob"]:
            await user_repo.create(name)

        users = await user_repo.list_all()
        assert [u.username for u in users] == ["carol", "alice", "bob"]
        assert [u.id for u in users] == sorted(u.id for u in users)

    @pytest.mark.asyncio
    async def test_exists(self, user_repo):
        user = await user_repo.create("alice")
        assert await user_repo.exists(user.id) is True


class TestExerciseRepository:
    """Tests for ExerciseRepository."""

    @pytest.mark.asyncio
    async def test_create(self, user_repo, exercise_repo):
        user = await user_repo.create("alice")

        exercise = await exercise_repo.create(user.id, "Running", 30, "2024-01-15")

        assert exercise.id is not None
        assert exercise.user_id == user.id
        assert exercise.date == "2024-01-15"

    @pytest.mark.asyncio
    async def test_create_for_unknown_user_violates_foreign_key(self, exercise_repo):
        with pytest.raises(aiosqlite.IntegrityError):
            await exercise_repo.create(9999, "Running", 30, "2024-01-15")

    @pytest.mark.asyncio
    async def test_list_ordered_newest_first(self, user_repo, exercise_repo):
        user = await user_repo.create("alice")
        await _seed_exercises(exercise_repo, user.id, ["2024-01-15", "2024-01-10", "2024-01-20"])

        exercises = await exercise_repo.list_by_user(user.id)

        assert [e.date for e in exercises] == ["2024-01-20", "2024-01-15", "2024-01-10"]

    @pytest.mark.asyncio
    async def test_inclusive_date_bounds(self, user_repo, exercise_repo):
        user = await user_repo.create("alice")
        await _seed_exercises(exercise_repo, user.id, ["2024-01-10", "2024-01-15", "2024-01-20"])

        filters = ExerciseFilters(date_from="2024-01-10", date_to="2024-01-15")
        exercises = await exercise_repo.list_by_user(user.id, filters)

        assert [e.date for e in exercises] == ["2024-01-15", "2024-01-10"]
        assert await exercise_repo.count_by_user(user.id, filters) == 2

    @pytest.mark.asyncio
    async def test_limit_applies_after_ordering(self, user_repo, exercise_repo):
        user = await user_repo.create("alice")
        await _seed_exercises(exercise_repo, user.id, ["2024-01-10", "2024-01-20", "2024-01-15"])

        filters = ExerciseFilters(limit=2)
        exercises = await exercise_repo.list_by_user(user.id, filters)

        assert [e.date for e in exercises] == ["2024-01-20", "2024-01-15"]

    @pytest.mark.asyncio
    async def test_count_ignores_limit(self, user_repo, exercise_repo):
        user = await user_repo.create("alice")
        await _seed_exercises(exercise_repo, user.id, ["2024-01-10", "2024-01-15", "2024-01-20"])

        assert await exercise_repo.count_by_user(user.id, ExerciseFilters(limit=1)) == 3

    @pytest.mark.asyncio
    async def test_scoped_to_user(self, user_repo, exercise_repo):
        alice = await user_repo.create("alice")
        bob = await user_repo.create("bob")
        await _seed_exercises(exercise_repo, alice.id, ["2024-01-10", "2024-01-11"])
        await _seed_exercises(exercise_repo, bob.id, ["2024-01-12"])

        assert await exercise_repo.count_by_user(alice.id) == 2
        assert [e.user_id for e in await exercise_repo.list_by_user(bob.id)] == [bob.id]

    @pytest.mark.asyncio
    async def test_deleting_user_cascades(self, database, user_repo, exercise_repo):
        user = await user_repo.create("alice")
        await _seed_exercises(exercise_repo, user.id, ["2024-01-10"])

        await database.connection.execute("DELETE FROM users WHERE id = ?", (user.id,))
        await database.connection.commit()

        assert await exercise_repo.count_by_user(user.id) == 0
