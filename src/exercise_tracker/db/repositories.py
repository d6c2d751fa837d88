"""Data access layer for exercise-tracker."""

import aiosqlite

from ..models.exercise import Exercise, ExerciseFilters
from ..models.user import User


class UsernameConflictError(Exception):
    """Raised when inserting a username that already exists."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Username already exists: {username}")


class UserRepository:
    """Repository for users."""

    def __init__(self, db: aiosqlite.Connection):
        self.db = db

    async def create(self, username: str) -> User:
        """Create a new user.

        Raises:
            UsernameConflictError: If the username is already taken
        """
        try:
            cursor = await self.db.execute(
                "INSERT INTO users (username) VALUES (?)", (username,)
            )
            await self.db.commit()
        except aiosqlite.IntegrityError as e:
            await self.db.rollback()
            if "UNIQUE" in str(e) and "users.username" in str(e):
                raise UsernameConflictError(username) from e
            raise
        return User(id=cursor.lastrowid, username=username)

    async def get(self, user_id: int) -> User | None:
        """Get a user by ID."""
        cursor = await self.db.execute(
            "SELECT id, username FROM users WHERE id = ?", (user_id,)
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_user(row)

    async def get_by_username(self, username: str) -> User | None:
        """Get a user by exact username."""
        cursor = await self.db.execute(
            "SELECT id, username FROM users WHERE username = ?", (username,)
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_user(row)

    async def list_all(self) -> list[User]:
        """List all users in ascending ID order."""
        cursor = await self.db.execute("SELECT id, username FROM users ORDER BY id")
        rows = await cursor.fetchall()
        return [self._row_to_user(row) for row in rows]

    async def exists(self, user_id: int) -> bool:
        """Check whether a user with this ID exists."""
        cursor = await self.db.execute(
            "SELECT COUNT(*) AS count FROM users WHERE id = ?", (user_id,)
        )
        row = await cursor.fetchone()
        return row["count"] > 0

    def _row_to_user(self, row: aiosqlite.Row) -> User:
        return User(id=row["id"], username=row["username"])


class ExerciseRepository:
    """Repository for logged exercises."""

    def __init__(self, db: aiosqlite.Connection):
        self.db = db

    async def create(
        self, user_id: int, description: str, duration: int, date: str
    ) -> Exercise:
        """Insert an exercise for an existing user."""
        try:
            cursor = await self.db.execute(
                """
                INSERT INTO exercises (user_id, description, duration, date)
                VALUES (?, ?, ?, ?)
                """,
                (user_id, description, duration, date),
            )
            await self.db.commit()
        except aiosqlite.Error:
            await self.db.rollback()
            raise
        return Exercise(
            id=cursor.lastrowid,
            user_id=user_id,
            description=description,
            duration=duration,
            date=date,
        )

    async def list_by_user(
        self, user_id: int, filters: ExerciseFilters | None = None
    ) -> list[Exercise]:
        """List a user's exercises, newest date first.

        The limit, if any, is applied after ordering.
        """
        filters = filters or ExerciseFilters()
        where, params = self._build_where(user_id, filters)

        query = (
            "SELECT id, user_id, description, duration, date FROM exercises"
            f" WHERE {where} ORDER BY date DESC, id DESC"
        )
        if filters.limit is not None:
            query += " LIMIT ?"
            params.append(filters.limit)

        cursor = await self.db.execute(query, params)
        rows = await cursor.fetchall()
        return [self._row_to_exercise(row) for row in rows]

    async def count_by_user(
        self, user_id: int, filters: ExerciseFilters | None = None
    ) -> int:
        """Count a user's exercises matching the date bounds.

        Any limit on ``filters`` is ignored.
        """
        filters = filters or ExerciseFilters()
        where, params = self._build_where(user_id, filters)

        cursor = await self.db.execute(
            f"SELECT COUNT(*) AS count FROM exercises WHERE {where}", params
        )
        row = await cursor.fetchone()
        return row["count"]

    def _build_where(
        self, user_id: int, filters: ExerciseFilters
    ) -> tuple[str, list]:
        """Build the WHERE clause shared by listing and counting."""
        clauses = ["user_id = ?"]
        params: list = [user_id]

        if filters.date_from:
            clauses.append("date >= ?")
            params.append(filters.date_from)

        if filters.date_to:
            clauses.append("date <= ?")
            params.append(filters.date_to)

        return " AND ".join(clauses), params

    def _row_to_exercise(self, row: aiosqlite.Row) -> Exercise:
        return Exercise(
            id=row["id"],
            user_id=row["user_id"],
            description=row["description"],
            duration=row["duration"],
            date=row["date"],
        )
