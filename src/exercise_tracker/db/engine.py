"""Database engine setup and initialization."""

import logging
from pathlib import Path

import aiosqlite

from ..config import get_settings

logger = logging.getLogger(__name__)


def get_db_path(db_path: Path | None = None) -> Path:
    """Get the database file path, creating its directory if needed."""
    if db_path is None:
        db_path = get_settings().database_path
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return db_path


async def connect(db_path: Path) -> aiosqlite.Connection:
    """Open a connection with named-column rows and foreign keys enforced."""
    db = await aiosqlite.connect(db_path)
    db.row_factory = aiosqlite.Row
    # SQLite leaves FK enforcement off unless enabled per connection
    await db.execute("PRAGMA foreign_keys = ON")
    return db


async def init_db(db: aiosqlite.Connection) -> None:
    """Create the schema if it does not exist yet."""
    await db.execute("""
        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            username TEXT NOT NULL UNIQUE,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP
        )
    """)

    await db.execute("""
        CREATE TABLE IF NOT EXISTS exercises (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            user_id INTEGER NOT NULL,
            description TEXT NOT NULL,
            duration INTEGER NOT NULL,
            date TEXT NOT NULL,
            created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE
        )
    """)

    # Indexes for the per-user date range queries
    await db.execute("""
        CREATE INDEX IF NOT EXISTS idx_exercises_user_id
        ON exercises(user_id)
    """)
    await db.execute("""
        CREATE INDEX IF NOT EXISTS idx_exercises_date
        ON exercises(date)
    """)

    await db.commit()
    logger.info("Database schema ready")


class Database:
    """Owner of the single connection shared by the whole process.

    Opened once at startup and closed at shutdown.  Repositories are
    handed ``database.connection`` rather than opening their own.
    """

    def __init__(self, db_path: Path | None = None):
        self.db_path = get_db_path(db_path)
        self._connection: aiosqlite.Connection | None = None

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    @property
    def connection(self) -> aiosqlite.Connection:
        if self._connection is None:
            raise RuntimeError("Database is not open")
        return self._connection

    async def open(self) -> aiosqlite.Connection:
        """Open the connection and make sure the schema exists."""
        if self._connection is None:
            logger.info("Opening database %s", self.db_path)
            self._connection = await connect(self.db_path)
            await init_db(self._connection)
        return self._connection

    async def close(self) -> None:
        """Close the connection. Safe to call more than once."""
        if self._connection is not None:
            await self._connection.close()
            self._connection = None
            logger.info("Closed database %s", self.db_path)

    async def __aenter__(self) -> aiosqlite.Connection:
        return await self.open()

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
