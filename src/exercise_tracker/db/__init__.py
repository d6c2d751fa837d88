"""Database layer for exercise-tracker."""

from .engine import Database, connect, get_db_path, init_db
from .repositories import ExerciseRepository, UserRepository, UsernameConflictError

__all__ = [
    "connect",
    "Database",
    "ExerciseRepository",
    "get_db_path",
    "init_db",
    "UserRepository",
    "UsernameConflictError",
]
