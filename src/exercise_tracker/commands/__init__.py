"""CLI commands for exercise-tracker."""

from .exercises import exercises
from .init import init
from .serve import serve
from .users import users

__all__ = [
    "exercises",
    "init",
    "serve",
    "users",
]
