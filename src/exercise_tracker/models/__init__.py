"""Data models for exercise-tracker."""

from .exercise import Exercise, ExerciseFilters
from .user import User

__all__ = [
    "Exercise",
    "ExerciseFilters",
    "User",
]
