"""Domain services for exercise-tracker."""

from .exercise_service import ExerciseService
from .user_service import UserService

__all__ = [
    "ExerciseService",
    "UserService",
]
