"""Exercise logging and log queries."""

import logging

import aiosqlite

from ..db.repositories import ExerciseRepository
from ..errors import ServiceError
from ..models.exercise import ExerciseFilters
from ..utils.dates import format_date_string, today_utc
from ..validation import (
    validate_date,
    validate_description,
    validate_duration,
    validate_limit,
    validate_user_id,
)
from .user_service import UserService

logger = logging.getLogger(__name__)


class ExerciseService:
    """Service for logging exercises and reading a user's log."""

    def __init__(self, exercises: ExerciseRepository, user_service: UserService):
        self.exercises = exercises
        self.user_service = user_service

    async def create_exercise(
        self,
        raw_user_id,
        description=None,
        duration=None,
        date=None,
    ) -> dict:
        """Log an exercise for a user.

        Fields are validated in order (user ID, description, duration,
        date) and the first failure is raised.  A missing date defaults to
        today in UTC.

        Returns:
            ``{userId, username, exerciseId, description, duration, date}``
            with ``date`` rendered like ``"Mon Jan 15 2024"``
        """
        user_id = _require(validate_user_id(raw_user_id))
        description = _require(validate_description(description))
        duration = _require(validate_duration(duration))
        exercise_date = _require(validate_date(date)) or today_utc()

        user = await self.user_service.get_user(user_id)

        try:
            exercise = await self.exercises.create(
                user_id=user.id,
                description=description,
                duration=duration,
                date=exercise_date,
            )
        except aiosqlite.Error:
            logger.exception("Failed to create exercise for user %s", user.id)
            raise ServiceError.storage("Failed to create exercise") from None

        logger.info(
            "Logged exercise %s for user %s on %s", exercise.id, user.id, exercise.date
        )
        return {
            "userId": user.id,
            "username": user.username,
            "exerciseId": exercise.id,
            "description": exercise.description,
            "duration": exercise.duration,
            "date": format_date_string(exercise.date),
        }

    async def get_exercise_log(
        self,
        raw_user_id,
        date_from=None,
        date_to=None,
        limit=None,
    ) -> dict:
        """Return a user's exercise log, newest first.

        ``count`` is the number of entries inside the date bounds, which can
        be larger than ``len(logs)`` when ``limit`` truncates the list.
        """
        user_id = _require(validate_user_id(raw_user_id))

        from_validation = validate_date(date_from)
        if not from_validation.valid:
            raise ServiceError.validation(f"Invalid 'from' date: {from_validation.error}")

        to_validation = validate_date(date_to)
        if not to_validation.valid:
            raise ServiceError.validation(f"Invalid 'to' date: {to_validation.error}")

        filters = ExerciseFilters(
            date_from=from_validation.value,
            date_to=to_validation.value,
            limit=_require(validate_limit(limit)),
        )

        user = await self.user_service.get_user(user_id)

        try:
            exercises = await self.exercises.list_by_user(user.id, filters)
            total = await self.exercises.count_by_user(user.id, filters.without_limit())
        except aiosqlite.Error:
            logger.exception("Failed to fetch exercise logs for user %s", user.id)
            raise ServiceError.storage("Failed to fetch exercise logs") from None

        return {
            "id": user.id,
            "username": user.username,
            "count": total,
            "logs": [
                {
                    "id": exercise.id,
                    "description": exercise.description,
                    "duration": exercise.duration,
                    "date": format_date_string(exercise.date),
                }
                for exercise in exercises
            ],
        }


def _require(validation):
    """Unwrap a validation result or raise it as a validation failure."""
    if not validation.valid:
        raise ServiceError.validation(validation.error)
    return validation.value
