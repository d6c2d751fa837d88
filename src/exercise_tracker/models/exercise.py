"""Exercise log entry model and query filters."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Exercise:
    """A single logged exercise.

    ``date`` is always the canonical ISO form (YYYY-MM-DD); display
    formatting happens in the service layer.
    """

    id: int
    user_id: int
    description: str
    duration: int
    date: str


@dataclass(frozen=True)
class ExerciseFilters:
    """Filters for a user's exercise log.

    Date bounds are inclusive.  ``limit`` caps the rows returned after
    ordering and is ignored when counting.
    """

    date_from: str | None = None
    date_to: str | None = None
    limit: int | None = None

    def without_limit(self) -> "ExerciseFilters":
        """Copy of these filters with the row cap removed."""
        return ExerciseFilters(date_from=self.date_from, date_to=self.date_to)
