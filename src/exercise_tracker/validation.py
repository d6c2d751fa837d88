"""Input normalization and validation.

Every validator is a pure function that takes a loosely typed raw value
(usually a string from a query or form parameter) and returns a
``ValidationResult``.  On success the result carries the normalized value;
on failure it carries a human-readable message.  Callers decide what to do
with a failure; nothing here raises or touches the database.
"""

import math
import re
from dataclasses import dataclass
from datetime import date
from typing import Any

USERNAME_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 500
DURATION_MAX_MINUTES = 10000
LIMIT_MAX = 1000
# Largest id SQLite can store in an INTEGER PRIMARY KEY
USER_ID_MAX = 2**63 - 1

USERNAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")
DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a single field."""

    valid: bool
    value: Any = None
    error: str | None = None

    @classmethod
    def ok(cls, value: Any) -> "ValidationResult":
        return cls(valid=True, value=value)

    @classmethod
    def fail(cls, error: str) -> "ValidationResult":
        return cls(valid=False, error=error)


def _is_absent(raw: Any) -> bool:
    return raw is None or raw == ""


def coerce_number(raw: Any) -> int | float | None:
    """Convert a raw value to a finite number.

    Accepts ints, floats and numeric strings (surrounding whitespace is
    ignored).  Returns None for anything else, including booleans, NaN and
    infinities.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return raw if math.isfinite(raw) else None
    if not isinstance(raw, str):
        return None

    text = raw.strip()
    if INTEGER_PATTERN.fullmatch(text):
        return int(text)
    if DECIMAL_PATTERN.fullmatch(text):
        number = float(text)
        return number if math.isfinite(number) else None
    return None


def coerce_integer(raw: Any) -> int | None:
    """Convert a raw value to an int, or None if it is not a whole number."""
    number = coerce_number(raw)
    if number is None:
        return None
    if isinstance(number, float):
        if not number.is_integer():
            return None
        return int(number)
    return number


def validate_username(raw: Any) -> ValidationResult:
    """Validate and trim a username."""
    if not raw or not isinstance(raw, str):
        return ValidationResult.fail("Username is required and must be a string")

    username = raw.strip()
    if not username:
        return ValidationResult.fail("Username cannot be empty")

    if len(username) > USERNAME_MAX_LENGTH:
        return ValidationResult.fail(
            f"Username must be {USERNAME_MAX_LENGTH} characters or less"
        )

    if not USERNAME_PATTERN.fullmatch(username):
        return ValidationResult.fail(
            "Username can only contain letters, numbers, underscores, and hyphens"
        )

    return ValidationResult.ok(username)


def validate_description(raw: Any) -> ValidationResult:
    """Validate and trim an exercise description."""
    if not raw or not isinstance(raw, str):
        return ValidationResult.fail("Description is required and must be a string")

    description = raw.strip()
    if not description:
        return ValidationResult.fail("Description cannot be empty")

    if len(description) > DESCRIPTION_MAX_LENGTH:
        return ValidationResult.fail(
            f"Description must be {DESCRIPTION_MAX_LENGTH} characters or less"
        )

    try:
        description.encode("utf-8")
    except UnicodeEncodeError:
        return ValidationResult.fail("Description must be valid text")

    return ValidationResult.ok(description)


def validate_duration(raw: Any) -> ValidationResult:
    """Validate a duration in whole minutes."""
    if _is_absent(raw):
        return ValidationResult.fail("Duration is required")

    number = coerce_number(raw)
    if number is None:
        return ValidationResult.fail("Duration must be a valid number")

    if isinstance(number, float):
        if not number.is_integer():
            return ValidationResult.fail("Duration must be an integer")
        number = int(number)

    if number <= 0:
        return ValidationResult.fail("Duration must be a positive integer")

    if number > DURATION_MAX_MINUTES:
        return ValidationResult.fail(
            f"Duration must be {DURATION_MAX_MINUTES} minutes or less"
        )

    return ValidationResult.ok(number)


def validate_date(raw: Any) -> ValidationResult:
    """Validate an optional YYYY-MM-DD date.

    An absent date is valid and yields None; the caller picks the default.
    A malformed string and a well-formed but impossible date (2024-02-30)
    fail with different messages.
    """
    if _is_absent(raw):
        return ValidationResult.ok(None)

    if not isinstance(raw, str):
        return ValidationResult.fail("Date must be in YYYY-MM-DD format")

    match = DATE_PATTERN.fullmatch(raw)
    if not match:
        return ValidationResult.fail("Date must be in YYYY-MM-DD format")

    year, month, day = (int(part) for part in match.groups())
    try:
        parsed = date(year, month, day)
    except ValueError:
        return ValidationResult.fail("Invalid date")

    return ValidationResult.ok(parsed.isoformat())


def validate_user_id(raw: Any) -> ValidationResult:
    """Validate a user id given as a number or numeric string."""
    if _is_absent(raw):
        return ValidationResult.fail("User ID is required")

    user_id = coerce_integer(raw)
    if user_id is None or user_id <= 0 or user_id > USER_ID_MAX:
        return ValidationResult.fail("User ID must be a positive integer")

    return ValidationResult.ok(user_id)


def validate_limit(raw: Any) -> ValidationResult:
    """Validate an optional row cap; absent means no limit."""
    if _is_absent(raw):
        return ValidationResult.ok(None)

    limit = coerce_integer(raw)
    if limit is None or limit <= 0:
        return ValidationResult.fail("Limit must be a positive integer")

    if limit > LIMIT_MAX:
        return ValidationResult.fail(f"Limit cannot exceed {LIMIT_MAX}")

    return ValidationResult.ok(limit)
