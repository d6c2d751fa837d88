"""Date helpers shared by validation and the services."""

from datetime import date, datetime, timezone

# Fixed English names so rendering does not depend on the process locale
WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def today_utc() -> str:
    """Get the current UTC date in YYYY-MM-DD format."""
    return datetime.now(timezone.utc).date().isoformat()


def format_date_string(iso_date: str) -> str:
    """Render a stored YYYY-MM-DD date for display.

    Example: ``"2024-01-15"`` becomes ``"Mon Jan 15 2024"``.
    """
    day = date.fromisoformat(iso_date)
    return (
        f"{WEEKDAY_NAMES[day.weekday()]} {MONTH_NAMES[day.month - 1]} "
        f"{day.day:02d} {day.year:04d}"
    )
