"""Utility helpers for exercise-tracker."""

from .dates import format_date_string, today_utc

__all__ = ["format_date_string", "today_utc"]
