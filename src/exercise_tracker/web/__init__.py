"""HTTP interface for exercise-tracker."""

from .app import create_app

__all__ = ["create_app"]
