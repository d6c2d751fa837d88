"""exercise-tracker: track users and their logged exercises."""

__version__ = "0.1.0"
