"""Shared CLI utilities."""

import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass
from functools import wraps
from typing import AsyncIterator

import click

from ..config import get_settings
from ..db import Database, ExerciseRepository, UserRepository
from ..errors import ServiceError
from ..services import ExerciseService, UserService


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database has been created."""
    if not get_settings().database_path.exists():
        echo_error("Database not initialized. Run 'exercise-tracker init' first.")
        ctx.exit(1)


@dataclass
class Services:
    """Services bound to one open database."""

    users: UserService
    exercises: ExerciseService


@asynccontextmanager
async def open_services() -> AsyncIterator[Services]:
    """Open the configured database and yield services built on it."""
    async with Database(get_settings().database_path) as connection:
        user_service = UserService(UserRepository(connection))
        yield Services(
            users=user_service,
            exercises=ExerciseService(ExerciseRepository(connection), user_service),
        )


def fail(ctx: click.Context, error: ServiceError) -> None:
    """Report a service failure and exit with status 1."""
    echo_error(error.message)
    ctx.exit(1)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers))]
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row))
        )

    return "\n".join(line.rstrip() for line in lines)
