"""Initialize database command."""

import click

from ..config import get_settings
from ..db import Database
from .base import async_command, echo_info, echo_success


@click.command()
@async_command
async def init():
    """Create the SQLite database and its tables.

    Safe to run more than once; existing data is kept.
    """
    db_path = get_settings().database_path
    echo_info(f"Initializing database at {db_path}")

    async with Database(db_path):
        pass

    echo_success("Database initialized")
    click.echo()
    click.echo("Next steps:")
    click.echo("  exercise-tracker users create <username>")
    click.echo("  exercise-tracker serve")
