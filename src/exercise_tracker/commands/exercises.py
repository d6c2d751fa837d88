"""Exercise logging commands."""

import click
import questionary
from questionary import Style

from ..errors import ServiceError
from .base import (
    async_command,
    echo_info,
    echo_success,
    ensure_initialized,
    fail,
    format_table,
    open_services,
)

prompt_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
    ]
)


@click.group()
@click.pass_context
def exercises(ctx):
    """Log exercises and view exercise logs."""
    ensure_initialized(ctx)


async def _prompt_missing(description: str | None, duration: str | None):
    """Ask for any required field not given on the command line."""
    if description is None:
        description = await questionary.text(
            "What did you do?",
            style=prompt_style,
        ).ask_async()
    if duration is None:
        duration = await questionary.text(
            "How many minutes?",
            validate=lambda text: text.strip().isdigit() or "Enter a whole number of minutes",
            style=prompt_style,
        ).ask_async()
    return description, duration


@exercises.command()
@click.argument("user_id")
@click.option("--description", "-d", help="What the exercise was")
@click.option("--duration", "-m", help="Duration in minutes")
@click.option("--date", help="Date as YYYY-MM-DD (default: today, UTC)")
@click.pass_context
@async_command
async def add(ctx, user_id: str, description: str | None, duration: str | None, date: str | None):
    """Log an exercise for USER_ID.

    Missing description or duration are asked for interactively.

    Examples:

        exercise-tracker exercises add 1 -d Running -m 30 --date 2024-01-15
    """
    description, duration = await _prompt_missing(description, duration)

    async with open_services() as services:
        try:
            result = await services.exercises.create_exercise(
                user_id, description=description, duration=duration, date=date
            )
        except ServiceError as e:
            fail(ctx, e)

    echo_success(
        f"Logged {result['description']} ({result['duration']} min) "
        f"for {result['username']} on {result['date']}"
    )


@exercises.command()
@click.argument("user_id")
@click.option("--from", "date_from", help="Earliest date to include (YYYY-MM-DD)")
@click.option("--to", "date_to", help="Latest date to include (YYYY-MM-DD)")
@click.option("--limit", "-n", help="Show at most this many entries")
@click.pass_context
@async_command
async def log(ctx, user_id: str, date_from: str | None, date_to: str | None, limit: str | None):
    """Show the exercise log for USER_ID, newest first."""
    async with open_services() as services:
        try:
            result = await services.exercises.get_exercise_log(
                user_id, date_from=date_from, date_to=date_to, limit=limit
            )
        except ServiceError as e:
            fail(ctx, e)

    click.echo(f"Exercise log for {result['username']} (ID: {result['id']})")

    if not result["logs"]:
        echo_info("No exercises found")
        return

    rows = [
        [str(entry["id"]), entry["date"], str(entry["duration"]), entry["description"]]
        for entry in result["logs"]
    ]
    click.echo()
    click.echo(format_table(["ID", "Date", "Minutes", "Description"], rows))
    click.echo()
    click.echo(f"Showing {len(rows)} of {result['count']} matching exercise(s)")
