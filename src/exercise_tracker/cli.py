"""CLI entry point for exercise-tracker."""

import click

from . import __version__
from .commands import exercises, init, serve, users
from .config import get_settings
from .logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="exercise-tracker")
@click.option("--verbose", "-v", is_flag=True, help="Show log output")
def main(verbose: bool):
    """exercise-tracker: log exercises per user and query the history.

    Example usage:

        # Create the database
        exercise-tracker init

        # Add a user and log a run
        exercise-tracker users create alice
        exercise-tracker exercises add 1 -d Running -m 30

        # Show the log for January
        exercise-tracker exercises log 1 --from 2024-01-01 --to 2024-01-31

        # Run the HTTP API
        exercise-tracker serve
    """
    settings = get_settings()
    setup_logging(settings.log_level if verbose else "WARNING", settings.log_file)


main.add_command(init)
main.add_command(users)
main.add_command(exercises)
main.add_command(serve)


if __name__ == "__main__":
    main()
