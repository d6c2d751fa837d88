"""Web server command."""

import click

from ..config import get_settings


@click.command()
@click.option("--host", default=None, help="Host to bind to (default: from settings)")
@click.option("--port", "-p", default=None, type=int, help="Port to bind to (default: from settings)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
def serve(host: str | None, port: int | None, reload: bool):
    """Start the API server.

    Examples:

        # Start on the configured host and port
        exercise-tracker serve

        # Expose to network on a custom port
        exercise-tracker serve --host 0.0.0.0 --port 8080
    """
    import uvicorn

    from ..web import create_app

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port

    click.echo()
    click.echo(click.style("Starting exercise-tracker API...", fg="green"))
    click.echo(f"  Local:   http://{host}:{port}")
    click.echo()
    click.echo("Press Ctrl+C to stop the server.")
    click.echo()

    uvicorn.run(
        create_app() if not reload else "exercise_tracker.web:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=reload,
    )
