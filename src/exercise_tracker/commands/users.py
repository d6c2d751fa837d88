"""User management commands."""

import click

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


@click.group()
@click.pass_context
def users(ctx):
    """Create and inspect users."""
    ensure_initialized(ctx)


@users.command()
@click.argument("username")
@click.pass_context
@async_command
async def create(ctx, username: str):
    """Create a user named USERNAME."""
    async with open_services() as services:
        try:
            user = await services.users.create_user(username)
        except ServiceError as e:
            fail(ctx, e)

    echo_success(f"Created user {user['username']} (ID: {user['id']})")


@users.command(name="list")
@click.pass_context
@async_command
async def list_users(ctx):
    """List all users."""
    async with open_services() as services:
        try:
            all_users = await services.users.get_all_users()
        except ServiceError as e:
            fail(ctx, e)

    if not all_users:
        echo_info("No users found. Create one with 'exercise-tracker users create'")
        return

    rows = [[str(user["id"]), user["username"]] for user in all_users]
    click.echo()
    click.echo(format_table(["ID", "Username"], rows))
    click.echo()
    click.echo(f"Total: {len(all_users)} user(s)")


@users.command()
@click.argument("user_id")
@click.pass_context
@async_command
async def show(ctx, user_id: str):
    """Show the user with ID USER_ID."""
    async with open_services() as services:
        try:
            user = await services.users.get_user_by_id(user_id)
        except ServiceError as e:
            fail(ctx, e)

    click.echo(f"ID:       {user['id']}")
    click.echo(f"Username: {user['username']}")
