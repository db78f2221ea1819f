"""Terminal front end for the user directory."""

import logging

import typer

from web.config import get_web_settings
from web.user_client import UserApiClient
from web.users_view import UsersView

app = typer.Typer(help="User directory - list users and add a test user")


@app.command()
def users(
    api_url: str | None = typer.Option(None, "--api-url", help="Base URL of the User API"),
    add_test_user: bool = typer.Option(False, "--add-test-user", help="Create the test user after loading"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Show the user list."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    settings = get_web_settings()
    client = UserApiClient(api_url=api_url, config=settings)
    view = UsersView(client)

    view.mount()
    if add_test_user:
        view.add_test_user()

    typer.echo(view.render())
    if view.state.phase == "error":
        raise typer.Exit(code=1)
