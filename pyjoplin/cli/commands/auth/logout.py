"""Logout command: forget the saved API token."""

import typer
from rich.console import Console

from pyjoplin.auth import TokenStore
from pyjoplin.cli.utils.session import fail, load_client_config
from pyjoplin.exceptions import JoplinError

app = typer.Typer(help="Remove the saved API token")
console = Console()


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """Remove the saved API token."""
    store = TokenStore(load_client_config(ctx).token_path)
    try:
        removed = store.clear()
    except JoplinError as exc:
        fail(exc)

    if removed:
        console.print("[green]Logged out successfully[/green]")
    else:
        console.print("No saved token found or already logged out")
