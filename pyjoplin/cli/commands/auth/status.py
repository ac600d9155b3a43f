"""Status command: report whether an API token is saved."""

import typer
from rich.console import Console

from pyjoplin.auth import TokenStore
from pyjoplin.cli.utils.session import fail, load_client_config
from pyjoplin.exceptions import JoplinError

app = typer.Typer(help="Check authentication status")
console = Console()


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """Check authentication status."""
    store = TokenStore(load_client_config(ctx).token_path)
    try:
        token = store.load()
    except JoplinError as exc:
        fail(exc)

    if token:
        console.print(f"[green]API token saved in[/green] {store.path}")
    else:
        console.print("[yellow]Not logged in[/yellow]")
