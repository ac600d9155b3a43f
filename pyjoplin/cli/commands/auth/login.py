"""Login command: obtain and save an API token."""

import typer
from rich.console import Console

from pyjoplin.cli.utils.session import get_client

app = typer.Typer(help="Obtain an API token")
console = Console()


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """Find the Joplin service and obtain an API token.

    Without a saved token, accept the request shown by the Joplin application.
    """
    client = get_client(ctx)
    console.print(
        f"Connected to Joplin on port [bold]{client.port}[/bold], "
        f"token saved in {client.token_store.path}"
    )
