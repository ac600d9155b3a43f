"""Delete command for a note."""

import typer
from rich.console import Console

from pyjoplin.cli.utils.session import fail, get_client, get_state
from pyjoplin.exceptions import JoplinError

console = Console()


def main(
    ctx: typer.Context,
    note_id: str = typer.Argument(..., help="ID of the note"),
    permanent: bool = typer.Option(
        False, "--permanent", "-p", help="permanently delete the note"
    ),
):
    """Delete a note."""
    client = get_client(ctx)
    try:
        deleted = client.notes.delete(note_id, permanent)
    except JoplinError as exc:
        fail(exc)

    if get_state(ctx).verbose:
        console.print(f"Removed note with ID: [bold]{deleted}[/bold]")
