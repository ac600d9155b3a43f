"""Get command for a single note."""

from typing import List, Optional

import typer

from pyjoplin.cli.utils.session import fail, get_client, print_note
from pyjoplin.exceptions import JoplinError


def main(
    ctx: typer.Context,
    note_id: str = typer.Argument(..., help="ID of the note"),
    fields: Optional[List[str]] = typer.Argument(
        None, help="Fields to return (default: the service's default set)"
    ),
):
    """Retrieve a note with a given ID. Optionally specify which fields to return."""
    client = get_client(ctx)
    try:
        note = client.notes.get(note_id, fields or None)
    except JoplinError as exc:
        fail(exc)
    print_note(note)
