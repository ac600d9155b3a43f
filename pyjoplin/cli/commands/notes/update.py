"""Update command for an existing note."""

from typing import List

import typer

from pyjoplin.cli.utils.session import fail, get_client, get_state, print_note
from pyjoplin.exceptions import JoplinError
from pyjoplin.utils import pairs_to_mapping


def main(
    ctx: typer.Context,
    note_id: str = typer.Argument(..., help="ID of the note"),
    field_values: List[str] = typer.Argument(
        ..., help="field1 value1 [... fieldn valuen]"
    ),
):
    """Update a note with a given ID. Specify which fields to update with the corresponding values."""
    try:
        # Validate before connecting
        pairs_to_mapping(field_values)
    except JoplinError as exc:
        fail(exc)

    client = get_client(ctx)
    try:
        note = client.notes.update(note_id, field_values)
    except JoplinError as exc:
        fail(exc)

    if get_state(ctx).verbose:
        print_note(note)
