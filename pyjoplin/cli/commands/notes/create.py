"""Create command: a new note from a local file."""

import os

import typer
from rich.console import Console

from pyjoplin.cli.utils.session import fail, get_client, get_state, print_note
from pyjoplin.exceptions import JoplinError
from pyjoplin.services.notes import NoteFormat

console = Console()


def main(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="File holding the note body"),
    note_format: NoteFormat = typer.Option(
        NoteFormat.MARKDOWN, "--format", "-f", help="format of the note"
    ),
    remove: bool = typer.Option(
        False, "--delete", "-d", help="delete the source file afterward"
    ),
):
    """Create a new note from an existing file. Optionally specify the format."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            body = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        fail(exc)

    # Title is the file name without directory and extension
    title = os.path.splitext(os.path.basename(path))[0]

    client = get_client(ctx)
    try:
        note = client.notes.create(title, note_format, body)
    except JoplinError as exc:
        fail(exc)

    if get_state(ctx).verbose:
        print_note(note)

    if remove:
        try:
            os.remove(path)
        except OSError as exc:
            console.print(f"[yellow]Warning:[/yellow] Could not remove {path}: {exc}")
