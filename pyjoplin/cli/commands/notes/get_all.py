"""Get command for every note."""

from typing import List, Optional

import typer

from pyjoplin.cli.utils.session import fail, get_client, print_notes
from pyjoplin.exceptions import JoplinError


def main(
    ctx: typer.Context,
    fields: Optional[List[str]] = typer.Argument(None, help="Fields to return"),
    order_by: Optional[str] = typer.Option(
        None, "--order-by", "--order_by", "-f", help="order by field"
    ),
    order_dir: Optional[str] = typer.Option(
        None, "--order-dir", "--order_dir", "-d", help="order direction (asc/desc)"
    ),
):
    """Retrieve all the notes. Optionally specify which fields and in which order."""
    client = get_client(ctx)
    try:
        notes = client.notes.get_all(fields or None, order_by, order_dir)
    except JoplinError as exc:
        fail(exc)
    print_notes(notes)
