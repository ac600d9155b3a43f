"""Client construction and error reporting for the CLI commands."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, NoReturn, Optional

import typer
from rich.console import Console

from pyjoplin.client import JoplinClient
from pyjoplin.config import ClientConfig
from pyjoplin.exceptions import JoplinError
from pyjoplin.services.notes import Note

console = Console()
err_console = Console(stderr=True)


@dataclass
class CliState:
    """Per-invocation state stored on the root ``typer.Context``."""

    verbose: bool = False
    overrides: Dict[str, Any] = field(default_factory=dict)
    client: Optional[JoplinClient] = None


def get_state(ctx: typer.Context) -> CliState:
    root = ctx.find_root()
    if root.obj is None:
        root.obj = CliState()
    return root.obj


def load_client_config(ctx: typer.Context) -> ClientConfig:
    try:
        return ClientConfig.load(**get_state(ctx).overrides)
    except JoplinError as exc:
        fail(exc)


def get_client(ctx: typer.Context) -> JoplinClient:
    """Connect once per invocation and reuse the client afterwards."""
    state = get_state(ctx)
    if state.client is None:
        config = load_client_config(ctx)
        try:
            state.client = JoplinClient(config)
        except JoplinError as exc:
            err_console.print(f"[bold red]Error initializing client:[/bold red] {exc}")
            raise typer.Exit(1) from exc
        ctx.find_root().call_on_close(state.client.close)
    return state.client


def fail(exc: Exception) -> NoReturn:
    """Report ``exc`` and exit with a non-zero status."""
    err_console.print(f"[bold red]Error:[/bold red] {exc}")
    raise typer.Exit(1) from exc


def print_notes(notes: Iterable[Note]) -> None:
    console.print_json(json.dumps([n.to_dict() for n in notes]))


def print_note(note: Note) -> None:
    console.print_json(json.dumps(note.to_dict()))
