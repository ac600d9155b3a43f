#!/usr/bin/env python
"""Command line interface for the Joplin local service."""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from pyjoplin.cli.commands import auth, notes
from pyjoplin.cli.utils.session import CliState

app = typer.Typer(help="Command Line Interface for the Joplin local service")

# Notes commands; the hidden names are short aliases
app.command("getnote")(notes.get.main)
app.command("get", hidden=True)(notes.get.main)
app.command("getallnotes")(notes.get_all.main)
app.command("getall", hidden=True)(notes.get_all.main)
app.command("createnote")(notes.create.main)
app.command("new", hidden=True)(notes.create.main)
app.command("updatenote")(notes.update.main)
app.command("update", hidden=True)(notes.update.main)
app.command("deletenote")(notes.delete.main)
app.command("del", hidden=True)(notes.delete.main)

app.add_typer(auth.app, name="auth")


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                show_time=True,
                log_time_format="%H:%M:%S",
            )
        ],
        force=True,
    )
    logging.getLogger("pyjoplin").setLevel(
        logging.DEBUG if verbose else logging.NOTSET
    )


@app.callback()
def callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="verbose output"),
    host: Optional[str] = typer.Option(None, help="Host running Joplin"),
    token_path: Optional[str] = typer.Option(
        None, help="File holding the API token"
    ),
):
    """Create, read, update and delete Joplin notes."""
    configure_logging(verbose)
    ctx.obj = CliState(
        verbose=verbose,
        overrides={"host": host, "token_path": token_path},
    )


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
