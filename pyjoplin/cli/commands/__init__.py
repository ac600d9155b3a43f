"""Command modules for the pyjoplin CLI."""

from pyjoplin.cli.commands import auth, notes

__all__ = ["auth", "notes"]
