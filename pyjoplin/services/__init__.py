"""Services exposed by the Joplin local API."""

from pyjoplin.services.notes import NotesService

__all__ = ["NotesService"]
