"""Client for the Joplin note-taking application's local HTTP service."""

from pyjoplin.client import JoplinClient
from pyjoplin.config import ClientConfig
from pyjoplin.services.notes import Note, NoteFormat, NotesService

__version__ = "0.1.0"

__all__ = [
    "JoplinClient",
    "ClientConfig",
    "Note",
    "NoteFormat",
    "NotesService",
]
