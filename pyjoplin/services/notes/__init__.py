"""Public API for the Notes service."""

from .models import Note, NoteFormat, NotesPage
from .service import NotesService

__all__ = [
    "NotesService",
    "Note",
    "NoteFormat",
    "NotesPage",
]
