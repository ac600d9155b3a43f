"""Public exports for Notes service data models."""

from __future__ import annotations

from .note import Note, NoteFormat, NotesPage

__all__ = [
    "Note",
    "NoteFormat",
    "NotesPage",
]
