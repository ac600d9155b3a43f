"""Note records as returned by the /notes endpoints."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional

from pydantic import Field

from ._base import JoplinModel


class NoteFormat(str, Enum):
    """Markup accepted when creating a note."""

    MARKDOWN = "markdown"
    HTML = "html"

    @property
    def body_field(self) -> str:
        return "body" if self is NoteFormat.MARKDOWN else "body_html"


class Note(JoplinModel):
    """
    A Joplin note.

    Every field is optional: the service only sends the fields that were
    requested. A field the service did not send stays ``None`` and is missing
    from ``present_fields()``, so "absent" and "present but zero" can be told
    apart.
    """

    id: Optional[str] = None
    parent_id: Optional[str] = None
    title: Optional[str] = None
    body: Optional[str] = None
    created_time: Optional[int] = None
    updated_time: Optional[int] = None
    is_conflict: Optional[int] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    altitude: Optional[float] = None
    author: Optional[str] = None
    source_url: Optional[str] = None
    is_todo: Optional[int] = None
    todo_due: Optional[int] = None
    todo_completed: Optional[int] = None
    source: Optional[str] = None
    source_application: Optional[str] = None
    application_data: Optional[str] = None
    order: Optional[float] = None
    user_created_time: Optional[int] = None
    user_updated_time: Optional[int] = None
    encryption_cipher_text: Optional[str] = None
    encryption_applied: Optional[int] = None
    markup_language: Optional[int] = None
    is_shared: Optional[int] = None
    share_id: Optional[str] = None
    conflict_original_id: Optional[str] = None
    master_key_id: Optional[str] = None
    body_html: Optional[str] = None
    base_url: Optional[str] = None
    image_data_url: Optional[str] = None
    crop_rect: Optional[str] = None
    type_: Optional[int] = None

    def present_fields(self) -> FrozenSet[str]:
        """Names of the fields the service actually sent."""
        return frozenset(self.model_fields_set)

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation limited to the fields that were sent."""
        return self.model_dump(exclude_unset=True)


class NotesPage(JoplinModel):
    """One page of GET /notes/."""

    items: List[Note] = Field(default_factory=list)
    has_more: bool = False
