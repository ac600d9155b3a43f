"""
Notes service.

Public API:
  - NotesService.get(note_id, fields=None) -> Note
  - NotesService.iter_pages(fields=None, order_by=None, order_dir=None) -> Iterator[NotesPage]
  - NotesService.get_all(fields=None, order_by=None, order_dir=None) -> List[Note]
  - NotesService.create(title, note_format, body) -> Note
  - NotesService.update(note_id, field_values) -> Note
  - NotesService.update_fields(note_id, mapping) -> Note
  - NotesService.delete(note_id, permanent=False) -> str
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Mapping, Optional, Sequence, Union

from pyjoplin.exceptions import PaginationLimitError, UnknownFormatError
from pyjoplin.services.base import BaseService
from pyjoplin.utils import join_fields, pairs_to_mapping

from .models import Note, NoteFormat, NotesPage

LOGGER = logging.getLogger(__name__)

NOTES_PATH = "/notes/"

Fields = Optional[Union[str, Iterable[str]]]


class NotesService(BaseService):
    """CRUD over the note collection. Every call carries the API token."""

    def get(self, note_id: str, fields: Fields = None) -> Note:
        """Retrieve a single note, optionally restricted to ``fields``."""
        LOGGER.debug("Fetching note %s", note_id)
        resp = self._transport.execute(
            "GET",
            f"{NOTES_PATH}{note_id}",
            params={"fields": join_fields(fields)},
            context=f"retrieving note with ID {note_id}",
        )
        return self._validate(Note, resp, "notes.get")

    def iter_pages(
        self,
        fields: Fields = None,
        order_by: Optional[str] = None,
        order_dir: Optional[str] = None,
        *,
        max_pages: Optional[int] = None,
    ) -> Iterator[NotesPage]:
        """Yield pages of GET /notes/ until the service reports no more."""
        page_num = 1
        while True:
            params = {}
            if order_by:
                params["order_by"] = order_by
            if order_dir:
                params["order_dir"] = order_dir.upper()
            params["page"] = page_num
            params["fields"] = join_fields(fields)

            resp = self._transport.execute(
                "GET", NOTES_PATH, params=params, context="retrieving the notes"
            )
            page = self._validate(NotesPage, resp, "notes.list")
            LOGGER.debug(
                "Notes page %d returned %d notes (has_more=%s)",
                page_num,
                len(page.items),
                page.has_more,
            )
            yield page

            if not page.has_more:
                return
            if max_pages is not None and page_num >= max_pages:
                raise PaginationLimitError(
                    f"Service still reports more notes after {max_pages} pages"
                )
            page_num += 1

    def get_all(
        self,
        fields: Fields = None,
        order_by: Optional[str] = None,
        order_dir: Optional[str] = None,
        *,
        max_pages: Optional[int] = None,
    ) -> List[Note]:
        """Retrieve all the notes in a given order."""
        notes: List[Note] = []
        for page in self.iter_pages(
            fields, order_by, order_dir, max_pages=max_pages
        ):
            notes.extend(page.items)
        LOGGER.info("Retrieved %d notes", len(notes))
        return notes

    def create(
        self, title: str, note_format: Union[str, NoteFormat], body: str
    ) -> Note:
        """Create a note whose ``body`` is markdown or html."""
        try:
            fmt = NoteFormat(note_format)
        except ValueError:
            raise UnknownFormatError(
                f"Unknown note format {note_format!r}; expected markdown or html"
            ) from None

        payload = {"title": title, fmt.body_field: body}
        resp = self._transport.execute(
            "POST", NOTES_PATH, payload=payload, context="creating a note"
        )
        note = self._validate(Note, resp, "notes.create")
        LOGGER.info("Created note %s", note.id)
        return note

    def update(self, note_id: str, field_values: Sequence[str]) -> Note:
        """Update a note from ``[field1, value1, field2, value2, ...]``."""
        return self.update_fields(note_id, pairs_to_mapping(field_values))

    def update_fields(self, note_id: str, mapping: Mapping[str, object]) -> Note:
        resp = self._transport.execute(
            "PUT",
            f"{NOTES_PATH}{note_id}",
            payload=dict(mapping),
            context=f"updating note with ID {note_id}",
        )
        note = self._validate(Note, resp, "notes.update")
        LOGGER.info("Updated note %s (%s)", note_id, ", ".join(mapping))
        return note

    def delete(self, note_id: str, permanent: bool = False) -> str:
        """Delete a note; ``permanent`` skips the trash."""
        params = {"permanent": 1} if permanent else None
        self._transport.execute(
            "DELETE",
            f"{NOTES_PATH}{note_id}",
            params=params,
            context=f"deleting note with ID {note_id}",
        )
        LOGGER.info("Deleted note %s", note_id)
        return note_id
