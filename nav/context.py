"""Per-browser-session application context.

One ``AppContext`` is created at startup (``AppContext.start``), stored in
``st.session_state`` under a single key, and handed to every page. It owns
the note store, the cached note list and the navigation ``Session``.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from common.errors import StorageUnavailable
from data.models import Attachment, Note, new_note
from data.store import JsonNoteStore, seed_notes
from nav import state as nav_state
from nav.query import visible_notes
from nav.state import Session, UserMode, View
from nav.view import Screen, select_view

logger = logging.getLogger(__name__)


class AppContext:
    def __init__(self, store: JsonNoteStore, notes: List[Note], warning: Optional[str] = None) -> None:
        self.store = store
        self.notes: List[Note] = list(notes)
        self.session = Session()
        #: user-visible message from startup (e.g. storage fell back to seed data)
        self.warning = warning

    @classmethod
    def start(cls, store: JsonNoteStore) -> "AppContext":
        try:
            notes = store.list()
            warning = None
        except StorageUnavailable:
            logger.warning("note store unreadable; using built-in sample notes")
            notes = seed_notes()
            warning = "Kayıtlı notlar okunamadı; örnek notlar gösteriliyor."
        return cls(store, notes, warning)

    # ------------------------------
    # Navigation
    # ------------------------------

    def dispatch(self, transition: Callable[..., Session], *args, **kwargs) -> Session:
        """Apply a pure transition from :mod:`nav.state` to the current session."""
        self.session = transition(self.session, *args, **kwargs)
        return self.session

    def screen(self) -> Screen:
        return select_view(self.session)

    def visible_notes(self) -> List[Note]:
        return visible_notes(self.notes, self.session)

    def current_note(self) -> Optional[Note]:
        note_id = self.session.nav.note_id
        if note_id is None:
            return None
        return next((n for n in self.notes if n.id == note_id), None)

    @property
    def is_creator(self) -> bool:
        return self.session.mode is UserMode.CREATOR

    # ------------------------------
    # Writes
    # ------------------------------

    def create_note(self, author: str, content: str, attachments: Optional[List[Attachment]] = None) -> Note:
        """Persist a note for the current week and prepend it to the cache.

        Raises ``ValueError`` for missing input or a wrong screen and lets
        ``StorageWriteFailed`` through with the cache left untouched.
        """
        nav = self.session.nav
        if not self.is_creator:
            raise ValueError("only creators can add notes")
        if nav.view is not View.NOTES or self.session.search_active:
            raise ValueError("notes can only be added from a week's note list")
        if not author.strip() or not content.strip():
            raise ValueError("author and content are required")

        note = new_note(author, content, nav.subject_id, nav.stage_id, nav.week_id, attachments)
        saved = self.store.create(note)
        self.notes = [saved] + [n for n in self.notes if n.id != saved.id]
        return saved

    def delete_note(self, note_id: str) -> bool:
        """Remove a note; returns ``False`` for an unknown or already removed id.

        On ``StorageWriteFailed`` neither the cache nor navigation change.
        """
        if not self.is_creator:
            raise ValueError("only creators can delete notes")
        removed = self.store.remove(note_id)
        self.notes = [n for n in self.notes if n.id != note_id]
        self.dispatch(nav_state.after_delete, note_id)
        return removed

    # ------------------------------
    # Lifecycle
    # ------------------------------

    def close(self) -> None:
        self.notes = []
        self.session = Session()
        self.warning = None
