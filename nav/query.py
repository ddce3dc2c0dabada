"""Which notes are visible for the current session.

Both filters keep the store's order (newest first) and never re-rank.
"""

from __future__ import annotations

from typing import Iterable, List

from data.models import Note
from nav.state import FilterState, NavigationState, Session


def hierarchy_notes(notes: Iterable[Note], nav: NavigationState) -> List[Note]:
    """Notes pinned to exactly the selected subject/stage/week.

    If any of the three ids is unset the result is empty, never "everything".
    """
    if nav.subject_id is None or nav.stage_id is None or nav.week_id is None:
        return []
    where = (nav.subject_id, nav.stage_id, nav.week_id)
    return [n for n in notes if n.location == where]


def _matches(note: Note, flt: FilterState, needle: str) -> bool:
    if needle and needle not in note.content.lower() and needle not in note.author.lower():
        return False
    if flt.subject_id is not None and note.subject_id != flt.subject_id:
        return False
    if flt.stage_id is not None and note.stage_id != flt.stage_id:
        return False
    if flt.week_id is not None and note.week_id != flt.week_id:
        return False
    return True


def search_notes(notes: Iterable[Note], flt: FilterState) -> List[Note]:
    """Free text (content or author, case-insensitive) AND every set facet."""
    needle = flt.query.lower()
    return [n for n in notes if _matches(n, flt, needle)]


def visible_notes(notes: Iterable[Note], session: Session) -> List[Note]:
    if session.search_active:
        return search_notes(notes, session.filter)
    return hierarchy_notes(notes, session.nav)
