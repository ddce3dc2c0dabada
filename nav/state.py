"""Navigation state machine.

Two independent dimensions describe where the user is:

* ``NavigationState.view`` -- depth in the drill-down
  (landing -> subjects -> stages -> weeks -> notes -> note-detail)
* ``Session.search_active`` -- the search overlay on top of that position

Every transition below is a pure function ``Session -> Session``.
``back()`` unwinds exactly one dimension per call: a note opened from
search first, then the search overlay, then one hierarchy level.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Tuple

from data.catalog import weeks_for


class View(str, Enum):
    LANDING = "landing"
    SUBJECTS = "subjects"
    STAGES = "stages"
    WEEKS = "weeks"
    NOTES = "notes"
    NOTE_DETAIL = "note-detail"


class UserMode(str, Enum):
    VIEWER = "viewer"
    CREATOR = "creator"


class Origin(str, Enum):
    """Where a note-detail screen was opened from."""

    HIERARCHY = "hierarchy"
    SEARCH = "search"


@dataclass(frozen=True)
class NavigationState:
    view: View = View.LANDING
    subject_id: Optional[str] = None
    stage_id: Optional[str] = None
    week_id: Optional[str] = None
    note_id: Optional[str] = None
    opened_from: Optional[Origin] = None
    #: position underneath the search overlay, restored when a note opened
    #: from search is closed
    return_to: Optional["NavigationState"] = None


@dataclass(frozen=True)
class FilterState:
    query: str = ""
    subject_id: Optional[str] = None
    stage_id: Optional[str] = None
    week_id: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self == FilterState()


@dataclass(frozen=True)
class Session:
    nav: NavigationState = field(default_factory=NavigationState)
    filter: FilterState = field(default_factory=FilterState)
    search_active: bool = False
    mode: Optional[UserMode] = None


# view -> (next view, field set on entry)
_DRILL = {
    View.SUBJECTS: (View.STAGES, "subject_id"),
    View.STAGES: (View.WEEKS, "stage_id"),
    View.WEEKS: (View.NOTES, "week_id"),
}

# view -> (parent view, field cleared on exit)
_UP = {
    View.NOTE_DETAIL: (View.NOTES, "note_id"),
    View.NOTES: (View.WEEKS, "week_id"),
    View.WEEKS: (View.STAGES, "stage_id"),
    View.STAGES: (View.SUBJECTS, "subject_id"),
}

FACETS = ("subject_id", "stage_id", "week_id")


# ------------------------------
# Transitions
# ------------------------------

def select_mode(session: Session, mode: UserMode) -> Session:
    """Landing -> subjects. Ignored once a mode is chosen or away from landing."""
    if session.nav.view is not View.LANDING or session.mode is not None:
        return session
    return replace(session, mode=UserMode(mode), nav=replace(session.nav, view=View.SUBJECTS))


def drill_into(session: Session, item_id: str) -> Session:
    """Enter the child level of the current view, selecting ``item_id``."""
    if session.search_active:
        return session
    view = session.nav.view
    if view is View.NOTES:
        return open_note_detail(session, item_id)
    if view not in _DRILL:
        return session
    target, attr = _DRILL[view]
    return replace(session, nav=replace(session.nav, view=target, **{attr: item_id}))


def open_note_detail(
    session: Session,
    note_id: str,
    location: Optional[Tuple[str, str, str]] = None,
) -> Session:
    """Show a single note, from the week list or from search results.

    ``location`` is the note's (subject, stage, week); search passes it so
    the detail header names the note's own subject and stage.
    """
    nav = session.nav
    if session.search_active:
        beneath = nav.return_to if nav.opened_from is Origin.SEARCH else nav
        subject_id, stage_id, week_id = location or (nav.subject_id, nav.stage_id, nav.week_id)
        opened = NavigationState(
            view=View.NOTE_DETAIL,
            subject_id=subject_id,
            stage_id=stage_id,
            week_id=week_id,
            note_id=note_id,
            opened_from=Origin.SEARCH,
            return_to=beneath,
        )
        return replace(session, nav=opened)
    if nav.view is not View.NOTES:
        return session
    return replace(
        session,
        nav=replace(nav, view=View.NOTE_DETAIL, note_id=note_id, opened_from=Origin.HIERARCHY),
    )


def _leave_detail(session: Session) -> Session:
    nav = session.nav
    if nav.opened_from is Origin.SEARCH:
        return replace(session, nav=nav.return_to or NavigationState(view=View.SUBJECTS))
    return replace(session, nav=replace(nav, view=View.NOTES, note_id=None, opened_from=None))


def back(session: Session) -> Session:
    nav = session.nav
    if nav.view is View.NOTE_DETAIL and nav.opened_from is Origin.SEARCH:
        return _leave_detail(session)
    if session.search_active:
        return replace(session, search_active=False, filter=FilterState())
    if nav.view is View.NOTE_DETAIL:
        return _leave_detail(session)
    if nav.view in _UP:
        parent, attr = _UP[nav.view]
        return replace(session, nav=replace(nav, view=parent, **{attr: None}))
    if nav.view is View.SUBJECTS:
        return replace(session, nav=NavigationState(), mode=None)
    return session


def toggle_search(session: Session) -> Session:
    if session.search_active:
        closed = replace(session, search_active=False, filter=FilterState())
        if session.nav.opened_from is Origin.SEARCH:
            closed = _leave_detail(closed)
        return closed
    seeded = FilterState(subject_id=session.nav.subject_id, stage_id=session.nav.stage_id)
    return replace(session, search_active=True, filter=seeded)


def update_filter(session: Session, **changes) -> Session:
    """Change query / facet constraints; only meaningful while searching."""
    if not session.search_active:
        return session
    return replace(session, filter=replace(session.filter, **changes))


def toggle_facet(session: Session, facet: str, value: Optional[str]) -> Session:
    """Chip behaviour: picking the active value again clears the constraint.

    A week that the newly picked stage does not have is dropped.
    """
    if facet not in FACETS:
        raise ValueError(f"unknown facet: {facet}")
    current = getattr(session.filter, facet)
    changes = {facet: None if current == value else value}
    week_id = session.filter.week_id
    if facet == "stage_id" and week_id is not None:
        if week_id not in {w.id for w in weeks_for(changes["stage_id"])}:
            changes["week_id"] = None
    return update_filter(session, **changes)


def after_delete(session: Session, note_id: Optional[str] = None) -> Session:
    """Leave the detail of a note that no longer exists.

    With ``note_id``, a detail of that note parked under the search overlay
    is rolled back to its week list as well.
    """
    nav = session.nav
    beneath = nav.return_to
    if note_id is not None and beneath is not None and beneath.note_id == note_id:
        nav = replace(nav, return_to=replace(beneath, view=View.NOTES, note_id=None, opened_from=None))
        session = replace(session, nav=nav)
    if nav.view is not View.NOTE_DETAIL or (note_id is not None and nav.note_id != note_id):
        return session
    return _leave_detail(session)


def can_go_back(session: Session) -> bool:
    return session.search_active or session.nav.view is not View.LANDING
