"""Map a session to the screen to paint and its header."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from data.catalog import stage_by_id, subject_by_id, week_by_id
from nav.state import Origin, Session, View, can_go_back

SEARCH_SCREEN = "search"

APP_TITLE = "Veri Analizi Okulu"
SEARCH_TITLE = "Arama ve Filtreleme"
SEARCH_SUBTITLE = "Tüm notlar içerisinde ara"


@dataclass(frozen=True)
class Screen:
    screen: str
    title: str
    subtitle: Optional[str]
    can_go_back: bool


def _title(session: Session) -> str:
    nav = session.nav
    if nav.view is View.SUBJECTS:
        return "Ders Programı"
    if nav.view is View.STAGES:
        subject = subject_by_id(nav.subject_id)
        return subject.title if subject else "Aşama Seçimi"
    if nav.view is View.WEEKS:
        stage = stage_by_id(nav.stage_id) if nav.subject_id else None
        return stage.title if stage else "Hafta Seçimi"
    if nav.view is View.NOTES:
        week = week_by_id(nav.stage_id, nav.week_id) if nav.subject_id and nav.stage_id else None
        return week.title if week else "Notlar"
    if nav.view is View.NOTE_DETAIL:
        return "Not Detayı"
    return APP_TITLE


def _subtitle(session: Session) -> Optional[str]:
    nav = session.nav
    if nav.view not in (View.NOTES, View.NOTE_DETAIL):
        return None
    subject = subject_by_id(nav.subject_id)
    stage = stage_by_id(nav.stage_id) if subject else None
    if subject and stage:
        return f"{subject.title} • {stage.title}"
    return None


def select_view(session: Session) -> Screen:
    searching = session.search_active and session.nav.opened_from is not Origin.SEARCH
    if searching:
        return Screen(SEARCH_SCREEN, SEARCH_TITLE, SEARCH_SUBTITLE, True)
    return Screen(session.nav.view.value, _title(session), _subtitle(session), can_go_back(session))
