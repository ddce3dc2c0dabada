"""Unit tests for nav.view -- screen/title selection."""

from nav.state import (
    NavigationState,
    Session,
    UserMode,
    View,
    drill_into,
    open_note_detail,
    select_mode,
    toggle_search,
)
from nav.view import SEARCH_SCREEN, select_view


def walk(*ids: str) -> Session:
    s = select_mode(Session(), UserMode.VIEWER)
    for item in ids:
        s = drill_into(s, item)
    return s


class TestSelectView:
    def test_landing(self):
        screen = select_view(Session())
        assert screen.screen == "landing"
        assert screen.title == "Veri Analizi Okulu"
        assert screen.subtitle is None
        assert screen.can_go_back is False

    def test_subjects_still_offers_back(self):
        screen = select_view(walk())
        assert screen.title == "Ders Programı"
        assert screen.can_go_back is True

    def test_stage_title_is_subject(self):
        assert select_view(walk("stat")).title == "Temel İstatistik"

    def test_weeks_title_is_stage(self):
        assert select_view(walk("stat", "stage2")).title == "2. Aşama: Kodlamaya Giriş"

    def test_notes_title_and_subtitle(self):
        screen = select_view(walk("stat", "stage1", "week3"))
        assert screen.screen == "notes"
        assert screen.title == "3. Hafta"
        assert screen.subtitle == "Temel İstatistik • 1. Aşama: İstatistiğe Giriş"

    def test_note_detail_subtitle(self):
        screen = select_view(walk("ai", "stage3", "week1", "n1"))
        assert screen.screen == "note-detail"
        assert screen.title == "Not Detayı"
        assert screen.subtitle == "Yapay Zeka • 3. Aşama: Modül Dersleri"

    def test_unknown_ids_fall_back(self):
        assert select_view(walk("nope")).title == "Aşama Seçimi"
        screen = select_view(walk("nope", "stage1", "week1"))
        assert screen.title == "1. Hafta"
        assert screen.subtitle is None

    def test_missing_ancestors_tolerated(self):
        orphan = Session(nav=NavigationState(view=View.NOTES, week_id="week1"))
        screen = select_view(orphan)
        assert screen.title == "Notlar"
        assert screen.subtitle is None

    def test_search_overlay(self):
        screen = select_view(toggle_search(walk("stat", "stage1")))
        assert screen.screen == SEARCH_SCREEN
        assert screen.title == "Arama ve Filtreleme"
        assert screen.subtitle == "Tüm notlar içerisinde ara"
        assert screen.can_go_back is True

    def test_detail_opened_from_search(self):
        s = open_note_detail(toggle_search(walk()), "n", ("panel", "stage2", "week1"))
        screen = select_view(s)
        assert screen.screen == "note-detail"
        assert screen.subtitle == "Panel Veri • 2. Aşama: Kodlamaya Giriş"
