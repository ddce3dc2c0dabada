"""Unit tests for nav.context.AppContext."""

from pathlib import Path

import pytest

from common.errors import StorageWriteFailed
from conftest import make_note
from data.store import JsonNoteStore
from nav import state as nav
from nav.context import AppContext
from nav.state import UserMode, View

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class FailingStore(JsonNoteStore):
    """Reads fine, refuses every write."""

    def create(self, note):
        raise StorageWriteFailed("read-only")

    def remove(self, note_id):
        raise StorageWriteFailed("read-only")


def go_to_week(ctx: AppContext, mode=UserMode.CREATOR, where=("stat", "stage1", "week1")) -> AppContext:
    ctx.dispatch(nav.select_mode, mode)
    for item in where:
        ctx.dispatch(nav.drill_into, item)
    return ctx


# ---------------------------------------------------------------------------
# start()
# ---------------------------------------------------------------------------


class TestStart:
    def test_loads_store(self, store: JsonNoteStore):
        ctx = AppContext.start(store)
        assert [n.id for n in ctx.notes] == ["1", "2", "3"]
        assert ctx.warning is None
        assert ctx.session == nav.Session()

    def test_unreadable_store_falls_back_to_seed(self, tmp_path: Path):
        path = tmp_path / "notes.json"
        path.write_text("{broken", encoding="utf-8")
        ctx = AppContext.start(JsonNoteStore(path))
        assert [n.id for n in ctx.notes] == ["1", "2", "3"]
        assert ctx.warning


# ---------------------------------------------------------------------------
# create / delete
# ---------------------------------------------------------------------------


class TestCreateNote:
    def test_scenario_create_filter_delete(self, store: JsonNoteStore):
        ctx = go_to_week(AppContext.start(store))
        before = list(ctx.visible_notes())

        note = ctx.create_note("A", "B")
        assert store.list()[0] == note
        assert ctx.notes[0] == note
        assert ctx.visible_notes() == [note] + before
        assert note.location == ("stat", "stage1", "week1")

        ctx.dispatch(nav.open_note_detail, note.id)
        assert ctx.current_note() == note
        assert ctx.delete_note(note.id) is True
        assert note.id not in [n.id for n in store.list()]
        assert note not in ctx.notes
        assert ctx.session.nav.view is View.NOTES

    def test_only_one_match_in_empty_week(self, store: JsonNoteStore):
        ctx = go_to_week(AppContext.start(store), where=("panel", "stage2", "week3"))
        note = ctx.create_note("A", "B")
        assert ctx.visible_notes() == [note]

    def test_viewer_cannot_create(self, store: JsonNoteStore):
        ctx = go_to_week(AppContext.start(store), mode=UserMode.VIEWER)
        with pytest.raises(ValueError):
            ctx.create_note("A", "B")

    def test_blank_input_rejected(self, store: JsonNoteStore):
        ctx = go_to_week(AppContext.start(store))
        with pytest.raises(ValueError):
            ctx.create_note("   ", "B")
        with pytest.raises(ValueError):
            ctx.create_note("A", "")

    def test_must_be_on_week_list(self, store: JsonNoteStore):
        ctx = AppContext.start(store)
        ctx.dispatch(nav.select_mode, UserMode.CREATOR)
        with pytest.raises(ValueError):
            ctx.create_note("A", "B")

    def test_write_failure_leaves_cache(self, tmp_path: Path):
        ctx = go_to_week(AppContext.start(FailingStore(tmp_path / "notes.json")))
        cached = list(ctx.notes)
        session = ctx.session
        with pytest.raises(StorageWriteFailed):
            ctx.create_note("A", "B")
        assert ctx.notes == cached
        assert ctx.session == session


class TestDeleteNote:
    def test_unknown_id_is_noop(self, store: JsonNoteStore):
        ctx = go_to_week(AppContext.start(store))
        cached = list(ctx.notes)
        assert ctx.delete_note("missing") is False
        assert ctx.notes == cached

    def test_viewer_cannot_delete(self, store: JsonNoteStore):
        ctx = go_to_week(AppContext.start(store), mode=UserMode.VIEWER)
        with pytest.raises(ValueError):
            ctx.delete_note("1")

    def test_write_failure_keeps_note_and_position(self, tmp_path: Path):
        ctx = go_to_week(AppContext.start(FailingStore(tmp_path / "notes.json")))
        ctx.dispatch(nav.drill_into, "1")
        session = ctx.session
        with pytest.raises(StorageWriteFailed):
            ctx.delete_note("1")
        assert any(n.id == "1" for n in ctx.notes)
        assert ctx.session == session

    def test_delete_from_search_returns_to_results(self, store: JsonNoteStore):
        ctx = go_to_week(AppContext.start(store))
        ctx.dispatch(nav.toggle_search)
        ctx.dispatch(nav.update_filter, subject_id=None, stage_id=None)
        ctx.dispatch(nav.open_note_detail, "3", ("ai", "stage3", "week1"))
        ctx.delete_note("3")
        assert ctx.screen().screen == "search"
        assert [n.id for n in ctx.visible_notes()] == ["1", "2"]

    def test_delete_also_clears_detail_under_search(self, store: JsonNoteStore):
        ctx = go_to_week(AppContext.start(store))
        ctx.dispatch(nav.drill_into, "1")
        ctx.dispatch(nav.toggle_search)
        ctx.dispatch(nav.open_note_detail, "1", ("stat", "stage1", "week1"))
        ctx.delete_note("1")
        assert ctx.screen().screen == "search"

        ctx.dispatch(nav.back)
        assert ctx.screen().screen == "notes"
        assert ctx.session.nav.note_id is None
        assert ctx.current_note() is None

    def test_delete_of_other_note_keeps_detail_under_search(self, store: JsonNoteStore):
        ctx = go_to_week(AppContext.start(store))
        ctx.dispatch(nav.drill_into, "1")
        ctx.dispatch(nav.toggle_search)
        ctx.dispatch(nav.update_filter, subject_id=None, stage_id=None)
        ctx.dispatch(nav.open_note_detail, "3", ("ai", "stage3", "week1"))
        ctx.delete_note("3")
        ctx.dispatch(nav.back)
        assert ctx.screen().screen == "note-detail"
        assert ctx.current_note().id == "1"

    def test_repeated_delete_is_harmless(self, store: JsonNoteStore):
        ctx = go_to_week(AppContext.start(store))
        ctx.dispatch(nav.drill_into, "1")
        assert ctx.delete_note("1") is True
        session = ctx.session
        assert ctx.delete_note("1") is False
        assert ctx.session == session
        assert [n.id for n in store.list()] == ["2", "3"]


# ---------------------------------------------------------------------------
# read helpers / lifecycle
# ---------------------------------------------------------------------------


class TestReads:
    def test_current_note_none_without_selection(self, store: JsonNoteStore):
        assert AppContext.start(store).current_note() is None

    def test_current_note_missing_id(self, store: JsonNoteStore):
        ctx = AppContext(store, [make_note("x", "stat")])
        assert ctx.current_note() is None

    def test_screen_follows_session(self, store: JsonNoteStore):
        ctx = go_to_week(AppContext.start(store))
        assert ctx.screen().title == "1. Hafta"

    def test_close_clears_everything(self, store: JsonNoteStore):
        ctx = go_to_week(AppContext.start(store))
        ctx.close()
        assert ctx.notes == []
        assert ctx.session == nav.Session()
