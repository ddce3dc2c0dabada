"""Shared fixtures for the note-board test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from data.models import Note
from data.store import JsonNoteStore


def make_note(note_id: str, subject: str, stage: str = "stage1", week: str = "week1",
              author: str = "Ali", content: str = "not", created_at: str = "2025-10-08T10:00:00+00:00") -> Note:
    return Note(
        id=note_id,
        author=author,
        content=content,
        created_at=created_at,
        subject_id=subject,
        stage_id=stage,
        week_id=week,
    )


@pytest.fixture()
def store(tmp_path: Path) -> JsonNoteStore:
    return JsonNoteStore(tmp_path / "notes.json")


@pytest.fixture(autouse=True)
def _no_openai_key(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
