"""JSON-file note store.

The whole collection lives in one JSON document (a list of notes, newest
first). It is the only durable copy; the app keeps a read-through cache in
its context and updates it after each successful write.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List

from common.errors import StorageUnavailable, StorageWriteFailed
from data.models import Note

logger = logging.getLogger(__name__)


def seed_notes() -> List[Note]:
    """Built-in sample notes used on first run and when the store is unreadable."""
    now = datetime.now(timezone.utc)
    return [
        Note(
            id="1",
            author="Ali Yılmaz",
            content=(
                "Temel istatistikte p-value değerinin yanlış yorumlanması üzerine konuştuk. "
                "H0 hipotezini reddetmek için %5 sınırının kesin bir doğru olmadığını anladım."
            ),
            created_at=now.isoformat(),
            subject_id="stat", stage_id="stage1", week_id="week1",
        ),
        Note(
            id="2",
            author="Ayşe Demir",
            content=(
                "Python Pandas kütüphanesinde groupby fonksiyonu ile pivot table oluşturmak "
                "Excel'den çok daha hızlı. Özellikle büyük verisetlerinde loc ve iloc farkını "
                "iyi kavramak lazım."
            ),
            created_at=(now - timedelta(days=1)).isoformat(),
            subject_id="stat", stage_id="stage2", week_id="week1",
        ),
        Note(
            id="3",
            author="Mehmet Can",
            content=(
                "Yapay sinir ağlarında backpropagation algoritmasının matematiksel türevini "
                "inceledik. Zincir kuralının (chain rule) burada nasıl işlediği kritik."
            ),
            created_at=(now - timedelta(days=2)).isoformat(),
            subject_id="ai", stage_id="stage3", week_id="week1",
        ),
    ]


class JsonNoteStore:
    """Create / list / remove notes persisted in a single JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    # ------------------------------
    # Read
    # ------------------------------

    def list(self) -> List[Note]:
        """Return every note, newest first.

        A missing file is seeded with :func:`seed_notes`. A file that exists
        but cannot be read or parsed raises :class:`StorageUnavailable`.
        """
        if not self.path.exists():
            notes = seed_notes()
            logger.info("no note store at %s; seeding %d notes", self.path, len(notes))
            try:
                self._write(notes)
            except StorageWriteFailed:
                logger.warning("could not persist seed notes to %s", self.path)
            return notes
        return self._read()

    def _read(self) -> List[Note]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            if not isinstance(raw, list):
                raise ValueError("note store must hold a JSON list")
            return [Note.from_dict(item) for item in raw]
        except (OSError, ValueError, KeyError, TypeError) as exc:
            logger.exception("failed to read note store %s", self.path)
            raise StorageUnavailable(f"cannot read {self.path}") from exc

    # ------------------------------
    # Write
    # ------------------------------

    def create(self, note: Note) -> Note:
        notes = self._current_for_write()
        self._write([note] + [n for n in notes if n.id != note.id])
        logger.info("created note %s at %s", note.id, "/".join(note.location))
        return note

    def remove(self, note_id: str) -> bool:
        """Delete ``note_id``. Returns ``False`` (and writes nothing) for unknown ids."""
        notes = self._current_for_write()
        kept = [n for n in notes if n.id != note_id]
        if len(kept) == len(notes):
            logger.debug("remove(%s): no such note", note_id)
            return False
        self._write(kept)
        logger.info("removed note %s", note_id)
        return True

    def _current_for_write(self) -> List[Note]:
        if not self.path.exists():
            return []
        try:
            return self._read()
        except StorageUnavailable as exc:
            raise StorageWriteFailed(f"cannot update {self.path}") from exc

    def _write(self, notes: List[Note]) -> None:
        payload = [n.to_dict() for n in notes]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=str(self.path.parent), suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(payload, f, ensure_ascii=False, indent=2)
                os.replace(tmp, self.path)
            except BaseException:
                if os.path.exists(tmp):
                    os.unlink(tmp)
                raise
        except (OSError, TypeError, ValueError) as exc:
            logger.exception("failed to write note store %s", self.path)
            raise StorageWriteFailed(f"cannot write {self.path}") from exc
