"""Note and Attachment records."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional, Tuple

AttachmentKind = Literal["image", "document"]


def new_id() -> str:
    return uuid.uuid4().hex


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def kind_for_mime(mime: Optional[str]) -> AttachmentKind:
    return "image" if (mime or "").startswith("image/") else "document"


@dataclass(frozen=True)
class Attachment:
    id: str
    name: str
    kind: AttachmentKind
    data: str  # data URL

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "type": self.kind, "data": self.data}

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Attachment":
        kind = raw.get("type", "document")
        return cls(
            id=str(raw["id"]),
            name=str(raw.get("name", "")),
            kind="image" if kind == "image" else "document",
            data=str(raw.get("data", "")),
        )


@dataclass(frozen=True)
class Note:
    """A short note pinned to one (subject, stage, week) slot.

    Notes never change after they are saved; they can only be deleted.
    """

    id: str
    author: str
    content: str
    created_at: str
    subject_id: str
    stage_id: str
    week_id: str
    attachments: Tuple[Attachment, ...] = field(default_factory=tuple)
    summary: Optional[str] = None

    @property
    def location(self) -> Tuple[str, str, str]:
        return (self.subject_id, self.stage_id, self.week_id)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "id": self.id,
            "author": self.author,
            "content": self.content,
            "date": self.created_at,
            "fieldId": self.subject_id,
            "stageId": self.stage_id,
            "weekId": self.week_id,
            "attachments": [a.to_dict() for a in self.attachments],
        }
        if self.summary:
            out["summary"] = self.summary
        return out

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Note":
        return cls(
            id=str(raw["id"]),
            author=str(raw["author"]),
            content=str(raw["content"]),
            created_at=str(raw["date"]),
            subject_id=str(raw["fieldId"]),
            stage_id=str(raw["stageId"]),
            week_id=str(raw["weekId"]),
            attachments=tuple(Attachment.from_dict(a) for a in raw.get("attachments") or []),
            summary=raw.get("summary"),
        )


def new_note(
    author: str,
    content: str,
    subject_id: str,
    stage_id: str,
    week_id: str,
    attachments: Optional[List[Attachment]] = None,
) -> Note:
    """Build a fresh note with a unique id and the current UTC timestamp."""
    return Note(
        id=new_id(),
        author=author.strip(),
        content=content.strip(),
        created_at=utc_now_iso(),
        subject_id=subject_id,
        stage_id=stage_id,
        week_id=week_id,
        attachments=tuple(attachments or ()),
    )
