"""Static curriculum catalog: subjects, the three stages and their weeks.

Structure: subject -> stage -> week. Subjects and stages are fixed lists;
weeks are derived per stage from a start date and a week count.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from functools import lru_cache
from typing import List, Literal, Optional, Tuple

IconName = Literal["Brain", "BarChart", "Database", "Code", "LineChart", "Users"]
Color = Literal["sky", "orange", "lime", "indigo", "fuchsia", "rose"]


@dataclass(frozen=True)
class Subject:
    id: str
    title: str
    description: str
    icon: IconName
    color: Color


@dataclass(frozen=True)
class Stage:
    id: str
    title: str


@dataclass(frozen=True)
class Week:
    id: str
    title: str
    start: str
    end: str


SUBJECTS: Tuple[Subject, ...] = (
    Subject("stat", "Temel İstatistik",
            "Veri analizi ve istatistiksel modellemenin temelleri.", "BarChart", "sky"),
    Subject("psych", "Psikometri",
            "Ölçüm teorisi ve ölçek geliştirme teknikleri.", "LineChart", "orange"),
    Subject("panel", "Panel Veri",
            "Zaman serileri ve kesitsel veri analizleri.", "Database", "lime"),
    Subject("social", "Hesaplamalı Sosyal Bilimler",
            "Büyük veri ile sosyal olguların incelenmesi.", "Users", "indigo"),
    Subject("digital", "Dijital Beşeri Bilimler",
            "Metin madenciliği ve kültürel analitik.", "Code", "fuchsia"),
    Subject("ai", "Yapay Zeka",
            "Makine öğrenimi ve derin öğrenme uygulamaları.", "Brain", "rose"),
)

STAGES: Tuple[Stage, ...] = (
    Stage("stage1", "1. Aşama: İstatistiğe Giriş"),
    Stage("stage2", "2. Aşama: Kodlamaya Giriş"),
    Stage("stage3", "3. Aşama: Modül Dersleri"),
)

# stage id -> (first day of week 1, number of weeks)
WEEK_RULES = {
    "stage1": (date(2025, 10, 8), 8),
    "stage2": (date(2025, 12, 3), 5),
    "stage3": (date(2026, 2, 4), 14),
}
DEFAULT_STAGE = "stage1"

# tr-TR short month names, as rendered by toLocaleDateString(..., {month: "short"})
TR_MONTHS_SHORT = ("Oca", "Şub", "Mar", "Nis", "May", "Haz",
                   "Tem", "Ağu", "Eyl", "Eki", "Kas", "Ara")


# ------------------------------
# Catalog API
# ------------------------------

def subjects() -> List[Subject]:
    return list(SUBJECTS)


def stages() -> List[Stage]:
    return list(STAGES)


def short_date(d: date) -> str:
    """``date(2025, 10, 8)`` -> ``"8 Eki"``."""
    return f"{d.day} {TR_MONTHS_SHORT[d.month - 1]}"


@lru_cache(maxsize=None)
def _weeks(stage_id: str) -> Tuple[Week, ...]:
    start, count = WEEK_RULES.get(stage_id, WEEK_RULES[DEFAULT_STAGE])
    out = []
    for i in range(count):
        first = start + timedelta(days=7 * i)
        last = first + timedelta(days=6)
        out.append(Week(f"week{i + 1}", f"{i + 1}. Hafta", short_date(first), short_date(last)))
    return tuple(out)


def weeks_for(stage_id: Optional[str]) -> List[Week]:
    """Ordered weeks of a stage. Unknown or missing ids use the stage 1 rule."""
    return list(_weeks(stage_id or DEFAULT_STAGE))


def subject_by_id(subject_id: Optional[str]) -> Optional[Subject]:
    return next((s for s in SUBJECTS if s.id == subject_id), None)


def stage_by_id(stage_id: Optional[str]) -> Optional[Stage]:
    return next((s for s in STAGES if s.id == stage_id), None)


def week_by_id(stage_id: Optional[str], week_id: Optional[str]) -> Optional[Week]:
    if week_id is None:
        return None
    return next((w for w in weeks_for(stage_id) if w.id == week_id), None)


# ------------------------------
# tr-TR date display for notes
# ------------------------------

def _parse(iso: str) -> datetime:
    return datetime.fromisoformat(iso.replace("Z", "+00:00"))


def format_day(iso: str) -> str:
    """ISO timestamp -> ``"19.10.2026"``."""
    return _parse(iso).strftime("%d.%m.%Y")


def format_timestamp(iso: str) -> str:
    """ISO timestamp -> ``"19.10.2026 14:05"``."""
    return _parse(iso).strftime("%d.%m.%Y %H:%M")
