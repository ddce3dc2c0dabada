from dataclasses import dataclass
from typing import Dict, get_args

import streamlit as st

from data.catalog import Color, IconName


@dataclass(frozen=True)
class CategoryStyle:
    bg: str
    border: str
    text: str
    accent: str


# One entry per catalog color; checked below so a new color can't ship unstyled.
CATEGORY_STYLES: Dict[str, CategoryStyle] = {
    "sky":     CategoryStyle("#f0f9ff", "#bae6fd", "#0369a1", "#0ea5e9"),
    "orange":  CategoryStyle("#fff7ed", "#fed7aa", "#c2410c", "#f97316"),
    "lime":    CategoryStyle("#f7fee7", "#d9f99d", "#4d7c0f", "#84cc16"),
    "indigo":  CategoryStyle("#eef2ff", "#c7d2fe", "#4338ca", "#6366f1"),
    "fuchsia": CategoryStyle("#fdf4ff", "#f5d0fe", "#a21caf", "#d946ef"),
    "rose":    CategoryStyle("#fff1f2", "#fecdd3", "#be123c", "#f43f5e"),
}

ICONS: Dict[str, str] = {
    "Brain": "🧠",
    "BarChart": "📊",
    "Database": "🗄️",
    "Code": "💻",
    "LineChart": "📈",
    "Users": "👥",
}


def _check_complete(table: Dict[str, object], literal, name: str) -> None:
    missing = set(get_args(literal)) - set(table)
    if missing:
        raise RuntimeError(f"{name} is missing entries for: {sorted(missing)}")


_check_complete(CATEGORY_STYLES, Color, "CATEGORY_STYLES")
_check_complete(ICONS, IconName, "ICONS")


def style_for(color: Color) -> CategoryStyle:
    return CATEGORY_STYLES[color]


def inject_css():
    st.markdown("""
<style>
  .block-container { max-width: 820px; padding-top: 6px; margin: auto; }
  #MainMenu {visibility: hidden;} footer {visibility: hidden;}

  .subject-card { border:2px solid #e5e7eb; border-radius:14px; padding:14px; margin-bottom:6px; }
  .subject-title { font-weight:800; margin-bottom:.25rem; }
  .subject-sub { color:#4b5563; font-size:.92rem; }

  .note-card {
    border:1px solid #e5e7eb; border-left-width:5px; border-radius:12px;
    padding:12px 14px; margin-bottom:6px; background:#fff;
  }
  .note-meta { color:#94a3b8; font-size:.78rem; font-weight:700; text-transform:uppercase; letter-spacing:.04em; }
  .note-text { color:#334155; font-size:.95rem; margin-top:4px; white-space:pre-wrap; }
  .badge {
    display:inline-block; font-weight:700; font-size:.75rem;
    padding:2px 8px; border-radius:6px; margin-right:6px; background:#f1f5f9; color:#475569;
  }

  .empty-state { text-align:center; color:#64748b; padding:32px 0; }
</style>
""", unsafe_allow_html=True)
