"""Shared UI helpers for Streamlit pages.

This module consolidates small utilities used across the Streamlit pages:
access to the per-session :class:`~nav.context.AppContext`, the header bar,
note cards, and helpers for generating stable widget keys so that state is
reliably kept between reruns.
"""

import hashlib
import html
from typing import Iterable

import streamlit as st

from common.style import style_for
from data.catalog import format_day, subject_by_id, week_by_id
from data.models import Note
from nav import state as nav_state

CTX_KEY = "_ctx"

# ------------------------------
# Central rerun + context access
# ------------------------------

def safe_rerun():
    """
    Wrapper around st.rerun for compatibility with older/newer Streamlit versions.
    """
    if hasattr(st, "rerun"):
        st.rerun()
    elif hasattr(st, "experimental_rerun"):
        st.experimental_rerun()
    else:
        raise RuntimeError("No rerun method available in this Streamlit version.")

def get_ctx():
    """The AppContext created by ``streamlit_app.ensure_core_state``."""
    return st.session_state[CTX_KEY]

def act(transition, *args, **kwargs):
    """Widget callback: apply a navigation transition to the session context.

    Streamlit reruns the script after every callback, so no explicit rerun.
    """
    get_ctx().dispatch(transition, *args, **kwargs)

# ------------------------------
# UI helpers
# ------------------------------

def topbar(screen):
    """Header: back button (when offered), title/subtitle, search toggle."""
    ctx = get_ctx()
    c1, c2, c3 = st.columns([1, 6, 1], vertical_alignment="center")
    with c1:
        if screen.can_go_back:
            st.button("⬅", key="nav_back", help="Geri Git", on_click=act, args=(nav_state.back,))
        else:
            st.markdown("### 🎓")
    with c2:
        st.title(screen.title)
        if screen.subtitle:
            st.caption(screen.subtitle)
    with c3:
        if ctx.session.mode is not None:
            searching = ctx.session.search_active
            st.button(
                "✖" if searching else "🔍",
                key="nav_search",
                help="Aramayı Kapat" if searching else "Ara",
                on_click=act,
                args=(nav_state.toggle_search,),
            )

def empty_state(text: str, icon: str = "📭"):
    st.markdown(f'<div class="empty-state"><div style="font-size:2.4rem">{icon}</div>{text}</div>',
                unsafe_allow_html=True)

def note_card(note: Note, show_badges: bool = False, prefix: str = "note"):
    """Summary card for one note with an "open" button."""
    subject = subject_by_id(note.subject_id)
    accent = style_for(subject.color).accent if subject else "#cbd5e1"
    badges = ""
    if show_badges:
        week = week_by_id(note.stage_id, note.week_id)
        badges = (
            f'<span class="badge">{html.escape(subject.title if subject else note.subject_id)}</span>'
            f'<span class="badge">{html.escape(week.title if week else note.week_id)}</span><br/>'
        )
    clip = " 📎" if note.attachments else ""
    st.markdown(
        f'<div class="note-card" style="border-left-color:{accent}">{badges}'
        f'<div class="note-meta">👤 {html.escape(note.author)} • {format_day(note.created_at)}{clip}</div>'
        f'<div class="note-text">{html.escape(note.content[:280])}</div></div>',
        unsafe_allow_html=True,
    )
    st.button(
        "Notu Aç",
        key=k_note_open(note.id, prefix),
        on_click=act,
        args=(nav_state.open_note_detail, note.id, note.location),
        use_container_width=True,
    )

# ---------- key helpers (stable keys for widgets) ----------

def stable_key_tuple(items: Iterable[str]) -> str:
    """Return a deterministic key for a sequence of strings.

    The built-in :func:`hash` is randomised between interpreter sessions, so
    for stable widget keys we derive a short SHA-256 digest of the joined
    strings.  The digest is truncated to keep keys compact.
    """
    joined = "\x1f".join(str(it) for it in items)
    return hashlib.sha256(joined.encode("utf-8")).hexdigest()[:12]

def k_subject_open(subject_id: str) -> str:
    return f"subject_open_{subject_id}"

def k_stage_open(subject_id: str, stage_id: str) -> str:
    return f"stage_open_{subject_id}_{stage_id}"

def k_week_open(stage_id: str, week_id: str) -> str:
    return f"week_open_{stage_id}_{week_id}"

def k_note_open(note_id: str, prefix: str) -> str:
    return f"{prefix}_open_{note_id}"

def k_facet(facet: str, value: str) -> str:
    return f"facet_{facet}_{stable_key_tuple((value,))}"
