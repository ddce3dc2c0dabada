# streamlit_app.py
# Central router & bootstrap for the Veri Analizi Okulu note board

from __future__ import annotations
import logging

import streamlit as st

from common.config import load_settings, setup_logging
from common.style import inject_css
from common.ui import CTX_KEY, safe_rerun, topbar
from data.store import JsonNoteStore
from nav.context import AppContext

from homepage.homepage import page_landing
from selection.widgets import page_subjects, page_stages, page_weeks
from notes.notes import page_notes, page_note_detail
from search.search import page_search

logger = logging.getLogger(__name__)


# ---------------- Page config ----------------
st.set_page_config(page_title="Veri Analizi Okulu", page_icon="🎓", layout="centered")


# ---------------- Bootstrap shared state ----------------
def ensure_core_state() -> AppContext:
    settings = load_settings()
    setup_logging(settings.log_level)

    # One context per browser session; pages receive it via get_ctx()
    if CTX_KEY not in st.session_state:
        store = JsonNoteStore(settings.store_path)
        st.session_state[CTX_KEY] = AppContext.start(store)
        logger.info("session started with store %s", settings.store_path)
    return st.session_state[CTX_KEY]


# ---------------- Router ----------------
ROUTES = {
    "landing":     page_landing,
    "subjects":    page_subjects,
    "stages":      page_stages,
    "weeks":       page_weeks,
    "notes":       page_notes,
    "note-detail": page_note_detail,
    "search":      page_search,
}


# ---------------- Main dispatch ----------------
def main():
    ctx = ensure_core_state()
    inject_css()

    screen = ctx.screen()
    handler = ROUTES.get(screen.screen)
    if handler is None:
        logger.error("no page for screen %r; resetting session", screen.screen)
        st.session_state.pop(CTX_KEY).close()
        safe_rerun()

    topbar(screen)
    handler()

if __name__ == "__main__":
    main()
