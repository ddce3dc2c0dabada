"""Week note list, author form and note detail pages."""

from __future__ import annotations

import logging

import streamlit as st

from ai.summary import summarize_note
from common.errors import EncodingFailed, StorageWriteFailed
from common.ui import empty_state, get_ctx, note_card
from data.attachments import attachment_from_upload, decode, mime_of
from data.catalog import format_timestamp

logger = logging.getLogger(__name__)

FLASH_KEY = "_flash"


# ================= Session scratch =================
def ensure_notes_state():
    st.session_state.setdefault("show_add_form", False)
    st.session_state.setdefault("pending_attachments", [])
    st.session_state.setdefault("uploader_gen", 0)
    st.session_state.setdefault("confirm_delete", None)
    st.session_state.setdefault("summaries", {})
    st.session_state.setdefault("new_author", "")
    st.session_state.setdefault("new_content", "")

def _flash(kind: str, text: str):
    st.session_state[FLASH_KEY] = (kind, text)

def show_flash():
    msg = st.session_state.pop(FLASH_KEY, None)
    if not msg:
        return
    kind, text = msg
    {"error": st.error, "warning": st.warning, "success": st.success}.get(kind, st.info)(text)

def _reset_form():
    st.session_state["show_add_form"] = False
    st.session_state["pending_attachments"] = []
    st.session_state["uploader_gen"] += 1
    st.session_state["new_author"] = ""
    st.session_state["new_content"] = ""


# ================= Callbacks =================
def _open_form():
    st.session_state["show_add_form"] = True

def _close_form():
    _reset_form()

def _attach_uploads(uploader_key: str):
    """Encode the files currently in the uploader; a bad file only drops itself."""
    uploads = st.session_state.get(uploader_key) or []
    pending = list(st.session_state["pending_attachments"])
    failed = []
    for up in uploads:
        try:
            pending.append(attachment_from_upload(up))
        except EncodingFailed:
            failed.append(up.name)
    st.session_state["pending_attachments"] = pending
    st.session_state["uploader_gen"] += 1
    if failed:
        _flash("warning", "Dosya yüklenirken hata oluştu: " + ", ".join(failed))

def _remove_pending(att_id: str):
    st.session_state["pending_attachments"] = [
        a for a in st.session_state["pending_attachments"] if a.id != att_id
    ]

def _save_note():
    ctx = get_ctx()
    try:
        ctx.create_note(
            st.session_state.get("new_author", ""),
            st.session_state.get("new_content", ""),
            st.session_state["pending_attachments"],
        )
    except ValueError:
        _flash("warning", "Lütfen adınızı ve not içeriğini doldurun.")
        return
    except StorageWriteFailed:
        _flash("error", "Not kaydedilemedi. Lütfen tekrar deneyin.")
        return
    _reset_form()
    _flash("success", "Not kaydedildi.")

def _ask_delete(note_id: str):
    st.session_state["confirm_delete"] = note_id

def _cancel_delete():
    st.session_state["confirm_delete"] = None

def _delete_note(note_id: str):
    ctx = get_ctx()
    st.session_state["confirm_delete"] = None
    try:
        ctx.delete_note(note_id)
    except StorageWriteFailed:
        _flash("error", "Not silinemedi. Lütfen tekrar deneyin.")
        return
    st.session_state["summaries"].pop(note_id, None)
    _flash("success", "Not silindi.")


# ================= Pages =================
def page_notes():
    ctx = get_ctx()
    ensure_notes_state()
    show_flash()

    notes = ctx.visible_notes()
    if not notes:
        empty_state("Bu hafta için henüz not eklenmemiş.")
    for note in notes:
        note_card(note, prefix="week")

    if ctx.is_creator:
        st.divider()
        if st.session_state["show_add_form"]:
            _render_add_form()
        else:
            st.button("➕ Not Ekle", type="primary", use_container_width=True,
                      key="open_add_form", on_click=_open_form)

def _render_add_form():
    st.subheader("Yeni Not Ekle")
    st.text_input("Adınız Soyadınız", key="new_author", placeholder="Örn: Ali Yılmaz")
    st.text_area("Notunuz", key="new_content", height=180,
                 placeholder="Bu hafta neler öğrendiniz? Önemli noktaları paylaşın...")

    uploader_key = f"uploads_{st.session_state['uploader_gen']}"
    st.file_uploader("Dosya / Görsel Ekle", key=uploader_key, accept_multiple_files=True,
                     type=["png", "jpg", "jpeg", "gif", "webp", "pdf", "doc", "docx", "txt"])
    st.button("📎 Seçilen dosyaları ekle", key="attach_uploads",
              on_click=_attach_uploads, args=(uploader_key,))

    for att in st.session_state["pending_attachments"]:
        c1, c2 = st.columns([6, 1], vertical_alignment="center")
        with c1:
            st.write(("🖼️ " if att.kind == "image" else "📄 ") + att.name)
        with c2:
            st.button("✖", key=f"rm_att_{att.id}", on_click=_remove_pending, args=(att.id,))

    c1, c2 = st.columns(2)
    with c1:
        st.button("Vazgeç", use_container_width=True, key="cancel_add", on_click=_close_form)
    with c2:
        st.button("Kaydet", type="primary", use_container_width=True, key="save_note", on_click=_save_note)

def page_note_detail():
    ctx = get_ctx()
    ensure_notes_state()
    show_flash()

    note = ctx.current_note()
    if note is None:
        st.info("Not bulunamadı.")
        return

    box = st.container(border=True)
    with box:
        st.subheader(f"👤 {note.author}")
        st.caption(f"🕒 {format_timestamp(note.created_at)}")
        st.text(note.content)
        if note.attachments:
            st.markdown("**Ekler**")
            for att in note.attachments:
                _render_attachment(att)

    summary = st.session_state["summaries"].get(note.id) or note.summary
    if st.button("✨ Yapay Zeka ile Özetle", key=f"summarize_{note.id}"):
        with st.spinner("Özetleniyor..."):
            summary = summarize_note(note.content)
        st.session_state["summaries"][note.id] = summary
    if summary:
        st.info(summary)

    if ctx.is_creator:
        st.divider()
        if st.session_state["confirm_delete"] == note.id:
            st.warning("Bu notu kalıcı olarak silmek istediğinize emin misiniz? Bu işlem geri alınamaz.")
            c1, c2 = st.columns(2)
            with c1:
                st.button("Vazgeç", use_container_width=True, key="cancel_delete", on_click=_cancel_delete)
            with c2:
                st.button("Evet, Sil", type="primary", use_container_width=True, key="confirm_delete_btn",
                          on_click=_delete_note, args=(note.id,))
        else:
            st.button("🗑 Notu Sil", key="ask_delete", on_click=_ask_delete, args=(note.id,))

def _render_attachment(att):
    try:
        raw = decode(att.data)
    except EncodingFailed:
        logger.warning("attachment %s has an unreadable payload", att.id)
        st.warning(f"{att.name} açılamadı.")
        return
    if att.kind == "image":
        st.image(raw, caption=att.name)
    else:
        st.download_button(f"📄 {att.name}", data=raw, file_name=att.name,
                           mime=mime_of(att.data), key=f"dl_{att.id}")
