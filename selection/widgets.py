import html

import streamlit as st
from common.style import ICONS, style_for
from common.ui import act, get_ctx, k_subject_open, k_stage_open, k_week_open
from data.catalog import stages, subjects, weeks_for
from nav.state import drill_into

# =============================
# Drill-down pages: subject → stage → week
# =============================

def page_subjects():
    st.caption("DERS PROGRAMI")
    cols = st.columns(2)
    for i, subject in enumerate(subjects()):
        style = style_for(subject.color)
        with cols[i % 2]:
            st.markdown(
                f'<div class="subject-card" style="background:{style.bg};border-color:{style.border}">'
                f'<div class="subject-title" style="color:{style.text}">{ICONS[subject.icon]} {html.escape(subject.title)}</div>'
                f'<div class="subject-sub">{html.escape(subject.description)}</div></div>',
                unsafe_allow_html=True,
            )
            st.button(
                "Aç",
                key=k_subject_open(subject.id),
                on_click=act,
                args=(drill_into, subject.id),
                use_container_width=True,
            )

def page_stages():
    nav = get_ctx().session.nav
    st.caption("AŞAMA SEÇİMİ")
    for stage in stages():
        box = st.container(border=True)
        with box:
            c1, c2 = st.columns([4, 1], vertical_alignment="center")
            with c1:
                st.subheader(stage.title)
            with c2:
                st.button(
                    "Aç",
                    key=k_stage_open(nav.subject_id or "", stage.id),
                    on_click=act,
                    args=(drill_into, stage.id),
                    use_container_width=True,
                )

def page_weeks():
    nav = get_ctx().session.nav
    st.caption("HAFTA SEÇİMİ")
    cols = st.columns(2)
    for i, week in enumerate(weeks_for(nav.stage_id)):
        with cols[i % 2]:
            box = st.container(border=True)
            with box:
                st.markdown(f"**{week.title}**")
                st.caption(f"📅 {week.start} - {week.end}")
                st.button(
                    "Notları Gör",
                    key=k_week_open(nav.stage_id or "", week.id),
                    on_click=act,
                    args=(drill_into, week.id),
                    use_container_width=True,
                )
