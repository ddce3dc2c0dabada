import streamlit as st
from common.ui import act, empty_state, get_ctx, k_facet, note_card
from data.catalog import stages, subjects, weeks_for
from nav.state import toggle_facet, update_filter

ALL_WEEKS = "Tüm Haftalar"

def _on_query_change():
    act(update_filter, query=st.session_state.get("search_query", ""))

def _on_week_change():
    label = st.session_state.get("search_week", ALL_WEEKS)
    ctx = get_ctx()
    week_id = None
    for week in weeks_for(ctx.session.filter.stage_id):
        if week.title == label:
            week_id = week.id
    act(update_filter, week_id=week_id)

def page_search():
    ctx = get_ctx()
    flt = ctx.session.filter

    # the widget mirrors FilterState, which is reset whenever search is toggled
    st.session_state["search_query"] = flt.query
    st.text_input("Ara", key="search_query", placeholder="Notlarda veya yazarda ara...",
                  on_change=_on_query_change, label_visibility="collapsed")

    # subject chips
    chips = st.columns(len(subjects()) + 1)
    with chips[0]:
        st.button("Tüm Dersler", key="facet_subject_all",
                  type="primary" if flt.subject_id is None else "secondary",
                  on_click=act, args=(update_filter,), kwargs={"subject_id": None})
    for col, subject in zip(chips[1:], subjects()):
        with col:
            st.button(subject.title, key=k_facet("subject_id", subject.id),
                      type="primary" if flt.subject_id == subject.id else "secondary",
                      on_click=act, args=(toggle_facet, "subject_id", subject.id))

    # stage chips
    stage_cols = st.columns(len(stages()))
    for col, stage in zip(stage_cols, stages()):
        with col:
            st.button(stage.title, key=k_facet("stage_id", stage.id),
                      type="primary" if flt.stage_id == stage.id else "secondary",
                      on_click=act, args=(toggle_facet, "stage_id", stage.id))

    weeks = weeks_for(flt.stage_id)
    labels = [ALL_WEEKS] + [w.title for w in weeks]
    current = next((w.title for w in weeks if w.id == flt.week_id), ALL_WEEKS)
    st.session_state["search_week"] = current
    st.selectbox("Hafta", labels, key="search_week", on_change=_on_week_change)

    st.divider()
    results = ctx.visible_notes()
    if not results:
        empty_state("Aradığınız kriterlere uygun<br/>not bulunamadı.", icon="🔎")
        return
    st.caption(f"{len(results)} not bulundu")
    for note in results:
        note_card(note, show_badges=True, prefix="search")
