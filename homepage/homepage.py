import streamlit as st
from common.ui import act, get_ctx
from nav.state import UserMode, select_mode

def page_landing():
    ctx = get_ctx()
    st.markdown("<div style='text-align:center;font-size:3rem'>🎓</div>", unsafe_allow_html=True)
    st.header("Hoş Geldiniz")
    st.write("Veri Analizi Okulu not paylaşım platformuna giriş yapmak için amacınızı seçin.")
    if ctx.warning:
        st.warning(ctx.warning)

    c1, c2 = st.columns(2, gap="large")
    with c1:
        st.button(
            "📖 Notları Görmek İstiyorum",
            key="mode_viewer",
            help="Ders notlarını incele ve çalış.",
            use_container_width=True,
            type="primary",
            on_click=act,
            args=(select_mode, UserMode.VIEWER),
        )
    with c2:
        st.button(
            "✍️ Not Paylaşmak İstiyorum",
            key="mode_creator",
            help="Kendi notlarını sisteme yükle.",
            use_container_width=True,
            on_click=act,
            args=(select_mode, UserMode.CREATOR),
        )
