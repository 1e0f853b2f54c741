"""Session detail page."""
from typing import Optional

import streamlit as st

from src.models.speaker import Speaker
from src.services.app_services import AppServices
from src.ui.html_utils import html_block, text
from src.utils.async_utils import run_async


def _speaker_html(speaker: Speaker) -> str:
    """Speaker block with photo, or initial when no photo is set."""
    initial = speaker.name[0].upper() if speaker.name else "?"
    if speaker.photo:
        avatar = (
            f'<img src="{text(speaker.photo)}" alt="{text(speaker.name)}" '
            'style="width: 56px; height: 56px; border-radius: 50%; object-fit: cover;">'
        )
    else:
        avatar = (
            '<div style="width: 56px; height: 56px; border-radius: 50%; '
            'background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); '
            'display: flex; align-items: center; justify-content: center; '
            f'color: white; font-weight: 700;">{text(initial)}</div>'
        )
    return html_block(f"""
        <div style="display: flex; gap: 14px; align-items: center; margin-bottom: 12px;">
            {avatar}
            <div>
                <div style="font-weight: 600; color: #e2e8f0;">{text(speaker.name)}</div>
                <div style="font-size: 13px; color: #94a3b8;">{text(speaker.bio)}</div>
            </div>
        </div>
    """)


def _back_to_dashboard() -> None:
    st.session_state.current_page = "dashboard"
    st.session_state.selected_session_id = None
    st.rerun()


def render_session_detail(services: AppServices, identity: Optional[str], session_id: str) -> None:
    """渲染議程詳情頁。"""
    session = run_async(lambda: services.agenda.get_session_by_id(session_id))
    if session is None:
        st.error("找不到議程")
        if st.button("返回首頁"):
            _back_to_dashboard()
        return

    st.markdown(f"## {session.title}")
    st.caption(f"{session.date} · {session.time} | #{session.track}" + (f" | {session.location}" if session.location else ""))
    if session.description:
        st.write(session.description)

    speakers = run_async(lambda: services.agenda.get_speakers_for_session(session))
    if speakers:
        st.markdown("#### 講者")
        for speaker in speakers:
            st.markdown(_speaker_html(speaker), unsafe_allow_html=True)

    attendee = run_async(lambda: services.directory.lookup(identity)) if identity else None
    if attendee is not None:
        if attendee.has_session(session.id):
            if st.button("從我的議程移除", key=f"detail_remove_{session.id}"):
                run_async(lambda: services.agenda.remove_session(identity, session.id))
                st.rerun()
        elif st.button("加入我的議程", key=f"detail_add_{session.id}", type="primary"):
            run_async(lambda: services.agenda.add_session(identity, session.id))
            st.rerun()

    if st.button("返回首頁", key="detail_back"):
        _back_to_dashboard()
