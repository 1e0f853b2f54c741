"""Dashboard and personal agenda pages."""
from typing import Optional

import streamlit as st

from src.services.app_services import AppServices
from src.ui.html_utils import html_block
from src.ui.schedule import render_schedule


def _render_heading(title: str, description: str) -> None:
    st.markdown(html_block(f"""
        <div class="dashboard-heading">
            <h2 class="dashboard-heading__title">{title}</h2>
            <div class="dashboard-heading__desc">{description}</div>
        </div>
    """), unsafe_allow_html=True)


def render_dashboard(services: AppServices, identity: Optional[str]) -> None:
    """渲染完整議程表。"""
    _render_heading("議程總覽", "依日期與時段瀏覽所有議程")
    render_schedule(
        services,
        services.agenda.all_sessions_source(),
        identity,
        heading="所有議程",
        empty_message="目前尚未建立任何議程。",
        key_prefix="dashboard",
    )


def render_my_agenda(services: AppServices, identity: Optional[str]) -> None:
    """渲染個人議程。"""
    _render_heading("我的議程", "你已加入的議程")
    if identity is None:
        st.info("請先登入以查看個人議程。")
        return
    render_schedule(
        services,
        services.agenda.attendee_sessions_source(),
        identity,
        heading="已加入的議程",
        empty_message="尚未加入任何議程，請至議程總覽挑選。",
        key_prefix="agenda",
    )
