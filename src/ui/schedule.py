"""Schedule view shared by the dashboard and the personal agenda page."""
import logging
from datetime import datetime
from typing import List, Optional

import streamlit as st

from src.models.attendee import Attendee
from src.models.session import Session
from src.services.agenda_projector import AgendaView, project_agenda
from src.services.agenda_service import SessionSource
from src.services.app_services import AppServices
from src.ui.html_utils import html_block, text
from src.utils.async_utils import run_async

logger = logging.getLogger(__name__)

DAY_PARAM = "day"
ALL_DAYS_LABEL = "全部日期"


def _day_options(view: AgendaView) -> List[Optional[int]]:
    """Tab values: None (all days) followed by each day offset."""
    return [None] + [tab.offset for tab in view.days]


def _day_option_label(view: AgendaView, offset: Optional[int]) -> str:
    if offset is None:
        return ALL_DAYS_LABEL
    for position, tab in enumerate(view.days, start=1):
        if tab.offset == offset:
            return f"Day {position} · {tab.label}"
    return str(offset)


def _slot_heading(slot: datetime, filtered: bool) -> str:
    """Only the clock time when one day is shown; date too otherwise."""
    if filtered:
        return slot.strftime("%H:%M")
    return slot.strftime("%m/%d (%a) %H:%M")


def _session_card_html(session: Session, on_agenda: bool = False) -> str:
    """產生議程卡片的 HTML。"""
    badge = '<span class="schedule-card__badge">✔ 已加入</span>' if on_agenda else ""
    location = f" · {text(session.location)}" if session.location else ""
    if session.is_past():
        location += " · 已結束"
    return html_block(
        f"""
        <div class="schedule-card{' schedule-card--selected' if on_agenda else ''}">
            <div class="schedule-card__meta">{text(session.time)}{location}</div>
            <h4 class="schedule-card__title">{text(session.title)}</h4>
            <div class="schedule-card__track">#{text(session.track)}</div>
            {badge}
        </div>
        """
    )


def _inject_schedule_styles() -> None:
    st.markdown(
        html_block(
            """
            <style>
            .schedule-card {
                background: rgba(15, 17, 40, 0.92);
                border-radius: 16px;
                padding: 16px 18px;
                border: 1px solid rgba(148, 163, 184, 0.18);
                margin-bottom: 8px;
            }
            .schedule-card--selected {
                border-color: #a855f7;
                box-shadow: 0 12px 24px rgba(168, 85, 247, 0.25);
            }
            .schedule-card__meta {
                color: #cbd5f5;
                font-size: 13px;
            }
            .schedule-card__title {
                margin: 6px 0;
                color: #f8fafc;
            }
            .schedule-card__track {
                color: rgba(148, 163, 184, 0.85);
                font-size: 12px;
            }
            .schedule-card__badge {
                display: inline-block;
                margin-top: 8px;
                padding: 2px 10px;
                border-radius: 999px;
                background: linear-gradient(135deg, #ec4899 0%, #a855f7 100%);
                color: #18122b;
                font-size: 12px;
                font-weight: 700;
            }
            </style>
            """
        ),
        unsafe_allow_html=True,
    )


def _render_agenda_button(
    services: AppServices,
    attendee: Attendee,
    session: Session,
    key_prefix: str,
) -> None:
    if attendee.has_session(session.id):
        if st.button("移除", key=f"{key_prefix}_remove_{session.id}", use_container_width=True):
            run_async(lambda: services.agenda.remove_session(attendee.identity, session.id))
            st.rerun()
    else:
        if st.button(
            "加入議程",
            key=f"{key_prefix}_add_{session.id}",
            use_container_width=True,
            type="primary",
        ):
            run_async(lambda: services.agenda.add_session(attendee.identity, session.id))
            st.rerun()


def render_schedule(
    services: AppServices,
    source: SessionSource,
    identity: Optional[str],
    *,
    heading: str,
    empty_message: str,
    key_prefix: str,
) -> None:
    """
    Render day tabs and time-slotted session cards.

    Args:
        services: Shared services
        source: Produces the sessions to show for ``identity``
        identity: Signed-in principal, or None
        heading: Page heading
        empty_message: Shown when the source yields nothing
        key_prefix: Namespace for widget keys
    """
    _inject_schedule_styles()
    st.markdown(f"### {heading}")

    sessions = run_async(lambda: source(identity))
    attendee = run_async(lambda: services.directory.lookup(identity)) if identity else None

    if not sessions:
        st.info(empty_message)
        return

    view = project_agenda(
        sessions,
        requested_day=st.query_params.get(DAY_PARAM),
        conference_start=services.settings.conference_start,
    )

    options = _day_options(view)
    selected = st.radio(
        "日期",
        options,
        index=options.index(view.selected_day),
        format_func=lambda offset: _day_option_label(view, offset),
        horizontal=True,
        label_visibility="collapsed",
    )
    if selected != view.selected_day:
        if selected is None:
            del st.query_params[DAY_PARAM]
        else:
            st.query_params[DAY_PARAM] = str(selected)
        st.rerun()

    for slot, slot_sessions in view.slots.items():
        st.markdown(f"#### {_slot_heading(slot, view.is_filtered)}")
        cols = st.columns(max(len(slot_sessions), 1), gap="medium")
        for col, session in zip(cols, slot_sessions):
            with col:
                on_agenda = attendee is not None and attendee.has_session(session.id)
                st.markdown(_session_card_html(session, on_agenda), unsafe_allow_html=True)
                action_cols = st.columns(2, gap="small")
                with action_cols[0]:
                    if st.button("查看詳情", key=f"{key_prefix}_detail_{session.id}", use_container_width=True):
                        st.session_state.selected_session_id = session.id
                        st.session_state.current_page = "detail"
                        st.rerun()
                if attendee is not None:
                    with action_cols[1]:
                        _render_agenda_button(services, attendee, session, key_prefix)
