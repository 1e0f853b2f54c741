"""Attendee registration page."""
import logging
from typing import Optional

import streamlit as st

from src.models.attendee import Attendee
from src.services.app_services import AppServices
from src.utils.async_utils import run_async
from src.utils.exceptions import AlreadyRegisteredError
from src.utils.validation import validate_attendee_form

logger = logging.getLogger(__name__)


def render_registration_page(services: AppServices, identity: Optional[str]) -> None:
    """渲染報到註冊頁面。"""
    st.markdown("## 完成報到資料")

    if identity is None:
        st.info("請先登入後再填寫報到資料。")
        if st.button("前往登入", key="register_sign_in"):
            st.session_state.current_page = "sign_in"
            st.rerun()
        return

    existing = run_async(lambda: services.directory.lookup(identity))
    if existing is not None:
        st.success(f"{existing.display_name}，你已完成報到。")
        if st.button("前往議程總覽", key="register_done"):
            st.session_state.current_page = "dashboard"
            st.rerun()
        return

    st.caption(f"登入身分：{identity}")
    with st.form("registration_form"):
        first_name = st.text_input("名字", max_chars=50)
        last_name = st.text_input("姓氏", max_chars=50)
        email = st.text_input("Email")
        submitted = st.form_submit_button("送出", type="primary")

    if not submitted:
        return

    is_valid, error_msg = validate_attendee_form(first_name, last_name, email)
    if not is_valid:
        st.error(f"❌ {error_msg}")
        return

    attendee = Attendee(
        identity=identity,
        first_name=first_name.strip(),
        last_name=last_name.strip(),
        email=email.strip(),
    )
    try:
        run_async(lambda: services.directory.register(attendee))
    except AlreadyRegisteredError:
        logger.info(f"Duplicate registration attempt for {identity}")
        st.error("❌ 此帳號已完成報到")
        return

    st.session_state.current_page = "dashboard"
    st.rerun()
