"""Sign-in and sign-out pages.

Stands in for a real identity provider: the principal is whatever user name
is typed in, kept in ``st.session_state["identity"]``.
"""
from typing import Optional

import streamlit as st

from src.utils.validation import normalize_identity

IDENTITY_KEY = "identity"


def current_identity() -> Optional[str]:
    """Signed-in principal for this browser session, or None."""
    return st.session_state.get(IDENTITY_KEY)


def render_sign_in_page() -> None:
    """渲染登入頁面。"""
    st.markdown("## 登入")
    with st.form("sign_in_form"):
        user_name = st.text_input("帳號")
        submitted = st.form_submit_button("登入", type="primary")

    if not submitted:
        return

    identity = normalize_identity(user_name or "")
    if not identity:
        st.error("❌ 請輸入帳號")
        return

    st.session_state[IDENTITY_KEY] = identity
    st.session_state.current_page = "dashboard"
    st.rerun()


def render_sign_out_page() -> None:
    """Clear the identity and return to the dashboard."""
    st.session_state.pop(IDENTITY_KEY, None)
    st.session_state.current_page = "dashboard"
    st.session_state.selected_session_id = None
    st.rerun()
