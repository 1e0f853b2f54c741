"""
議程系統主應用程式
Conference Agenda App
"""
import logging
import streamlit as st

from src.services.access_gate import Request
from src.services.app_services import AppServices, build_services
from src.ui.dashboard import render_dashboard, render_my_agenda
from src.ui.registration_page import render_registration_page
from src.ui.session_detail import render_session_detail
from src.ui.sign_in_page import current_identity, render_sign_in_page, render_sign_out_page
from src.utils.async_utils import run_async
from src.utils.config import load_settings

logger = logging.getLogger(__name__)


# Streamlit 頁面配置
st.set_page_config(
    page_title="議程系統",
    page_icon="📅",
    layout="wide",
    initial_sidebar_state="collapsed"
)


@st.cache_resource
def get_services() -> AppServices:
    """Build services once per server process."""
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Catalog: {settings.catalog_file}, attendees: {settings.attendees_file}")
    return build_services(settings)


def initialize_session_state():
    """初始化 session state 預設值。"""
    if "current_page" not in st.session_state:
        st.session_state.current_page = "dashboard"

    if "selected_session_id" not in st.session_state:
        st.session_state.selected_session_id = None

    # Handle URL query parameters for direct session link
    if "url_params_processed" not in st.session_state:
        query_params = st.query_params
        if "session_id" in query_params:
            st.session_state.selected_session_id = query_params["session_id"]
            st.session_state.current_page = "detail"
        st.session_state.url_params_processed = True


def apply_custom_css():
    """套用自訂 CSS 樣式。"""
    st.markdown("""
        <style>
        .stApp {
            background: linear-gradient(135deg, #0f0c29 0%, #1a1a2e 50%, #16213e 100%);
        }

        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}

        .stButton > button {
            border-radius: 12px;
            font-weight: 600;
            border: none;
        }

        .stButton > button[kind="primary"] {
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            color: white;
        }

        .dashboard-heading {
            text-align: center;
            margin-bottom: 14px;
        }
        .dashboard-heading__title {
            font-size: 28px;
            font-weight: 800;
            margin: 0;
        }
        .dashboard-heading__desc {
            margin-top: 4px;
            color: #cbd5f5;
            font-size: 13px;
        }
        </style>
    """, unsafe_allow_html=True)


def _go(page: str):
    st.session_state.current_page = page
    st.session_state.selected_session_id = None
    st.rerun()


def render_navigation(identity):
    """渲染導航選單。"""
    nav_cols = st.columns([1, 1, 2, 1], gap="small")

    with nav_cols[0]:
        if st.button("🏠 議程總覽", use_container_width=True, key="nav_home"):
            _go("dashboard")

    with nav_cols[1]:
        if identity and st.button("⭐ 我的議程", use_container_width=True, key="nav_agenda"):
            _go("agenda")

    with nav_cols[2]:
        if identity:
            st.caption(f"👤 {identity}")

    with nav_cols[3]:
        if identity:
            if st.button("登出", use_container_width=True, key="nav_sign_out"):
                _go("sign_out")
        elif st.button("登入", use_container_width=True, key="nav_sign_in"):
            _go("sign_in")


def enforce_pipeline(services: AppServices, identity) -> bool:
    """
    Run the request pipeline for the current page.

    Returns:
        True if the page may render; on redirect the page is switched and
        the script reruns.
    """
    request = Request(
        route=st.session_state.current_page,
        identity=identity,
        params=dict(st.query_params),
    )
    redirect = run_async(lambda: services.pipeline.run(request))
    if redirect is None:
        return True

    logger.info(f"Redirecting {identity} from {request.route} to {redirect.route}")
    st.session_state.current_page = redirect.route
    st.rerun()
    return False


def render_current_page(services: AppServices, identity):
    """根據當前頁面狀態渲染對應內容。"""
    try:
        if not enforce_pipeline(services, identity):
            return

        page = st.session_state.current_page
        if page == "dashboard":
            render_dashboard(services, identity)

        elif page == "agenda":
            render_my_agenda(services, identity)

        elif page == "detail":
            if st.session_state.selected_session_id:
                render_session_detail(services, identity, st.session_state.selected_session_id)
            else:
                st.error("未選擇議程")
                if st.button("返回首頁"):
                    _go("dashboard")

        elif page == "register":
            render_registration_page(services, identity)

        elif page == "sign_in":
            render_sign_in_page()

        elif page == "sign_out":
            render_sign_out_page()

        else:
            st.error(f"未知的頁面：{page}")
            if st.button("返回首頁"):
                _go("dashboard")

    except Exception as e:
        # 錯誤邊界
        logger.exception("Unhandled exception while rendering page")
        st.error("發生錯誤，請稍後再試")

        with st.expander("🔍 錯誤詳情"):
            st.code(str(e))

        if st.button("返回首頁"):
            _go("dashboard")


def main():
    """主應用程式入口。"""
    initialize_session_state()
    apply_custom_css()

    services = get_services()
    identity = current_identity()

    render_navigation(identity)
    render_current_page(services, identity)


if __name__ == "__main__":
    main()
