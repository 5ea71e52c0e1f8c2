import streamlit as st

from config import API_URL, DEFAULT_PASSWORD, HASH_PASSWORDS, STORE_TIMEOUT
from utils.api import StoreClient
from utils.auth_manager import AuthManager
from utils.errors import AuthResult
from utils.work_locations import WorkLocationBook


@st.cache_resource
def get_work_locations() -> WorkLocationBook:
    """Work-location book shared by all sessions of this app process."""
    return WorkLocationBook()


def init_session():
    """Create the per-session services once and default the navigation state."""
    if "auth" not in st.session_state:
        store = StoreClient(API_URL, timeout=STORE_TIMEOUT)
        st.session_state.auth = AuthManager(
            store,
            default_password=DEFAULT_PASSWORD,
            hash_passwords=HASH_PASSWORDS,
        )
    defaults = {
        "nav_page": "Work Location",
        "must_change_password": False,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def get_auth() -> AuthManager:
    return st.session_state.auth


def show_result(result: AuthResult):
    """Render an operation result as a success or error message."""
    if result.ok:
        st.success(result.message)
    else:
        st.error(result.message)
