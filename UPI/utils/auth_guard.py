"""
Identity guard utilities for Streamlit pages.
Resolves the caller from the X-User-ID header or the sign-in form.
"""

import streamlit as st
from datetime import datetime, timedelta

from utils.exceptions import UnauthorizedException


SESSION_TIMEOUT_MINUTES = 30
IDENTITY_HEADER = "X-User-ID"


def header_user_id() -> str:
    """Return the X-User-ID header set by the fronting gateway, if any."""
    try:
        return st.context.headers.get(IDENTITY_HEADER, "") or ""
    except AttributeError:
        return ""


def sign_in(raw_user_id: str):
    """Resolve the identifier and start a session, raising UnauthorizedException if malformed."""
    from core.services.identity_service import IdentityService

    account_key = IdentityService.resolve(raw_user_id)
    st.session_state["session_data"] = {
        "user_id": account_key,
        "login_time": datetime.now(),
        "last_activity": datetime.now(),
    }


def require_login():
    """Stop page execution if no caller identity is established."""
    if "session_data" not in st.session_state:
        raw = header_user_id()
        if raw:
            try:
                sign_in(raw)
            except UnauthorizedException:
                st.error("Invalid caller identity.")
                st.stop()
        else:
            st.warning("Please sign in to continue.")
            st.stop()
    _check_session_timeout()


def get_current_user() -> dict:
    """Return current session_data or empty dict."""
    return st.session_state.get("session_data", {})


def get_user_id() -> str:
    """Return the resolved account key of the current session."""
    return get_current_user().get("user_id", "")


def is_logged_in() -> bool:
    """Check whether a caller session exists."""
    return "session_data" in st.session_state


def handle_logout():
    """Drop the current session and rerun."""
    for key in list(st.session_state.keys()):
        del st.session_state[key]
    st.rerun()


def _check_session_timeout():
    """Auto-logout if session has been idle too long."""
    sd = st.session_state.get("session_data")
    if not sd:
        return
    last_activity = sd.get("last_activity")
    if last_activity and datetime.now() - last_activity > timedelta(minutes=SESSION_TIMEOUT_MINUTES):
        handle_logout()
    else:
        sd["last_activity"] = datetime.now()
