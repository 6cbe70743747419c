"""
Shared sidebar renderer for all signed-in pages.
Displays the masked account key and a sign-out button.
"""

import streamlit as st
from utils.auth_guard import handle_logout, get_user_id
from utils.helpers import StringUtils


def render_sidebar():
    """Render the common sidebar on every signed-in page."""
    with st.sidebar:
        st.markdown("## UPI Payments")
        st.markdown("---")

        user_id = get_user_id()
        if user_id:
            st.caption(f"Account: {StringUtils.mask_account_key(user_id)}")
            st.markdown("---")

            if st.button("Sign out", use_container_width=True, key="sidebar_logout"):
                handle_logout()
