import streamlit as st
from datetime import datetime

st.set_page_config(
    page_title="UPI Payments",
    page_icon="💸",
    layout="wide",
    initial_sidebar_state="collapsed",
)

from utils.auth_guard import is_logged_in, header_user_id, sign_in
from utils.exceptions import UnauthorizedException

# A gateway-supplied identity header signs the caller in directly
if not is_logged_in() and header_user_id():
    try:
        sign_in(header_user_id())
    except UnauthorizedException:
        st.error("Unauthorized: the X-User-ID header is not a valid account identifier.")


# --- PAGE DEFINITIONS ---
def sign_in_page():
    col_left, col_center, col_right = st.columns([1, 2, 1])

    with col_center:
        st.markdown(
            """
            <div style="text-align:center">
                <h1 style="color:#1B4F72">💸 UPI Payments</h1>
                <p style="color:#5D6D7E; font-size:1.1rem">Pay - Collect - Mandates</p>
            </div>
            """,
            unsafe_allow_html=True,
        )
        st.markdown("---")

        with st.form("sign_in_form", clear_on_submit=False):
            st.subheader("Sign in")
            user_id = st.text_input("User ID", placeholder="32-character account identifier")
            submitted = st.form_submit_button("Continue", use_container_width=True)

        if submitted:
            try:
                sign_in(user_id)
                st.success("Signed in. Redirecting...")
                st.rerun()
            except UnauthorizedException:
                st.error("Unauthorized: the user ID is not a valid account identifier.")

        st.markdown("---")
        st.caption(f"(c) {datetime.now().year} UPI Payments")


# --- NAVIGATION SETUP ---
if not is_logged_in():
    pg = st.navigation([st.Page(sign_in_page, title="Sign in", default=True)])
    pg.run()

else:
    pg = st.navigation({
        "Addresses": [
            st.Page("pages/1_VPA.py", title="My VPAs", default=True),
        ],
        "Payments": [
            st.Page("pages/2_Pay.py", title="Pay"),
            st.Page("pages/3_Collect.py", title="Collect"),
            st.Page("pages/4_Transactions.py", title="Transactions"),
            st.Page("pages/5_Mandates.py", title="Mandates"),
        ],
    })
    pg.run()
