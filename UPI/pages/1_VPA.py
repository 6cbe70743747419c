"""
VPA Page - Create, list and validate virtual payment addresses.
"""

import streamlit as st

from core.constants import BANK_SUFFIX
from utils.auth_guard import require_login, get_user_id
from utils.sidebar import render_sidebar
from utils.formatters import format_date, error_message

require_login()
render_sidebar()

user_id = get_user_id()

st.title("My VPAs")
st.markdown("---")

tab_list, tab_create, tab_validate = st.tabs(["My Addresses", "Create VPA", "Validate VPA"])

# ===========================
# TAB 1 - List
# ===========================
with tab_list:
    try:
        from core.services.vpa_service import VPAService

        vpas = VPAService().get_vpas(user_id)
        if vpas:
            for vpa in vpas:
                label = " (default)" if vpa.is_default else ""
                st.markdown(f"**{vpa.address}**{label}")
                st.caption(f"Linked account: {vpa.linked_account_ref or 'N/A'} | Created {format_date(vpa.created_at)}")
        else:
            st.info("No VPA yet. Create one to start paying and collecting.")
    except Exception as e:
        st.error(error_message(e))

# ===========================
# TAB 2 - Create
# ===========================
with tab_create:
    st.subheader("Create a new VPA")

    with st.form("create_vpa_form"):
        prefix = st.text_input("Prefix", placeholder="john.doe", key="vpa_prefix")
        st.caption(f"Your address will be `<prefix>{BANK_SUFFIX}`")
        linked = st.text_input("Linked account reference", placeholder="ACC1", key="vpa_linked")
        submitted = st.form_submit_button("Create VPA", use_container_width=True)

    if submitted:
        try:
            from core.services.vpa_service import VPAService

            vpa = VPAService().create_vpa(user_id, prefix, linked)
            st.success(f"VPA created: **{vpa.address}**")
        except Exception as e:
            st.error(error_message(e))

# ===========================
# TAB 3 - Validate
# ===========================
with tab_validate:
    st.subheader("Check an address")
    address = st.text_input("VPA", placeholder=f"someone{BANK_SUFFIX}", key="validate_address")

    if st.button("Validate", key="validate_btn") and address:
        try:
            from core.services.vpa_service import VPAService

            result = VPAService().validate_vpa(address)
            if result.is_valid:
                st.success(f"{result.address} belongs to **{result.display_name}**")
            else:
                st.warning(f"{result.address} is not an active VPA.")
        except Exception as e:
            st.error(error_message(e))
