"""
Collect Page - Request money from another VPA and view open requests.
"""

import streamlit as st

from utils.auth_guard import require_login, get_user_id
from utils.sidebar import render_sidebar
from utils.formatters import format_currency, format_date, status_badge, error_message, to_decimal

require_login()
render_sidebar()

user_id = get_user_id()

st.title("Collect")
st.markdown("---")

with st.form("collect_form"):
    from_address = st.text_input("Request from VPA", placeholder="friend@bank", key="collect_from")
    amount = st.number_input("Amount (INR)", min_value=0.0, step=100.0, format="%.2f", key="collect_amount")
    note = st.text_input("Note", placeholder="Movie tickets", key="collect_note")
    submitted = st.form_submit_button("Send Request", use_container_width=True)

if submitted:
    if not from_address:
        st.error("Please enter the payer VPA.")
    else:
        try:
            from core.services.collect_service import CollectService

            request = CollectService().collect(user_id, from_address.strip(), to_decimal(amount), note)
            st.success(
                f"Requested {format_currency(request.amount)} from {request.from_address}. "
                f"Expires {format_date(request.expires_at)}."
            )
        except Exception as e:
            st.error(error_message(e))

st.markdown("---")
st.markdown("#### My Requests")

try:
    from core.services.collect_service import CollectService

    requests = CollectService().get_collect_requests(user_id)
    if requests:
        import pandas as pd

        df = pd.DataFrame([{
            "From": r.from_address,
            "To": r.to_address,
            "Amount": format_currency(r.amount),
            "Note": r.note,
            "Status": status_badge(r.status),
            "Expires": format_date(r.expires_at),
        } for r in requests])
        st.dataframe(df, use_container_width=True)
    else:
        st.info("No open collect requests.")
except Exception as e:
    st.error(error_message(e))
