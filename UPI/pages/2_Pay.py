"""
Pay Page - Send money to a VPA from your default address (two-step).
"""

import streamlit as st

from utils.auth_guard import require_login, get_user_id
from utils.sidebar import render_sidebar
from utils.formatters import format_currency, format_date, status_badge, error_message, to_decimal

require_login()
render_sidebar()

user_id = get_user_id()

st.title("Pay")
st.markdown("---")

# Step 1: Collect payment details
if "pay_pending" not in st.session_state:
    with st.form("pay_form"):
        to_address = st.text_input("To VPA", placeholder="merchant@bank", key="pay_to")
        amount = st.number_input("Amount (INR)", min_value=0.0, step=100.0, format="%.2f", key="pay_amount")
        note = st.text_input("Note", placeholder="Dinner", key="pay_note")
        submitted = st.form_submit_button("Review Payment", use_container_width=True)

    if submitted:
        if not to_address:
            st.error("Please enter the payee VPA.")
        else:
            st.session_state["pay_pending"] = {
                "to_address": to_address.strip(),
                "amount": amount,
                "note": note,
            }
            st.rerun()

# Step 2: Confirm
if "pay_pending" in st.session_state:
    pp = st.session_state["pay_pending"]
    st.warning("Please review the payment below before confirming.")

    st.markdown(f"""
    | Detail | Value |
    |--------|-------|
    | **To** | {pp['to_address']} |
    | **Amount** | {format_currency(pp['amount'])} |
    | **Note** | {pp['note'] or '-'} |
    """)

    c1, c2 = st.columns(2)
    with c1:
        if st.button("Confirm Payment", use_container_width=True, key="confirm_pay"):
            try:
                from core.services.payment_service import PaymentService

                txn = PaymentService().pay(user_id, pp["to_address"], to_decimal(pp["amount"]), pp["note"])
                st.success(f"Payment {status_badge(txn.status)}! Transaction ID: **{txn.txn_id}**")
                st.caption(f"From {txn.from_address} on {format_date(txn.transaction_date)}")
                if txn.failure_reason:
                    st.error(txn.failure_reason)
            except Exception as e:
                st.error(error_message(e))
            del st.session_state["pay_pending"]

    with c2:
        if st.button("Cancel", use_container_width=True, key="cancel_pay"):
            del st.session_state["pay_pending"]
            st.rerun()
