"""
Transactions Page - Paginated UPI ledger, most recent first.
"""

import math
import streamlit as st

from core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from utils.auth_guard import require_login, get_user_id
from utils.sidebar import render_sidebar
from utils.formatters import format_currency, format_date, status_badge, error_message

require_login()
render_sidebar()

user_id = get_user_id()

st.title("Transactions")
st.markdown("---")

col1, col2 = st.columns([1, 1])
with col1:
    page = st.number_input("Page", min_value=1, value=1, step=1, key="txn_page")
with col2:
    limit = st.number_input("Per page", min_value=1, max_value=MAX_PAGE_SIZE, value=DEFAULT_PAGE_SIZE, step=5, key="txn_limit")

try:
    from core.services.payment_service import PaymentService

    transactions, total = PaymentService().get_transactions(user_id, int(page), int(limit))
except Exception as e:
    st.error(error_message(e))
    st.stop()

pages = max(1, math.ceil(total / int(limit)))
st.caption(f"Page {int(page)} of {pages} | {total} transactions")

if transactions:
    import pandas as pd

    df = pd.DataFrame([{
        "Txn ID": t.txn_id,
        "Type": t.txn_type.value,
        "From": t.from_address,
        "To": t.to_address,
        "Amount": format_currency(t.amount),
        "Note": t.note,
        "Status": status_badge(t.status),
        "Date": format_date(t.transaction_date),
    } for t in transactions])
    st.dataframe(df, use_container_width=True)

    csv = df.to_csv(index=False)
    st.download_button("Download CSV", csv, file_name=f"upi_transactions_p{int(page)}.csv", mime="text/csv")
else:
    st.info("No transactions on this page.")
