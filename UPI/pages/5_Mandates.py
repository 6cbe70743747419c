"""
Mandates Page - Set up and review recurring payment authorizations.
"""

from datetime import date, datetime, time, timedelta
import streamlit as st

from core.models.entities import MandateFrequency
from utils.auth_guard import require_login, get_user_id
from utils.sidebar import render_sidebar
from utils.formatters import format_currency, format_date, status_badge, error_message, to_decimal
from utils.helpers import DateUtils

require_login()
render_sidebar()

user_id = get_user_id()

st.title("Mandates")
st.markdown("---")

tab_list, tab_create = st.tabs(["My Mandates", "New Mandate"])

with tab_create:
    with st.form("mandate_form"):
        payee = st.text_input("Payee VPA", placeholder="insurer@bank", key="mandate_payee")
        amount = st.number_input("Amount (INR)", min_value=0.0, step=100.0, format="%.2f", key="mandate_amount")
        frequency = st.selectbox("Frequency", [f.value for f in MandateFrequency], index=2, key="mandate_freq")
        c1, c2 = st.columns(2)
        with c1:
            start = st.date_input("Start date", value=date.today(), key="mandate_start")
        with c2:
            end = st.date_input("End date", value=date.today() + timedelta(days=365), key="mandate_end")
        purpose = st.text_input("Purpose", placeholder="Insurance premium", key="mandate_purpose")
        submitted = st.form_submit_button("Create Mandate", use_container_width=True)

    if submitted:
        try:
            from core.services.mandate_service import MandateService

            mandate = MandateService().create_mandate(
                user_id,
                payee_address=payee.strip(),
                amount=to_decimal(amount),
                frequency=frequency,
                start_date=datetime.combine(start, time.min),
                end_date=datetime.combine(end, time.min),
                purpose=purpose
            )
            st.success(f"Mandate **{mandate.mandate_id}** is {status_badge(mandate.status)}.")
        except Exception as e:
            st.error(error_message(e))

with tab_list:
    try:
        from core.services.mandate_service import MandateService

        mandates = MandateService().get_mandates(user_id)
        if mandates:
            import pandas as pd

            df = pd.DataFrame([{
                "Mandate ID": m.mandate_id,
                "Payer": m.payer_address,
                "Payee": m.payee_address,
                "Amount": format_currency(m.amount),
                "Frequency": m.frequency,
                "Status": status_badge(m.status),
                "Next debit": format_date(DateUtils.next_due_date(m.start_date, m.frequency, end_date=m.end_date)),
                "Purpose": m.purpose,
            } for m in mandates])
            st.dataframe(df, use_container_width=True)
        else:
            st.info("No mandates yet.")
    except Exception as e:
        st.error(error_message(e))
