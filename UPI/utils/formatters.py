"""
Formatting helpers shared across Streamlit pages.
Currency formatting, status badges, error messages.
"""

from decimal import Decimal
from datetime import datetime, date
from enum import Enum
from typing import Union

from utils.exceptions import BankingSystemException, status_for


def format_currency(amount: Union[int, float, Decimal, str]) -> str:
    """Format amount as Indian Rupee currency string."""
    if isinstance(amount, str):
        amount = Decimal(amount)
    elif isinstance(amount, (int, float)):
        amount = Decimal(str(amount))
    return f"₹{amount:,.2f}"


def format_date(dt: Union[datetime, date, None]) -> str:
    """Format date for display."""
    if dt is None:
        return "N/A"
    if isinstance(dt, datetime):
        return dt.strftime("%d %b %Y, %I:%M %p UTC")
    return dt.strftime("%d %b %Y")


def status_badge(status: Union[str, Enum]) -> str:
    """Return a display label for transaction, mandate and collect statuses."""
    if isinstance(status, Enum):
        status = status.value
    badges = {
        "success": "Success",
        "pending": "Pending",
        "failed": "Failed",
        "declined": "Declined",
        "active": "Active",
        "paused": "Paused",
        "revoked": "Revoked",
        "expired": "Expired",
        "approved": "Approved",
    }
    return badges.get(status, status.replace("_", " ").title())


def error_message(exc: Exception) -> str:
    """Render a service error with its code and transport status."""
    if isinstance(exc, BankingSystemException):
        return f"[{exc.error_code} / {status_for(exc)}] {exc.message}"
    return f"[{status_for(exc)}] {exc}"


def to_decimal(value: Union[float, int, str]) -> Decimal:
    """Safely convert a Streamlit number_input value to Decimal."""
    return Decimal(str(value))
