"""
Helper Utilities
Common utility functions for UPI operations
"""

import uuid
from decimal import Decimal
from datetime import datetime, timezone
from typing import Optional, Dict, Any
import logging

from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

# Schedule step per mandate frequency; as_presented debits have no schedule
FREQUENCY_STEPS = {
    'daily': relativedelta(days=1),
    'weekly': relativedelta(weeks=1),
    'monthly': relativedelta(months=1),
    'yearly': relativedelta(years=1),
}

class DateUtils:
    """Utility functions for date operations"""

    @staticmethod
    def utc_now() -> datetime:
        """Current time as naive UTC, the form every stored timestamp takes"""
        return datetime.now(timezone.utc).replace(tzinfo=None)

    @staticmethod
    def next_due_date(start_date: datetime, frequency: str,
                      after: datetime = None, end_date: datetime = None) -> Optional[datetime]:
        """Next scheduled debit of a mandate on or after `after`, None past end or unscheduled"""
        step = FREQUENCY_STEPS.get(frequency)
        if step is None or start_date is None:
            return None

        after = after or DateUtils.utc_now()
        # Step from the start each time so month-end dates don't drift
        n = 0
        due = start_date
        while due < after:
            n += 1
            due = start_date + step * n

        if end_date is not None and due > end_date:
            return None
        return due

class StringUtils:
    """Utility functions for string operations"""

    @staticmethod
    def generate_reference_number(prefix: str = "UPI") -> str:
        """Generate a reference like UPI20261019101530123456A1B2C3D4"""
        timestamp = DateUtils.utc_now().strftime("%Y%m%d%H%M%S%f")
        unique_id = uuid.uuid4().hex[:8].upper()
        return f"{prefix}{timestamp}{unique_id}"

    @staticmethod
    def mask_account_key(account_key: str) -> str:
        """Mask account key for display (show only last 6 characters)"""
        if len(account_key) <= 6:
            return account_key

        return "*" * (len(account_key) - 6) + account_key[-6:]

class LoggingUtils:
    """Logging utility functions"""

    @staticmethod
    def log_transaction(transaction_type: str, account_key: str, amount: Decimal,
                        details: Dict[str, Any] = None):
        """Log transaction for audit trail"""
        log_data = {
            'transaction_type': transaction_type,
            'account_key': account_key,
            'amount': str(amount),
            'timestamp': datetime.now().isoformat(),
            'details': details or {}
        }

        logger.info(f"Transaction: {transaction_type}", extra=log_data)

    @staticmethod
    def log_security_event(event_type: str, details: Dict[str, Any] = None):
        """Log security events"""
        log_data = {
            'event_type': event_type,
            'timestamp': datetime.now().isoformat(),
            'details': details or {}
        }

        logger.warning(f"Security Event: {event_type}", extra=log_data)

    @staticmethod
    def log_business_event(event_type: str, entity_type: str, entity_id: Any,
                           account_key: str = None, details: Dict[str, Any] = None):
        """Log business events"""
        log_data = {
            'event_type': event_type,
            'entity_type': entity_type,
            'entity_id': entity_id,
            'account_key': account_key,
            'timestamp': datetime.now().isoformat(),
            'details': details or {}
        }

        logger.info(f"Business Event: {event_type}", extra=log_data)
