"""
Input Validation Utilities
Provides validation functions for UPI inputs
"""

import re
from decimal import Decimal, InvalidOperation
from datetime import datetime, date, timezone
from typing import Any, Optional

from dateutil import parser as date_parser

from core.constants import AMOUNT_QUANTUM, MAX_AMOUNT
from utils.exceptions import ValidationException, InvalidAmountException

class UPIValidator:
    """Validation utilities for UPI operations"""

    ACCOUNT_KEY_PATTERN = re.compile(r'^[0-9a-fA-F]{32}$')

    @staticmethod
    def to_amount(value: Any) -> Decimal:
        """Coerce a caller-supplied amount to Decimal"""
        if isinstance(value, Decimal):
            return value
        if isinstance(value, bool):
            raise InvalidAmountException("Amount must be a number")
        try:
            # str() first so floats keep their printed value
            return Decimal(str(value))
        except (InvalidOperation, ValueError, TypeError):
            raise InvalidAmountException(f"Amount must be a number, got {value!r}")

    @staticmethod
    def validate_amount(value: Any) -> Decimal:
        """Validate a payment amount is strictly positive and storable as DECIMAL(15, 2)"""
        amount = UPIValidator.to_amount(value)

        if not amount.is_finite() or amount <= 0:
            raise InvalidAmountException("amount must be greater than zero")

        if amount >= MAX_AMOUNT:
            raise InvalidAmountException(f"amount must be less than {MAX_AMOUNT}")

        # 10.500 is fine, 0.001 would be stored as 0.00
        if amount != amount.quantize(AMOUNT_QUANTUM):
            raise InvalidAmountException("amount must have at most 2 decimal places")

        return amount

    @staticmethod
    def is_account_key(raw_id: Optional[str]) -> bool:
        """Check the storage layer's account identifier format"""
        if not raw_id or not isinstance(raw_id, str):
            return False
        return bool(UPIValidator.ACCOUNT_KEY_PATTERN.match(raw_id.strip()))

    @staticmethod
    def normalize_vpa_prefix(prefix: str) -> str:
        """Lower-case a VPA prefix; blank prefixes are rejected"""
        if not prefix or not isinstance(prefix, str) or not prefix.strip():
            raise ValidationException("VPA prefix is required")

        return prefix.strip().lower()

    @staticmethod
    def normalize_address(address: str) -> str:
        """Canonical form of a full VPA address for lookups"""
        if not address:
            return ""
        return address.strip().lower()

    @staticmethod
    def parse_datetime(value: Any) -> Optional[datetime]:
        """Accept datetime, date or ISO-8601 text for mandate windows"""
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime(value.year, value.month, value.day)
        try:
            parsed = date_parser.isoparse(str(value))
        except ValueError:
            raise ValidationException(f"Invalid date: {value!r}")
        # Stored as naive UTC like every other timestamp
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        return parsed
