"""
Tests for validators, identifier generation and schedule helpers.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from core.models.entities import MandateFrequency
from utils.exceptions import (
    InvalidAmountException, ValidationException, VPAAlreadyExistsException, NoVPAException,
    DatabaseException, status_for
)
from utils.helpers import DateUtils, StringUtils
from utils.validators import UPIValidator


class TestAmountValidation:

    @pytest.mark.parametrize("value,expected", [
        (Decimal("10.50"), Decimal("10.50")),
        (1, Decimal("1")),
        (0.1, Decimal("0.1")),
        ("250", Decimal("250")),
        ("10.500", Decimal("10.5")),
        ("9999999999999.99", Decimal("9999999999999.99")),
    ])
    def test_accepts_positive(self, value, expected):
        assert UPIValidator.validate_amount(value) == expected

    @pytest.mark.parametrize("value", [
        0, -5, "NaN", "abc", None, True,
        Decimal("0.001"), "0.004", "10.005", "Infinity", "-Infinity", "1e20", Decimal(10) ** 13,
    ])
    def test_rejects(self, value):
        with pytest.raises(InvalidAmountException):
            UPIValidator.validate_amount(value)

    def test_invalid_amount_is_a_validation_error(self):
        assert issubclass(InvalidAmountException, ValidationException)


class TestReferenceNumbers:

    def test_prefix_and_uniqueness(self):
        refs = {StringUtils.generate_reference_number("MND") for _ in range(200)}
        assert len(refs) == 200
        assert all(r.startswith("MND") for r in refs)


class TestUTCClock:

    def test_utc_now_is_naive_utc(self):
        before = datetime.now(timezone.utc).replace(tzinfo=None)
        now = DateUtils.utc_now()
        after = datetime.now(timezone.utc).replace(tzinfo=None)

        assert now.tzinfo is None
        assert before <= now <= after

    def test_aware_dates_are_stored_as_utc(self):
        parsed = UPIValidator.parse_datetime("2026-11-01T05:30:00+05:30")
        assert parsed == datetime(2026, 11, 1, 0, 0)
        assert parsed.tzinfo is None


class TestNextDueDate:

    def test_monthly_from_month_end(self):
        start = datetime(2026, 1, 31)
        assert DateUtils.next_due_date(start, "monthly", after=datetime(2026, 2, 1)) == datetime(2026, 2, 28)
        assert DateUtils.next_due_date(start, "monthly", after=datetime(2026, 3, 1)) == datetime(2026, 3, 31)

    def test_before_start_returns_start(self):
        start = datetime(2027, 1, 1)
        assert DateUtils.next_due_date(start, "weekly", after=datetime(2026, 6, 1)) == start

    def test_past_end_date(self):
        assert DateUtils.next_due_date(
            datetime(2026, 1, 1), "yearly", after=datetime(2026, 6, 1), end_date=datetime(2026, 12, 31)
        ) is None

    @pytest.mark.parametrize("frequency", [MandateFrequency.AS_PRESENTED.value, "fortnightly"])
    def test_unscheduled_frequencies(self, frequency):
        assert DateUtils.next_due_date(datetime(2026, 1, 1), frequency) is None


class TestErrorStatus:

    @pytest.mark.parametrize("exc,status", [
        (VPAAlreadyExistsException("x"), 409),
        (InvalidAmountException("x"), 400),
        (NoVPAException("x"), 422),
        (DatabaseException("x"), 500),
        (RuntimeError("x"), 500),
    ])
    def test_status_for(self, exc, status):
        assert status_for(exc) == status

    def test_frequency_membership(self):
        assert MandateFrequency.is_known("daily")
        assert not MandateFrequency.is_known("fortnightly")
