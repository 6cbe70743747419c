"""
Pytest configuration and fixtures for the UPI service tests.

The in-memory repositories mirror the MySQL unique keys: an insert that
collides raises DuplicateRecordException, exactly like BaseRepository does
for ER_DUP_ENTRY.
"""

import threading
import uuid

import pytest

from core.services.vpa_service import VPAService
from core.services.payment_service import PaymentService
from core.services.collect_service import CollectService
from core.services.mandate_service import MandateService
from utils.exceptions import DuplicateRecordException
from utils.helpers import DateUtils


class InMemoryVPARepository:
    """vpas table with the unique active-address key"""

    def __init__(self):
        self.rows = []
        self.lock = threading.Lock()

    def create_vpa(self, vpa):
        with self.lock:
            if vpa.is_active and any(r.is_active and r.address == vpa.address for r in self.rows):
                raise DuplicateRecordException(f"Duplicate entry '{vpa.address}'")
            now = DateUtils.utc_now()
            vpa.created_at = now
            vpa.updated_at = now
            vpa.vpa_id = len(self.rows) + 1
            self.rows.append(vpa)
            return vpa

    def find_by_address(self, address):
        for row in self.rows:
            if row.is_active and row.address == address:
                return row
        return None

    def find_by_account(self, account_key):
        return [r for r in self.rows if r.account_key == account_key and r.is_active]


class InMemoryUPITransactionRepository:
    """upi_transactions table with the unique txn_id key"""

    def __init__(self):
        self.rows = []

    def create_transaction(self, transaction):
        if any(r.txn_id == transaction.txn_id for r in self.rows):
            raise DuplicateRecordException(f"Duplicate entry '{transaction.txn_id}'")
        transaction.created_at = DateUtils.utc_now()
        transaction.transaction_date = transaction.transaction_date or transaction.created_at
        transaction.upi_txn_id = len(self.rows) + 1
        self.rows.append(transaction)
        return transaction

    def find_by_account(self, account_key, page, limit):
        mine = [r for r in self.rows if r.account_key == account_key]
        mine.sort(key=lambda r: (r.transaction_date, r.upi_txn_id), reverse=True)
        offset = (page - 1) * limit
        return mine[offset:offset + limit], len(mine)


class InMemoryMandateRepository:
    """mandates table with the unique mandate_id key"""

    def __init__(self):
        self.rows = []

    def create_mandate(self, mandate):
        if any(r.mandate_id == mandate.mandate_id for r in self.rows):
            raise DuplicateRecordException(f"Duplicate entry '{mandate.mandate_id}'")
        now = DateUtils.utc_now()
        mandate.created_at = now
        mandate.updated_at = now
        mandate.mandate_pk = len(self.rows) + 1
        self.rows.append(mandate)
        return mandate

    def find_by_account(self, account_key):
        return [r for r in self.rows if r.account_key == account_key]


class InMemoryCollectRequestRepository:
    """collect_requests table"""

    def __init__(self):
        self.rows = []

    def create_request(self, request):
        request.created_at = request.created_at or DateUtils.utc_now()
        request.collect_id = len(self.rows) + 1
        self.rows.append(request)
        return request

    def find_by_account(self, account_key):
        mine = [r for r in self.rows if r.account_key == account_key]
        return sorted(mine, key=lambda r: (r.created_at, r.collect_id), reverse=True)


def new_user_id() -> str:
    return uuid.uuid4().hex


@pytest.fixture
def user_id():
    return new_user_id()


@pytest.fixture
def vpa_repo():
    return InMemoryVPARepository()


@pytest.fixture
def txn_repo():
    return InMemoryUPITransactionRepository()


@pytest.fixture
def mandate_repo():
    return InMemoryMandateRepository()


@pytest.fixture
def collect_repo():
    return InMemoryCollectRequestRepository()


@pytest.fixture
def vpa_service(vpa_repo):
    return VPAService(vpa_repo=vpa_repo)


@pytest.fixture
def payment_service(txn_repo, vpa_service):
    return PaymentService(txn_repo=txn_repo, vpa_service=vpa_service)


@pytest.fixture
def collect_service(collect_repo, vpa_service):
    return CollectService(collect_repo=collect_repo, vpa_service=vpa_service)


@pytest.fixture
def mandate_service(mandate_repo, vpa_service):
    return MandateService(mandate_repo=mandate_repo, vpa_service=vpa_service)
