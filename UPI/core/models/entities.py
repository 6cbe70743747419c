"""
Data Models for the UPI Payment Address Service
Dataclasses representing database entities
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional, NewType
from enum import Enum

# Internal account identifier, 32 lowercase hex characters
AccountKey = NewType('AccountKey', str)

# Enums for database values
class TransactionType(Enum):
    PAY = 'pay'
    COLLECT = 'collect'

class TransactionStatus(Enum):
    PENDING = 'pending'
    SUCCESS = 'success'
    FAILED = 'failed'
    DECLINED = 'declined'

class MandateFrequency(Enum):
    DAILY = 'daily'
    WEEKLY = 'weekly'
    MONTHLY = 'monthly'
    YEARLY = 'yearly'
    AS_PRESENTED = 'as_presented'

    @classmethod
    def is_known(cls, value: str) -> bool:
        return value in {f.value for f in cls}

class MandateStatus(Enum):
    ACTIVE = 'active'
    PAUSED = 'paused'
    REVOKED = 'revoked'
    EXPIRED = 'expired'

class CollectStatus(Enum):
    PENDING = 'pending'
    APPROVED = 'approved'
    DECLINED = 'declined'
    EXPIRED = 'expired'

@dataclass
class VPA:
    """Virtual payment address entity"""
    vpa_id: Optional[int] = None
    account_key: str = ""
    address: str = ""
    linked_account_ref: str = ""
    is_default: bool = True
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

@dataclass
class UPITransaction:
    """UPI transaction ledger entry"""
    upi_txn_id: Optional[int] = None
    account_key: str = ""
    txn_id: str = ""
    txn_type: TransactionType = TransactionType.PAY
    from_address: str = ""
    to_address: str = ""
    amount: Decimal = Decimal('0.00')
    note: str = ""
    status: TransactionStatus = TransactionStatus.PENDING
    failure_reason: Optional[str] = None
    transaction_date: Optional[datetime] = None
    created_at: Optional[datetime] = None

@dataclass
class Mandate:
    """Recurring payment authorization entity"""
    mandate_pk: Optional[int] = None
    account_key: str = ""
    mandate_id: str = ""
    payer_address: str = ""
    payee_address: str = ""
    amount: Decimal = Decimal('0.00')
    # Stored as given; not restricted to MandateFrequency values
    frequency: str = MandateFrequency.MONTHLY.value
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    purpose: str = ""
    status: MandateStatus = MandateStatus.ACTIVE
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

@dataclass
class CollectRequest:
    """Pull-payment request entity"""
    collect_id: Optional[int] = None
    account_key: str = ""
    from_address: str = ""
    to_address: str = ""
    amount: Decimal = Decimal('0.00')
    note: str = ""
    status: CollectStatus = CollectStatus.PENDING
    expires_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

@dataclass
class VPAValidation:
    """Result of resolving an address against the active VPA registry"""
    address: str = ""
    display_name: str = ""
    is_valid: bool = False
