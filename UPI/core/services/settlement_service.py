"""
Settlement Service
Decision boundary between the ledger and an external payment switch.

In production the gateway would forward the payment to the UPI switch and
map its answer. Here the default gateway approves everything, and the
payment service takes the gateway as a constructor argument so a real one
can be dropped in without touching ledger writes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from core.models.entities import TransactionStatus

@dataclass(frozen=True)
class SettlementDecision:
    """Outcome of a settlement attempt"""
    status: TransactionStatus
    failure_reason: Optional[str] = None

    @classmethod
    def approve(cls) -> "SettlementDecision":
        return cls(TransactionStatus.SUCCESS)

    @classmethod
    def decline(cls, reason: str) -> "SettlementDecision":
        return cls(TransactionStatus.DECLINED, reason)

    @classmethod
    def fail(cls, reason: str) -> "SettlementDecision":
        return cls(TransactionStatus.FAILED, reason)

class SettlementGateway(ABC):
    """Decides whether a pay instruction is approved, declined or failed"""

    provider_name = "abstract"

    @abstractmethod
    def decide(self, from_address: str, to_address: str, amount: Decimal, note: str) -> SettlementDecision:
        raise NotImplementedError

class AutoApproveSettlementGateway(SettlementGateway):
    """Approves every payment; stands in until a switch integration exists"""

    provider_name = "auto-approve"

    def decide(self, from_address: str, to_address: str, amount: Decimal, note: str) -> SettlementDecision:
        return SettlementDecision.approve()
