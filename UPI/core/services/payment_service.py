"""
Payment Service
Business logic for UPI pay instructions and the transaction ledger
"""

from typing import List, Tuple, Any

from core.constants import TXN_ID_PREFIX, DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from core.models.entities import UPITransaction, TransactionType
from core.repositories.upi_transaction_repository import UPITransactionRepository
from core.services.identity_service import IdentityService
from core.services.settlement_service import SettlementGateway, AutoApproveSettlementGateway
from core.services.vpa_service import VPAService
from utils.validators import UPIValidator
from utils.helpers import DateUtils, StringUtils, LoggingUtils

class PaymentService:
    """Service class for pay and ledger history"""

    def __init__(self, txn_repo: UPITransactionRepository = None, vpa_service: VPAService = None,
                 settlement: SettlementGateway = None):
        self.txn_repo = txn_repo or UPITransactionRepository()
        self.vpa_service = vpa_service or VPAService()
        self.settlement = settlement or AutoApproveSettlementGateway()

    def pay(self, user_id: str, to_address: str, amount: Any, note: str = "") -> UPITransaction:
        """Record a pay instruction from the caller's acting address"""
        amount = UPIValidator.validate_amount(amount)
        account_key = IdentityService.resolve(user_id)

        try:
            from_address = self.vpa_service.resolve_acting_address(account_key)
            decision = self.settlement.decide(from_address, to_address, amount, note)

            transaction = UPITransaction(
                account_key=account_key,
                txn_id=StringUtils.generate_reference_number(TXN_ID_PREFIX),
                txn_type=TransactionType.PAY,
                from_address=from_address,
                to_address=to_address,
                amount=amount,
                note=note or "",
                status=decision.status,
                failure_reason=decision.failure_reason,
                transaction_date=DateUtils.utc_now()
            )

            transaction = self.txn_repo.create_transaction(transaction)

        except Exception as e:
            LoggingUtils.log_business_event(
                "pay_failed", "upi_transaction", None, account_key=account_key,
                details={'error': str(e), 'to_address': to_address, 'amount': str(amount)}
            )
            raise

        LoggingUtils.log_transaction(
            "upi_pay", account_key, amount,
            details={
                'txn_id': transaction.txn_id,
                'status': transaction.status.value,
                'settlement': self.settlement.provider_name
            }
        )
        return transaction

    def get_transactions(self, user_id: str, page: int = DEFAULT_PAGE,
                         limit: int = DEFAULT_PAGE_SIZE) -> Tuple[List[UPITransaction], int]:
        """Page of the caller's ledger, most recent first, plus the total count"""
        account_key = IdentityService.resolve(user_id)
        page, limit = self.normalize_page(page, limit)
        return self.txn_repo.find_by_account(account_key, page, limit)

    @staticmethod
    def normalize_page(page: int, limit: int) -> Tuple[int, int]:
        """Clamp out-of-range pagination to the defaults"""
        if page is None or page < 1:
            page = DEFAULT_PAGE
        if limit is None or limit < 1 or limit > MAX_PAGE_SIZE:
            limit = DEFAULT_PAGE_SIZE
        return page, limit
