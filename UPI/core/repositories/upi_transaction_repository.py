"""
UPI Transaction Repository
Handles database operations for upi_transactions table
"""

from typing import List, Tuple

from core.repositories.base_repository import BaseRepository
from core.models.entities import UPITransaction, TransactionType, TransactionStatus
from utils.helpers import DateUtils

class UPITransactionRepository(BaseRepository):
    """Repository for upi_transactions table operations"""

    def __init__(self, db=None):
        super().__init__('upi_transactions', 'upi_txn_id', db=db)

    def create_transaction(self, transaction: UPITransaction) -> UPITransaction:
        """Insert a ledger entry; a repeated txn_id raises DuplicateRecordException"""
        transaction.created_at = DateUtils.utc_now()

        transaction_data = {
            'account_key': transaction.account_key,
            'txn_id': transaction.txn_id,
            'txn_type': transaction.txn_type.value,
            'from_address': transaction.from_address,
            'to_address': transaction.to_address,
            'amount': transaction.amount,
            'note': transaction.note,
            'status': transaction.status.value,
            'failure_reason': transaction.failure_reason,
            'transaction_date': transaction.transaction_date or transaction.created_at,
            'created_at': transaction.created_at
        }

        transaction.upi_txn_id = self.create(transaction_data)
        return transaction

    def find_by_account(self, account_key: str, page: int, limit: int) -> Tuple[List[UPITransaction], int]:
        """Most recent first page of an account's ledger plus its total size"""
        where = "account_key = %s"
        total = self.count(where, (account_key,))
        rows = self.find_where(
            where, (account_key,),
            order_by="transaction_date DESC, upi_txn_id DESC",
            limit=limit,
            offset=(page - 1) * limit
        )
        return [self._dict_to_transaction(row) for row in rows], total

    def _dict_to_transaction(self, txn_data: dict) -> UPITransaction:
        """Convert dictionary to UPITransaction object"""
        return UPITransaction(
            upi_txn_id=txn_data['upi_txn_id'],
            account_key=txn_data['account_key'],
            txn_id=txn_data['txn_id'],
            txn_type=TransactionType(txn_data['txn_type']),
            from_address=txn_data['from_address'],
            to_address=txn_data['to_address'],
            amount=txn_data['amount'],
            note=txn_data.get('note', ''),
            status=TransactionStatus(txn_data['status']),
            failure_reason=txn_data.get('failure_reason'),
            transaction_date=txn_data.get('transaction_date'),
            created_at=txn_data.get('created_at')
        )
