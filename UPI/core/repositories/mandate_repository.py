"""
Mandate Repository
Handles database operations for mandates table
"""

from typing import List

from core.repositories.base_repository import BaseRepository
from core.models.entities import Mandate, MandateStatus
from utils.helpers import DateUtils

class MandateRepository(BaseRepository):
    """Repository for mandates table operations"""

    def __init__(self, db=None):
        super().__init__('mandates', 'mandate_pk', db=db)

    def create_mandate(self, mandate: Mandate) -> Mandate:
        """Insert a mandate; a repeated mandate_id raises DuplicateRecordException"""
        now = DateUtils.utc_now()
        mandate.created_at = now
        mandate.updated_at = now

        mandate_data = {
            'account_key': mandate.account_key,
            'mandate_id': mandate.mandate_id,
            'payer_address': mandate.payer_address,
            'payee_address': mandate.payee_address,
            'amount': mandate.amount,
            'frequency': mandate.frequency,
            'start_date': mandate.start_date,
            'end_date': mandate.end_date,
            'purpose': mandate.purpose,
            'status': mandate.status.value,
            'created_at': mandate.created_at,
            'updated_at': mandate.updated_at
        }

        mandate.mandate_pk = self.create(mandate_data)
        return mandate

    def find_by_account(self, account_key: str) -> List[Mandate]:
        """All mandates for an account regardless of status"""
        rows = self.find_where("account_key = %s", (account_key,), order_by="created_at ASC, mandate_pk ASC")
        return [self._dict_to_mandate(row) for row in rows]

    def _dict_to_mandate(self, mandate_data: dict) -> Mandate:
        """Convert dictionary to Mandate object"""
        return Mandate(
            mandate_pk=mandate_data['mandate_pk'],
            account_key=mandate_data['account_key'],
            mandate_id=mandate_data['mandate_id'],
            payer_address=mandate_data['payer_address'],
            payee_address=mandate_data['payee_address'],
            amount=mandate_data['amount'],
            frequency=mandate_data['frequency'],
            start_date=mandate_data.get('start_date'),
            end_date=mandate_data.get('end_date'),
            purpose=mandate_data.get('purpose', ''),
            status=MandateStatus(mandate_data['status']),
            created_at=mandate_data.get('created_at'),
            updated_at=mandate_data.get('updated_at')
        )
