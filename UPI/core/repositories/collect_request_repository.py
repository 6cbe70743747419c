"""
Collect Request Repository
Handles database operations for collect_requests table
"""

from typing import List

from core.repositories.base_repository import BaseRepository
from core.models.entities import CollectRequest, CollectStatus
from utils.helpers import DateUtils

class CollectRequestRepository(BaseRepository):
    """Repository for collect_requests table operations"""

    def __init__(self, db=None):
        super().__init__('collect_requests', 'collect_id', db=db)

    def create_request(self, request: CollectRequest) -> CollectRequest:
        """Insert a collect request; created_at is kept if already stamped"""
        request.created_at = request.created_at or DateUtils.utc_now()

        request_data = {
            'account_key': request.account_key,
            'from_address': request.from_address,
            'to_address': request.to_address,
            'amount': request.amount,
            'note': request.note,
            'status': request.status.value,
            'expires_at': request.expires_at,
            'created_at': request.created_at
        }

        request.collect_id = self.create(request_data)
        return request

    def find_by_account(self, account_key: str) -> List[CollectRequest]:
        """Collect requests raised by an account, newest first"""
        rows = self.find_where("account_key = %s", (account_key,), order_by="created_at DESC, collect_id DESC")
        return [self._dict_to_request(row) for row in rows]

    def _dict_to_request(self, request_data: dict) -> CollectRequest:
        """Convert dictionary to CollectRequest object"""
        return CollectRequest(
            collect_id=request_data['collect_id'],
            account_key=request_data['account_key'],
            from_address=request_data['from_address'],
            to_address=request_data['to_address'],
            amount=request_data['amount'],
            note=request_data.get('note', ''),
            status=CollectStatus(request_data['status']),
            expires_at=request_data.get('expires_at'),
            created_at=request_data.get('created_at')
        )
