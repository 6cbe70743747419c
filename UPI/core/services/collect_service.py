"""
Collect Service
Business logic for pull-payment (collect) requests
"""

from typing import List, Any

from core.constants import COLLECT_REQUEST_TTL
from core.models.entities import CollectRequest, CollectStatus
from core.repositories.collect_request_repository import CollectRequestRepository
from core.services.identity_service import IdentityService
from core.services.vpa_service import VPAService
from utils.validators import UPIValidator
from utils.helpers import DateUtils, LoggingUtils

class CollectService:
    """Service class for collect requests"""

    def __init__(self, collect_repo: CollectRequestRepository = None, vpa_service: VPAService = None):
        self.collect_repo = collect_repo or CollectRequestRepository()
        self.vpa_service = vpa_service or VPAService()

    def collect(self, user_id: str, from_address: str, amount: Any, note: str = "") -> CollectRequest:
        """Ask from_address to pay the caller.

        from_address is not checked against the registry. The request stays
        pending; expiry is handled by the storage retention event.
        """
        amount = UPIValidator.validate_amount(amount)
        account_key = IdentityService.resolve(user_id)
        to_address = self.vpa_service.resolve_acting_address(account_key)

        now = DateUtils.utc_now()
        request = CollectRequest(
            account_key=account_key,
            from_address=from_address,
            to_address=to_address,
            amount=amount,
            note=note or "",
            status=CollectStatus.PENDING,
            expires_at=now + COLLECT_REQUEST_TTL,
            created_at=now
        )

        request = self.collect_repo.create_request(request)

        LoggingUtils.log_business_event(
            "collect_requested", "collect_request", request.collect_id, account_key=account_key,
            details={'from_address': from_address, 'amount': str(amount), 'expires_at': request.expires_at.isoformat()}
        )
        return request

    def get_collect_requests(self, user_id: str) -> List[CollectRequest]:
        account_key = IdentityService.resolve(user_id)
        return self.collect_repo.find_by_account(account_key)
