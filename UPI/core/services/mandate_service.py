"""
Mandate Service
Business logic for recurring payment authorizations
"""

from typing import List, Any

from core.constants import MANDATE_ID_PREFIX
from core.models.entities import Mandate, MandateStatus
from core.repositories.mandate_repository import MandateRepository
from core.services.identity_service import IdentityService
from core.services.vpa_service import VPAService
from utils.validators import UPIValidator
from utils.helpers import StringUtils, LoggingUtils

class MandateService:
    """Service class for mandate creation and listing"""

    def __init__(self, mandate_repo: MandateRepository = None, vpa_service: VPAService = None):
        self.mandate_repo = mandate_repo or MandateRepository()
        self.vpa_service = vpa_service or VPAService()

    def create_mandate(self, user_id: str, payee_address: str, amount: Any, frequency: str,
                       start_date: Any, end_date: Any, purpose: str = "") -> Mandate:
        """Create an active mandate paid from the caller's acting address.

        Amount, frequency and the start/end window are stored as given:
        frequency is not checked against MandateFrequency and end_date is not
        required to follow start_date.
        """
        account_key = IdentityService.resolve(user_id)
        payer_address = self.vpa_service.resolve_acting_address(account_key)

        mandate = Mandate(
            account_key=account_key,
            mandate_id=StringUtils.generate_reference_number(MANDATE_ID_PREFIX),
            payer_address=payer_address,
            payee_address=payee_address,
            amount=UPIValidator.to_amount(amount),
            frequency=frequency,
            start_date=UPIValidator.parse_datetime(start_date),
            end_date=UPIValidator.parse_datetime(end_date),
            purpose=purpose or "",
            status=MandateStatus.ACTIVE
        )

        mandate = self.mandate_repo.create_mandate(mandate)

        LoggingUtils.log_business_event(
            "mandate_created", "mandate", mandate.mandate_id, account_key=account_key,
            details={'payee_address': payee_address, 'frequency': frequency, 'amount': str(mandate.amount)}
        )
        return mandate

    def get_mandates(self, user_id: str) -> List[Mandate]:
        """All mandates of the caller, whatever their status"""
        account_key = IdentityService.resolve(user_id)
        return self.mandate_repo.find_by_account(account_key)
