"""
VPA Service
Business logic for virtual payment address creation, lookup and validation
"""

from typing import List

from core.constants import BANK_SUFFIX, VERIFIED_DISPLAY_NAME
from core.models.entities import VPA, VPAValidation, AccountKey
from core.repositories.vpa_repository import VPARepository
from core.services.identity_service import IdentityService
from utils.exceptions import (
    DuplicateRecordException, VPAAlreadyExistsException, NoVPAException, VPANotFoundException
)
from utils.validators import UPIValidator
from utils.helpers import LoggingUtils

class VPAService:
    """Service class for the VPA registry"""

    def __init__(self, vpa_repo: VPARepository = None):
        self.vpa_repo = vpa_repo or VPARepository()

    def create_vpa(self, user_id: str, prefix: str, linked_account_ref: str) -> VPA:
        """Register prefix@bank for the caller.

        Every new VPA is flagged default, even when the account already has
        one; resolve_acting_address tolerates several defaults. Uniqueness
        comes from the active-address unique key, there is no pre-check.
        """
        account_key = IdentityService.resolve(user_id)
        address = UPIValidator.normalize_vpa_prefix(prefix) + BANK_SUFFIX

        vpa = VPA(
            account_key=account_key,
            address=address,
            linked_account_ref=linked_account_ref or "",
            is_default=True,
            is_active=True
        )

        try:
            vpa = self.vpa_repo.create_vpa(vpa)
        except DuplicateRecordException:
            LoggingUtils.log_business_event(
                "vpa_create_conflict", "vpa", address, account_key=account_key
            )
            raise VPAAlreadyExistsException("VPA already exists")

        LoggingUtils.log_business_event(
            "vpa_created", "vpa", vpa.vpa_id, account_key=account_key,
            details={'address': address}
        )
        return vpa

    def get_vpas(self, user_id: str) -> List[VPA]:
        """Active VPAs of the caller"""
        account_key = IdentityService.resolve(user_id)
        return self.vpa_repo.find_by_account(account_key)

    def get_active_vpa(self, address: str) -> VPA:
        """Active VPA holding an address, VPANotFoundException otherwise"""
        normalized = UPIValidator.normalize_address(address)
        vpa = self.vpa_repo.find_by_address(normalized) if normalized else None
        if vpa is None:
            raise VPANotFoundException("VPA not found or inactive")
        return vpa

    def validate_vpa(self, address: str) -> VPAValidation:
        """Whether an address currently resolves to an active VPA; a miss is not an error"""
        try:
            vpa = self.get_active_vpa(address)
        except VPANotFoundException:
            return VPAValidation(address=address or "", display_name="", is_valid=False)

        # TODO: fetch the holder's name from the profile service once it is exposed
        return VPAValidation(address=vpa.address, display_name=VERIFIED_DISPLAY_NAME, is_valid=True)

    def resolve_acting_address(self, account_key: AccountKey) -> str:
        """Address an account pays from and collects into.

        First VPA flagged default, otherwise the first one in creation order.
        """
        vpas = self.vpa_repo.find_by_account(account_key)
        if not vpas:
            raise NoVPAException("no VPA found for user")

        for vpa in vpas:
            if vpa.is_default:
                return vpa.address
        return vpas[0].address
