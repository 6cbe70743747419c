"""
VPA Repository
Handles database operations for vpas table
"""

from typing import Optional, List

from core.repositories.base_repository import BaseRepository
from core.models.entities import VPA
from utils.helpers import DateUtils

class VPARepository(BaseRepository):
    """Repository for vpas table operations"""

    def __init__(self, db=None):
        super().__init__('vpas', 'vpa_id', db=db)

    def create_vpa(self, vpa: VPA) -> VPA:
        """Insert a VPA; a colliding active address raises DuplicateRecordException"""
        now = DateUtils.utc_now()
        vpa.created_at = now
        vpa.updated_at = now

        vpa_data = {
            'account_key': vpa.account_key,
            'address': vpa.address,
            'linked_account_ref': vpa.linked_account_ref,
            'is_default': vpa.is_default,
            'is_active': vpa.is_active,
            'created_at': vpa.created_at,
            'updated_at': vpa.updated_at
        }

        vpa.vpa_id = self.create(vpa_data)
        return vpa

    def find_by_address(self, address: str) -> Optional[VPA]:
        """Find the active VPA holding an address"""
        rows = self.find_where("address = %s AND is_active = TRUE", (address,))
        if not rows:
            return None

        return self._dict_to_vpa(rows[0])

    def find_by_account(self, account_key: str) -> List[VPA]:
        """Find active VPAs for an account in creation order"""
        rows = self.find_where(
            "account_key = %s AND is_active = TRUE", (account_key,),
            order_by="created_at ASC, vpa_id ASC"
        )
        return [self._dict_to_vpa(row) for row in rows]

    def _dict_to_vpa(self, vpa_data: dict) -> VPA:
        """Convert dictionary to VPA object"""
        return VPA(
            vpa_id=vpa_data['vpa_id'],
            account_key=vpa_data['account_key'],
            address=vpa_data['address'],
            linked_account_ref=vpa_data.get('linked_account_ref', ''),
            is_default=bool(vpa_data.get('is_default')),
            is_active=bool(vpa_data.get('is_active')),
            created_at=vpa_data.get('created_at'),
            updated_at=vpa_data.get('updated_at')
        )
