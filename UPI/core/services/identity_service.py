"""
Identity Service
Resolves caller-supplied user identifiers into internal account keys
"""

from core.models.entities import AccountKey
from utils.exceptions import UnauthorizedException
from utils.validators import UPIValidator
from utils.helpers import LoggingUtils

class IdentityService:
    """Stateless resolver; never touches storage"""

    @staticmethod
    def resolve(raw_id: str) -> AccountKey:
        """Turn a raw identifier into an AccountKey or raise UnauthorizedException.

        A malformed identifier means the caller's identity is invalid, it is
        never reported as a missing account.
        """
        if not UPIValidator.is_account_key(raw_id):
            LoggingUtils.log_security_event("invalid_user_id", details={'length': len(str(raw_id or ""))})
            raise UnauthorizedException("unauthorized")

        return AccountKey(raw_id.strip().lower())
