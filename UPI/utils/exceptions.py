"""
Custom Exceptions for the UPI Payment Address Service
"""

class BankingSystemException(Exception):
    """Base exception for all UPI service errors"""
    default_error_code = "UPI_ERROR"

    def __init__(self, message: str, error_code: str = None):
        self.message = message
        self.error_code = error_code or self.default_error_code
        super().__init__(self.message)

class UnauthorizedException(BankingSystemException):
    """Raised when the caller-supplied identity is malformed"""
    default_error_code = "UNAUTHORIZED"

class ValidationException(BankingSystemException):
    """Raised when input validation fails"""
    default_error_code = "VALIDATION_ERROR"

class InvalidAmountException(ValidationException):
    """Raised when a payment amount is zero or negative"""
    default_error_code = "INVALID_AMOUNT"

class VPAAlreadyExistsException(BankingSystemException):
    """Raised when an active VPA with the same address already exists"""
    default_error_code = "VPA_EXISTS"

class NoVPAException(BankingSystemException):
    """Raised when an account has no VPA to act from"""
    default_error_code = "NO_VPA"

class VPANotFoundException(BankingSystemException):
    """Raised when an address does not resolve to an active VPA"""
    default_error_code = "VPA_NOT_FOUND"

class DatabaseException(BankingSystemException):
    """Raised when database operations fail"""
    default_error_code = "STORAGE_FAILURE"

class DuplicateRecordException(DatabaseException):
    """Raised when an insert violates a unique constraint"""
    default_error_code = "DUPLICATE_RECORD"

# Status a transport layer should answer with for each error code
ERROR_STATUS = {
    "UNAUTHORIZED": 401,
    "VALIDATION_ERROR": 400,
    "INVALID_AMOUNT": 400,
    "VPA_EXISTS": 409,
    "NO_VPA": 422,
    "VPA_NOT_FOUND": 404,
    "DUPLICATE_RECORD": 500,
    "STORAGE_FAILURE": 500,
}

def status_for(exc: Exception) -> int:
    """Map an exception to a response status, 500 for anything unclassified"""
    if isinstance(exc, BankingSystemException):
        return ERROR_STATUS.get(exc.error_code, 500)
    return 500
