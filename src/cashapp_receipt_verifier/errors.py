"""Cash App receipt verifier error handling utilities."""

from typing import Optional, Dict, Any

MISSING_USERNAME_MESSAGE = "username is required"
MISSING_REFERENCE_MESSAGE = "payment reference is required"
INVALID_RECEIPT_URL_MESSAGE = "Invalid web receipt URL"
FETCH_FAILED_MESSAGE = "Failed to verify web receipt, please provide a valid receipt"
MISMATCH_MESSAGE = "Failed to verify web receipt, Unmatched notes or host."
VERIFIED_MESSAGE = "Web Receipt Verified Successfully."


class ErrorCode:
    """Standard error codes."""

    VERIFIER_ERROR = "VERIFIER_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Request errors
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_RECEIPT_URL = "INVALID_RECEIPT_URL"

    # Provider errors
    RECEIPT_FETCH_FAILED = "RECEIPT_FETCH_FAILED"
    RECEIPT_MISMATCH = "RECEIPT_MISMATCH"


class ReceiptVerifierError(Exception):
    """Base exception for receipt verification errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or ErrorCode.VERIFIER_ERROR
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class MissingFieldError(ReceiptVerifierError):
    """A mandatory identity field was not supplied."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, error_code=ErrorCode.MISSING_FIELD, **kwargs)
        if field:
            self.details["field"] = field


class InvalidReceiptUrlError(ReceiptVerifierError):
    """The receipt URL failed a structural check."""

    def __init__(self, check: str, **kwargs):
        super().__init__(INVALID_RECEIPT_URL_MESSAGE,
                         error_code=ErrorCode.INVALID_RECEIPT_URL, **kwargs)
        self.details["check"] = check


class ReceiptFetchError(ReceiptVerifierError):
    """The provider answered the receipt lookup with a non-200 status."""

    def __init__(self, status_code: int, **kwargs):
        super().__init__(FETCH_FAILED_MESSAGE,
                         error_code=ErrorCode.RECEIPT_FETCH_FAILED, **kwargs)
        self.details["status_code"] = status_code


class ReceiptMismatchError(ReceiptVerifierError):
    """The provider's receipt does not match the declared claim."""

    def __init__(self, field: str, **kwargs):
        super().__init__(MISMATCH_MESSAGE, error_code=ErrorCode.RECEIPT_MISMATCH, **kwargs)
        self.details["field"] = field


class ConfigurationError(ReceiptVerifierError):
    """Configuration error."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, error_code=ErrorCode.CONFIGURATION_ERROR, **kwargs)
