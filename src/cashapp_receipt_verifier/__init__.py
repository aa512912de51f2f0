"""
Cash App Receipt Verifier

Confirms a user-claimed Cash App payment by fetching the provider's own
receipt and matching its note and payer against the claim.
"""

__version__ = "0.1.0"

from .errors import (
    ErrorCode,
    ReceiptVerifierError,
    MissingFieldError,
    InvalidReceiptUrlError,
    ReceiptFetchError,
    ReceiptMismatchError,
    ConfigurationError,
)
from .models import (
    VerificationRequest,
    VerificationResult,
    VerificationStatus,
    ReceiptLocator,
    RemoteReceipt,
    payer_identity_value,
)
from .settings import VerifierSettings, get_settings
from .verifier import WebReceiptVerifier, verify_web_receipt

__all__ = [
    "WebReceiptVerifier",
    "verify_web_receipt",
    "VerificationRequest",
    "VerificationResult",
    "VerificationStatus",
    "ReceiptLocator",
    "RemoteReceipt",
    "payer_identity_value",
    "VerifierSettings",
    "get_settings",
    "ErrorCode",
    "ReceiptVerifierError",
    "MissingFieldError",
    "InvalidReceiptUrlError",
    "ReceiptFetchError",
    "ReceiptMismatchError",
    "ConfigurationError",
]
