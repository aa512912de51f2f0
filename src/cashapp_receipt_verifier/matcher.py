"""
Claim matching against the provider's receipt.

Both the note and the payer identity must match. Matching only one of them
would let a correct note be replayed from a different payer, or the reverse.
"""

from typing import Any

import structlog

from .errors import ReceiptMismatchError
from .models import RemoteReceipt, VerificationRequest, VerificationResult, payer_identity_value

logger = structlog.get_logger(__name__)


def match_claim(payload: Any, request: VerificationRequest) -> VerificationResult:
    """
    Compare a decoded receipt with the caller's claim.

    Notes are compared case-insensitively. The payer identity is compared
    exactly, as the provider returns usernames in canonical form.

    Args:
        payload: Decoded JSON receipt
        request: The caller's claim

    Returns:
        Success result carrying ``payload`` as data

    Raises:
        ReceiptMismatchError: If the note or payer identity differs
    """
    receipt = RemoteReceipt.from_payload(payload)

    notes = receipt.notes.lower()
    if not notes or notes != request.reference.lower():
        logger.info("Receipt claim mismatch", field="notes")
        raise ReceiptMismatchError("notes")

    payer = payer_identity_value(receipt)
    if not payer or payer != request.username:
        logger.info("Receipt claim mismatch", field="payer")
        raise ReceiptMismatchError("payer")

    return VerificationResult.success(data=payload)
