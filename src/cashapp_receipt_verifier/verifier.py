"""
Web Receipt Verifier
====================

Runs the verification pipeline for a claimed Cash App payment:

    preconditions -> receipt URL -> provider lookup -> claim match

Each stage either hands a value to the next one or raises; the first failure
becomes the result. ``verify()`` never raises to its caller.
"""

from typing import Optional

import httpx
import structlog

from .errors import ReceiptVerifierError
from .fetcher import ReceiptFetcher
from .locator import parse_receipt_url
from .matcher import match_claim
from .models import VerificationRequest, VerificationResult
from .preconditions import check_required_fields
from .settings import VerifierSettings, get_settings

logger = structlog.get_logger(__name__)


class WebReceiptVerifier:
    """
    Verifies web receipts for one declared payer and reference.

    The instance keeps no per-verification state, so ``verify()`` can be
    called repeatedly and gives the same answer for the same provider response.
    """

    def __init__(
        self,
        username: str,
        reference: str,
        settings: Optional[VerifierSettings] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.username = username
        self.reference = reference
        self.settings = settings or get_settings()
        self.fetcher = ReceiptFetcher(
            json_base_url=self.settings.receipt_json_base_url,
            client=client,
            timeout=self.settings.http_timeout,
            user_agent=self.settings.user_agent,
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        self.fetcher.close()

    def verify(self, receipt_url: str) -> VerificationResult:
        """
        Verify a web receipt link against the declared payer and reference.

        Args:
            receipt_url: Link to the provider's public web receipt

        Returns:
            VerificationResult with ``data`` set to the provider receipt on success
        """
        request = VerificationRequest(
            username=self.username or "",
            reference=self.reference or "",
            receipt_url=receipt_url or "",
        )
        result = self._run(request)

        logger.info("Receipt verification finished", outcome=result.type.value)
        return result

    def _run(self, request: VerificationRequest) -> VerificationResult:
        try:
            check_required_fields(request)
            locator = parse_receipt_url(request.receipt_url, self.settings.receipt_base_url)
            payload = self.fetcher.fetch(locator)
            return match_claim(payload, request)

        except ReceiptVerifierError as e:
            logger.debug("Verification stopped", error_code=e.error_code, details=e.details)
            return VerificationResult.error(e.message)
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError, ValueError) as e:
            # Transport and decoding failures keep their own wording
            logger.warning("Receipt lookup error", error=str(e), error_type=type(e).__name__)
            return VerificationResult.error(str(e))


def verify_web_receipt(
    username: str,
    reference: str,
    receipt_url: str,
    settings: Optional[VerifierSettings] = None,
    client: Optional[httpx.Client] = None,
) -> VerificationResult:
    """
    Convenience function for a one-off verification.

    Usage:
        result = verify_web_receipt("$alice", "rent", "https://cash.app/payments/...")
        if result.ok:
            print(result.data["notes"])
    """
    with WebReceiptVerifier(username, reference, settings=settings, client=client) as verifier:
        return verifier.verify(receipt_url)
