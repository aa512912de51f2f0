"""
Receipt URL validation.

Checks here are structural only. The provider publishes no signature we could
verify, so trust is decided later by fetching the provider's own record; these
checks just keep obviously malformed or spoofed links from costing a round trip.
"""

import httpx
import structlog

from .errors import InvalidReceiptUrlError
from .models import ReceiptLocator

logger = structlog.get_logger(__name__)

MIN_TOKEN_LENGTH = 15
REPEAT_PREFIX_LENGTH = 5


def _reject(receipt_url: str, check: str) -> InvalidReceiptUrlError:
    logger.info("Receipt URL rejected", check=check, receipt_url=receipt_url[:120])
    return InvalidReceiptUrlError(check)


def _is_absolute_url(receipt_url: str) -> bool:
    if any(ch.isspace() for ch in receipt_url):
        return False
    try:
        url = httpx.URL(receipt_url)
    except httpx.InvalidURL:
        return False
    return url.scheme in ("http", "https") and bool(url.host)


def has_repeated_prefix(token: str, length: int = REPEAT_PREFIX_LENGTH) -> bool:
    """
    True when the first ``length`` characters of ``token`` are one character.

    Heuristic only: real provider tokens are not low-entropy runs like
    ``aaaaa...``, but a genuine token could in principle start that way.
    """
    return len(set(token[:length])) == 1


def parse_receipt_url(receipt_url: str, base_url: str) -> ReceiptLocator:
    """
    Validate a web receipt URL and extract its transaction token.

    Args:
        receipt_url: Untrusted link supplied by the claimant
        base_url: Provider prefix the link must start with

    Returns:
        ReceiptLocator holding the transaction token

    Raises:
        InvalidReceiptUrlError: If any check fails
    """
    if not receipt_url:
        raise _reject(receipt_url, "empty")

    if not _is_absolute_url(receipt_url):
        raise _reject(receipt_url, "malformed")

    if not receipt_url.startswith(base_url):
        raise _reject(receipt_url, "foreign_host")

    # Percent-escapes stay encoded so the token reaches the provider exactly as given
    path = httpx.URL(receipt_url).raw_path.split(b"?", 1)[0].decode("ascii")
    if not path.strip("/"):
        raise _reject(receipt_url, "empty_path")

    segments = path.strip("/").split("/")
    token = segments[1] if len(segments) > 1 else ""
    if len(token) < MIN_TOKEN_LENGTH:
        raise _reject(receipt_url, "short_token")

    if has_repeated_prefix(token):
        raise _reject(receipt_url, "repeated_prefix")

    logger.debug("Receipt URL accepted", token=token[:6] + "...")
    return ReceiptLocator(receipt_url=receipt_url, transaction_token=token)
