"""
Receipt fetching.

One GET against the provider's JSON receipt endpoint per verification.
Nothing is retried or cached.
"""

from typing import Any, Optional

import httpx
import structlog

from .errors import ReceiptFetchError
from .models import ReceiptLocator
from .settings import DEFAULT_RECEIPT_JSON_BASE_URL, DEFAULT_USER_AGENT

logger = structlog.get_logger(__name__)


def create_http_client(
    timeout: Optional[float] = None,
    user_agent: str = DEFAULT_USER_AGENT,
) -> httpx.Client:
    """
    Create the HTTP client used for receipt lookups.

    Redirects are followed. Without ``timeout`` the httpx default applies.
    """
    def log_request(request: httpx.Request):
        logger.debug("Receipt request", method=request.method, url=str(request.url))

    def log_response(response: httpx.Response):
        logger.debug("Receipt response", status_code=response.status_code)

    transport = httpx.HTTPTransport(retries=0)
    options = {} if timeout is None else {"timeout": timeout}
    client = httpx.Client(
        transport=transport,
        follow_redirects=True,
        headers={
            "Accept": "application/json",
            "User-Agent": user_agent,
        },
        **options,
    )
    client.event_hooks["request"] = [log_request]
    client.event_hooks["response"] = [log_response]

    return client


class ReceiptFetcher:
    """Looks up the provider's JSON record for a validated receipt link."""

    def __init__(
        self,
        json_base_url: str = DEFAULT_RECEIPT_JSON_BASE_URL,
        client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.json_base_url = json_base_url
        self._owns_client = client is None
        self.client = client or create_http_client(timeout=timeout, user_agent=user_agent)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this fetcher created it."""
        if self._owns_client:
            self.client.close()

    def receipt_json_url(self, locator: ReceiptLocator) -> str:
        return self.json_base_url + locator.transaction_token

    def fetch(self, locator: ReceiptLocator) -> Any:
        """
        Fetch and decode the provider receipt.

        Args:
            locator: Validated receipt link

        Returns:
            The decoded JSON body

        Raises:
            ReceiptFetchError: If the provider does not answer with 200
            httpx.HTTPError: On transport failure
            ValueError: If the body cannot be decoded as JSON
        """
        url = self.receipt_json_url(locator)
        logger.info("Fetching receipt", token=locator.transaction_token[:6] + "...")

        response = self.client.get(url, follow_redirects=True)

        if response.status_code != 200:
            logger.warning("Receipt lookup failed", status_code=response.status_code)
            raise ReceiptFetchError(response.status_code)

        try:
            return response.json()
        except RecursionError as e:
            # Deeply nested bodies exhaust the decoder
            raise ValueError(str(e)) from e
