"""
Verifier Test Configuration

Shared fixtures: settings isolated from the environment, a canned provider
receipt, and an httpx client whose transport is a local handler.
"""

import os
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from cashapp_receipt_verifier.settings import VerifierSettings

VALID_TOKEN = "a1B2c3D4e5F6g7H8"
VALID_RECEIPT_URL = f"https://cash.app/payments/{VALID_TOKEN}/receipt"
RECEIPT_JSON_URL = f"https://cash.app/receipt-json/f/{VALID_TOKEN}"


def make_receipt(notes: str = "rent", payer: Optional[str] = "alice") -> Dict[str, Any]:
    """Provider receipt body with the payer at detail row 3."""
    row: Dict[str, Any] = {} if payer is None else {"value": payer}
    return {"notes": notes, "detail_rows": [{}, {}, {}, row]}


class RecordingTransport:
    """Wraps a request handler and records every request it sees."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep CASHAPP_* variables and any local .env out of the tests."""
    for key in list(os.environ):
        if key.startswith("CASHAPP_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> VerifierSettings:
    return VerifierSettings()


@pytest.fixture
def mock_client():
    """Factory returning (client, transport) for a canned provider response."""
    clients = []

    def factory(
        status_code: int = 200,
        json_body: Any = None,
        content: Optional[bytes] = None,
        exc: Optional[Exception] = None,
    ):
        def handler(request: httpx.Request) -> httpx.Response:
            if exc is not None:
                raise exc
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json_body)

        transport = RecordingTransport(handler)
        client = httpx.Client(transport=httpx.MockTransport(transport))
        clients.append(client)
        return client, transport

    yield factory

    for client in clients:
        client.close()
