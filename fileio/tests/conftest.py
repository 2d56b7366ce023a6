from __future__ import annotations

import io
from http import HTTPStatus
from typing import BinaryIO, List, Tuple
from urllib.parse import urlsplit

import pytest

from fileio.client import ClientConfig, FileIOClient, TransportResponse
from fileio.core.exceptions import TransportError

FAKE_URL = "https://file.io"

# path?query -> (status, body)
ROUTES = {
    "/": (200, b'{"success":true,"key":"2ojE41"}'),
    "/?expires=14": (200, b'{"success":true,"key":"2ojE41"}'),
    "/exists": (200, b"This is a test"),
    "/?expires=1w": (200, b'{"success":true,"key":"2ojE41","expiry":"7 days"}'),
    "/?expires=1m": (200, b'{"success":true,"key":"2ojE41","expiry":"1 month"}'),
    "/?expires=2y": (200, b'{"success":true,"key":"2ojE41","expiry":"2 years"}'),
    "/?expires=12": (200, b'{"success":true,"key":"2ojE41","expiry":"12 days"}'),
    "/?expires=666": (200, b'{"success":false,"error":500,"message":"Internal error"}'),
    "/?expires=999": (200, b""),
}
NOT_FOUND = (404, b'{"success":false,"error":404,"message":"Not Found"}')


class FakeTransport:
    """In-process stand-in for the File.io API, answering from ROUTES."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, str]] = []
        self.posted: List[Tuple[str, bytes]] = []
        self.responses: List[TransportResponse] = []

    def get(self, url: str) -> TransportResponse:
        return self._handle("GET", url)

    def post(self, url: str, content_type: str, body: BinaryIO) -> TransportResponse:
        resp = self._handle("POST", url)
        self.posted.append((content_type, body.read()))
        return resp

    def _handle(self, method: str, url: str) -> TransportResponse:
        self.calls.append((method, url))
        if not url.startswith("http"):
            raise TransportError("No transport")
        parts = urlsplit(url)
        p = parts.path or "/"
        if parts.query:
            p += "?" + parts.query
        status, payload = ROUTES.get(p, NOT_FOUND)
        resp = TransportResponse(
            status=status, reason=HTTPStatus(status).phrase, body=io.BytesIO(payload)
        )
        self.responses.append(resp)
        return resp


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(fake_transport: FakeTransport) -> FileIOClient:
    return FileIOClient(ClientConfig(base_url=FAKE_URL, transport=fake_transport))


@pytest.fixture
def sample_file(tmp_path):
    p = tmp_path / "test.txt"
    p.write_bytes(b"This is a test")
    return p
