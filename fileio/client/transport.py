"""Transport seam between the File.io client and the network.

Security notes:
- Treat server responses as untrusted input.
- Uses the default SSL context (verification ON).
"""
from __future__ import annotations

import http.client
import logging
import os
import ssl
from dataclasses import dataclass, field
from typing import BinaryIO, Mapping, Optional, Protocol, runtime_checkable
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from fileio.core.exceptions import TransportError

log = logging.getLogger("fileio.transport")

DEFAULT_TIMEOUT = 60.0


@dataclass
class TransportResponse:
    """One HTTP response whose body has not been read yet.

    The response owns `body` and must be closed by whoever issued the request;
    use it as a context manager.
    """

    status: int
    reason: str
    body: BinaryIO
    headers: Mapping[str, str] = field(default_factory=dict)

    def read(self) -> bytes:
        try:
            return self.body.read()
        except (OSError, http.client.HTTPException) as e:
            raise TransportError(f"read response body: {e}") from e

    def close(self) -> None:
        self.body.close()

    def __enter__(self) -> "TransportResponse":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


@runtime_checkable
class Transport(Protocol):
    """Something that can perform an HTTP GET and an HTTP POST."""

    def get(self, url: str) -> TransportResponse: ...

    def post(self, url: str, content_type: str, body: BinaryIO) -> TransportResponse: ...


class UrllibTransport:
    """Stdlib-only transport built on urllib.request.

    Non-2xx answers are returned as responses, not raised; only failures to
    talk to the server become TransportError.
    """

    def __init__(self, timeout: Optional[float] = DEFAULT_TIMEOUT, user_agent: str = "fileio-python"):
        self.timeout = timeout
        self.user_agent = user_agent

    def get(self, url: str) -> TransportResponse:
        """HTTP GET."""

        req = self._request(url, method="GET")
        return self._do_request(req)

    def post(self, url: str, content_type: str, body: BinaryIO) -> TransportResponse:
        """HTTP POST of a seekable binary body."""

        req = self._request(url, method="POST", data=body)
        req.add_header("Content-Type", content_type)
        req.add_header("Content-Length", str(_stream_length(body)))
        return self._do_request(req)

    def _request(self, url: str, *, method: str, data: Optional[BinaryIO] = None) -> Request:
        try:
            req = Request(url=url, data=data, method=method)
        except ValueError as e:
            # unknown url type, missing scheme
            raise TransportError(str(e)) from e
        req.add_header("User-Agent", self.user_agent)
        return req

    def _do_request(self, req: Request) -> TransportResponse:
        try:
            ctx = ssl.create_default_context()
            resp = urlopen(req, timeout=self.timeout, context=ctx)
        except HTTPError as e:
            headers = dict(getattr(e, "headers", {}) or {})
            return TransportResponse(
                status=int(e.code or 0), reason=str(e.reason or ""), body=e, headers=headers
            )
        except URLError as e:
            raise TransportError(f"network error: {e.reason}") from e
        except (OSError, ValueError, http.client.HTTPException) as e:
            raise TransportError(f"network error: {e}") from e

        log.debug(
            "transport_response",
            extra={"method": req.get_method(), "status_code": resp.status},
        )
        headers = {k: v for k, v in resp.headers.items()}
        return TransportResponse(
            status=int(resp.status), reason=str(resp.reason or ""), body=resp, headers=headers
        )


def _stream_length(stream: BinaryIO) -> int:
    """Bytes remaining from the current position of a seekable stream."""

    pos = stream.tell()
    stream.seek(0, os.SEEK_END)
    end = stream.tell()
    stream.seek(pos)
    return end - pos
