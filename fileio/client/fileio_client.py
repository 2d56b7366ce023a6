"""Upload and download orchestration against the File.io API.

Security notes:
- Treat server responses as untrusted input.
- Avoid printing or logging raw file bytes.
"""
from __future__ import annotations

import http.client
import logging
import os
import threading
import time
from http import HTTPStatus
from typing import BinaryIO, NamedTuple, Optional, Union
from urllib.parse import quote

from fileio.client.config import ClientConfig
from fileio.client.transport import TransportResponse
from fileio.core.exceptions import (
    FileCreateError,
    HTTPStatusError,
    LocalIOError,
    NotFoundError,
    TransportError,
)
from fileio.core.expires import encode_expires
from fileio.core.multipart import build_body
from fileio.core.response import UploadResult, decode_response

log = logging.getLogger("fileio.client")

PathLike = Union[str, "os.PathLike[str]"]

_COPY_CHUNK = 64 * 1024


class UploadReceipt(NamedTuple):
    key: str
    expiry: Optional[str]


class FileIOClient:
    """Client for one File.io endpoint.

    Holds no per-call state; a single instance can be shared between threads.
    Every call issues exactly one request and never retries.
    """

    def __init__(self, config: Optional[ClientConfig] = None):
        self.config = config or ClientConfig()

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def upload(self, path: PathLike) -> str:
        """Upload a file with the service's default expiration and return its key."""

        return self._post_file(path, self.base_url + "/").key

    def upload_with_expiry(self, path: PathLike, days: int) -> UploadReceipt:
        """Upload a file that expires after `days` days.

        Non-positive `days` requests the default period (14 days).
        Returns the key and the service's description of the expiry ("7 days").
        """

        url = f"{self.base_url}/?expires={encode_expires(days)}"
        result = self._post_file(path, url)
        return UploadReceipt(key=result.key, expiry=result.expiry)

    def download(self, key: str, destination: PathLike) -> int:
        """Download the file stored under `key` into `destination`.

        The destination is created or truncated only once the server answered
        200; a failure while copying leaves whatever was written in place.
        Returns the number of bytes written.

        Raises:
          NotFoundError / HTTPStatusError: non-200 answer (message is the status text).
          FileCreateError: destination cannot be created.
          LocalIOError: writing the destination failed.
          TransportError: the request failed or the body could not be read.
        """

        url = f"{self.base_url}/{quote(key, safe='')}"
        start = time.monotonic()
        with self.config.transport.get(url) as resp:
            if resp.status != 200:
                log.warning(
                    "fileio_download_failed",
                    extra={"url": url, "status_code": resp.status},
                )
                reason = _status_text(resp.status, resp.reason)
                if resp.status == 404:
                    raise NotFoundError(reason)
                raise HTTPStatusError(resp.status, reason)

            try:
                out = open(destination, "wb")
            except OSError as e:
                raise FileCreateError(f"create {destination}: {e.strerror or e}") from e

            with out:
                written = _copy_body(resp, out, destination)

        log.info(
            "fileio_download",
            extra={
                "url": url,
                "status_code": 200,
                "size_bytes": written,
                "duration_ms": int((time.monotonic() - start) * 1000),
            },
        )
        return written

    def _post_file(self, path: PathLike, url: str) -> UploadResult:
        # The body is built first so a bad local path never reaches the network.
        stream, content_type = build_body(os.fspath(path))
        start = time.monotonic()
        with stream:
            with self.config.transport.post(url, content_type, stream) as resp:
                status = resp.status
                data = resp.read()

        try:
            result = decode_response(data)
        except Exception:
            log.warning("fileio_upload_failed", extra={"url": url, "status_code": status})
            raise

        log.info(
            "fileio_upload",
            extra={
                "url": url,
                "status_code": status,
                "duration_ms": int((time.monotonic() - start) * 1000),
            },
        )
        return result


def _status_text(status: int, reason: str) -> str:
    """Reason phrase of a response, or the standard phrase when the server sent none."""

    if reason:
        return reason
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return f"HTTP {status}"


def _copy_body(resp: TransportResponse, out: BinaryIO, destination: PathLike) -> int:
    written = 0
    while True:
        try:
            chunk = resp.body.read(_COPY_CHUNK)
        except (OSError, http.client.HTTPException) as e:
            raise TransportError(f"read response body: {e}") from e
        if not chunk:
            return written
        try:
            out.write(chunk)
        except OSError as e:
            raise LocalIOError(f"write {destination}: {e.strerror or e}") from e
        written += len(chunk)


_default_client: Optional[FileIOClient] = None
_default_lock = threading.Lock()


def get_default_client() -> FileIOClient:
    """Return the shared client, built from the environment on first use."""

    global _default_client
    with _default_lock:
        if _default_client is None:
            _default_client = FileIOClient(ClientConfig.from_env())
        return _default_client


def set_default_client(client: Optional[FileIOClient]) -> None:
    """Replace the shared client (None resets it). Call before concurrent use."""

    global _default_client
    with _default_lock:
        _default_client = client


def upload(path: PathLike) -> str:
    """Upload `path` with the default client and return its key."""

    return get_default_client().upload(path)


def upload_with_expiry(path: PathLike, days: int) -> UploadReceipt:
    """Upload `path` with the default client, expiring after `days` days."""

    return get_default_client().upload_with_expiry(path, days)


def download(key: str, destination: PathLike) -> int:
    """Download `key` into `destination` with the default client; returns bytes written."""

    return get_default_client().download(key, destination)
