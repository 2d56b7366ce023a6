from __future__ import annotations

from typing import Optional


class FileIOError(Exception):
    """
    Base exception for all File.io client failures.
    """

    pass


class TransportError(FileIOError):
    """
    Raised when the request could not be sent or the response not read
    (connection failure, unusable URL, no transport).
    """

    pass


class HTTPStatusError(FileIOError):
    """
    Raised when a download answers with a non-success status.

    The string form is the status text reported by the server (e.g. "Not Found").
    """

    def __init__(self, status: int, reason: str):
        super().__init__(reason)
        self.status = int(status)
        self.reason = reason


class NotFoundError(HTTPStatusError):
    """
    Raised when the requested key does not exist (HTTP 404).
    """

    def __init__(self, reason: str = "Not Found"):
        super().__init__(404, reason)


class MalformedResponseError(FileIOError):
    """
    Raised when the service answers with something that is not a valid upload response.
    """

    pass


class ServiceError(FileIOError):
    """
    Raised when the service reports `success: false`.

    Carries the service-supplied code and message verbatim.
    """

    def __init__(self, code: Optional[int], message: Optional[str]):
        super().__init__(message or "")
        self.code = code
        self.message = message or ""


class LocalIOError(FileIOError):
    """
    Raised when a local file cannot be opened, created, read or written.
    """

    pass


class FileOpenError(LocalIOError):
    pass


class FileCreateError(LocalIOError):
    pass
