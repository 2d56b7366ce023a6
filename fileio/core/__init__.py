"""Pure building blocks of the File.io client: errors, encodings and configuration."""

from .exceptions import (  # noqa: F401
    FileCreateError,
    FileIOError,
    FileOpenError,
    HTTPStatusError,
    LocalIOError,
    MalformedResponseError,
    NotFoundError,
    ServiceError,
    TransportError,
)
from .expires import DEFAULT_EXPIRES, encode_expires  # noqa: F401
from .multipart import MultipartBody, build_body  # noqa: F401
from .response import UploadResponse, UploadResult, decode_response, parse_response  # noqa: F401
