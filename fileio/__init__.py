"""Client library for the File.io file-hosting service.

    import fileio

    key = fileio.upload("report.pdf")
    fileio.download(key, "/tmp/report.pdf")
"""

from .client import (  # noqa: F401
    DEFAULT_URL,
    ClientConfig,
    FileIOClient,
    Transport,
    TransportResponse,
    UploadReceipt,
    UrllibTransport,
    download,
    get_default_client,
    set_default_client,
    upload,
    upload_with_expiry,
)
from .core import (  # noqa: F401
    DEFAULT_EXPIRES,
    FileCreateError,
    FileIOError,
    FileOpenError,
    HTTPStatusError,
    LocalIOError,
    MalformedResponseError,
    NotFoundError,
    ServiceError,
    TransportError,
    UploadResult,
    decode_response,
    encode_expires,
)
