"""HTTP client for the File.io API.

Security notes:
- Treat server responses as untrusted input.
- Avoid printing or logging raw file bytes.
"""

from .config import DEFAULT_URL, ClientConfig  # noqa: F401
from .fileio_client import (  # noqa: F401
    FileIOClient,
    UploadReceipt,
    download,
    get_default_client,
    set_default_client,
    upload,
    upload_with_expiry,
)
from .transport import Transport, TransportResponse, UrllibTransport  # noqa: F401
