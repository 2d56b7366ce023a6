"""multipart/form-data encoding of a single file upload.

Security notes:
- File contents are copied as-is and never decoded or logged.
- The body is spooled to a temporary file past a memory threshold, so large
  uploads are not held fully in memory.
"""
from __future__ import annotations

import os
import shutil
import tempfile
import uuid
from typing import BinaryIO, NamedTuple

from fileio.core.exceptions import FileOpenError, LocalIOError

FILE_FIELD = "file"

_CRLF = b"\r\n"
_SPOOL_MAX_BYTES = 8 * 1024 * 1024


class MultipartBody(NamedTuple):
    """An encoded request body and the exact Content-Type header that goes with it."""

    stream: BinaryIO
    content_type: str


def _quote(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def build_body(path: str, *, field_name: str = FILE_FIELD) -> MultipartBody:
    """Encode the file at `path` as a one-part multipart/form-data body.

    The returned stream is positioned at its start; the caller owns it and must
    close it. The source file is closed before returning, on every path.

    Raises:
      FileOpenError: when `path` cannot be opened for reading.
      LocalIOError: when reading the file or spooling the body fails.
    """

    boundary = "----fileio-" + uuid.uuid4().hex
    filename = os.path.basename(os.fspath(path))

    try:
        src = open(path, "rb")
    except OSError as e:
        raise FileOpenError(f"open {path}: {e.strerror or e}") from e

    body = tempfile.SpooledTemporaryFile(max_size=_SPOOL_MAX_BYTES, mode="w+b")
    try:
        with src:
            body.write(f"--{boundary}".encode("utf-8") + _CRLF)
            body.write(
                f'Content-Disposition: form-data; name="{_quote(field_name)}"; '
                f'filename="{_quote(filename)}"'.encode("utf-8")
                + _CRLF
            )
            body.write(b"Content-Type: application/octet-stream" + _CRLF + _CRLF)
            shutil.copyfileobj(src, body)
            body.write(_CRLF + f"--{boundary}--".encode("utf-8") + _CRLF)
        body.seek(0)
    except OSError as e:
        body.close()
        raise LocalIOError(f"read {path}: {e.strerror or e}") from e
    except BaseException:
        body.close()
        raise

    return MultipartBody(stream=body, content_type=f"multipart/form-data; boundary={boundary}")
