from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from fileio.core.exceptions import MalformedResponseError, ServiceError


class UploadResponse(BaseModel):
    """Wire shape of an upload answer.

    {"success":true,"key":"2ojE41"}
    {"success":true,"key":"aQbnDJ","expiry":"7 days"}
    {"success":false,"error":404,"message":"Not Found"}
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    success: bool = False
    error: Optional[int] = None
    message: Optional[str] = None
    expiry: Optional[str] = None
    key: Optional[str] = None


@dataclass(frozen=True, slots=True)
class UploadResult:
    """Decoded outcome of one upload call."""

    success: bool
    error_code: Optional[int] = None
    error_message: Optional[str] = None
    expiry: Optional[str] = None
    key: Optional[str] = None

    def raise_for_service_error(self) -> None:
        """Raise ServiceError unless the service reported success."""

        if not self.success:
            raise ServiceError(self.error_code, self.error_message)


def parse_response(data: bytes) -> UploadResult:
    """Decode a JSON upload answer without interpreting `success`.

    Unknown fields are ignored and missing ones default to None.

    Raises:
      MalformedResponseError: empty body, invalid JSON, or wrongly typed fields.
    """

    if not data:
        raise MalformedResponseError("unexpected end of JSON input")
    try:
        wire = UploadResponse.model_validate_json(data)
    except ValidationError as e:
        first = e.errors()[0] if e.errors() else {}
        raise MalformedResponseError(f"invalid upload response: {first.get('msg', e)}") from e

    return UploadResult(
        success=wire.success,
        error_code=wire.error,
        error_message=wire.message,
        expiry=wire.expiry,
        key=wire.key,
    )


def decode_response(data: bytes) -> UploadResult:
    """Decode a JSON upload answer and map `success: false` to ServiceError.

    Raises:
      MalformedResponseError: see `parse_response`, or a success without a key.
      ServiceError: the service reported a failure; carries its code and message.
    """

    result = parse_response(data)
    result.raise_for_service_error()
    if not result.key:
        raise MalformedResponseError("upload response reports success without a key")
    return result
