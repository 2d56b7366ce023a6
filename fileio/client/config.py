from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from fileio.client.transport import DEFAULT_TIMEOUT, Transport, UrllibTransport

DEFAULT_URL = "https://file.io"

ENV_URL = "FILEIO_URL"
ENV_TIMEOUT = "FILEIO_TIMEOUT"


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Process-wide client settings, built once and shared read-only.

    - base_url: prefix of every request, without trailing slash
    - transport: anything implementing `Transport` (GET and POST)
    """

    base_url: str = DEFAULT_URL
    transport: Transport = field(default_factory=UrllibTransport)

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", str(self.base_url).rstrip("/"))

    @classmethod
    def from_env(
        cls, env: Optional[Mapping[str, str]] = None, *, transport: Optional[Transport] = None
    ) -> "ClientConfig":
        """Build a config from FILEIO_URL / FILEIO_TIMEOUT, falling back to defaults."""

        env = os.environ if env is None else env
        base_url = (env.get(ENV_URL) or "").strip() or DEFAULT_URL
        if transport is None:
            transport = UrllibTransport(timeout=_parse_timeout(env.get(ENV_TIMEOUT)))
        return cls(base_url=base_url, transport=transport)


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"{ENV_TIMEOUT} must be a number of seconds, got {raw!r}") from e
    # 0 or negative disables the timeout
    return value if value > 0 else None
