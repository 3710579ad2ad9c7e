"""Client configuration."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_URL = "tcp://localhost:8094"

URL_ENV = "TELEGRAF_URL"
TIMEOUT_ENV = "TELEGRAF_TIMEOUT"


@dataclass(frozen=True)
class ClientConfig:
    """Configuration options for a Client.

    Attributes:
        url: Connection string of the Telegraf socket listener.
        timeout: Socket timeout in seconds, or None to block.
    """

    url: str = DEFAULT_URL
    timeout: float | None = None

    def __post_init__(self) -> None:
        if self.timeout is not None and not self.timeout > 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ClientConfig":
        """Read configuration from environment variables.

        Args:
            environ: Mapping to read from (default: ``os.environ``).
                ``TELEGRAF_URL`` sets the connection string and
                ``TELEGRAF_TIMEOUT`` the timeout in seconds.

        Raises:
            ValueError: If ``TELEGRAF_TIMEOUT`` is not a positive number.
        """
        env = os.environ if environ is None else environ
        raw_timeout = env.get(TIMEOUT_ENV, "").strip()
        try:
            timeout = float(raw_timeout) if raw_timeout else None
        except ValueError as e:
            raise ValueError(f"{TIMEOUT_ENV} must be a number, got {raw_timeout!r}") from e
        return cls(url=env.get(URL_ENV) or DEFAULT_URL, timeout=timeout)
