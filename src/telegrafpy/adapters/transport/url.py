"""Connection string parsing and connector dispatch.

Supported schemes:

- ``tcp://host:port``
- ``udp://host:port``
- ``unix:///path/to/socket``
- ``unixgram:///path/to/socket``
"""

from dataclasses import dataclass
from urllib.parse import urlsplit

from telegrafpy.adapters.transport.sockets import (
    SocketConnector,
    TcpConnector,
    UdpConnector,
    UnixConnector,
    UnixgramConnector,
)
from telegrafpy.core.errors import BadProtocolError

NETWORK_SCHEMES = frozenset({"tcp", "udp"})
UNIX_SCHEMES = frozenset({"unix", "unixgram"})


@dataclass(frozen=True)
class ConnectionURL:
    """A parsed connection string.

    Attributes:
        scheme: One of ``tcp``, ``udp``, ``unix``, ``unixgram``.
        host: Host name for network schemes.
        port: Port for network schemes.
        path: Socket path for unix schemes.
    """

    scheme: str
    host: str | None = None
    port: int | None = None
    path: str | None = None


def parse_url(url: str) -> ConnectionURL:
    """Parse a connection string.

    Raises:
        BadProtocolError: If the scheme is unsupported or the host, port or
            socket path is missing.
    """
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    if scheme in NETWORK_SCHEMES:
        try:
            port = parts.port
        except ValueError as e:
            raise BadProtocolError(f"invalid port in {url!r}") from e
        if not parts.hostname or port is None:
            raise BadProtocolError(f"expected {scheme}://host:port, got {url!r}")
        return ConnectionURL(scheme=scheme, host=parts.hostname, port=port)
    if scheme in UNIX_SCHEMES:
        path = parts.netloc + parts.path
        if not path:
            raise BadProtocolError(f"expected {scheme}:///path, got {url!r}")
        return ConnectionURL(scheme=scheme, path=path)
    raise BadProtocolError(f"unknown connection protocol {parts.scheme!r} in {url!r}")


def connect(url: str, timeout: float | None = None) -> SocketConnector:
    """Open the connector matching a connection string's scheme.

    Args:
        url: Connection string (e.g., "tcp://localhost:8094").
        timeout: Optional socket timeout in seconds.

    Raises:
        BadProtocolError: If the connection string is invalid.
        OSError: If the socket cannot be connected.
    """
    parsed = parse_url(url)
    if parsed.scheme == "tcp":
        return TcpConnector(parsed.host, parsed.port, timeout)  # type: ignore[arg-type]
    if parsed.scheme == "udp":
        return UdpConnector(parsed.host, parsed.port, timeout)  # type: ignore[arg-type]
    if parsed.scheme == "unix":
        return UnixConnector(parsed.path, timeout)  # type: ignore[arg-type]
    return UnixgramConnector(parsed.path, timeout)  # type: ignore[arg-type]
