"""Socket connectors for the Telegraf socket_listener input.

Each connector wraps one socket and exposes the ByteSink port. Socket errors
propagate unchanged as ``OSError``.
"""

import logging
import socket

logger = logging.getLogger(__name__)


class SocketConnector:
    """Base class for connectors wrapping a single connected socket."""

    def __init__(self, sock: socket.socket) -> None:
        self._socket = sock

    @property
    def socket(self) -> socket.socket:
        """The underlying socket."""
        return self._socket

    def write(self, data: bytes) -> None:
        """Send one buffer over the socket."""
        self._socket.sendall(data)

    def close(self) -> None:
        """Close the socket."""
        self._socket.close()


class TcpConnector(SocketConnector):
    """Stream connector for ``tcp://host:port``."""

    def __init__(self, host: str, port: int, timeout: float | None = None) -> None:
        logger.debug("Connecting to tcp://%s:%d", host, port)
        super().__init__(socket.create_connection((host, port), timeout=timeout))


class UdpConnector(SocketConnector):
    """Datagram connector for ``udp://host:port``.

    Every write is sent as one datagram.
    """

    def __init__(self, host: str, port: int, timeout: float | None = None) -> None:
        family, _, proto, _, address = socket.getaddrinfo(
            host, port, type=socket.SOCK_DGRAM
        )[0]
        sock = socket.socket(family, socket.SOCK_DGRAM, proto)
        try:
            sock.settimeout(timeout)
            sock.connect(address)
        except OSError:
            sock.close()
            raise
        logger.debug("Connected to udp://%s:%d", host, port)
        super().__init__(sock)

    def write(self, data: bytes) -> None:
        """Send one buffer as a single datagram."""
        self._socket.send(data)


class UnixConnector(SocketConnector):
    """Stream connector for ``unix:///path/to/socket``."""

    def __init__(self, path: str, timeout: float | None = None) -> None:
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        try:
            sock.settimeout(timeout)
            sock.connect(path)
        except OSError:
            sock.close()
            raise
        logger.debug("Connected to unix://%s", path)
        super().__init__(sock)


class UnixgramConnector(SocketConnector):
    """Datagram connector for ``unixgram:///path/to/socket``."""

    def __init__(self, path: str, timeout: float | None = None) -> None:
        sock = socket.socket(socket.AF_UNIX, socket.SOCK_DGRAM)
        try:
            sock.settimeout(timeout)
            sock.connect(path)
        except OSError:
            sock.close()
            raise
        logger.debug("Connected to unixgram://%s", path)
        super().__init__(sock)

    def write(self, data: bytes) -> None:
        """Send one buffer as a single datagram."""
        self._socket.send(data)
