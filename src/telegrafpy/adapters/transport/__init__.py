"""Transport adapters implementing the ByteSink port."""

from telegrafpy.adapters.transport.in_memory import InMemoryConnector
from telegrafpy.adapters.transport.sockets import (
    SocketConnector,
    TcpConnector,
    UdpConnector,
    UnixConnector,
    UnixgramConnector,
)
from telegrafpy.adapters.transport.url import ConnectionURL, connect, parse_url

__all__ = [
    "ConnectionURL",
    "InMemoryConnector",
    "SocketConnector",
    "TcpConnector",
    "UdpConnector",
    "UnixConnector",
    "UnixgramConnector",
    "connect",
    "parse_url",
]
