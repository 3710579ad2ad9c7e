"""Shared test fixtures for all test modules."""

import socket
import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest

from telegrafpy.adapters.client import Client
from telegrafpy.adapters.transport.in_memory import InMemoryConnector


@pytest.fixture
def connector() -> InMemoryConnector:
    """Provide an empty in-memory connector."""
    return InMemoryConnector()


@pytest.fixture
def client(connector: InMemoryConnector) -> Client:
    """Provide a client writing to the in-memory connector."""
    return Client(connector)


@pytest.fixture
def socket_dir() -> Iterator[Path]:
    """Provide a short temporary directory for unix socket files.

    pytest's tmp_path can exceed the unix socket path length limit.
    """
    with tempfile.TemporaryDirectory(prefix="tgf") as d:
        yield Path(d)


# === Socket Listener Fixtures ===


@pytest.fixture
def tcp_listener() -> Iterator[socket.socket]:
    """Listening TCP socket on an ephemeral localhost port."""
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    server.settimeout(5)
    yield server
    server.close()


@pytest.fixture
def udp_listener() -> Iterator[socket.socket]:
    """Bound UDP socket on an ephemeral localhost port."""
    server = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    server.bind(("127.0.0.1", 0))
    server.settimeout(5)
    yield server
    server.close()


@pytest.fixture
def unix_listener(socket_dir: Path) -> Iterator[tuple[socket.socket, str]]:
    """Listening unix stream socket and its path."""
    path = str(socket_dir / "stream.sock")
    server = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    server.bind(path)
    server.listen(1)
    server.settimeout(5)
    yield server, path
    server.close()


@pytest.fixture
def unixgram_listener(socket_dir: Path) -> Iterator[tuple[socket.socket, str]]:
    """Bound unix datagram socket and its path."""
    path = str(socket_dir / "dgram.sock")
    server = socket.socket(socket.AF_UNIX, socket.SOCK_DGRAM)
    server.bind(path)
    server.settimeout(5)
    yield server, path
    server.close()

