"""Port interfaces for metrics and transports.

These protocols define the contracts that user types and transport adapters
must implement. The core depends only on these interfaces, not on concrete
connectors.
"""

from typing import Protocol, runtime_checkable

from telegrafpy.core.models import Point


@runtime_checkable
class Metric(Protocol):
    """Port for any type that can be written as a point.

    Implement ``to_point`` by hand, or derive it with
    ``telegrafpy.core.derive.metric``.
    """

    def to_point(self) -> Point:
        """Convert this object to a Point."""
        ...


@runtime_checkable
class ByteSink(Protocol):
    """Port for transports that accept finished line protocol buffers.

    Examples: TcpConnector, UdpConnector, UnixConnector, UnixgramConnector,
    InMemoryConnector.
    """

    def write(self, data: bytes) -> None:
        """Send one buffer of encoded lines.

        Raises:
            OSError: On transport failure.
        """
        ...

    def close(self) -> None:
        """Release the underlying connection."""
        ...
