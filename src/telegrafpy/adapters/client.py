"""Client writing points to a Telegraf socket listener."""

import logging
import threading
from collections.abc import Iterable
from types import TracebackType

from telegrafpy.adapters.transport.url import connect
from telegrafpy.config import ClientConfig
from telegrafpy.core.encoding.line_protocol import encode_points
from telegrafpy.core.errors import EmptyFieldSetError
from telegrafpy.core.models import Point, validate_points
from telegrafpy.core.ports import ByteSink, Metric

logger = logging.getLogger(__name__)


class Client:
    """Write-only client for a Telegraf ``socket_listener`` input.

    Every write validates its points, encodes them fully in memory and hands
    the result to the transport in a single call. Writes on one client are
    serialized.

    Example:
        ```python
        from telegrafpy import Client, point

        with Client("tcp://localhost:8094") as client:
            client.write_point(point("cpu", {"usage": 0.5}, tags={"host": "web1"}))
        ```
    """

    def __init__(self, target: str | ByteSink, timeout: float | None = None) -> None:
        """Initialize the client with a connection string or a transport.

        Args:
            target: Connection string (``tcp``, ``udp``, ``unix``, ``unixgram``)
                or an object implementing the ByteSink port.
            timeout: Socket timeout in seconds when connecting by URL.

        Raises:
            BadProtocolError: If the connection string is invalid.
            OSError: If the connection cannot be established.
        """
        if isinstance(target, str):
            self._sink: ByteSink = connect(target, timeout)
            self.url: str | None = target
        else:
            self._sink = target
            self.url = None
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: ClientConfig) -> "Client":
        """Create a client from a ClientConfig."""
        return cls(config.url, timeout=config.timeout)

    @classmethod
    def from_env(cls) -> "Client":
        """Create a client configured by ``TELEGRAF_URL``/``TELEGRAF_TIMEOUT``."""
        return cls.from_config(ClientConfig.from_env())

    @property
    def sink(self) -> ByteSink:
        """The transport this client writes to."""
        return self._sink

    def write(self, metric: Metric) -> None:
        """Write any object implementing the Metric port."""
        self.write_point(metric.to_point())

    def write_point(self, point: Point) -> None:
        """Write a single point.

        Raises:
            EmptyFieldSetError: If the point has no fields.
            OSError: On transport failure.
        """
        self.write_points([point])

    def write_points(self, points: Iterable[Point]) -> None:
        """Write a batch of points with one transport call.

        Every point is validated before anything is sent.

        Raises:
            EmptyFieldSetError: If any point has no fields.
            OSError: On transport failure.
        """
        try:
            batch = validate_points(points)
        except EmptyFieldSetError as e:
            logger.warning("Rejected point without fields: %s", e.point.measurement)
            raise
        if not batch:
            return
        data = encode_points(batch).encode("utf-8")
        with self._lock:
            self._sink.write(data)
        logger.debug("Wrote %d point(s), %d bytes", len(batch), len(data))

    def close(self) -> None:
        """Close the underlying transport."""
        with self._lock:
            self._sink.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
