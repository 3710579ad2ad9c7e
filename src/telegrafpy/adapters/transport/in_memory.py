"""In-memory connector."""


class InMemoryConnector:
    """In-memory implementation of the ByteSink port.

    Stores every written buffer in a list. Suitable for testing and for
    inspecting the exact bytes a client would send.
    """

    def __init__(self) -> None:
        self.writes: list[bytes] = []
        self.closed = False

    def write(self, data: bytes) -> None:
        """Record a written buffer."""
        if self.closed:
            raise OSError("write to closed connector")
        self.writes.append(data)

    def close(self) -> None:
        """Mark the connector closed."""
        self.closed = True

    @property
    def data(self) -> bytes:
        """All written bytes, concatenated."""
        return b"".join(self.writes)
