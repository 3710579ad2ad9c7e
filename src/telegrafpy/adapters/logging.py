"""Python logging handler adapter for telegrafpy.

This adapter bridges Python's standard library logging module to a Client,
turning every log record into a point.
"""

import logging

from telegrafpy.adapters.client import Client
from telegrafpy.core.models import Point

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


# Default record attributes written as fields
_DEFAULT_INCLUDE_ATTRS = ["module", "funcName", "lineno"]


def _created_ns(created: float) -> int:
    """Convert ``LogRecord.created`` to nanoseconds at microsecond precision.

    A float holding epoch seconds cannot resolve single nanoseconds, so the
    value is rounded to whole microseconds before scaling.
    """
    return round(created * 1_000_000) * 1000


class TelegrafHandler(logging.Handler):
    """Logging handler that writes log records as points.

    Each record becomes one point tagged with ``level`` and ``logger`` and
    carrying the formatted message in the ``message`` field.

    Example:
        ```python
        from telegrafpy import Client, TelegrafHandler

        client = Client("udp://localhost:8094")
        logging.getLogger().addHandler(TelegrafHandler(client))
        ```
    """

    def __init__(
        self,
        client: Client,
        measurement: str = "log",
        include_attrs: list[str] | None = None,
        level: int = logging.NOTSET,
    ) -> None:
        """Initialize the handler with a client.

        Args:
            client: Client the points are written to.
            measurement: Measurement name of the emitted points.
            include_attrs: LogRecord attributes to include as fields. Defaults
                to ["module", "funcName", "lineno"].
            level: Minimum level handled.
        """
        super().__init__(level)
        self._client = client
        self._measurement = measurement
        self._include_attrs = (
            _DEFAULT_INCLUDE_ATTRS if include_attrs is None else include_attrs
        )

    def to_point(self, record: logging.LogRecord) -> Point:
        """Convert a log record to a point.

        Args:
            record: The log record to convert.
        """
        attr_mapping: dict[str, str | int | float | bool] = {
            "module": record.module,
            "funcName": record.funcName or "",
            "lineno": record.lineno,
            "pathname": record.pathname,
            "process": record.process or 0,
            "thread": record.thread or 0,
        }

        fields: dict[str, str | int | float | bool] = {"message": record.getMessage()}
        for key in self._include_attrs:
            if key in attr_mapping:
                fields[key] = attr_mapping[key]

        # Add any extra attributes passed via logging call
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS and isinstance(
                value, (str, int, float, bool)
            ):
                fields[key] = value

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            if exc_type is not None:
                fields["exc_type"] = exc_type.__name__
            if exc_value is not None:
                fields["exc_message"] = str(exc_value)

        return Point(
            measurement=self._measurement,
            tags=(("level", record.levelname), ("logger", record.name)),
            fields=tuple(fields.items()),
            timestamp=_created_ns(record.created),
        )

    def emit(self, record: logging.LogRecord) -> None:
        """Write a log record to the client.

        Args:
            record: The log record to emit.
        """
        # The client logs its own writes; forwarding those would recurse.
        if record.name == "telegrafpy" or record.name.startswith("telegrafpy."):
            return
        try:
            self._client.write_point(self.to_point(record))
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)
