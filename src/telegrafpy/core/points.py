"""Helper functions for creating Point objects."""

import time
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from telegrafpy.core.models import Point

Pairs = Mapping[str, Any] | Iterable[tuple[str, Any]]


def _pairs(items: Pairs | None) -> list[tuple[str, Any]]:
    if items is None:
        return []
    if isinstance(items, Mapping):
        return list(items.items())
    return list(items)


def now_ns() -> int:
    """Return the current time in nanoseconds since the epoch."""
    return time.time_ns()


def point(
    measurement: str,
    fields: Pairs,
    tags: Pairs | None = None,
    timestamp: int | datetime | None = None,
) -> Point:
    """Create a point from plain Python values.

    Args:
        measurement: Measurement name (e.g., "cpu")
        fields: Field names and values, as a mapping or ``(name, value)`` pairs
        tags: Optional tag names and values
        timestamp: Optional nanoseconds since the epoch, or a datetime

    Returns:
        Point with tags and fields in the given order

    Example:
        ```python
        p = point("cpu", {"usage": 0.5}, tags={"host": "web1"})
        ```
    """
    return Point(
        measurement=measurement,
        tags=tuple(_pairs(tags)),
        fields=tuple(_pairs(fields)),
        timestamp=timestamp,
    )
