"""Core domain models for line protocol points."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any

from telegrafpy.core.errors import (
    EmptyFieldSetError,
    InvalidFieldValueError,
    UnsupportedValueTypeError,
)
from telegrafpy.core.fields import UINT64_MAX, FieldValue, format_float, into_field_value

if TYPE_CHECKING:
    from telegrafpy.core.encoding.line_protocol import LineProtocol

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def tag_text(value: Any) -> str:
    """Render a tag value as text.

    Strings pass through, booleans render as ``true``/``false`` and floats
    follow the float field rendering rule. Anything else uses ``str()``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_float(value)
    return str(value)


def coerce_timestamp(value: int | datetime | None) -> int | None:
    """Convert a timestamp to integer nanoseconds since the Unix epoch.

    Naive datetimes are treated as UTC.

    Raises:
        UnsupportedValueTypeError: If the value is neither int nor datetime.
        InvalidFieldValueError: If the value is outside the unsigned 64-bit range.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        nanos = (value - _EPOCH) // timedelta(microseconds=1) * 1000
    elif isinstance(value, int) and not isinstance(value, bool):
        nanos = value
    else:
        raise UnsupportedValueTypeError(value, "a timestamp")
    if not 0 <= nanos <= UINT64_MAX:
        raise InvalidFieldValueError(f"timestamp out of unsigned 64-bit range: {nanos}")
    return nanos


@dataclass(frozen=True)
class Tag:
    """An indexed text label attached to a point.

    Non-string values are rendered to text with ``tag_text``.

    Attributes:
        name: Tag key.
        value: Tag value.
    """

    name: str
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise UnsupportedValueTypeError(self.name, "a tag name")
        object.__setattr__(self, "value", tag_text(self.value))


@dataclass(frozen=True)
class Field:
    """A typed datum attached to a point.

    Attributes:
        name: Field key.
        value: Typed field value.
    """

    name: str
    value: FieldValue

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise UnsupportedValueTypeError(self.name, "a field name")
        object.__setattr__(self, "value", into_field_value(self.value))


def _pairs(items: Any, kind: type) -> list[Any]:
    """Normalise a tag or field set to ``kind`` objects and ``(name, value)`` pairs.

    Raises:
        TypeError: If an item is neither a ``kind`` nor a 2-item tuple or list.
    """
    if isinstance(items, Mapping):
        return list(items.items())
    pairs = []
    for item in items:
        if not isinstance(item, kind) and not (
            isinstance(item, (tuple, list)) and len(item) == 2
        ):
            raise TypeError(
                f"expected {kind.__name__} or a (name, value) pair, got {item!r}"
            )
        pairs.append(item)
    return pairs


def _to_tag(item: Tag | tuple[str, Any]) -> Tag:
    if isinstance(item, Tag):
        return item
    name, value = item
    return Tag(name=name, value=value)


def _to_field(item: Field | tuple[str, Any]) -> Field:
    if isinstance(item, Field):
        return item
    name, value = item
    return Field(name=name, value=value)


@dataclass(frozen=True)
class Point:
    """A single metric observation.

    Tags and fields keep their insertion order and duplicates pass through.
    A point without fields can be built freely but is rejected by
    ``validate()`` when handed to a client.

    Attributes:
        measurement: Name of the series the point belongs to.
        tags: Tag set, given as a mapping or as ``Tag`` objects and
            ``(name, value)`` pairs.
        fields: Field set, given like ``tags``, with values converted by
            ``into_field_value``.
        timestamp: Optional nanoseconds since the epoch, as ``int`` or
            ``datetime``.
    """

    measurement: str
    tags: tuple[Tag, ...] = field(default_factory=tuple)
    fields: tuple[Field, ...] = field(default_factory=tuple)
    timestamp: int | datetime | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "tags", tuple(_to_tag(t) for t in _pairs(self.tags, Tag))
        )
        object.__setattr__(
            self, "fields", tuple(_to_field(f) for f in _pairs(self.fields, Field))
        )
        object.__setattr__(self, "timestamp", coerce_timestamp(self.timestamp))

    def validate(self) -> None:
        """Check the point can be written.

        Raises:
            EmptyFieldSetError: If the point has no fields.
        """
        if not self.fields:
            raise EmptyFieldSetError(self)

    def to_line_protocol(self) -> "LineProtocol":
        """Render the point as a single line protocol line."""
        from telegrafpy.core.encoding.line_protocol import encode_point

        return encode_point(self)

    def __str__(self) -> str:
        return str(self.to_line_protocol())


def validate_points(points: Iterable[Point]) -> list[Point]:
    """Validate every point before any of them is written.

    Returns:
        The points as a list, in the given order.

    Raises:
        EmptyFieldSetError: For the first point without fields.
    """
    batch = list(points)
    for point in batch:
        point.validate()
    return batch
