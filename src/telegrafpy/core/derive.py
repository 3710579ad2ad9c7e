"""Derive the Metric capability from dataclass members.

A mapping table assigns each member a role (tag, field or timestamp) and a
wire name. The ``metric`` decorator builds the table from dataclass field
metadata::

    @metric(measurement="http")
    class Http:
        latency: int = field(unsigned=True)
        method: str = tag()
        status: int = tag(name="http_status")
        ts: int | None = timestamp(default=None)

Unannotated members are fields and the measurement defaults to the class name.
Members holding ``None`` are left out of the point.
"""

import dataclasses
from collections.abc import Callable
from enum import Enum
from typing import Any, TypeVar

from telegrafpy.core.fields import UnsignedInteger, into_field_value
from telegrafpy.core.models import Field, Point, Tag, tag_text

T = TypeVar("T")

_METADATA_KEY = "telegrafpy"


class Role(Enum):
    """Role of a member in the derived point."""

    TAG = "tag"
    FIELD = "field"
    TIMESTAMP = "timestamp"


@dataclasses.dataclass(frozen=True)
class Member:
    """One entry of a mapping table.

    Attributes:
        attr: Attribute name on the mapped object.
        role: Whether the member becomes a tag, a field or the timestamp.
        name: Wire name of the tag or field (defaults to ``attr``).
        unsigned: Render integer field values with the unsigned suffix.
    """

    attr: str
    role: Role = Role.FIELD
    name: str | None = None
    unsigned: bool = False

    @property
    def key(self) -> str:
        return self.name if self.name is not None else self.attr


@dataclasses.dataclass(frozen=True)
class MetricMapping:
    """Mapping table from object attributes to a point.

    Attributes:
        measurement: Measurement name of every derived point.
        members: Members in declaration order.
    """

    measurement: str
    members: tuple[Member, ...]

    def __post_init__(self) -> None:
        timestamps = [m.attr for m in self.members if m.role is Role.TIMESTAMP]
        if len(timestamps) > 1:
            raise TypeError(
                f"{self.measurement}: only one timestamp member allowed, "
                f"got {', '.join(timestamps)}"
            )

    @classmethod
    def from_dataclass(cls, klass: type, measurement: str | None = None) -> "MetricMapping":
        """Build a mapping table from dataclass field metadata.

        Raises:
            TypeError: If ``klass`` is not a dataclass or declares more than
                one timestamp member.
        """
        if not dataclasses.is_dataclass(klass):
            raise TypeError(f"{klass.__name__} is not a dataclass")
        members = []
        for f in dataclasses.fields(klass):
            declared = f.metadata.get(_METADATA_KEY, {})
            members.append(
                Member(
                    attr=f.name,
                    role=declared.get("role", Role.FIELD),
                    name=declared.get("name"),
                    unsigned=declared.get("unsigned", False),
                )
            )
        return cls(measurement=measurement or klass.__name__, members=tuple(members))

    def to_point(self, obj: Any) -> Point:
        """Convert an object to a Point using this table.

        Raises:
            UnsupportedValueTypeError: If a field member holds a value with no
                field value variant.
        """
        tags: list[Tag] = []
        fields: list[Field] = []
        ts = None
        for member in self.members:
            value = getattr(obj, member.attr)
            if value is None:
                continue
            if member.role is Role.TAG:
                tags.append(Tag(member.key, tag_text(value)))
            elif member.role is Role.TIMESTAMP:
                ts = value
            else:
                if member.unsigned and isinstance(value, int) and not isinstance(value, bool):
                    field_value = UnsignedInteger(value)
                else:
                    field_value = into_field_value(value)
                fields.append(Field(member.key, field_value))
        return Point(self.measurement, tuple(tags), tuple(fields), ts)


def _member_field(role: Role, metadata: dict[str, Any], kwargs: dict[str, Any]) -> Any:
    extra = dict(kwargs.pop("metadata", None) or {})
    extra[_METADATA_KEY] = {"role": role, **metadata}
    return dataclasses.field(metadata=extra, **kwargs)


def tag(*, name: str | None = None, **kwargs: Any) -> Any:
    """Declare a dataclass member as a tag.

    Args:
        name: Wire name, defaults to the attribute name.
        **kwargs: Passed through to ``dataclasses.field``.
    """
    return _member_field(Role.TAG, {"name": name}, kwargs)


def field(*, name: str | None = None, unsigned: bool = False, **kwargs: Any) -> Any:
    """Declare a dataclass member as a field.

    Args:
        name: Wire name, defaults to the attribute name.
        unsigned: Encode integer values as unsigned (``u`` suffix).
        **kwargs: Passed through to ``dataclasses.field``.
    """
    return _member_field(Role.FIELD, {"name": name, "unsigned": unsigned}, kwargs)


def timestamp(**kwargs: Any) -> Any:
    """Declare a dataclass member as the point timestamp."""
    return _member_field(Role.TIMESTAMP, {}, kwargs)


def metric(
    cls: type[T] | None = None, *, measurement: str | None = None
) -> type[T] | Callable[[type[T]], type[T]]:
    """Class decorator implementing ``to_point`` from member declarations.

    Classes that are not dataclasses yet are turned into one first.

    Args:
        cls: The class to decorate (when used without arguments).
        measurement: Measurement name override (default: class name).
    """

    def wrap(klass: type[T]) -> type[T]:
        if not dataclasses.is_dataclass(klass):
            klass = dataclasses.dataclass(klass)
        mapping = MetricMapping.from_dataclass(klass, measurement)

        def to_point(self: Any) -> Point:
            return mapping.to_point(self)

        klass.__telegraf_mapping__ = mapping  # type: ignore[attr-defined]
        klass.to_point = to_point  # type: ignore[attr-defined]
        return klass

    if cls is None:
        return wrap
    return wrap(cls)
