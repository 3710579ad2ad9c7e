"""Line protocol encoder for points.

Wire format::

    <measurement>[,<tag>=<value>,...] <field>=<value>,... [<timestamp>]\\n

Tag and field pairs are sorted as whole ``name=value`` strings, not by key.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from telegrafpy.core.models import Field, Point, Tag


def escape_tag(text: str) -> str:
    """Escape literal spaces in a tag name or value as ``\\ ``."""
    return text.replace(" ", "\\ ")


def render_attr(attr: Tag | Field) -> str:
    """Render a tag or field as a ``name=value`` pair."""
    if isinstance(attr, Tag):
        return f"{escape_tag(attr.name)}={escape_tag(attr.value)}"
    return f"{attr.name}={attr.value.render()}"


def format_attrs(attrs: Iterable[Tag | Field]) -> str:
    """Format a tag or field set as a comma-joined string.

    Args:
        attrs: Tags or fields in insertion order.

    Returns:
        Rendered pairs sorted lexicographically and joined by ``,``.
        Empty string if there are no attributes.
    """
    return ",".join(sorted(render_attr(attr) for attr in attrs))


@dataclass(frozen=True)
class LineProtocol:
    """A fully rendered, newline-terminated line protocol line."""

    text: str

    @classmethod
    def assemble(
        cls,
        measurement: str,
        tags: str | None,
        fields: str,
        timestamp: int | None = None,
    ) -> "LineProtocol":
        """Assemble the segments of a point into one line.

        Args:
            measurement: Measurement name.
            tags: Rendered tag set, or None (or empty) for no tags.
            fields: Rendered field set.
            timestamp: Optional timestamp appended as the last token.

        Returns:
            LineProtocol ending in exactly one newline.
        """
        head = f"{measurement},{tags}" if tags else measurement
        line = f"{head} {fields}"
        if timestamp is not None:
            line = f"{line} {timestamp}"
        return cls(line + "\n")

    def to_bytes(self) -> bytes:
        """Return the line as UTF-8 bytes."""
        return self.text.encode("utf-8")

    def __str__(self) -> str:
        return self.text


def encode_point(point: Point) -> LineProtocol:
    """Encode a point as a line protocol line.

    The point is not validated; callers writing to a transport validate first.
    """
    tags = format_attrs(point.tags) if point.tags else None
    return LineProtocol.assemble(
        point.measurement,
        tags,
        format_attrs(point.fields),
        point.timestamp,
    )


def encode_points(points: Iterable[Point]) -> str:
    """Encode points as a batch of concatenated lines.

    Args:
        points: An iterable of Point objects.

    Returns:
        One self-terminated line per point, with no extra separator.
        Empty string if no points.
    """
    return "".join(encode_point(point).text for point in points)
