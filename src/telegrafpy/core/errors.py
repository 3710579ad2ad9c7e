"""Exceptions raised by telegrafpy.

Transport failures are not wrapped: socket errors surface as the ``OSError``
raised by the underlying connector.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from telegrafpy.core.models import Point


class TelegrafError(Exception):
    """Base class for all telegrafpy errors."""


class EmptyFieldSetError(TelegrafError):
    """A point without fields was handed to the write boundary.

    Attributes:
        point: The offending point.
    """

    def __init__(self, point: "Point") -> None:
        super().__init__(
            f"point for measurement {point.measurement!r} has no fields; "
            "at least one field is required"
        )
        self.point = point


class UnsupportedValueTypeError(TelegrafError, TypeError):
    """A value has no corresponding field value variant."""

    def __init__(self, value: Any, target: str = "a field value") -> None:
        super().__init__(
            f"cannot convert value of type {type(value).__name__} to {target}"
        )
        self.value = value


class InvalidFieldValueError(TelegrafError, ValueError):
    """A value is of a supported type but cannot be represented on the wire."""


class BadProtocolError(TelegrafError, ValueError):
    """A connection string could not be interpreted."""
