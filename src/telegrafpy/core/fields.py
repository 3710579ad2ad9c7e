"""Typed field values and their line protocol rendering.

Each variant keeps the numeric intent of a value, since the wire format uses
a different literal suffix for unsigned integers, signed integers and floats.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable

from telegrafpy.core.errors import InvalidFieldValueError, UnsupportedValueTypeError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1


def format_float(value: float) -> str:
    """Render a float as shortest round-trip positional decimal.

    Integral values drop the fractional part (``10.0`` renders as ``10``) and
    exponent notation is expanded (``1e20`` renders as
    ``100000000000000000000``).
    """
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _is_int(value: Any) -> bool:
    # bool is an int subclass but has its own variant
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Boolean:
    """Boolean field value, rendered as a bare ``true``/``false``."""

    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise UnsupportedValueTypeError(self.value, "a boolean field value")

    def render(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class UnsignedInteger:
    """Unsigned 64-bit integer field value, rendered with a ``u`` suffix."""

    value: int

    def __post_init__(self) -> None:
        if not _is_int(self.value):
            raise UnsupportedValueTypeError(self.value, "an unsigned integer field value")
        if not 0 <= self.value <= UINT64_MAX:
            raise InvalidFieldValueError(
                f"unsigned integer out of 64-bit range: {self.value}"
            )

    def render(self) -> str:
        return f"{self.value}u"


@dataclass(frozen=True)
class SignedInteger:
    """Signed 64-bit integer field value, rendered with an ``i`` suffix."""

    value: int

    def __post_init__(self) -> None:
        if not _is_int(self.value):
            raise UnsupportedValueTypeError(self.value, "a signed integer field value")
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise InvalidFieldValueError(
                f"signed integer out of 64-bit range: {self.value}"
            )

    def render(self) -> str:
        return f"{self.value}i"


@dataclass(frozen=True)
class Float:
    """64-bit float field value, rendered without a suffix.

    Integers are accepted and stored as ``float``.
    """

    value: float

    def __post_init__(self) -> None:
        if _is_int(self.value):
            try:
                object.__setattr__(self, "value", float(self.value))
            except OverflowError as e:
                raise InvalidFieldValueError(
                    f"integer too large for a float: {self.value}"
                ) from e
        elif not isinstance(self.value, float):
            raise UnsupportedValueTypeError(self.value, "a float field value")
        if not math.isfinite(self.value):
            raise InvalidFieldValueError(f"float must be finite: {self.value}")

    def render(self) -> str:
        return format_float(self.value)


@dataclass(frozen=True)
class Text:
    """String field value, wrapped in double quotes verbatim."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise UnsupportedValueTypeError(self.value, "a text field value")

    def render(self) -> str:
        # Embedded quotes and backslashes are emitted as-is.
        return f'"{self.value}"'


FieldValue = Boolean | UnsignedInteger | SignedInteger | Float | Text

_VARIANTS = (Boolean, UnsignedInteger, SignedInteger, Float, Text)


@runtime_checkable
class IntoFieldValue(Protocol):
    """Capability for user types that know their own field value."""

    def field_value(self) -> FieldValue:
        """Return the field value representing this object."""
        ...


def into_field_value(value: Any) -> FieldValue:
    """Convert a Python value to exactly one field value variant.

    Args:
        value: A ``bool``, ``int``, ``float``, ``str``, an existing variant,
            or an object implementing ``IntoFieldValue``.

    Returns:
        The matching field value.

    Raises:
        UnsupportedValueTypeError: If no variant exists for the value's type.
        InvalidFieldValueError: If the value is out of range for its variant.
    """
    if isinstance(value, _VARIANTS):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, int):
        return SignedInteger(value)
    if isinstance(value, float):
        return Float(value)
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, IntoFieldValue):
        converted = value.field_value()
        if not isinstance(converted, _VARIANTS):
            raise UnsupportedValueTypeError(converted)
        return converted
    raise UnsupportedValueTypeError(value)
