"""telegrafpy: a lightweight client for writing metrics to Telegraf.

Points are encoded in the InfluxDB line protocol and sent over a socket to a
Telegraf ``socket_listener`` input. No querying is supported.
"""

from telegrafpy.adapters.client import Client
from telegrafpy.adapters.logging import TelegrafHandler
from telegrafpy.adapters.transport import InMemoryConnector, connect, parse_url
from telegrafpy.config import ClientConfig
from telegrafpy.core.derive import MetricMapping, Member, Role, field, metric, tag, timestamp
from telegrafpy.core.encoding.line_protocol import (
    LineProtocol,
    encode_point,
    encode_points,
    format_attrs,
)
from telegrafpy.core.errors import (
    BadProtocolError,
    EmptyFieldSetError,
    InvalidFieldValueError,
    TelegrafError,
    UnsupportedValueTypeError,
)
from telegrafpy.core.fields import (
    Boolean,
    FieldValue,
    Float,
    IntoFieldValue,
    SignedInteger,
    Text,
    UnsignedInteger,
    into_field_value,
)
from telegrafpy.core.models import Field, Point, Tag
from telegrafpy.core.points import now_ns, point
from telegrafpy.core.ports import ByteSink, Metric

__all__ = [
    # Client
    "Client",
    "ClientConfig",
    "TelegrafHandler",
    # Transports
    "ByteSink",
    "InMemoryConnector",
    "connect",
    "parse_url",
    # Models
    "Field",
    "Point",
    "Tag",
    "Metric",
    # Field values
    "Boolean",
    "FieldValue",
    "Float",
    "IntoFieldValue",
    "SignedInteger",
    "Text",
    "UnsignedInteger",
    "into_field_value",
    # Encoding
    "LineProtocol",
    "encode_point",
    "encode_points",
    "format_attrs",
    # Derivation
    "Member",
    "MetricMapping",
    "Role",
    "field",
    "metric",
    "tag",
    "timestamp",
    # Helpers
    "now_ns",
    "point",
    # Errors
    "BadProtocolError",
    "EmptyFieldSetError",
    "InvalidFieldValueError",
    "TelegrafError",
    "UnsupportedValueTypeError",
]
