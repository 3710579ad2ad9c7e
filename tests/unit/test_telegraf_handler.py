"""Unit tests for TelegrafHandler logging adapter."""

import logging
from collections.abc import Iterator

import pytest

from telegrafpy.adapters.client import Client
from telegrafpy.adapters.logging import TelegrafHandler
from telegrafpy.adapters.transport.in_memory import InMemoryConnector
from telegrafpy.core.fields import SignedInteger, Text


def _record(**kwargs: object) -> logging.LogRecord:
    defaults: dict[str, object] = {
        "name": "test",
        "level": logging.INFO,
        "pathname": "",
        "lineno": 0,
        "msg": "test message",
        "args": (),
        "exc_info": None,
    }
    defaults.update(kwargs)
    return logging.LogRecord(**defaults)  # type: ignore[arg-type]


@pytest.fixture
def logger(client: Client) -> Iterator[logging.Logger]:
    """Logger with only a TelegrafHandler attached."""
    log = logging.getLogger("test_telegraf_handler")
    log.handlers.clear()
    log.addHandler(TelegrafHandler(client))
    log.setLevel(logging.DEBUG)
    log.propagate = False
    yield log
    log.handlers.clear()


@pytest.mark.core
class TestTelegrafHandler:
    """Tests for TelegrafHandler adapter."""

    def test_handler_is_logging_handler(self, client: Client) -> None:
        """Handler extends logging.Handler."""
        assert isinstance(TelegrafHandler(client), logging.Handler)

    def test_emit_writes_point(self, client: Client, connector: InMemoryConnector) -> None:
        """Handler.emit() writes one line per record."""
        record = _record()
        record.created = 1.5
        TelegrafHandler(client, include_attrs=[]).emit(record)

        assert connector.writes == [
            b'log,level=INFO,logger=test message="test message" 1500000000\n'
        ]

    def test_timestamp_keeps_microseconds(self, client: Client) -> None:
        """The record time converts to nanoseconds without float rounding noise."""
        record = _record()
        record.created = 1700000000.123456
        p = TelegrafHandler(client).to_point(record)
        assert p.timestamp == 1_700_000_000_123_456_000

    def test_point_tags_and_message(self, client: Client) -> None:
        """Level and logger name are tags, the message is a text field."""
        p = TelegrafHandler(client).to_point(_record(name="myapp.db", level=logging.ERROR))
        assert dict((t.name, t.value) for t in p.tags) == {
            "level": "ERROR",
            "logger": "myapp.db",
        }
        assert p.fields[0].name == "message"
        assert p.fields[0].value == Text("test message")

    def test_message_args_are_formatted(self, client: Client) -> None:
        """The formatted message is written."""
        p = TelegrafHandler(client, include_attrs=[]).to_point(
            _record(msg="user %s logged in", args=("bob",))
        )
        assert p.fields == (p.fields[0],)
        assert p.fields[0].value == Text("user bob logged in")

    def test_extracts_logrecord_attributes(self, client: Client) -> None:
        """Handler extracts module, funcName, lineno from LogRecord."""
        record = _record(pathname="/app/service.py", lineno=42, func="process_request")
        fields = {f.name: f.value for f in TelegrafHandler(client).to_point(record).fields}
        assert fields["module"] == Text("service")
        assert fields["funcName"] == Text("process_request")
        assert fields["lineno"] == SignedInteger(42)

    def test_configurable_attributes(self, client: Client) -> None:
        """Handler allows configuring which LogRecord fields to include."""
        handler = TelegrafHandler(client, include_attrs=["lineno", "pathname"])
        record = _record(pathname="/app/service.py", lineno=42)
        names = [f.name for f in handler.to_point(record).fields]
        assert names == ["message", "lineno", "pathname"]

    def test_custom_measurement(self, client: Client) -> None:
        """The measurement name is configurable."""
        handler = TelegrafHandler(client, measurement="app_log")
        assert handler.to_point(_record()).measurement == "app_log"

    def test_includes_extra_attributes(
        self, logger: logging.Logger, connector: InMemoryConnector
    ) -> None:
        """Handler includes extra dict from logging call."""
        logger.info("request processed", extra={"request_id": "abc123", "user_id": 42})

        line = connector.data.decode()
        assert 'request_id="abc123"' in line
        assert "user_id=42i" in line

    def test_non_scalar_extras_ignored(
        self, logger: logging.Logger, connector: InMemoryConnector
    ) -> None:
        """Extra attributes without a field value variant are skipped."""
        logger.info("x", extra={"payload": {"a": 1}})
        assert "payload" not in connector.data.decode()

    def test_extracts_exception_info(
        self, logger: logging.Logger, connector: InMemoryConnector
    ) -> None:
        """Handler extracts exception info when present."""
        try:
            raise ValueError("test error")
        except ValueError:
            logger.exception("caught error")

        line = connector.data.decode()
        assert 'exc_type="ValueError"' in line
        assert 'exc_message="test error"' in line

    def test_level_filtering(self, client: Client, connector: InMemoryConnector) -> None:
        """Records below the handler level are not written."""
        log = logging.getLogger("test_telegraf_handler_level")
        log.handlers.clear()
        log.propagate = False
        log.setLevel(logging.DEBUG)
        log.addHandler(TelegrafHandler(client, level=logging.WARNING))

        log.info("ignored")
        log.warning("kept")

        assert len(connector.writes) == 1
        assert b'message="kept"' in connector.writes[0]
        log.handlers.clear()

    def test_own_records_not_forwarded(
        self, client: Client, connector: InMemoryConnector
    ) -> None:
        """Records from telegrafpy loggers are dropped to avoid recursion."""
        TelegrafHandler(client).emit(_record(name="telegrafpy.adapters.client"))
        assert connector.writes == []

    def test_transport_errors_go_to_handle_error(
        self, client: Client, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Write failures are reported through Handler.handleError."""
        client.close()
        handler = TelegrafHandler(client)
        handled: list[logging.LogRecord] = []
        monkeypatch.setattr(handler, "handleError", handled.append)

        record = _record()
        handler.emit(record)

        assert handled == [record]
