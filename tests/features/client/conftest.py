"""BDD step definitions for client write features."""

from dataclasses import dataclass, field
from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when

from telegrafpy.adapters.client import Client
from telegrafpy.adapters.transport.in_memory import InMemoryConnector
from telegrafpy.core.errors import EmptyFieldSetError
from telegrafpy.core.fields import UnsignedInteger
from telegrafpy.core.models import Point


@dataclass
class PointDraft:
    """Mutable point under construction in a scenario."""

    measurement: str
    tags: list[tuple[str, str]] = field(default_factory=list)
    fields: list[tuple[str, Any]] = field(default_factory=list)
    timestamp: int | None = None

    def build(self) -> Point:
        return Point(self.measurement, self.tags, self.fields, self.timestamp)


@dataclass
class ClientScenarioContext:
    """Shared state between steps in a client scenario."""

    connector: InMemoryConnector = field(default_factory=InMemoryConnector)
    client: Client | None = None
    drafts: list[PointDraft] = field(default_factory=list)
    error: Exception | None = None


def _field_value(kind: str, raw: str) -> Any:
    if kind == "signed":
        return int(raw)
    if kind == "unsigned":
        return UnsignedInteger(int(raw))
    if kind == "float":
        return float(raw)
    if kind == "boolean":
        return raw == "true"
    if kind == "text":
        return raw.strip('"')
    raise ValueError(f"unknown field kind {kind!r}")


@pytest.fixture
def ctx() -> ClientScenarioContext:
    """Fresh scenario context for each test."""
    return ClientScenarioContext()


# === Given ===


@given("a client writing to an in-memory connector")
def given_client(ctx: ClientScenarioContext) -> None:
    ctx.client = Client(ctx.connector)


@given(parsers.parse('a point "{measurement}" with {kind} field "{name}" = {value}'))
@given(parsers.parse('another point "{measurement}" with {kind} field "{name}" = {value}'))
def given_point(
    ctx: ClientScenarioContext, measurement: str, kind: str, name: str, value: str
) -> None:
    ctx.drafts.append(
        PointDraft(measurement, fields=[(name, _field_value(kind, value))])
    )


@given(parsers.parse('a point "{measurement}" without fields'))
def given_empty_point(ctx: ClientScenarioContext, measurement: str) -> None:
    ctx.drafts.append(PointDraft(measurement))


@given(parsers.parse('the point has {kind} field "{name}" = {value}'))
def given_extra_field(ctx: ClientScenarioContext, kind: str, name: str, value: str) -> None:
    ctx.drafts[-1].fields.append((name, _field_value(kind, value)))


@given(parsers.parse('the point has tag "{name}" = "{value}"'))
def given_tag(ctx: ClientScenarioContext, name: str, value: str) -> None:
    ctx.drafts[-1].tags.append((name, value))


@given(parsers.parse("the point has timestamp {ts:d}"))
def given_timestamp(ctx: ClientScenarioContext, ts: int) -> None:
    ctx.drafts[-1].timestamp = ts


# === When ===


@when("the point is written")
def when_point_written(ctx: ClientScenarioContext) -> None:
    assert ctx.client is not None
    try:
        ctx.client.write_point(ctx.drafts[-1].build())
    except EmptyFieldSetError as e:
        ctx.error = e


@when("the points are written as a batch")
def when_batch_written(ctx: ClientScenarioContext) -> None:
    assert ctx.client is not None
    ctx.client.write_points(draft.build() for draft in ctx.drafts)


# === Then ===


@then(parsers.parse('the connector received "{line}"'))
def then_received_line(ctx: ClientScenarioContext, line: str) -> None:
    assert ctx.connector.data == f"{line}\n".encode()


@then(parsers.parse('the connector received lines "{first}" and "{second}"'))
def then_received_lines(ctx: ClientScenarioContext, first: str, second: str) -> None:
    assert ctx.connector.data == f"{first}\n{second}\n".encode()


@then(parsers.re(r"the connector received (?P<count>\d+) writes?"))
def then_write_count(ctx: ClientScenarioContext, count: str) -> None:
    assert len(ctx.connector.writes) == int(count)


@then("the write fails with an empty field set error")
def then_empty_field_set(ctx: ClientScenarioContext) -> None:
    assert isinstance(ctx.error, EmptyFieldSetError)
