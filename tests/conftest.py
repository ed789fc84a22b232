"""Shared pytest fixtures for rest-dispatch tests."""

from __future__ import annotations

from collections import deque
from typing import Any

import pytest

from rest_dispatch.context import RequestContext
from rest_dispatch.headers import HeaderMapperChain
from rest_dispatch.lifecycle import RequestLifecycle
from rest_dispatch.notifications import StaticLocation, TopicDispatcher
from rest_dispatch.transport import Success, TransportOutcome, TransportRequest


class FakeTransport:
    """Records requests and answers with queued outcomes (default: 200)."""

    def __init__(self, events: list[str] | None = None) -> None:
        self.requests: list[TransportRequest] = []
        self.outcomes: deque[TransportOutcome] = deque()
        self.events = events if events is not None else []

    def respond(self, *outcomes: TransportOutcome) -> FakeTransport:
        self.outcomes.extend(outcomes)
        return self

    async def send(self, request: TransportRequest) -> TransportOutcome:
        self.events.append("send")
        self.requests.append(request)
        if self.outcomes:
            return self.outcomes.popleft()
        return Success(None, 200)

    @property
    def last(self) -> TransportRequest:
        return self.requests[-1]


@pytest.fixture
def events() -> list[str]:
    return []


@pytest.fixture
def transport(events: list[str]) -> FakeTransport:
    return FakeTransport(events)


@pytest.fixture
def dispatcher() -> TopicDispatcher:
    return TopicDispatcher()


@pytest.fixture
def location() -> StaticLocation:
    return StaticLocation("/")


@pytest.fixture
def header_mappers() -> HeaderMapperChain:
    return HeaderMapperChain()


@pytest.fixture
def lifecycle(
    transport: FakeTransport,
    dispatcher: TopicDispatcher,
    location: StaticLocation,
    header_mappers: HeaderMapperChain,
) -> RequestLifecycle:
    return RequestLifecycle(transport, dispatcher, location, header_mappers)


@pytest.fixture
def make_context(events: list[str]) -> Any:
    """Factory for a PUT context whose callbacks record into ``events``.

    Payload-carrying callbacks also store their argument in ``received``.
    """
    received: dict[str, Any] = {}

    def _make(**overrides: Any) -> RequestContext:
        def record(name: str) -> Any:
            return lambda: events.append(name)

        def keep(name: str) -> Any:
            def _keep(payload: Any) -> None:
                events.append(name)
                received[name] = payload

            return _keep

        fields: dict[str, Any] = {
            "method": "PUT",
            "url": "api/entity/catalog-partition",
            "payload": {"owner": "type", "name": "name"},
            "reset": record("reset"),
            "start": record("start"),
            "stop": record("stop"),
            "error": record("error"),
            "not_found": record("not_found"),
            "rejected": keep("rejected"),
            "success": keep("success"),
        }
        fields.update(overrides)
        return RequestContext(**fields)

    _make.received = received  # type: ignore[attr-defined]
    return _make
