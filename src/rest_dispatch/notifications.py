"""Notifier and Location collaborators, with in-process defaults."""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Callable
from typing import Any, Protocol

from rest_dispatch.logging import get_logger

AUTH_REQUIRED_TOPIC = "checkpoint.auth.required"
SYSTEM_ALERT_TOPIC = "system.alert"

log = get_logger(__name__)

Listener = Callable[[Any], Any]


class Notifier(Protocol):
    def publish(self, topic: str, payload: Any) -> None: ...


class Location(Protocol):
    def path(self) -> str: ...


class TopicDispatcher:
    """In-process topic bus.

    Remembers the last payload published on each topic and forwards it to
    the topic's subscribers. Async listeners are scheduled on the running
    event loop.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}
        self._last: dict[str, Any] = {}
        self._pending: set[asyncio.Future[Any]] = set()

    def subscribe(self, topic: str, listener: Listener) -> Callable[[], None]:
        self._listeners.setdefault(topic, []).append(listener)

        def unsubscribe() -> None:
            listeners = self._listeners.get(topic, [])
            if listener in listeners:
                listeners.remove(listener)

        return unsubscribe

    def publish(self, topic: str, payload: Any) -> None:
        log.debug("topic.publish", topic=topic)
        self._last[topic] = payload
        for listener in list(self._listeners.get(topic, [])):
            result = listener(payload)
            if inspect.isawaitable(result):
                future = asyncio.ensure_future(result)
                self._pending.add(future)
                future.add_done_callback(self._pending.discard)

    def last(self, topic: str, default: Any = None) -> Any:
        return self._last.get(topic, default)

    def published(self, topic: str) -> bool:
        return topic in self._last


class StaticLocation:
    """Holds the current navigation path; set by the hosting UI."""

    def __init__(self, path: str = "/") -> None:
        self._path = path

    def path(self) -> str:
        return self._path

    def navigate(self, path: str) -> None:
        self._path = path
