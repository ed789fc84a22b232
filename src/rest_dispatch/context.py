"""RequestContext and ScopedUIState — per-dispatch and per-component state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from rest_dispatch._types import Callback, Headers, PayloadCallback, Violations
from rest_dispatch.exceptions import UnsupportedMethod

SUPPORTED_METHODS = frozenset(
    {"GET", "HEAD", "OPTIONS", "POST", "PUT", "PATCH", "DELETE"}
)


@dataclass
class RequestContext:
    """A single request plus the optional lifecycle callbacks for it.

    Every callback slot may be left as ``None``, which makes that event a
    no-op. Callbacks may be plain functions or coroutine functions.
    """

    method: str
    url: str
    payload: Any = None
    headers: Headers | None = None
    with_credentials: bool = False

    reset: Callback | None = None
    start: Callback | None = None
    stop: Callback | None = None
    error: Callback | None = None
    not_found: Callback | None = None
    rejected: PayloadCallback | None = None
    success: PayloadCallback | None = None

    def __post_init__(self) -> None:
        self.method = self.method.upper()
        if self.method not in SUPPORTED_METHODS:
            raise UnsupportedMethod(self.method)


@dataclass
class ScopedUIState:
    """Mutable UI state a ScopedAdapter binds lifecycle events onto."""

    working: bool = False
    violations: Violations = field(default_factory=dict)
    error_class_for: dict[str, str] = field(default_factory=dict)
