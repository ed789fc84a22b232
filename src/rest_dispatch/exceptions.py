"""DispatchException hierarchy."""

from __future__ import annotations


class DispatchException(Exception):
    """Base for all dispatch exceptions."""


class UnsupportedMethod(DispatchException):
    """HTTP method is not one the dispatcher knows how to send."""

    def __init__(self, method: str) -> None:
        super().__init__(f"Unsupported HTTP method: {method!r}")
        self.method = method


class DispatchPending(DispatchException):
    """Outcome was read before the dispatch completed."""

    def __init__(self, detail: str = "Dispatch has not completed") -> None:
        super().__init__(detail)
        self.detail = detail


class ConfigurationError(DispatchException):
    """Invalid settings value."""

    def __init__(self, detail: str, *, field: str | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.field = field
