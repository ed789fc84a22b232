"""Shared type aliases."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

Headers = dict[str, str]
Violations = dict[str, list[str]]

# Mapper functions composed by HeaderMapperChain
HeaderMapper = Callable[[Headers], Headers]

# Lifecycle callbacks may be plain functions or coroutine functions
Callback = Callable[[], Awaitable[None] | None]
PayloadCallback = Callable[[Any], Awaitable[None] | None]
ErrorHandler = Callable[[Any, int], Awaitable[None] | None]
