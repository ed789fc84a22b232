"""ScopedAdapter — binds lifecycle events onto a ScopedUIState."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from rest_dispatch.context import RequestContext, ScopedUIState
from rest_dispatch.lifecycle import DispatchHandle, RequestLifecycle
from rest_dispatch.logging import get_logger

log = get_logger(__name__)


class ScopedAdapter:
    """Dispatches through a RequestLifecycle with UI-state callbacks filled in.

    ``reset``, ``start``, ``stop`` and ``rejected`` are replaced by callbacks
    that mutate the given state; ``success``, ``error`` and ``not_found``
    pass through untouched.
    """

    def __init__(self, lifecycle: RequestLifecycle, *, error_class: str = "error") -> None:
        self._lifecycle = lifecycle
        self._error_class = error_class

    async def dispatch(self, ctx: RequestContext, state: ScopedUIState) -> DispatchHandle:
        return await self._lifecycle.dispatch(self.bind(ctx, state))

    def bind(self, ctx: RequestContext, state: ScopedUIState) -> RequestContext:
        """Return a copy of ``ctx`` whose state callbacks write into ``state``."""

        def reset() -> None:
            state.violations = {}
            state.error_class_for = {}

        def start() -> None:
            state.working = True

        def stop() -> None:
            state.working = False

        def rejected(violations: Any) -> None:
            if not isinstance(violations, Mapping):
                log.warning("scoped.rejected.unexpected_body", url=ctx.url)
                return
            for field_name, messages in violations.items():
                state.error_class_for[field_name] = self._error_class if messages else ""
                state.violations[field_name] = messages

        return dataclasses.replace(
            ctx, reset=reset, start=start, stop=stop, rejected=rejected
        )
