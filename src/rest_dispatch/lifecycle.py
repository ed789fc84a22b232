"""RequestLifecycle — the dispatch engine, and the DispatchHandle it returns."""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Callable, Generator
from typing import Any

from rest_dispatch.classification import OutcomeCategory, classify
from rest_dispatch.context import RequestContext
from rest_dispatch.exceptions import DispatchPending
from rest_dispatch.headers import HeaderMapperChain
from rest_dispatch.logging import get_logger
from rest_dispatch.notifications import (
    AUTH_REQUIRED_TOPIC,
    SYSTEM_ALERT_TOPIC,
    Location,
    Notifier,
)
from rest_dispatch.transport import (
    NO_RESPONSE_STATUS,
    Failure,
    Success,
    Transport,
    TransportOutcome,
    TransportRequest,
)

log = get_logger(__name__)


async def _call(callback: Callable[..., Any] | None, *args: Any) -> None:
    if callback is None:
        return
    result = callback(*args)
    if inspect.isawaitable(result):
        await result


class DispatchHandle:
    """Completion handle for a single dispatch.

    Awaiting the handle yields the TransportOutcome once every callback,
    ``stop`` and all success reactions have run.
    """

    def __init__(self) -> None:
        self._task: asyncio.Task[TransportOutcome] | None = None
        self._reactions: list[Callable[[Any], Any]] = []
        self._outcome: TransportOutcome | None = None
        self._category: OutcomeCategory | None = None
        self._late: set[asyncio.Future[None]] = set()

    def on_success(self, reaction: Callable[[Any], Any]) -> DispatchHandle:
        """Attach a further reaction to a successful payload."""
        if self._outcome is None:
            self._reactions.append(reaction)
        elif isinstance(self._outcome, Success):
            late = asyncio.ensure_future(_call(reaction, self._outcome.payload))
            self._late.add(late)
            late.add_done_callback(self._late.discard)
        return self

    def done(self) -> bool:
        return self._outcome is not None

    @property
    def outcome(self) -> TransportOutcome:
        if self._outcome is None:
            raise DispatchPending()
        return self._outcome

    @property
    def category(self) -> OutcomeCategory:
        if self._category is None:
            raise DispatchPending()
        return self._category

    def __await__(self) -> Generator[Any, None, TransportOutcome]:
        if self._task is None:
            raise DispatchPending("Dispatch was never started")
        return self._task.__await__()


class RequestLifecycle:
    """Runs one request through reset, start, header enrichment, transport,
    classification and stop, in that order.
    """

    def __init__(
        self,
        transport: Transport,
        notifier: Notifier,
        location: Location,
        header_mappers: HeaderMapperChain | None = None,
    ) -> None:
        self._transport = transport
        self._notifier = notifier
        self._location = location
        self._header_mappers = (
            header_mappers if header_mappers is not None else HeaderMapperChain()
        )
        self._in_flight: set[asyncio.Task[TransportOutcome]] = set()

    @property
    def header_mappers(self) -> HeaderMapperChain:
        return self._header_mappers

    async def dispatch(self, ctx: RequestContext) -> DispatchHandle:
        """Start ``ctx`` and return its handle once the transport call is scheduled."""
        await _call(ctx.reset)
        await _call(ctx.start)

        request = TransportRequest(
            method=ctx.method,
            url=ctx.url,
            payload=ctx.payload,
            headers=self._header_mappers.apply(ctx.headers),
            with_credentials=ctx.with_credentials,
        )
        log.debug("dispatch.start", method=request.method, url=request.url)

        handle = DispatchHandle()
        task = asyncio.ensure_future(self._complete(ctx, request, handle))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)
        handle._task = task
        return handle

    async def _complete(
        self,
        ctx: RequestContext,
        request: TransportRequest,
        handle: DispatchHandle,
    ) -> TransportOutcome:
        try:
            outcome = await self._transport.send(request)
        except Exception as exc:
            # Treated as a request that never got a response
            log.error(
                "dispatch.transport_failed",
                url=request.url,
                error=f"{type(exc).__name__}: {exc}",
            )
            outcome = Failure(NO_RESPONSE_STATUS)

        if isinstance(outcome, Success):
            category = OutcomeCategory.SUCCESS
        else:
            category = classify(outcome.status)
        handle._category = category
        log.debug(
            "dispatch.complete",
            method=request.method,
            url=request.url,
            category=category.value,
            status=outcome.status,
        )

        try:
            if isinstance(outcome, Success):
                await _call(ctx.success, outcome.payload)
            else:
                await self._on_failure(ctx, outcome, category)
        finally:
            try:
                await _call(ctx.stop)
            finally:
                handle._outcome = outcome

        if isinstance(outcome, Success):
            for reaction in handle._reactions:
                await _call(reaction, outcome.payload)
        handle._reactions.clear()
        return outcome

    async def _on_failure(
        self,
        ctx: RequestContext,
        outcome: Failure,
        category: OutcomeCategory,
    ) -> None:
        if category is OutcomeCategory.NOT_FOUND:
            await _call(ctx.not_found)
        elif category is OutcomeCategory.REJECTED:
            await _call(ctx.rejected, outcome.body)
        elif category is OutcomeCategory.AUTH_REQUIRED:
            self._notifier.publish(AUTH_REQUIRED_TOPIC, self._location.path())
        elif category is OutcomeCategory.ALERT:
            log.info("dispatch.alert", url=ctx.url, status=outcome.status)
            self._notifier.publish(SYSTEM_ALERT_TOPIC, outcome.status)
        await _call(ctx.error)
