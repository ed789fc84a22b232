"""VerbClient — plain GET/PUT/POST/DELETE with base-URI prefixing."""

from __future__ import annotations

import inspect
from typing import Any

from rest_dispatch._types import ErrorHandler, PayloadCallback
from rest_dispatch.transport import (
    Success,
    Transport,
    TransportOutcome,
    TransportRequest,
)


def join_uri(base_uri: str | None, path: str) -> str:
    """Prefix ``path`` with ``base_uri``, separated by exactly one added slash."""
    if not base_uri:
        return path
    if base_uri.endswith("/"):
        return base_uri + path
    return f"{base_uri}/{path}"


class VerbClient:
    """Direct transport calls: no header mappers, hooks or classification."""

    def __init__(
        self,
        transport: Transport,
        base_uri: str | None = None,
        *,
        with_credentials: bool = False,
    ) -> None:
        self._transport = transport
        self._base_uri = base_uri
        self._with_credentials = with_credentials

    @property
    def base_uri(self) -> str | None:
        return self._base_uri

    async def get(
        self,
        path: str,
        success_handler: PayloadCallback | None = None,
        error_handler: ErrorHandler | None = None,
    ) -> TransportOutcome:
        return await self._send("GET", path, None, success_handler, error_handler)

    async def put(
        self,
        path: str,
        payload: Any,
        success_handler: PayloadCallback | None = None,
        error_handler: ErrorHandler | None = None,
    ) -> TransportOutcome:
        return await self._send("PUT", path, payload, success_handler, error_handler)

    async def post(
        self,
        path: str,
        payload: Any,
        success_handler: PayloadCallback | None = None,
        error_handler: ErrorHandler | None = None,
    ) -> TransportOutcome:
        return await self._send("POST", path, payload, success_handler, error_handler)

    async def delete(
        self,
        path: str,
        payload: Any = None,
        success_handler: PayloadCallback | None = None,
        error_handler: ErrorHandler | None = None,
    ) -> TransportOutcome:
        return await self._send("DELETE", path, payload, success_handler, error_handler)

    async def _send(
        self,
        method: str,
        path: str,
        payload: Any,
        success_handler: PayloadCallback | None,
        error_handler: ErrorHandler | None,
    ) -> TransportOutcome:
        outcome = await self._transport.send(
            TransportRequest(
                method=method,
                url=join_uri(self._base_uri, path),
                payload=payload,
                with_credentials=self._with_credentials,
            )
        )
        if isinstance(outcome, Success):
            result = success_handler(outcome.payload) if success_handler else None
        else:
            result = error_handler(outcome.body, outcome.status) if error_handler else None
        if inspect.isawaitable(result):
            await result
        return outcome
