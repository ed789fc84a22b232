"""Transport collaborator: request/outcome types and the httpx-backed default."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

import httpx

from rest_dispatch._types import Headers
from rest_dispatch.logging import get_logger

# Angular-style pseudo statuses for requests that never got a response
NO_RESPONSE_STATUS = 0
TIMEOUT_STATUS = -1

log = get_logger(__name__)


@dataclass(frozen=True)
class TransportRequest:
    """Everything a transport needs to issue one HTTP call."""

    method: str
    url: str
    payload: Any = None
    headers: Headers = field(default_factory=dict)
    with_credentials: bool = False


@dataclass(frozen=True)
class Success:
    payload: Any = None
    status: int = 200


@dataclass(frozen=True)
class Failure:
    status: int
    body: Any = None


TransportOutcome = Success | Failure


class Transport(Protocol):
    async def send(self, request: TransportRequest) -> TransportOutcome: ...


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        try:
            return response.json()
        except ValueError:
            return response.text
    return response.text


class HttpxTransport:
    """Transport backed by ``httpx.AsyncClient``.

    Usage::

        async with HttpxTransport(timeout=10.0) as transport:
            outcome = await transport.send(TransportRequest("GET", url))

    A client passed in is borrowed and left open; one created here is owned
    and closed by ``aclose()``.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        base_url: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url or "", timeout=timeout
        )

    async def send(self, request: TransportRequest) -> TransportOutcome:
        explicit_cookie = any(key.lower() == "cookie" for key in request.headers)
        try:
            http_request = self._client.build_request(
                request.method,
                request.url,
                json=request.payload,
                headers=request.headers,
            )
            # Only the client's cookie jar is withheld; an explicit header wins
            if not request.with_credentials and not explicit_cookie:
                http_request.headers.pop("cookie", None)
            response = await self._client.send(http_request)
        except httpx.TimeoutException as exc:
            log.warning("transport.timeout", url=request.url, error=str(exc))
            return Failure(TIMEOUT_STATUS)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            log.warning("transport.error", url=request.url, error=str(exc))
            return Failure(NO_RESPONSE_STATUS)

        body = _decode_body(response)
        if response.is_success:
            return Success(body, response.status_code)
        return Failure(response.status_code, body)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpxTransport:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
