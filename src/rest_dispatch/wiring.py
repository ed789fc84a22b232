"""create_rest_services() — wires every dispatch component from settings."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import ValidationError

from rest_dispatch._types import HeaderMapper
from rest_dispatch.client import VerbClient
from rest_dispatch.config import DispatchSettings, get_settings
from rest_dispatch.exceptions import ConfigurationError
from rest_dispatch.headers import HeaderMapperChain
from rest_dispatch.lifecycle import RequestLifecycle
from rest_dispatch.logging import configure_logging, get_logger
from rest_dispatch.notifications import (
    Location,
    Notifier,
    StaticLocation,
    TopicDispatcher,
)
from rest_dispatch.scoped import ScopedAdapter
from rest_dispatch.transport import HttpxTransport, Transport

log = get_logger(__name__)


@dataclass(frozen=True)
class RestServices:
    """The wired set of dispatch components sharing one transport and chain."""

    settings: DispatchSettings
    header_mappers: HeaderMapperChain
    transport: Transport
    notifier: Notifier
    location: Location
    lifecycle: RequestLifecycle
    scoped: ScopedAdapter
    client: VerbClient

    def install_header_mapper(self, mapper: HeaderMapper) -> None:
        """Register a default header mapper; intended for application setup."""
        self.header_mappers.register(mapper)


def _load_settings() -> DispatchSettings:
    try:
        return get_settings()
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(
            f"Invalid dispatch settings: {first.get('msg')}", field=field or None
        ) from exc


def _transport_base_url(settings: DispatchSettings) -> str | None:
    """``base_url`` if set, else ``base_uri`` when it is an absolute http(s) URL."""
    if settings.base_url:
        return settings.base_url
    if settings.base_uri and settings.base_uri.startswith(("http://", "https://")):
        return settings.base_uri
    return None


def create_rest_services(
    settings: DispatchSettings | None = None,
    *,
    notifier: Notifier | None = None,
    location: Location | None = None,
    transport: Transport | None = None,
    configure_logs: bool = False,
) -> RestServices:
    settings = settings or _load_settings()
    if configure_logs:
        configure_logging(settings.log_level, settings.log_format)

    header_mappers = HeaderMapperChain()
    transport = transport or HttpxTransport(
        base_url=_transport_base_url(settings), timeout=settings.timeout
    )
    notifier = notifier or TopicDispatcher()
    location = location or StaticLocation()
    lifecycle = RequestLifecycle(transport, notifier, location, header_mappers)

    log.debug("services.created", base_uri=settings.base_uri)
    return RestServices(
        settings=settings,
        header_mappers=header_mappers,
        transport=transport,
        notifier=notifier,
        location=location,
        lifecycle=lifecycle,
        scoped=ScopedAdapter(lifecycle, error_class=settings.error_class),
        client=VerbClient(
            transport,
            settings.base_uri,
            with_credentials=settings.with_credentials,
        ),
    )
