"""rest-dispatch - request lifecycle and status classification for REST backends."""

from rest_dispatch.classification import OutcomeCategory, classify
from rest_dispatch.client import VerbClient, join_uri
from rest_dispatch.config import DispatchSettings, get_settings
from rest_dispatch.context import RequestContext, ScopedUIState
from rest_dispatch.exceptions import (
    ConfigurationError,
    DispatchException,
    DispatchPending,
    UnsupportedMethod,
)
from rest_dispatch.headers import HeaderMapperChain
from rest_dispatch.lifecycle import DispatchHandle, RequestLifecycle
from rest_dispatch.notifications import (
    AUTH_REQUIRED_TOPIC,
    SYSTEM_ALERT_TOPIC,
    Location,
    Notifier,
    StaticLocation,
    TopicDispatcher,
)
from rest_dispatch.scoped import ScopedAdapter
from rest_dispatch.transport import (
    Failure,
    HttpxTransport,
    Success,
    Transport,
    TransportOutcome,
    TransportRequest,
)
from rest_dispatch.wiring import RestServices, create_rest_services

__all__ = [
    "AUTH_REQUIRED_TOPIC",
    "SYSTEM_ALERT_TOPIC",
    "ConfigurationError",
    "DispatchException",
    "DispatchHandle",
    "DispatchPending",
    "DispatchSettings",
    "Failure",
    "HeaderMapperChain",
    "HttpxTransport",
    "Location",
    "Notifier",
    "OutcomeCategory",
    "RequestContext",
    "RequestLifecycle",
    "RestServices",
    "ScopedAdapter",
    "ScopedUIState",
    "StaticLocation",
    "Success",
    "TopicDispatcher",
    "Transport",
    "TransportOutcome",
    "TransportRequest",
    "UnsupportedMethod",
    "VerbClient",
    "classify",
    "create_rest_services",
    "get_settings",
    "join_uri",
]
