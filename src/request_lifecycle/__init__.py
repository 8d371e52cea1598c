"""request-lifecycle - single-flight HTTP request tracking for UI call sites."""

from request_lifecycle.cancellation import CancellationHandle
from request_lifecycle.client import RequestClient
from request_lifecycle.config import ClientSettings, get_settings
from request_lifecycle.context import RequestContext
from request_lifecycle.credentials import (
    Credential,
    CredentialStore,
    InMemoryCredentialStore,
    SessionFileCredentialStore,
)
from request_lifecycle.exceptions import (
    Cancelled,
    ConstructionError,
    InternalRequestError,
    RequestException,
    TransportError,
    Unauthenticated,
)
from request_lifecycle.factory import create_client
from request_lifecycle.hooks import AfterRequest, BeforeRequest, OnOutcome, RequestHook
from request_lifecycle.interceptors import AuthInterceptor, AuthMode, RequestInterceptor
from request_lifecycle.methods import HttpMethod
from request_lifecycle.navigation import SESSION_EXPIRED_LOCATION, Navigator
from request_lifecycle.settle import settle_all
from request_lifecycle.state import Outcome, RequestState
from request_lifecycle.timers import ScheduledCall, schedule_timeout
from request_lifecycle.trace import RequestTrace, TraceEntry
from request_lifecycle.transports import (
    FetchTransport,
    HttpxTransport,
    OutgoingRequest,
    Transport,
    TransportResponse,
)

__all__ = [
    "SESSION_EXPIRED_LOCATION",
    "AfterRequest",
    "AuthInterceptor",
    "AuthMode",
    "BeforeRequest",
    "CancellationHandle",
    "Cancelled",
    "ClientSettings",
    "ConstructionError",
    "Credential",
    "CredentialStore",
    "FetchTransport",
    "HttpMethod",
    "HttpxTransport",
    "InMemoryCredentialStore",
    "InternalRequestError",
    "Navigator",
    "OnOutcome",
    "OutgoingRequest",
    "Outcome",
    "RequestClient",
    "RequestContext",
    "RequestException",
    "RequestHook",
    "RequestInterceptor",
    "RequestState",
    "RequestTrace",
    "ScheduledCall",
    "SessionFileCredentialStore",
    "TraceEntry",
    "Transport",
    "TransportError",
    "TransportResponse",
    "Unauthenticated",
    "create_client",
    "get_settings",
    "schedule_timeout",
    "settle_all",
]
