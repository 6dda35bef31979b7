"""aiojso: async Python client for JSO (JSON from Stack Overflow) APIs."""

from ._version import __version__
from .client import JsoClient, interpret_response, jso_fetch, jso_fetch_sync
from .exceptions import (
    HttpStatusError,
    InvalidEnvelopeError,
    JsoClientError,
    JsoError,
    MalformedBodyError,
    TransportError,
)
from .models import JsoEnvelope, JsoFailureEnvelope, JsoResult

__all__ = [
    "HttpStatusError",
    "InvalidEnvelopeError",
    "JsoClient",
    "JsoClientError",
    "JsoEnvelope",
    "JsoError",
    "JsoFailureEnvelope",
    "JsoResult",
    "MalformedBodyError",
    "TransportError",
    "__version__",
    "interpret_response",
    "jso_fetch",
    "jso_fetch_sync",
]
