"""Exception hierarchy for aiojso."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx


class JsoClientError(Exception):
    """Base exception for all aiojso errors."""


class TransportError(JsoClientError):
    """The underlying HTTP request could not be completed."""


class MalformedBodyError(JsoClientError):
    """The server answered with a success status but the body is not JSON."""


class HttpStatusError(JsoClientError):
    """The server answered with an error status and no usable JSO body."""

    def __init__(self, status_code: int, reason_phrase: str) -> None:
        super().__init__(f"HTTP error! Status: {status_code} {reason_phrase}")
        self.status_code = status_code
        self.reason_phrase = reason_phrase


class InvalidEnvelopeError(JsoClientError):
    """The JSON body does not follow the JSO envelope shape."""


class JsoError(JsoClientError):
    """A well-formed JSO failure response (``success: false``).

    Carries the server-supplied diagnostics so callers can tell API
    failures apart from network and protocol errors.
    """

    def __init__(
        self,
        message: str,
        response: httpx.Response,
        errors: list[Any] | None = None,
        data: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.response = response
        self.errors = errors
        self.data = data
