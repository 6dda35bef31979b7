"""Translate a single HTTP response into a JSO result or a typed error.

The request itself is delegated to ``httpx``; this module only reads the
response (``is_success``, ``status_code``, ``reason_phrase``, ``json()``)
and applies the JSO envelope rules in a fixed order:

1. transport failure
2. JSON decoding
3. ``success`` flag validation
4. success payload or ``message`` validation for failures
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ..exceptions import (
    HttpStatusError,
    InvalidEnvelopeError,
    JsoError,
    MalformedBodyError,
    TransportError,
)
from ..models.envelope import JsoEnvelope, JsoFailureEnvelope, JsoResult

logger = logging.getLogger(__name__)

_NETWORK_FAILED = "Network request failed."
_INVALID_JSON = "Invalid JSON response from server."
_INVALID_SUCCESS = 'Invalid JSO response: "success" property is missing or not a boolean.'
_INVALID_MESSAGE = (
    'Invalid JSO error response: "message" property is missing or not a string.'
)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _status_error(response: httpx.Response) -> HttpStatusError:
    return HttpStatusError(response.status_code, response.reason_phrase)


def interpret_response(response: httpx.Response) -> JsoResult:
    """Apply the JSO envelope rules to an already-read response.

    Returns the success payload, or raises one of
    :class:`MalformedBodyError`, :class:`HttpStatusError`,
    :class:`InvalidEnvelopeError` or :class:`JsoError`.
    """
    try:
        body = response.json(parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        logger.error("Failed to parse JSON response: %s", exc)
        if not response.is_success:
            raise _status_error(response) from exc
        raise MalformedBodyError(_INVALID_JSON) from exc

    try:
        envelope = JsoEnvelope.model_validate(body)
    except ValidationError as exc:
        # Non-2xx status takes precedence over the shape error.
        if not response.is_success:
            raise _status_error(response) from exc
        raise InvalidEnvelopeError(_INVALID_SUCCESS) from exc

    if envelope.success:
        logger.debug("JSO success response (HTTP %s)", response.status_code)
        return JsoResult(data=envelope.data, meta=envelope.meta, links=envelope.links)

    try:
        failure = JsoFailureEnvelope.model_validate(body)
    except ValidationError as exc:
        raise InvalidEnvelopeError(_INVALID_MESSAGE) from exc

    logger.debug(
        "JSO failure response (HTTP %s): %s", response.status_code, failure.message
    )
    raise JsoError(failure.message, response, failure.errors, failure.data)


async def _send(
    client: httpx.AsyncClient, method: str, resource: Any, options: dict[str, Any]
) -> JsoResult:
    logger.debug("JSO request %s %s", method, resource)
    try:
        response = await client.request(method, resource, **options)
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        logger.error("Network request failed: %s", exc)
        raise TransportError(_NETWORK_FAILED) from None
    return interpret_response(response)


async def jso_fetch(
    resource: str | httpx.URL,
    method: str = "GET",
    *,
    client: httpx.AsyncClient | None = None,
    **options: Any,
) -> JsoResult:
    """Perform one request and decode its JSO envelope.

    *options* are handed to :meth:`httpx.AsyncClient.request` unchanged
    (``headers``, ``params``, ``json``, ``content``, ``timeout``, ...).
    Without *client* a short-lived ``httpx.AsyncClient`` is created and
    closed for this call only.

    Only request failures raised by httpx become :class:`TransportError`.
    Misuse such as a *resource* that is not a string or ``httpx.URL``, or
    an unknown keyword in *options*, raises ``TypeError`` unchanged.
    """
    if client is None:
        async with httpx.AsyncClient() as owned:
            return await _send(owned, method, resource, options)
    return await _send(client, method, resource, options)


def _send_sync(
    client: httpx.Client, method: str, resource: Any, options: dict[str, Any]
) -> JsoResult:
    logger.debug("JSO request %s %s", method, resource)
    try:
        response = client.request(method, resource, **options)
    except (httpx.RequestError, httpx.InvalidURL) as exc:
        logger.error("Network request failed: %s", exc)
        raise TransportError(_NETWORK_FAILED) from None
    return interpret_response(response)


def jso_fetch_sync(
    resource: str | httpx.URL,
    method: str = "GET",
    *,
    client: httpx.Client | None = None,
    **options: Any,
) -> JsoResult:
    """Blocking counterpart of :func:`jso_fetch` built on ``httpx.Client``."""
    if client is None:
        with httpx.Client() as owned:
            return _send_sync(owned, method, resource, options)
    return _send_sync(client, method, resource, options)
