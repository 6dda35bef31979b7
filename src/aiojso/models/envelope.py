"""JSO envelope models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr


class JsoEnvelope(BaseModel):
    """Top-level JSO response body.

    Only ``success`` is checked; the remaining fields are passed through
    verbatim.
    """

    model_config = ConfigDict(frozen=True)

    success: StrictBool
    data: Any | None = None
    meta: Any | None = None
    links: Any | None = None


class JsoFailureEnvelope(BaseModel):
    """Body of a ``success: false`` response."""

    model_config = ConfigDict(frozen=True)

    success: StrictBool
    message: StrictStr
    errors: Any | None = None
    data: Any | None = None


class JsoResult(BaseModel):
    """Payload returned for a ``success: true`` response."""

    model_config = ConfigDict(frozen=True)

    data: Any | None = None
    meta: Any | None = None
    links: Any | None = None
