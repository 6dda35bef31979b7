"""JSO request helpers built on httpx."""

from .fetch import interpret_response, jso_fetch, jso_fetch_sync
from .session import JsoClient

__all__ = [
    "JsoClient",
    "interpret_response",
    "jso_fetch",
    "jso_fetch_sync",
]
