"""Pydantic models for aiojso."""

from .envelope import JsoEnvelope, JsoFailureEnvelope, JsoResult

__all__ = [
    "JsoEnvelope",
    "JsoFailureEnvelope",
    "JsoResult",
]
