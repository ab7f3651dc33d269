"""Failure shapes the interceptor recognises without a classifier.

Any exception may opt in by exposing the attributes below; no base class is
required.
"""

from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class SelfDescribing(Protocol):
    """A failure that knows its user-facing reason, status and headers."""

    reason: str
    status_code: int
    headers: Mapping[str, str] | None


@runtime_checkable
class DiagnosticCapable(Protocol):
    """A failure that can explain itself in detail to a developer."""

    def debuggable_help(self) -> str: ...
