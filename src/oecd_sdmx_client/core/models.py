"""Core request models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class RequestContext:
    """Diagnostic context carried alongside one outbound call."""

    operation: str
    dataflow_id: str | None = None
    provided_filter: str | None = None


__all__ = [
    "RequestContext",
]
