"""Data models for client_utils."""

from .tracing import TraceMethodCall, TraceMethodError, TraceMethodFinished

__all__ = [
    "TraceMethodCall",
    "TraceMethodFinished",
    "TraceMethodError",
]
