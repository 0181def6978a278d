"""Tracing module."""

from .trace import MethodMapping, ObjectTrace, Trace, TraceObserver

__all__ = ["Trace", "TraceObserver", "MethodMapping", "ObjectTrace"]
