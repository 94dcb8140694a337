"""
Distributed tracing using OpenTelemetry.

Spans wrap data-quality analysis and table diffing so that a host service
(the HTTP layer that fetches the result sets) sees inspection cost inside
its own traces.
"""

from .context import add_span_attributes, add_span_event, trace_operation
from .decorators import trace_function
from .tracer import get_tracer, initialize_tracing, shutdown_tracing

__all__ = [
    "initialize_tracing",
    "get_tracer",
    "shutdown_tracing",
    "trace_operation",
    "trace_function",
    "add_span_attributes",
    "add_span_event",
]
