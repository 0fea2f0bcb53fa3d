# Integration Module
"""
Observational hooks around the hash engine:
- Per-round and per-block trace events
- Logging and in-memory tracers
"""

from .tracing import (
    RoundTrace,
    BlockTrace,
    Tracer,
    LoggingTracer,
    RecordingTracer,
    default_tracer,
)

__all__ = [
    'RoundTrace',
    'BlockTrace',
    'Tracer',
    'LoggingTracer',
    'RecordingTracer',
    'default_tracer',
]
