"""
Round Tracing

Optional observer for the compression loop. The engine calls a Tracer once
per round and once per block; the tracer formats the event and forwards it
to its callbacks. Tracing is purely observational: a failing callback is
logged and skipped, and the computed digest is the same with or without a
tracer attached.

Tracers:
- Tracer: callback registry
- LoggingTracer: one DEBUG line per round on a logging.Logger
- RecordingTracer: keeps events in memory
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

from ..config import get_settings


logger = logging.getLogger(__name__)

REGISTER_NAMES = 'ABCDEFGH'


# ============================================================================
# Trace Events
# ============================================================================

@dataclass(frozen=True)
class RoundTrace:
    """Working registers after one compression round."""
    algorithm: str
    block_index: int
    index: int
    registers: Tuple[int, ...]
    schedule_index: int
    constant: int
    rotation: Optional[int] = None

    def __str__(self) -> str:
        rotation = f" s={self.rotation:>2}" if self.rotation is not None else ""
        registers = ' '.join(
            f"{REGISTER_NAMES[i]}={value:08X}" for i, value in enumerate(self.registers)
        )
        return (
            f"{self.algorithm} block={self.block_index} t={self.index:>2} "
            f"[g={self.schedule_index:>2}{rotation} K={self.constant:08X}]: "
            f"{registers}"
        )


@dataclass(frozen=True)
class BlockTrace:
    """Message schedule of one block and the hash state after accumulation."""
    algorithm: str
    block_index: int
    schedule: Tuple[int, ...]
    state: Tuple[int, ...]

    def __str__(self) -> str:
        state = ' '.join(f"{value:08x}" for value in self.state)
        return (
            f"{self.algorithm} block={self.block_index} "
            f"schedule={len(self.schedule)} words state={state}"
        )


TraceEvent = Union[RoundTrace, BlockTrace]


# ============================================================================
# Tracers
# ============================================================================

class Tracer:
    """
    Callback registry notified by the compression engine.

    Example:
        >>> tracer = Tracer()
        >>> tracer.add_callback(print)
        >>> md5_hex(b"abc", tracer=tracer)  # doctest: +SKIP
    """

    def __init__(self):
        self._callbacks: List[Callable[[TraceEvent], None]] = []

    def add_callback(self, callback: Callable[[TraceEvent], None]) -> None:
        """Add a callback to be notified of trace events."""
        self._callbacks.append(callback)

    def remove_callback(self, callback: Callable[[TraceEvent], None]) -> None:
        """Remove a previously added callback."""
        self._callbacks.remove(callback)

    def on_round(self, trace: RoundTrace) -> None:
        self._dispatch(trace)

    def on_block(self, trace: BlockTrace) -> None:
        self._dispatch(trace)

    def _dispatch(self, event: TraceEvent) -> None:
        for callback in self._callbacks:
            try:
                callback(event)
            except Exception:
                # Tracing must never change the hash computation
                logger.exception("Trace callback %r failed", callback)


class LoggingTracer(Tracer):
    """Writes every trace event to a logger at DEBUG level."""

    def __init__(self, target: Optional[logging.Logger] = None):
        super().__init__()
        self._logger = target or logger
        self.add_callback(self._log)

    def _log(self, event: TraceEvent) -> None:
        self._logger.debug("%s", event)


class RecordingTracer(Tracer):
    """Collects trace events in memory."""

    def __init__(self):
        super().__init__()
        self.rounds: List[RoundTrace] = []
        self.blocks: List[BlockTrace] = []
        self.add_callback(self._record)

    def _record(self, event: TraceEvent) -> None:
        if isinstance(event, RoundTrace):
            self.rounds.append(event)
        else:
            self.blocks.append(event)

    def lines(self) -> List[str]:
        """Round trace lines in emission order."""
        return [str(trace) for trace in self.rounds]

    def clear(self) -> None:
        self.rounds.clear()
        self.blocks.clear()


def default_tracer() -> Optional[Tracer]:
    """Return a LoggingTracer if tracing is enabled in the environment."""
    if get_settings().trace:
        return LoggingTracer()
    return None
