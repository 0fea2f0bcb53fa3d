"""
Runtime configuration read from environment variables.

- DIGESTKIT_TRACE: '1', 'true', 'yes' or 'on' enables per-round tracing
- SHOULD_DEBUG: legacy switch, any value enables tracing
- DIGESTKIT_LOG_LEVEL: log level name used by the demo script (default INFO)
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional


TRACE_ENV = 'DIGESTKIT_TRACE'
LEGACY_TRACE_ENV = 'SHOULD_DEBUG'
LOG_LEVEL_ENV = 'DIGESTKIT_LOG_LEVEL'

DEFAULT_LOG_LEVEL = 'INFO'
TRUTHY = ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class Settings:
    """Snapshot of the environment-driven settings."""
    trace: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """Build settings from os.environ (or the given mapping)."""
        env = os.environ if environ is None else environ

        trace = env.get(TRACE_ENV, '').strip().lower() in TRUTHY
        if LEGACY_TRACE_ENV in env:
            trace = True

        log_level = env.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            log_level = DEFAULT_LOG_LEVEL

        return cls(trace=trace, log_level=log_level)

    @property
    def effective_log_level(self) -> int:
        """Numeric level; tracing forces DEBUG so round lines are visible."""
        if self.trace:
            return logging.DEBUG
        return logging.getLevelName(self.log_level)


def get_settings() -> Settings:
    """Read the current settings. Evaluated on every call, never cached."""
    return Settings.from_env()
