"""Settings for the node process wrapper."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError
from .runtime import env_bool, env_seconds

# Process termination timeouts (seconds)
GRACEFUL_SHUTDOWN_TIMEOUT_SECONDS = 3.0
FORCE_KILL_TIMEOUT_SECONDS = 2.0

GRACEFUL_TIMEOUT_ENV = "NODE_PS_GRACEFUL_TIMEOUT_SECONDS"
FORCE_TIMEOUT_ENV = "NODE_PS_FORCE_TIMEOUT_SECONDS"
MANAGED_BY_MONITOR_ENV = "MANAGED_BY_MONITOR"


@dataclass(frozen=True)
class WrapperSettings:
    """Timeouts and console behaviour for a ``NodeProcessWrapper``."""

    graceful_timeout_seconds: float = GRACEFUL_SHUTDOWN_TIMEOUT_SECONDS
    force_timeout_seconds: float = FORCE_KILL_TIMEOUT_SECONDS
    suppress_console_output: bool = False

    def __post_init__(self) -> None:
        if self.graceful_timeout_seconds < 0:
            raise ConfigurationError.invalid_value(
                "graceful_timeout_seconds", self.graceful_timeout_seconds, "Timeouts must be non-negative"
            )
        if self.force_timeout_seconds < 0:
            raise ConfigurationError.invalid_value(
                "force_timeout_seconds", self.force_timeout_seconds, "Timeouts must be non-negative"
            )

    @classmethod
    def from_env(cls) -> "WrapperSettings":
        """Build settings from environment overrides, falling back to the defaults."""
        return cls(
            graceful_timeout_seconds=env_seconds(GRACEFUL_TIMEOUT_ENV, or_value=GRACEFUL_SHUTDOWN_TIMEOUT_SECONDS),
            force_timeout_seconds=env_seconds(FORCE_TIMEOUT_ENV, or_value=FORCE_KILL_TIMEOUT_SECONDS),
            suppress_console_output=bool(env_bool(MANAGED_BY_MONITOR_ENV, or_value=False)),
        )


__all__ = [
    "FORCE_KILL_TIMEOUT_SECONDS",
    "GRACEFUL_SHUTDOWN_TIMEOUT_SECONDS",
    "WrapperSettings",
]
