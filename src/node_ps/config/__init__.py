"""Shared configuration helpers and dataclasses."""

from .errors import ConfigurationError
from .runtime import env_bool, env_float, env_seconds, env_str
from .settings import WrapperSettings

__all__ = [
    "ConfigurationError",
    "WrapperSettings",
    "env_bool",
    "env_float",
    "env_seconds",
    "env_str",
]
