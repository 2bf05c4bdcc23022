"""quickbench utilities - logging and environment helpers."""

from quickbench.utils.env import EnvVarError, EnvVarTypeError, get_env
from quickbench.utils.logger import (
    FINE,
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
)

__all__ = [
    # Env
    "EnvVarError",
    "EnvVarTypeError",
    "get_env",
    # Logger
    "FINE",
    "LogLevel",
    "Logger",
    "LoggerNotConfiguredError",
]
