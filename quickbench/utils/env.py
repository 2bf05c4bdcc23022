"""Typed environment variable lookup for CLI defaults.

Usage:
    from quickbench.utils.env import get_env

    count = get_env("QUICKBENCH_COUNT", default=100, as_type=int)
    level = get_env("QUICKBENCH_LOG_LEVEL", default="INFO")
"""

from __future__ import annotations

import os
from typing import Any, TypeVar, cast

T = TypeVar("T")

_FALSY = ("false", "0", "", "no", "off")


class EnvVarError(Exception):
    """Base exception for environment variable errors."""


class EnvVarTypeError(EnvVarError):
    """Raised when a variable's value cannot be read as the requested type."""

    def __init__(self, name: str, value: str, expected_type: type) -> None:
        self.name = name
        self.value = value
        self.expected_type = expected_type
        super().__init__(f"Cannot convert {name}='{value}' to {expected_type.__name__}")


def _coerce(name: str, value: str, as_type: type) -> Any:
    try:
        if as_type is bool:
            return value.strip().lower() not in _FALSY
        return as_type(value.strip())
    except (ValueError, TypeError) as e:
        raise EnvVarTypeError(name, value, as_type) from e


def get_env(
    name: str,
    *,
    default: T | None = None,
    as_type: type[T] | None = None,
) -> T | str | None:
    """Read an environment variable, optionally converting it.

    Args:
        name: Environment variable name.
        default: Returned when the variable is unset.
        as_type: ``bool``, ``int``, ``float`` or any callable type taking a
            string. Booleans treat "false", "0", "", "no", "off" as False.

    Raises:
        EnvVarTypeError: If the value cannot be converted.
    """
    value = os.environ.get(name)
    if value is None:
        return default
    if as_type is not None:
        return cast(T, _coerce(name, value, as_type))
    return value
