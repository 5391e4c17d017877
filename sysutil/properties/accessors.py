"""Typed accessors for size and duration properties held in a store.

An int default is range-checked the same way a parsed value is, so a bad
default fails as loudly as a bad property.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from sysutil.core.exceptions import NumberFormatError
from sysutil.units.constants import (
    ERROR_INT_OVERFLOW,
    ERROR_INVALID_NUMBER,
    ERROR_OVERFLOW,
    MAX_INT_VALUE,
    MAX_LONG_VALUE,
)
from sysutil.units.parser import parse_duration, parse_size


def _read(
    store: Mapping[str, str],
    name: str,
    default: int | str,
    parse: Callable[[str, str], int],
    limit: int,
    reason: str,
) -> int:
    raw = store.get(name)
    if raw is None and isinstance(default, int):
        raw, value = str(default), default
    else:
        if raw is None:
            raw = default
        value = parse(name, raw)

    if value < 0:
        raise NumberFormatError(name, raw, ERROR_INVALID_NUMBER)
    if value > limit:
        raise NumberFormatError(name, raw, reason)
    return value


def get_size_as_int(store: Mapping[str, str], name: str, default: int | str) -> int:
    """
    Read a size property that must fit a signed 32-bit int.

    Args:
        store: Mapping holding the property.
        name: Property name, also used as the error label.
        default: Used when the property is absent; an int or a suffixed string.

    Raises:
        NumberFormatError: If the value is malformed or exceeds 2**31 - 1.
    """
    return _read(store, name, default, parse_size, MAX_INT_VALUE, ERROR_INT_OVERFLOW)


def get_size_as_long(store: Mapping[str, str], name: str, default: int | str) -> int:
    """Read a size property in bytes, falling back to default when absent."""
    return _read(store, name, default, parse_size, MAX_LONG_VALUE, ERROR_OVERFLOW)


def get_duration_in_nanos(store: Mapping[str, str], name: str, default: int | str) -> int:
    """Read a duration property in nanoseconds, falling back to default when absent."""
    return _read(store, name, default, parse_duration, MAX_LONG_VALUE, ERROR_OVERFLOW)
