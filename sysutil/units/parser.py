"""Parse suffix-annotated sizes and durations.

Sizes take an optional binary suffix (k, m, g: powers of 1024) and yield bytes.
Durations take an optional time suffix (ns, us, ms, s) and yield nanoseconds.
Suffixes are case-insensitive. Every failure raises NumberFormatError carrying
the caller's label so the offending property can be named in the message.

Example:
    >>> parse_size("buffer.length", "64k")
    65536
    >>> parse_duration("linger.timeout", "5ms")
    5000000
"""

from __future__ import annotations

import re
from typing import Final, Mapping

from sysutil.core.exceptions import NumberFormatError
from sysutil.units.constants import (
    DURATION_UNITS,
    ERROR_EMPTY_NUMBER,
    ERROR_INVALID_NUMBER,
    ERROR_OVERFLOW,
    ERROR_UNKNOWN_DURATION_SUFFIX,
    ERROR_UNKNOWN_SIZE_SUFFIX,
    MAX_LONG_VALUE,
    SIZE_UNITS,
)

# int() also accepts signs, whitespace, underscores and non-ASCII digits
_DIGITS: Final[re.Pattern[str]] = re.compile(r"[0-9]+")

_SIZE_SUFFIX_CHARS: Final[frozenset[str]] = frozenset("kKmMgG")
_DURATION_PREFIX_CHARS: Final[frozenset[str]] = frozenset("nNuUmM")


def _split_size_suffix(label: str, value: str) -> tuple[str, str]:
    last = value[-1]
    if last in _SIZE_SUFFIX_CHARS:
        return value[:-1], last
    if last.isascii() and last.isdigit():
        return value, ""
    raise NumberFormatError(label, value, ERROR_UNKNOWN_SIZE_SUFFIX)


def _split_duration_suffix(label: str, value: str) -> tuple[str, str]:
    last = value[-1]
    if last in "sS":
        if len(value) > 1:
            prior = value[-2]
            if prior in _DURATION_PREFIX_CHARS:
                return value[:-2], value[-2:]
            if not (prior.isascii() and prior.isdigit()):
                raise NumberFormatError(label, value, ERROR_UNKNOWN_DURATION_SUFFIX)
        return value[:-1], last
    if last.isascii() and last.isdigit():
        return value, ""
    raise NumberFormatError(label, value, ERROR_UNKNOWN_DURATION_SUFFIX)


def _scale(label: str, value: str, digits: str, suffix: str, units: Mapping[str, int]) -> int:
    if not digits:
        raise NumberFormatError(label, value, ERROR_EMPTY_NUMBER)
    if _DIGITS.fullmatch(digits) is None:
        raise NumberFormatError(label, value, ERROR_INVALID_NUMBER)

    number = int(digits)
    if number > MAX_LONG_VALUE:
        raise NumberFormatError(label, value, ERROR_OVERFLOW)

    multiplier = units[suffix.lower()]
    if number > MAX_LONG_VALUE // multiplier:
        raise NumberFormatError(label, value, ERROR_OVERFLOW)

    return number * multiplier


def parse_size(label: str, value: str) -> int:
    """
    Parse a size with an optional k/m/g suffix into a number of bytes.

    Args:
        label: Context for error messages, usually the property name.
        value: Digits followed by an optional single suffix character.

    Returns:
        The size in bytes.

    Raises:
        NumberFormatError: If the value is empty, has an unknown suffix,
            has a non-digit mantissa, or the result overflows a 64-bit long.
    """
    if not value:
        raise NumberFormatError(label, value, ERROR_EMPTY_NUMBER)

    digits, suffix = _split_size_suffix(label, value)
    return _scale(label, value, digits, suffix, SIZE_UNITS)


def parse_duration(label: str, value: str) -> int:
    """
    Parse a duration with an optional ns/us/ms/s suffix into nanoseconds.

    A value with no suffix is already in nanoseconds.

    Args:
        label: Context for error messages, usually the property name.
        value: Digits followed by an optional one or two character suffix.

    Returns:
        The duration in nanoseconds.

    Raises:
        NumberFormatError: If the value is empty, has an unknown suffix,
            has a non-digit mantissa, or the result overflows a 64-bit long.
    """
    if not value:
        raise NumberFormatError(label, value, ERROR_EMPTY_NUMBER)

    digits, suffix = _split_duration_suffix(label, value)
    return _scale(label, value, digits, suffix, DURATION_UNITS)
