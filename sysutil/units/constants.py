"""
Constants for size and duration parsing.

Unit tables are read-only mappings keyed by the lower-cased suffix.

Usage:
    from sysutil.units.constants import SIZE_UNITS, MAX_LONG_VALUE
"""

from types import MappingProxyType
from typing import Final, Mapping

# =============================================================================
# Value Range
# =============================================================================

# Results must fit a signed 64-bit long.
MAX_LONG_VALUE: Final[int] = 2**63 - 1
MAX_INT_VALUE: Final[int] = 2**31 - 1


# =============================================================================
# Unit Tables
# =============================================================================

KILOBYTE: Final[int] = 1024
MEGABYTE: Final[int] = 1024 * KILOBYTE
GIGABYTE: Final[int] = 1024 * MEGABYTE

SIZE_UNITS: Final[Mapping[str, int]] = MappingProxyType({
    "": 1,
    "k": KILOBYTE,
    "m": MEGABYTE,
    "g": GIGABYTE,
})

NANOS_PER_MICRO: Final[int] = 1_000
NANOS_PER_MILLI: Final[int] = 1_000_000
NANOS_PER_SECOND: Final[int] = 1_000_000_000

DURATION_UNITS: Final[Mapping[str, int]] = MappingProxyType({
    "": 1,
    "ns": 1,
    "us": NANOS_PER_MICRO,
    "ms": NANOS_PER_MILLI,
    "s": NANOS_PER_SECOND,
})


# =============================================================================
# Error Reasons
# =============================================================================

ERROR_EMPTY_NUMBER: Final[str] = "no digits before unit suffix"
ERROR_INVALID_NUMBER: Final[str] = "not an unsigned decimal number"
ERROR_UNKNOWN_SIZE_SUFFIX: Final[str] = "size suffix must be one of k, m or g"
ERROR_UNKNOWN_DURATION_SUFFIX: Final[str] = "duration suffix must be one of ns, us, ms or s"
ERROR_OVERFLOW: Final[str] = "would overflow a 64-bit long"
ERROR_INT_OVERFLOW: Final[str] = "would overflow a 32-bit int"


__all__ = [
    "MAX_LONG_VALUE",
    "MAX_INT_VALUE",
    "KILOBYTE",
    "MEGABYTE",
    "GIGABYTE",
    "SIZE_UNITS",
    "NANOS_PER_MICRO",
    "NANOS_PER_MILLI",
    "NANOS_PER_SECOND",
    "DURATION_UNITS",
    "ERROR_EMPTY_NUMBER",
    "ERROR_INVALID_NUMBER",
    "ERROR_UNKNOWN_SIZE_SUFFIX",
    "ERROR_UNKNOWN_DURATION_SUFFIX",
    "ERROR_OVERFLOW",
    "ERROR_INT_OVERFLOW",
]
