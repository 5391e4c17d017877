"""
sysutil - Custom Exceptions

Anti-Patterns Avoided:
- Exception shadowing: NumberFormatError and PropertiesParseError are namespaced
  under SysUtilError instead of reusing bare builtins
"""

from __future__ import annotations


class SysUtilError(Exception):
    """Base exception for sysutil.

    All custom exceptions inherit from this base class.
    """
    pass


class NumberFormatError(SysUtilError, ValueError):
    """Raised when a size or duration string cannot be converted.

    Covers a malformed numeric prefix, an unrecognised unit suffix and
    overflow of the signed 64-bit range.

    Attributes:
        label: Caller supplied context, usually the property name.
        value: The offending raw string.
        reason: Short description of what went wrong.
    """

    def __init__(self, label: str, value: str, reason: str) -> None:
        super().__init__(f"{label}: {reason}: {value!r}")
        self.label = label
        self.value = value
        self.reason = reason


class PropertiesParseError(SysUtilError):
    """Raised when one or more property resources exist but cannot be loaded.

    Attributes:
        failures: Resource name mapped to the underlying read, decode or parse error,
            in the order the resources were processed.
    """

    def __init__(self, failures: dict[str, Exception]) -> None:
        names = ", ".join(failures)
        super().__init__(f"malformed property resource(s): {names}")
        self.failures = failures


class ConfigurationError(SysUtilError):
    """Raised when configuration is invalid or missing."""
    pass
