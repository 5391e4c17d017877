"""Size and duration parsing for suffix-annotated configuration values."""

from sysutil.units.parser import parse_duration, parse_size

__all__ = ["parse_duration", "parse_size"]
