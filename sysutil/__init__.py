"""sysutil: configuration glue for host startup code.

- Size strings ("64k", "2g") to bytes
- Duration strings ("10ms", "5s") to nanoseconds
- Flat .properties resources merged into a caller-owned store
- Process id resolution with a not-found sentinel
"""

from sysutil.core.exceptions import (
    ConfigurationError,
    NumberFormatError,
    PropertiesParseError,
    SysUtilError,
)
from sysutil.process import PID_NOT_FOUND, get_pid
from sysutil.properties import (
    PropertyAction,
    get_duration_in_nanos,
    get_size_as_int,
    get_size_as_long,
    load_configured_properties,
    load_properties_file,
    load_properties_files,
)
from sysutil.units import parse_duration, parse_size

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "NumberFormatError",
    "PID_NOT_FOUND",
    "PropertiesParseError",
    "PropertyAction",
    "SysUtilError",
    "__version__",
    "get_duration_in_nanos",
    "get_pid",
    "get_size_as_int",
    "get_size_as_long",
    "load_configured_properties",
    "load_properties_file",
    "load_properties_files",
    "parse_duration",
    "parse_size",
]
