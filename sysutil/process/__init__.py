"""Process identity and platform queries."""

from sysutil.process.identity import PID_NOT_FOUND, get_pid
from sysutil.process.platform import (
    is_debugger_attached,
    is_linux,
    is_windows,
    os_name,
    thread_dump,
    tmp_dir_name,
)

__all__ = [
    "PID_NOT_FOUND",
    "get_pid",
    "is_debugger_attached",
    "is_linux",
    "is_windows",
    "os_name",
    "thread_dump",
    "tmp_dir_name",
]
