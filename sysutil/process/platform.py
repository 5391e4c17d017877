"""Queries about the host platform and interpreter."""

from __future__ import annotations

import os
import platform
import sys
import tempfile
import threading
import traceback
from typing import Final

# Modules whose presence means an IDE debugger is driving the process
_DEBUGGER_MODULES: Final[tuple[str, ...]] = ("pydevd", "debugpy")


def os_name() -> str:
    """Lower-cased operating system name, e.g. 'linux', 'windows', 'darwin'."""
    return platform.system().lower()


def is_windows() -> bool:
    return os_name().startswith("win")


def is_linux() -> bool:
    return os_name().startswith("linux")


def tmp_dir_name() -> str:
    """Temporary directory path, always ending with a path separator."""
    name = tempfile.gettempdir()
    if not name.endswith(os.sep):
        name += os.sep
    return name


def is_debugger_attached() -> bool:
    """True when a trace function is installed or a debugger module is loaded."""
    if sys.gettrace() is not None:
        return True
    return any(module in sys.modules for module in _DEBUGGER_MODULES)


def thread_dump() -> str:
    """
    Render the current stack of every live thread.

    Returns:
        One block per thread: a header line with name, ident and daemon flag,
        followed by the formatted stack frames.
    """
    frames = sys._current_frames()
    blocks: list[str] = []

    for thread in threading.enumerate():
        header = f'"{thread.name}" id={thread.ident} daemon={thread.daemon}'
        frame = frames.get(thread.ident) if thread.ident is not None else None
        stack = "".join(traceback.format_stack(frame)) if frame is not None else ""
        blocks.append(f"{header}\n{stack}")

    return "\n".join(blocks)
