"""Resolve the identifier of the running process.

get_pid() never raises: when the identity source fails or reports something
that is not a nonnegative integer, it returns PID_NOT_FOUND.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Final

from sysutil.core.logging import get_logger

logger = get_logger(__name__)

PID_NOT_FOUND: Final[int] = -1


def get_pid(source: Callable[[], object] = os.getpid) -> int:
    """
    Return the current process id, or PID_NOT_FOUND.

    Args:
        source: Identity source; may return an int or its decimal text.

    Returns:
        The process id, or PID_NOT_FOUND when it cannot be determined.
    """
    try:
        reported = source()
    except (OSError, AttributeError, NotImplementedError) as exc:
        logger.debug("pid_not_found", error=str(exc))
        return PID_NOT_FOUND

    text = str(reported).strip()
    if not (text.isascii() and text.isdigit()):
        logger.debug("pid_not_found", reported=text)
        return PID_NOT_FOUND

    return int(text)
