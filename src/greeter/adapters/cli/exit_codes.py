"""Exit statuses a greeter process can finish with.

Only :attr:`ExitCode.SUCCESS` is produced by greeter itself; the others
come from Click (usage errors) and ``lib_cli_exit_tools`` (signals,
broken pipes, uncaught exceptions).
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Shell-conventional statuses; signal codes are 128 + signal number.

    Example:
        >>> ExitCode.BROKEN_PIPE - 128
        13
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
