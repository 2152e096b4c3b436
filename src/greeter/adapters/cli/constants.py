"""Click settings and traceback budgets shared by the greeter commands."""

from __future__ import annotations

from typing import Any, Final

#: ``-h`` works everywhere ``--help`` does.
HELP_OPTIONS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: Words and flags nobody asked for are tolerated rather than rejected,
#: since a greeting run takes no arguments at all.
TOLERANT_SETTINGS: Final[dict[str, Any]] = {
    **HELP_OPTIONS,
    "ignore_unknown_options": True,
    "allow_extra_args": True,
}

#: Characters of an error summary printed without ``--traceback``.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Characters of the full traceback printed with ``--traceback``.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

__all__ = [
    "HELP_OPTIONS",
    "TOLERANT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
