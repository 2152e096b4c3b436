"""Command-line surface of greeter.

``cli`` is the rich-click root group; ``main`` runs it and turns the
outcome into a process exit code.
"""

from __future__ import annotations

from .commands import cli_greet, cli_info, run_greetings
from .context import (
    CLIContext,
    apply_traceback_preferences,
    get_cli_context,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .main import main
from .root import cli

__all__ = [
    "CLIContext",
    "apply_traceback_preferences",
    "cli",
    "cli_greet",
    "cli_info",
    "get_cli_context",
    "main",
    "restore_traceback_state",
    "run_greetings",
    "snapshot_traceback_state",
    "store_cli_context",
]
