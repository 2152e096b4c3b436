"""Per-run CLI state and the traceback switches of lib_cli_exit_tools.

The root command swaps ``ctx.obj`` from the services factory to a
:class:`CLIContext`; subcommands read it back with :func:`get_cli_context`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from greeter.composition import AppServices

#: ``(traceback, traceback_force_color)`` as held by ``lib_cli_exit_tools.config``.
TracebackState = tuple[bool, bool]


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Services and settings resolved by the root command."""

    services: AppServices
    config: Config
    traceback: bool = False


def store_cli_context(ctx: click.Context, *, services: AppServices, config: Config, traceback: bool) -> CLIContext:
    """Replace the services factory in ``ctx.obj`` with the resolved state."""
    cli_ctx = CLIContext(services=services, config=config, traceback=traceback)
    ctx.obj = cli_ctx
    return cli_ctx


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return what :func:`store_cli_context` put on ``ctx`` or one of its parents.

    Raises:
        RuntimeError: The root command never ran for this context.
    """
    obj = ctx.find_object(CLIContext)
    if obj is None:
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off for error reporting.

    Example:
        >>> apply_traceback_preferences(False)
        >>> lib_cli_exit_tools.config.traceback
        False
    """
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = enabled


def snapshot_traceback_state() -> TracebackState:
    cfg = lib_cli_exit_tools.config
    return bool(cfg.traceback), bool(cfg.traceback_force_color)


def restore_traceback_state(state: TracebackState) -> None:
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = state


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
