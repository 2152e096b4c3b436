"""Process boundary of the CLI: run the root group, return an exit code.

Used by both the ``greeter`` console script and ``python -m greeter``.

Contents:
    * :func:`main` - Run the CLI and return its exit code.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from greeter import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import restore_traceback_state, snapshot_traceback_state
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from greeter.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    """Print ``exc`` (in full with ``--traceback``) and map it to an exit code."""
    verbose = bool(lib_cli_exit_tools.config.traceback)
    limit = TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    """Drive the root group in non-standalone mode.

    ``lib_cli_exit_tools.run_cli`` has no way to pass ``obj``, so Click is
    called directly and the library only formats errors and picks codes.
    """
    from .root import cli

    try:
        result = cli.main(
            args=list(sys.argv[1:] if argv is None else argv),
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except (SystemExit, BrokenPipeError) as exc:
        # Both already carry their exit status; nothing is printed.
        return lib_cli_exit_tools.handle_cli_exception(exc)
    except BaseException as exc:
        return _report_failure(exc)
    # Non-standalone Click returns the code of an explicit ctx.exit(), e.g. --version.
    return result if isinstance(result, int) else ExitCode.SUCCESS


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run greeter and return its exit code.

    Args:
        argv: Arguments without the program name; ``sys.argv`` when ``None``.
        restore_traceback: Put the traceback flags back as they were found.
        services_factory: Builds the AppServices for this run; callers
            outside the adapters pass ``build_production``.

    Returns:
        0 after a greeting run; otherwise the mapped failure code.

    Raises:
        ValueError: No services factory was given.
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    saved = snapshot_traceback_state()
    try:
        return _run_cli(argv, services_factory=services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(saved)
        # Only the main thread owns the logging runtime.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
