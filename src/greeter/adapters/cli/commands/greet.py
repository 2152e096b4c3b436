"""Greeting and metadata commands.

Contents:
    * :func:`run_greetings` - The greeting run shared with the bare root command.
    * :func:`cli_greet` - Emit both greetings.
    * :func:`cli_info` - Display package metadata.
"""

from __future__ import annotations

import contextlib
import logging
from contextlib import AbstractContextManager
from typing import Any

import lib_cli_exit_tools
import lib_log_rich.runtime
import rich_click as click

from greeter import __init__conf__
from greeter.application.use_cases import emit_greetings

from ..constants import TOLERANT_SETTINGS
from ..context import CLIContext, get_cli_context

logger = logging.getLogger(__name__)


def _job_scope(job_id: str, command: str) -> AbstractContextManager[Any]:
    """Bind ``job_id`` and ``command`` to log records while a runtime is up.

    Services wired without lib_log_rich (``build_testing``) get a plain
    null context, so commands run the same either way.
    """
    if not lib_log_rich.runtime.is_initialised():
        return contextlib.nullcontext()
    return lib_log_rich.runtime.bind(job_id=job_id, extra={"command": command})


def run_greetings(cli_ctx: CLIContext, *, command: str) -> None:
    """Write Greeting A then Greeting B through the configured output port.

    A reader that closes stdout early ends the run with the broken-pipe
    exit code from ``lib_cli_exit_tools`` (141) and nothing on stderr.

    Args:
        cli_ctx: Context holding the wired services.
        command: Name recorded in the log context (``greeter`` or ``greet``).

    Raises:
        SystemExit: Stdout was closed by its reader.
    """
    with _job_scope("cli-greet", command):
        logger.info("Emitting greetings")
        try:
            emit_greetings(cli_ctx.services.write_output)
        except BrokenPipeError as exc:
            # Click would turn EPIPE into a bare exit status 1.
            logger.debug("Stdout closed by reader", exc_info=exc)
            raise SystemExit(lib_cli_exit_tools.get_system_exit_code(exc)) from exc


@click.command("greet", context_settings=TOLERANT_SETTINGS)
@click.pass_context
def cli_greet(ctx: click.Context) -> None:
    """Print "Hello World1" followed by "Hello World2".

    Same output as running the program without a command: no separator,
    no trailing newline.
    """
    run_greetings(get_cli_context(ctx), command="greet")


@click.command("info", context_settings=TOLERANT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""
    with _job_scope("cli-info", "info"):
        logger.info("Displaying package information")
        __init__conf__.print_info()


__all__ = ["cli_greet", "cli_info", "run_greetings"]
