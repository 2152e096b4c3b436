"""Wiring of the three ports (config, logging, output) to their adapters.

The CLI receives one of the factories below as ``ctx.obj`` and calls it
once per run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.loader import get_config
from ..adapters.console.writer import write_stdout
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..adapters.memory.console import OutputSpy
    from ..application.ports import GetConfig, InitLogging, WriteOutput

    _assert_get_config: GetConfig = get_config
    _assert_init_logging: InitLogging = init_logging
    _assert_write_output: WriteOutput = write_stdout


@dataclass(frozen=True, slots=True)
class AppServices:
    """Port implementations for one CLI run."""

    get_config: GetConfig
    init_logging: InitLogging
    write_output: WriteOutput


def build_production() -> AppServices:
    """Layered config, lib_log_rich and the real stdout."""
    return AppServices(get_config=get_config, init_logging=init_logging, write_output=write_stdout)


def build_testing(*, spy: OutputSpy | None = None) -> AppServices:
    """Empty config, no logging runtime, and greetings captured by ``spy``.

    Args:
        spy: Receives the writes; a fresh :class:`OutputSpy` when omitted.

    Example:
        >>> from greeter.adapters.memory import OutputSpy
        >>> spy = OutputSpy()
        >>> build_testing(spy=spy).write_output("Hello World1")
        >>> spy.writes
        ['Hello World1']
    """
    from ..adapters.memory import OutputSpy, get_config_in_memory, init_logging_in_memory

    sink = spy if spy is not None else OutputSpy()
    return AppServices(get_config=get_config_in_memory, init_logging=init_logging_in_memory, write_output=sink.write)


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "get_config",
]
