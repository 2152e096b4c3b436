"""In-memory stand-ins for every port, used by ``build_testing``.

Nothing here reads configuration files, writes to stdout or starts the
lib_log_rich runtime.

Contents:
    * :mod:`.config` - empty configuration
    * :mod:`.console` - :class:`OutputSpy` recording greeting writes
    * :mod:`.logging` - logging initialiser that does nothing
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import get_config_in_memory
from .console import OutputSpy
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from greeter.application.ports import GetConfig, InitLogging, WriteOutput

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_write_output: WriteOutput = OutputSpy().write

__all__ = [
    "OutputSpy",
    "get_config_in_memory",
    "init_logging_in_memory",
]
