"""Application layer: the greeting run and the ports it is wired through.

Contents:
    * :mod:`.ports` - Protocols for configuration, logging and output
    * :mod:`.use_cases` - :func:`emit_greetings`
"""

from __future__ import annotations

from .ports import GetConfig, InitLogging, WriteOutput
from .use_cases import emit_greetings

__all__ = [
    "GetConfig",
    "InitLogging",
    "WriteOutput",
    "emit_greetings",
]
