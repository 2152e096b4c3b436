"""Callable Protocols the greeting run and the CLI depend on.

Adapters are plain functions or bound methods; each one matches the
``__call__`` signature of its Protocol structurally, so nothing has to
inherit from these classes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Return the merged configuration that drives logging."""

    def __call__(self, *, start_dir: str | None = ...) -> Config: ...


class InitLogging(Protocol):
    """Bring up logging from the ``[lib_log_rich]`` section of ``config``."""

    def __call__(self, config: Config) -> None: ...


class WriteOutput(Protocol):
    """Put ``text`` on the program's output stream as is, unterminated."""

    def __call__(self, text: str) -> None: ...


__all__ = [
    "GetConfig",
    "InitLogging",
    "WriteOutput",
]
