"""Greeting use case orchestrating domain data and the output port."""

from __future__ import annotations

from ..domain.behaviors import build_greetings
from .ports import WriteOutput


def emit_greetings(write: WriteOutput) -> None:
    """Write Greeting A, then Greeting B, through ``write``.

    Each greeting is handed over as a plain literal; nothing is interpolated
    or formatted on the way. Errors raised by ``write`` propagate unchanged.

    Args:
        write: Output port receiving one call per greeting.

    Example:
        >>> chunks: list[str] = []
        >>> emit_greetings(chunks.append)
        >>> chunks
        ['Hello World1', 'Hello World2']
    """
    for greeting in build_greetings():
        write(greeting)


__all__ = ["emit_greetings"]
