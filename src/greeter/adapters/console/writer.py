"""Stdout writer backing the WriteOutput port.

Writes each chunk verbatim and unterminated, flushing pending log records
first so log output and greeting bytes never interleave.
"""

from __future__ import annotations

import io
import os
import sys

import lib_log_rich.runtime
import rich_click as click


def _detach_stdout() -> None:
    """Point the stdout descriptor at the null device.

    Whatever is still buffered for a reader that has gone away is then
    discarded at interpreter exit instead of failing a second time.
    Streams without a descriptor (test runners, StringIO) are left alone.
    """
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, io.UnsupportedOperation):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, fd)
    finally:
        os.close(devnull)


def write_stdout(text: str) -> None:
    """Write ``text`` to stdout exactly as given.

    No newline is appended and no format directives are interpreted.
    ``click.echo`` flushes the stream after writing, so each chunk is fully
    emitted before the next one starts.

    Args:
        text: Literal text to write.

    Raises:
        BrokenPipeError: The reading end of stdout is closed. Stdout is
            detached before the error propagates.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    try:
        click.echo(text, nl=False)
    except BrokenPipeError:
        _detach_stdout()
        raise


__all__ = ["write_stdout"]
