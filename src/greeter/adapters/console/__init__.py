"""Console adapter - stdout writer for the greeting run.

Contents:
    * :func:`.writer.write_stdout` - verbatim, unterminated stdout writes
"""

from __future__ import annotations

from .writer import write_stdout

__all__ = ["write_stdout"]
