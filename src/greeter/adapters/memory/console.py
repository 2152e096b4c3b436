"""In-memory console adapter capturing greeting writes."""

from __future__ import annotations

from dataclasses import dataclass, field


def _empty_writes() -> list[str]:
    return []


@dataclass
class OutputSpy:
    """Records every chunk handed to the WriteOutput port.

    Each test should create its own spy. ``write`` matches the WriteOutput
    Protocol, so the bound method can be wired straight into AppServices.

    Attributes:
        writes: Chunks in the order they were written.
        raise_exception: When set, ``write`` raises it instead of recording,
            e.g. ``BrokenPipeError()`` to mimic a closed stdout.

    Example:
        >>> spy = OutputSpy()
        >>> spy.write("Hello World1")
        >>> spy.write("Hello World2")
        >>> spy.output
        'Hello World1Hello World2'
    """

    writes: list[str] = field(default_factory=_empty_writes)
    raise_exception: BaseException | None = None

    def clear(self) -> None:
        """Forget captured writes and any configured failure."""
        self.writes.clear()
        self.raise_exception = None

    def write(self, text: str) -> None:
        """Record ``text``, or raise the configured exception."""
        if self.raise_exception is not None:
            raise self.raise_exception
        self.writes.append(text)

    @property
    def output(self) -> str:
        """Everything written so far, concatenated."""
        return "".join(self.writes)


__all__ = ["OutputSpy"]
