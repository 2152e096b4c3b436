"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from typing import Final

GREETING_A: Final[str] = "Hello World1"
GREETING_B: Final[str] = "Hello World2"

#: Greetings in emission order. Greeting A is always written before Greeting B.
GREETINGS: Final[tuple[str, str]] = (GREETING_A, GREETING_B)


def build_greetings() -> tuple[str, ...]:
    r"""Return the greetings in the order they are written.

    Returns:
        Tuple holding Greeting A followed by Greeting B.

    Example:
        >>> build_greetings()
        ('Hello World1', 'Hello World2')
    """
    return GREETINGS


def render_greetings() -> str:
    """Return the exact text a greeting run puts on stdout.

    No separator and no trailing newline.

    Example:
        >>> render_greetings()
        'Hello World1Hello World2'
    """
    return "".join(GREETINGS)


__all__ = [
    "GREETINGS",
    "GREETING_A",
    "GREETING_B",
    "build_greetings",
    "render_greetings",
]
