"""Domain layer: the greeting literals and the order they are written in.

Contents:
    * :mod:`.behaviors` - Greeting constants and their fixed sequence
"""

from __future__ import annotations

from .behaviors import (
    GREETING_A,
    GREETING_B,
    GREETINGS,
    build_greetings,
    render_greetings,
)

__all__ = [
    "GREETINGS",
    "GREETING_A",
    "GREETING_B",
    "build_greetings",
    "render_greetings",
]
