"""Public package surface exposing the greetings, metadata, and configuration.

Routes imports through the architectural layers:
- Domain exports: greeting literals and their order
- Application exports: the greeting run
- Composition exports: wired adapter services (configuration)
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.use_cases import emit_greetings

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
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
    "emit_greetings",
    "get_config",
    "print_info",
    "render_greetings",
]
