"""Console script entry point (``greeter``) with production wiring.

Lives at package level so the composition root can be handed to the CLI
adapter without the adapters importing composition themselves.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``greeter`` command with production services.

    Returns:
        Exit code from CLI execution; 0 for a plain greeting run.
    """
    return cli_main(services_factory=build_production)


__all__ = ["main"]
