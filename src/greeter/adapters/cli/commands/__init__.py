"""Subcommands registered on the root group."""

from __future__ import annotations

from .greet import cli_greet, cli_info, run_greetings

__all__ = ["cli_greet", "cli_info", "run_greetings"]
