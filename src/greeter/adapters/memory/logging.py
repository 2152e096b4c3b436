"""Logging double for runs that must not start lib_log_rich."""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Leave the runtime down; greeting and info runs then log through stdlib only."""


__all__ = ["init_logging_in_memory"]
