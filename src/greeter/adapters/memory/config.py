"""Configuration double: an empty Config, no files or environment read."""

from __future__ import annotations

from lib_layered_config import Config


def get_config_in_memory(*, start_dir: str | None = None) -> Config:
    """Return an empty Config; ``start_dir`` is accepted and ignored.

    Example:
        >>> get_config_in_memory().as_dict()
        {}
    """
    return Config({}, {})


__all__ = ["get_config_in_memory"]
