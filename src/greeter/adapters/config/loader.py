"""Layered configuration for greeter's logging settings.

lib_layered_config merges, lowest precedence first: the bundled
``defaultconfig.toml``, app, host and user files, ``.env`` and environment
variables. Only the ``[lib_log_rich]`` section is consumed.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import Config, read_config

from greeter import __init__conf__

BUNDLED_DEFAULTS: Path = Path(__file__).with_name("defaultconfig.toml")


@lru_cache(maxsize=4)
def get_config(*, start_dir: str | None = None) -> Config:
    """Read and merge every configuration layer, once per ``start_dir``.

    Args:
        start_dir: Where ``.env`` discovery begins; the working directory
            when ``None``.

    Example:
        >>> get_config().get("lib_log_rich.console_level")
        'WARNING'
    """
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        default_file=BUNDLED_DEFAULTS,
        start_dir=start_dir,
    )


__all__ = ["BUNDLED_DEFAULTS", "get_config"]
