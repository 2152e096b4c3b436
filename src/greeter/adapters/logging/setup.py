"""lib_log_rich runtime setup shared by every entry point.

The root command calls :func:`init_logging` once the layered configuration
is loaded; console scripts, ``python -m`` and tests all go through it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from greeter import __init__conf__


class LoggingConfigModel(BaseModel):
    """Validated view of the ``[lib_log_rich]`` section.

    ``service`` and ``environment`` are typed here; every other key is kept
    as an extra and forwarded to ``RuntimeConfig`` untouched.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(console_level="WARNING").model_extra
        {'console_level': 'WARNING'}
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a ``RuntimeConfig``.

    The service name falls back to the package name when unset.
    """
    section: Any = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(dict(section) if isinstance(section, Mapping) else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Start the lib_log_rich runtime unless it is already running.

    Enables ``.env`` discovery so ``LOG_*`` variables apply, initialises
    the runtime from ``config`` and bridges stdlib ``logging`` into it.
    Later calls return immediately.

    Args:
        config: Loaded configuration; only ``[lib_log_rich]`` is read.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
