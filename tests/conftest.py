"""Shared pytest fixtures for CLI, adapter, and module-entry tests.

Service factories come in two flavours: ``production_factory`` for the real
adapters, and ``output_cli_context`` for in-memory doubles that record what the
CLI wrote and which configuration reached the logging port.
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import lib_log_rich.runtime
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from greeter.adapters.memory.console import OutputSpy
    from greeter.composition import AppServices

_COVERAGE_BASENAME = ".coverage.greeter"


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database on a local temp directory.

    SQLite locking is unreliable on network mounts, and sidecar files left by
    a crashed run make the next open fail with "database is locked".
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        for suffix in ("", "-journal", "-wal", "-shm"):
            with contextlib.suppress(FileNotFoundError):
                Path(str(cov_path) + suffix).unlink()
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load a project-level .env for local test configuration, if present."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when the exact bytes matter; ``result.output``
    may also carry stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the ``build_production`` services factory."""
    from greeter.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def quiet_logging_runtime() -> Iterator[None]:
    """Run the test with no lib_log_rich runtime left over from earlier tests."""
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()
    yield
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Forget configuration read by earlier tests."""
    from greeter.adapters.config.loader import get_config

    get_config.cache_clear()
    yield


@dataclass
class OutputCliContext:
    """Services factory plus what its doubles recorded during a run.

    Attributes:
        factory: Passed to the CLI as ``obj`` or ``services_factory``.
        spy: Receives the greeting writes instead of stdout.
        logging_configs: Every Config handed to ``init_logging``.
    """

    factory: Callable[[], AppServices]
    spy: OutputSpy
    logging_configs: list[Config] = field(default_factory=list)


@pytest.fixture
def output_cli_context() -> Callable[..., OutputCliContext]:
    """Return a builder for in-memory services around a given config dict.

    Stdout is an OutputSpy and logging is never started; the config seen
    by the logging port is recorded instead.

    Example:
        def test_greet(cli_runner, output_cli_context) -> None:
            ctx = output_cli_context()
            cli_runner.invoke(cli, ["greet"], obj=ctx.factory)
            assert ctx.spy.output == "Hello World1Hello World2"
    """
    from greeter.adapters.memory.console import OutputSpy as OutputSpyImpl
    from greeter.composition import build_testing

    def _create(config_data: dict[str, Any] | None = None) -> OutputCliContext:
        spy = OutputSpyImpl()
        config = Config(config_data or {}, {})
        recorded: list[Config] = []

        def _fixed_config(**_kwargs: Any) -> Config:
            return config

        services = replace(build_testing(spy=spy), get_config=_fixed_config, init_logging=recorded.append)
        return OutputCliContext(factory=lambda: services, spy=spy, logging_configs=recorded)

    return _create
