"""Port contract tests for the in-memory adapters and composition wiring.

Production adapters are exercised through the CLI integration tests;
static conformance is checked by pyright in the composition modules.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from lib_layered_config import Config

from greeter.adapters.memory import OutputSpy, get_config_in_memory, init_logging_in_memory
from greeter.composition import AppServices, build_production, build_testing

if TYPE_CHECKING:
    from greeter.application.ports import GetConfig, InitLogging, WriteOutput


@pytest.fixture
def get_config_impl() -> GetConfig:
    """Provide in-memory GetConfig implementation."""
    return get_config_in_memory


@pytest.fixture
def init_logging_impl() -> InitLogging:
    """Provide in-memory InitLogging implementation."""
    return init_logging_in_memory


@pytest.mark.os_agnostic
def test_get_config_returns_empty_config(get_config_impl: GetConfig) -> None:
    """GetConfig returns an empty Config, whatever the start directory."""
    config = get_config_impl(start_dir="/nowhere")
    assert isinstance(config, Config)
    assert config.as_dict() == {}


@pytest.mark.os_agnostic
def test_init_logging_does_not_raise(init_logging_impl: InitLogging) -> None:
    """InitLogging accepts any Config."""
    init_logging_impl(Config({}, {}))


# ======================== OutputSpy ========================


@pytest.mark.os_agnostic
def test_output_spy_records_writes_in_order() -> None:
    """Writes are kept in call order and joined without separators."""
    spy = OutputSpy()
    write: WriteOutput = spy.write

    write("a")
    write("b")

    assert spy.writes == ["a", "b"]
    assert spy.output == "ab"


@pytest.mark.os_agnostic
def test_output_spy_raises_configured_exception() -> None:
    """raise_exception simulates a failing stream."""
    spy = OutputSpy(raise_exception=BrokenPipeError())

    with pytest.raises(BrokenPipeError):
        spy.write("lost")
    assert spy.writes == []


@pytest.mark.os_agnostic
def test_output_spy_clear_resets_state() -> None:
    """clear() forgets writes and the configured failure."""
    spy = OutputSpy(raise_exception=OSError())
    spy.writes.append("stale")

    spy.clear()
    spy.write("fresh")

    assert spy.writes == ["fresh"]


# ======================== Composition wiring ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize("factory", [build_production, build_testing])
def test_factories_return_callable_services(factory: object) -> None:
    """Every AppServices field is a callable port implementation."""
    services = factory()  # type: ignore[operator]
    assert isinstance(services, AppServices)
    for name in services.__dataclass_fields__:
        assert callable(getattr(services, name))


@pytest.mark.os_agnostic
def test_build_testing_routes_output_to_given_spy() -> None:
    """A caller-supplied spy receives the writes."""
    spy = OutputSpy()
    services = build_testing(spy=spy)

    services.write_output("Hello World1")

    assert spy.writes == ["Hello World1"]


@pytest.mark.os_agnostic
def test_app_services_is_frozen() -> None:
    """AppServices cannot be mutated after wiring."""
    services = build_testing()
    with pytest.raises(AttributeError):
        services.write_output = print  # type: ignore[misc]
