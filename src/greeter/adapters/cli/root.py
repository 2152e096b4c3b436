"""Root command group of the greeter CLI.

``greeter`` with no command, or with words and flags it does not know,
performs the greeting run. ``--traceback`` and ``--set`` are applied
here, before any subcommand runs.

Contents:
    * :class:`GreeterGroup` - Group that falls back to ``greet``.
    * :func:`cli` - The root group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from greeter import __init__conf__
from greeter.adapters.config.overrides import apply_overrides

from .constants import TOLERANT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from greeter.composition import AppServices

#: Subcommand that stands in for anything the group cannot resolve.
FALLBACK_COMMAND = "greet"


class GreeterGroup(click.RichGroup):
    """Rich group that hands unrecognised arguments to :data:`FALLBACK_COMMAND`.

    The leftover arguments are dropped, so ``greeter extra --flag`` greets
    exactly like ``greeter``.
    """

    def resolve_command(self, ctx: click.Context, args: list[str]) -> tuple[str | None, click.Command | None, list[str]]:
        if self.get_command(ctx, args[0]) is not None:
            return super().resolve_command(ctx, args)
        return FALLBACK_COMMAND, self.get_command(ctx, FALLBACK_COMMAND), []


def _merge_set_options(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Layer ``--set`` values over ``config``; bad ones become usage errors (exit 2)."""
    try:
        return apply_overrides(config, set_overrides)
    except (TypeError, ValueError) as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    cls=GreeterGroup,
    help=__init__conf__.title,
    context_settings=TOLERANT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Print the full Python traceback when the run fails",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override a logging setting for this run, e.g. lib_log_rich.console_level=DEBUG (repeatable)",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, set_overrides: tuple[str, ...]) -> None:
    """Resolve services, configuration and logging, then greet unless a command follows."""
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = factory()
    config = _merge_set_options(services.get_config(), set_overrides)
    services.init_logging(config)
    cli_ctx = store_cli_context(ctx, services=services, config=config, traceback=traceback)
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        from .commands import run_greetings

        run_greetings(cli_ctx, command=__init__conf__.shell_command)


# The command modules import from this package, so they are attached last.
def _register_commands() -> None:
    from .commands import cli_greet, cli_info

    cli.add_command(cli_greet)
    cli.add_command(cli_info)


_register_commands()


__all__ = ["FALLBACK_COMMAND", "GreeterGroup", "cli"]
