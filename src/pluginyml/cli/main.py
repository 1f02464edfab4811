# topmark:header:start
#
#   project      : PluginYml
#   file         : main.py
#   file_relpath : src/pluginyml/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PluginYml command-line entry point.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the console and verbosity from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pluginyml.cli.color import resolve_color_enabled
from pluginyml.cli.commands.check import check_command
from pluginyml.cli.commands.keys import keys_command
from pluginyml.cli.commands.show import show_command
from pluginyml.cli.commands.version import version_command
from pluginyml.cli.console import ClickConsole
from pluginyml.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from pluginyml.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from pluginyml.cli.console_api import ConsoleLike
    from pluginyml.config.logging import PluginYmlLogger

logger: PluginYmlLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment only.
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    enable_color: bool = resolve_color_enabled(no_color=no_color)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Decode and check Bukkit plugin.yml descriptors.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the PluginYml CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'pluginyml check PATH...' to check plugin.yml files.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(check_command)

cli.add_command(show_command)

cli.add_command(keys_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
