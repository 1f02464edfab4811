# topmark:header:start
#
#   project      : PluginYml
#   file         : version.py
#   file_relpath : src/pluginyml/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PluginYml `version` command.

Prints the current PluginYml version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pluginyml.cli.cli_types import OutputFormat
from pluginyml.cli.cmd_common import get_console, get_effective_verbosity
from pluginyml.cli.options import output_format_option
from pluginyml.constants import PLUGINYML_VERSION
from pluginyml.machine import build_meta_payload, serialize_json_object, serialize_ndjson

if TYPE_CHECKING:
    from pluginyml.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of PluginYml.",
)
@output_format_option
@click.pass_context
def version_command(ctx: click.Context, *, output_format: OutputFormat) -> None:
    """Show the current version of PluginYml.

    Args:
        ctx (click.Context): Current Click context.
        output_format (OutputFormat): Plain text, JSON or NDJSON.
    """
    console: ConsoleLike = get_console(ctx)

    if output_format is OutputFormat.JSON:
        console.print(serialize_json_object(build_meta_payload()))
    elif output_format is OutputFormat.NDJSON:
        console.print(serialize_ndjson([{"kind": "version", **build_meta_payload()}]), nl=False)
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("PluginYml version:", bold=True, underline=True))
        console.print(f"    {console.styled(PLUGINYML_VERSION, bold=True)}")
    else:
        console.print(PLUGINYML_VERSION)
