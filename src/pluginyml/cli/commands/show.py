# topmark:header:start
#
#   project      : PluginYml
#   file         : show.py
#   file_relpath : src/pluginyml/cli/commands/show.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PluginYml `show` command.

Prints the decoded record of a single descriptor followed by its diagnostics.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from pluginyml.cli.cli_types import OutputFormat
from pluginyml.cli.cmd_common import (
    decode_path,
    get_console,
    get_effective_verbosity,
    plugin_schema_for,
    resolve_settings,
)
from pluginyml.cli.options import output_format_option, settings_file_option
from pluginyml.cli.render import format_diagnostic, format_record_lines, format_summary
from pluginyml.machine import (
    build_result_payload,
    iter_result_records,
    serialize_json_object,
    serialize_ndjson,
)

if TYPE_CHECKING:
    from pluginyml.cli.console_api import ConsoleLike
    from pluginyml.config.settings import Settings
    from pluginyml.decode.decoder import DecodeResult
    from pluginyml.plugin.model import PluginConfig


@click.command(
    name="show",
    help="Show the decoded contents of a plugin.yml file.",
)
@click.argument("path", type=click.Path(path_type=Path))
@output_format_option
@settings_file_option
@click.pass_context
def show_command(
    ctx: click.Context,
    *,
    path: Path,
    output_format: OutputFormat,
    config_path: Path | None,
) -> None:
    """Decode ``path`` and print the resulting record and diagnostics."""
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    color: bool = bool(ctx.obj.get("color_enabled", False)) and not output_format.is_machine

    settings: Settings = resolve_settings(console, config_path)
    result: DecodeResult[PluginConfig] = decode_path(path, plugin_schema_for(settings))

    if output_format is OutputFormat.JSON:
        console.print(serialize_json_object(build_result_payload(result, path=path)))
        return
    if output_format is OutputFormat.NDJSON:
        console.print(serialize_ndjson(iter_result_records(result, path=path)), nl=False)
        return

    if vlevel > 0:
        console.print(console.styled(f"{path}:", bold=True, underline=True))
    for line in format_record_lines(result.record):
        console.print(line)
    if len(result.diagnostics):
        console.print()
        for diagnostic in result.diagnostics:
            console.print(format_diagnostic(diagnostic, path=path, color=color))
    if vlevel >= 0:
        console.print()
        console.print(f"{path}: {format_summary(result.diagnostics)}")
