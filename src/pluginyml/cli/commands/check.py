# topmark:header:start
#
#   project      : PluginYml
#   file         : check.py
#   file_relpath : src/pluginyml/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PluginYml `check` command.

Decodes one or more ``plugin.yml`` descriptors and reports their diagnostics.

Exit codes:
    * ``0``: every file decoded and no diagnostic reached the ``fail_on`` level.
    * ``1``: at least one file could not be read or parsed.
    * ``2``: at least one diagnostic reached the ``fail_on`` level.

Input errors take precedence over diagnostics. Unreadable files are reported
and skipped; the remaining files are still checked.
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
from pluginyml.cli.errors import PluginYmlError
from pluginyml.cli.exit_codes import ExitCode
from pluginyml.cli.options import output_format_option, settings_file_option
from pluginyml.cli.render import format_diagnostic, format_summary
from pluginyml.config.logging import get_logger
from pluginyml.machine import (
    build_result_payload,
    iter_result_records,
    serialize_json_object,
    serialize_ndjson,
)

if TYPE_CHECKING:
    from pluginyml.cli.console_api import ConsoleLike
    from pluginyml.config.logging import PluginYmlLogger
    from pluginyml.config.settings import Settings
    from pluginyml.decode.decoder import DecodeResult
    from pluginyml.diagnostic.model import DiagnosticLevel
    from pluginyml.plugin.model import PluginConfig
    from pluginyml.schema.model import Schema

logger: PluginYmlLogger = get_logger(__name__)


@click.command(
    name="check",
    help="Decode plugin.yml files and report problems.",
)
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(path_type=Path),
)
@output_format_option
@settings_file_option
@click.pass_context
def check_command(
    ctx: click.Context,
    *,
    paths: tuple[Path, ...],
    output_format: OutputFormat,
    config_path: Path | None,
) -> None:
    """Decode each of ``paths`` and print its diagnostics.

    Args:
        ctx (click.Context): Current Click context.
        paths (tuple[Path, ...]): Descriptor files to check.
        output_format (OutputFormat): Text, JSON (one array) or NDJSON output.
        config_path (Path | None): Explicit settings file, if any.
    """
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    color: bool = bool(ctx.obj.get("color_enabled", False)) and not output_format.is_machine

    settings: Settings = resolve_settings(console, config_path)
    schema: Schema[PluginConfig] = plugin_schema_for(settings)
    threshold: DiagnosticLevel | None = settings.fail_on.threshold

    n_unreadable: int = 0
    n_failing: int = 0
    documents: list[dict[str, object]] = []

    for path in paths:
        try:
            result: DecodeResult[PluginConfig] = decode_path(path, schema)
        except PluginYmlError as exc:
            logger.debug("Skipping %s: %s", path, exc.format_message())
            console.error(f"Error: {exc.format_message()}")
            n_unreadable += 1
            continue

        if threshold is not None and result.diagnostics.has_at_least(threshold):
            n_failing += 1

        if output_format is OutputFormat.JSON:
            documents.append(build_result_payload(result, path=path))
        elif output_format is OutputFormat.NDJSON:
            console.print(serialize_ndjson(iter_result_records(result, path=path)), nl=False)
        else:
            for diagnostic in result.diagnostics:
                console.print(format_diagnostic(diagnostic, path=path, color=color))
            if vlevel >= 0:
                console.print(f"{path}: {format_summary(result.diagnostics)}")

    if output_format is OutputFormat.JSON:
        console.print(serialize_json_object(documents))

    if n_unreadable:
        ctx.exit(ExitCode.FAILURE)
    if n_failing:
        ctx.exit(ExitCode.DIAGNOSTICS)
