# topmark:header:start
#
#   project      : PluginYml
#   file         : keys.py
#   file_relpath : src/pluginyml/cli/commands/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PluginYml `keys` command.

Lists the ``plugin.yml`` keys recognized by the decoder (including extra keys
from the settings), with their decode kind and target field.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from pluginyml.cli.cli_types import OutputFormat
from pluginyml.cli.cmd_common import get_console, plugin_schema_for, resolve_settings
from pluginyml.cli.options import output_format_option, settings_file_option
from pluginyml.machine import serialize_json_object, serialize_ndjson
from pluginyml.schema.model import RuleKind

if TYPE_CHECKING:
    from pluginyml.cli.console_api import ConsoleLike
    from pluginyml.schema.model import SchemaRule


def _rule_payload(rule: SchemaRule) -> dict[str, object]:
    payload: dict[str, object] = {
        "key": rule.key,
        "kind": rule.kind.value,
        "field": rule.target_field,
    }
    if rule.kind is RuleKind.BOOLEAN:
        payload["strict"] = rule.strict
    if rule.enum_type is not None:
        payload["values"] = [member.name for member in rule.enum_type]
    return payload


def _describe(rule: SchemaRule) -> str:
    match rule.kind:
        case RuleKind.BOOLEAN:
            return "boolean (strict)" if rule.strict else "boolean"
        case RuleKind.ENUM:
            assert rule.enum_type is not None
            return "enum: " + "|".join(member.name for member in rule.enum_type)
        case _:
            return rule.kind.value


@click.command(
    name="keys",
    help="List the recognized plugin.yml keys.",
)
@output_format_option
@settings_file_option
@click.pass_context
def keys_command(
    ctx: click.Context,
    *,
    output_format: OutputFormat,
    config_path: Path | None,
) -> None:
    """List the recognized keys with their decode kind and target field."""
    console: ConsoleLike = get_console(ctx)
    rules: tuple[SchemaRule, ...] = plugin_schema_for(resolve_settings(console, config_path)).rules

    if output_format is OutputFormat.JSON:
        console.print(serialize_json_object([_rule_payload(r) for r in rules]))
        return
    if output_format is OutputFormat.NDJSON:
        console.print(
            serialize_ndjson({"kind": "key", **_rule_payload(r)} for r in rules),
            nl=False,
        )
        return

    width: int = max(len(r.key) for r in rules)
    for rule in rules:
        target: str = f" -> {rule.target_field}" if rule.target_field else ""
        label: str = console.styled(rule.key.ljust(width), bold=True)
        console.print(f"{label}  {_describe(rule)}{target}")
