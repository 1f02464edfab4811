# topmark:header:start
#
#   project      : PluginYml
#   file         : cmd_common.py
#   file_relpath : src/pluginyml/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands:
console and verbosity lookup, settings resolution, and reading + decoding one
descriptor file with filesystem errors mapped onto CLI errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pluginyml.cli.errors import (
    PluginYmlConfigError,
    PluginYmlFileNotFoundError,
    PluginYmlIOError,
    PluginYmlParseError,
)
from pluginyml.config.io import SettingsError
from pluginyml.config.logging import get_logger
from pluginyml.config.settings import load_settings
from pluginyml.decode.decoder import decode
from pluginyml.plugin.schema import PLUGIN_SCHEMA
from pluginyml.tree.yaml_builder import TreeBuildError, load_tree

if TYPE_CHECKING:
    from pathlib import Path

    from pluginyml.cli.console_api import ConsoleLike
    from pluginyml.config.logging import PluginYmlLogger
    from pluginyml.config.settings import Settings
    from pluginyml.decode.decoder import DecodeResult
    from pluginyml.plugin.model import PluginConfig
    from pluginyml.schema.model import Schema
    from pluginyml.tree.model import MappingNode

logger: PluginYmlLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the group context."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (``-1`` quiet, ``0`` default, ``>0`` verbose)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def resolve_settings(console: ConsoleLike, config_path: Path | None) -> Settings:
    """Load tool settings and surface settings warnings on the console.

    Raises:
        PluginYmlConfigError: If the settings file cannot be read or parsed.
    """
    try:
        settings: Settings = load_settings(config_path)
    except SettingsError as exc:
        raise PluginYmlConfigError(str(exc)) from exc
    for warning in settings.warnings:
        console.warn(f"Warning: {warning}")
    return settings


def plugin_schema_for(settings: Settings) -> Schema[PluginConfig]:
    """Return the ``plugin.yml`` schema extended with the configured extra keys."""
    return PLUGIN_SCHEMA.with_reserved_keys(settings.extra_keys)


def read_tree(path: Path) -> MappingNode:
    """Read and build the document tree of ``path``.

    Raises:
        PluginYmlFileNotFoundError: If ``path`` does not exist.
        PluginYmlIOError: If ``path`` cannot be read.
        PluginYmlParseError: If the content is not UTF-8 or not a YAML mapping document.
    """
    try:
        return load_tree(path)
    except FileNotFoundError as exc:
        raise PluginYmlFileNotFoundError(f"File not found: {path}") from exc
    except OSError as exc:
        raise PluginYmlIOError(f"Cannot read {path}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise PluginYmlParseError(f"{path}: not valid UTF-8 ({exc.reason})") from exc
    except TreeBuildError as exc:
        where: str = f"{path}:{exc.position}" if exc.position is not None else str(path)
        raise PluginYmlParseError(f"{where}: {exc.args[0]}") from exc


def decode_path(path: Path, schema: Schema[PluginConfig]) -> DecodeResult[PluginConfig]:
    """Read ``path`` and decode it with ``schema`` (see `read_tree` for errors)."""
    root: MappingNode = read_tree(path)
    logger.debug("Decoding %s", path)
    return decode(root, schema)
