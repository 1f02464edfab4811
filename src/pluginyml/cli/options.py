# topmark:header:start
#
#   project      : PluginYml
#   file         : options.py
#   file_relpath : src/pluginyml/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, output format, settings
file) and their resolution logic, so commands and the group stay thin.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from pluginyml.cli.cli_types import EnumChoiceParam, OutputFormat
from pluginyml.cli.errors import PluginYmlUsageError

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v`` and ``-q`` counts.

    Args:
        verbose_count: Number of times ``-v`` is passed.
        quiet_count: Number of times ``-q`` is passed.

    Returns:
        ``verbose_count`` when verbose, ``-1`` when quiet, else ``0``.

    Raises:
        PluginYmlUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise PluginYmlUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add -v/--verbose and -q/--quiet options (counted, mutually exclusive)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase program output. Specify twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only print problems.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the --no-color flag."""
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in text output.",
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the --format option (text, json or ndjson)."""
    f = click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=OutputFormat.TEXT.value,
        show_default=True,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
    return f


def settings_file_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the --config option pointing at an explicit settings file."""
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Settings file (default: ./pluginyml.toml or [tool.pluginyml] in ./pyproject.toml).",
    )(f)
    return f
