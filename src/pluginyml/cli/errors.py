# topmark:header:start
#
#   project      : PluginYml
#   file         : errors.py
#   file_relpath : src/pluginyml/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the PluginYml CLI.

Raise these exceptions in CLI commands to signal errors with standardized
messages and exit codes. Decode problems are *not* errors: they are diagnostics
and are reported through the normal command output.
"""

from __future__ import annotations

from typing import IO, Any

import click

from pluginyml.cli.exit_codes import ExitCode


class PluginYmlError(click.ClickException):
    """Base class for all PluginYml CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colors are applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class PluginYmlUsageError(PluginYmlError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class PluginYmlConfigError(PluginYmlError):
    """Error for settings errors (missing/invalid/malformed settings file)."""

    exit_code = ExitCode.CONFIG_ERROR


class PluginYmlFileNotFoundError(PluginYmlError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class PluginYmlIOError(PluginYmlError):
    """Error for I/O errors reading input files."""

    exit_code = ExitCode.IO_ERROR


class PluginYmlParseError(PluginYmlError):
    """Error for input that is not a YAML mapping document."""

    exit_code = ExitCode.FAILURE
