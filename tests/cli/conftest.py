# topmark:header:start
#
#   project      : PluginYml
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running PluginYml in a controlled working directory.

`run_cli_in()` changes the process working directory to the given directory
before invoking the Click CLI, so relative paths and settings discovery resolve
against the test directory.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Sequence

from click.testing import CliRunner, Result

from pluginyml.cli.exit_codes import ExitCode
from pluginyml.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path

VALID_DESCRIPTOR: str = "name: Demo\nversion: 1.0\nmain: com.example.Demo\nload: STARTUP\n"

WARNING_DESCRIPTOR: str = "name: Demo\nmain: com.example.Demo\napi-version: 1.20\n"

ERROR_DESCRIPTOR: str = "name: Demo\nload: sometimes\ndatabase: perhaps\n"


def _runner() -> CliRunner:
    # Click 8.2 removed ``mix_stderr``; stderr is captured separately by default.
    return CliRunner()


def run_cli_in(cwd: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI with ``cwd`` as the working directory.

    Args:
        cwd (Path): Directory used as the CWD for the command invocation.
        argv (Sequence[str]): CLI argument vector, e.g. ``["check", "plugin.yml"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    previous: str = os.getcwd()
    try:
        os.chdir(cwd)
        return _runner().invoke(cli, list(argv))
    finally:
        os.chdir(previous)


def write(cwd: Path, name: str, text: str) -> Path:
    """Write ``text`` to ``cwd / name`` and return the path."""
    path: Path = cwd / name
    path.write_text(text, encoding="utf-8")
    return path


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``, showing the output otherwise."""
    assert result.exit_code == code, (result.output, result.exception)
