# topmark:header:start
#
#   project      : PluginYml
#   file         : exit_codes.py
#   file_relpath : src/pluginyml/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines standardized exit codes used by the PluginYml CLI application.

Usage:
    Exit codes can be used in scripts or CI jobs to determine the outcome of a run:

    ```python
    import subprocess
    from pluginyml.cli.exit_codes import ExitCode

    result = subprocess.run(["pluginyml", "check", "plugin.yml"])
    if result.returncode == ExitCode.DIAGNOSTICS:
        print("plugin.yml has problems.")
    ```
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the PluginYml CLI.

    Attributes:
        SUCCESS (int): Every descriptor decoded without failing diagnostics.
        FAILURE (int): A descriptor could not be read or parsed.
        DIAGNOSTICS (int): At least one diagnostic reached the configured ``fail_on`` level.
        USAGE_ERROR (int): Invalid command-line usage (EX_USAGE).
        FILE_NOT_FOUND (int): An input path does not exist (EX_NOINPUT).
        IO_ERROR (int): Reading an input failed (EX_IOERR).
        CONFIG_ERROR (int): The settings file is missing or malformed (EX_CONFIG).
    """

    SUCCESS = 0
    FAILURE = 1
    DIAGNOSTICS = 2
    USAGE_ERROR = 64
    FILE_NOT_FOUND = 66
    IO_ERROR = 74
    CONFIG_ERROR = 78
