# topmark:header:start
#
#   project      : PluginYml
#   file         : color.py
#   file_relpath : src/pluginyml/cli/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color enablement for human-readable CLI output."""

from __future__ import annotations

import os
import sys


def resolve_color_enabled(*, no_color: bool, stdout_isatty: bool | None = None) -> bool:
    """Determine whether ANSI styling should be emitted.

    Decision precedence:
        1. ``--no-color`` -> False.
        2. ``FORCE_COLOR`` (set and not ``"0"``) -> True.
        3. ``NO_COLOR`` (set to any value) -> False.
        4. Otherwise, whether stdout is a TTY.

    Args:
        no_color: Whether ``--no-color`` was passed.
        stdout_isatty: Override for TTY detection; ``None`` asks ``sys.stdout``.

    Returns:
        True if color should be enabled.
    """
    if no_color:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)
