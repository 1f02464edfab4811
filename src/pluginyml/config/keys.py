# topmark:header:start
#
#   project      : PluginYml
#   file         : keys.py
#   file_relpath : src/pluginyml/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML file, section and key names for PluginYml settings.

Settings live either in ``pluginyml.toml`` (top-level keys) or under
``[tool.pluginyml]`` in ``pyproject.toml``. Renaming a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML names used by the PluginYml settings layer."""

    # Files
    SETTINGS_FILE_NAME: Final[str] = "pluginyml.toml"
    PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"

    # [tool.pluginyml] in pyproject.toml
    SECTION_TOOL: Final[str] = "tool"
    SECTION_PLUGINYML: Final[str] = "pluginyml"

    # Keys
    KEY_FAIL_ON: Final[str] = "fail_on"
    KEY_EXTRA_KEYS: Final[str] = "extra_keys"
