# topmark:header:start
#
#   project      : PluginYml
#   file         : __init__.py
#   file_relpath : src/pluginyml/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for the command-line settings.

TOML parsing:
    Settings files are parsed with `tomlkit` and converted to plain dicts
    (``load_toml_dict``); values are then read with checked getters that report
    shape problems as warnings instead of failing.
"""

from __future__ import annotations

from .getters import (
    get_enum_value_checked,
    get_string_list_value_checked,
    get_table_value,
)
from .loaders import SettingsError, load_toml_dict
from .types import TomlTable

__all__: list[str] = [
    "SettingsError",
    "TomlTable",
    "get_enum_value_checked",
    "get_string_list_value_checked",
    "get_table_value",
    "load_toml_dict",
]
