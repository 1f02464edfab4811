# topmark:header:start
#
#   project      : PluginYml
#   file         : keys.py
#   file_relpath : src/pluginyml/plugin/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical top-level keys of a Bukkit ``plugin.yml`` descriptor.

Values must match the document keys exactly; renaming one is a breaking change.
Keep this module behavior-free so it can be imported from anywhere.
"""

from __future__ import annotations

from typing import Final


class PluginKey:
    """Top-level ``plugin.yml`` keys recognized by the plugin schema."""

    # Identity
    NAME: Final[str] = "name"
    VERSION: Final[str] = "version"
    MAIN: Final[str] = "main"

    # Metadata
    AUTHOR: Final[str] = "author"
    AUTHORS: Final[str] = "authors"
    DESCRIPTION: Final[str] = "description"
    WEBSITE: Final[str] = "website"
    PREFIX: Final[str] = "prefix"

    # Loading
    LOAD: Final[str] = "load"
    LOADBEFORE: Final[str] = "loadbefore"
    DEPEND: Final[str] = "depend"
    SOFTDEPEND: Final[str] = "softdepend"
    DATABASE: Final[str] = "database"

    # Recognized, not decoded
    COMMANDS: Final[str] = "commands"
    PERMISSIONS: Final[str] = "permissions"
