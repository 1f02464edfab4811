# topmark:header:start
#
#   project      : PluginYml
#   file         : schema.py
#   file_relpath : src/pluginyml/plugin/schema.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decode schema for Bukkit ``plugin.yml`` descriptors.

``database`` is the only boolean key and is strict: a value that is not a YAML
boolean token is reported and decoded as ``false``. ``commands`` and
``permissions`` are recognized but not decoded.
"""

from __future__ import annotations

from typing import Final

from pluginyml.schema.model import (
    Schema,
    boolean_rule,
    enum_rule,
    reserved_rule,
    scalar_rule,
    string_list_rule,
)

from .keys import PluginKey
from .model import PluginConfig, PluginLoadOrder

PLUGIN_SCHEMA: Final[Schema[PluginConfig]] = Schema(
    PluginConfig,
    [
        scalar_rule(PluginKey.NAME),
        scalar_rule(PluginKey.VERSION),
        scalar_rule(PluginKey.MAIN),
        scalar_rule(PluginKey.AUTHOR),
        string_list_rule(PluginKey.AUTHORS),
        scalar_rule(PluginKey.DESCRIPTION),
        scalar_rule(PluginKey.WEBSITE),
        scalar_rule(PluginKey.PREFIX),
        enum_rule(PluginKey.LOAD, PluginLoadOrder),
        string_list_rule(PluginKey.LOADBEFORE, "load_before"),
        string_list_rule(PluginKey.DEPEND),
        string_list_rule(PluginKey.SOFTDEPEND, "soft_depend"),
        boolean_rule(PluginKey.DATABASE, strict=True),
        reserved_rule(PluginKey.COMMANDS),
        reserved_rule(PluginKey.PERMISSIONS),
    ],
)
