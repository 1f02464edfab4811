# topmark:header:start
#
#   project      : PluginYml
#   file         : __init__.py
#   file_relpath : src/pluginyml/plugin/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bukkit ``plugin.yml`` descriptor: keys, record type and decode schema."""

from __future__ import annotations

from pluginyml.plugin.keys import PluginKey
from pluginyml.plugin.model import PluginConfig, PluginLoadOrder
from pluginyml.plugin.schema import PLUGIN_SCHEMA

__all__ = [
    "PLUGIN_SCHEMA",
    "PluginConfig",
    "PluginKey",
    "PluginLoadOrder",
]
