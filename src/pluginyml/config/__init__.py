# topmark:header:start
#
#   project      : PluginYml
#   file         : __init__.py
#   file_relpath : src/pluginyml/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration: logging setup and command-line tool settings.

Submodules are imported explicitly (``pluginyml.config.logging``,
``pluginyml.config.settings``) so that importing the logging helpers never pulls in
the settings layer.
"""

from __future__ import annotations
