# topmark:header:start
#
#   project      : PluginYml
#   file         : __init__.py
#   file_relpath : src/pluginyml/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PluginYml CLI subcommands."""
