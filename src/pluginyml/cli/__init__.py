# topmark:header:start
#
#   project      : PluginYml
#   file         : __init__.py
#   file_relpath : src/pluginyml/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click command-line interface for PluginYml.

Entry point: [`pluginyml.cli.main.cli`][pluginyml.cli.main.cli].
"""
