# topmark:header:start
#
#   project      : PluginYml
#   file         : __main__.py
#   file_relpath : src/pluginyml/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running PluginYml via ``python -m pluginyml``.

Delegates to :func:`pluginyml.cli.main.cli`, the single CLI entry point.

Examples:
    Check a descriptor using the module interface::

        python -m pluginyml check plugin.yml
"""

from __future__ import annotations

from pluginyml.cli.main import cli

if __name__ == "__main__":
    cli()
