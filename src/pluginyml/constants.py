# topmark:header:start
#
#   project      : PluginYml
#   file         : constants.py
#   file_relpath : src/pluginyml/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PluginYml constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

PLUGINYML: str = "pluginyml"

try:
    PLUGINYML_VERSION: str = get_version(PLUGINYML)
except PackageNotFoundError:  # running from a source checkout
    PLUGINYML_VERSION = "0.0.0+unknown"

VALUE_NOT_SET: str = "<not set>"
