# topmark:header:start
#
#   project      : PluginYml
#   file         : loaders.py
#   file_relpath : src/pluginyml/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML settings sources.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from pluginyml.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from pluginyml.config.logging import PluginYmlLogger

    from .types import TomlTable

logger: PluginYmlLogger = get_logger(__name__)


class SettingsError(ValueError):
    """Raised when a settings file cannot be read or parsed."""


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``pluginyml.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content as plain Python values.

    Raises:
        SettingsError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise SettingsError(f"Cannot read settings file {path}: {e}") from e
    except UnicodeDecodeError as e:
        logger.error("Error decoding %s as UTF-8: %s", path, e)
        raise SettingsError(f"Settings file {path} is not valid UTF-8 ({e.reason})") from e

    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise SettingsError(f"Invalid TOML in {path}: {e}") from e

    data_any: Any = doc.unwrap()
    logger.trace("Loaded TOML from %s: %r", path, data_any)
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
