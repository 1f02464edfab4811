# topmark:header:start
#
#   project      : PluginYml
#   file         : settings.py
#   file_relpath : src/pluginyml/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line tool settings.

Settings are optional. They are looked up, in order, from:

1. an explicit file (``--config FILE``): ``[tool.pluginyml]`` when the file is a
   ``pyproject.toml``, top-level keys otherwise;
2. ``pluginyml.toml`` in the working directory;
3. ``[tool.pluginyml]`` in ``pyproject.toml`` in the working directory.

Example ``pluginyml.toml``:

```toml
fail_on = "warning"
extra_keys = ["api-version", "libraries"]
```

Shape problems in a settings file are reported through `Settings.warnings` and
fall back to defaults; unreadable or unparsable files raise `SettingsError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from pluginyml.config.io import (
    get_enum_value_checked,
    get_string_list_value_checked,
    get_table_value,
    load_toml_dict,
)
from pluginyml.config.keys import Toml
from pluginyml.config.logging import get_logger
from pluginyml.diagnostic.model import DiagnosticLevel

if TYPE_CHECKING:
    from pluginyml.config.io import TomlTable
    from pluginyml.config.logging import PluginYmlLogger

logger: PluginYmlLogger = get_logger(__name__)


class FailOn(str, Enum):
    """Lowest diagnostic level that makes ``pluginyml check`` fail."""

    ERROR = "error"
    WARNING = "warning"
    NEVER = "never"

    @property
    def threshold(self) -> DiagnosticLevel | None:
        """Return the failing diagnostic level, or ``None`` if nothing fails."""
        if self is FailOn.ERROR:
            return DiagnosticLevel.ERROR
        if self is FailOn.WARNING:
            return DiagnosticLevel.WARNING
        return None


@dataclass(frozen=True)
class Settings:
    """Resolved tool settings.

    Attributes:
        fail_on: Lowest diagnostic level that makes a check fail.
        extra_keys: Additional document keys accepted without decoding.
        source: File the settings were read from (``None`` for defaults).
        warnings: Problems found in the settings file.
    """

    fail_on: FailOn = FailOn.ERROR
    extra_keys: tuple[str, ...] = ()
    source: Path | None = None
    warnings: tuple[str, ...] = ()


def settings_from_table(table: TomlTable, *, where: str, source: Path | None = None) -> Settings:
    """Build `Settings` from a parsed settings table.

    Args:
        table (TomlTable): Table holding the settings keys.
        where (str): Location prefix used in warnings (e.g. ``[tool.pluginyml]``).
        source (Path | None): File the table was read from.

    Returns:
        Settings: The settings; invalid values fall back to defaults.
    """
    warnings: list[str] = []
    fail_on: FailOn | None = get_enum_value_checked(
        table,
        Toml.KEY_FAIL_ON,
        FailOn,
        where=where,
        warnings=warnings,
        logger=logger,
    )
    extra_keys: list[str] = get_string_list_value_checked(
        table,
        Toml.KEY_EXTRA_KEYS,
        where=where,
        warnings=warnings,
        logger=logger,
    )
    blank: list[str] = [k for k in extra_keys if not k.strip()]
    if blank:
        logger.warning("Ignoring %d blank entries in %s.%s", len(blank), where, Toml.KEY_EXTRA_KEYS)
        warnings.append(f"Ignoring blank entries in {where}.{Toml.KEY_EXTRA_KEYS}")
        extra_keys = [k for k in extra_keys if k.strip()]

    known: set[str] = {Toml.KEY_FAIL_ON, Toml.KEY_EXTRA_KEYS}
    for key in table:
        if key not in known:
            logger.warning("Unknown setting %s.%s", where, key)
            warnings.append(f"Unknown setting {where}.{key}")

    return Settings(
        fail_on=fail_on or FailOn.ERROR,
        extra_keys=tuple(dict.fromkeys(extra_keys)),
        source=source,
        warnings=tuple(warnings),
    )


def _tool_table(data: TomlTable) -> TomlTable:
    return get_table_value(get_table_value(data, Toml.SECTION_TOOL), Toml.SECTION_PLUGINYML)


def _tool_location() -> str:
    return f"[{Toml.SECTION_TOOL}.{Toml.SECTION_PLUGINYML}]"


def load_settings_file(path: Path) -> Settings:
    """Load settings from an explicit file.

    Raises:
        SettingsError: If the file cannot be read or parsed.
    """
    data: TomlTable = load_toml_dict(path)
    if path.name == Toml.PYPROJECT_FILE_NAME:
        return settings_from_table(_tool_table(data), where=_tool_location(), source=path)
    return settings_from_table(data, where=path.name, source=path)


def discover_settings(cwd: Path | None = None) -> Settings:
    """Return the settings found in ``cwd`` (defaults when there are none).

    Raises:
        SettingsError: If a discovered file cannot be read or parsed.
    """
    base: Path = cwd or Path.cwd()

    settings_path: Path = base / Toml.SETTINGS_FILE_NAME
    if settings_path.is_file():
        logger.debug("Using settings from %s", settings_path)
        return load_settings_file(settings_path)

    pyproject_path: Path = base / Toml.PYPROJECT_FILE_NAME
    if pyproject_path.is_file():
        table: TomlTable = _tool_table(load_toml_dict(pyproject_path))
        if table:
            logger.debug("Using settings from %s %s", pyproject_path, _tool_location())
            return settings_from_table(table, where=_tool_location(), source=pyproject_path)

    logger.debug("No settings file found in %s, using defaults", base)
    return Settings()


def load_settings(path: Path | None = None, *, cwd: Path | None = None) -> Settings:
    """Load settings from ``path`` when given, else discover them in ``cwd``."""
    if path is not None:
        return load_settings_file(path)
    return discover_settings(cwd)
