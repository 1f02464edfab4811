# topmark:header:start
#
#   project      : PluginYml
#   file         : getters.py
#   file_relpath : src/pluginyml/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for TOML settings tables.

Each getter validates the expected shape of one key. When the value has the wrong
type, the getter logs a warning, appends a message to ``warnings`` and returns the
default, so a user mistake in a settings file never aborts a run.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Final, TypeVar

if TYPE_CHECKING:
    from pluginyml.config.logging import PluginYmlLogger

    from .types import TomlTable

E = TypeVar("E", bound=Enum)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table, or an empty dict if it is missing or not a mapping.

    Args:
        table (TomlTable): Parent table mapping.
        key (str): Sub-table key.

    Returns:
        TomlTable: The sub-table if present and a mapping, otherwise an empty dict.
    """
    value: Any | None = table.get(key)
    return value if isinstance(value, dict) else {}


def get_string_list_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    warnings: list[str],
    logger: PluginYmlLogger,
) -> list[str]:
    """Extract a list of strings, dropping (and reporting) non-string entries.

    Behavior:
        - If the key is missing, returns [].
        - If the value is not a list, reports it and returns [].
        - Each non-string entry is reported and ignored.

    Args:
        table (TomlTable): TOML table to query.
        key (str): Key to extract.
        where (str): TOML location prefix (e.g. "[tool.pluginyml]").
        warnings (list[str]): Collected warning messages (appended to in place).
        logger (PluginYmlLogger): Logger for emitting warnings.

    Returns:
        list[str]: Filtered list containing only string entries.
    """
    value: Any | None = table.get(key)
    if value is None:
        return []

    loc: Final[str] = f"{where}.{key}"
    if not isinstance(value, list):
        logger.warning("Expected list in %s, got %s: %r", loc, type(value).__name__, value)
        warnings.append(f"Expected list in {loc}, got {type(value).__name__}: {value!r}")
        return []

    out: list[str] = []
    for v in value:
        if isinstance(v, str):
            out.append(v)
        else:
            logger.warning("Ignoring non-string entry in %s: %r", loc, v)
            warnings.append(f"Ignoring non-string entry in {loc}: {v!r}")
    return out


def get_enum_value_checked(
    table: TomlTable,
    key: str,
    enum_cls: type[E],
    *,
    where: str,
    warnings: list[str],
    logger: PluginYmlLogger,
) -> E | None:
    """Parse an enum value (matched against the members' values).

    - Missing key -> None
    - Wrong type -> warning + None
    - Unknown enum value -> warning + None
    """
    raw: Any | None = table.get(key)
    if raw is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if not isinstance(raw, str):
        logger.warning(
            "Expected string enum value in %s, got %s: %r",
            loc,
            type(raw).__name__,
            raw,
        )
        warnings.append(f"Expected string enum value in {loc}, got {type(raw).__name__}: {raw!r}")
        return None

    try:
        return enum_cls(raw)
    except ValueError:
        allowed: str = ", ".join(str(e.value) for e in enum_cls)
        logger.warning("Invalid value for %s: %r (allowed: %s)", loc, raw, allowed)
        warnings.append(f"Invalid value for {loc}: {raw!r} (allowed: {allowed})")
        return None
