# topmark:header:start
#
#   project      : PluginYml
#   file         : model.py
#   file_relpath : src/pluginyml/plugin/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed record for a decoded ``plugin.yml`` descriptor."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PluginLoadOrder(Enum):
    """When the server loads the plugin; document values are member names."""

    STARTUP = "startup"
    POSTWORLD = "postworld"


@dataclass
class PluginConfig:
    """Decoded ``plugin.yml`` values.

    Every field has a default, so a record can be created empty and filled in one
    field at a time. Fields whose keys are missing (or failed to decode) keep their
    defaults: ``None`` for optional text, an empty list for lists.
    """

    name: str | None = None
    version: str | None = None
    main: str | None = None
    author: str | None = None
    authors: list[str] = field(default_factory=lambda: [])
    description: str | None = None
    website: str | None = None
    prefix: str | None = None
    load: PluginLoadOrder | None = None
    load_before: list[str] = field(default_factory=lambda: [])
    depend: list[str] = field(default_factory=lambda: [])
    soft_depend: list[str] = field(default_factory=lambda: [])
    database: bool = False

    @property
    def all_authors(self) -> list[str]:
        """Return ``author`` followed by ``authors``, without duplicates."""
        names: list[str] = [self.author] if self.author else []
        return list(dict.fromkeys([*names, *self.authors]))

