# topmark:header:start
#
#   project      : PluginYml
#   file         : enum_mixins.py
#   file_relpath : src/pluginyml/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed Enum lookups by member name.

Enum rules accept a document value only when it is the exact name of a member:
values and case variants do not match, and alias members are never reported as
valid names.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar, cast

_E = TypeVar("_E", bound=Enum)


def enum_from_name(enum_cls: type[_E], key_name: str | None) -> _E | None:
    """Return the member of ``enum_cls`` named exactly ``key_name``, or ``None``.

    Args:
        enum_cls (type[_E]): The Enum class to search.
        key_name (str | None): The member name (e.g. ``'STARTUP'``).

    Returns:
        _E | None: The matching member; ``None`` on a miss or when ``key_name`` is ``None``.
    """
    if key_name is None:
        return None
    member: Any | None = enum_cls.__members__.get(key_name)
    return cast("_E | None", member)


def enum_member_names(enum_cls: type[Enum]) -> tuple[str, ...]:
    """Return the canonical member names of ``enum_cls`` in definition order."""
    return tuple(member.name for member in enum_cls)
