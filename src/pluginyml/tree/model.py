# topmark:header:start
#
#   project      : PluginYml
#   file         : model.py
#   file_relpath : src/pluginyml/tree/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic document tree consumed by the decoder.

A document is represented as a closed set of immutable node types:

    * `MappingNode`: ordered ``(key, value)`` entries; keys may repeat.
    * `SequenceNode`: ordered child nodes.
    * `PlainScalar`: a single-line text value.
    * `BlockScalar`: raw multi-line text (indicator line included) with a
      `BlockStyle` telling how lines are joined.

`TreeNode` is the union of these four types; consumers dispatch on it with
``match`` statements. Nodes may carry an optional `SourcePosition`, which is
informational only and never takes part in equality.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from collections.abc import Iterator


class BlockStyle(str, Enum):
    """Line-joining style of a block scalar.

    Attributes:
        LITERAL: ``|`` blocks; lines are joined with newlines.
        FOLDED: ``>`` blocks; lines are joined with single spaces.
    """

    LITERAL = "literal"
    FOLDED = "folded"

    @property
    def separator(self) -> str:
        """Return the character used between (and after) joined lines."""
        return "\n" if self is BlockStyle.LITERAL else " "


@dataclass(frozen=True, slots=True)
class SourcePosition:
    """1-based line/column of a node in its source document."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class PlainScalar:
    """A single-line scalar value."""

    text: str
    position: SourcePosition | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class BlockScalar:
    """A multi-line scalar, stored as raw source text starting at its indicator.

    Attributes:
        text: Raw text; the first line is the block indicator line (``|``, ``>-`` ...).
        style: Line-joining style.
        position: Optional source position of the indicator.
    """

    text: str
    style: BlockStyle
    position: SourcePosition | None = field(default=None, compare=False)

    @property
    def lines(self) -> tuple[str, ...]:
        """Return the raw lines of the block, trailing blank lines removed.

        The first returned line is always the indicator line.
        """
        lines: list[str] = self.text.split("\n")
        while len(lines) > 1 and not lines[-1].strip():
            lines.pop()
        return tuple(lines)


@dataclass(frozen=True, slots=True)
class SequenceNode:
    """An ordered list of child nodes."""

    items: tuple[TreeNode, ...] = ()
    position: SourcePosition | None = field(default=None, compare=False)

    def __iter__(self) -> Iterator[TreeNode]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class MappingNode:
    """An ordered sequence of ``(key, value)`` entries.

    Keys are not required to be unique: duplicates are reported by the decoder,
    not rejected here.
    """

    entries: tuple[tuple[str, TreeNode], ...] = ()
    position: SourcePosition | None = field(default=None, compare=False)

    def __iter__(self) -> Iterator[tuple[str, TreeNode]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def keys(self) -> tuple[str, ...]:
        """Return the entry keys in document order (duplicates included)."""
        return tuple(key for key, _ in self.entries)

    def values(self) -> tuple[TreeNode, ...]:
        """Return the entry values in document order."""
        return tuple(value for _, value in self.entries)


TreeNode = Union[MappingNode, SequenceNode, PlainScalar, BlockScalar]
"""Closed union of all document node types."""


def node_kind(node: TreeNode) -> str:
    """Return a short, stable name for the variant of ``node`` (for messages)."""
    match node:
        case MappingNode():
            return "mapping"
        case SequenceNode():
            return "sequence"
        case PlainScalar():
            return "scalar"
        case BlockScalar(style=style):
            return f"{style.value} block scalar"
