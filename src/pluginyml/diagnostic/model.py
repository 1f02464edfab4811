# topmark:header:start
#
#   project      : PluginYml
#   file         : model.py
#   file_relpath : src/pluginyml/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decode diagnostic types and helpers.

Decode-time problems are never raised: they are recorded as diagnostics and the
decoder moves on to the next key. This module defines those records and the
containers used to collect them.

Sections:
    * DiagnosticLevel: severity levels with associated terminal colors.
    * DiagnosticKind: the decode problem taxonomy; each kind has a fixed level.
    * DecodeDiagnostic: immutable record (key, kind, offending node, message).
    * DiagnosticStats: aggregated per-level counts.
    * DiagnosticLog: mutable collection used while decoding.
    * FrozenDiagnosticLog: immutable snapshot returned to callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from pluginyml.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from pluginyml.config.logging import PluginYmlLogger
    from pluginyml.tree.model import SourcePosition, TreeNode


logger: PluginYmlLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for decode diagnostics, ordered ERROR > WARNING > INFO."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def rank(self) -> int:
        """Return a sortable rank (higher is more severe)."""
        return _LEVEL_RANK[self]

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only; machine formats should not use colors.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


_LEVEL_RANK: dict[DiagnosticLevel, int] = {
    DiagnosticLevel.INFO: 0,
    DiagnosticLevel.WARNING: 1,
    DiagnosticLevel.ERROR: 2,
}


class DiagnosticKind(str, Enum):
    """Decode-time problem taxonomy; the value is the stable machine key."""

    UNKNOWN_KEY = "unknown_key"
    DUPLICATE_KEY = "duplicate_key"
    EXPECTED_SCALAR = "expected_scalar"
    EXPECTED_BOOLEAN = "expected_boolean"
    INVALID_ENUM_VALUE = "invalid_enum_value"
    EXPECTED_LIST_CONTAINER = "expected_list_container"
    INVALID_LIST_ELEMENT = "invalid_list_element"

    def __str__(self) -> str:
        return self.value

    @property
    def key(self) -> str:
        """Return the stable machine key used in text and JSON output."""
        return self.value

    @property
    def level(self) -> DiagnosticLevel:
        """Return the severity assigned to this kind of problem."""
        if self in _WARNING_KINDS:
            return DiagnosticLevel.WARNING
        return DiagnosticLevel.ERROR


_WARNING_KINDS: frozenset[DiagnosticKind] = frozenset(
    {
        DiagnosticKind.UNKNOWN_KEY,
        DiagnosticKind.DUPLICATE_KEY,
        DiagnosticKind.INVALID_LIST_ELEMENT,
    }
)


@dataclass(frozen=True)
class DecodeDiagnostic:
    """A non-fatal problem found while decoding one key.

    Attributes:
        key: Top-level key the problem belongs to.
        kind: Problem kind.
        raw_node: The node that could not be decoded (the value, or a list element).
        message: Human-readable description.
    """

    key: str
    kind: DiagnosticKind
    raw_node: TreeNode
    message: str

    @property
    def level(self) -> DiagnosticLevel:
        """Return the severity of this diagnostic."""
        return self.kind.level

    @property
    def position(self) -> SourcePosition | None:
        """Return the source position of the offending node, if known."""
        return self.raw_node.position


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics for a single decode call."""

    items: list[DecodeDiagnostic] = field(default_factory=lambda: [])

    def add(self, key: str, kind: DiagnosticKind, raw_node: TreeNode, message: str) -> None:
        """Record a diagnostic for ``key``.

        Args:
            key: Top-level key being decoded.
            kind: Problem kind.
            raw_node: The offending node.
            message: Human-readable description.
        """
        diagnostic = DecodeDiagnostic(key=key, kind=kind, raw_node=raw_node, message=message)
        self.items.append(diagnostic)
        logger.debug("Adding [%s] %s: %s", kind.level.value, key, message)

    def freeze(self) -> FrozenDiagnosticLog:
        """Return an immutable snapshot of this log's diagnostics."""
        return FrozenDiagnosticLog(items=tuple(self.items))

    def stats(self) -> DiagnosticStats:
        """Return per-level counts for diagnostics in this log."""
        return compute_diagnostic_stats(self.items)

    def __iter__(self) -> Iterator[DecodeDiagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class FrozenDiagnosticLog:
    """Immutable, ordered diagnostic container returned by the decoder."""

    items: tuple[DecodeDiagnostic, ...] = ()

    def __iter__(self) -> Iterator[DecodeDiagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def stats(self) -> DiagnosticStats:
        """Return aggregated per-level counts for the contained diagnostics."""
        return compute_diagnostic_stats(self.items)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity."""
        return diagnostics_counts_to_dict(self.items)

    def for_key(self, key: str) -> tuple[DecodeDiagnostic, ...]:
        """Return the diagnostics recorded for ``key``, in order."""
        return tuple(d for d in self.items if d.key == key)

    def of_kind(self, kind: DiagnosticKind) -> tuple[DecodeDiagnostic, ...]:
        """Return the diagnostics of the given ``kind``, in order."""
        return tuple(d for d in self.items if d.kind is kind)

    def has_at_least(self, level: DiagnosticLevel) -> bool:
        """Return True if any diagnostic is at ``level`` or more severe."""
        return any(d.level.rank >= level.rank for d in self.items)


def compute_diagnostic_stats(diagnostics: Iterable[DecodeDiagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics.

    Args:
        diagnostics: the diagnostics to count.

    Returns:
        Per-level counts.
    """
    levels: list[DiagnosticLevel] = [d.level for d in diagnostics]
    return DiagnosticStats(
        n_info=levels.count(DiagnosticLevel.INFO),
        n_warning=levels.count(DiagnosticLevel.WARNING),
        n_error=levels.count(DiagnosticLevel.ERROR),
    )


def diagnostics_counts_to_dict(diagnostics: Iterable[DecodeDiagnostic]) -> dict[str, int]:
    """Return a JSON-friendly mapping of counts by severity for any iterable."""
    stats: DiagnosticStats = compute_diagnostic_stats(diagnostics)
    return {
        "info": stats.n_info,
        "warning": stats.n_warning,
        "error": stats.n_error,
    }
