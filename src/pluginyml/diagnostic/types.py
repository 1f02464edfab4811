# topmark:header:start
#
#   project      : PluginYml
#   file         : types.py
#   file_relpath : src/pluginyml/diagnostic/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared typing helpers for decode diagnostics.

`DiagnosticsLike` expresses "diagnostic-carrying" objects structurally, so output
helpers accept either a `DiagnosticLog` or a `FrozenDiagnosticLog`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pluginyml.diagnostic.model import DecodeDiagnostic, DiagnosticStats


class DiagnosticsLike(Protocol):
    """Structural interface for objects that carry diagnostics."""

    def __iter__(self) -> Iterator[DecodeDiagnostic]:
        """Iterate over contained diagnostics in insertion order."""
        ...

    def __len__(self) -> int:
        """Return the number of contained diagnostics."""
        ...

    def stats(self) -> DiagnosticStats:
        """Return aggregated per-level counts for the contained diagnostics."""
        ...
