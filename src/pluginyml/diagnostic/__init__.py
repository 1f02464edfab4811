# topmark:header:start
#
#   project      : PluginYml
#   file         : __init__.py
#   file_relpath : src/pluginyml/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decode diagnostics.

Design:
    - Each decode-time problem is an immutable `DecodeDiagnostic` naming the key,
      the problem kind, and the offending node.
    - During decoding, diagnostics are accumulated in a mutable `DiagnosticLog`.
    - Decode results expose them as an immutable `FrozenDiagnosticLog`.

Machine output:
    JSON-friendly representations live in [`pluginyml.machine`][pluginyml.machine].
"""

from __future__ import annotations

from pluginyml.diagnostic.model import (
    DecodeDiagnostic,
    DiagnosticKind,
    DiagnosticLevel,
    DiagnosticLog,
    DiagnosticStats,
    FrozenDiagnosticLog,
    compute_diagnostic_stats,
    diagnostics_counts_to_dict,
)
from pluginyml.diagnostic.types import DiagnosticsLike

__all__ = [
    "DecodeDiagnostic",
    "DiagnosticKind",
    "DiagnosticLevel",
    "DiagnosticLog",
    "DiagnosticStats",
    "DiagnosticsLike",
    "FrozenDiagnosticLog",
    "compute_diagnostic_stats",
    "diagnostics_counts_to_dict",
]
