# topmark:header:start
#
#   project      : PluginYml
#   file         : render.py
#   file_relpath : src/pluginyml/cli/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-readable rendering of decode results.

Diagnostics are rendered one per line as ``PATH:LINE:COL: level: message [kind]``
(the position is omitted when the offending node has none). Level labels are
colored with `yachalk` when color is enabled.
"""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import TYPE_CHECKING, Any

from pluginyml.constants import VALUE_NOT_SET

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from pluginyml.diagnostic.model import DecodeDiagnostic, DiagnosticStats
    from pluginyml.diagnostic.types import DiagnosticsLike


def format_diagnostic(diagnostic: DecodeDiagnostic, *, path: Path, color: bool) -> str:
    """Return the one-line text form of ``diagnostic``."""
    location: str = str(path)
    if diagnostic.position is not None:
        location = f"{location}:{diagnostic.position}"
    label: str = diagnostic.level.value
    if color:
        label = diagnostic.level.color(label)
    return f"{location}: {label}: {diagnostic.message} [{diagnostic.kind.key}]"


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def format_summary(diagnostics: DiagnosticsLike) -> str:
    """Return e.g. ``"1 error, 2 warnings"``, or ``"ok"`` when there is nothing to report."""
    stats: DiagnosticStats = diagnostics.stats()
    if stats.total == 0:
        return "ok"
    parts: list[str] = []
    if stats.n_error:
        parts.append(_plural(stats.n_error, "error"))
    if stats.n_warning:
        parts.append(_plural(stats.n_warning, "warning"))
    if stats.n_info:
        parts.append(_plural(stats.n_info, "info"))
    return ", ".join(parts)


def _format_text(text: str) -> str:
    # Keep each record field on a single line.
    return repr(text) if "\n" in text or "\r" in text else text


def _format_value(value: Any) -> str:
    if value is None:
        return VALUE_NOT_SET
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_format_text(str(v)) for v in value) + "]"
    return _format_text(str(value))


def format_record_lines(record: Any) -> Iterable[str]:
    """Yield ``field: value`` lines for each field of a dataclass record."""
    fields = dataclasses.fields(record)
    width: int = max((len(f.name) for f in fields), default=0)
    for f in fields:
        yield f"{f.name:<{width}} : {_format_value(getattr(record, f.name))}"
