# topmark:header:start
#
#   project      : PluginYml
#   file         : payloads.py
#   file_relpath : src/pluginyml/machine/payloads.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pure payload builders for machine-readable decode output.

Payloads are plain JSON-friendly dicts; serialization to strings happens in
[`pluginyml.machine.serializers`][pluginyml.machine.serializers].

JSON shape (one document per decoded file):

```json
{
  "meta": {"tool": "pluginyml", "version": "...", "platform": "linux"},
  "path": "plugin.yml",
  "record": {"name": "Demo", "...": "..."},
  "diagnostics": [
    {"key": "foo", "kind": "unknown_key", "level": "warning",
     "message": "Unknown key 'foo'", "node": "scalar", "line": 7, "column": 6}
  ],
  "summary": {"info": 0, "warning": 1, "error": 0}
}
```

NDJSON emits the same information as a stream of records, each carrying
``kind`` (``record``, ``diagnostic`` or ``summary``) and ``meta``.
"""

from __future__ import annotations

import dataclasses
import sys
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypedDict, cast

from pluginyml.constants import PLUGINYML, PLUGINYML_VERSION
from pluginyml.diagnostic.model import diagnostics_counts_to_dict
from pluginyml.tree.model import node_kind

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pluginyml.decode.decoder import DecodeResult
    from pluginyml.diagnostic.model import DecodeDiagnostic


class MetaPayload(TypedDict):
    """Tool metadata attached to every machine output document/record."""

    tool: str
    version: str
    platform: str


def build_meta_payload() -> MetaPayload:
    """Return a small metadata payload with tool name, version and platform."""
    return MetaPayload(tool=PLUGINYML, version=PLUGINYML_VERSION, platform=sys.platform)


def normalize_payload(obj: object) -> object:
    """Normalize a payload into JSON-serializable structures.

    Conversions:
      - `Path` -> `str`
      - `Enum` -> `Enum.name`
      - dataclass instance -> normalized field mapping
      - `Mapping` -> `dict[str, normalized value]`
      - `list/tuple/set/frozenset` -> `list[normalized item]`
    """
    if isinstance(obj, Path):
        return str(obj)

    if isinstance(obj, Enum):
        return obj.name

    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: normalize_payload(getattr(obj, f.name)) for f in dataclasses.fields(obj)}

    if isinstance(obj, Mapping):
        mapping: Mapping[object, Any] = cast("Mapping[object, Any]", obj)
        return {str(k): normalize_payload(v) for k, v in mapping.items()}

    if isinstance(obj, (list, tuple, set, frozenset)):
        return [normalize_payload(v) for v in cast("Iterator[object]", iter(obj))]

    return obj


def build_diagnostic_payload(diagnostic: DecodeDiagnostic) -> dict[str, object]:
    """Return the JSON-friendly form of one diagnostic."""
    payload: dict[str, object] = {
        "key": diagnostic.key,
        "kind": diagnostic.kind.key,
        "level": diagnostic.level.value,
        "message": diagnostic.message,
        "node": node_kind(diagnostic.raw_node),
    }
    if diagnostic.position is not None:
        payload["line"] = diagnostic.position.line
        payload["column"] = diagnostic.position.column
    return payload


def build_result_payload(
    result: DecodeResult[Any],
    *,
    path: Path | None = None,
) -> dict[str, object]:
    """Return the JSON document for one decode result.

    Args:
        result: The decode result.
        path: Source file of the decoded document, if any.

    Returns:
        A mapping with ``meta``, ``path``, ``record``, ``diagnostics`` and ``summary``.
    """
    return {
        "meta": build_meta_payload(),
        "path": str(path) if path is not None else None,
        "record": normalize_payload(result.record),
        "diagnostics": [build_diagnostic_payload(d) for d in result.diagnostics],
        "summary": diagnostics_counts_to_dict(result.diagnostics),
    }


def iter_result_records(
    result: DecodeResult[Any],
    *,
    path: Path | None = None,
) -> Iterator[dict[str, object]]:
    """Yield NDJSON records for one decode result.

    Yields:
        A ``record`` record, one ``diagnostic`` record per diagnostic, then a
        ``summary`` record. Each includes ``kind``, ``meta`` and ``path``.
    """
    meta: MetaPayload = build_meta_payload()
    where: str | None = str(path) if path is not None else None

    yield {
        "kind": "record",
        "meta": meta,
        "path": where,
        "record": normalize_payload(result.record),
    }
    for d in result.diagnostics:
        yield {
            "kind": "diagnostic",
            "meta": meta,
            "path": where,
            "diagnostic": build_diagnostic_payload(d),
        }
    yield {
        "kind": "summary",
        "meta": meta,
        "path": where,
        "summary": diagnostics_counts_to_dict(result.diagnostics),
    }
