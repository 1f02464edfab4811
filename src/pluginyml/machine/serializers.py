# topmark:header:start
#
#   project      : PluginYml
#   file         : serializers.py
#   file_relpath : src/pluginyml/machine/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Pure JSON/NDJSON serialization utilities for machine output.

Conventions:
- `serialize_json_object()` does not append a trailing newline.
- `serialize_ndjson()` returns a string that *does* end with a final `\\n`,
  which is convenient for CLI printing and piping.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from .payloads import normalize_payload

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


def serialize_json_object(obj: object) -> str:
    """Serialize an object to pretty-printed JSON (no trailing newline)."""
    return json.dumps(normalize_payload(obj), indent=2)


def serialize_ndjson(records: Iterable[Mapping[str, object]]) -> str:
    """Serialize NDJSON record mappings into a newline-delimited string.

    Args:
        records: Shaped NDJSON record mappings.

    Returns:
        One JSON object per line, ending with a trailing newline (empty string if
        there are no records).
    """
    lines: list[str] = [json.dumps(normalize_payload(record)) for record in records]
    return "".join(f"{line}\n" for line in lines)
