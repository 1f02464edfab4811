# topmark:header:start
#
#   project      : PluginYml
#   file         : __init__.py
#   file_relpath : src/pluginyml/machine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Machine-readable (JSON/NDJSON) output for decode results.

Layers:
    - **payloads**: pure payload builders (no serialization).
    - **serializers**: JSON/NDJSON helpers turning payloads into strings (no printing).
"""

from __future__ import annotations

from pluginyml.machine.payloads import (
    MetaPayload,
    build_diagnostic_payload,
    build_meta_payload,
    build_result_payload,
    iter_result_records,
    normalize_payload,
)
from pluginyml.machine.serializers import serialize_json_object, serialize_ndjson

__all__ = [
    "MetaPayload",
    "build_diagnostic_payload",
    "build_meta_payload",
    "build_result_payload",
    "iter_result_records",
    "normalize_payload",
    "serialize_json_object",
    "serialize_ndjson",
]
