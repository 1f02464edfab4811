# topmark:header:start
#
#   project      : PluginYml
#   file         : __init__.py
#   file_relpath : src/pluginyml/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PluginYml package.

PluginYml decodes Bukkit ``plugin.yml`` descriptors (and any other document
format described by a `Schema`) from a generic document tree into a typed
record, collecting non-fatal diagnostics instead of raising. It exposes both a
CLI and a small typed API:

```python
from pluginyml import PLUGIN_SCHEMA, build_tree, decode

result = decode(build_tree(text), PLUGIN_SCHEMA)
print(result.record.name, [d.message for d in result.diagnostics])
```
"""

from __future__ import annotations

from pluginyml.decode import DecodeResult, decode
from pluginyml.diagnostic import DecodeDiagnostic, DiagnosticKind, DiagnosticLevel
from pluginyml.plugin import PLUGIN_SCHEMA, PluginConfig, PluginLoadOrder
from pluginyml.schema import RuleKind, Schema, SchemaError, SchemaFieldMismatchError, SchemaRule
from pluginyml.tree import build_tree, load_tree

__all__ = [
    "PLUGIN_SCHEMA",
    "DecodeDiagnostic",
    "DecodeResult",
    "DiagnosticKind",
    "DiagnosticLevel",
    "PluginConfig",
    "PluginLoadOrder",
    "RuleKind",
    "Schema",
    "SchemaError",
    "SchemaFieldMismatchError",
    "SchemaRule",
    "build_tree",
    "decode",
    "load_tree",
]
