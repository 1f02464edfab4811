# topmark:header:start
#
#   project      : PluginYml
#   file         : __init__.py
#   file_relpath : src/pluginyml/schema/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Declarative decode schemas (rules bound to a record type)."""

from __future__ import annotations

from pluginyml.schema.model import (
    RuleKind,
    Schema,
    SchemaError,
    SchemaFieldMismatchError,
    SchemaRule,
    boolean_rule,
    enum_rule,
    reserved_rule,
    scalar_rule,
    string_list_rule,
)

__all__ = [
    "RuleKind",
    "Schema",
    "SchemaError",
    "SchemaFieldMismatchError",
    "SchemaRule",
    "boolean_rule",
    "enum_rule",
    "reserved_rule",
    "scalar_rule",
    "string_list_rule",
]
