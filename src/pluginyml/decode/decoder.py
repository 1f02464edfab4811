# topmark:header:start
#
#   project      : PluginYml
#   file         : decoder.py
#   file_relpath : src/pluginyml/decode/decoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Schema-driven decoding of a document tree into a typed record.

`decode()` walks the entries of a root `MappingNode` in document order and, for each
key, dispatches on the schema rule's `RuleKind` to the matching coercion helper in
[`pluginyml.decode.coercion`][pluginyml.decode.coercion]. Decoded values are written
through the schema's setter table; problems become diagnostics and never stop the
walk, so a partially malformed document still yields every value that could be
decoded.

`decode()` is a pure function of its inputs: it reads the (immutable) tree, creates a
fresh record and a fresh diagnostic log, and returns both. Decoding the same tree with
the same schema twice yields equal results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pluginyml.config.logging import get_logger
from pluginyml.diagnostic.model import DiagnosticKind, DiagnosticLog, FrozenDiagnosticLog
from pluginyml.schema.model import RuleKind

from .coercion import coerce_boolean, coerce_enum, coerce_scalar, coerce_string_list

if TYPE_CHECKING:
    from pluginyml.config.logging import PluginYmlLogger
    from pluginyml.schema.model import Schema, SchemaRule
    from pluginyml.tree.model import MappingNode, TreeNode

logger: PluginYmlLogger = get_logger(__name__)

R = TypeVar("R")


@dataclass(frozen=True)
class DecodeResult(Generic[R]):
    """Outcome of one decode call.

    Attributes:
        record: The populated record; fields that failed to decode keep their defaults.
        diagnostics: Problems found while decoding, in document order.
    """

    record: R
    diagnostics: FrozenDiagnosticLog

    @property
    def ok(self) -> bool:
        """Return True when decoding produced no diagnostics at all."""
        return len(self.diagnostics) == 0


def _coerce(rule: SchemaRule, node: TreeNode, diagnostics: DiagnosticLog) -> Any | None:
    """Coerce ``node`` per ``rule``; ``None`` leaves the target field unset."""
    key: str = rule.key
    match rule.kind:
        case RuleKind.SCALAR:
            return coerce_scalar(node, key=key, diagnostics=diagnostics)
        case RuleKind.BOOLEAN:
            return coerce_boolean(node, key=key, strict=rule.strict, diagnostics=diagnostics)
        case RuleKind.ENUM:
            assert rule.enum_type is not None  # enforced by SchemaRule
            return coerce_enum(node, rule.enum_type, key=key, diagnostics=diagnostics)
        case RuleKind.STRING_LIST:
            return coerce_string_list(node, key=key, diagnostics=diagnostics)
        case RuleKind.RESERVED:
            return None


def decode(root: MappingNode, schema: Schema[R]) -> DecodeResult[R]:
    """Decode the entries of ``root`` into a new record described by ``schema``.

    For each ``(key, value)`` entry, in order:

    1. Keys absent from the schema record `UNKNOWN_KEY` and are skipped.
    2. Keys already seen in ``root`` record `DUPLICATE_KEY`; the entry is still decoded,
       so the last successfully decoded value wins.
    3. Reserved keys are accepted without decoding.
    4. Other keys are coerced per their rule and written into the record on success.

    Args:
        root (MappingNode): Root mapping of the document.
        schema (Schema[R]): Validated schema bound to the record type.

    Returns:
        DecodeResult[R]: The populated record and the collected diagnostics.
    """
    record: R = schema.new_record()
    diagnostics = DiagnosticLog()
    seen: set[str] = set()

    for key, node in root:
        rule: SchemaRule | None = schema.rule_for(key)
        if rule is None:
            diagnostics.add(key, DiagnosticKind.UNKNOWN_KEY, node, f"Unknown key {key!r}")
            continue

        if key in seen:
            diagnostics.add(
                key,
                DiagnosticKind.DUPLICATE_KEY,
                node,
                f"Duplicate key {key!r}; the later value takes precedence",
            )
        seen.add(key)

        logger.trace("Decoding %r as %s", key, rule.kind.value)
        value: Any | None = _coerce(rule, node, diagnostics)
        if value is not None:
            schema.assign(record, key, value)

    result: DecodeResult[R] = DecodeResult(record=record, diagnostics=diagnostics.freeze())
    logger.debug(
        "Decoded %d entries into %s (%d diagnostics)",
        len(root),
        type(record).__name__,
        len(result.diagnostics),
    )
    return result
