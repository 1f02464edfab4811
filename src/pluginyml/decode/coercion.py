# topmark:header:start
#
#   project      : PluginYml
#   file         : coercion.py
#   file_relpath : src/pluginyml/decode/coercion.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value coercion for document tree nodes.

Each ``coerce_*`` helper converts the value node of one key into a Python value.
Problems are recorded in a `DiagnosticLog` (and logged at debug level) instead of
being raised. A return value of ``None`` means "leave the field unset"; every
successfully coerced value is non-``None``.

Helpers:
    - `fold_block_scalar`: join the lines of a block scalar per its style.
    - `coerce_scalar`: text value of a plain or block scalar.
    - `coerce_boolean`: YAML 1.1 boolean tokens, strict or lenient.
    - `coerce_enum`: exact, case-sensitive enum member name.
    - `coerce_string_list`: list of strings from a sequence or mapping.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Final, TypeVar

from pluginyml.config.logging import get_logger
from pluginyml.core.enum_mixins import enum_from_name, enum_member_names
from pluginyml.diagnostic.model import DiagnosticKind
from pluginyml.tree.guards import is_scalar_node
from pluginyml.tree.model import (
    BlockScalar,
    MappingNode,
    PlainScalar,
    SequenceNode,
    node_kind,
)

if TYPE_CHECKING:
    from pluginyml.config.logging import PluginYmlLogger
    from pluginyml.diagnostic.model import DiagnosticLog
    from pluginyml.tree.model import TreeNode

logger: PluginYmlLogger = get_logger(__name__)

E = TypeVar("E", bound=Enum)

TRUE_TOKENS: Final[frozenset[str]] = frozenset({"y", "yes", "true", "on"})
FALSE_TOKENS: Final[frozenset[str]] = frozenset({"n", "no", "false", "off"})


def parse_boolean_token(text: str) -> bool | None:
    """Return the boolean named by ``text``, or ``None`` if it is not a boolean token.

    Matching is case-insensitive and exact (no surrounding whitespace is stripped).
    """
    token: str = text.lower()
    if token in TRUE_TOKENS:
        return True
    if token in FALSE_TOKENS:
        return False
    return None


def fold_block_scalar(node: BlockScalar) -> str:
    """Return the text of a block scalar.

    The indicator line is discarded and the remaining lines are stripped. Lines are
    joined with the style separator (newline for literal, space for folded), and
    one separator is appended after the last line. An indicator-only block yields
    an empty string.
    """
    body: tuple[str, ...] = node.lines[1:]
    if not body:
        return ""
    sep: str = node.style.separator
    return sep.join(line.strip() for line in body) + sep


def scalar_text(node: PlainScalar | BlockScalar) -> str:
    """Return the text of a plain scalar, or the folded text of a block scalar."""
    match node:
        case PlainScalar(text=text):
            return text
        case BlockScalar():
            return fold_block_scalar(node)


def coerce_scalar(node: TreeNode, *, key: str, diagnostics: DiagnosticLog) -> str | None:
    """Return the text of a scalar node.

    Mappings and sequences record `EXPECTED_SCALAR` and return ``None``.
    """
    match node:
        case PlainScalar() | BlockScalar():
            return scalar_text(node)
        case MappingNode() | SequenceNode():
            diagnostics.add(
                key,
                DiagnosticKind.EXPECTED_SCALAR,
                node,
                f"Expected a scalar value for {key!r}, got a {node_kind(node)}",
            )
            return None


def coerce_boolean(
    node: TreeNode,
    *,
    key: str,
    strict: bool,
    diagnostics: DiagnosticLog,
) -> bool | str | None:
    """Return the boolean named by a plain scalar.

    Behavior:
        - Boolean token: ``True`` / ``False``.
        - Strict rule, anything else (including non-plain nodes): records
          `EXPECTED_BOOLEAN` and returns ``False``.
        - Lenient rule, other scalar: the text itself (block scalars are folded).
        - Lenient rule, mapping or sequence: records `EXPECTED_SCALAR`, returns ``None``.
    """
    if isinstance(node, PlainScalar):
        value: bool | None = parse_boolean_token(node.text)
        if value is not None:
            return value

    if strict:
        shown: str = repr(node.text) if isinstance(node, PlainScalar) else f"a {node_kind(node)}"
        diagnostics.add(
            key,
            DiagnosticKind.EXPECTED_BOOLEAN,
            node,
            f"Expected a boolean value for {key!r}, got {shown}; using false",
        )
        return False

    return coerce_scalar(node, key=key, diagnostics=diagnostics)


def coerce_enum(
    node: TreeNode,
    enum_type: type[E],
    *,
    key: str,
    diagnostics: DiagnosticLog,
) -> E | None:
    """Return the member of ``enum_type`` whose name equals the scalar text exactly.

    Non-plain nodes record `EXPECTED_SCALAR`; unknown names record
    `INVALID_ENUM_VALUE` listing the valid names. Both return ``None``.
    """
    if not isinstance(node, PlainScalar):
        diagnostics.add(
            key,
            DiagnosticKind.EXPECTED_SCALAR,
            node,
            f"Expected a plain scalar for {key!r}, got a {node_kind(node)}",
        )
        return None

    member: E | None = enum_from_name(enum_type, node.text)
    if member is None:
        allowed: str = ", ".join(enum_member_names(enum_type))
        diagnostics.add(
            key,
            DiagnosticKind.INVALID_ENUM_VALUE,
            node,
            f"Invalid value for {key!r}: {node.text!r} (allowed: {allowed})",
        )
    return member


def coerce_string_list(
    node: TreeNode,
    *,
    key: str,
    diagnostics: DiagnosticLog,
) -> list[str] | None:
    """Return the strings held by a sequence (items) or a mapping (entry values).

    Behavior:
        - Any other node records `EXPECTED_LIST_CONTAINER` and returns ``None``.
        - Elements that are not scalars record `INVALID_LIST_ELEMENT` and are skipped.
    """
    match node:
        case SequenceNode(items=items):
            elements: tuple[TreeNode, ...] = items
        case MappingNode():
            elements = node.values()
        case PlainScalar() | BlockScalar():
            diagnostics.add(
                key,
                DiagnosticKind.EXPECTED_LIST_CONTAINER,
                node,
                f"Expected a list for {key!r}, got a {node_kind(node)}",
            )
            return None

    out: list[str] = []
    for index, element in enumerate(elements):
        if is_scalar_node(element):
            out.append(scalar_text(element))
            continue
        diagnostics.add(
            key,
            DiagnosticKind.INVALID_LIST_ELEMENT,
            element,
            f"Ignoring non-scalar entry #{index + 1} in {key!r}: got a {node_kind(element)}",
        )
    logger.trace("Coerced %d of %d list entries for %s", len(out), len(elements), key)
    return out
