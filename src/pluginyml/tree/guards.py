# topmark:header:start
#
#   project      : PluginYml
#   file         : guards.py
#   file_relpath : src/pluginyml/tree/guards.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type guards for document tree nodes.

These `TypeGuard`-based predicates help type checkers narrow `TreeNode`
values where a full ``match`` statement would be noise (e.g. in comprehensions).
"""

from __future__ import annotations

from typing import TypeGuard, Union

from .model import BlockScalar, MappingNode, PlainScalar, SequenceNode

ScalarNode = Union[PlainScalar, BlockScalar]
ContainerNode = Union[MappingNode, SequenceNode]


def is_scalar_node(obj: object) -> TypeGuard[ScalarNode]:
    """Type guard for plain or block scalar nodes.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[ScalarNode]: ``True`` if ``obj`` is a `PlainScalar` or `BlockScalar`.
    """
    return isinstance(obj, (PlainScalar, BlockScalar))


def is_container_node(obj: object) -> TypeGuard[ContainerNode]:
    """Type guard for mapping or sequence nodes.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[ContainerNode]: ``True`` if ``obj`` is a `MappingNode` or `SequenceNode`.
    """
    return isinstance(obj, (MappingNode, SequenceNode))


def is_mapping_node(obj: object) -> TypeGuard[MappingNode]:
    """Type guard for mapping nodes.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[MappingNode]: ``True`` if ``obj`` is a `MappingNode`.
    """
    return isinstance(obj, MappingNode)
