# topmark:header:start
#
#   project      : PluginYml
#   file         : __init__.py
#   file_relpath : src/pluginyml/tree/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic document tree and its YAML front-end.

The decoder never parses text itself: it consumes the immutable node types
defined in [`pluginyml.tree.model`][pluginyml.tree.model]. Hosts build those trees
either by hand or from YAML text with
[`pluginyml.tree.yaml_builder`][pluginyml.tree.yaml_builder].
"""

from __future__ import annotations

from pluginyml.tree.guards import (
    ContainerNode,
    ScalarNode,
    is_container_node,
    is_mapping_node,
    is_scalar_node,
)
from pluginyml.tree.model import (
    BlockScalar,
    BlockStyle,
    MappingNode,
    PlainScalar,
    SequenceNode,
    SourcePosition,
    TreeNode,
    node_kind,
)
from pluginyml.tree.yaml_builder import TreeBuildError, build_tree, load_tree

__all__ = [
    "BlockScalar",
    "BlockStyle",
    "ContainerNode",
    "MappingNode",
    "PlainScalar",
    "ScalarNode",
    "SequenceNode",
    "SourcePosition",
    "TreeBuildError",
    "TreeNode",
    "build_tree",
    "is_container_node",
    "is_mapping_node",
    "is_scalar_node",
    "load_tree",
    "node_kind",
]
