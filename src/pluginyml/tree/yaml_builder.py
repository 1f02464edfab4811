# topmark:header:start
#
#   project      : PluginYml
#   file         : yaml_builder.py
#   file_relpath : src/pluginyml/tree/yaml_builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build document trees from YAML text.

This is the host-side front-end of the decoder: it turns YAML source text into
the generic `TreeNode` model. Parsing is delegated to PyYAML's *composer*
(``yaml.compose_all`` with the ``SafeLoader``), which yields a representation
graph that still knows scalar styles and source marks. No tag resolution
happens here: every scalar is kept as text.

Conversion rules:
    * YAML mappings become `MappingNode` (keys must be scalars; duplicates are kept).
    * YAML sequences become `SequenceNode`.
    * Block scalars (``|`` and ``>``) become `BlockScalar` carrying their *raw* source
      slice, indicator line included.
    * Plain and quoted scalars become `PlainScalar` with their composed value.

Only the first YAML document is used; additional documents are logged and ignored.
An empty document yields an empty mapping.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import yaml

from pluginyml.config.logging import get_logger

from .model import (
    BlockScalar,
    BlockStyle,
    MappingNode,
    PlainScalar,
    SequenceNode,
    SourcePosition,
)

if TYPE_CHECKING:
    from pathlib import Path

    from pluginyml.config.logging import PluginYmlLogger

    from .model import TreeNode

logger: PluginYmlLogger = get_logger(__name__)

_BLOCK_STYLES: dict[str, BlockStyle] = {
    "|": BlockStyle.LITERAL,
    ">": BlockStyle.FOLDED,
}


class TreeBuildError(ValueError):
    """Raised when YAML text cannot be turned into a document tree.

    Attributes:
        position: Source position of the offending node, when known.
    """

    def __init__(self, message: str, position: SourcePosition | None = None) -> None:
        super().__init__(message)
        self.position = position

    def __str__(self) -> str:
        message: str = super().__str__()
        if self.position is None:
            return message
        return f"{self.position}: {message}"


def _position(node: yaml.Node) -> SourcePosition | None:
    mark = node.start_mark
    if mark is None:
        return None
    return SourcePosition(line=mark.line + 1, column=mark.column + 1)


class _TreeBuilder:
    """Convert one composed YAML graph into `TreeNode` values."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._active: set[int] = set()

    def build(self, node: yaml.Node) -> TreeNode:
        # Aliases may make the composed graph cyclic.
        if id(node) in self._active:
            raise TreeBuildError("Recursive alias in YAML document", _position(node))
        self._active.add(id(node))
        try:
            return self._convert(node)
        finally:
            self._active.discard(id(node))

    def _convert(self, node: yaml.Node) -> TreeNode:
        position: SourcePosition | None = _position(node)
        if isinstance(node, yaml.MappingNode):
            entries: list[tuple[str, TreeNode]] = []
            for key_node, value_node in node.value:
                if not isinstance(key_node, yaml.ScalarNode):
                    raise TreeBuildError("Mapping keys must be scalars", _position(key_node))
                entries.append((key_node.value, self.build(value_node)))
            return MappingNode(entries=tuple(entries), position=position)
        if isinstance(node, yaml.SequenceNode):
            return SequenceNode(
                items=tuple(self.build(item) for item in node.value),
                position=position,
            )
        if isinstance(node, yaml.ScalarNode):
            style: BlockStyle | None = _BLOCK_STYLES.get(node.style or "")
            if style is not None:
                return BlockScalar(
                    text=self._raw_slice(node),
                    style=style,
                    position=position,
                )
            return PlainScalar(text=node.value, position=position)
        raise TreeBuildError(f"Unsupported YAML node: {type(node).__name__}", position)

    def _raw_slice(self, node: yaml.ScalarNode) -> str:
        start, end = node.start_mark, node.end_mark
        if start is None or end is None:
            # Nodes built outside the composer may lack marks.
            indicator: str = "|" if node.style == "|" else ">"
            return "\n".join([indicator, *node.value.split("\n")])
        return self._text[start.index : end.index]


def build_tree(text: str) -> MappingNode:
    """Build the document tree for YAML ``text``.

    Args:
        text (str): YAML source text.

    Returns:
        MappingNode: The root mapping of the first document (empty if the document is empty).

    Raises:
        TreeBuildError: If the text is not valid YAML, the root is not a mapping, or a
            mapping key is not a scalar.
    """
    try:
        documents = yaml.compose_all(text, Loader=yaml.SafeLoader)
        root: yaml.Node | None = next(documents, None)
        extra: yaml.Node | None = next(documents, None)
    except yaml.MarkedYAMLError as exc:
        mark = exc.problem_mark
        position: SourcePosition | None = (
            SourcePosition(line=mark.line + 1, column=mark.column + 1) if mark else None
        )
        raise TreeBuildError(f"Invalid YAML: {exc.problem or exc}", position) from exc
    except yaml.YAMLError as exc:
        raise TreeBuildError(f"Invalid YAML: {exc}") from exc

    if extra is not None:
        logger.warning("Document contains more than one YAML document; only the first is used")

    if root is None or (isinstance(root, yaml.ScalarNode) and not root.value and not root.style):
        logger.debug("Empty YAML document, using an empty mapping")
        return MappingNode()

    tree: TreeNode = _TreeBuilder(text).build(root)
    if not isinstance(tree, MappingNode):
        raise TreeBuildError(
            f"Top-level value must be a mapping, got {type(tree).__name__}",
            tree.position,
        )
    logger.trace("Built tree with %d top-level entries", len(tree))
    return tree


def load_tree(path: Path) -> MappingNode:
    """Read ``path`` as UTF-8 and build its document tree.

    Args:
        path (Path): YAML file to read.

    Returns:
        MappingNode: The root mapping of the file's first document.

    Raises:
        TreeBuildError: If the content cannot be turned into a tree (see `build_tree`).
    """
    logger.debug("Loading YAML document from %s", path)
    text: str = path.read_text(encoding="utf-8")
    return build_tree(text)
