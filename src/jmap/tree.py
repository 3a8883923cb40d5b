"""Canonical tree builder and visitor traversal."""

import logging
from typing import Any, Dict, List, Optional

from .mappers import MinMapper
from .models.flatten_config import DEFAULT_SEPARATOR
from .models.tree_node import TreeNode
from .predicates import is_tree_node
from .types import MAX_DEPTH, BuildError, MapperInterface, NotAMapError, VisitorInterface

logger = logging.getLogger(__name__)


def build(value: Any, max_depth: int = 0, mapper: Optional[MapperInterface] = None) -> TreeNode:
    """
    Build a canonical tree from any map-like value.

    Child maps become internal nodes while depth remains; past the depth
    limit a child map is kept as the raw value of a leaf node, the same
    cut-off flatten applies.

    Args:
        value: Map-like source recognized by mapper
        max_depth: Levels to build; values <= 0 mean the ceiling (15)
        mapper: Strategy recognizing and unpacking maps (MinMapper by default)

    Returns:
        Root internal TreeNode

    Raises:
        NotAMapError: If value is not a map under mapper
        BuildError: If a nested map could not be unpacked. The error's
            ``partial_result`` holds the root with every node attached
            up to the failure.
    """
    if mapper is None:
        mapper = MinMapper()

    if max_depth <= 0:
        max_depth = MAX_DEPTH

    if not mapper.is_map(value):
        raise NotAMapError("Not a valid map", value)

    root = TreeNode.internal()
    try:
        _build(value, max_depth, mapper, root, [])
    except BuildError as e:
        e.partial_result = root
        e.context["partial_results"] = root
        raise
    return root


def _build(value: Any, depth: int, mapper: MapperInterface, node: TreeNode, path: List[str]) -> None:
    location = ".".join(path) or "root"
    try:
        keys, values = mapper.unpack(value)
    except Exception as e:
        raise BuildError(f"Failed to unpack map at {location}: {e}", path=path) from e

    if len(keys) != len(values):
        raise BuildError(
            f"Mapper returned {len(keys)} keys and {len(values)} values at {location}",
            path=path,
        )

    for key, child in zip(keys, values):
        if depth > 1 and mapper.is_map(child):
            child_node = TreeNode.internal()
            # attached first so a failure below still shows up in the partial result
            node.children[key] = child_node
            _build(child, depth - 1, mapper, child_node, path + [key])
        else:
            node.children[key] = TreeNode.leaf(child)


def traverse(tree: TreeNode, visitor: VisitorInterface) -> None:
    """
    Walk every internal node of ``tree``.

    ``visitor.visit`` runs before a node's children are walked and
    ``visitor.visited`` after. The root is reported with key ``""`` and
    path ``[]``; every other node's path ends with its own key. Sibling
    order follows the children dict.
    """
    _traverse("", tree, [], visitor)


def _traverse(key: str, node: TreeNode, path: List[str], visitor: VisitorInterface) -> None:
    visitor.visit(key, node, path)
    for child_key, child in node.children.items():
        if is_tree_node(child):
            _traverse(child_key, child, path + [child_key], visitor)
    visitor.visited(key, node, path)


class Visitor(VisitorInterface):
    """Visitor with no-op hooks; override the ones you need."""

    def visit(self, key: str, node: TreeNode, path: List[str]) -> None:
        pass

    def visited(self, key: str, node: TreeNode, path: List[str]) -> None:
        pass


class PathCollector(Visitor):
    """Collects the path of every internal node in pre-order."""

    def __init__(self):
        self.paths: List[List[str]] = []

    def visit(self, key: str, node: TreeNode, path: List[str]) -> None:
        self.paths.append(list(path))


class LeafCollector(Visitor):
    """
    Collects leaves into a flat map keyed by joined paths.

    Over a tree built with the same depth this yields what ``flatten``
    yields for the source, except that empty maps stay out of the result.
    """

    def __init__(self, separator: str = DEFAULT_SEPARATOR, logger: Optional[logging.Logger] = None):
        self.separator = separator or DEFAULT_SEPARATOR
        self.logger = logger or logging.getLogger(__name__)
        self.leaves: Dict[str, Any] = {}

    def visit(self, key: str, node: TreeNode, path: List[str]) -> None:
        for child_key, child in node.children.items():
            if child.is_leaf():
                self.leaves[self.separator.join(path + [child_key])] = child.value

    def visited(self, key: str, node: TreeNode, path: List[str]) -> None:
        if not path:
            self.logger.debug(f"Collected {len(self.leaves)} leaves")
