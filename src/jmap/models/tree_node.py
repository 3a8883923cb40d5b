"""Canonical tree node model."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple


class NodeType(Enum):
    """Tag distinguishing internal nodes from leaves."""
    INTERNAL = "internal"
    LEAF = "leaf"


@dataclass
class TreeNode:
    """
    A node in a canonical tree.

    Internal nodes carry ``children`` keyed by string; leaf nodes carry
    ``value``. Traversal decides whether to descend from ``node_type``
    alone, so a leaf holding a raw ``dict`` (a sub-map cut off by the
    depth limit) is never walked into.
    """

    node_type: NodeType
    value: Any = None
    children: Dict[str, "TreeNode"] = field(default_factory=dict)

    def __post_init__(self):
        """Validate node after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate node integrity."""
        if self.node_type not in NodeType:
            raise ValueError(f"Invalid node_type: {self.node_type}")

        if self.node_type == NodeType.LEAF and self.children:
            raise ValueError("leaf nodes cannot have children")

        if self.node_type == NodeType.INTERNAL and self.value is not None:
            raise ValueError("internal nodes cannot hold a value")

    @classmethod
    def leaf(cls, value: Any) -> "TreeNode":
        return cls(node_type=NodeType.LEAF, value=value)

    @classmethod
    def internal(cls, children: Optional[Dict[str, "TreeNode"]] = None) -> "TreeNode":
        return cls(node_type=NodeType.INTERNAL, children=children if children is not None else {})

    def is_leaf(self) -> bool:
        return self.node_type == NodeType.LEAF

    def is_internal(self) -> bool:
        return self.node_type == NodeType.INTERNAL

    def get(self, path: List[str]) -> Optional["TreeNode"]:
        """
        Walk ``path`` down from this node.

        Args:
            path: Keys from this node to the target

        Returns:
            The node found, or None if the path leaves the tree
        """
        node = self
        for key in path:
            if not node.is_internal() or key not in node.children:
                return None
            node = node.children[key]
        return node

    def iter_leaves(self, path: Optional[List[str]] = None) -> Iterator[Tuple[List[str], Any]]:
        """Yield ``(path, value)`` for every leaf below this node."""
        path = path or []
        if self.is_leaf():
            yield path, self.value
            return
        for key, child in self.children.items():
            yield from child.iter_leaves(path + [key])

    def to_dict(self) -> Any:
        """Convert back to plain nested dicts; a leaf converts to its value."""
        if self.is_leaf():
            return self.value
        return {key: child.to_dict() for key, child in self.children.items()}
