"""Data models for jmap."""

from .tree_node import TreeNode, NodeType
from .flatten_config import FlattenConfig

__all__ = ["TreeNode", "NodeType", "FlattenConfig"]
