"""
jmap - Flatten nested string-keyed maps into path-keyed maps and back.

Also builds canonical typed trees with a visitor walk, and provides a
primitive-only map for lossless JSON serialization.
"""

from .flatten import flatten, flatten_map, unflatten, unflatten_map
from .mappers import GeneralMapper, MinMapper
from .models import FlattenConfig, NodeType, TreeNode
from .predicates import is_general_map, is_min_map, is_string_key_map, is_tree_node
from .primap import PriMap, is_primitive, normalize, normalize_error
from .transformer import JsonMapTransformer
from .tree import LeafCollector, PathCollector, Visitor, build, traverse
from .types import (
    MAX_DEPTH,
    BuildError,
    ConfigError,
    JmapError,
    NormalizationError,
    NotAMapError,
    PathCollisionError,
    FlattenResult,
    UnflattenResult,
)

__version__ = "1.0.0"
__all__ = [
    "MAX_DEPTH",
    "flatten",
    "flatten_map",
    "unflatten",
    "unflatten_map",
    "FlattenConfig",
    "is_min_map",
    "is_general_map",
    "is_string_key_map",
    "is_tree_node",
    "MinMapper",
    "GeneralMapper",
    "TreeNode",
    "NodeType",
    "build",
    "traverse",
    "Visitor",
    "PathCollector",
    "LeafCollector",
    "PriMap",
    "is_primitive",
    "normalize",
    "normalize_error",
    "JsonMapTransformer",
    "JmapError",
    "NotAMapError",
    "PathCollisionError",
    "NormalizationError",
    "BuildError",
    "ConfigError",
    "FlattenResult",
    "UnflattenResult",
]
