"""Map predicates deciding where flatten and build recurse."""

from collections.abc import Mapping
from typing import Any

from .models.tree_node import TreeNode


def _has_string_keys(value: Any) -> bool:
    try:
        return all(isinstance(key, str) for key in value)
    except Exception:
        return False


def is_min_map(value: Any) -> bool:
    """True only for a plain ``dict`` whose keys are all strings."""
    return type(value) is dict and _has_string_keys(value)


def is_general_map(value: Any) -> bool:
    """True for any ``Mapping`` whose keys are all strings."""
    return isinstance(value, Mapping) and _has_string_keys(value)


def is_string_key_map(value: Any) -> bool:
    return is_min_map(value) or is_general_map(value)


def is_tree_node(value: Any) -> bool:
    """True for an internal node of a canonical tree."""
    return isinstance(value, TreeNode) and value.is_internal()
