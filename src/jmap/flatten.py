"""
Flatten nested string-keyed maps into path-keyed flat maps and back.

Nothing here copies its input. ``flatten`` writes into the accumulator
the caller hands in (or a fresh dict) and returns that same object; the
leaf values it stores, including sub-maps cut off by the depth limit,
are the caller's own objects. ``unflatten`` reuses a plain dict it finds
as a leaf when a longer key needs that segment as an intermediate node,
so the result can share structure with the flat input. Callers that
mutate either side afterwards must own both.

Neither function detects cycles. The depth ceiling bounds flatten's
recursion; unflatten is bounded by the length of its keys.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from .models.flatten_config import DEFAULT_SEPARATOR, FlattenConfig
from .predicates import is_min_map
from .types import FlatMap, IsMap, NotAMapError, PathCollisionError

logger = logging.getLogger(__name__)


def flatten(value: Any, max_depth: int = 0, separator: str = DEFAULT_SEPARATOR,
            accumulator: Optional[FlatMap] = None, is_map: Optional[IsMap] = None) -> FlatMap:
    """
    Flatten a nested map into a single-level map keyed by joined paths.

    Args:
        value: Nested map to flatten
        max_depth: Levels to descend; values <= 0 mean the ceiling (15)
        separator: String joining path segments; empty means "."
        accumulator: Optional dict to write into; it is mutated and returned
        is_map: Predicate deciding which values to descend into

    Returns:
        The accumulator holding ``path -> leaf`` entries

    Raises:
        NotAMapError: If value itself is not a map under is_map
    """
    config = FlattenConfig(separator=separator or DEFAULT_SEPARATOR, max_depth=max_depth, is_map=is_map)
    return flatten_map(value, config, accumulator)


def flatten_map(value: Any, config: Optional[FlattenConfig] = None,
                accumulator: Optional[FlatMap] = None) -> FlatMap:
    """
    Flatten ``value`` using the options in ``config``.

    A non-empty prefix acts as the root path, so ``{"a": 1}`` flattened
    with prefix ``"p"`` yields ``{"p.a": 1}`` and an empty map yields
    ``{"p": {}}``. Without a prefix an empty map adds nothing.
    """
    if config is None:
        config = FlattenConfig()
    is_map = config.is_map or is_min_map

    if accumulator is None:
        accumulator = {}

    if not is_map(value):
        raise NotAMapError(value=value)
    if len(value) == 0 and not config.effective_prefix:
        return accumulator

    _flatten(value, config.effective_prefix, config.effective_depth,
             config.effective_separator, is_map, accumulator)
    logger.debug(f"Flattened map into {len(accumulator)} entries")
    return accumulator


def _flatten(value: Any, parent: str, depth: int, separator: str,
             is_map: IsMap, accumulator: FlatMap) -> None:
    if depth <= 0 or not is_map(value) or len(value) == 0:
        accumulator[parent] = value
        return

    for key, child in value.items():
        new_key = key if parent == "" else parent + separator + key
        _flatten(child, new_key, depth - 1, separator, is_map, accumulator)


def unflatten(flat: Mapping[str, Any], separator: str = DEFAULT_SEPARATOR) -> Dict[str, Any]:
    """
    Rebuild a nested map from a flat map produced by ``flatten``.

    Args:
        flat: Flat map keyed by joined paths
        separator: String used to split keys; empty means "."

    Returns:
        Nested map whose internal nodes are plain dicts

    Raises:
        PathCollisionError: If a key needs an intermediate segment that
            already holds a non-map leaf
    """
    return unflatten_map(flat, FlattenConfig(separator=separator or DEFAULT_SEPARATOR))


def unflatten_map(flat: Mapping[str, Any], config: Optional[FlattenConfig] = None) -> Dict[str, Any]:
    """
    Rebuild a nested map using the options in ``config``.

    Only keys starting with the (whitespace-trimmed) prefix are used and
    the prefix is cut off before splitting. With ``sort_keys`` the keys
    are applied in sorted order, so ``{"a.b": 2, "a": 1}`` fails the same
    way as ``{"a": 1, "a.b": 2}``; otherwise the mapping's own order
    decides whether a shorter key collides or silently overwrites.
    """
    result: Dict[str, Any] = {}
    if len(flat) == 0:
        return result

    if config is None:
        config = FlattenConfig()
    separator = config.effective_separator
    prefix = config.effective_prefix
    prefix_len = len(prefix)

    keys = sorted(flat) if config.sort_keys else list(flat)
    for flat_key in keys:
        value = flat[flat_key]
        path = flat_key
        if prefix_len > 0:
            if len(path) <= prefix_len or not path.startswith(prefix):
                continue
            path = path[prefix_len:]

        segments = path.split(separator)
        node = result
        for index, segment in enumerate(segments[:-1]):
            if segment in node:
                child = node[segment]
                if not isinstance(child, dict):
                    raise PathCollisionError(path, index, segment)
                node = child
            else:
                child = {}
                node[segment] = child
                node = child
        node[segments[-1]] = value

    logger.debug(f"Unflattened {len(keys)} keys into {len(result)} top-level entries")
    return result

