"""Mapper strategies used by the canonical tree builder."""

from typing import Any, List, Tuple

from .predicates import is_min_map, is_string_key_map
from .types import MapperInterface


class MinMapper(MapperInterface):
    """Recognizes plain ``dict`` values with string keys only."""

    def is_map(self, value: Any) -> bool:
        return is_min_map(value)

    def unpack(self, value: Any) -> Tuple[List[str], List[Any]]:
        keys = []
        values = []
        for key, val in value.items():
            keys.append(key)
            values.append(val)
        return keys, values


class GeneralMapper(MapperInterface):
    """
    Recognizes any string-keyed ``Mapping``.

    Covers ``OrderedDict``, ``defaultdict``, ``MappingProxyType``,
    ``ChainMap``, ``PriMap`` and user-defined mappings as well as
    plain dicts.
    """

    def is_map(self, value: Any) -> bool:
        return is_string_key_map(value)

    def unpack(self, value: Any) -> Tuple[List[str], List[Any]]:
        keys = list(value.keys())
        return keys, [value[key] for key in keys]
