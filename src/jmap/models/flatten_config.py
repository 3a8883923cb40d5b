"""Flatten/unflatten configuration model."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..types import MAX_DEPTH, ConfigError, IsMap

DEFAULT_SEPARATOR = "."


@dataclass
class FlattenConfig:
    """
    Options shared by flatten and unflatten.

    Every field is optional. ``max_depth <= 0`` falls back to the depth
    ceiling and an empty ``separator`` falls back to ``"."``; the
    ``effective_*`` properties apply those fallbacks.
    """

    separator: str = DEFAULT_SEPARATOR
    max_depth: int = MAX_DEPTH
    prefix: str = ""
    is_map: Optional[IsMap] = None
    sort_keys: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate configuration values."""
        if not isinstance(self.separator, str):
            raise ConfigError("separator must be a string", "separator")

        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ConfigError("max_depth must be an integer", "max_depth")

        if not isinstance(self.prefix, str):
            raise ConfigError("prefix must be a string", "prefix")

        if self.is_map is not None and not callable(self.is_map):
            raise ConfigError("is_map must be callable", "is_map")

    @property
    def effective_separator(self) -> str:
        return self.separator or DEFAULT_SEPARATOR

    @property
    def effective_depth(self) -> int:
        return self.max_depth if self.max_depth > 0 else MAX_DEPTH

    @property
    def effective_prefix(self) -> str:
        return self.prefix.strip()

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary for JSON serialization."""
        return {
            "separator": self.separator,
            "maxDepth": self.max_depth,
            "prefix": self.prefix,
            "sortKeys": self.sort_keys,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FlattenConfig":
        """Create FlattenConfig from dictionary."""
        return cls(
            separator=data.get("separator", DEFAULT_SEPARATOR),
            max_depth=data.get("maxDepth", MAX_DEPTH),
            prefix=data.get("prefix", ""),
            sort_keys=data.get("sortKeys", False),
        )

    def clone(self) -> "FlattenConfig":
        """Create a copy of this configuration."""
        return FlattenConfig(
            separator=self.separator,
            max_depth=self.max_depth,
            prefix=self.prefix,
            is_map=self.is_map,
            sort_keys=self.sort_keys,
        )
