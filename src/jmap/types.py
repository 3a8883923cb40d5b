"""Core type definitions for jmap."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple


MAX_DEPTH = 15  # why go deeper

# Decides whether a dynamic value is a string-keyed map.
IsMap = Callable[[Any], bool]

# Path-string keyed, single level.
FlatMap = Dict[str, Any]


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    INPUT_SHAPE = "input_shape"
    COLLISION = "collision"
    NORMALIZATION = "normalization"
    BUILD = "build"
    CIRCULAR = "circular"
    CONFIG = "config"


@dataclass
class FlattenResult:
    """Result of a facade flatten operation."""
    success: bool
    data: Optional[FlatMap] = None
    json_string: str = ""
    errors: Optional[List[str]] = None
    warnings: List[str] = field(default_factory=list)


@dataclass
class UnflattenResult:
    """Result of a facade unflatten operation."""
    success: bool
    data: Optional[Dict[str, Any]] = None
    json_string: str = ""
    errors: Optional[List[str]] = None


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str
    partial_results: Optional[Any] = None


class JmapError(Exception):
    """Base exception for every failure raised by jmap."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context or {}


class NotAMapError(JmapError):
    """Top-level input is not map-shaped under the active predicate."""

    def __init__(self, message: str = "Not a string-keyed map", value: Any = None):
        super().__init__(message, ErrorType.INPUT_SHAPE, context={"value_type": type(value).__name__})


class PathCollisionError(JmapError):
    """An intermediate path segment already holds a non-map value."""

    def __init__(self, path: str, index: int, key: str):
        super().__init__(
            f"path {path} has invalid intermediate at {index} key {key}",
            ErrorType.COLLISION,
            context={"path": path, "index": index, "key": key},
        )
        self.path = path
        self.index = index
        self.key = key


class NormalizationError(JmapError):
    """One or more values could not be normalized to a primitive."""

    def __init__(self, invalid_keys: List[str], message: Optional[str] = None):
        if message is None:
            message = f"Invalid values: {', '.join(invalid_keys)}"
        super().__init__(message, ErrorType.NORMALIZATION, context={"invalid_keys": list(invalid_keys)})
        self.invalid_keys = list(invalid_keys)


class ConfigError(JmapError, ValueError):
    """A configuration option has a value of the wrong type."""

    def __init__(self, message: str, option: str):
        super().__init__(message, ErrorType.CONFIG, context={"option": option})
        self.option = option


class BuildError(JmapError):
    """Building a canonical tree failed part way through."""

    def __init__(self, message: str, partial_result: Any = None, path: Optional[List[str]] = None):
        super().__init__(
            message,
            ErrorType.BUILD,
            context={"partial_results": partial_result, "path": list(path or [])},
        )
        self.partial_result = partial_result
        self.path = list(path or [])


# Abstract base classes for interfaces

class MapperInterface(ABC):
    """Abstract interface for recognizing and destructuring map-like values."""

    @abstractmethod
    def is_map(self, value: Any) -> bool:
        """Return True if value should be treated as a string-keyed map."""
        pass

    @abstractmethod
    def unpack(self, value: Any) -> Tuple[List[str], List[Any]]:
        """Split a recognized map into parallel key and value lists."""
        pass


class VisitorInterface(ABC):
    """Abstract interface for canonical tree visitors."""

    @abstractmethod
    def visit(self, key: str, node: Any, path: List[str]) -> None:
        """Called before the children of an internal node are walked."""
        pass

    @abstractmethod
    def visited(self, key: str, node: Any, path: List[str]) -> None:
        """Called after the children of an internal node are walked."""
        pass


class ErrorHandlerInterface(ABC):
    """Abstract interface for error handling."""

    @abstractmethod
    def validate_input(self, input_data: str) -> ValidationResult:
        """Validate input data."""
        pass

    @abstractmethod
    def handle_error(self, error: JmapError) -> ErrorResponse:
        """Handle jmap errors."""
        pass
