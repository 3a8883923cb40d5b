"""Validation utilities for flatten input and JSON text."""

import json
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Tuple

from ..types import MAX_DEPTH, ErrorType, ValidationError, ValidationResult

CONTAINER_TYPES = (Mapping, list, tuple)


class ValidationUtils:
    """Utility class for checking input before it reaches the engine."""

    @staticmethod
    def validate_json_string(json_string: str) -> ValidationResult:
        """
        Validate JSON string syntax and structure.

        Args:
            json_string: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        # Check if string is empty
        if not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        structure_errors, structure_warnings = ValidationUtils.validate_structure(data)
        errors.extend(structure_errors)
        warnings.extend(structure_warnings)

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def validate_structure(data: Any, max_depth: int = MAX_DEPTH,
                           separator: Optional[str] = None) -> Tuple[List[ValidationError], List[str]]:
        """
        Check a decoded tree before flattening it.

        Args:
            data: Tree to check
            max_depth: Depth beyond which flatten keeps sub-maps as leaves
            separator: If given, warn about keys containing it

        Returns:
            Tuple of (errors, warnings)
        """
        errors = []
        warnings = []

        if not isinstance(data, Mapping):
            errors.append(ValidationError(
                type=ErrorType.INPUT_SHAPE,
                message=f"Root element must be an object, got {type(data).__name__}",
                location="root"
            ))
            return errors, warnings

        if ValidationUtils.has_circular_references(data):
            errors.append(ValidationError(
                type=ErrorType.CIRCULAR,
                message="Circular references detected in map structure",
                location="unknown"
            ))
            return errors, warnings

        depth = ValidationUtils.calculate_max_depth(data)
        if depth > max_depth:
            warnings.append(f"Nesting depth {depth} exceeds {max_depth}; "
                            f"deeper maps will be kept as single values.")

        if separator:
            clashing = ValidationUtils.find_separator_keys(data, separator)
            if clashing:
                warnings.append(f"Keys containing separator '{separator}' will not "
                                f"round-trip: {', '.join(clashing)}")

        return errors, warnings

    @staticmethod
    def has_circular_references(data: Any) -> bool:
        """
        Check for circular references in data structure.

        Only a container reachable from itself counts; a value shared by
        two siblings does not. The walk keeps its own stack, so nesting
        depth is not limited by the interpreter's recursion limit.
        """
        if not isinstance(data, CONTAINER_TYPES):
            return False

        ancestors = {id(data)}
        stack = [(id(data), iter(_children(data)))]
        while stack:
            obj_id, children = stack[-1]
            for child in children:
                if isinstance(child, CONTAINER_TYPES):
                    child_id = id(child)
                    if child_id in ancestors:
                        return True
                    ancestors.add(child_id)
                    stack.append((child_id, iter(_children(child))))
                    break
            else:
                stack.pop()
                ancestors.discard(obj_id)

        return False

    @staticmethod
    def calculate_max_depth(data: Any, current_depth: int = 0) -> int:
        """
        Calculate maximum map nesting depth; lists do not count as levels.

        Data must be acyclic.
        """
        deepest = current_depth
        stack = [(data, current_depth)]
        while stack:
            value, depth = stack.pop()
            if isinstance(value, Mapping) and value:
                stack.extend((child, depth + 1) for child in value.values())
            elif depth > deepest:
                deepest = depth
        return deepest

    @staticmethod
    def find_separator_keys(data: Any, separator: str) -> List[str]:
        """
        Find keys that contain the separator and would misparse on unflatten.

        Data must be acyclic.

        Returns:
            Paths (joined with the separator) of the offending keys
        """
        found = []
        stack = [(data, "")]
        while stack:
            value, path = stack.pop()
            if not isinstance(value, Mapping):
                continue

            nested = []
            for key, child in value.items():
                key_text = str(key)
                full_path = f"{path}{separator}{key_text}" if path else key_text
                if separator in key_text:
                    found.append(full_path)
                nested.append((child, full_path))
            stack.extend(reversed(nested))
        return found


def _children(data: Any) -> Iterable[Any]:
    return data.values() if isinstance(data, Mapping) else data
