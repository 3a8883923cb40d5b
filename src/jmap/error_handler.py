"""Error handling implementation for jmap."""

import logging
from typing import Optional

from .models import FlattenConfig
from .types import (
    MAX_DEPTH,
    ErrorHandlerInterface,
    ErrorResponse,
    ErrorType,
    JmapError,
    ValidationError,
    ValidationResult,
)
from .utils.validation import ValidationUtils


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for jmap operations.

    Validates input, checks configuration, and turns raised JmapErrors
    into a response describing whether and how the caller can recover.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate input JSON string.

        Args:
            input_data: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        try:
            return ValidationUtils.validate_json_string(input_data)
        except (TypeError, AttributeError, RecursionError) as e:
            self.logger.error(f"Unexpected error during input validation: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.SYNTAX,
                    message=f"Validation failed with unexpected error: {str(e)}",
                    location="input"
                )],
                warnings=[]
            )

    def validate_config(self, config: FlattenConfig) -> ValidationResult:
        """
        Check a configuration for values that work but are likely mistakes.

        Args:
            config: FlattenConfig to check

        Returns:
            ValidationResult; problems are reported as warnings only
        """
        warnings = []

        if config.separator and config.separator != config.separator.strip():
            warnings.append("Separator contains surrounding whitespace.")

        if config.max_depth > MAX_DEPTH:
            warnings.append(f"max_depth {config.max_depth} is above the usual ceiling of {MAX_DEPTH}.")

        if config.prefix != config.prefix.strip():
            warnings.append("Prefix whitespace is trimmed before use.")

        return ValidationResult(is_valid=True, errors=[], warnings=warnings)

    def handle_error(self, error: JmapError) -> ErrorResponse:
        """
        Handle jmap errors and provide recovery suggestions.

        Args:
            error: JmapError to handle

        Returns:
            ErrorResponse with recovery information
        """
        self.logger.error(f"jmap error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.INPUT_SHAPE:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Input must be a string-keyed map. "
                                 "Wrap scalar or list input in an object before flattening.",
                partial_results=None
            )
        elif error.error_type == ErrorType.COLLISION:
            return ErrorResponse(
                can_recover=False,
                suggested_action=f"Key '{error.context.get('path')}' needs segment "
                                 f"'{error.context.get('key')}' to be a map, but it already holds a value. "
                                 "Remove one of the conflicting keys.",
                partial_results=None
            )
        elif error.error_type == ErrorType.NORMALIZATION:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Values were stored but not normalized. "
                                 "Replace or drop the listed keys to keep the map primitive-only.",
                partial_results=error.context.get("invalid_keys")
            )
        elif error.error_type == ErrorType.BUILD:
            return ErrorResponse(
                can_recover=True,
                suggested_action="The tree was built up to the failing map. "
                                 "Inspect the partial result or fix the mapper.",
                partial_results=error.context.get("partial_results")
            )
        elif error.error_type == ErrorType.CIRCULAR:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Remove circular references from input data. "
                                 "Check for maps that contain themselves.",
                partial_results=None
            )
        elif error.error_type == ErrorType.CONFIG:
            return ErrorResponse(
                can_recover=False,
                suggested_action=f"Fix the '{error.context.get('option')}' option and retry.",
                partial_results=None
            )

        # ErrorType.SYNTAX
        return ErrorResponse(
            can_recover=False,
            suggested_action="Fix the JSON syntax and retry.",
            partial_results=None
        )
