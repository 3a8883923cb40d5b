"""JSON pass-through facade over the flatten/unflatten engine."""

import json
import logging
from typing import Any, Mapping, Optional

from .error_handler import ErrorHandler
from .flatten import flatten_map, unflatten_map
from .models import FlattenConfig
from .types import ErrorType, FlattenResult, JmapError, UnflattenResult
from .utils.validation import ValidationUtils


class JsonMapTransformer:
    """
    Flattens and unflattens decoded trees or JSON text.

    The engine functions raise; this class catches JmapError at its
    boundary and reports it through the result's ``errors`` instead.
    """

    def __init__(self, config: Optional[FlattenConfig] = None,
                 logger: Optional[logging.Logger] = None,
                 indent: Optional[int] = None):
        """
        Initialize the transformer.

        Args:
            config: Flatten/unflatten options (defaults apply when None)
            logger: Optional logger instance
            indent: Indentation for encoded JSON output; None is compact
        """
        self.config = config or FlattenConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.indent = indent
        self.error_handler = ErrorHandler(self.logger)

        for warning in self.error_handler.validate_config(self.config).warnings:
            self.logger.warning(warning)

    def flatten(self, data: Any) -> FlattenResult:
        """
        Flatten a decoded tree.

        Args:
            data: String-keyed map to flatten

        Returns:
            FlattenResult with the flat map in ``data``
        """
        errors, warnings = ValidationUtils.validate_structure(
            data, self.config.effective_depth, self.config.effective_separator
        )
        if errors:
            first = errors[0]
            error = JmapError(first.message, first.type, context={"location": first.location})
            response = self.error_handler.handle_error(error)
            return FlattenResult(success=False, errors=[first.message, response.suggested_action],
                                 warnings=warnings)

        for warning in warnings:
            self.logger.warning(warning)

        try:
            flat = flatten_map(data, self.config)
        except JmapError as e:
            response = self.error_handler.handle_error(e)
            return FlattenResult(success=False, errors=[str(e), response.suggested_action], warnings=warnings)

        try:
            json_string = self._encode(flat)
        except RecursionError:
            self.logger.error("Flattened map is nested too deeply to encode as JSON")
            return FlattenResult(success=False, data=flat,
                                 errors=["Flattened map is nested too deeply to encode as JSON"],
                                 warnings=warnings)

        self.logger.info(f"Flattened {len(data)} top-level keys into {len(flat)} entries")
        return FlattenResult(success=True, data=flat, json_string=json_string, warnings=warnings)

    def unflatten(self, flat: Mapping[str, Any]) -> UnflattenResult:
        """
        Rebuild a nested tree from a flat map.

        Args:
            flat: Flat map keyed by joined paths

        Returns:
            UnflattenResult with the nested tree in ``data``
        """
        if not isinstance(flat, Mapping):
            return UnflattenResult(
                success=False,
                errors=[f"Flat input must be an object, got {type(flat).__name__}"]
            )

        try:
            tree = unflatten_map(flat, self.config)
        except JmapError as e:
            response = self.error_handler.handle_error(e)
            return UnflattenResult(success=False, errors=[str(e), response.suggested_action])

        try:
            json_string = self._encode(tree)
        except RecursionError:
            self.logger.error("Unflattened tree is nested too deeply to encode as JSON")
            return UnflattenResult(success=False, data=tree,
                                   errors=["Unflattened tree is nested too deeply to encode as JSON"])

        self.logger.info(f"Unflattened {len(flat)} entries into {len(tree)} top-level keys")
        return UnflattenResult(success=True, data=tree, json_string=json_string)

    def flatten_json(self, json_string: str) -> FlattenResult:
        """Decode JSON text and flatten it."""
        try:
            data = self._decode(json_string)
        except JmapError as e:
            return FlattenResult(success=False, errors=[str(e)])
        return self.flatten(data)

    def unflatten_json(self, json_string: str) -> UnflattenResult:
        """Decode flat JSON text and unflatten it."""
        try:
            data = self._decode(json_string)
        except JmapError as e:
            return UnflattenResult(success=False, errors=[str(e)])
        return self.unflatten(data)

    def _decode(self, json_string: str) -> Any:
        validation = self.error_handler.validate_input(json_string)
        if not validation.is_valid:
            messages = "; ".join(error.message for error in validation.errors)
            self.logger.error(f"Invalid JSON input: {messages}")
            raise JmapError(f"Invalid JSON input: {messages}", ErrorType.SYNTAX)
        return json.loads(json_string)

    def _encode(self, data: Any) -> str:
        return json.dumps(data, ensure_ascii=False, indent=self.indent, default=str)
