"""Keyed container restricted to normalized primitive values."""

import json
import logging
import math
import numbers
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterator, List, Optional

from .types import ErrorType, JmapError, NormalizationError, NotAMapError

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

Filter = Callable[[Any], bool]
Normalizer = Callable[[Any], Any]


def is_int(value: Any) -> bool:
    # bool is an Integral in Python but a primitive of its own here
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def is_float(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, numbers.Integral)


def is_primitive(value: Any) -> bool:
    """True for strings, booleans, integers and floats of any width."""
    return isinstance(value, (str, bool)) or is_int(value) or is_float(value)


def is_candidate(value: Any) -> bool:
    """Default PriMap filter: keeps everything except None."""
    return value is not None


def normalize_error(value: Any) -> Any:
    """
    Normalize a primitive to its canonical representation.

    Strings and booleans pass through, integers become ``int`` within the
    signed 64-bit range and finite floats become ``float``.

    Raises:
        NormalizationError: If value is not a primitive or an integer
            does not fit in 64 bits, or a float is NaN or infinite
    """
    if isinstance(value, (str, bool)):
        return value
    if is_int(value):
        number = int(value)
        if number < INT64_MIN or number > INT64_MAX:
            raise NormalizationError([], f"Integer out of 64-bit range: {number}")
        return number
    if is_float(value):
        number = float(value)
        if not math.isfinite(number):
            raise NormalizationError([], f"Not a finite number: {number}")
        return number
    raise NormalizationError([], "Not a primitive")


def normalize(value: Any) -> Any:
    """Like normalize_error, but returns value unchanged when it cannot be normalized."""
    try:
        return normalize_error(value)
    except NormalizationError:
        return value


class PriMap(Mapping):
    """
    String-keyed map of normalized primitive values.

    Every bulk replacement runs each value through ``value_filter`` and
    then ``normalizer``. Values the filter rejects are dropped silently.
    Values the normalizer rejects are still stored as given, and their
    keys are reported together in one NormalizationError once the new
    contents are in place.
    """

    def __init__(self, values: Optional[Dict[str, Any]] = None, *,
                 value_filter: Optional[Filter] = None,
                 normalizer: Optional[Normalizer] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the map. Construction never raises for bad values; the
        offending keys are logged and kept in ``invalid_keys``.

        Args:
            values: Initial contents
            value_filter: Predicate keeping candidate values (is_candidate)
            normalizer: Function normalizing a value or raising (normalize_error)
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.value_filter = value_filter or is_candidate
        self.normalizer = normalizer or normalize_error
        self.invalid_keys: List[str] = []
        self._values: Dict[str, Any] = {}

        if values:
            try:
                self.replace(values)
            except NormalizationError as e:
                self.logger.warning(f"PriMap created with invalid entries: {e}")

    def replace(self, values: Mapping) -> None:
        """
        Replace the whole contents with ``values``.

        Raises:
            NormalizationError: Naming every key whose value failed to
                normalize; raised after the new contents are stored
        """
        stored: Dict[str, Any] = {}
        invalid: List[str] = []
        for key, value in values.items():
            if not self.value_filter(value):
                continue
            try:
                stored[key] = self.normalizer(value)
            except (JmapError, TypeError, ValueError):
                stored[key] = value
                invalid.append(key)

        self._values = stored
        self.invalid_keys = invalid
        self.logger.debug(f"PriMap replaced with {len(stored)} values, {len(invalid)} invalid")

        if invalid:
            raise NormalizationError(invalid)

    def marshal(self) -> Dict[str, Any]:
        """Return a shallow copy of the stored values, ready for a JSON encoder."""
        return dict(self._values)

    def to_json(self, indent: Optional[str] = None, prefix: str = "") -> str:
        """
        Encode the stored values as a JSON object.

        Args:
            indent: Indentation string; None gives compact output
            prefix: Prepended to every line after the first

        Raises:
            ValueError: If a stored value is a NaN or infinite float, which
                JSON cannot represent
        """
        if indent is None:
            return json.dumps(self._values, ensure_ascii=False, allow_nan=False)

        text = json.dumps(self._values, ensure_ascii=False, indent=indent, allow_nan=False)
        if prefix:
            text = text.replace("\n", "\n" + prefix)
        return text

    def unmarshal(self, data: Any) -> None:
        """
        Decode a JSON object and apply it through ``replace``.

        Raises:
            JmapError: If data is not valid JSON
            NotAMapError: If the document is not a JSON object
            NormalizationError: As for replace
        """
        try:
            decoded = json.loads(data)
        except json.JSONDecodeError as e:
            raise JmapError(
                f"Invalid JSON syntax: {e.msg}",
                ErrorType.SYNTAX,
                context={"location": f"line {e.lineno}, column {e.colno}"},
            ) from e

        if not isinstance(decoded, dict):
            raise NotAMapError("JSON document is not an object", decoded)

        self.replace(decoded)

    @classmethod
    def from_json(cls, data: Any, **options: Any) -> "PriMap":
        """Create a PriMap from JSON text, raising like unmarshal."""
        primap = cls(**options)
        primap.unmarshal(data)
        return primap

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"PriMap({self._values!r})"
