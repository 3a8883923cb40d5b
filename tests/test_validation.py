"""Tests for validation utilities."""

from jmap.types import ErrorType
from jmap.utils.validation import ValidationUtils


class TestValidationUtils:
    """Tests for ValidationUtils class."""

    def test_validate_valid_json_string(self):
        """Test validation of a valid JSON object."""
        result = ValidationUtils.validate_json_string('{"a": {"b": 1}}')

        assert result.is_valid
        assert result.errors == []

    def test_validate_empty_json_string(self):
        """Test validation of an empty string."""
        result = ValidationUtils.validate_json_string("   ")

        assert not result.is_valid
        assert result.errors[0].message == "JSON string is empty"

    def test_validate_invalid_json_syntax(self):
        """Test validation of malformed JSON."""
        result = ValidationUtils.validate_json_string('{"a": 1')

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.SYNTAX
        assert "line 1" in result.errors[0].location

    def test_validate_non_object_root(self):
        """Test that a JSON array root is rejected."""
        result = ValidationUtils.validate_json_string("[1, 2, 3]")

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.INPUT_SHAPE
        assert "list" in result.errors[0].message

    def test_validate_structure_circular(self):
        """Test that a self-containing map is an error."""
        data = {"a": {}}
        data["a"]["loop"] = data

        errors, warnings = ValidationUtils.validate_structure(data)

        assert errors[0].type == ErrorType.CIRCULAR

    def test_validate_structure_depth_warning(self, deep_tree):
        """Test a warning when nesting exceeds the depth limit."""
        errors, warnings = ValidationUtils.validate_structure(deep_tree, max_depth=15)

        assert errors == []
        assert len(warnings) == 1
        assert "21" in warnings[0]

    def test_validate_structure_separator_warning(self):
        """Test a warning for keys containing the separator."""
        errors, warnings = ValidationUtils.validate_structure({"a.b": 1, "c": {"d.e": 2}}, separator=".")

        assert errors == []
        assert "a.b" in warnings[0]
        assert "c.d.e" in warnings[0]

    def test_deep_structure_within_recursion_limit(self):
        """Test the structure walks handle nesting deeper than the interpreter stack."""
        tree = {"leaf": "bottom"}
        for _ in range(3000):
            tree = {"next": tree}

        assert not ValidationUtils.has_circular_references(tree)
        assert ValidationUtils.calculate_max_depth(tree) == 3001
        assert ValidationUtils.find_separator_keys(tree, ".") == []

    def test_has_circular_references(self):
        """Test cycle detection through maps and lists."""
        data = {"items": []}
        data["items"].append(data)

        assert ValidationUtils.has_circular_references(data)

    def test_shared_substructure_is_not_circular(self):
        """Test that a value reused in two places is not a cycle."""
        shared = {"x": 1}

        assert not ValidationUtils.has_circular_references({"a": shared, "b": shared})

    def test_calculate_max_depth(self):
        """Test depth counting over maps only."""
        assert ValidationUtils.calculate_max_depth({}) == 0
        assert ValidationUtils.calculate_max_depth({"a": 1}) == 1
        assert ValidationUtils.calculate_max_depth({"a": {"b": {"c": 1}}, "d": 1}) == 3
        assert ValidationUtils.calculate_max_depth({"a": [{"b": {"c": 1}}]}) == 1

    def test_find_separator_keys(self):
        """Test finding keys that contain the separator."""
        data = {"ok": {"bad/key": 1}, "also/bad": 2}

        assert sorted(ValidationUtils.find_separator_keys(data, "/")) == ["also/bad", "ok/bad/key"]
        assert ValidationUtils.find_separator_keys(data, ".") == []
