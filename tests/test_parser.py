"""Tests for the JSON tree parser."""

import json
import pytest
from json_tree_hof.parser import TreeParser
from json_tree_hof.types import ErrorType, TreeConfig, TreeError, TreeShapeError, TreeSyntaxError


class TestTreeParser:
    """Tests for TreeParser class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = TreeParser()

    def test_parse_valid_tree(self, sample_tree):
        """Test parsing a valid tree."""
        tree = self.parser.parse(json.dumps(sample_tree))

        assert tree == sample_tree

    def test_parse_empty_list(self):
        """Test that an empty array is a valid tree."""
        assert self.parser.parse("[]") == []

    def test_parse_empty_string(self):
        """Test parsing empty text."""
        with pytest.raises(TreeError) as exc_info:
            self.parser.parse("   ")

        assert exc_info.value.error_type == ErrorType.SYNTAX

    def test_parse_invalid_json(self):
        """Test parsing invalid JSON."""
        with pytest.raises(TreeError, match="JSON parsing failed") as exc_info:
            self.parser.parse('[{"name": "A"')

        assert exc_info.value.error_type == ErrorType.SYNTAX

    def test_parse_object_root(self):
        """Test that the root must be an array."""
        with pytest.raises(TreeError, match="Root element must be a list") as exc_info:
            self.parser.parse('{"name": "A"}')

        assert exc_info.value.error_type == ErrorType.NOT_A_SEQUENCE

    def test_parse_non_object_node(self):
        """Test that nested values must be objects."""
        with pytest.raises(TreeError) as exc_info:
            self.parser.parse('[{"name": "A", "nodes": [1, 2]}]')

        assert exc_info.value.error_type == ErrorType.NOT_A_MAPPING

    def test_parse_invalid_children(self):
        """Test that the child field must be an array."""
        with pytest.raises(TreeError) as exc_info:
            self.parser.parse('[{"name": "A", "nodes": "B"}]')

        assert exc_info.value.error_type == ErrorType.INVALID_CHILDREN

    def test_parse_custom_child_key(self):
        """Test that only the configured child field is checked."""
        parser = TreeParser(TreeConfig(child_key="children"))

        tree = parser.parse('[{"name": "A", "nodes": "ignored", "children": [{"name": "B"}]}]')

        assert tree[0]["children"] == [{"name": "B"}]

    def test_load_file(self, tree_file, sample_tree):
        """Test loading a tree from disk."""
        assert self.parser.load(tree_file) == sample_tree
        assert self.parser.load(str(tree_file)) == sample_tree

    def test_load_invalid_utf8(self, tmp_path):
        """Test that a file with undecodable bytes is a syntax error."""
        path = tmp_path / "latin1.json"
        path.write_bytes(b'[{"name": "\xff"}]')

        with pytest.raises(TreeSyntaxError, match="not valid UTF-8") as exc_info:
            self.parser.load(path)

        assert exc_info.value.error_type == ErrorType.SYNTAX
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_error_classes(self):
        """Test that syntax errors are ValueErrors and shape errors are TypeErrors."""
        with pytest.raises(ValueError):
            self.parser.parse("[1,")

        with pytest.raises(TypeError):
            self.parser.parse('{"name": "A"}')

        assert issubclass(TreeSyntaxError, TreeError)
        assert issubclass(TreeShapeError, TreeError)
        assert not issubclass(TreeSyntaxError, TypeError)

    def test_load_missing_file(self, tmp_path):
        """Test loading a file that does not exist."""
        with pytest.raises(FileNotFoundError):
            self.parser.load(tmp_path / "missing.json")

    def test_dumps(self, sample_tree):
        """Test serializing a tree."""
        text = self.parser.dumps(sample_tree)

        assert json.loads(text) == sample_tree
        assert self.parser.dumps([{"name": "é"}], indent=None) == '[{"name": "é"}]'
