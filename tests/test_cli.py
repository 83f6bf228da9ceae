"""Tests for the command-line interface."""

import json
from click.testing import CliRunner
from json_tree_hof.cli import main


class TestCli:
    """Tests for the json-tree command group."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def invoke(self, *args):
        return self.runner.invoke(main, [str(arg) for arg in args])

    def test_leaves(self, tree_file):
        """Test printing leaves."""
        result = self.invoke("leaves", tree_file)

        assert result.exit_code == 0
        assert [n["name"] for n in json.loads(result.output)] == ["A", "C", "D"]

    def test_nodes(self, tree_file):
        """Test printing flattened nodes."""
        result = self.invoke("nodes", tree_file)

        assert result.exit_code == 0
        assert [n["name"] for n in json.loads(result.output)] == ["A", "C", "D", "C", "D"]

    def test_move_up_numeric_id(self, tree_file):
        """Test that numeric ids are matched as numbers."""
        result = self.invoke("move-up", tree_file, 101)

        assert result.exit_code == 0
        assert json.loads(result.output)[0]["name"] == "B"

    def test_move_down(self, tree_file):
        """Test moving a child down."""
        result = self.invoke("move-down", tree_file, 102)

        assert result.exit_code == 0
        assert json.loads(result.output)[1]["nodes"][0]["name"] == "D"

    def test_move_up_string_id(self, tmp_path):
        """Test that non-JSON ids are matched as strings."""
        path = tmp_path / "tree.json"
        path.write_text(json.dumps([{"id": "a"}, {"id": "b"}]), encoding="utf-8")

        result = self.invoke("move-up", path, "b")

        assert result.exit_code == 0
        assert json.loads(result.output) == [{"id": "b"}, {"id": "a"}]

    def test_map(self, tree_file):
        """Test printing a field of every node."""
        result = self.invoke("map", tree_file, "name")

        assert result.exit_code == 0
        assert json.loads(result.output) == ["A", "B", "C", "D"]

    def test_prune(self, tree_file):
        """Test keeping only selected fields."""
        result = self.invoke("prune", tree_file, "name")

        assert result.exit_code == 0
        assert json.loads(result.output) == [
            {"name": "A"},
            {"name": "B", "nodes": [{"name": "C"}, {"name": "D"}]}
        ]

    def test_custom_keys(self, tmp_path):
        """Test the child and id key options."""
        path = tmp_path / "tree.json"
        path.write_text(json.dumps([{"uid": 1, "items": [{"uid": 2}, {"uid": 3}]}]), encoding="utf-8")

        result = self.invoke("--child-key", "items", "--id-key", "uid", "move-up", path, 3)

        assert result.exit_code == 0
        assert json.loads(result.output) == [{"uid": 1, "items": [{"uid": 3}, {"uid": 2}]}]

    def test_invalid_tree(self, tmp_path):
        """Test that a malformed tree exits with an error."""
        path = tmp_path / "bad.json"
        path.write_text('{"name": "A"}', encoding="utf-8")

        result = self.invoke("leaves", path)

        assert result.exit_code == 1
        assert "Root element must be a list" in result.output

    def test_invalid_utf8_file(self, tmp_path):
        """Test that an undecodable file exits with an error message."""
        path = tmp_path / "latin1.json"
        path.write_bytes(b'[{"name": "\xff"}]')

        result = self.invoke("leaves", path)

        assert result.exit_code == 1
        assert "❌ Error" in result.output
        assert "not valid UTF-8" in result.output

    def test_missing_file(self, tmp_path):
        """Test that a missing input file is a usage error."""
        result = self.invoke("leaves", tmp_path / "missing.json")

        assert result.exit_code == 2
