"""Pytest configuration and fixtures."""

import json
import pytest


@pytest.fixture
def sample_tree():
    """Two top-level nodes, the second with two children."""
    return [
        {"id": 100, "name": "A"},
        {
            "id": 101,
            "name": "B",
            "nodes": [
                {"id": 102, "name": "C"},
                {"id": 103, "name": "D"}
            ]
        }
    ]


@pytest.fixture
def deep_tree():
    """Tree three levels deep with an empty child list."""
    return [
        {
            "name": "mytree",
            "nodes": [
                {
                    "name": "sub1",
                    "nodes": [
                        {"name": "twolevels"}
                    ]
                },
                {"name": "sub2", "nodes": []}
            ]
        },
        {"name": "sibling"}
    ]


@pytest.fixture
def tree_file(tmp_path, sample_tree):
    """Sample tree written to a JSON file."""
    path = tmp_path / "tree.json"
    path.write_text(json.dumps(sample_tree), encoding="utf-8")
    return path
