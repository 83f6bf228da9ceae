"""
json-tree-hof - Higher-order functions for JSON trees.

A JSON tree is a list of JSON objects, each of which may optionally
have a field called "nodes" which is another such list.
"""

__version__ = "1.0.0"

from .types import ErrorType, TreeConfig, TreeError, TreeShapeError, TreeSyntaxError
from .tree_model import children_of, is_leaf
from .traversal import leaves, nodes, map_to_list
from .reorder import before, after, move_up, move_down, match_by_id
from .mapping import map_lists, map_nodes, move_up_by_id, move_down_by_id
from .tree_hof import JsonTreeHof
from .parser import TreeParser

__all__ = [
    "JsonTreeHof",
    "TreeParser",
    "TreeConfig",
    "TreeError",
    "TreeShapeError",
    "TreeSyntaxError",
    "ErrorType",
    "children_of",
    "is_leaf",
    "leaves",
    "nodes",
    "before",
    "after",
    "move_up",
    "move_down",
    "match_by_id",
    "map_lists",
    "map_nodes",
    "move_up_by_id",
    "move_down_by_id",
    "map_to_list",
]
