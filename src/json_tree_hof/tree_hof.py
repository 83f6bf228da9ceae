"""Configured entry point bundling every JSON tree operation."""

import logging
from typing import Any, Callable, List, Optional, Sequence
from .types import ListTransform, Node, NodeTransform, Predicate, Tree, TreeConfig
from . import mapping, reorder, traversal


class JsonTreeHof:
    """
    Higher-order functions over a JSON tree.

    A JSON tree is a list of JSON objects, each of which may optionally
    hold another such list under the configured child key. Every method
    returns new lists; see ``TreeConfig.in_place`` for how the mapping
    methods treat the caller's node objects.
    """

    def __init__(self, config: Optional[TreeConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the tree operations.

        Args:
            config: Optional TreeConfig (defaults to child key "nodes",
                id key "id", copy-on-map)
            logger: Optional logger instance
        """
        self.config = config or TreeConfig()
        self.logger = logger or logging.getLogger(__name__)

    @property
    def child_key(self) -> str:
        return self.config.child_key

    def leaves(self, tree: Tree) -> List[Node]:
        """Flatten the tree into the list of its leaves."""
        result = traversal.leaves(tree, child_key=self.child_key)
        self.logger.debug(f"leaves: extracted {len(result)} leaves")
        return result

    def nodes(self, tree: Tree) -> List[Node]:
        """Flatten the tree into a list including internal nodes."""
        result = traversal.nodes(tree, child_key=self.child_key)
        self.logger.debug(f"nodes: extracted {len(result)} nodes")
        return result

    def before(self, seq: Sequence[Any], pred: Predicate) -> List[Any]:
        """Elements preceding the first match of ``pred``."""
        result = reorder.before(seq, pred)
        self.logger.debug(f"before: {len(result)} elements precede the match")
        return result

    def after(self, seq: Sequence[Any], pred: Predicate) -> List[Any]:
        """Elements following the match of ``pred``, scanned from the back."""
        result = reorder.after(seq, pred)
        self.logger.debug(f"after: {len(result)} elements follow the match")
        return result

    def move_up(self, seq: Sequence[Any], pred: Predicate) -> List[Any]:
        """Swap the first match of ``pred`` with the element before it."""
        result = reorder.move_up(seq, pred)
        self.logger.debug(f"move_up: reordered list of {len(result)} elements")
        return result

    def move_down(self, seq: Sequence[Any], pred: Predicate) -> List[Any]:
        """Swap the first match of ``pred`` with the element after it."""
        result = reorder.move_down(seq, pred)
        self.logger.debug(f"move_down: reordered list of {len(result)} elements")
        return result

    def match_by_id(self, id_value: Any) -> Predicate:
        """Build a predicate matching nodes whose configured id field equals ``id_value``."""
        self.logger.debug(f"match_by_id: {self.config.id_key}={id_value!r}")
        return reorder.match_by_id(id_value, self.config.id_key)

    def map_lists(self, tree: Tree, f: ListTransform) -> List[Node]:
        """
        Apply a list transform to every sibling list, innermost first.

        Args:
            tree: Sequence of sibling nodes
            f: Function taking and returning a list of nodes

        Returns:
            The transformed tree
        """
        self.logger.debug(f"map_lists: in_place={self.config.in_place}")
        return mapping.map_lists(tree, f, child_key=self.child_key,
                                 in_place=self.config.in_place)

    def map_nodes(self, tree: Tree, f: NodeTransform) -> List[Node]:
        """
        Apply a node transform to every node, children before parents.

        Args:
            tree: Sequence of sibling nodes
            f: Function taking and returning a node

        Returns:
            The transformed tree
        """
        self.logger.debug(f"map_nodes: in_place={self.config.in_place}")
        return mapping.map_nodes(tree, f, child_key=self.child_key,
                                 in_place=self.config.in_place)

    def move_up_by_id(self, tree: Tree, id_value: Any) -> List[Node]:
        """Find the first node with the given id and move it up in its containing list."""
        self.logger.debug(f"move_up_by_id: {self.config.id_key}={id_value!r}")
        return mapping.move_up_by_id(tree, id_value, child_key=self.child_key,
                                     id_key=self.config.id_key,
                                     in_place=self.config.in_place)

    def move_down_by_id(self, tree: Tree, id_value: Any) -> List[Node]:
        """Find the first node with the given id and move it down in its containing list."""
        self.logger.debug(f"move_down_by_id: {self.config.id_key}={id_value!r}")
        return mapping.move_down_by_id(tree, id_value, child_key=self.child_key,
                                       id_key=self.config.id_key,
                                       in_place=self.config.in_place)

    def map_to_list(self, tree: Tree, f: Callable[[Node], Any]) -> List[Any]:
        """Return a flat list of ``f`` applied to every node in pre-order."""
        result = traversal.map_to_list(tree, f, child_key=self.child_key)
        self.logger.debug(f"map_to_list: produced {len(result)} values")
        return result
