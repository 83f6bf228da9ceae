"""JSON loading and dumping for JSON trees."""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union
from .types import ErrorType, Node, Tree, TreeConfig, TreeShapeError, TreeSyntaxError
from .tree_model import children_of, ensure_tree


class TreeParser:
    """
    Parser turning JSON text into a JSON tree.

    The root must be a JSON array of objects; nested child lists are
    checked as the tree is walked so a malformed document fails on load
    rather than halfway through an operation.
    """

    def __init__(self, config: Optional[TreeConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the tree parser.

        Args:
            config: Optional TreeConfig supplying the child key
            logger: Optional logger instance
        """
        self.config = config or TreeConfig()
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, json_string: str) -> List[Node]:
        """
        Parse JSON text into a tree.

        Args:
            json_string: JSON text whose root is an array

        Returns:
            Parsed tree

        Raises:
            TreeSyntaxError: If the text is not valid JSON
            TreeShapeError: If the parsed value is not a tree
        """
        if not json_string.strip():
            raise TreeSyntaxError("JSON string is empty", ErrorType.SYNTAX)

        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            raise TreeSyntaxError(
                f"JSON parsing failed: {e.msg} at line {e.lineno}, column {e.colno}",
                ErrorType.SYNTAX,
                context=f"line {e.lineno}, column {e.colno}"
            ) from e

        if not isinstance(data, list):
            raise TreeShapeError(
                f"Root element must be a list, got {type(data).__name__}",
                ErrorType.NOT_A_SEQUENCE,
                context="root"
            )

        count = self._check_tree(data)
        self.logger.info(f"Parsed tree with {len(data)} top-level nodes, {count} nodes in total")
        return data

    def load(self, path: Union[str, Path]) -> List[Node]:
        """
        Read and parse a JSON tree file.

        Args:
            path: Path of a UTF-8 JSON file

        Returns:
            Parsed tree

        Raises:
            TreeSyntaxError: If the file is not valid UTF-8 JSON
            OSError: If the file cannot be read
        """
        file_path = Path(path)
        self.logger.debug(f"Loading tree from {file_path}")
        try:
            json_string = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise TreeSyntaxError(
                f"{file_path} is not valid UTF-8: {e.reason} at byte {e.start}",
                ErrorType.SYNTAX,
                context=str(file_path)
            ) from e
        return self.parse(json_string)

    def dumps(self, value: Any, indent: Optional[int] = 2) -> str:
        """Serialize a tree (or any extracted list) to JSON text."""
        return json.dumps(value, indent=indent, ensure_ascii=False)

    def _check_tree(self, tree: Tree) -> int:
        count = 0
        for node in ensure_tree(tree):
            count += 1
            children = children_of(node, self.config.child_key)
            if children is not None:
                count += self._check_tree(children)
        return count
