"""Shape checks and accessors for JSON tree nodes."""

from collections.abc import Mapping, Sequence
from typing import Any, List, Optional
from .types import CHILD_KEY, ErrorType, Node, TreeError, TreeShapeError


def ensure_sequence(value: Any, what: str = "tree") -> List[Any]:
    """
    Return ``value`` as a list, treating ``None`` as empty.

    Args:
        value: Candidate sequence
        what: Name used in the error message

    Returns:
        A new list with the elements of ``value``

    Raises:
        TreeError: If ``value`` is not a sequence (strings, bytes and
            mappings are rejected)
    """
    if value is None:
        return []

    if isinstance(value, (str, bytes, bytearray, Mapping)) or not isinstance(value, Sequence):
        raise TreeShapeError(
            f"{what} must be a sequence, got {type(value).__name__}",
            ErrorType.NOT_A_SEQUENCE,
            context=value
        )

    return list(value)


def ensure_node(value: Any) -> Node:
    """Raise TreeError unless ``value`` is a mapping."""
    if not isinstance(value, Mapping):
        raise TreeShapeError(
            f"tree node must be a mapping, got {type(value).__name__}",
            ErrorType.NOT_A_MAPPING,
            context=value
        )
    return value


def ensure_tree(value: Any) -> List[Node]:
    """Check that ``value`` is a sequence of mappings and return it as a list."""
    return [ensure_node(item) for item in ensure_sequence(value)]


def children_of(node: Node, child_key: str = CHILD_KEY) -> Optional[List[Node]]:
    """
    Get the child list of a node.

    Args:
        node: Tree node
        child_key: Field holding the children

    Returns:
        The children as a list of nodes, or None when the node is a leaf

    Raises:
        TreeError: If the node is not a mapping, or its child field is
            truthy but not a sequence of mappings
    """
    children = ensure_node(node).get(child_key)
    if not children:
        return None

    try:
        return ensure_tree(children)
    except TreeError as e:
        if e.error_type == ErrorType.NOT_A_SEQUENCE:
            raise TreeShapeError(
                f"'{child_key}' field must be a sequence, got {type(children).__name__}",
                ErrorType.INVALID_CHILDREN,
                context=node
            ) from e
        raise


def is_leaf(node: Node, child_key: str = CHILD_KEY) -> bool:
    """A node is a leaf when its child field is absent or empty."""
    return children_of(node, child_key) is None
