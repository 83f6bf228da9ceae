"""Extractors that flatten a JSON tree into a plain list."""

from typing import Any, Callable, List
from .types import CHILD_KEY, Node, Tree
from .tree_model import children_of, ensure_tree


def _leaves_of(node: Node, child_key: str) -> List[Node]:
    children = children_of(node, child_key)
    if children is None:
        return [node]

    result = []
    for child in children:
        result.extend(_leaves_of(child, child_key))
    return result


def leaves(tree: Tree, *, child_key: str = CHILD_KEY) -> List[Node]:
    """
    Flatten a tree into the list of its leaves.

    Internal nodes are dropped; leaves come out depth-first, left to right.

    Args:
        tree: Sequence of sibling nodes (None is treated as empty)
        child_key: Field holding each node's children

    Returns:
        New list of leaf nodes
    """
    result = []
    for node in ensure_tree(tree):
        result.extend(_leaves_of(node, child_key))
    return result


def _nodes_of(node: Node, child_key: str) -> List[Node]:
    children = children_of(node, child_key)
    if children is None:
        return [node]

    # Below the first level only leaves are collected.
    result = list(children)
    for child in children:
        result.extend(_leaves_of(child, child_key))
    return result


def nodes(tree: Tree, *, child_key: str = CHILD_KEY) -> List[Node]:
    """
    Flatten a tree into a list that includes internal nodes.

    A leaf contributes itself. A parent contributes its direct children,
    followed by the leaves beneath those children.

    Args:
        tree: Sequence of sibling nodes (None is treated as empty)
        child_key: Field holding each node's children

    Returns:
        New flat list of nodes
    """
    result = []
    for node in ensure_tree(tree):
        result.extend(_nodes_of(node, child_key))
    return result


def _flatten_into(acc: List[Any], value: Any) -> None:
    if isinstance(value, list):
        for item in value:
            _flatten_into(acc, item)
    else:
        acc.append(value)


def _map_pre_order(acc: List[Any], node: Node, f: Callable[[Node], Any], child_key: str) -> None:
    _flatten_into(acc, f(node))
    children = children_of(node, child_key)
    if children is not None:
        for child in children:
            _map_pre_order(acc, child, f, child_key)


def map_to_list(tree: Tree, f: Callable[[Node], Any], *, child_key: str = CHILD_KEY) -> List[Any]:
    """
    Apply ``f`` to every node and collect the results in one flat list.

    Nodes are visited depth-first in pre-order (a node before its
    descendants). List results of ``f`` are flattened into the output.

    Args:
        tree: Sequence of sibling nodes (None is treated as empty)
        f: Function applied to each node
        child_key: Field holding each node's children

    Returns:
        Flat list of results
    """
    result: List[Any] = []
    for node in ensure_tree(tree):
        _map_pre_order(result, node, f, child_key)
    return result
