"""Tree-wide mapping over sibling lists and nodes."""

from typing import Any, List
from .types import CHILD_KEY, ID_KEY, ListTransform, Node, NodeTransform, Tree
from .tree_model import children_of, ensure_tree
from .reorder import match_by_id, move_down, move_up


def _with_children(node: Node, children: List[Node], child_key: str, in_place: bool) -> Node:
    if in_place:
        node[child_key] = children
        return node

    rebuilt = dict(node)
    rebuilt[child_key] = children
    return rebuilt


def map_lists(tree: Tree, f: ListTransform, *, child_key: str = CHILD_KEY,
              in_place: bool = False) -> List[Node]:
    """
    Apply ``f`` to every list of siblings in the tree, innermost lists first.

    Each non-empty child list is mapped recursively and installed as the
    node's new child list before ``f`` sees the list containing that node.

    Args:
        tree: Sequence of sibling nodes (None is treated as empty)
        f: Function taking a list of nodes and returning a list of nodes
        child_key: Field holding each node's children
        in_place: Store rebuilt child lists on the caller's node objects
            instead of on shallow copies

    Returns:
        Result of ``f`` applied to the (rebuilt) top-level list; ``[]`` for
        an empty tree, without calling ``f``
    """
    siblings = ensure_tree(tree)
    if not siblings:
        return []

    rebuilt = []
    for node in siblings:
        children = children_of(node, child_key)
        if children is not None:
            node = _with_children(
                node,
                map_lists(children, f, child_key=child_key, in_place=in_place),
                child_key,
                in_place
            )
        rebuilt.append(node)

    return f(rebuilt)


def _map_self_and_descendants(node: Node, f: NodeTransform, child_key: str,
                              in_place: bool) -> Node:
    children = children_of(node, child_key)
    if children is not None:
        mapped = [_map_self_and_descendants(child, f, child_key, in_place) for child in children]
        node = _with_children(node, mapped, child_key, in_place)
    return f(node)


def map_nodes(tree: Tree, f: NodeTransform, *, child_key: str = CHILD_KEY,
              in_place: bool = False) -> List[Node]:
    """
    Apply ``f`` to every node in the tree, children before parents.

    ``f`` receives each node with its children already mapped and its
    return value takes the node's place, so ``f`` may project or replace
    nodes but does not need to recurse.

    Args:
        tree: Sequence of sibling nodes (None is treated as empty)
        f: Function taking a node and returning a node
        child_key: Field holding each node's children
        in_place: Store mapped child lists on the caller's node objects
            instead of on shallow copies

    Returns:
        New top-level list of mapped nodes
    """
    return [
        _map_self_and_descendants(node, f, child_key, in_place)
        for node in ensure_tree(tree)
    ]


def move_up_by_id(tree: Tree, id_value: Any, *, child_key: str = CHILD_KEY,
                  id_key: str = ID_KEY, in_place: bool = False) -> List[Node]:
    """Move the first node with a matching id up within its sibling list, at every level."""
    pred = match_by_id(id_value, id_key)
    return map_lists(tree, lambda siblings: move_up(siblings, pred),
                     child_key=child_key, in_place=in_place)


def move_down_by_id(tree: Tree, id_value: Any, *, child_key: str = CHILD_KEY,
                    id_key: str = ID_KEY, in_place: bool = False) -> List[Node]:
    """Move the first node with a matching id down within its sibling list, at every level."""
    pred = match_by_id(id_value, id_key)
    return map_lists(tree, lambda siblings: move_down(siblings, pred),
                     child_key=child_key, in_place=in_place)
