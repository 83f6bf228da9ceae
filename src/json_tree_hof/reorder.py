"""Reordering primitives for ordered sequences."""

from collections.abc import Mapping
from itertools import takewhile
from typing import Any, List, Optional, Sequence
from .types import ID_KEY, Predicate
from .tree_model import ensure_sequence


def _negate(pred: Predicate) -> Predicate:
    return lambda item: not pred(item)


def _find(items: List[Any], pred: Predicate) -> Optional[Any]:
    return next((item for item in items if pred(item)), None)


def before(seq: Sequence[Any], pred: Predicate) -> List[Any]:
    """
    Elements preceding the first element that matches ``pred``.

    Args:
        seq: Ordered sequence
        pred: Predicate locating the match

    Returns:
        New list; the whole sequence when nothing matches
    """
    return list(takewhile(_negate(pred), ensure_sequence(seq, "list")))


def after(seq: Sequence[Any], pred: Predicate) -> List[Any]:
    """
    Elements following the last element that matches ``pred``.

    The scan runs from the back of the sequence, so with a single match
    this is everything after that match.

    Args:
        seq: Ordered sequence
        pred: Predicate locating the match

    Returns:
        New list; the whole sequence when nothing matches
    """
    items = ensure_sequence(seq, "list")
    tail = list(takewhile(_negate(pred), reversed(items)))
    tail.reverse()
    return tail


def move_up(seq: Sequence[Any], pred: Predicate) -> List[Any]:
    """
    Swap the first element matching ``pred`` with the element before it.

    e.g. [1, 2, 3, 999, 4, 5] -> [1, 2, 999, 3, 4, 5]

    Args:
        seq: Ordered sequence
        pred: Predicate locating the element to move

    Returns:
        New list; a copy of the input when the match is already first or
        nothing matches
    """
    items = ensure_sequence(seq, "list")
    head = before(items, pred)
    if len(head) == 0 or len(head) == len(items):
        return items

    item = _find(items, pred)
    return head[:-1] + [item, head[-1]] + after(items, pred)


def move_down(seq: Sequence[Any], pred: Predicate) -> List[Any]:
    """
    Swap the first element matching ``pred`` with the element after it.

    e.g. [1, 2, 3, 999, 4, 5] -> [1, 2, 3, 4, 999, 5]

    Args:
        seq: Ordered sequence
        pred: Predicate locating the element to move

    Returns:
        New list; a copy of the input when the match is already last or
        nothing matches
    """
    items = ensure_sequence(seq, "list")
    tail = after(items, pred)
    if len(tail) == 0 or len(tail) == len(items):
        return items

    item = _find(items, pred)
    return before(items, pred) + [tail[0], item] + tail[1:]


def match_by_id(id_value: Any, id_key: str = ID_KEY) -> Predicate:
    """
    Build a predicate matching mappings whose ``id_key`` equals ``id_value``.

    Booleans only match booleans, so JSON ``true`` is never the id ``1``.
    """
    def matches(node: Any) -> bool:
        if not isinstance(node, Mapping) or id_key not in node:
            return False
        value = node[id_key]
        if isinstance(value, bool) != isinstance(id_value, bool):
            return False
        return value == id_value
    return matches
