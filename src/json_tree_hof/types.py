"""Core type definitions for json-tree-hof."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Mapping, MutableMapping, Optional, Sequence


CHILD_KEY = "nodes"
ID_KEY = "id"

Node = MutableMapping[str, Any]
Tree = Sequence[Node]
Predicate = Callable[[Any], bool]
ListTransform = Callable[[List[Node]], List[Node]]
NodeTransform = Callable[[Node], Node]


class ErrorType(Enum):
    """Enumeration of error types."""
    NOT_A_SEQUENCE = "not-a-sequence"
    NOT_A_MAPPING = "not-a-mapping"
    INVALID_CHILDREN = "invalid-children"
    SYNTAX = "syntax"


class TreeError(Exception):
    """Base error for values that cannot be handled as a JSON tree."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class TreeShapeError(TreeError, TypeError):
    """Raised when a value does not have the shape of a JSON tree."""


class TreeSyntaxError(TreeError, ValueError):
    """Raised when tree text cannot be decoded or parsed as JSON."""


@dataclass
class TreeConfig:
    """
    Settings shared by every tree operation.

    Attributes:
        child_key: Field holding a node's ordered child sequence
        id_key: Field compared by the id-based reordering helpers
        in_place: Write rebuilt child lists back into the caller's nodes
            instead of returning rebuilt copies of parent nodes
    """
    child_key: str = CHILD_KEY
    id_key: str = ID_KEY
    in_place: bool = False

    def __post_init__(self):
        """Validate config after initialization."""
        self._validate()

    def _validate(self) -> None:
        if not isinstance(self.child_key, str) or not self.child_key:
            raise ValueError("child_key must be a non-empty string")

        if not isinstance(self.id_key, str) or not self.id_key:
            raise ValueError("id_key must be a non-empty string")

    def to_dict(self) -> Mapping[str, Any]:
        return {
            "child_key": self.child_key,
            "id_key": self.id_key,
            "in_place": self.in_place,
        }
