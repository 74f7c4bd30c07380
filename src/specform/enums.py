"""Enumeration type definitions"""

from enum import Enum


class NodeKind(str, Enum):
    """Shape of a schema property node, decided once during traversal"""

    LEAF = "leaf"
    OBJECT = "object"
    ARRAY = "array"
    ONE_OF = "one_of"
