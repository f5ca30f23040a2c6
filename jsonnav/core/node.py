"""Node kinds for JSONNav.

JSONNav does not wrap JSON values - it works directly on the pre-parsed
Python tree (dicts, lists and scalars). This module classifies a value into
one of three closed kinds so that the navigator can dispatch on the kind
instead of scattering isinstance checks through the walk.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any


class NodeKind(Enum):
    """The closed set of JSON node kinds the navigator understands."""
    OBJECT = "object"   # Mapping of string keys to nodes
    ARRAY = "array"     # Ordered sequence of nodes
    LEAF = "leaf"       # Scalar value or None


# Sequence types treated as JSON arrays. Strings and bytes are sequences
# too, but in a JSON tree they are always leaves.
ARRAY_TYPES = (list, tuple)


def kind_of(value: Any) -> NodeKind:
    """Classify a JSON value.

    Args:
        value: Any value from a parsed JSON tree

    Returns:
        NodeKind.OBJECT for mappings, NodeKind.ARRAY for lists and tuples,
        NodeKind.LEAF for everything else (including None)
    """
    if isinstance(value, Mapping):
        return NodeKind.OBJECT
    if isinstance(value, ARRAY_TYPES):
        return NodeKind.ARRAY
    return NodeKind.LEAF

