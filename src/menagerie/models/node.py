"""Generic node and tree types for nested datasets.

A node is a plain mapping of field name to value. A value is either a
scalar (copied as-is by every transform) or a *child sequence*: a list
or tuple whose items are themselves nodes. Field order is insertion
order and is preserved by every transform.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# Recursive shape: Node values may hold lists of Nodes at any depth
Node = dict[str, Any]
Tree = list[Node]


def is_child_sequence(value: Any) -> bool:
    """Return True if *value* is a sequence of nodes.

    Strings and sequences holding non-mapping items count as scalars.
    An empty list is a (trivially empty) child sequence.
    """
    if not isinstance(value, (list, tuple)):
        return False
    return all(isinstance(item, Mapping) for item in value)


def node_name(node: Mapping[str, Any]) -> str:
    """Return the node's ``name``, defaulting to an empty string."""
    name = node.get("name")
    return name if isinstance(name, str) else ""
