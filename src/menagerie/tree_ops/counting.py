"""Child-count annotation for nested trees."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from menagerie.models.node import Node, Tree, is_child_sequence


def annotate_counts(tree: Sequence[Mapping[str, Any]]) -> Tree:
    """Append the size of every child sequence to its parent's name.

    Each child-sequence field contributes one ``" [N]"`` suffix, in field
    order, and is itself annotated recursively. A missing or empty
    ``name`` counts as ``""``; nodes without one gain a ``name`` field
    in first position.

    Example::

        >>> annotate_counts([{"name": "Ann", "animals": [{"name": "Duck"}]}])
        [{'name': 'Ann [1]', 'animals': [{'name': 'Duck'}]}]
    """
    return [_annotate_node(node) for node in tree]


def _annotate_node(node: Mapping[str, Any]) -> Node:
    result: Node = {}
    suffixes: list[str] = []
    for key, value in node.items():
        if is_child_sequence(value):
            result[key] = annotate_counts(value)
            suffixes.append(f" [{len(value)}]")
        else:
            result[key] = value

    label = node.get("name") or ""
    if suffixes:
        label = f"{label}{''.join(suffixes)}"

    if "name" in result:
        result["name"] = label
        return result
    return {"name": label, **result}
