"""Pattern filtering operations for nested trees."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from menagerie.models.node import Node, Tree, is_child_sequence, node_name
from menagerie.tree_ops.exceptions import MissingFilterKeyError

logger = logging.getLogger(__name__)


def matches_all(name: str, patterns: Sequence[str]) -> bool:
    """Return True if *name* contains every pattern (case-sensitive)."""
    return all(pattern in name for pattern in patterns)


def filter_tree(
    tree: Sequence[Mapping[str, Any]],
    patterns: Sequence[str],
    target_field: str | None,
) -> Tree:
    """Keep only the branches leading to children whose name matches.

    Every node is rebuilt field by field. A child sequence stored under
    *target_field* is reduced to the children whose ``name`` contains all
    *patterns*; any other child sequence is filtered recursively, so the
    target field may sit at any depth. Afterwards, nodes left without a
    single non-empty child sequence are pruned.

    Args:
        tree: The nodes to filter. Never modified.
        patterns: Substrings that a kept child's name must all contain.
            An empty sequence keeps every child.
        target_field: Name of the child-sequence field to match against.

    Returns:
        A new list of rebuilt nodes, in input order.

    Raises:
        MissingFilterKeyError: If *target_field* is None or empty.
    """
    if not target_field:
        raise MissingFilterKeyError()

    rebuilt = [_filter_node(node, patterns, target_field) for node in tree]
    kept = [node for node in rebuilt if _has_children(node)]

    if len(kept) != len(rebuilt):
        logger.debug(
            "Pruned %d of %d node(s) with no matching %r descendants",
            len(rebuilt) - len(kept),
            len(rebuilt),
            target_field,
        )
    return kept


def _filter_node(
    node: Mapping[str, Any], patterns: Sequence[str], target_field: str
) -> Node:
    """Rebuild one node with its child sequences filtered."""
    result: Node = {}
    for key, value in node.items():
        if not is_child_sequence(value):
            result[key] = value
        elif key == target_field:
            result[key] = [
                child for child in value if matches_all(node_name(child), patterns)
            ]
        else:
            result[key] = filter_tree(value, patterns, target_field)
    return result


def _has_children(node: Node) -> bool:
    """Return True if at least one child sequence of *node* is non-empty."""
    return any(is_child_sequence(value) and len(value) > 0 for value in node.values())
