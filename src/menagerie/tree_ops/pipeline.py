"""Pipeline sequencing argument normalization, filtering and counting."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from menagerie.models.node import Tree
from menagerie.tree_ops.arguments import normalize_arguments
from menagerie.tree_ops.counting import annotate_counts
from menagerie.tree_ops.filtering import filter_tree

logger = logging.getLogger(__name__)


def process_tree(
    tree: Sequence[Mapping[str, Any]],
    args: Sequence[str],
    target_field: str | None,
) -> Tree:
    """Transform *tree* according to raw command-line tokens.

    Filtering, when requested, always runs before counting so that the
    annotated counts reflect what survived the filter.

    Args:
        tree: The input nodes. Never modified.
        args: Raw tokens such as ``["--filter=ry", "--count"]``.
        target_field: Child-sequence field the filter patterns apply to.

    Returns:
        A new list of nodes.

    Raises:
        UnrecognizedArgumentError: If a token is not supported.
        MissingFilterKeyError: If filters are given without a target field.
    """
    descriptor = normalize_arguments(args)

    result: Tree = list(tree)
    if descriptor.filters:
        result = filter_tree(result, descriptor.filters, target_field)
        logger.debug(
            "Filtered on %r with %s: %d top-level node(s) remain",
            target_field,
            list(descriptor.filters),
            len(result),
        )
    if descriptor.count:
        result = annotate_counts(result)
    return result
