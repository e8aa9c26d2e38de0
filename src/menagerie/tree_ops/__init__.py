"""Tree operations: argument normalization, filtering, counting and I/O."""

from menagerie.tree_ops.arguments import normalize_arguments
from menagerie.tree_ops.counting import annotate_counts
from menagerie.tree_ops.exceptions import (
    InvalidTreeError,
    MissingFilterKeyError,
    TreeOpsError,
    UnrecognizedArgumentError,
)
from menagerie.tree_ops.filtering import filter_tree, matches_all
from menagerie.tree_ops.pipeline import process_tree
from menagerie.tree_ops.serialization import dump_tree, load_tree, parse_tree, save_tree

__all__ = [
    "InvalidTreeError",
    "MissingFilterKeyError",
    "TreeOpsError",
    "UnrecognizedArgumentError",
    "annotate_counts",
    "dump_tree",
    "filter_tree",
    "load_tree",
    "matches_all",
    "normalize_arguments",
    "parse_tree",
    "process_tree",
    "save_tree",
]
