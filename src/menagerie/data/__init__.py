"""Bundled sample dataset: regions, the people living there and their animals."""

from __future__ import annotations

from importlib import resources

from menagerie.models.node import Tree
from menagerie.tree_ops.serialization import parse_tree

SAMPLE_FILTER_KEY = "animals"
_SAMPLE_RESOURCE = "sample.json"


def load_sample_tree() -> Tree:
    """Return a fresh copy of the bundled sample tree."""
    text = resources.files(__name__).joinpath(_SAMPLE_RESOURCE).read_text(encoding="utf-8")
    return parse_tree(text, source=_SAMPLE_RESOURCE)
