"""JSON loading and dumping of nested trees."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from menagerie.models.node import Tree
from menagerie.tree_ops.exceptions import InvalidTreeError


def parse_tree(text: str, source: str = "<string>") -> Tree:
    """Parse JSON text into a tree.

    Args:
        text: JSON whose top level is an array of objects.
        source: Label used in error messages.

    Raises:
        InvalidTreeError: On malformed JSON or a non-tree top level.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidTreeError(source, f"malformed JSON ({exc.msg} at line {exc.lineno})") from exc

    if not isinstance(data, list):
        raise InvalidTreeError(source, f"expected a JSON array, got {type(data).__name__}")
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise InvalidTreeError(
                source, f"item {index} is a {type(item).__name__}, expected an object"
            )
    return data


def load_tree(filepath: Path) -> Tree:
    """Load a tree from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        InvalidTreeError: If the file does not contain a tree.
    """
    return parse_tree(filepath.read_text(encoding="utf-8"), source=str(filepath))


def dump_tree(tree: Sequence[Mapping[str, Any]], indent: int | None = 2) -> str:
    """Render a tree as JSON text, keeping field order and non-ASCII names."""
    return json.dumps(list(tree), indent=indent, ensure_ascii=False)


def save_tree(
    tree: Sequence[Mapping[str, Any]], filepath: Path, indent: int | None = 2
) -> None:
    """Write a tree to a JSON file, creating parent directories."""
    filepath.parent.mkdir(parents=True, exist_ok=True)
    filepath.write_text(dump_tree(tree, indent=indent) + "\n", encoding="utf-8")
