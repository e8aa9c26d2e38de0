"""Operation descriptor produced from raw command-line tokens."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class OperationDescriptor(BaseModel):
    """Immutable description of the operations to run on a tree.

    Built by :func:`menagerie.tree_ops.arguments.normalize_arguments`.
    """

    model_config = ConfigDict(frozen=True)

    filters: tuple[str, ...] = Field(
        default=(),
        description="Substring patterns, in order of appearance",
    )
    count: bool = Field(
        default=False,
        description="Whether to annotate parents with child counts",
    )
