"""Normalization of raw command-line tokens into an OperationDescriptor."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from menagerie.models.operations import OperationDescriptor
from menagerie.tree_ops.exceptions import UnrecognizedArgumentError

logger = logging.getLogger(__name__)

FILTER_ARGUMENT = "--filter="
COUNT_ARGUMENT = "--count"


def normalize_arguments(args: Sequence[str]) -> OperationDescriptor:
    """Turn raw flag tokens into an :class:`OperationDescriptor`.

    Two forms are recognized: ``--filter=<pattern>`` (repeatable, the
    pattern must be non-empty) and ``--count`` (idempotent).

    Args:
        args: Raw tokens, in command-line order.

    Returns:
        The descriptor, with filters in order of appearance.

    Raises:
        UnrecognizedArgumentError: On the first token matching neither
            form, including ``--filter=`` with nothing after it.
    """
    filters: list[str] = []
    count = False

    for argument in args:
        if argument.startswith(FILTER_ARGUMENT) and len(argument) > len(FILTER_ARGUMENT):
            filters.append(argument[len(FILTER_ARGUMENT):])
        elif argument == COUNT_ARGUMENT:
            count = True
        else:
            raise UnrecognizedArgumentError(argument)

    descriptor = OperationDescriptor(filters=tuple(filters), count=count)
    logger.debug("Normalized %d argument(s) into %r", len(args), descriptor)
    return descriptor
