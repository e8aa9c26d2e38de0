"""Custom exceptions for tree operations."""

from __future__ import annotations


class TreeOpsError(Exception):
    """Base error for menagerie tree operations."""


class UnrecognizedArgumentError(TreeOpsError):
    """Raised when a raw token is not one of the supported flags.

    Attributes:
        argument: The offending token, verbatim.
    """

    def __init__(self, argument: str, message: str | None = None) -> None:
        self.argument = argument
        if message is None:
            message = f"Argument {argument!r} is not recognized"
        super().__init__(message)


class MissingFilterKeyError(TreeOpsError):
    """Raised when filtering is requested without a target field."""

    def __init__(self, message: str = "No filtering key is defined") -> None:
        super().__init__(message)


class InvalidTreeError(TreeOpsError):
    """Raised when serialized input does not describe a tree.

    Attributes:
        source: Where the data came from (a path or ``"<string>"``).
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid tree in {source}: {reason}")
