"""Menagerie data models for nested trees and requested operations."""

from menagerie.models.node import Node, Tree, is_child_sequence
from menagerie.models.operations import OperationDescriptor

__all__ = [
    "Node",
    "OperationDescriptor",
    "Tree",
    "is_child_sequence",
]
