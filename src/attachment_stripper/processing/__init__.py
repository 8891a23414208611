"""MIME traversal and attachment detachment."""

from .mime import MimeAccessor
from .stripper import Stripper, TraversalState

__all__ = ["MimeAccessor", "Stripper", "TraversalState"]
