"""Visitor implementations for filter entry traversal."""

from .base import FilterVisitor
from .counter import FilterCounter
from .flattener import EnabledFilterFlattener, flatten_enabled

__all__ = ["EnabledFilterFlattener", "FilterCounter", "FilterVisitor", "flatten_enabled"]
