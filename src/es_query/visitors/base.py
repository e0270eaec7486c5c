"""Base visitor class for filter entry traversal."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from ..errors import FilterContractError
from ..filters.helpers import is_filter_group, is_or_filter
from ..filters.models import Filter, FilterEntry

T = TypeVar("T")


class FilterVisitor(ABC, Generic[T]):
    """Abstract visitor for filter entries.

    A filter entry is either a Filter or an implicit AND group (a list of
    entries). The base class handles traversal of groups and OR filters;
    subclasses decide how children are combined.

    Type parameter T is the return type of visit methods.

    Usage:
        class NameCollector(FilterVisitor[list[str]]):
            def visit_default(self, filter):
                return [filter.meta.key]

            def combine_group(self, original, children):
                return [name for child in children for name in child]

            def combine_or(self, original, children):
                return self.combine_group(original, children)
    """

    def visit(self, entry: Any) -> T:
        """Dispatch on the entry's shape.

        Groups go to visit_group, OR filters to visit_or_filter, every other
        filter to visit_default. Anything else is a contract violation.
        """
        match entry:
            case list() | tuple():
                return self.visit_group(entry)
            case Filter() if is_or_filter(entry):
                return self.visit_or_filter(entry)
            case Filter():
                return self.visit_default(entry)
            case _:
                raise FilterContractError(
                    f"Expected a filter or a list of filters, got {type(entry).__name__}"
                )

    @abstractmethod
    def visit_default(self, filter: Filter) -> T:
        """Handle a filter that is not an OR filter."""
        ...

    def visit_group(self, group: Sequence[FilterEntry]) -> T:
        """Visit an AND group: traverse all children, then combine."""
        visited_children = [self.visit(e) for e in group]
        return self.combine_group(group, visited_children)

    def visit_or_filter(self, filter: Filter) -> T:
        """Visit an OR filter: traverse its params, then combine."""
        params = filter.meta.params
        if not is_filter_group(params):
            raise FilterContractError("OR filter params must be a list of filters or filter groups")
        visited_children = [self.visit(e) for e in params]
        return self.combine_or(filter, visited_children)

    @abstractmethod
    def combine_group(self, original: Sequence[FilterEntry], children: list[T]) -> T:
        """Combine results from an AND group's children."""
        ...

    @abstractmethod
    def combine_or(self, original: Filter, children: list[T]) -> T:
        """Combine results from an OR filter's children."""
        ...
