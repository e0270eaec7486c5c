"""Count enabled filter nodes in an entry tree."""

from __future__ import annotations

from collections.abc import Sequence

from ..filters.helpers import is_filter_disabled
from ..filters.models import Filter, FilterEntry
from .base import FilterVisitor


class FilterCounter(FilterVisitor[int]):
    """Counts enabled filters, descending into OR params.

    An OR filter counts as one node plus its enabled children. Groups are not
    nodes themselves. A disabled OR filter hides its whole subtree.
    """

    def visit_default(self, filter: Filter) -> int:
        return 0 if is_filter_disabled(filter) else 1

    def visit_or_filter(self, filter: Filter) -> int:
        if is_filter_disabled(filter):
            return 0
        return super().visit_or_filter(filter)

    def combine_group(self, original: Sequence[FilterEntry], children: list[int]) -> int:
        return sum(children)

    def combine_or(self, original: Filter, children: list[int]) -> int:
        return 1 + sum(children)
