"""Flatten AND groups into their enabled filters."""

from __future__ import annotations

from collections.abc import Sequence

from ..filters.helpers import is_filter_disabled
from ..filters.models import Filter, FilterEntry
from .base import FilterVisitor


class EnabledFilterFlattener(FilterVisitor[list[Filter]]):
    """Collects the enabled filters of an entry, in order.

    Nested groups are flattened (an AND of ANDs is one AND). OR filters are
    kept as single items; their params are not descended into. Disabled
    filters, OR filters included, are dropped.
    """

    def visit_default(self, filter: Filter) -> list[Filter]:
        return [] if is_filter_disabled(filter) else [filter]

    def visit_or_filter(self, filter: Filter) -> list[Filter]:
        return self.visit_default(filter)

    def combine_group(
        self, original: Sequence[FilterEntry], children: list[list[Filter]]
    ) -> list[Filter]:
        return [f for child in children for f in child]

    def combine_or(self, original: Filter, children: list[list[Filter]]) -> list[Filter]:
        # Not reached: visit_or_filter does not traverse params.
        return self.visit_default(original)


def flatten_enabled(entry: FilterEntry) -> list[Filter]:
    """Return the enabled filters of `entry` as a flat, ordered list."""
    return EnabledFilterFlattener().visit(entry)
