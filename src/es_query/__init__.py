"""Search filter compiler.

Compiles filter-bar filters into Elasticsearch query DSL:

  1. Builders (filters.builders) create primitive filters with compiled queries
  2. build_or_filter wraps filters and AND groups into an OR filter
  3. handle_or_filter compiles the OR filter into a bool "should" query

The output is plain JSON-serializable data, ready to drop into a search
request body.
"""

from .compiler import build_query_from_filters, handle_or_filter, translate_to_query
from .errors import FilterContractError
from .filters import (
    DataViewBase,
    DataViewField,
    Filter,
    FilterEntry,
    FilterMeta,
    FilterState,
    FilterStateStore,
    FilterType,
    parse_filter_entry,
    build_custom_filter,
    build_exists_filter,
    build_or_filter,
    build_phrase_filter,
    build_phrases_filter,
    build_range_filter,
)

__all__ = [
    "DataViewBase",
    "DataViewField",
    "Filter",
    "FilterContractError",
    "FilterEntry",
    "FilterMeta",
    "FilterState",
    "FilterStateStore",
    "FilterType",
    "build_custom_filter",
    "build_exists_filter",
    "build_or_filter",
    "build_phrase_filter",
    "build_phrases_filter",
    "build_range_filter",
    "build_query_from_filters",
    "handle_or_filter",
    "parse_filter_entry",
    "translate_to_query",
]
