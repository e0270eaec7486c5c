"""Filter models, builders and predicates."""

from .builders import (
    build_custom_filter,
    build_exists_filter,
    build_or_filter,
    build_phrase_filter,
    build_phrases_filter,
    build_range_filter,
)
from .helpers import is_filter_disabled, is_filter_group, is_filter_negated, is_or_filter
from .models import (
    DataViewBase,
    DataViewField,
    Filter,
    FilterEntry,
    FilterMeta,
    FilterState,
    FilterStateStore,
    FilterType,
    parse_filter_entry,
)

__all__ = [
    "DataViewBase",
    "DataViewField",
    "Filter",
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
    "is_filter_disabled",
    "is_filter_group",
    "is_filter_negated",
    "is_or_filter",
    "parse_filter_entry",
]
