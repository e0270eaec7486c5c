"""Compiler package for search filters.

handle_or_filter compiles an OR filter into a bool "should" query;
build_query_from_filters builds the AND branch each OR entry compiles to.
"""

from .or_filter import build_query_from_filters, handle_or_filter, translate_to_query

__all__ = ["build_query_from_filters", "handle_or_filter", "translate_to_query"]
