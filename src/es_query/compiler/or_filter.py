"""OR filter compiler.

Turns an OR filter into a single bool query:

    {"bool": {"should": [<branch>, ...], "minimum_should_match": 1}}

Each top-level entry of the OR filter's params becomes one branch. A branch
is the AND of the entry's enabled filters:

    {"bool": {"filter": [...], "must": [], "must_not": [...], "should": []}}

Negated filters go to must_not, everything else to filter. Nested OR filters
are compiled recursively and inserted as their compiled bool query. AND/OR
nesting depth is bounded only by the interpreter stack; a tree too deep for it
is reported as a FilterContractError.

The compiler never mutates its input: branches and the flattened params list
are built as new lists, and leaf queries are deep-copied into the output.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Sequence
from typing import Any

from ..errors import FilterContractError
from ..filters.helpers import is_filter_group, is_filter_negated, is_or_filter
from ..filters.models import Filter, FilterEntry
from ..visitors import FilterCounter, flatten_enabled

logger = logging.getLogger(__name__)

QueryDsl = dict[str, Any]


# =============================================================================
# Public API
# =============================================================================


def handle_or_filter(filter: Filter) -> Filter:
    """Compile an OR filter into a filter carrying a bool "should" query.

    Args:
        filter: A filter whose meta.type is OR and whose meta.params is a
            list of filters and filter groups.

    Returns:
        A new Filter: query is the compiled bool query, meta is a copy of the
        input meta with params replaced by the flattened enabled children,
        $state is a copy of the input state.

    Raises:
        FilterContractError: If the input is not an OR filter, has no params
            list, contains malformed entries, or is nested deeper than the
            interpreter stack allows (roughly sys.getrecursionlimit() / 6
            OR levels).
    """
    if not isinstance(filter, Filter):
        raise FilterContractError(f"Expected a Filter, got {type(filter).__name__}")
    if not is_or_filter(filter):
        raise FilterContractError(f"Expected an OR filter, got type {filter.meta.type!r}")

    entries = filter.meta.params
    if not is_filter_group(entries):
        raise FilterContractError("OR filter params must be a list of filters or filter groups")

    try:
        should = [{"bool": build_query_from_filters(entry)} for entry in entries]
        preserved = flatten_enabled(list(entries))
    except RecursionError:
        raise FilterContractError("Filter tree is too deep to compile") from None

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            f"Compiled OR filter: {len(should)} branches, "
            f"{FilterCounter().visit(list(entries))} enabled filters"
        )

    return Filter(
        meta=filter.meta.model_copy(update={"params": preserved}),
        query={"bool": {"should": should, "minimum_should_match": 1}},
        state=filter.state.model_copy() if filter.state is not None else None,
    )


def build_query_from_filters(entries: FilterEntry | Sequence[FilterEntry]) -> QueryDsl:
    """Build the body of a bool query that ANDs the given entries.

    A single filter is treated as a one-element group; nested groups are
    flattened. Disabled filters are dropped.

    Returns:
        {"filter": [...], "must": [], "must_not": [...], "should": []}

    Raises:
        FilterContractError: On malformed entries or a tree too deep to compile.
    """
    try:
        filters = flatten_enabled(entries)
        return {
            "filter": [translate_to_query(f) for f in filters if not is_filter_negated(f)],
            "must": [],
            "must_not": [translate_to_query(f) for f in filters if is_filter_negated(f)],
            "should": [],
        }
    except RecursionError:
        raise FilterContractError("Filter tree is too deep to compile") from None


def translate_to_query(filter: Filter) -> QueryDsl:
    """Return the query DSL object a filter contributes to a bool clause.

    OR filters are compiled first. Any other filter must already carry a
    single-key query, which is returned as a deep copy.
    """
    if is_or_filter(filter):
        return handle_or_filter(filter).query

    query = filter.query
    if not isinstance(query, dict) or len(query) != 1:
        raise FilterContractError(
            f"Filter of type {filter.meta.type!r} must carry a single-key query, got {query!r}"
        )
    return copy.deepcopy(query)
