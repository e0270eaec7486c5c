"""Builders for primitive and OR filters.

Each builder returns a Filter whose query is already compiled to a single-key
query DSL object, so the OR compiler can use it as-is:

    build_phrase_filter   -> {"match_phrase": {field: value}}
    build_phrases_filter  -> {"bool": {"should": [match_phrase...], "minimum_should_match": 1}}
    build_range_filter    -> {"range": {field: {gte: ..., lt: ...}}}
    build_exists_filter   -> {"exists": {"field": field}}
    build_custom_filter   -> any caller-supplied single-key query
    build_or_filter       -> OR envelope; query is filled in by handle_or_filter
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from ..errors import FilterContractError
from .models import (
    DataViewBase,
    DataViewField,
    Filter,
    FilterEntry,
    FilterMeta,
    FilterState,
    FilterStateStore,
    FilterType,
)

RANGE_OPERATORS = ("gt", "gte", "lt", "lte")
_RANGE_KEYS = (*RANGE_OPERATORS, "format")

_BOOLEAN_STRINGS = {"true": True, "false": False}


def _require_searchable(field: DataViewField) -> None:
    if field.scripted:
        raise FilterContractError(f"Scripted field '{field.name}' is not supported")


def _convert_value(field: DataViewField, value: Any) -> Any:
    """Coerce "true"/"false" strings for boolean fields."""
    if field.type == "boolean" and isinstance(value, str):
        try:
            return _BOOLEAN_STRINGS[value.lower()]
        except KeyError:
            raise FilterContractError(
                f"{value!r} is not a valid boolean value for field '{field.name}'"
            ) from None
    return value


def build_phrase_filter(field: DataViewField, value: Any, data_view: DataViewBase) -> Filter:
    _require_searchable(field)
    converted = _convert_value(field, value)
    return Filter(
        meta=FilterMeta(
            index=data_view.id,
            type=FilterType.PHRASE,
            key=field.name,
            params={"query": converted},
        ),
        query={"match_phrase": {field.name: converted}},
    )


def build_phrases_filter(
    field: DataViewField, values: Sequence[Any], data_view: DataViewBase
) -> Filter:
    """Match any of several phrases on one field."""
    _require_searchable(field)
    converted = [_convert_value(field, v) for v in values]
    return Filter(
        meta=FilterMeta(
            index=data_view.id,
            type=FilterType.PHRASES,
            key=field.name,
            params=converted,
        ),
        query={
            "bool": {
                "should": [{"match_phrase": {field.name: v}} for v in converted],
                "minimum_should_match": 1,
            }
        },
    )


def build_range_filter(
    field: DataViewField, params: Mapping[str, Any], data_view: DataViewBase
) -> Filter:
    """Build a range filter.

    Only gt/gte/lt/lte/format survive. Infinite bounds are dropped; when every
    bound given was infinite the range is unbounded: the filter is tagged
    match_all and compiles to {"match_all": {}}.
    """
    _require_searchable(field)
    range_params = {k: v for k, v in params.items() if k in _RANGE_KEYS}

    dropped = 0
    for op in RANGE_OPERATORS:
        value = range_params.get(op)
        if isinstance(value, (int, float)) and math.isinf(value):
            del range_params[op]
            dropped += 1

    has_bound = any(op in range_params for op in RANGE_OPERATORS)
    if dropped and not has_bound:
        filter_type = FilterType.MATCH_ALL
        query: dict[str, Any] = {"match_all": {}}
    else:
        filter_type = FilterType.RANGE
        query = {"range": {field.name: range_params}}

    return Filter(
        meta=FilterMeta(
            index=data_view.id,
            type=filter_type,
            key=field.name,
            field=field.name,
            params=dict(range_params),
        ),
        query=query,
    )


def build_exists_filter(field: DataViewField, data_view: DataViewBase) -> Filter:
    _require_searchable(field)
    return Filter(
        meta=FilterMeta(index=data_view.id, type=FilterType.EXISTS, key=field.name),
        query={"exists": {"field": field.name}},
    )


def build_custom_filter(
    index: str | None,
    query_dsl: Mapping[str, Any],
    disabled: bool = False,
    negate: bool = False,
    alias: str | None = None,
    store: FilterStateStore = FilterStateStore.APP_STATE,
) -> Filter:
    """Wrap an arbitrary single-key query DSL object as a filter."""
    if len(query_dsl) != 1:
        raise FilterContractError(
            f"Custom filter query must have exactly one top-level key, got {sorted(query_dsl)}"
        )
    return Filter(
        meta=FilterMeta(
            index=index,
            type=FilterType.CUSTOM,
            alias=alias,
            negate=negate,
            disabled=disabled,
        ),
        query=dict(query_dsl),
        state=FilterState(store=store),
    )


def build_or_filter(
    filters: Iterable[FilterEntry],
    alias: str | None = None,
    negate: bool = False,
    disabled: bool = False,
    store: FilterStateStore = FilterStateStore.APP_STATE,
) -> Filter:
    """Wrap filters and filter groups into an OR filter.

    Each item of `filters` becomes one branch of the OR; a list item is an
    implicit AND group.
    """
    return Filter(
        meta=FilterMeta(
            alias=alias,
            negate=negate,
            disabled=disabled,
            type=FilterType.OR,
            params=list(filters),
        ),
        state=FilterState(store=store),
    )
