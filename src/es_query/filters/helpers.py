"""Predicates over filters and filter entries."""

from __future__ import annotations

from typing import Any

from .models import Filter, FilterType


def is_or_filter(filter: Filter) -> bool:
    return filter.meta.type == FilterType.OR


def is_filter_disabled(filter: Filter) -> bool:
    return filter.meta.disabled is True


def is_filter_negated(filter: Filter) -> bool:
    return filter.meta.negate is True


def is_filter_group(entry: Any) -> bool:
    """True for an implicit AND group (a list or tuple of entries)."""
    return isinstance(entry, (list, tuple))
