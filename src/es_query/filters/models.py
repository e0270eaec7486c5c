"""Typed filter models for the search filter bar.

A Filter is the unit the filter bar stores and the compiler consumes:

- meta:   what the filter is (type, negate, disabled, alias, index, params)
- query:  the compiled single-key query DSL fragment
- $state: where the filter lives (app state or global state)

Uses Pydantic for parsing and serialization. OR filters carry their children
in meta.params as a list whose items are either Filters or nested lists of
Filters (implicit AND groups).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    ValidationInfo,
    field_validator,
    model_serializer,
)

from ..errors import FilterContractError

# =============================================================================
# Enums
# =============================================================================


class FilterType(str, Enum):
    """Filter type tags stored in meta.type."""

    PHRASE = "phrase"
    PHRASES = "phrases"
    RANGE = "range"
    EXISTS = "exists"
    OR = "OR"
    CUSTOM = "custom"
    MATCH_ALL = "match_all"


class FilterStateStore(str, Enum):
    """Storage scope of a filter."""

    APP_STATE = "appState"
    GLOBAL_STATE = "globalState"


# =============================================================================
# Data views
# =============================================================================


class DataViewField(BaseModel):
    """A field of a data view, as the builders need it."""

    name: str
    type: str = "string"
    scripted: bool = False
    searchable: bool = True
    aggregatable: bool = True


class DataViewBase(BaseModel):
    """Minimal data view: an id plus the fields it exposes."""

    id: str | None = None
    title: str
    fields: list[DataViewField] = Field(default_factory=list)

    def get_field(self, name: str) -> DataViewField | None:
        for f in self.fields:
            if f.name == name:
                return f
        return None


# =============================================================================
# Filters
# =============================================================================


class FilterState(BaseModel):
    """The $state envelope. Opaque to the compiler."""

    model_config = ConfigDict(extra="allow")

    store: FilterStateStore = FilterStateStore.APP_STATE


class FilterMeta(BaseModel):
    """Filter metadata.

    `type` is declared before `params` so the params validator can see it.
    Unknown meta keys (key, value, field, controlledBy, ...) are kept as extras.
    """

    model_config = ConfigDict(extra="allow")

    alias: str | None = None
    negate: bool = False
    disabled: bool = False
    type: str | None = None
    key: str | None = None
    index: str | None = None
    params: Any = None

    @field_validator("params", mode="before")
    @classmethod
    def _parse_or_params(cls, value: Any, info: ValidationInfo) -> Any:
        if info.data.get("type") != FilterType.OR:
            return value
        if not isinstance(value, (list, tuple)):
            raise FilterContractError(
                "OR filter params must be a list of filters or filter groups"
            )
        return [parse_filter_entry(entry) for entry in value]


class Filter(BaseModel):
    """A single search filter."""

    model_config = ConfigDict(populate_by_name=True)

    meta: FilterMeta
    query: dict[str, Any] | None = None
    state: FilterState | None = Field(default=None, alias="$state")

    @model_serializer(mode="wrap")
    def _drop_missing_envelope(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        # An uncompiled query or a missing $state is absent, not null. Nulls inside
        # meta (alias, index, ...) are kept.
        data = handler(self)
        for key in ("query", "state", "$state"):
            if key in data and data[key] is None:
                del data[key]
        return data

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON shape the filter bar stores ($state aliased)."""
        return self.model_dump(mode="json", by_alias=True)


# A filter entry is either a single filter or an implicit AND group.
FilterEntry = Union[Filter, list["FilterEntry"]]


def parse_filter_entry(value: Any) -> FilterEntry:
    """Parse one OR param entry into a Filter or a nested list of entries."""
    match value:
        case Filter():
            return value
        case list() | tuple():
            return [parse_filter_entry(v) for v in value]
        case dict():
            return Filter.model_validate(value)
        case _:
            raise FilterContractError(
                f"Filter entry must be a filter or a list of filters, got {type(value).__name__}"
            )
