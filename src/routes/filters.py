"""Filter compilation routes."""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from src.es_query import (
    Filter,
    FilterContractError,
    build_query_from_filters,
    handle_or_filter,
    parse_filter_entry,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/filters", tags=["filters"])


class QueryRequest(BaseModel):
    """Request body for /filters/query: the filter bar's entries, ANDed."""

    filters: list[Any] = Field(default_factory=list)


class QueryResponse(BaseModel):
    """A bool query ready for a search request body."""

    query: dict[str, Any]


@router.post("/compile")
async def compile_or_filter(filter: Filter) -> dict[str, Any]:
    """Compile an OR filter into a filter carrying a bool "should" query."""
    try:
        compiled = handle_or_filter(filter)
    except FilterContractError as e:
        logger.warning(f"Rejected filter: {e}")
        raise HTTPException(status_code=422, detail=str(e)) from e
    return compiled.to_dict()


@router.post("/query", response_model=QueryResponse)
async def build_query(request: QueryRequest) -> QueryResponse:
    """Build one bool query that ANDs all entries of the filter bar."""
    try:
        entries = [parse_filter_entry(entry) for entry in request.filters]
        body = build_query_from_filters(entries)
    except ValueError as e:
        # FilterContractError and pydantic ValidationError are both ValueErrors
        logger.warning(f"Rejected filters: {e}")
        raise HTTPException(status_code=422, detail=str(e)) from e
    return QueryResponse(query={"bool": body})
