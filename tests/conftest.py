"""Shared test fixtures and helpers."""

import pytest

from src.es_query import DataViewBase, DataViewField

FIELDS = [
    DataViewField(name="extension", type="string"),
    DataViewField(name="bytes", type="number"),
    DataViewField(name="ssl", type="boolean"),
    DataViewField(name="machine.os", type="string"),
    DataViewField(name="machine.os.raw", type="string", aggregatable=True),
    DataViewField(name="machine.os.keyword", type="string"),
    DataViewField(name="@timestamp", type="date"),
    DataViewField(name="script number", type="number", scripted=True),
]

DATA_VIEW = DataViewBase(id="logstash-*", title="dataView", fields=FIELDS)


def get_field(name: str) -> DataViewField:
    """Look up a stub field by name.

    Raises:
        KeyError: If the stub data view has no such field.
    """
    field = DATA_VIEW.get_field(name)
    if field is None:
        raise KeyError(f"field {name} does not exist")
    return field


def bool_branch(filter=None, must_not=None) -> dict:
    """The bool branch shape every OR entry compiles to."""
    return {
        "bool": {
            "filter": filter or [],
            "must": [],
            "must_not": must_not or [],
            "should": [],
        }
    }


def or_query(*branches) -> dict:
    """The compiled query of an OR filter with the given branches."""
    return {"bool": {"should": list(branches), "minimum_should_match": 1}}


@pytest.fixture
def data_view() -> DataViewBase:
    return DATA_VIEW
