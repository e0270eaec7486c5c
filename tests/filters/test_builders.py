"""Tests for the primitive and OR filter builders."""

from __future__ import annotations

import math

import pytest

from src.es_query import (
    FilterContractError,
    FilterStateStore,
    FilterType,
    build_custom_filter,
    build_exists_filter,
    build_or_filter,
    build_phrase_filter,
    build_phrases_filter,
    build_range_filter,
)
from tests.conftest import DATA_VIEW, get_field


class TestPhraseFilter:
    def test_query_and_meta(self):
        filter = build_phrase_filter(get_field("extension"), "jpg", DATA_VIEW)
        assert filter.query == {"match_phrase": {"extension": "jpg"}}
        assert filter.meta.type == FilterType.PHRASE
        assert filter.meta.key == "extension"
        assert filter.meta.index == "logstash-*"
        assert filter.meta.params == {"query": "jpg"}
        assert filter.meta.negate is False
        assert filter.meta.disabled is False

    def test_boolean_field_accepts_bool(self):
        filter = build_phrase_filter(get_field("ssl"), False, DATA_VIEW)
        assert filter.query == {"match_phrase": {"ssl": False}}

    @pytest.mark.parametrize("raw,expected", [("true", True), ("FALSE", False)])
    def test_boolean_field_converts_strings(self, raw, expected):
        filter = build_phrase_filter(get_field("ssl"), raw, DATA_VIEW)
        assert filter.query == {"match_phrase": {"ssl": expected}}

    def test_boolean_field_rejects_other_strings(self):
        with pytest.raises(FilterContractError, match="not a valid boolean"):
            build_phrase_filter(get_field("ssl"), "maybe", DATA_VIEW)

    def test_scripted_field_is_rejected(self):
        with pytest.raises(FilterContractError, match="Scripted field"):
            build_phrase_filter(get_field("script number"), 5, DATA_VIEW)


class TestPhrasesFilter:
    def test_query_is_should_of_match_phrases(self):
        filter = build_phrases_filter(get_field("extension"), ["tar", "gz"], DATA_VIEW)
        assert filter.query == {
            "bool": {
                "should": [
                    {"match_phrase": {"extension": "tar"}},
                    {"match_phrase": {"extension": "gz"}},
                ],
                "minimum_should_match": 1,
            }
        }
        assert filter.meta.type == FilterType.PHRASES
        assert filter.meta.params == ["tar", "gz"]


class TestRangeFilter:
    def test_bounded_range(self):
        filter = build_range_filter(get_field("bytes"), {"gte": 10, "lt": 20}, DATA_VIEW)
        assert filter.query == {"range": {"bytes": {"gte": 10, "lt": 20}}}
        assert filter.meta.type == FilterType.RANGE
        assert filter.meta.field == "bytes"

    def test_unknown_keys_are_dropped(self):
        filter = build_range_filter(
            get_field("@timestamp"),
            {"gte": "now-1d", "format": "strict_date_optional_time", "boost": 2},
            DATA_VIEW,
        )
        assert filter.query == {
            "range": {"@timestamp": {"gte": "now-1d", "format": "strict_date_optional_time"}}
        }

    def test_infinite_bound_is_dropped(self):
        filter = build_range_filter(get_field("bytes"), {"gte": 10, "lt": math.inf}, DATA_VIEW)
        assert filter.query == {"range": {"bytes": {"gte": 10}}}
        assert filter.meta.type == FilterType.RANGE

    def test_fully_infinite_range_matches_all(self):
        filter = build_range_filter(
            get_field("bytes"), {"gte": -math.inf, "lt": math.inf}, DATA_VIEW
        )
        assert filter.query == {"match_all": {}}
        assert filter.meta.type == FilterType.MATCH_ALL
        assert filter.meta.field == "bytes"

    def test_input_params_are_not_mutated(self):
        params = {"gte": 10, "lt": math.inf}
        build_range_filter(get_field("bytes"), params, DATA_VIEW)
        assert params == {"gte": 10, "lt": math.inf}


class TestExistsFilter:
    def test_query_and_meta(self):
        filter = build_exists_filter(get_field("machine.os"), DATA_VIEW)
        assert filter.query == {"exists": {"field": "machine.os"}}
        assert filter.meta.type == FilterType.EXISTS
        assert filter.meta.index == "logstash-*"


class TestCustomFilter:
    def test_wraps_query(self):
        filter = build_custom_filter(
            "logstash-*",
            {"term": {"status": 200}},
            negate=True,
            alias="OK responses",
            store=FilterStateStore.GLOBAL_STATE,
        )
        assert filter.query == {"term": {"status": 200}}
        assert filter.meta.type == FilterType.CUSTOM
        assert filter.meta.negate is True
        assert filter.meta.alias == "OK responses"
        assert filter.state.store == FilterStateStore.GLOBAL_STATE

    def test_requires_single_key(self):
        with pytest.raises(FilterContractError, match="exactly one top-level key"):
            build_custom_filter(None, {"term": {"a": 1}, "exists": {"field": "b"}})


class TestOrFilter:
    def test_envelope(self):
        children = [
            build_exists_filter(get_field("machine.os"), DATA_VIEW),
            [build_phrase_filter(get_field("extension"), "gz", DATA_VIEW)],
        ]
        filter = build_or_filter(children)
        assert filter.meta.type == FilterType.OR
        assert filter.meta.params == children
        assert filter.meta.alias is None
        assert filter.meta.index is None
        assert filter.query is None
        assert filter.state.store == FilterStateStore.APP_STATE

    def test_accepts_any_iterable(self):
        exists = build_exists_filter(get_field("machine.os"), DATA_VIEW)
        filter = build_or_filter(f for f in [exists])
        assert filter.meta.params == [exists]
