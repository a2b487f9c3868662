"""Tests for linkroute.urls.parsing — value and query normalization."""

from linkroute.urls.parsing import (
    add_query_value,
    merge_query,
    normalize_query_params,
    normalize_value,
    parse_query,
)


class TestNormalizeValue:
    def test_plus_decoded(self) -> None:
        assert normalize_value("a+b+c", True) == "a b c"

    def test_plus_kept(self) -> None:
        assert normalize_value("a+b", False) == "a+b"

    def test_no_percent_decoding(self) -> None:
        assert normalize_value("a%20b", True) == "a%20b"


class TestNormalizeQueryParams:
    def test_single_and_repeated_values(self) -> None:
        params = normalize_query_params({"q": "a+b", "tag": ("x+y", "z")}, True)
        assert params == {"q": "a b", "tag": ("x y", "z")}

    def test_disabled(self) -> None:
        assert normalize_query_params({"q": "a+b"}, False) == {"q": "a+b"}


class TestParseQuery:
    def test_pairs(self) -> None:
        assert parse_query("a=1&b=2") == {"a": "1", "b": "2"}

    def test_empty(self) -> None:
        assert parse_query("") == {}

    def test_skips_empty_pairs(self) -> None:
        assert parse_query("a=1&&b=2&") == {"a": "1", "b": "2"}

    def test_value_containing_equals(self) -> None:
        assert parse_query("expr=a=b") == {"expr": "a=b"}

    def test_decodes_keys_and_values(self) -> None:
        assert parse_query("na%20me=%C3%A9") == {"na me": "é"}


class TestMergeQuery:
    def test_add_value_promotes_to_tuple(self) -> None:
        params: dict[str, str | tuple[str, ...]] = {}
        add_query_value(params, "k", "1")
        add_query_value(params, "k", "2")
        add_query_value(params, "k", "3")
        assert params == {"k": ("1", "2", "3")}

    def test_merge_keeps_every_value(self) -> None:
        target: dict[str, str | tuple[str, ...]] = {"a": "1"}
        merge_query(target, {"a": ("2", "3"), "b": "4"})
        assert target == {"a": ("1", "2", "3"), "b": "4"}
