"""Tests for linkroute.urls.request — URL decomposition."""

import pytest

from linkroute.config import RouterConfig
from linkroute.urls.request import RouteRequest, split_path


class TestSplitPath:
    def test_drops_empty_components(self) -> None:
        assert split_path("/user/42/") == ["user", "42"]
        assert split_path("a//b") == ["a", "b"]

    def test_root(self) -> None:
        assert split_path("/") == []


class TestFromURL:
    def test_custom_scheme_host_is_component(self) -> None:
        request = RouteRequest.from_url("app://user/42/profile?tab=bio")
        assert request.scheme == "app"
        assert request.path_components == ("user", "42", "profile")
        assert request.query_params == {"tab": "bio"}
        assert request.url == "app://user/42/profile?tab=bio"

    def test_host_case_preserved(self) -> None:
        request = RouteRequest.from_url("app://User/42")
        assert request.path_components == ("User", "42")

    def test_dotted_host_not_a_component(self) -> None:
        request = RouteRequest.from_url("https://example.com/user/42")
        assert request.path_components == ("user", "42")

    def test_localhost_not_a_component(self) -> None:
        request = RouteRequest.from_url("http://localhost:8080/a")
        assert request.path_components == ("a",)

    def test_always_treat_host_as_component(self) -> None:
        config = RouterConfig(treat_host_as_path_component=True)
        request = RouteRequest.from_url("https://example.com/user", config)
        assert request.path_components == ("example.com", "user")

    def test_no_authority(self) -> None:
        request = RouteRequest.from_url("app:/user/42")
        assert request.path_components == ("user", "42")

    def test_path_components_stay_encoded(self) -> None:
        request = RouteRequest.from_url("app://search/100%25")
        assert request.path_components == ("search", "100%25")

    def test_query_percent_decoded_plus_kept(self) -> None:
        request = RouteRequest.from_url("app://a?q=a+b%20c")
        assert request.query_params == {"q": "a+b c"}

    def test_query_key_without_value(self) -> None:
        request = RouteRequest.from_url("app://a?flag&x=1")
        assert request.query_params == {"flag": "", "x": "1"}

    def test_repeated_query_keys(self) -> None:
        request = RouteRequest.from_url("app://a?tag=x&tag=y")
        assert request.query_params["tag"] == ("x", "y")

    def test_fragment_path_appended(self) -> None:
        request = RouteRequest.from_url("app://a#/b/c")
        assert request.path_components == ("a", "b", "c")

    def test_fragment_query_merged(self) -> None:
        request = RouteRequest.from_url("app://a?x=1#/b?y=2&x=3")
        assert request.path_components == ("a", "b")
        assert request.query_params == {"x": ("1", "3"), "y": "2"}

    def test_fragment_query_only(self) -> None:
        request = RouteRequest.from_url("app://user/42#tab=bio&x=1")
        assert request.path_components == ("user", "42")
        assert request.query_params == {"tab": "bio", "x": "1"}

    def test_fragment_without_equals_is_path(self) -> None:
        request = RouteRequest.from_url("app://a#b&c=1")
        assert request.path_components == ("a", "b&c=1")
        assert request.query_params == {}

    def test_path_property(self) -> None:
        assert RouteRequest.from_url("app://user/42").path == "/user/42"


class TestRouteRequest:
    def test_direct_construction_freezes(self) -> None:
        components = ["a", "b"]
        query = {"k": "v"}
        request = RouteRequest(url="x", path_components=components, query_params=query)  # type: ignore[arg-type]
        components.append("c")
        query["z"] = "w"
        assert request.path_components == ("a", "b")
        assert request.query_params == {"k": "v"}

    def test_query_read_only(self) -> None:
        request = RouteRequest(url="x", query_params={"k": "v"})
        with pytest.raises(TypeError):
            request.query_params["k"] = "w"  # type: ignore[index]

    def test_frozen(self) -> None:
        request = RouteRequest(url="x")
        with pytest.raises(AttributeError):
            request.url = "y"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert RouteRequest.from_url("app://a?x=1") == RouteRequest.from_url("app://a?x=1")
