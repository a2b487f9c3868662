"""Tests for linkroute.routing.registry — per-scheme routers."""

from collections.abc import Mapping

from linkroute.config import RouterConfig
from linkroute.routing.registry import RouteRegistry


def _accept(params: Mapping[str, object]) -> bool:
    return True


class TestRouters:
    def test_global_router_exists(self) -> None:
        registry = RouteRegistry()
        assert registry.global_routes.scheme == "*"
        assert registry.schemes == ("*",)

    def test_for_scheme_creates_once(self) -> None:
        registry = RouteRegistry()
        router = registry.for_scheme("app")
        assert registry.for_scheme("app") is router
        assert registry.schemes == ("*", "app")

    def test_routers_share_config(self) -> None:
        config = RouterConfig(decode_plus_symbols=False)
        registry = RouteRegistry(config)
        assert registry.for_scheme("app").config is config

    def test_for_scheme_is_case_insensitive(self) -> None:
        registry = RouteRegistry()
        router = registry.for_scheme("MyApp")
        assert router.scheme == "myapp"
        assert registry.for_scheme("MYAPP") is router
        assert registry.schemes == ("*", "myapp")

    def test_unregister_scheme(self) -> None:
        registry = RouteRegistry()
        registry.for_scheme("app")
        registry.unregister("app")
        assert registry.schemes == ("*",)

    def test_unregister_global_clears(self) -> None:
        registry = RouteRegistry()
        registry.global_routes.add_route("/a")
        registry.unregister("*")
        assert registry.schemes == ("*",)
        assert len(registry.global_routes) == 0


class TestDispatch:
    def test_scheme_router_used(self) -> None:
        registry = RouteRegistry()
        seen: list[str] = []
        registry.for_scheme("app").add_route("/a", lambda p: seen.append("app") or True)
        registry.global_routes.add_route("/a", lambda p: seen.append("global") or True)

        assert registry.dispatch("app://a") is True
        assert seen == ["app"]

    def test_mixed_case_scheme_reachable(self) -> None:
        registry = RouteRegistry()
        seen: list[object] = []
        registry.for_scheme("MyApp").add_route("/a", lambda p: seen.append(p["scheme"]) or True)

        assert registry.dispatch("MyApp://a") is True
        assert seen == ["myapp"]
        registry.unregister("MYAPP")
        assert registry.schemes == ("*",)

    def test_unknown_scheme_uses_global(self) -> None:
        registry = RouteRegistry()
        seen: list[object] = []
        registry.global_routes.add_route("/a", lambda p: seen.append(p["scheme"]) or True)

        assert registry.dispatch("other://a") is True
        assert seen == ["*"]

    def test_no_fallback_by_default(self) -> None:
        registry = RouteRegistry()
        registry.for_scheme("app")
        registry.global_routes.add_route("/help", _accept)
        assert registry.dispatch("app://help") is False

    def test_fallback_to_global(self) -> None:
        registry = RouteRegistry(RouterConfig(fallback_to_global=True))
        registry.for_scheme("app").add_route("/user/:id", _accept)
        registry.global_routes.add_route("/help", _accept)
        assert registry.dispatch("app://help") is True
        assert registry.can_dispatch("app://help") is True
        assert registry.can_dispatch("app://missing") is False

    def test_unmatched_handler_runs_after_fallback(self) -> None:
        registry = RouteRegistry(RouterConfig(fallback_to_global=True))
        calls: list[str] = []
        app = registry.for_scheme("app")
        app.unmatched_url_handler = lambda router, url, extra: calls.append(url)
        registry.global_routes.add_route("/help", _accept)

        registry.dispatch("app://help")
        assert calls == []
        registry.dispatch("app://missing")
        assert calls == ["app://missing"]
