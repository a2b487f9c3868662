"""Route registry — one router per URL scheme plus a global router.

URLs are dispatched to the router registered for their scheme, or to
the global router when the scheme has none. With
``RouterConfig(fallback_to_global=True)`` a scheme router that accepts
nothing hands the URL on to the global router.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from linkroute._internal.keys import GLOBAL_SCHEME
from linkroute.config import DEFAULT_CONFIG, RouterConfig
from linkroute.routing.router import Router
from linkroute.urls.request import RouteRequest

logger = logging.getLogger("linkroute.routing")


class RouteRegistry:
    """Routers keyed by scheme.

    Usage::

        registry = RouteRegistry(RouterConfig(fallback_to_global=True))
        registry.for_scheme("app").add_route("/user/:id", show_user)
        registry.global_routes.add_route("/help", show_help)

        registry.dispatch("app://help")  # falls back to the global router
    """

    __slots__ = ("_routers", "config")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._routers: dict[str, Router] = {GLOBAL_SCHEME: Router(GLOBAL_SCHEME, self.config)}

    def __repr__(self) -> str:
        return f"RouteRegistry(schemes={list(self._routers)!r})"

    @property
    def global_routes(self) -> Router:
        return self._routers[GLOBAL_SCHEME]

    @property
    def schemes(self) -> tuple[str, ...]:
        """Registered schemes, the global scheme first."""
        return tuple(self._routers)

    @property
    def routers(self) -> tuple[Router, ...]:
        return tuple(self._routers.values())

    def for_scheme(self, scheme: str) -> Router:
        """The router for *scheme*, created on first use.

        Schemes are case-insensitive and stored lowercased, matching how
        URLs are decomposed.
        """
        scheme = scheme.lower()
        router = self._routers.get(scheme)
        if router is None:
            router = Router(scheme, self.config)
            self._routers[scheme] = router
            logger.debug("Created router for scheme %r", scheme)
        return router

    def unregister(self, scheme: str) -> None:
        """Drop the router for *scheme*. The global router is only cleared."""
        scheme = scheme.lower()
        if scheme == GLOBAL_SCHEME:
            self.global_routes.clear()
            return
        self._routers.pop(scheme, None)

    def router_for(self, request: RouteRequest) -> Router:
        return self._routers.get(request.scheme.lower(), self.global_routes)

    def dispatch(
        self,
        url: str | RouteRequest,
        extra_parameters: Mapping[str, Any] | None = None,
        *,
        execute: bool = True,
    ) -> bool:
        """Dispatch *url* through its scheme's router, then maybe the global one."""
        request = url if isinstance(url, RouteRequest) else RouteRequest.from_url(url, self.config)
        router = self.router_for(request)

        if router.attempt(request, extra_parameters, execute=execute):
            return True

        if self.config.fallback_to_global and router is not self.global_routes:
            logger.debug("Falling back to global routes for %s", request.url)
            if self.global_routes.attempt(request, extra_parameters, execute=execute):
                return True

        # The scheme router's unmatched handler runs once, after any fallback
        if execute and router.unmatched_url_handler is not None:
            router.unmatched_url_handler(router, request.url, extra_parameters)
        return False

    def can_dispatch(self, url: str | RouteRequest) -> bool:
        return self.dispatch(url, execute=False)
