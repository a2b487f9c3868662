"""Router — priority-ordered route definitions for one scheme.

Dispatch tries each definition in turn. A match whose handler returns
False is treated like no match and the next definition gets its chance.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from linkroute._internal.keys import GLOBAL_SCHEME
from linkroute._internal.types import ParamValue, RouteHandler
from linkroute.config import DEFAULT_CONFIG, RouterConfig
from linkroute.errors import ConfigurationError
from linkroute.routing.definition import RouteDefinition
from linkroute.routing.response import RouteResponse
from linkroute.urls.request import RouteRequest

logger = logging.getLogger("linkroute.routing")

# Called as (router, url, extra_parameters) when nothing accepted a URL
UnmatchedURLHandler = Callable[["Router", str, Mapping[str, Any] | None], None]


class Router:
    """Ordered route definitions for a single scheme.

    Usage::

        router = Router("app")
        router.add_route("/user/:id", show_user)

        @router.route("/files/*", priority=10)
        def open_files(params):
            return True

        router.dispatch("app://user/42")
    """

    __slots__ = ("_definitions", "config", "scheme", "unmatched_url_handler")

    def __init__(
        self,
        scheme: str = GLOBAL_SCHEME,
        config: RouterConfig | None = None,
        unmatched_url_handler: UnmatchedURLHandler | None = None,
    ) -> None:
        self.scheme = scheme
        self.config = config or DEFAULT_CONFIG
        self.unmatched_url_handler = unmatched_url_handler
        self._definitions: list[RouteDefinition] = []

    def __repr__(self) -> str:
        return f"Router(scheme={self.scheme!r}, routes={len(self._definitions)})"

    # -- Registration --

    def add(self, definition: RouteDefinition) -> None:
        """Insert *definition* after every route of equal or higher priority."""
        if definition.scheme != self.scheme:
            msg = (
                f"Route {definition.pattern!r} is for scheme {definition.scheme!r}, "
                f"this router serves {self.scheme!r}"
            )
            raise ConfigurationError(msg)

        index = len(self._definitions)
        for i, existing in enumerate(self._definitions):
            if existing.priority < definition.priority:
                index = i
                break
        self._definitions.insert(index, definition)
        logger.debug("Registered %s at position %d", definition, index)

    def add_route(
        self, pattern: str, handler: RouteHandler | None = None, priority: int = 0
    ) -> RouteDefinition:
        """Create and register a definition for *pattern*."""
        definition = RouteDefinition(self.scheme, pattern, priority, handler)
        self.add(definition)
        return definition

    def add_routes(
        self, patterns: Iterable[str], handler: RouteHandler | None = None, priority: int = 0
    ) -> list[RouteDefinition]:
        """Register the same handler under several patterns."""
        return [self.add_route(pattern, handler, priority) for pattern in patterns]

    def route(self, pattern: str, priority: int = 0) -> Callable[[RouteHandler], RouteHandler]:
        """Decorator form of :meth:`add_route`."""

        def decorator(handler: RouteHandler) -> RouteHandler:
            self.add_route(pattern, handler, priority)
            return handler

        return decorator

    def remove(self, definition: RouteDefinition) -> None:
        """Remove *definition*. Raises ``ValueError`` if it is not registered."""
        for i, existing in enumerate(self._definitions):
            if existing is definition:
                del self._definitions[i]
                return
        msg = f"{definition} is not registered with {self!r}"
        raise ValueError(msg)

    def remove_route(self, pattern: str) -> bool:
        """Remove the first definition registered for *pattern*.

        The leading ``/`` is optional. Returns whether anything was removed.
        """
        pattern = pattern.removeprefix("/")
        for i, existing in enumerate(self._definitions):
            if existing.pattern == pattern:
                del self._definitions[i]
                return True
        return False

    def clear(self) -> None:
        self._definitions.clear()

    @property
    def routes(self) -> tuple[RouteDefinition, ...]:
        """All definitions, in dispatch order."""
        return tuple(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[RouteDefinition]:
        return iter(tuple(self._definitions))

    def __contains__(self, item: object) -> bool:
        return any(existing is item for existing in self._definitions)

    # -- Dispatch --

    def request_for(self, url: str | RouteRequest) -> RouteRequest:
        if isinstance(url, RouteRequest):
            return url
        return RouteRequest.from_url(url, self.config)

    def first_match(
        self, url: str | RouteRequest
    ) -> tuple[RouteDefinition, RouteResponse] | None:
        """The first definition whose pattern matches, ignoring handlers."""
        request = self.request_for(url)
        for definition in self._definitions:
            response = definition.match(request, self.config)
            if response:
                return definition, response
        return None

    def dispatch(
        self,
        url: str | RouteRequest,
        extra_parameters: Mapping[str, Any] | None = None,
        *,
        execute: bool = True,
    ) -> bool:
        """Route *url* to the first definition whose handler accepts it.

        *extra_parameters* are layered over the matched parameters. With
        ``execute=False`` no handler runs and the first pattern match
        counts as handled. When nothing accepts, the unmatched URL
        handler (if any) is called; it never runs for ``execute=False``.
        """
        request = self.request_for(url)
        if self.attempt(request, extra_parameters, execute=execute):
            return True
        if execute and self.unmatched_url_handler is not None:
            self.unmatched_url_handler(self, request.url, extra_parameters)
        return False

    def attempt(
        self,
        request: RouteRequest,
        extra_parameters: Mapping[str, Any] | None = None,
        *,
        execute: bool = True,
    ) -> bool:
        """Like :meth:`dispatch`, but never calls the unmatched URL handler."""
        logger.debug("Routing %s (%s)", request.url, request.path)

        for definition in self._definitions:
            response = definition.match(request, self.config)
            if not response:
                continue

            logger.debug("%s matched %s", definition, request.url)
            if not execute:
                return True

            parameters: dict[str, ParamValue] = dict(response.parameters)
            if extra_parameters:
                parameters.update(extra_parameters)

            if definition.invoke_handler(MappingProxyType(parameters)):
                return True
            logger.debug("%s declined %s, continuing", definition, request.url)

        logger.debug("No route accepted %s", request.url)
        return False

    def can_dispatch(self, url: str | RouteRequest) -> bool:
        """Whether any definition's pattern matches *url*. Handlers do not run."""
        return self.dispatch(url, execute=False)
