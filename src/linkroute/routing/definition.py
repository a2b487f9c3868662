"""Route definition and the per-definition match algorithm.

A definition is one registered pattern such as ``/user/:id/profile`` or
``/files/*``. Matching walks the pattern and the request's path
components in lock-step:

- a literal segment must equal the URL component exactly
- a ``:name`` segment captures the URL component (decoded) as ``name``
- a ``*`` segment captures every remaining component and ends the walk

On a match, query parameters, route variables and route metadata are
merged into one parameter mapping, later layers winning.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import unquote

from linkroute._internal.keys import (
    PATTERN_KEY,
    SCHEME_KEY,
    URL_KEY,
    WILDCARD_COMPONENTS_KEY,
)
from linkroute._internal.types import ParamValue, Parameters, RouteHandler
from linkroute.config import DEFAULT_CONFIG, RouterConfig
from linkroute.errors import ConfigurationError
from linkroute.routing.response import RouteResponse
from linkroute.urls.parsing import normalize_query_params, normalize_value
from linkroute.urls.request import RouteRequest

WILDCARD = "*"
VARIABLE_PREFIX = ":"
FRAGMENT_SUFFIX = "#"


def parse_pattern(pattern: str) -> tuple[str, ...]:
    """Split a pattern into segments after stripping one leading ``/``.

    Examples::

        "/user/:id"  -> ("user", ":id")
        "/files/*"   -> ("files", "*")
        "/"          -> ("",)
        ""           -> ("",)
    """
    if pattern.startswith("/"):
        pattern = pattern[1:]
    return tuple(pattern.split("/"))


def variable_name(segment: str) -> str:
    """Name of a ``:name`` pattern segment.

    One leading ``:`` is removed, then one trailing ``#`` when the name
    is longer than a single character. ``":"`` yields ``""``.
    """
    name = segment[1:] if segment.startswith(VARIABLE_PREFIX) else segment
    if len(name) > 1 and name.endswith(FRAGMENT_SUFFIX):
        name = name[:-1]
    return name


def variable_value(component: str, decode_plus_symbols: bool) -> str:
    """Decoded value of the URL component captured by a ``:name`` segment.

    Percent-decoding runs first, so ``"100%25"`` becomes ``"100%"`` and
    an encoded ``%23`` can still be stripped as a trailing fragment marker.
    """
    value = unquote(component)
    if len(value) > 1 and value.endswith(FRAGMENT_SUFFIX):
        value = value[:-1]
    return normalize_value(value, decode_plus_symbols)


@dataclass(frozen=True, slots=True)
class RouteDefinition:
    """A frozen route definition.

    Created at registration time and never mutated, so one definition
    can be matched from many threads at once::

        definition = RouteDefinition("app", "/user/:id", handler=show_user)
        response = definition.match(RouteRequest.from_url("app://user/42"))
        if response and definition.invoke_handler(response.parameters):
            ...
    """

    scheme: str
    pattern: str
    priority: int = 0
    handler: RouteHandler | None = None
    path_components: tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.priority < 0:
            msg = f"Route priority must be zero or positive, got {self.priority} for {self.pattern!r}"
            raise ConfigurationError(msg)
        object.__setattr__(self, "path_components", parse_pattern(self.pattern))
        object.__setattr__(self, "pattern", self.pattern.removeprefix("/"))

    @property
    def has_wildcard(self) -> bool:
        return WILDCARD in self.path_components

    def match(self, request: RouteRequest, config: RouterConfig | None = None) -> RouteResponse:
        """Match *request* against this definition.

        Returns ``RouteResponse.invalid()`` when the path does not match,
        otherwise a valid response carrying the merged parameters.
        """
        config = config or DEFAULT_CONFIG

        if not self.has_wildcard and len(request.path_components) != len(self.path_components):
            # Without a wildcard the segment counts must agree
            return RouteResponse.invalid()

        variables = self._route_variables(request, config)
        if variables is None:
            return RouteResponse.invalid()

        return RouteResponse.valid(self._match_parameters(request, variables, config))

    def invoke_handler(self, parameters: Parameters) -> bool:
        """Call the handler with *parameters* and return its verdict.

        A definition without a handler always accepts. Exceptions raised
        by the handler propagate to the caller.
        """
        if self.handler is None:
            return True
        return self.handler(parameters)

    def _route_variables(
        self, request: RouteRequest, config: RouterConfig
    ) -> dict[str, ParamValue] | None:
        """Walk pattern and URL components; ``None`` means no match."""
        components = request.path_components
        variables: dict[str, ParamValue] = {}

        for index, segment in enumerate(self.path_components):
            is_wildcard = segment == WILDCARD

            if index < len(components):
                component: str | None = components[index]
            elif not is_wildcard:
                # Pattern is longer than the URL
                return None
            else:
                component = None

            if is_wildcard:
                # "/a/b/*" needs at least "/a/b"
                if len(components) >= index:
                    variables[WILDCARD_COMPONENTS_KEY] = components[index:]
                    return variables
                return None

            if component is None:
                return None

            if segment.startswith(VARIABLE_PREFIX):
                name = variable_name(segment)
                variables[name] = variable_value(component, config.decode_plus_symbols)
            elif segment != component:
                return None

        return variables

    def _match_parameters(
        self,
        request: RouteRequest,
        variables: dict[str, ParamValue],
        config: RouterConfig,
    ) -> dict[str, ParamValue]:
        # Query parameters, then route variables, then metadata; metadata
        # keys can never be overridden from the URL
        params: dict[str, ParamValue] = {}
        params.update(normalize_query_params(request.query_params, config.decode_plus_symbols))
        params.update(variables)
        params.update(self._default_parameters(request))
        return params

    def _default_parameters(self, request: RouteRequest) -> dict[str, ParamValue]:
        return {
            PATTERN_KEY: self.pattern,
            URL_KEY: request.url,
            SCHEME_KEY: self.scheme,
        }

    def __str__(self) -> str:
        return f"/{self.pattern} [{self.scheme}] (priority: {self.priority})"
