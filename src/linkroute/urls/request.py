"""Immutable route request.

A decomposed URL: what the router matches against. Path components stay
percent-encoded; route definitions decode the ones they capture.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from urllib.parse import urlsplit

from linkroute._internal.types import QueryValues
from linkroute.config import DEFAULT_CONFIG, RouterConfig
from linkroute.urls.parsing import merge_query, parse_query


def split_path(path: str) -> list[str]:
    """Split a URL path into components, dropping empty ones.

    Examples::

        "/user/42/"  -> ["user", "42"]
        "a//b"       -> ["a", "b"]
        "/"          -> []
    """
    return [part for part in path.split("/") if part]


def _host(netloc: str) -> str:
    """Host portion of *netloc*, case preserved, without userinfo or port."""
    host = netloc.rpartition("@")[2]
    name, sep, port = host.rpartition(":")
    if sep and port.isdigit():
        return name
    return host


def _host_is_path_component(host: str, config: RouterConfig) -> bool:
    if not host:
        return False
    if config.treat_host_as_path_component:
        return True
    # "app://user/42" routes on "user"; "https://example.com/user" does not
    return host != "localhost" and "." not in host

def _split_fragment(fragment: str) -> tuple[str, str, str]:
    """Split a fragment into ``(path, "?", query)`` like ``str.partition``."""
    if "?" not in fragment and "=" in fragment.split("&", 1)[0]:
        return "", "?", fragment
    return fragment.partition("?")


@dataclass(frozen=True, slots=True)
class RouteRequest:
    """An immutable, decomposed URL.

    Build one from a URL string with :meth:`from_url`, or construct it
    directly when the pieces are already known::

        request = RouteRequest(
            url="app://user/42",
            scheme="app",
            path_components=("user", "42"),
        )
    """

    url: str
    scheme: str = ""
    path_components: tuple[str, ...] = ()
    query_params: QueryValues = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze whatever sequence/mapping the caller handed in
        object.__setattr__(self, "path_components", tuple(self.path_components))
        object.__setattr__(self, "query_params", MappingProxyType(dict(self.query_params)))

    @classmethod
    def from_url(cls, url: str, config: RouterConfig | None = None) -> RouteRequest:
        """Decompose *url* into scheme, path components and query parameters.

        The fragment is treated as a trailing ``path?query``: its path
        components are appended and its query parameters merged into
        the URL's own, so ``app://a?x=1#/b?y=2`` yields components
        ``["a", "b"]`` and parameters ``{"x": "1", "y": "2"}``. A fragment
        without ``?`` whose first item holds ``=``, as in ``#tab=bio``,
        is a query only.
        """
        config = config or DEFAULT_CONFIG
        parts = urlsplit(url)

        components: list[str] = []
        host = _host(parts.netloc)
        if _host_is_path_component(host, config):
            components.append(host)
        components.extend(split_path(parts.path))

        query = parse_query(parts.query)

        if parts.fragment:
            fragment_path, _, fragment_query = _split_fragment(parts.fragment)
            components.extend(split_path(fragment_path))
            merge_query(query, parse_query(fragment_query))

        return cls(
            url=url,
            scheme=parts.scheme,
            path_components=tuple(components),
            query_params=query,
        )

    @property
    def path(self) -> str:
        """The path components joined back together, for diagnostics."""
        return "/" + "/".join(self.path_components)

