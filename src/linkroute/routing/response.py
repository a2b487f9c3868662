"""RouteResponse frozen dataclass."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from linkroute._internal.types import ParamValue, Parameters

_EMPTY: Parameters = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class RouteResponse:
    """Result of matching one route definition against one request.

    ``is_match`` is False for an invalid response, whose ``parameters``
    are always empty. A valid response carries the merged, read-only
    parameter mapping.
    """

    is_match: bool
    parameters: Parameters

    @classmethod
    def invalid(cls) -> RouteResponse:
        return _INVALID

    @classmethod
    def valid(cls, parameters: Mapping[str, ParamValue]) -> RouteResponse:
        return cls(is_match=True, parameters=MappingProxyType(dict(parameters)))

    def __bool__(self) -> bool:
        return self.is_match


_INVALID = RouteResponse(is_match=False, parameters=_EMPTY)
