"""Shared type aliases used across linkroute modules."""

from collections.abc import Callable, Mapping
from typing import TypeAlias

# A single entry of a parameter mapping: a decoded string, the wildcard
# remainder, or None for absent metadata
ParamValue: TypeAlias = str | tuple[str, ...] | None

# Parameters handed to a matched route's handler
Parameters: TypeAlias = Mapping[str, ParamValue]

# Route handler: returns True to accept the match and stop dispatch
RouteHandler: TypeAlias = Callable[[Parameters], bool]

# Query parameters after URL decomposition; repeated keys collect into a tuple
QueryValues: TypeAlias = Mapping[str, str | tuple[str, ...]]
