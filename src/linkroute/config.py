"""Router configuration.

RouterConfig is a frozen dataclass passed explicitly to matching and
dispatch. There is no process-wide mutable flag.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(decode_plus_symbols=False)
    """

    # Values: "a+b" becomes "a b" in route variables and query parameters
    decode_plus_symbols: bool = True

    # URL decomposition: always use the host as the first path component,
    # even for "localhost" or dotted hosts
    treat_host_as_path_component: bool = False

    # Dispatch: a scheme router retries the global router when none of its
    # own definitions accepted the URL
    fallback_to_global: bool = False


DEFAULT_CONFIG = RouterConfig()
