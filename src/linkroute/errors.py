"""Linkroute exception hierarchy.

Not matching a URL is a routine outcome and never raises. These types
cover registration mistakes only.
"""


class LinkrouteError(Exception):
    """Base for all linkroute-specific errors."""


class ConfigurationError(LinkrouteError):
    """Raised when a route registration is invalid.

    Typically a negative priority or a definition added to a router
    that serves a different scheme.
    """
