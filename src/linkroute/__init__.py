"""Linkroute — deep-link URL routing.

Match incoming URLs such as ``app://user/42/profile?tab=bio`` against
route patterns like ``/user/:id/profile`` or ``/files/*`` and hand the
extracted parameters to a handler.

Basic usage::

    from linkroute import RouteRegistry

    registry = RouteRegistry()
    app = registry.for_scheme("app")

    @app.route("/user/:id/profile")
    def show_profile(params):
        print(params["id"], params.get("tab"))
        return True

    registry.dispatch("app://user/42/profile?tab=bio")
"""

import importlib

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_CONFIG",
    "PATTERN_KEY",
    "SCHEME_KEY",
    "URL_KEY",
    "WILDCARD_COMPONENTS_KEY",
    "ConfigurationError",
    "LinkrouteError",
    "RouteDefinition",
    "RouteRegistry",
    "RouteRequest",
    "RouteResponse",
    "Router",
    "RouterConfig",
    "normalize_value",
]

# Public name -> defining module, resolved on first attribute access
_LAZY_IMPORTS: dict[str, str] = {
    "DEFAULT_CONFIG": "linkroute.config",
    "PATTERN_KEY": "linkroute._internal.keys",
    "SCHEME_KEY": "linkroute._internal.keys",
    "URL_KEY": "linkroute._internal.keys",
    "WILDCARD_COMPONENTS_KEY": "linkroute._internal.keys",
    "ConfigurationError": "linkroute.errors",
    "LinkrouteError": "linkroute.errors",
    "RouteDefinition": "linkroute.routing.definition",
    "RouteRegistry": "linkroute.routing.registry",
    "RouteRequest": "linkroute.urls.request",
    "RouteResponse": "linkroute.routing.response",
    "Router": "linkroute.routing.router",
    "RouterConfig": "linkroute.config",
    "normalize_value": "linkroute.urls.parsing",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import linkroute`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(importlib.import_module(module_path), name)
