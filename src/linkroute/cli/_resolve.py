"""Route table import resolution — ``"module:attribute"`` to a Router.

Shared utility used by ``linkroute routes`` and ``linkroute match``.
"""

import argparse
import importlib
import sys

from linkroute.routing.registry import RouteRegistry
from linkroute.routing.router import Router


def resolve_routes(import_string: str) -> Router | RouteRegistry:
    """Resolve an import string to a Router or RouteRegistry.

    Accepts ``"module:attribute"`` format. When the attribute portion is
    omitted, defaults to ``"routes"`` (e.g. ``"myapp.links"`` resolves to
    ``myapp.links.routes``).

    Supports factory functions: if the resolved object is callable and
    not already a route table, it is called.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a Router or RouteRegistry.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "routes"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not isinstance(obj, (Router, RouteRegistry)):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not isinstance(obj, (Router, RouteRegistry)):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a Router or RouteRegistry"
        raise TypeError(msg)

    return obj


def resolve_or_exit(args: argparse.Namespace) -> Router | RouteRegistry:
    """Resolve ``args.target``, printing the error and exiting 1 on failure."""
    try:
        return resolve_routes(args.target)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
