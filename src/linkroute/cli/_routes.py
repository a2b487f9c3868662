"""``linkroute routes`` — list registered routes.

Prints every definition in dispatch order with priority, scheme,
pattern and handler name.
"""

import argparse

from linkroute.cli._resolve import resolve_or_exit
from linkroute.routing.registry import RouteRegistry


def run_routes(args: argparse.Namespace) -> None:
    table = resolve_or_exit(args)
    routers = table.routers if isinstance(table, RouteRegistry) else (table,)

    rows: list[tuple[str, str, str, str]] = []
    for router in routers:
        for definition in router.routes:
            if definition.handler is None:
                handler_name = "-"
            else:
                handler_name = getattr(definition.handler, "__name__", str(definition.handler))
            rows.append(
                (str(definition.priority), definition.scheme, "/" + definition.pattern, handler_name)
            )

    if not rows:
        print("No routes registered.")
        return

    headers = ("PRIORITY", "SCHEME", "PATTERN", "HANDLER")
    widths = [max(len(headers[i]), *(len(row[i]) for row in rows)) for i in range(3)]

    fmt = f"{{:<{widths[0]}}}  {{:<{widths[1]}}}  {{:<{widths[2]}}}  {{}}"
    print(fmt.format(*headers))
    sep_len = sum(widths) + 6 + max(len(row[3]) for row in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))
