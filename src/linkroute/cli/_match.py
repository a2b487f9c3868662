"""``linkroute match`` — dry-run a URL against a route table.

Finds the first definition whose pattern matches and prints the
parameters its handler would receive. Handlers are not called.
"""

import argparse
import json
import sys

from linkroute.cli._resolve import resolve_or_exit
from linkroute.routing.registry import RouteRegistry
from linkroute.urls.request import RouteRequest


def run_match(args: argparse.Namespace) -> None:
    table = resolve_or_exit(args)

    request = RouteRequest.from_url(args.url, table.config)
    if isinstance(table, RouteRegistry):
        routers = [table.router_for(request)]
        if table.config.fallback_to_global and routers[0] is not table.global_routes:
            routers.append(table.global_routes)
    else:
        routers = [table]

    for router in routers:
        found = router.first_match(request)
        if found is None:
            continue
        definition, response = found
        print(f"Matched {definition}")
        print(json.dumps(dict(response.parameters), indent=2, sort_keys=True))
        return

    print(f"No route matches {args.url!r}", file=sys.stderr)
    raise SystemExit(1)
