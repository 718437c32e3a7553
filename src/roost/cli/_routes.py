"""``roost routes`` — print the resolved route tree.

Resolves every layer's pages directory and prints one row per route,
indented by nesting depth, or the whole forest as JSON.
"""

import argparse
import json
import sys

import anyio

from roost.cli._config import config_from_args
from roost.errors import RoostError
from roost.pages.resolve import resolve_page_routes
from roost.routing.tree import RouteNode


def run_routes(args: argparse.Namespace) -> None:
    """Resolve routes for ``args.src_dirs`` and print them."""
    config = config_from_args(args)
    try:
        routes = anyio.run(resolve_page_routes, config)
    except RoostError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.json:
        print(json.dumps([route.to_dict() for route in routes], indent=2))
        return

    if not routes:
        print("No routes found.")
        return

    print_route_table(routes)


def print_route_table(routes: list[RouteNode]) -> None:
    # Build rows: (name, path, file), nested rows indented
    rows: list[tuple[str, str, str]] = []
    _collect_rows(routes, 0, rows)

    max_name = max(max(len(r[0]) for r in rows), 4)  # "NAME" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_name}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("NAME", "PATH", "FILE"))
    sep_len = max_name + max_path + 4 + max((len(r[2]) for r in rows), default=0)
    print("-" * min(sep_len, 80))
    for name, path, file in rows:
        print(fmt.format(name, path, file))


def _collect_rows(
    routes: list[RouteNode],
    depth: int,
    rows: list[tuple[str, str, str]],
) -> None:
    indent = "  " * depth
    for route in routes:
        name = route.name if route.name is not None else "-"
        rows.append((indent + name, indent + (route.path or '""'), route.file))
        _collect_rows(route.children, depth + 1, rows)
