"""Route name and path normalization.

Runs once over the forest produced by
:func:`roost.routing.tree.build_route_tree`:

- ``parent/index`` names lose the ``/index`` suffix, remaining ``/``
  become ``-`` (``users/id/edit`` -> ``users-id-edit``)
- nested paths lose their leading slash (they are relative to the parent)
- a node whose child has an empty path gives up its name to that child
- duplicate names are reported as warnings, never as errors
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from roost.config import DEFAULT_META_FUNCTION
from roost.routing.tree import RouteNode

logger = logging.getLogger("roost.routes")

_INDEX_NAME_RE = re.compile(r"/index$")


@dataclass(slots=True)
class _FinalizeContext:
    """State shared by one finalize pass across all branches."""

    forest: list[RouteNode]
    meta_function: str
    names: set[str] = field(default_factory=set)


def normalize_route_name(name: str) -> str:
    """Turn a ``/``-joined route name into its final dashed form."""
    return _INDEX_NAME_RE.sub("", name).replace("/", "-")


def find_route_by_name(
    name: str,
    routes: Iterable[RouteNode],
    *,
    exclude: RouteNode | None = None,
) -> RouteNode | None:
    """Depth-first search of *routes* for a node called *name*.

    Args:
        name: Route name to look for.
        routes: Root nodes to search, including all descendants.
        exclude: Node to skip (usually the one that collided).
    """
    for root in routes:
        for node in root.walk():
            if node is not exclude and node.name == name:
                return node
    return None


def prepare_routes(
    routes: list[RouteNode],
    *,
    meta_function: str = DEFAULT_META_FUNCTION,
) -> list[RouteNode]:
    """Normalize names and paths of a route forest in place.

    Idempotent: running it on an already prepared forest changes nothing.

    Args:
        routes: Route forest from :func:`~roost.routing.tree.build_route_tree`.
        meta_function: Configuration call suggested in duplicate-name warnings.

    Returns:
        The same *routes* list, for chaining.
    """
    _prepare(routes, None, _FinalizeContext(forest=routes, meta_function=meta_function))
    return routes


def _prepare(
    routes: list[RouteNode],
    parent: RouteNode | None,
    context: _FinalizeContext,
) -> None:
    for route in routes:
        if route.name:
            route.name = normalize_route_name(route.name)
            if route.name in context.names:
                _warn_duplicate(route, context)

        if parent is not None and route.path.startswith("/"):
            route.path = route.path[1:]

        if route.children:
            _prepare(route.children, route, context)

        if any(child.path == "" for child in route.children):
            route.name = None

        if route.name:
            context.names.add(route.name)


def _warn_duplicate(route: RouteNode, context: _FinalizeContext) -> None:
    existing = find_route_by_name(route.name or "", context.forest, exclude=route)
    if existing is not None:
        extra = f"is the same as `{existing.file}`"
    else:
        extra = "is a duplicate"
    logger.warning(
        "Route name generated for `%s` %s. You may wish to set a custom name "
        "using `%s` within the page file.",
        route.file,
        extra,
        context.meta_function,
    )
