"""Page-data routes and their import manifest.

Files such as ``users/[id].data.ts`` or ``users/load.ts`` live next to
pages but serve data, not markup.  :func:`split_data_routes` pulls them
out of the page forest and :func:`render_data_manifest` renders a module
mapping each route name to a lazy import::

    export const manifest = {
      "users-id.data": () => import("/app/pages/users/[id].data.ts"),
    }

Rendering requires kida (``pip install roost[manifest]``).
"""

import json
import logging
import re
from dataclasses import dataclass
from pathlib import PurePath

from roost.config import ResolverConfig
from roost.errors import ManifestNotInstalledError
from roost.pages.resolve import resolve_page_routes
from roost.routing.tree import RouteNode

logger = logging.getLogger("roost.pages")

DATA_ROUTE_RE = re.compile(r"\.data|action|load|build\.ts$")

_MANIFEST_TEMPLATE = (
    "export const manifest = {\n"
    "{% for entry in entries %}"
    "  {{ entry.key }}: () => import({{ entry.module }}),\n"
    "{% end %}"
    "}\n"
)


@dataclass(frozen=True, slots=True)
class _ManifestEntry:
    key: str
    module: str


def split_data_routes(
    routes: list[RouteNode],
    pattern: re.Pattern[str] = DATA_ROUTE_RE,
) -> list[RouteNode]:
    """Remove data routes from *routes* in place and return them.

    A node matches when its file *name* matches *pattern*; it is removed
    together with its subtree.  Non-matching nodes are searched
    recursively.
    """
    found: list[RouteNode] = []
    kept: list[RouteNode] = []
    for route in routes:
        if pattern.search(PurePath(route.file).name):
            found.append(route)
        else:
            found.extend(split_data_routes(route.children, pattern))
            kept.append(route)
    routes[:] = kept
    return found


def render_data_manifest(routes: list[RouteNode]) -> str:
    """Render the lazy-import manifest for *routes*.

    Unnamed routes are skipped.

    Raises:
        ManifestNotInstalledError: If kida is not installed.
    """
    try:
        from kida import Environment
    except ImportError:
        msg = (
            "roost manifests require 'kida' for rendering. "
            "Install with: pip install roost[manifest]"
        )
        raise ManifestNotInstalledError(msg) from None

    entries = [
        _ManifestEntry(key=json.dumps(route.name), module=json.dumps(route.file))
        for route in routes
        if route.name
    ]
    env = Environment(autoescape=False)
    return env.from_string(_MANIFEST_TEMPLATE).render({"entries": entries})


async def create_data_manifest(config: ResolverConfig) -> str:
    """Resolve all page routes and render the manifest of data routes."""
    routes = await resolve_page_routes(config)
    data_routes = split_data_routes(routes)
    logger.info("Compiled %d page data routes.", len(data_routes))
    return render_data_manifest(data_routes)
