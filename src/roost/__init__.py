"""Roost — derive a nested route table from a directory of page files.

A build-time step for file-based routing: page file names become URL
patterns, directories become nested routes.

Basic usage::

    import anyio
    from roost import ResolverConfig, resolve_page_routes

    config = ResolverConfig(src_dirs=("app",), extract_route_names=True)
    routes = anyio.run(resolve_page_routes, config)
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "ConfigurationError",
    "ResolverConfig",
    "RoostError",
    "RouteNode",
    "ScannedFile",
    "SegmentParseError",
    "build_route_tree",
    "parse_segment",
    "prepare_routes",
    "resolve_page_routes",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import roost`` fast; tree-sitter is only loaded when the
    resolver is first used.
    """
    if name == "ResolverConfig":
        from roost.config import ResolverConfig

        return ResolverConfig

    if name in ("ConfigurationError", "RoostError", "SegmentParseError"):
        from roost import errors as _errors

        return getattr(_errors, name)

    if name in ("RouteNode", "ScannedFile", "build_route_tree"):
        from roost.routing import tree as _tree

        return getattr(_tree, name)

    if name == "parse_segment":
        from roost.routing.segments import parse_segment

        return parse_segment

    if name == "prepare_routes":
        from roost.routing.finalize import prepare_routes

        return prepare_routes

    if name == "resolve_page_routes":
        from roost.pages.resolve import resolve_page_routes

        return resolve_page_routes

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
