"""Route tree construction from scanned page files.

Folds a flat, sorted list of page files into a forest of
:class:`RouteNode` objects that mirrors directory nesting::

    pages/
      parent.vue           # /parent            name "parent"
      parent/
        child.vue          #   child            name "parent/child"
        [id].vue           #   :id()            name "parent/id"

A file whose leading segments produce the same name and path as an
existing node is merged into that node's ``children`` instead of
becoming a sibling.  Names are ``/``-joined here and normalised later
by :func:`roost.routing.finalize.prepare_routes`.
"""

import re
from collections.abc import Callable, Hashable, Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any, TypeAlias, TypeVar

from roost.errors import SegmentParseError
from roost.routing.pattern import build_route_path, join_route_path
from roost.routing.segments import parse_segment, segment_name

_INDEX_SUFFIX_RE = re.compile(r"/index$")

# Returns an override name for a page's source text, or None
NameExtractor: TypeAlias = Callable[[str], str | None]


@dataclass(frozen=True, slots=True)
class ScannedFile:
    """A page file found under a layer's pages directory.

    Attributes:
        relative_path: POSIX path relative to the pages directory.
        absolute_path: Fully resolved filesystem path.
    """

    relative_path: str
    absolute_path: str


@dataclass(slots=True)
class RouteNode:
    """One resolvable route and its nested sub-routes.

    Mutable while the tree is built and finalized, then handed to the
    router installer as-is.

    Attributes:
        path: URL path relative to the parent node.  Root nodes carry a
            leading slash, nested nodes do not after finalization.
        file: Absolute path of the page file implementing the route.
        name: Route name, or ``None`` once a child with an empty path
            has taken over this URL.
        children: Nested routes, in insertion order.
    """

    path: str
    file: str
    name: str | None = ""
    children: list["RouteNode"] = field(default_factory=list)

    def walk(self) -> Iterable["RouteNode"]:
        """Yield this node and every descendant, depth-first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form; ``name`` is omitted when deleted."""
        data: dict[str, Any] = {}
        if self.name is not None:
            data["name"] = self.name
        data["path"] = self.path
        data["file"] = self.file
        data["children"] = [child.to_dict() for child in self.children]
        return data


T = TypeVar("T")


def unique_by(items: Iterable[T], key: Callable[[T], Hashable]) -> list[T]:
    """Keep the first item for each distinct ``key(item)``, preserving order."""
    seen: set[Hashable] = set()
    result: list[T] = []
    for item in items:
        value = key(item)
        if value in seen:
            continue
        seen.add(value)
        result.append(item)
    return result


def file_segments(relative_path: str) -> list[str]:
    """Split a relative page path into segments with the extension removed."""
    suffix = PurePosixPath(relative_path).suffix
    stem = relative_path.removesuffix(suffix) if suffix else relative_path
    return stem.split("/")


def read_source(file: ScannedFile, sources: Mapping[str, str] | None = None) -> str:
    """Return a page's text, preferring the in-memory *sources* map."""
    if sources is not None and file.absolute_path in sources:
        return sources[file.absolute_path]
    # Undecodable bytes become U+FFFD; name extraction is best-effort
    return Path(file.absolute_path).read_text(encoding="utf-8", errors="replace")


def build_route_tree(
    files: Iterable[ScannedFile],
    *,
    extract_name: NameExtractor | None = None,
    sources: Mapping[str, str] | None = None,
) -> list[RouteNode]:
    """Build an unfinalized route forest from page files.

    *files* must already be sorted by relative path and free of
    duplicates: a node can only absorb later files once it exists.

    Args:
        files: Scanned page files, in insertion order.
        extract_name: When given, called with each page's source text;
            a non-``None`` result replaces the generated name.
        sources: In-memory file contents keyed by absolute path.

    Raises:
        SegmentParseError: If any segment uses malformed brackets.  The
            error carries the offending file's relative path.
    """
    routes: list[RouteNode] = []

    for file in files:
        route = RouteNode(path="", file=file.absolute_path)
        # Sibling list the route will be appended to
        parent = routes

        for segment in file_segments(file.relative_path):
            try:
                tokens = parse_segment(segment)
            except SegmentParseError as exc:
                raise exc.with_file(file.relative_path) from exc

            name = segment_name(tokens)
            route.name = f"{route.name}/{name}" if route.name else name

            segment_path = build_route_path(tokens)
            path = join_route_path(route.path, _INDEX_SUFFIX_RE.sub("/", segment_path))
            existing = _find_sibling(parent, route.name, path)

            if existing is not None:
                parent = existing.children
                route.path = ""
            elif name == "index" and not route.path:
                route.path = "/"
            elif name != "index":
                route.path += segment_path

        if extract_name is not None:
            override = extract_name(read_source(file, sources))
            if override:
                route.name = override

        parent.append(route)

    return routes


def _find_sibling(siblings: list[RouteNode], name: str | None, path: str) -> RouteNode | None:
    for node in siblings:
        if node.name == name and node.path == path:
            return node
    return None
