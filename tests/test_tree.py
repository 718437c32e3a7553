"""Tests for roost.routing.tree — route forest construction."""

from pathlib import Path

import pytest

from roost.errors import SegmentParseError
from roost.routing.tree import (
    RouteNode,
    ScannedFile,
    build_route_tree,
    file_segments,
    read_source,
    unique_by,
)


def _files(*relative_paths: str) -> list[ScannedFile]:
    return [ScannedFile(path, f"/app/pages/{path}") for path in sorted(relative_paths)]


class TestFileSegments:
    def test_strips_extension(self) -> None:
        assert file_segments("users/[id].vue") == ["users", "[id]"]

    def test_strips_only_last_extension(self) -> None:
        assert file_segments("users/[id].data.ts") == ["users", "[id].data"]

    def test_no_extension(self) -> None:
        assert file_segments("about") == ["about"]


class TestBuildRouteTree:
    def test_flat_routes(self) -> None:
        routes = build_route_tree(_files("index.vue", "about.vue"))

        assert [(r.name, r.path) for r in routes] == [("about", "/about"), ("index", "/")]
        assert all(r.children == [] for r in routes)

    def test_file_is_absolute_path(self) -> None:
        routes = build_route_tree(_files("about.vue"))
        assert routes[0].file == "/app/pages/about.vue"

    def test_parent_and_child_merge(self) -> None:
        routes = build_route_tree(_files("parent.vue", "parent/child.vue"))

        assert len(routes) == 1
        parent = routes[0]
        assert (parent.name, parent.path) == ("parent", "/parent")
        assert [(c.name, c.path) for c in parent.children] == [("parent/child", "/child")]

    def test_child_without_parent_file_is_root(self) -> None:
        routes = build_route_tree(_files("users/settings.vue"))

        assert [(r.name, r.path) for r in routes] == [("users/settings", "/users/settings")]

    def test_nested_dynamic(self) -> None:
        routes = build_route_tree(
            _files("users/index.vue", "users/[id].vue", "users/[id]/edit.vue")
        )

        assert [(r.name, r.path) for r in routes] == [
            ("users/id", "/users/:id()"),
            ("users/index", "/users"),
        ]
        assert [(c.name, c.path) for c in routes[0].children] == [("users/id/edit", "/edit")]

    def test_index_child(self) -> None:
        routes = build_route_tree(_files("parent.vue", "parent/index.vue"))

        [child] = routes[0].children
        assert (child.name, child.path) == ("parent/index", "/")

    def test_optional_and_catchall(self) -> None:
        routes = build_route_tree(_files("[[lang]].vue", "docs/[...slug].vue"))

        assert [(r.name, r.path) for r in routes] == [
            ("lang", "/:lang?"),
            ("docs/slug", "/docs/:slug(.*)*"),
        ]

    def test_parse_error_names_file(self) -> None:
        with pytest.raises(SegmentParseError) as exc_info:
            build_route_tree(_files("ok.vue", "bad/[id.vue"))

        assert exc_info.value.file == "bad/[id.vue"
        assert exc_info.value.segment == "[id"
        assert "bad/[id.vue" in str(exc_info.value)


class TestRouteNameOverride:
    def test_override_from_sources(self) -> None:
        sources = {
            "/app/pages/about.vue": "custom",
            "/app/pages/index.vue": "plain",
        }
        routes = build_route_tree(
            _files("about.vue", "index.vue"),
            extract_name=lambda text: "about-us" if text == "custom" else None,
            sources=sources,
        )

        assert [r.name for r in routes] == ["about-us", "index"]

    def test_override_read_from_disk(self, tmp_path: Path) -> None:
        page = tmp_path / "about.vue"
        page.write_text("from-disk\n", encoding="utf-8")

        routes = build_route_tree(
            [ScannedFile("about.vue", str(page))],
            extract_name=lambda text: text.strip(),
        )

        assert routes[0].name == "from-disk"

    def test_override_prevents_merge(self) -> None:
        sources = {"/app/pages/parent.vue": "x", "/app/pages/parent/child.vue": "y"}
        routes = build_route_tree(
            _files("parent.vue", "parent/child.vue"),
            extract_name=lambda text: "renamed" if text == "x" else None,
            sources=sources,
        )

        assert [(r.name, r.path) for r in routes] == [
            ("renamed", "/parent"),
            ("parent/child", "/parent/child"),
        ]


class TestReadSource:
    def test_prefers_sources(self, tmp_path: Path) -> None:
        page = tmp_path / "a.vue"
        page.write_text("disk", encoding="utf-8")
        file = ScannedFile("a.vue", str(page))

        assert read_source(file, {str(page): "memory"}) == "memory"
        assert read_source(file) == "disk"

    def test_invalid_utf8_is_replaced(self, tmp_path: Path) -> None:
        page = tmp_path / "a.vue"
        page.write_bytes(b"caf\xe9")

        assert read_source(ScannedFile("a.vue", str(page))) == "caf\ufffd"


class TestRouteNode:
    def test_walk_depth_first(self) -> None:
        leaf = RouteNode(path="c", file="/c")
        tree = RouteNode(
            path="/a",
            file="/a",
            children=[RouteNode(path="b", file="/b", children=[leaf]), RouteNode(path="d", file="/d")],
        )
        assert [n.path for n in tree.walk()] == ["/a", "b", "c", "d"]

    def test_to_dict_omits_deleted_name(self) -> None:
        node = RouteNode(path="/a", file="/a.vue", name=None)
        assert node.to_dict() == {"path": "/a", "file": "/a.vue", "children": []}


class TestUniqueBy:
    def test_keeps_first(self) -> None:
        items = [("a", 1), ("b", 2), ("a", 3)]
        assert unique_by(items, lambda item: item[0]) == [("a", 1), ("b", 2)]
