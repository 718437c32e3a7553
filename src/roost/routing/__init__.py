"""Page file to route tree derivation."""

from roost.routing.finalize import find_route_by_name, prepare_routes
from roost.routing.pattern import build_route_path, encode_path
from roost.routing.segments import SegmentToken, SegmentTokenType, parse_segment
from roost.routing.tree import RouteNode, ScannedFile, build_route_tree, unique_by

__all__ = [
    "RouteNode",
    "ScannedFile",
    "SegmentToken",
    "SegmentTokenType",
    "build_route_path",
    "build_route_tree",
    "encode_path",
    "find_route_by_name",
    "parse_segment",
    "prepare_routes",
    "unique_by",
]
