"""Route path patterns from segment tokens.

Emits the parameter syntax understood by the client-side router::

    DYNAMIC  "id"    -> ":id()"
    OPTIONAL "slug"  -> ":slug?"
    CATCHALL "slug"  -> ":slug(.*)*"
    STATIC   "a:b"   -> "a\\:b"
"""

import re
from collections.abc import Iterable
from urllib.parse import quote

from roost.routing.segments import SegmentToken, SegmentTokenType

# Left unescaped by URI encoding, minus the characters paths must escape
_PATH_SAFE = ";,/:@=$!*'()|"

_ENCODED_SLASH_RE = re.compile(r"%252f", re.IGNORECASE)
_JOIN_LEADING_SLASH_RE = re.compile(r"^\.?/")


def encode_path(text: str) -> str:
    """Percent-encode *text* for use in a URL path.

    ``#``, ``?``, ``&`` and ``+`` are always encoded; an already
    encoded slash (``%2F``) is kept as-is.
    """
    return _ENCODED_SLASH_RE.sub("%2F", quote(text, safe=_PATH_SAFE))


def _token_pattern(token: SegmentToken) -> str:
    match token.type:
        case SegmentTokenType.OPTIONAL:
            return f":{token.value}?"
        case SegmentTokenType.DYNAMIC:
            return f":{token.value}()"
        case SegmentTokenType.CATCHALL:
            return f":{token.value}(.*)*"
        case _:
            return encode_path(token.value).replace(":", "\\:")


def build_route_path(tokens: Iterable[SegmentToken]) -> str:
    """Render the tokens of one segment as a ``/``-prefixed path component."""
    return "/" + "".join(_token_pattern(token) for token in tokens)


def join_route_path(base: str, segment_path: str) -> str:
    """Join a segment path onto *base*, always returning a leading slash.

    Empty or bare ``/`` components add nothing::

        join_route_path("", "/users")      -> "/users"
        join_route_path("/users", "/")     -> "/users"
        join_route_path("/users", "/:id()") -> "/users/:id()"
    """
    url = base
    if segment_path and segment_path != "/":
        if url:
            url = url.removesuffix("/") + "/" + _JOIN_LEADING_SLASH_RE.sub("", segment_path)
        else:
            url = segment_path
    if not url.startswith("/"):
        url = "/" + url
    return url
