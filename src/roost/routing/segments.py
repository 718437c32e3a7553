"""Segment tokenizer for page file names.

Splits one path segment (the text between ``/`` separators, extension
stripped) into typed tokens::

    "about"         -> [SegmentToken(STATIC, "about")]
    "[id]"          -> [SegmentToken(DYNAMIC, "id")]
    "[[slug]]"      -> [SegmentToken(OPTIONAL, "slug")]
    "[...slug]"     -> [SegmentToken(CATCHALL, "slug")]
    "post-[id]"     -> [SegmentToken(STATIC, "post-"), SegmentToken(DYNAMIC, "id")]

Malformed brackets raise :class:`~roost.errors.SegmentParseError`.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto

from roost.errors import SegmentParseError

# Characters kept inside a bracketed parameter name; others are dropped
_PARAM_CHAR_RE = re.compile(r"[A-Za-z0-9_.]")

_CATCHALL_PREFIX = "..."


class SegmentTokenType(Enum):
    STATIC = auto()
    DYNAMIC = auto()
    OPTIONAL = auto()
    CATCHALL = auto()


class _State(Enum):
    INITIAL = auto()
    STATIC = auto()
    DYNAMIC = auto()
    OPTIONAL = auto()
    CATCHALL = auto()


_TOKEN_TYPE_FOR_STATE = {
    _State.STATIC: SegmentTokenType.STATIC,
    _State.DYNAMIC: SegmentTokenType.DYNAMIC,
    _State.OPTIONAL: SegmentTokenType.OPTIONAL,
    _State.CATCHALL: SegmentTokenType.CATCHALL,
}


@dataclass(frozen=True, slots=True)
class SegmentToken:
    """One typed piece of a path segment."""

    type: SegmentTokenType
    value: str

    @property
    def is_param(self) -> bool:
        return self.type is not SegmentTokenType.STATIC


def parse_segment(segment: str) -> list[SegmentToken]:
    """Tokenize a single path segment.

    Raises:
        SegmentParseError: On an empty parameter (``[]``) or a single
            bracket left open at the end of the segment (``[id``).
    """
    state = _State.INITIAL
    buffer = ""
    tokens: list[SegmentToken] = []

    def flush() -> None:
        nonlocal buffer
        if not buffer:
            return
        tokens.append(SegmentToken(_TOKEN_TYPE_FOR_STATE[state], buffer))
        buffer = ""

    i = 0
    while i < len(segment):
        char = segment[i]

        match state:
            case _State.INITIAL:
                buffer = ""
                if char == "[":
                    state = _State.DYNAMIC
                else:
                    # Re-read this character as static text
                    state = _State.STATIC
                    continue

            case _State.STATIC:
                if char == "[":
                    flush()
                    state = _State.DYNAMIC
                else:
                    buffer += char

            case _State.DYNAMIC | _State.OPTIONAL | _State.CATCHALL:
                if buffer == _CATCHALL_PREFIX:
                    buffer = ""
                    state = _State.CATCHALL
                if char == "[" and state is _State.DYNAMIC:
                    state = _State.OPTIONAL

                # Optional params close on the second of a "]]" pair
                closes = char == "]" and (
                    state is not _State.OPTIONAL or segment[i - 1] == "]"
                )
                if closes:
                    if not buffer:
                        raise SegmentParseError("Empty param", segment)
                    flush()
                    state = _State.INITIAL
                elif _PARAM_CHAR_RE.match(char):
                    buffer += char

        i += 1

    if state is _State.DYNAMIC:
        raise SegmentParseError(f'Unfinished param "{buffer}"', segment)

    if state is not _State.INITIAL:
        flush()

    return tokens


def segment_name(tokens: list[SegmentToken]) -> str:
    """Join token values into the name fragment for a segment."""
    return "".join(token.value for token in tokens)
