"""Route name overrides declared inside page files.

A page can pick its own route name with a top-level configuration call
in its first ``<script>`` block::

    <script setup lang="ts">
    definePageMeta({ name: "profile" })
    </script>

Extraction is best-effort metadata: anything that is not exactly a
top-level call with an object literal whose ``name`` is a plain string
literal yields ``None``.  The script is parsed with the tree-sitter
TypeScript grammar, which also accepts plain JavaScript.  Type-only
wrappers (``as``, ``satisfies``, ``!``) and parentheses are looked
through, as they vanish once the script is compiled to JavaScript.
"""

import codecs
import logging
import re

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from roost.config import DEFAULT_META_FUNCTION

logger = logging.getLogger("roost.pages")

SFC_SCRIPT_RE = re.compile(r"<script\s*[^>]*>([\s\S]*?)</script\s*[^>]*>", re.IGNORECASE)

_TS_LANGUAGE = Language(tree_sitter_typescript.language_typescript())

# Expressions that wrap a value without changing it at runtime
_WRAPPER_TYPES = frozenset(
    {"as_expression", "satisfies_expression", "non_null_expression", "parenthesized_expression"}
)

# JS code point escape, e.g. \u{1F600}
_CODE_POINT_ESCAPE_RE = re.compile(r"\\u\{([0-9a-fA-F]+)\}")


def extract_script_content(source: str) -> str | None:
    """Return the stripped body of the first ``<script>`` block, if any."""
    match = SFC_SCRIPT_RE.search(source)
    if match and match.group(1):
        return match.group(1).strip()
    return None


def extract_route_name(source: str, function: str = DEFAULT_META_FUNCTION) -> str | None:
    """Return the ``name`` passed to *function* in a page's script, if any.

    Never raises: parse failures and unexpected shapes are logged at
    DEBUG level and treated as "no override".

    Args:
        source: Full text of the page file.
        function: Name of the configuration call to look for.
    """
    script = extract_script_content(source)
    if not script:
        return None

    # Cheap check before parsing
    if not re.search(rf"{re.escape(function)}\([\s\S]*?\)", script):
        return None

    try:
        return _route_name_from_script(script, function)
    except Exception as exc:
        logger.debug("Could not read %s() from page script: %s", function, exc)
        return None


def _route_name_from_script(script: str, function: str) -> str | None:
    tree = Parser(_TS_LANGUAGE).parse(script.encode("utf-8"))
    program = tree.root_node
    if program.has_error:
        logger.debug("Page script has syntax errors; skipping %s()", function)
        return None

    call = _find_top_level_call(program, function)
    if call is None:
        return None

    arguments = call.child_by_field_name("arguments")
    if arguments is None:
        return None
    args = _significant(arguments.named_children)
    if not args:
        return None
    obj = _unwrap(args[0])
    if obj.type != "object":
        return None

    value = _find_name_property(obj)
    if value is None:
        return None
    value = _unwrap(value)
    if value.type != "string":
        return None
    return _string_value(value)


def _find_top_level_call(program: Node, function: str) -> Node | None:
    for statement in program.named_children:
        if statement.type != "expression_statement":
            continue
        expressions = _significant(statement.named_children)
        if not expressions or expressions[0].type != "call_expression":
            continue
        call = expressions[0]
        callee = call.child_by_field_name("function")
        if callee is not None and callee.type == "identifier" and _text(callee) == function:
            return call
    return None


def _find_name_property(obj: Node) -> Node | None:
    """Return the value node of the first ``name: ...`` pair."""
    for prop in obj.named_children:
        if prop.type != "pair":
            continue
        key = prop.child_by_field_name("key")
        if key is not None and key.type == "property_identifier" and _text(key) == "name":
            return prop.child_by_field_name("value")
    return None


def _string_value(node: Node) -> str:
    parts: list[str] = []
    for child in node.named_children:
        if child.type == "string_fragment":
            parts.append(_text(child))
        elif child.type == "escape_sequence":
            parts.append(_decode_escape(_text(child)))
    return "".join(parts)


def _unwrap(node: Node) -> Node:
    """Strip type-only wrappers and parentheses around an expression."""
    while node.type in _WRAPPER_TYPES:
        inner = _significant(node.named_children)
        if not inner:
            break
        node = inner[0]
    return node


def _decode_escape(sequence: str) -> str:
    match = _CODE_POINT_ESCAPE_RE.fullmatch(sequence)
    if match:
        return chr(int(match.group(1), 16))
    return codecs.decode(sequence, "unicode_escape")


def _significant(nodes: list[Node]) -> list[Node]:
    return [node for node in nodes if node.type != "comment"]


def _text(node: Node) -> str:
    return (node.text or b"").decode("utf-8")
