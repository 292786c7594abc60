"""AST serialization for template-driven rendering.

Converts typed AST nodes to/from JSON-compatible dicts in the shape rendering
templates consume: every node is a dict with a ``type`` tag (``heading``,
``paragraph``, ``hr``, ``codeblock``, ``blockquote``, ``list``, ``listitem``,
``text``, ``bold``, ``italic``, ``strike``, ``code``, ``link``, ``image``,
``document``) and its fields. ``ListItem.nested_list`` is emitted as
``nestedList``: top-level items always carry it (null when there is no
nested list), items of a nested list never do.

Locations are left out unless asked for; templates do not need them.

Example:
    from marklet import parse
    from marklet.serialization import to_json, from_json

    doc = parse("# Hello **World**")
    json_str = to_json(doc)
    restored = from_json(json_str)

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from marklet.errors import SerializationError
from marklet.location import SourceLocation
from marklet.nodes import (
    BlockQuote,
    CodeSpan,
    Document,
    Emphasis,
    FencedCode,
    Heading,
    Image,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Text,
    ThematicBreak,
)

# Registry of type tags to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    "document": Document,
    "heading": Heading,
    "paragraph": Paragraph,
    "hr": ThematicBreak,
    "codeblock": FencedCode,
    "blockquote": BlockQuote,
    "list": List,
    "listitem": ListItem,
    "text": Text,
    "bold": Strong,
    "italic": Emphasis,
    "strike": Strikethrough,
    "code": CodeSpan,
    "link": Link,
    "image": Image,
}

_TYPE_TAGS: dict[type[Node], str] = {cls: tag for tag, cls in _NODE_TYPES.items()}

# Python field name -> serialized key
_FIELD_KEYS = {"nested_list": "nestedList"}


def type_tag(node: Node) -> str:
    """Return the serialized ``type`` tag of node."""
    return _TYPE_TAGS[type(node)]


def to_dict(node: Node, *, include_location: bool = False) -> dict[str, Any]:
    """Convert an AST node to a JSON-compatible dict.

    Args:
        node: Any marklet AST node.
        include_location: Also emit each node's ``location``.

    Returns:
        Dict with ``type`` and all node fields.

    """
    result: dict[str, Any] = {"type": type_tag(node)}

    for f in fields(node):
        if f.name == "location":
            if include_location:
                result["location"] = _serialize_location(node.location)
            continue
        value = getattr(node, f.name)
        if f.name == "nested_list" and value is not None:
            result["nestedList"] = _nested_list_dict(value, include_location)
            continue
        result[_FIELD_KEYS.get(f.name, f.name)] = _serialize_value(value, include_location)

    return result


def _nested_list_dict(node: List, include_location: bool) -> dict[str, Any]:
    result = to_dict(node, include_location=include_location)
    for item in result["items"]:
        item.pop("nestedList", None)
    return result


def _serialize_value(value: Any, include_location: bool) -> Any:
    if isinstance(value, Node):
        return to_dict(value, include_location=include_location)
    if isinstance(value, tuple):
        return [_serialize_value(item, include_location) for item in value]
    # Primitives: str, int, bool, None
    return value


def _serialize_location(loc: SourceLocation) -> dict[str, Any]:
    return {f.name: getattr(loc, f.name) for f in fields(loc)}


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed AST node from a dict.

    Nodes without a ``location`` key get ``SourceLocation.unknown()``.

    Raises:
        SerializationError: If ``type`` is missing or unknown.

    """
    tag = data.get("type")
    if tag is None:
        msg = "Missing 'type' field in serialized node"
        raise SerializationError(msg)

    node_cls = _NODE_TYPES.get(tag)
    if node_cls is None:
        msg = f"Unknown node type: {tag!r}"
        raise SerializationError(msg, type_tag=tag)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        key = _FIELD_KEYS.get(f.name, f.name)
        if f.name != "location" and key in data:
            kwargs[f.name] = _deserialize_value(data[key])

    raw_loc = data.get("location")
    try:
        kwargs["location"] = (
            SourceLocation(**raw_loc) if raw_loc is not None else SourceLocation.unknown()
        )
        return node_cls(**kwargs)
    except TypeError as e:
        msg = f"Malformed {tag!r} node: {e}"
        raise SerializationError(msg, type_tag=tag) from e


def _deserialize_value(value: Any) -> Any:
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(
    doc: Document,
    *,
    indent: int | None = None,
    include_location: bool = False,
) -> str:
    """Serialize a Document AST to a JSON string.

    Output is deterministic (sorted keys).

    """
    return json.dumps(
        to_dict(doc, include_location=include_location),
        sort_keys=True,
        indent=indent,
        ensure_ascii=False,
    )


def from_json(data: str) -> Document:
    """Deserialize a Document AST from a JSON string.

    Raises:
        SerializationError: If the JSON doesn't represent a Document.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise SerializationError(msg)
    node = from_dict(raw)
    if not isinstance(node, Document):
        msg = f"Expected document, got {type_tag(node)!r}"
        raise SerializationError(msg, type_tag=type_tag(node))
    return node
