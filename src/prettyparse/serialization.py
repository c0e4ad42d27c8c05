"""Tree serialization — JSON round-trip for generic and presentation nodes.

Converts nodes to and from JSON-compatible dicts. Useful for handing a
presentation tree to a front end that draws it, and for inspecting parses.

All output is deterministic (sorted keys).

Example:
    from prettyparse import parse, render
    from prettyparse.serialization import to_json, from_json

    tree = render(parse("<p>hi</p>"))
    restored = from_json(to_json(tree))
    assert restored == tree

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any, TypeAlias

from prettyparse.nodes import Attribute, Comment, Element, Fragment, Node, Text
from prettyparse.presentation import PPFragment, PPKind, PPNode

Serializable: TypeAlias = Node | PPNode | PPFragment

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Fragment": Fragment,
    "Element": Element,
    "Attribute": Attribute,
    "Text": Text,
    "Comment": Comment,
    "PPNode": PPNode,
    "PPFragment": PPFragment,
}


def to_dict(node: Serializable) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Args:
        node: Generic tree node, PPNode or PPFragment.

    Returns:
        Dict with ``_type`` and all node fields.

    Raises:
        ValueError: If node is not a known node type.

    """
    type_name = type(node).__name__
    if type_name not in _NODE_TYPES:
        msg = f"Cannot serialize {type_name!r}"
        raise ValueError(msg)

    result: dict[str, Any] = {"_type": type_name}
    for f in fields(node):
        value = getattr(node, f.name)
        if isinstance(value, tuple):
            result[f.name] = [to_dict(item) for item in value]
        elif isinstance(value, (Node, PPNode, PPFragment)):
            result[f.name] = to_dict(value)
        elif isinstance(value, PPKind):
            result[f.name] = value.value
        else:
            result[f.name] = value
    return result


def from_dict(data: dict[str, Any]) -> Serializable:
    """Reconstruct a node from a dict produced by ``to_dict``.

    Raises:
        ValueError: If ``_type`` is missing or unknown, or a kind is invalid.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        raw = data[f.name]
        if isinstance(raw, list):
            kwargs[f.name] = tuple(from_dict(item) for item in raw)
        elif isinstance(raw, dict):
            kwargs[f.name] = from_dict(raw)
        elif f.name == "kind":
            kwargs[f.name] = PPKind(raw)
        else:
            kwargs[f.name] = raw

    return node_cls(**kwargs)


def to_json(node: Serializable, *, indent: int | None = None) -> str:
    """Serialize a node to a JSON string with sorted keys."""
    return json.dumps(to_dict(node), sort_keys=True, indent=indent)


def from_json(data: str) -> Serializable:
    """Deserialize a node from a JSON string produced by ``to_json``."""
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise ValueError(msg)
    return from_dict(raw)


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
