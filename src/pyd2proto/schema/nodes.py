"""Schema node types.

A schema is a tree of frozen node dataclasses, one class per supported kind.
The set of kinds is closed: anything the adapter cannot map becomes an
UnknownNode, which the compiler always rejects.

Example:
    >>> schema = ObjectNode(
    ...     fields={
    ...         "name": StringNode(),
    ...         "tags": ArrayNode(StringNode()),
    ...         "age": OptionalNode(NumberNode(is_integer=True)),
    ...     }
    ... )
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Union


@dataclass(frozen=True)
class ObjectNode:
    """Object with named fields.

    Attributes:
        fields: Field name to node, in declaration order
    """

    fields: Dict[str, SchemaNode] = field(default_factory=dict)


@dataclass(frozen=True)
class StringNode:
    pass


@dataclass(frozen=True)
class BooleanNode:
    pass


@dataclass(frozen=True)
class DateNode:
    pass


@dataclass(frozen=True)
class BigIntNode:
    pass


@dataclass(frozen=True)
class NumberNode:
    is_integer: bool = False


@dataclass(frozen=True)
class EnumNode:
    """Enumeration of literal options, in declaration order."""

    options: Tuple[Union[str, int, float], ...]


@dataclass(frozen=True)
class ArrayNode:
    element: SchemaNode


@dataclass(frozen=True)
class SetNode:
    element: SchemaNode


@dataclass(frozen=True)
class TupleNode:
    elements: Tuple[SchemaNode, ...]


@dataclass(frozen=True)
class MapNode:
    key_type: SchemaNode
    value_type: SchemaNode


@dataclass(frozen=True)
class OptionalNode:
    """Field may be absent."""

    inner: SchemaNode


@dataclass(frozen=True)
class NullableNode:
    """Field may be null. Compiled exactly like OptionalNode."""

    inner: SchemaNode


@dataclass(frozen=True)
class UnknownNode:
    """Any kind with no Protobuf mapping.

    Attributes:
        kind: Human-readable name of the unsupported kind (e.g. "Any")
    """

    kind: str


SchemaNode = Union[
    ObjectNode,
    StringNode,
    BooleanNode,
    DateNode,
    BigIntNode,
    NumberNode,
    EnumNode,
    ArrayNode,
    SetNode,
    TupleNode,
    MapNode,
    OptionalNode,
    NullableNode,
    UnknownNode,
]

NODE_TYPES = (
    ObjectNode,
    StringNode,
    BooleanNode,
    DateNode,
    BigIntNode,
    NumberNode,
    EnumNode,
    ArrayNode,
    SetNode,
    TupleNode,
    MapNode,
    OptionalNode,
    NullableNode,
    UnknownNode,
)


def is_schema_node(value: Any) -> bool:
    """Return True if value is one of the schema node types."""
    return isinstance(value, NODE_TYPES)


def unwrap(node: SchemaNode) -> SchemaNode:
    """Strip one Optional/Nullable layer, returning other nodes unchanged."""
    if isinstance(node, (OptionalNode, NullableNode)):
        return node.inner
    return node


def strip_modifiers(node: SchemaNode) -> SchemaNode:
    """Strip every Optional/Nullable layer."""
    while isinstance(node, (OptionalNode, NullableNode)):
        node = node.inner
    return node


def kind_name(value: Any) -> str:
    """Describe the kind of a node (or foreign value) for error messages.

    Args:
        value: Schema node or any other object

    Returns:
        The UnknownNode's kind, the node class name, or the Python type name
        of a non-node value
    """
    if isinstance(value, UnknownNode):
        return value.kind
    return type(value).__name__
