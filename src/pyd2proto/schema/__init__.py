"""Schema node model and Pydantic introspection for pyd2proto.

This module provides the closed set of schema node types the compiler
understands, and the adapter that builds them from Pydantic models.
"""

from __future__ import annotations

from .fields import Int64
from .introspect import node_from_annotation, schema_from_model
from .nodes import (
    ArrayNode,
    BigIntNode,
    BooleanNode,
    DateNode,
    EnumNode,
    MapNode,
    NullableNode,
    NumberNode,
    ObjectNode,
    OptionalNode,
    SchemaNode,
    SetNode,
    StringNode,
    TupleNode,
    UnknownNode,
    is_schema_node,
    kind_name,
    strip_modifiers,
    unwrap,
)

__all__ = [
    # Nodes
    "SchemaNode",
    "ObjectNode",
    "StringNode",
    "BooleanNode",
    "DateNode",
    "BigIntNode",
    "NumberNode",
    "EnumNode",
    "ArrayNode",
    "SetNode",
    "TupleNode",
    "MapNode",
    "OptionalNode",
    "NullableNode",
    "UnknownNode",
    # Node helpers
    "is_schema_node",
    "kind_name",
    "strip_modifiers",
    "unwrap",
    # Pydantic adapter
    "schema_from_model",
    "node_from_annotation",
    "Int64",
]
